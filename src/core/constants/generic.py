"""Generic constants shared across the adaptor list build.

These constants are independent of any adaptor type.
"""

# Category assigned to records synthesized from the chain metadata table
CHAIN_CATEGORY = "Chain"

# Chain logo path under the icons base URL
CHAIN_LOGO_TEMPLATE = "{base_icons_url}/chains/rsz_{logo_key}.jpg"

# Logo key aliases (lower-cased chain key -> logo file key)
LOGO_KEY_ALIASES = {
    "bsc": "binance",
}
