"""Manually curated corrections applied on top of computed adaptor records.

Entries are keyed by adapter key. Whatever an entry sets replaces the
computed value in the final record.
"""

from typing import Dict, Optional

from src.core.models import OverrideEntry, Overrides

# Corrections shared by every adaptor type
_COMMON: Dict[str, OverrideEntry] = {
    "gmx": OverrideEntry(
        protocols_data={
            "swap": OverrideEntry(category="Dexes", display_name="GMX - SWAP"),
            "derivatives": OverrideEntry(category="Derivatives", display_name="GMX - Derivatives"),
        },
    ),
    "pancakeswap": OverrideEntry(
        protocols_data={
            "v1": OverrideEntry(category="Dexes"),
            "v2": OverrideEntry(category="Dexes"),
            "stableswap": OverrideEntry(category="Dexes", display_name="PancakeSwap StableSwap"),
        },
    ),
    "lifinity": OverrideEntry(category="Dexes"),
}

_BY_TYPE: Dict[str, Dict[str, OverrideEntry]] = {
    "dexs": {
        "woofi": OverrideEntry(category="Dexes", display_name="WOOFi Swap"),
        "dodo": OverrideEntry(category="Dexes"),
    },
    "fees": {
        "lido": OverrideEntry(category="Liquid Staking"),
        "makerdao": OverrideEntry(category="CDP", display_name="MakerDAO"),
        "uniswap": OverrideEntry(
            protocols_data={
                "v1": OverrideEntry(category="Dexes"),
                "v2": OverrideEntry(category="Dexes"),
                "v3": OverrideEntry(category="Dexes"),
            },
        ),
    },
    "options": {
        "lyra": OverrideEntry(category="Options"),
        "premia": OverrideEntry(category="Options"),
    },
    "derivatives": {
        "dydx": OverrideEntry(category="Derivatives", display_name="dYdX"),
    },
    "incentives": {},
    "aggregators": {
        "1inch": OverrideEntry(category="DEX Aggregator", display_name="1inch Network"),
    },
}

# Corrections for adapters with ProtocolType.CHAIN
CHAIN_OVERRIDES: Overrides = {
    "ethereum": OverrideEntry(category="Chain", extra={"url": "https://ethereum.org"}),
    "bsc": OverrideEntry(category="Chain", display_name="BSC"),
    "xdai": OverrideEntry(category="Chain", display_name="Gnosis"),
}


def get_overrides(adaptor_type: Optional[str] = None) -> Overrides:
    """Override table for an adaptor type.

    Unknown or missing types get the common corrections only.
    """
    table: Overrides = dict(_COMMON)
    if adaptor_type is not None:
        table.update(_BY_TYPE.get(adaptor_type, {}))
    return table
