"""Chain metadata table and chain display-name normalizer."""

import re
from types import MappingProxyType
from typing import Mapping

from src.core.models import ChainMetadata

# Chain name -> market-data identifiers
# Entries with neither cmc_id nor chain_id are not indexed as chain records
CHAIN_COINGECKO_IDS: Mapping[str, ChainMetadata] = MappingProxyType({
    "Ethereum": ChainMetadata(gecko_id="ethereum", symbol="ETH", cmc_id="1027", chain_id=1),
    "BSC": ChainMetadata(gecko_id="binancecoin", symbol="BNB", cmc_id="1839", chain_id=56),
    "Polygon": ChainMetadata(gecko_id="matic-network", symbol="MATIC", cmc_id="3890", chain_id=137),
    "Avalanche": ChainMetadata(gecko_id="avalanche-2", symbol="AVAX", cmc_id="5805", chain_id=43114),
    "Arbitrum": ChainMetadata(gecko_id="arbitrum", symbol="ARB", cmc_id="11841", chain_id=42161),
    "Optimism": ChainMetadata(gecko_id="optimism", symbol="OP", cmc_id="11840", chain_id=10),
    "Fantom": ChainMetadata(gecko_id="fantom", symbol="FTM", cmc_id="3513", chain_id=250),
    "Cronos": ChainMetadata(gecko_id="crypto-com-chain", symbol="CRO", cmc_id="3635", chain_id=25),
    "xDai": ChainMetadata(gecko_id="xdai", symbol="XDAI", cmc_id="8635", chain_id=100),
    "Base": ChainMetadata(gecko_id=None, chain_id=8453),
    "Solana": ChainMetadata(gecko_id="solana", symbol="SOL", cmc_id="5426"),
    "Tron": ChainMetadata(gecko_id="tron", symbol="TRX", cmc_id="1958"),
    "Osmosis": ChainMetadata(gecko_id="osmosis", symbol="OSMO", cmc_id="12220"),
    "Terra Classic": ChainMetadata(gecko_id="terra-luna", symbol="LUNC"),
    "Hydra": ChainMetadata(gecko_id="hydra", symbol="HYDRA"),
})

# Normalized chain -> display name
CHAIN_DISPLAY_NAMES = {
    "ethereum": "Ethereum",
    "bsc": "Binance",
    "binance": "Binance",
    "avax": "Avalanche",
    "avalanche": "Avalanche",
    "polygon": "Polygon",
    "polygon_zkevm": "Polygon zkEVM",
    "arbitrum": "Arbitrum",
    "optimism": "Optimism",
    "fantom": "Fantom",
    "cronos": "Cronos",
    "xdai": "xDai",
    "era": "zkSync Era",
    "okexchain": "OKExChain",
    "terra": "Terra",
    "tron": "Tron",
}

# Renamed chains, used when the short/new form is requested
NEW_CHAIN_NAMES = {
    "bsc": "BSC",
    "binance": "BSC",
    "xdai": "Gnosis",
    "terra": "Terra Classic",
    "okexchain": "OKTChain",
}


def get_chain_display_name(normalized_chain: str, use_new_chain_names: bool) -> str:
    """Canonical display form for a lower-cased chain name.

    Args:
        normalized_chain: Lower-cased chain name (e.g. "bsc", "polygon_zkevm")
        use_new_chain_names: Prefer the renamed/short form when one exists

    Returns:
        Display name; unknown chains are title-cased word by word
    """
    if use_new_chain_names and normalized_chain in NEW_CHAIN_NAMES:
        return NEW_CHAIN_NAMES[normalized_chain]
    if normalized_chain in CHAIN_DISPLAY_NAMES:
        return CHAIN_DISPLAY_NAMES[normalized_chain]
    words = [w for w in re.split(r"[_\s]+", normalized_chain) if w]
    return " ".join(w[0].upper() + w[1:] for w in words)
