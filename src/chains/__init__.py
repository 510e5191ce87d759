"""Chain metadata and display-name normalization."""

from src.chains.normalize import (
    CHAIN_COINGECKO_IDS,
    get_chain_display_name,
)

__all__ = [
    "CHAIN_COINGECKO_IDS",
    "get_chain_display_name",
]
