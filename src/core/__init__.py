"""Core module - models and constants."""

from .models import (
    ProtocolRecord,
    ChainMetadata,
    ProtocolType,
    SingleAdapter,
    BreakdownAdapter,
    ImportedAdapter,
    AdapterConfig,
    OverrideEntry,
    ProtocolAdaptor,
)
from .constants import CHAIN_CATEGORY, CHAIN_LOGO_TEMPLATE

__all__ = [
    "ProtocolRecord",
    "ChainMetadata",
    "ProtocolType",
    "SingleAdapter",
    "BreakdownAdapter",
    "ImportedAdapter",
    "AdapterConfig",
    "OverrideEntry",
    "ProtocolAdaptor",
    "CHAIN_CATEGORY",
    "CHAIN_LOGO_TEMPLATE",
]
