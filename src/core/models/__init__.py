"""Core data models for Protocol Adaptors."""

from .protocol import ProtocolRecord, ChainMetadata
from .adapter import (
    DISABLED_ADAPTER_KEY,
    Adapter,
    AdapterMeta,
    BaseAdapter,
    BreakdownAdapter,
    ChainAdapter,
    ImportedAdapter,
    ImportsMap,
    ProtocolType,
    SingleAdapter,
)
from .config import AdapterConfig, AdaptorsConfig, OverrideEntry, Overrides
from .adaptor import ProtocolAdaptor

__all__ = [
    "ProtocolRecord",
    "ChainMetadata",
    "DISABLED_ADAPTER_KEY",
    "Adapter",
    "AdapterMeta",
    "BaseAdapter",
    "BreakdownAdapter",
    "ChainAdapter",
    "ImportedAdapter",
    "ImportsMap",
    "ProtocolType",
    "SingleAdapter",
    "AdapterConfig",
    "AdaptorsConfig",
    "OverrideEntry",
    "Overrides",
    "ProtocolAdaptor",
]
