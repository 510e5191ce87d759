"""Display name and display category derivation."""

from typing import Optional

from src.chains.normalize import get_chain_display_name
from src.core.models import Adapter, BreakdownAdapter, OverrideEntry, ProtocolType


def get_display_name(name: str, adapter: Adapter) -> str:
    """Name shown for a protocol adaptor.

    Any AAVE market collapses to "AAVE". A breakdown adapter with a single
    version gets the version appended ("Foo - V2"). Chain adapters use the
    chain's canonical display form.
    """
    first_token = name.split(" ")[0]
    if "AAVE" in first_token:
        return "AAVE"
    if isinstance(adapter, BreakdownAdapter) and adapter.single_version is not None:
        version = adapter.single_version
        return f"{name} - {version[:1].upper()}{version[1:]}"
    if adapter.protocol_type == ProtocolType.CHAIN:
        return get_chain_display_name(name.lower(), True)
    return name


def get_display_category(adapter: Adapter, override: Optional[OverrideEntry]) -> Optional[str]:
    """Category from the override table, or None when it has none."""
    if override is None:
        return None
    if isinstance(adapter, BreakdownAdapter) and adapter.single_version is not None:
        version_override = (override.protocols_data or {}).get(adapter.single_version)
        return version_override.category if version_override is not None else None
    return override.category
