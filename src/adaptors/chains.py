"""Per-adapter derivations: chains, disabled flag, versions and methodology."""

import logging
from typing import Any, Dict, List, Optional, Union

from src.adaptors.methodology import get_methodology_by_type
from src.core.models import (
    DISABLED_ADAPTER_KEY,
    Adapter,
    BaseAdapter,
    BreakdownAdapter,
    Overrides,
    SingleAdapter,
)

logger = logging.getLogger(__name__)

Methodology = Union[str, Dict[str, str]]


def get_chains_from_base_adapter(base_adapter: BaseAdapter) -> List[str]:
    """Chains an adapter reports on, in declaration order."""
    return [chain for chain in base_adapter if chain != DISABLED_ADAPTER_KEY]


def is_disabled(adapter: Adapter) -> bool:
    """True when the adapter (every version, for breakdowns) is disabled."""
    if isinstance(adapter, SingleAdapter):
        return DISABLED_ADAPTER_KEY in adapter.adapter
    return all(DISABLED_ADAPTER_KEY in base for base in adapter.breakdown.values())


def _first_methodology(base_adapter: BaseAdapter) -> Optional[Any]:
    for chain, chain_adapter in base_adapter.items():
        if chain == DISABLED_ADAPTER_KEY:
            continue
        return chain_adapter.meta.methodology
    return None


def _category_methodology(category: str, child_categories: List[str]) -> Optional[Dict[str, str]]:
    methodology = get_methodology_by_type(category)
    if methodology is not None:
        return methodology
    for child_category in child_categories:
        methodology = get_methodology_by_type(child_category)
        if methodology is not None:
            return methodology
    return None


def _resolve_methodology(
    base_adapter: BaseAdapter,
    category: str,
    child_categories: List[str],
) -> Optional[Methodology]:
    declared = _first_methodology(base_adapter)
    if isinstance(declared, str):
        return declared
    default = _category_methodology(category, child_categories)
    if declared:
        return {**(default or {}), **declared}
    return default


def get_methodology_data(
    display_name: str,
    adapter_key: str,
    adapter: Adapter,
    category: str,
    child_categories: List[str],
) -> Optional[Methodology]:
    """Methodology for an adaptor record.

    The adapter's own methodology (first chain, first version) wins; a
    field mapping is layered over the category default.

    Args:
        display_name: Display name of the record
        adapter_key: Adapter module key
        adapter: The adapter module
        category: Display category of the record
        child_categories: Categories of the adapter's versions

    Returns:
        Methodology text, field mapping, or None when nothing applies
    """
    if isinstance(adapter, BreakdownAdapter):
        bases = list(adapter.breakdown.values())
        base_adapter = bases[0] if bases else {}
    else:
        base_adapter = adapter.adapter

    methodology = _resolve_methodology(base_adapter, category, child_categories)
    if methodology is None:
        logger.debug(f"No methodology for {display_name} ({adapter_key}) in category {category!r}")
    return methodology


def get_protocols_data(
    adapter_key: str,
    adapter: Adapter,
    category: Optional[str],
    overrides: Overrides,
) -> Optional[Dict[str, Dict[str, Any]]]:
    """Per-version data for breakdown adapters; None for single adapters."""
    if not isinstance(adapter, BreakdownAdapter):
        return None

    override = overrides.get(adapter_key)
    version_overrides = (override.protocols_data or {}) if override is not None else {}

    protocols_data: Dict[str, Dict[str, Any]] = {}
    for version_key, base_adapter in adapter.breakdown.items():
        version_override = version_overrides.get(version_key)
        version_category = (
            version_override.category
            if version_override is not None and version_override.category
            else category
        )
        entry: Dict[str, Any] = {
            "chains": get_chains_from_base_adapter(base_adapter),
            "disabled": is_disabled(SingleAdapter(adapter=base_adapter)),
            "methodology": _resolve_methodology(base_adapter, version_category or "", []),
        }
        if version_override is not None:
            entry.update(version_override.to_dict())
        protocols_data[version_key] = entry
    return protocols_data
