"""Protocol adaptor list builder.

Joins the protocol catalog (or the chain catalog, for chain adapters) with
the loaded adapter modules and their configuration, producing one enriched
ProtocolAdaptor per resolved protocol.
"""

import logging
from typing import Callable, Iterable, List, Mapping, Optional, Tuple

from config.settings import get_settings
from src.adaptors.catalog import (
    ProtocolIndex,
    build_chain_index,
    build_chain_records,
    build_protocol_index,
)
from src.adaptors.chains import (
    get_chains_from_base_adapter,
    get_methodology_data,
    get_protocols_data,
)
from src.adaptors.display import get_display_category, get_display_name
from src.adaptors.exceptions import MissingProtocolsDataError
from src.adaptors.merge import MergeLayer, merge_layers
from src.adaptors.overrides import CHAIN_OVERRIDES, get_overrides
from src.chains.normalize import CHAIN_COINGECKO_IDS
from src.core.models import (
    AdapterConfig,
    AdaptorsConfig,
    BaseAdapter,
    BreakdownAdapter,
    ChainMetadata,
    ImportedAdapter,
    ImportsMap,
    Overrides,
    ProtocolAdaptor,
    ProtocolRecord,
    ProtocolType,
)

logger = logging.getLogger(__name__)


class AdaptorListBuilder:
    """Builds ProtocolAdaptor lists from adapter modules and their config.

    The indices are read-only and shared; ``build`` keeps no state between
    calls, so one builder can serve any number of callers.
    """

    def __init__(
        self,
        protocol_index: ProtocolIndex,
        chain_index: ProtocolIndex,
        overrides: Callable[[Optional[str]], Overrides] = get_overrides,
        chain_overrides: Overrides = CHAIN_OVERRIDES,
    ):
        """Initialize the builder.

        Args:
            protocol_index: Protocol id -> catalog record
            chain_index: Chain id -> synthesized chain record
            overrides: Returns the override table for an adaptor type
            chain_overrides: Override table for chain adapters
        """
        self.protocol_index = protocol_index
        self.chain_index = chain_index
        self._overrides = overrides
        self._chain_overrides = chain_overrides

    @classmethod
    def from_catalog(
        cls,
        protocols: Iterable[ProtocolRecord],
        chain_table: Mapping[str, ChainMetadata] = CHAIN_COINGECKO_IDS,
        base_icons_url: Optional[str] = None,
    ) -> "AdaptorListBuilder":
        """Create a builder, indexing the catalog and the chain table once."""
        if base_icons_url is None:
            base_icons_url = get_settings().base_icons_url
        return cls(
            protocol_index=build_protocol_index(protocols),
            chain_index=build_chain_index(build_chain_records(chain_table, base_icons_url)),
        )

    def build(
        self,
        imports: ImportsMap,
        config: AdaptorsConfig,
        adaptor_type: Optional[str] = None,
    ) -> List[ProtocolAdaptor]:
        """Build the adaptor list.

        Records follow the order of ``imports``, then the order of each
        adapter's resolved protocols.

        Args:
            imports: Adapter key -> imported adapter module
            config: Adapter key -> adapter config
            adaptor_type: Selects the override table (dexs, fees, ...)

        Returns:
            Flat list of ProtocolAdaptor records

        Raises:
            MissingProtocolsDataError: A breakdown adapter has no protocolsData
        """
        adaptors: List[ProtocolAdaptor] = []
        for adapter_key, imported in imports.items():
            adaptors.extend(self._build_adapter(adapter_key, imported, config, adaptor_type))
        logger.info(f"Built {len(adaptors)} adaptors from {len(imports)} modules (type={adaptor_type})")
        return adaptors

    def _select_sources(
        self,
        imported: ImportedAdapter,
        adaptor_type: Optional[str],
    ) -> Tuple[ProtocolIndex, Overrides]:
        if imported.protocol_type == ProtocolType.CHAIN:
            return self.chain_index, self._chain_overrides
        return self.protocol_index, self._overrides(adaptor_type)

    def _resolve_candidates(
        self,
        adapter_key: str,
        imported: ImportedAdapter,
        adapter_config: AdapterConfig,
        index: ProtocolIndex,
    ) -> List[ProtocolRecord]:
        module = imported.module
        if isinstance(module, BreakdownAdapter):
            if adapter_config.protocols_data is None:
                raise MissingProtocolsDataError(adapter_key)
            candidates = []
            for sub_config in adapter_config.protocols_data.values():
                record = index.get(sub_config.id) if sub_config.id is not None else None
                if record is None:
                    logger.error(f"Protocol not found with id {sub_config.id} and key {adapter_key}")
                    continue
                candidates.append(record)
            return candidates

        record = index.get(adapter_config.id)
        return [record] if record is not None else []

    def _build_adapter(
        self,
        adapter_key: str,
        imported: ImportedAdapter,
        config: AdaptorsConfig,
        adaptor_type: Optional[str],
    ) -> List[ProtocolAdaptor]:
        index, overrides = self._select_sources(imported, adaptor_type)

        adapter_config = config.get(adapter_key)
        if adapter_config is None or not adapter_config.id or imported.module is None:
            return []

        candidates = self._resolve_candidates(adapter_key, imported, adapter_config, index)
        if not candidates:
            logger.error(f"Missing info for {adapter_key} on {adaptor_type}")
            return []

        return [
            self._build_record(adapter_key, imported, adapter_config, candidate, overrides)
            for candidate in candidates
        ]

    def _build_record(
        self,
        adapter_key: str,
        imported: ImportedAdapter,
        adapter_config: AdapterConfig,
        candidate: ProtocolRecord,
        overrides: Overrides,
    ) -> ProtocolAdaptor:
        module = imported.module
        config_obj = adapter_config
        base_adapter: BaseAdapter = {}

        if isinstance(module, BreakdownAdapter):
            match = next(
                (
                    (version_key, sub_config)
                    for version_key, sub_config in (adapter_config.protocols_data or {}).items()
                    if sub_config.id == candidate.id
                ),
                None,
            )
            if match is not None:
                version_key, config_obj = match
                base_adapter = module.breakdown.get(version_key, {})
        else:
            base_adapter = module.adapter

        override = overrides.get(adapter_key)
        display_name = get_display_name(candidate.name, module)
        display_category = get_display_category(module, override)
        if display_category is None:
            display_category = candidate.category
        child_categories = [
            version_override.category
            for version_override in ((override.protocols_data or {}) if override else {}).values()
            if version_override.category is not None
        ]

        computed = {
            "id": adapter_config.id,
            "module": adapter_key,
            "config": adapter_config.to_dict(),
            "category": display_category,
            "chains": get_chains_from_base_adapter(base_adapter),
            "disabled": config_obj.disabled if config_obj.disabled is not None else False,
            "displayName": config_obj.display_name if config_obj.display_name is not None else display_name,
            "protocolsData": get_protocols_data(adapter_key, module, candidate.category, overrides),
            "protocolType": module.protocol_type,
            "methodologyURL": imported.code_path,
            "methodology": get_methodology_data(
                display_name,
                adapter_key,
                module,
                display_category or "",
                child_categories,
            ),
        }

        layers = {
            MergeLayer.CATALOG: candidate.to_dict(),
            MergeLayer.CONFIG: adapter_config.to_dict(),
            MergeLayer.SUB_CONFIG: config_obj.to_dict(),
            MergeLayer.COMPUTED: computed,
            MergeLayer.OVERRIDE: override.to_dict() if override is not None else None,
        }
        if override is not None:
            logger.debug(f"Applying override for {adapter_key}: {sorted(layers[MergeLayer.OVERRIDE])}")
        return ProtocolAdaptor.from_dict(merge_layers(layers))


def generate_protocol_adaptors_list(
    imports: ImportsMap,
    config: AdaptorsConfig,
    adaptor_type: Optional[str] = None,
    *,
    protocols: Iterable[ProtocolRecord] = (),
) -> List[ProtocolAdaptor]:
    """One-shot build: index ``protocols`` and build the list.

    Prefer keeping an AdaptorListBuilder around when building repeatedly.
    """
    return AdaptorListBuilder.from_catalog(protocols).build(imports, config, adaptor_type)
