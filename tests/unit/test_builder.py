"""Unit tests for AdaptorListBuilder."""

import logging

import pytest

from conftest import ICONS_URL, chain_adapter
from src.adaptors.builder import AdaptorListBuilder, generate_protocol_adaptors_list
from src.adaptors.catalog import build_protocol_index
from src.adaptors.exceptions import MissingProtocolsDataError
from src.adaptors.methodology import METHODOLOGY_BY_CATEGORY
from src.core.models import (
    AdapterConfig,
    BreakdownAdapter,
    ImportedAdapter,
    OverrideEntry,
    ProtocolRecord,
    ProtocolType,
    SingleAdapter,
)


class TestSingleAdapter:
    """Tests for single-version adapters."""

    def test_one_record_with_config_id(self, builder, single_module, imported):
        adaptors = builder.build(
            {"uniswap": imported(single_module, "dexs/uniswap.py")},
            {"uniswap": AdapterConfig(id="1")},
        )

        assert len(adaptors) == 1
        adaptor = adaptors[0]
        assert adaptor.id == "1"
        assert adaptor.module == "uniswap"
        assert adaptor.name == "Uniswap"
        assert adaptor.display_name == "Uniswap"
        assert adaptor.category == "Dexes"
        assert adaptor.chains == ["ethereum", "arbitrum"]
        assert adaptor.disabled is False
        assert adaptor.protocols_data is None
        assert adaptor.protocol_type == ProtocolType.PROTOCOL
        assert adaptor.methodology_url == "dexs/uniswap.py"
        assert adaptor.methodology == METHODOLOGY_BY_CATEGORY["Dexes"]
        assert adaptor.config == {"id": "1"}

    def test_catalog_fields_carried(self, builder, single_module, imported):
        adaptor = builder.build(
            {"uniswap": imported(single_module)},
            {"uniswap": AdapterConfig(id="1")},
        )[0]

        assert adaptor.gecko_id == "uniswap"
        assert adaptor.cmc_id == "7083"
        assert adaptor.logo == f"{ICONS_URL}/uniswap.jpg"
        assert adaptor.extra["url"] == "https://uniswap.org"
        assert adaptor.extra["twitter"] == "Uniswap"

    def test_config_fields_carried(self, builder, single_module, imported):
        adaptor = builder.build(
            {"lido": imported(single_module)},
            {"lido": AdapterConfig(id="182", display_name="Lido Staking", disabled=True,
                                   extra={"startFrom": 1600000000})},
        )[0]

        assert adaptor.display_name == "Lido Staking"
        assert adaptor.disabled is True
        assert adaptor.extra["startFrom"] == 1600000000

    def test_computed_category_beats_config_category(self, builder, single_module, imported):
        adaptor = builder.build(
            {"curve": imported(single_module)},
            {"curve": AdapterConfig(id="300", category="Config Category")},
        )[0]

        assert adaptor.category == "Dexes"

    def test_aave_display_name(self, builder, single_module, imported):
        adaptor = builder.build(
            {"aave": imported(single_module)},
            {"aave": AdapterConfig(id="111")},
        )[0]

        assert adaptor.name == "AAVE V2"
        assert adaptor.display_name == "AAVE"
        assert adaptor.methodology == METHODOLOGY_BY_CATEGORY["Lending"]

    def test_unresolvable_id_logs_and_skips(self, builder, single_module, imported, caplog):
        with caplog.at_level(logging.ERROR):
            adaptors = builder.build(
                {"ghost": imported(single_module)},
                {"ghost": AdapterConfig(id="404")},
                "fees",
            )

        assert adaptors == []
        assert "Missing info for ghost on fees" in caplog.text


class TestSkippedAdapters:
    """Adapters skipped without any output."""

    def test_missing_config(self, builder, single_module, imported, caplog):
        with caplog.at_level(logging.ERROR):
            adaptors = builder.build({"uniswap": imported(single_module)}, {})

        assert adaptors == []
        assert caplog.records == []

    def test_config_without_id(self, builder, single_module, imported, caplog):
        with caplog.at_level(logging.ERROR):
            adaptors = builder.build({"uniswap": imported(single_module)}, {"uniswap": AdapterConfig()})

        assert adaptors == []
        assert caplog.records == []

    def test_missing_module(self, builder, imported, caplog):
        with caplog.at_level(logging.ERROR):
            adaptors = builder.build({"uniswap": imported(None)}, {"uniswap": AdapterConfig(id="1")})

        assert adaptors == []
        assert caplog.records == []

    def test_skipped_adapter_does_not_affect_others(self, builder, single_module, imported):
        adaptors = builder.build(
            {
                "missing": imported(single_module),
                "curve": imported(single_module),
            },
            {"curve": AdapterConfig(id="300")},
        )

        assert [a.module for a in adaptors] == ["curve"]


class TestBreakdownAdapter:
    """Tests for multi-version adapters."""

    def test_one_record_per_version(self, builder, breakdown_module, breakdown_config, imported):
        adaptors = builder.build(
            {"uniswap": imported(breakdown_module)},
            {"uniswap": breakdown_config},
        )

        assert len(adaptors) == 3
        assert [a.name for a in adaptors] == ["Uniswap V1", "Uniswap V2", "Uniswap V3"]
        assert all(a.id == "1" for a in adaptors)
        assert all(a.module == "uniswap" for a in adaptors)

    def test_version_chains(self, builder, breakdown_module, breakdown_config, imported):
        adaptors = builder.build(
            {"uniswap": imported(breakdown_module)},
            {"uniswap": breakdown_config},
        )

        assert adaptors[0].chains == ["ethereum"]
        assert adaptors[1].chains == ["ethereum", "polygon"]
        assert adaptors[2].chains == ["ethereum", "arbitrum", "optimism"]

    def test_sub_config_applied(self, builder, breakdown_module, breakdown_config, imported):
        v1, v2, v3 = builder.build(
            {"uniswap": imported(breakdown_module)},
            {"uniswap": breakdown_config},
        )

        assert v1.display_name == "Uniswap V1"
        assert v2.display_name == "Uniswap V2 AMM"
        assert v1.disabled is False
        assert v3.disabled is True

    def test_protocols_data_computed(self, builder, breakdown_module, breakdown_config, imported):
        adaptor = builder.build(
            {"uniswap": imported(breakdown_module)},
            {"uniswap": breakdown_config},
        )[0]

        assert set(adaptor.protocols_data) == {"v1", "v2", "v3"}
        assert adaptor.protocols_data["v3"]["chains"] == ["ethereum", "arbitrum", "optimism"]
        # Adapter-level config is kept intact
        assert adaptor.config["protocolsData"]["v2"] == {"id": "2197", "displayName": "Uniswap V2 AMM"}

    def test_unresolved_version_logged_and_excluded(
        self, builder, breakdown_module, breakdown_config, imported, caplog
    ):
        breakdown_config.protocols_data["v4"] = AdapterConfig(id="9999")

        with caplog.at_level(logging.ERROR):
            adaptors = builder.build(
                {"uniswap": imported(breakdown_module)},
                {"uniswap": breakdown_config},
            )

        assert len(adaptors) == 3
        assert "Protocol not found with id 9999 and key uniswap" in caplog.text

    def test_no_resolved_versions(self, builder, breakdown_module, imported, caplog):
        config = AdapterConfig(id="1", protocols_data={"v1": AdapterConfig(id="404")})

        with caplog.at_level(logging.ERROR):
            adaptors = builder.build({"uniswap": imported(breakdown_module)}, {"uniswap": config}, "dexs")

        assert adaptors == []
        assert "Missing info for uniswap on dexs" in caplog.text

    def test_missing_protocols_data_raises(self, builder, breakdown_module, single_module, imported):
        with pytest.raises(MissingProtocolsDataError) as exc_info:
            builder.build(
                {
                    "curve": imported(single_module),
                    "uniswap": imported(breakdown_module),
                },
                {
                    "curve": AdapterConfig(id="300"),
                    "uniswap": AdapterConfig(id="1"),
                },
            )

        assert exc_info.value.adapter_key == "uniswap"

    def test_single_version_display_name(self, builder, imported):
        module = BreakdownAdapter(breakdown={"v2": {"ethereum": chain_adapter()}})
        config = AdapterConfig(id="300", protocols_data={"v2": AdapterConfig(id="300")})

        adaptor = builder.build({"curve": imported(module)}, {"curve": config})[0]

        assert adaptor.display_name == "Curve - V2"


class TestChainAdapter:
    """Tests for chain-type adapters."""

    def test_resolved_from_chain_index(self, builder, imported):
        module = SingleAdapter(adapter={"bsc": chain_adapter()}, protocol_type=ProtocolType.CHAIN)

        adaptor = builder.build({"bsc": imported(module)}, {"bsc": AdapterConfig(id="1839")})[0]

        assert adaptor.id == "1839"
        assert adaptor.name == "BSC"
        assert adaptor.display_name == "BSC"
        assert adaptor.category == "Chain"
        assert adaptor.logo == f"{ICONS_URL}/chains/rsz_binance.jpg"
        assert adaptor.protocol_type == ProtocolType.CHAIN
        assert adaptor.methodology == METHODOLOGY_BY_CATEGORY["Chain"]

    def test_protocol_id_not_found_in_chain_index(self, builder, imported):
        module = SingleAdapter(adapter={"ethereum": chain_adapter()}, protocol_type=ProtocolType.CHAIN)

        assert builder.build({"uniswap": imported(module)}, {"uniswap": AdapterConfig(id="1")}) == []

    def test_chain_overrides_used(self, builder, imported):
        builder = AdaptorListBuilder(
            protocol_index=builder.protocol_index,
            chain_index=builder.chain_index,
            overrides=lambda adaptor_type: {"ethereum": OverrideEntry(display_name="Wrong table")},
            chain_overrides={"ethereum": OverrideEntry(display_name="Ethereum Mainnet")},
        )
        module = SingleAdapter(adapter={"ethereum": chain_adapter()}, protocol_type=ProtocolType.CHAIN)

        adaptor = builder.build(
            {"ethereum": imported(module)},
            {"ethereum": AdapterConfig(id="1027")},
            "fees",
        )[0]

        assert adaptor.display_name == "Ethereum Mainnet"


class TestOverrides:
    """Override entries always win."""

    @pytest.fixture
    def overriding_builder(self, builder, fee_overrides):
        return AdaptorListBuilder(
            protocol_index=builder.protocol_index,
            chain_index=builder.chain_index,
            overrides=lambda adaptor_type: fee_overrides if adaptor_type == "fees" else {},
            chain_overrides={},
        )

    def test_override_beats_catalog_and_computed(self, overriding_builder, single_module, imported):
        adaptor = overriding_builder.build(
            {"uniswap": imported(single_module)},
            {"uniswap": AdapterConfig(id="1", category="Config Category")},
            "fees",
        )[0]

        assert adaptor.category == "Dexes Override"
        assert adaptor.extra["url"] == "https://app.uniswap.org"

    def test_override_table_selected_by_type(self, overriding_builder, single_module, imported):
        adaptor = overriding_builder.build(
            {"uniswap": imported(single_module)},
            {"uniswap": AdapterConfig(id="1")},
            "dexs",
        )[0]

        assert adaptor.category == "Dexes"
        assert adaptor.extra["url"] == "https://uniswap.org"

    def test_override_display_name_beats_config(self, builder, single_module, imported):
        builder = AdaptorListBuilder(
            protocol_index=builder.protocol_index,
            chain_index=builder.chain_index,
            overrides=lambda adaptor_type: {"lido": OverrideEntry(display_name="Lido Finance")},
            chain_overrides={},
        )

        adaptor = builder.build(
            {"lido": imported(single_module)},
            {"lido": AdapterConfig(id="182", display_name="Lido Staking")},
        )[0]

        assert adaptor.display_name == "Lido Finance"

    def test_override_protocols_data_replaces_computed(self, builder, breakdown_module, breakdown_config):
        override = OverrideEntry(protocols_data={"v3": OverrideEntry(category="Derivatives")})
        builder = AdaptorListBuilder(
            protocol_index=builder.protocol_index,
            chain_index=builder.chain_index,
            overrides=lambda adaptor_type: {"uniswap": override},
            chain_overrides={},
        )

        adaptor = builder.build(
            {"uniswap": ImportedAdapter(module=breakdown_module, code_path="dexs/uniswap")},
            {"uniswap": breakdown_config},
        )[0]

        assert adaptor.protocols_data == {"v3": {"category": "Derivatives"}}

    def test_empty_override_category_kept(self, builder, imported):
        module = BreakdownAdapter(breakdown={"v1": {"ethereum": chain_adapter()}})
        override = OverrideEntry(protocols_data={"v1": OverrideEntry(category="")})
        builder = AdaptorListBuilder(
            protocol_index=builder.protocol_index,
            chain_index=builder.chain_index,
            overrides=lambda adaptor_type: {"uniswap": override},
            chain_overrides={},
        )

        adaptor = builder.build(
            {"uniswap": imported(module)},
            {"uniswap": AdapterConfig(id="1", protocols_data={"v1": AdapterConfig(id="2196")})},
        )[0]

        assert adaptor.category == ""


class TestSharedTables:
    """Built records never alias the shared index or override tables."""

    @pytest.fixture
    def sharing_builder(self, builder):
        record = ProtocolRecord(id="500", name="Venus", category="Lending", extra={"oracles": ["Chainlink"]})
        overrides = {"venus": OverrideEntry(extra={"audit_links": ["a"]})}
        return AdaptorListBuilder(
            protocol_index=build_protocol_index([record]),
            chain_index=builder.chain_index,
            overrides=lambda adaptor_type: overrides,
            chain_overrides={},
        )

    def test_catalog_values_not_shared(self, sharing_builder, single_module, imported):
        imports = {"venus": imported(single_module)}
        config = {"venus": AdapterConfig(id="500")}

        first = sharing_builder.build(imports, config)[0]
        first.extra["oracles"].append("Pyth")
        second = sharing_builder.build(imports, config)[0]

        assert sharing_builder.protocol_index["500"].extra["oracles"] == ["Chainlink"]
        assert second.extra["oracles"] == ["Chainlink"]

    def test_override_values_not_shared(self, sharing_builder, single_module, imported):
        imports = {"venus": imported(single_module)}
        config = {"venus": AdapterConfig(id="500")}

        first = sharing_builder.build(imports, config)[0]
        first.extra["audit_links"].append("b")

        assert sharing_builder.build(imports, config)[0].extra["audit_links"] == ["a"]

    def test_config_values_not_shared(self, builder, single_module, imported):
        config = {"curve": AdapterConfig(id="300", extra={"parentIds": ["parent#curve"]})}

        adaptor = builder.build({"curve": imported(single_module)}, config)[0]
        adaptor.config["parentIds"].append("other")
        adaptor.extra["parentIds"].append("other")

        assert config["curve"].extra == {"parentIds": ["parent#curve"]}


class TestOrdering:
    """Output order follows the imports mapping."""

    def test_insertion_order(self, builder, single_module, breakdown_module, breakdown_config, imported):
        adaptors = builder.build(
            {
                "lido": imported(single_module),
                "uniswap": imported(breakdown_module),
                "curve": imported(single_module),
            },
            {
                "curve": AdapterConfig(id="300"),
                "uniswap": breakdown_config,
                "lido": AdapterConfig(id="182"),
            },
        )

        assert [a.name for a in adaptors] == ["Lido", "Uniswap V1", "Uniswap V2", "Uniswap V3", "Curve"]

    def test_repeated_builds_are_equal(self, builder, single_module, imported):
        imports = {"curve": imported(single_module)}
        config = {"curve": AdapterConfig(id="300")}

        assert builder.build(imports, config) == builder.build(imports, config)


class TestGenerateProtocolAdaptorsList:
    """Tests for the one-shot helper."""

    def test_builds_from_protocols(self, protocols, single_module, imported):
        adaptors = generate_protocol_adaptors_list(
            {"curve": imported(single_module)},
            {"curve": AdapterConfig(id="300")},
            protocols=protocols,
        )

        assert [a.name for a in adaptors] == ["Curve"]
