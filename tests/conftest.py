"""Pytest configuration and fixtures."""

import pytest

from src.adaptors.builder import AdaptorListBuilder
from src.adaptors.catalog import build_chain_index, build_chain_records, build_protocol_index
from src.core.models import (
    AdapterConfig,
    AdapterMeta,
    BreakdownAdapter,
    ChainAdapter,
    ChainMetadata,
    ImportedAdapter,
    OverrideEntry,
    ProtocolRecord,
    ProtocolType,
    SingleAdapter,
)

ICONS_URL = "https://icons.example.com/icons"


@pytest.fixture
def protocols() -> list[ProtocolRecord]:
    """A small protocol catalog."""
    return [
        ProtocolRecord(
            id="1",
            name="Uniswap",
            category="Dexes",
            chains=["Ethereum", "Arbitrum"],
            gecko_id="uniswap",
            cmc_id="7083",
            logo=f"{ICONS_URL}/uniswap.jpg",
            extra={"url": "https://uniswap.org", "twitter": "Uniswap"},
        ),
        ProtocolRecord(id="2196", name="Uniswap V1", category="Dexes", chains=["Ethereum"]),
        ProtocolRecord(id="2197", name="Uniswap V2", category="Dexes", chains=["Ethereum"]),
        ProtocolRecord(id="2198", name="Uniswap V3", category="Dexes", chains=["Ethereum"]),
        ProtocolRecord(id="111", name="AAVE V2", category="Lending", chains=["Ethereum"]),
        ProtocolRecord(id="182", name="Lido", category="Liquid Staking", chains=["Ethereum"]),
        ProtocolRecord(id="300", name="Curve", category="Dexes", chains=["Ethereum"]),
    ]


@pytest.fixture
def chain_table() -> dict:
    """A small chain metadata table."""
    return {
        "Ethereum": ChainMetadata(gecko_id="ethereum", symbol="ETH", cmc_id="1027", chain_id=1),
        "BSC": ChainMetadata(gecko_id="binancecoin", symbol="BNB", cmc_id="1839", chain_id=56),
        "Solana": ChainMetadata(gecko_id="solana", symbol="SOL", cmc_id="5426"),
        "Base": ChainMetadata(gecko_id=None, chain_id=8453),
        "Terra Classic": ChainMetadata(gecko_id="terra-luna", symbol="LUNC"),
    }


@pytest.fixture
def builder(protocols, chain_table) -> AdaptorListBuilder:
    """Builder over the sample catalogs with no overrides."""
    return AdaptorListBuilder(
        protocol_index=build_protocol_index(protocols),
        chain_index=build_chain_index(build_chain_records(chain_table, ICONS_URL)),
        overrides=lambda adaptor_type: {},
        chain_overrides={},
    )


def chain_adapter(methodology=None) -> ChainAdapter:
    return ChainAdapter(start=1_600_000_000, meta=AdapterMeta(methodology=methodology))


@pytest.fixture
def single_module() -> SingleAdapter:
    """Single-version adapter on two chains."""
    return SingleAdapter(adapter={"ethereum": chain_adapter(), "arbitrum": chain_adapter()})


@pytest.fixture
def breakdown_module() -> BreakdownAdapter:
    """Three-version adapter."""
    return BreakdownAdapter(
        breakdown={
            "v1": {"ethereum": chain_adapter()},
            "v2": {"ethereum": chain_adapter(), "polygon": chain_adapter()},
            "v3": {"ethereum": chain_adapter(), "arbitrum": chain_adapter(), "optimism": chain_adapter()},
        }
    )


@pytest.fixture
def chain_module() -> SingleAdapter:
    """Chain-type adapter."""
    return SingleAdapter(adapter={"bsc": chain_adapter()}, protocol_type=ProtocolType.CHAIN)


@pytest.fixture
def breakdown_config() -> AdapterConfig:
    return AdapterConfig(
        id="1",
        protocols_data={
            "v1": AdapterConfig(id="2196"),
            "v2": AdapterConfig(id="2197", display_name="Uniswap V2 AMM"),
            "v3": AdapterConfig(id="2198", disabled=True),
        },
    )


@pytest.fixture
def imported():
    """Wrap an adapter as loader output."""

    def _wrap(module, code_path: str = "dexs/example.py") -> ImportedAdapter:
        return ImportedAdapter(module=module, code_path=code_path)

    return _wrap


@pytest.fixture
def fee_overrides() -> dict:
    return {
        "uniswap": OverrideEntry(category="Dexes Override", extra={"url": "https://app.uniswap.org"}),
    }
