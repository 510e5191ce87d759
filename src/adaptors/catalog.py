"""Identifier-keyed indices over the protocol catalog and the chain table."""

import logging
from types import MappingProxyType
from typing import Iterable, List, Mapping

from src.core.constants import CHAIN_CATEGORY, CHAIN_LOGO_TEMPLATE, LOGO_KEY_ALIASES
from src.core.models import ChainMetadata, ProtocolRecord

logger = logging.getLogger(__name__)

ProtocolIndex = Mapping[str, ProtocolRecord]


def get_logo_key(key: str) -> str:
    """Logo file key for a chain name."""
    lowered = key.lower()
    return LOGO_KEY_ALIASES.get(lowered, lowered)


def build_protocol_index(records: Iterable[ProtocolRecord]) -> ProtocolIndex:
    """Read-only mapping of id -> record. Later duplicates replace earlier ones."""
    index = {}
    for record in records:
        index[record.id] = record
    return MappingProxyType(index)


def build_chain_records(
    chain_table: Mapping[str, ChainMetadata],
    base_icons_url: str,
) -> List[ProtocolRecord]:
    """Synthesize catalog-shaped records for chains.

    Chains without a market-cap id and without a chain id are skipped.

    Args:
        chain_table: Chain name -> ChainMetadata
        base_icons_url: Base URL used to build chain logo URLs

    Returns:
        ProtocolRecord per surviving chain, in table order
    """
    records = []
    for name, meta in chain_table.items():
        if not meta.cmc_id and not meta.chain_id:
            continue
        chain_id = meta.cmc_id if meta.cmc_id is not None else meta.chain_id
        extra = {"geckoId": meta.gecko_id}
        if meta.chain_id is not None:
            extra["chainId"] = meta.chain_id
        if meta.symbol is not None:
            extra["symbol"] = meta.symbol
        records.append(
            ProtocolRecord(
                id=str(chain_id),
                name=name,
                category=CHAIN_CATEGORY,
                gecko_id=meta.gecko_id,
                cmc_id=meta.cmc_id,
                logo=CHAIN_LOGO_TEMPLATE.format(
                    base_icons_url=base_icons_url,
                    logo_key=get_logo_key(name),
                ),
                extra=extra,
            )
        )
    logger.debug(f"Synthesized {len(records)} chain records from {len(chain_table)} chains")
    return records


def build_chain_index(records: Iterable[ProtocolRecord]) -> ProtocolIndex:
    """Read-only mapping of chain record id -> record."""
    return build_protocol_index(records)
