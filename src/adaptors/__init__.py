"""Protocol adaptor list construction.

Merges the protocol catalog with adapter modules and their configuration:

    from src.adaptors import AdaptorListBuilder
    builder = AdaptorListBuilder.from_catalog(protocols)
    adaptors = builder.build(imports, config, "fees")
"""

from src.adaptors.builder import AdaptorListBuilder, generate_protocol_adaptors_list
from src.adaptors.catalog import (
    build_chain_index,
    build_chain_records,
    build_protocol_index,
    get_logo_key,
)
from src.adaptors.display import get_display_category, get_display_name
from src.adaptors.exceptions import AdaptorError, CatalogLoadError, MissingProtocolsDataError
from src.adaptors.ids import ID_MAP, get_by_specific_id
from src.adaptors.merge import MergeLayer, merge_layers

__all__ = [
    "AdaptorListBuilder",
    "generate_protocol_adaptors_list",
    "build_chain_index",
    "build_chain_records",
    "build_protocol_index",
    "get_logo_key",
    "get_display_category",
    "get_display_name",
    "AdaptorError",
    "CatalogLoadError",
    "MissingProtocolsDataError",
    "ID_MAP",
    "get_by_specific_id",
    "MergeLayer",
    "merge_layers",
]
