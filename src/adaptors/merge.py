"""Ordered field merge for protocol adaptor records.

A record is assembled from five layers. Each layer is a flat mapping of
fields; a field in a later layer replaces the same field from any earlier
layer. Nested values (``protocolsData``, ``config``) are replaced whole, and
the merged record never shares nested objects with its layers.

    CATALOG < CONFIG < SUB_CONFIG < COMPUTED < OVERRIDE
"""

import copy
from enum import IntEnum
from typing import Any, Dict, Mapping, Optional


class MergeLayer(IntEnum):
    """Merge layers, lowest precedence first."""

    CATALOG = 1
    CONFIG = 2
    SUB_CONFIG = 3
    COMPUTED = 4
    OVERRIDE = 5


MERGE_PRECEDENCE = tuple(sorted(MergeLayer))


def merge_layers(layers: Mapping[MergeLayer, Optional[Mapping[str, Any]]]) -> Dict[str, Any]:
    """Merge field mappings by layer precedence.

    Args:
        layers: Layer -> fields. Missing or None layers contribute nothing.

    Returns:
        New dict with every field taken from its highest-precedence layer.
        Values are deep copies.
    """
    merged: Dict[str, Any] = {}
    for layer in MERGE_PRECEDENCE:
        fields = layers.get(layer)
        if fields:
            merged.update(fields)
    return copy.deepcopy(merged)

