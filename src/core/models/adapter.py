"""Adapter module data models.

An adapter describes, per chain, how a protocol's on-chain activity is
turned into a metric. It comes in two shapes:

- ``SingleAdapter``: one mapping of chain -> ChainAdapter
- ``BreakdownAdapter``: several named versions, each its own mapping
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Union

# Chain key that marks an adapter as disabled; never reported as a chain
DISABLED_ADAPTER_KEY = "disabled"


class ProtocolType(Enum):
    """Kind of entity an adapter reports on."""

    PROTOCOL = "protocol"
    CHAIN = "chain"
    COLLECTION = "collection"


@dataclass(frozen=True)
class AdapterMeta:
    """Descriptive metadata attached to a chain adapter."""

    # Either a single paragraph or a mapping of metric field -> text
    methodology: Optional[Union[str, Mapping[str, str]]] = None


@dataclass(frozen=True)
class ChainAdapter:
    """How a metric is fetched on one chain."""

    start: Optional[Union[int, str]] = None
    fetch: Optional[Callable[..., Any]] = None
    run_at_curr_time: bool = False
    meta: AdapterMeta = field(default_factory=AdapterMeta)


BaseAdapter = Mapping[str, ChainAdapter]


@dataclass(frozen=True)
class SingleAdapter:
    """Adapter with a single chain mapping."""

    adapter: BaseAdapter
    protocol_type: ProtocolType = ProtocolType.PROTOCOL
    version: int = 1


@dataclass(frozen=True)
class BreakdownAdapter:
    """Adapter split into named versions (e.g. v1, v2, v3)."""

    breakdown: Mapping[str, BaseAdapter]
    protocol_type: ProtocolType = ProtocolType.PROTOCOL
    version: int = 1

    @property
    def single_version(self) -> Optional[str]:
        """The version key when there is exactly one version."""
        if len(self.breakdown) == 1:
            return next(iter(self.breakdown))
        return None


Adapter = Union[SingleAdapter, BreakdownAdapter]


@dataclass(frozen=True)
class ImportedAdapter:
    """An adapter module as produced by the module loader."""

    module: Optional[Adapter]
    code_path: str

    @property
    def protocol_type(self) -> Optional[ProtocolType]:
        if self.module is None:
            return None
        return self.module.protocol_type


ImportsMap = Dict[str, ImportedAdapter]
