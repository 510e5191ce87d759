"""ProtocolAdaptor output data model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .adapter import ProtocolType


@dataclass
class ProtocolAdaptor:
    """Enriched protocol record produced by merging catalog, config and adapter data."""

    id: str
    module: str
    name: Optional[str] = None
    category: Optional[str] = None
    chains: List[str] = field(default_factory=list)
    disabled: bool = False
    display_name: Optional[str] = None
    protocols_data: Optional[Dict[str, Any]] = None
    protocol_type: Optional[ProtocolType] = None
    methodology_url: Optional[str] = None
    methodology: Optional[Union[str, Dict[str, str]]] = None
    config: Optional[Dict[str, Any]] = None
    logo: Optional[str] = None
    gecko_id: Optional[str] = None
    cmc_id: Optional[str] = None

    # Everything else carried over from the catalog, config or overrides
    extra: Dict[str, Any] = field(default_factory=dict)

    _FIELDS = {
        "id": "id",
        "module": "module",
        "name": "name",
        "category": "category",
        "chains": "chains",
        "disabled": "disabled",
        "displayName": "display_name",
        "protocolsData": "protocols_data",
        "protocolType": "protocol_type",
        "methodologyURL": "methodology_url",
        "methodology": "methodology",
        "config": "config",
        "logo": "logo",
        "gecko_id": "gecko_id",
        "cmcId": "cmc_id",
    }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProtocolAdaptor":
        """Build from a merged record (or a previously serialized one)."""
        known = {attr: data[key] for key, attr in cls._FIELDS.items() if key in data}
        protocol_type = known.get("protocol_type")
        if isinstance(protocol_type, str):
            known["protocol_type"] = ProtocolType(protocol_type)
        if known.get("chains") is None:
            known["chains"] = []
        known["disabled"] = bool(known.get("disabled", False))
        extra = {k: v for k, v in data.items() if k not in cls._FIELDS}
        return cls(extra=extra, **known)

    def to_dict(self) -> Dict[str, Any]:
        """Output form with camelCase keys, suitable for JSON."""
        data: Dict[str, Any] = dict(self.extra)
        for key, attr in self._FIELDS.items():
            value = getattr(self, attr)
            if isinstance(value, ProtocolType):
                value = value.value
            data[key] = value
        return data

    @property
    def label(self) -> str:
        """Name shown to users."""
        return self.display_name or self.name or self.module
