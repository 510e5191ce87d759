"""ProtocolRecord and ChainMetadata data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ProtocolRecord:
    """Catalog entry for a protocol (or a synthesized chain)."""

    id: str
    name: str
    category: Optional[str] = None
    chains: List[str] = field(default_factory=list)
    gecko_id: Optional[str] = None
    cmc_id: Optional[str] = None
    logo: Optional[str] = None

    # Catalog fields without a dedicated attribute (url, twitter, parentProtocol, ...)
    extra: Dict[str, Any] = field(default_factory=dict)

    _FIELDS = {
        "id": "id",
        "name": "name",
        "category": "category",
        "chains": "chains",
        "gecko_id": "gecko_id",
        "cmcId": "cmc_id",
        "logo": "logo",
    }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProtocolRecord":
        """Build a record from a catalog JSON object."""
        known = {attr: data[key] for key, attr in cls._FIELDS.items() if key in data}
        extra = {k: v for k, v in data.items() if k not in cls._FIELDS}
        known["id"] = str(known["id"])
        known.setdefault("name", "")
        if known.get("cmc_id") is not None:
            known["cmc_id"] = str(known["cmc_id"])
        known["chains"] = list(known.get("chains") or [])
        return cls(extra=extra, **known)

    def to_dict(self) -> Dict[str, Any]:
        """Catalog JSON form; unset optional fields are omitted."""
        data: Dict[str, Any] = dict(self.extra)
        for key, attr in self._FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                data[key] = list(value) if attr == "chains" else value
        return data


@dataclass(frozen=True)
class ChainMetadata:
    """Market-data identifiers for a chain."""

    gecko_id: Optional[str]
    cmc_id: Optional[str] = None
    chain_id: Optional[int] = None
    symbol: Optional[str] = None
