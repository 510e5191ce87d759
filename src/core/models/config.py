"""Adapter configuration and override data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class AdapterConfig:
    """Per-adapter configuration (also used for each breakdown version)."""

    id: Optional[str] = None
    protocols_data: Optional[Dict[str, "AdapterConfig"]] = None
    display_name: Optional[str] = None
    category: Optional[str] = None
    disabled: Optional[bool] = None

    # Config fields without a dedicated attribute (startFrom, parentId, ...)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdapterConfig":
        """Build a config from its JSON object."""
        protocols_data = data.get("protocolsData")
        return cls(
            id=str(data["id"]) if data.get("id") is not None else None,
            protocols_data=(
                {k: cls.from_dict(v) for k, v in protocols_data.items()}
                if protocols_data is not None
                else None
            ),
            display_name=data.get("displayName"),
            category=data.get("category"),
            disabled=data.get("disabled"),
            extra={
                k: v
                for k, v in data.items()
                if k not in ("id", "protocolsData", "displayName", "category", "disabled")
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON form. Unset fields are omitted so they never shadow other layers."""
        data: Dict[str, Any] = dict(self.extra)
        if self.id is not None:
            data["id"] = self.id
        if self.protocols_data is not None:
            data["protocolsData"] = {k: v.to_dict() for k, v in self.protocols_data.items()}
        if self.display_name is not None:
            data["displayName"] = self.display_name
        if self.category is not None:
            data["category"] = self.category
        if self.disabled is not None:
            data["disabled"] = self.disabled
        return data


@dataclass
class OverrideEntry:
    """Manually curated correction applied after all computed values."""

    category: Optional[str] = None
    display_name: Optional[str] = None
    protocols_data: Optional[Dict[str, "OverrideEntry"]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.extra)
        if self.category is not None:
            data["category"] = self.category
        if self.display_name is not None:
            data["displayName"] = self.display_name
        if self.protocols_data is not None:
            data["protocolsData"] = {k: v.to_dict() for k, v in self.protocols_data.items()}
        return data


AdaptorsConfig = Dict[str, AdapterConfig]
Overrides = Dict[str, OverrideEntry]
