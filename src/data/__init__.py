"""Data layer for Protocol Adaptors."""

from .pipeline import AdaptorPipeline
from .cache.disk_cache import DiskCache, CacheKeys
from .loader import load_adapter_modules, load_adaptors_config, load_protocol_catalog

__all__ = [
    "AdaptorPipeline",
    "DiskCache",
    "CacheKeys",
    "load_adapter_modules",
    "load_adaptors_config",
    "load_protocol_catalog",
]
