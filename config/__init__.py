"""Configuration module for Protocol Adaptors."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
