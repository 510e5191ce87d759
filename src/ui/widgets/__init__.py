"""UI widgets for Protocol Adaptors."""

from .adaptor_table import AdaptorTable

__all__ = ["AdaptorTable"]
