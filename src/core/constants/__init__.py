"""Core constants module.

Re-exports all constants for convenience.
"""

from src.core.constants.generic import (
    CHAIN_CATEGORY,
    CHAIN_LOGO_TEMPLATE,
    LOGO_KEY_ALIASES,
)

__all__ = [
    "CHAIN_CATEGORY",
    "CHAIN_LOGO_TEMPLATE",
    "LOGO_KEY_ALIASES",
]
