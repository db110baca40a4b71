"""
Configuration layer for foodweb.

Configuration is passed explicitly, never read from globals, and is
immutable once constructed.
"""

from foodweb.config.settings import ModeConfig, FoodWebConfig

__all__ = [
    "ModeConfig",
    "FoodWebConfig",
]
