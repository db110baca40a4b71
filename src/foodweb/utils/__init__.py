"""
Utility functions for foodweb.

No domain logic should live here.
"""

from foodweb.utils.text import normalize_name

__all__ = [
    "normalize_name",
]
