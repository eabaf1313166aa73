"""
Core interfaces for extensibility.
All backends must implement these to be swappable.
"""

from .stash import Stash, validate_key

__all__ = [
    "Stash",
    "validate_key",
]
