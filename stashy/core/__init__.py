"""
Core abstractions: the stash contract, errors, settings and wiring.
"""

from .errors import BackendError, InvalidKeyError, StashError
from .interfaces import Stash, validate_key

__all__ = [
    "Stash",
    "validate_key",
    "StashError",
    "InvalidKeyError",
    "BackendError",
]
