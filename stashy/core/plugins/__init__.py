"""
Backend registry.
Allows registering and selecting stash backends at runtime.
"""

from .registry import PluginRegistry, stash_backends

__all__ = [
    "PluginRegistry",
    "stash_backends",
]
