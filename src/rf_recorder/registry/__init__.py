"""
Registry module - Stringifier registration and discovery.

This module provides a registry pattern for offering several named
stringifiers to a host.
"""

from rf_recorder.registry.registry import (
    ComponentRegistry,
    RegisteredStringifier,
    register_builtin_stringifiers,
    register_stringifier,
    get_stringifier,
)

__all__ = [
    "ComponentRegistry",
    "RegisteredStringifier",
    "register_builtin_stringifiers",
    "register_stringifier",
    "get_stringifier",
]
