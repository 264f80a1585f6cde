"""
Interfaces module - Abstract base classes for pluggable components.
"""

from rf_recorder.interfaces.stringifier import IStringifier

__all__ = [
    "IStringifier",
]
