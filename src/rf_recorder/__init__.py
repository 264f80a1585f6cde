"""
rf-recorder - Convert browser recordings to Robot Framework test cases.

This package turns a recording made with a browser's recorder (a title
plus typed steps carrying candidate selectors) into a Robot Framework
script for the Browser library or SeleniumLibrary.

Example:
    >>> from rf_recorder import Recording, RobotFrameworkStringifier, TranslatorConfig
    >>> recording = Recording.from_json(open("login.json").read())
    >>> print(RobotFrameworkStringifier(TranslatorConfig()).stringify(recording))
"""

__version__ = "0.1.0"

# Public API exports
from rf_recorder.recording import Recording, load_recording
from rf_recorder.translator import (
    RobotFrameworkStringifier,
    TranslatorConfig,
    BUILTIN_VARIANTS,
)
from rf_recorder.registry.registry import ComponentRegistry

__all__ = [
    "Recording",
    "load_recording",
    "RobotFrameworkStringifier",
    "TranslatorConfig",
    "BUILTIN_VARIANTS",
    "ComponentRegistry",
    "__version__",
]
