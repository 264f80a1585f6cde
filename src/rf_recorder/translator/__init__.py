"""
Translator Module - Convert recordings to Robot Framework scripts.

This module is a pure library: it holds no state besides the immutable
TranslatorConfig of each stringifier and never raises on odd content.
Unusable selectors, unsupported keys and unknown steps are rendered as
comment lines for a human to fix.
"""

from rf_recorder.translator.options import (
    Backend,
    BackendProfile,
    TranslatorConfig,
    BACKEND_PROFILES,
    BROWSER_PROFILE,
    SELENIUM_PROFILE,
)
from rf_recorder.translator.keys import translate_key, format_key, group_key_presses
from rf_recorder.translator.selectors import resolve_selector
from rf_recorder.translator.serializer import StepSerializer
from rf_recorder.translator.stringifier import RobotFrameworkStringifier, prepare_steps
from rf_recorder.translator.variants import (
    StringifierVariant,
    MIME_TYPE,
    BUILTIN_VARIANTS,
    BROWSER_VARIANT,
    BROWSER_ARIA_VARIANT,
    SELENIUM_VARIANT,
)

__all__ = [
    "Backend",
    "BackendProfile",
    "TranslatorConfig",
    "BACKEND_PROFILES",
    "BROWSER_PROFILE",
    "SELENIUM_PROFILE",
    "translate_key",
    "format_key",
    "group_key_presses",
    "resolve_selector",
    "StepSerializer",
    "RobotFrameworkStringifier",
    "prepare_steps",
    "StringifierVariant",
    "MIME_TYPE",
    "BUILTIN_VARIANTS",
    "BROWSER_VARIANT",
    "BROWSER_ARIA_VARIANT",
    "SELENIUM_VARIANT",
]
