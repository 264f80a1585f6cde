"""
Built-in stringifier variants.

Three configurations are offered to the host, all producing plain text.
"""

from dataclasses import dataclass
from typing import Tuple

from rf_recorder.translator.options import TranslatorConfig

MIME_TYPE = "application/text"


@dataclass(frozen=True)
class StringifierVariant:
    """
    A named stringifier configuration.

    Attributes:
        name: Human readable name shown by the host
        config: Translator configuration of the variant
        mime_type: MIME type of the produced script
    """
    name: str
    config: TranslatorConfig
    mime_type: str = MIME_TYPE


BROWSER_VARIANT = StringifierVariant(
    name="RobotFrameworkRecorder (Browser, no aria)",
    config=TranslatorConfig(),
)

BROWSER_ARIA_VARIANT = StringifierVariant(
    name="RobotFrameworkRecorder (Browser, aria as text)",
    config=TranslatorConfig(prefer_aria_as_text=True),
)

SELENIUM_VARIANT = StringifierVariant(
    name="RobotFrameworkRecorder (Selenium)",
    config=TranslatorConfig(targets_alternate_backend=True),
)

BUILTIN_VARIANTS: Tuple[StringifierVariant, ...] = (
    BROWSER_VARIANT,
    BROWSER_ARIA_VARIANT,
    SELENIUM_VARIANT,
)
