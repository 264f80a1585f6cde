"""
Selector resolution - Pick the one selector to emit for a step.

The recorder attaches several candidate selectors to every element step,
each in one of these encodings:

- ``aria/<accessible name>``
- ``xpath/<expression>``
- ``text/<text content>``
- ``pierce/<css>`` (CSS piercing shadow roots)
- anything else is CSS

Candidates are tried in a fixed preference order. CSS matching a
``name=`` attribute comes first: ``[name="email"]`` is much less likely
to change than a translated ARIA label or ``label:nth-of-type(1) > input``.
ARIA labels can only be rendered as text locators since role selectors
need the element's role, which the recording does not carry.
"""

import logging
import re
from typing import List, Optional

from rf_recorder.recording.models import Selectors
from rf_recorder.translator.options import TranslatorConfig

logger = logging.getLogger(__name__)

ARIA_PREFIX = "aria/"
XPATH_PREFIX = "xpath/"
TEXT_PREFIX = "text/"
PIERCE_PREFIX = "pierce/"

# Human readable labels only: letters (Latin-1 accented included) and spaces
_ARIA_LABEL = re.compile(r"aria/[A-Za-z \u00C0-\u017F]+")


def simple_selectors(selectors: Selectors) -> List[str]:
    """
    Keep plain selectors, unwrapping single-element chains.

    Chains reaching the element through its ancestors are not supported
    and are dropped.
    """
    simple: List[str] = []
    for selector in selectors:
        if isinstance(selector, str):
            simple.append(selector)
        elif len(selector) == 1:
            simple.append(selector[0])
    return simple


def css_selectors(candidates: List[str]) -> List[str]:
    """Candidates usable as CSS, ``pierce/`` prefix removed."""
    return [
        s[len(PIERCE_PREFIX):] if s.startswith(PIERCE_PREFIX) else s
        for s in candidates
        if not s.startswith(ARIA_PREFIX) and not s.startswith(XPATH_PREFIX)
    ]


def describe_selectors(selectors: Selectors) -> str:
    """Comma separated rendering of a selector set, chains flattened."""
    return ",".join(s if isinstance(s, str) else ",".join(s) for s in selectors)


def with_prefix(selector: str, prefix: str, config: TranslatorConfig) -> str:
    """
    Put the backend's locator prefix in front of a selector.

    Selectors already naming one of the backend's locator strategies
    (``name=email``, ``id:login``) are returned as they are.
    """
    strategies = config.profile.locator_strategies
    if strategies:
        head = re.split(r"[=:]", selector, maxsplit=1)
        if len(head) == 2 and head[0].strip() in strategies:
            return selector
    return f"{prefix}{selector}"


def aria_or_text_selector(candidates: List[str], config: TranslatorConfig) -> Optional[str]:
    """
    Render an ARIA label or text selector as a quoted text locator.

    Args:
        candidates: Simple selector candidates
        config: Translator configuration

    Returns:
        The quoted text, or None if no candidate fits or the backend
        cannot locate elements by text
    """
    if not config.profile.supports_text_selectors:
        return None

    for s in candidates:
        if _ARIA_LABEL.fullmatch(s):
            return f'"{s[len(ARIA_PREFIX):]}"'

    for s in candidates:
        if s.startswith(TEXT_PREFIX):
            return f'"{s[len(TEXT_PREFIX):]}"'

    return None


def resolve_selector(selectors: Selectors, config: TranslatorConfig) -> str:
    """
    Choose the selector to emit among a step's candidates.

    Order of preference:

    1. CSS containing ``name=``
    2. ARIA label / text, only with ``prefer_aria_as_text``
    3. first CSS
    4. first XPath
    5. ARIA label / text

    Args:
        selectors: Candidate selectors of the step
        config: Translator configuration

    Returns:
        Selector with the backend's prefix, or a comment line listing the
        candidates if none could be used
    """
    profile = config.profile
    candidates = simple_selectors(selectors)
    css = css_selectors(candidates)

    for s in css:
        if "name=" in s:
            return with_prefix(s, profile.css_prefix, config)

    if config.prefer_aria_as_text:
        text = aria_or_text_selector(candidates, config)
        if text is not None:
            return text

    if css:
        return with_prefix(css[0], profile.css_prefix, config)

    for s in candidates:
        if s.startswith(XPATH_PREFIX):
            return with_prefix(s[len(XPATH_PREFIX):], profile.xpath_prefix, config)

    text = aria_or_text_selector(candidates, config)
    if text is not None:
        return text

    logger.warning(f"No usable selector among {selectors!r}")
    return f"# ERROR: No valid selector found in {describe_selectors(selectors)}"
