"""
Key translation - Map recorded key identifiers to SeleniumLibrary keys.

The recorder reports keys as DOM ``KeyboardEvent.key`` / ``code`` values
(https://pptr.dev/api/puppeteer.keyinput). SeleniumLibrary's ``Press Keys``
expects Selenium key names
(https://www.selenium.dev/selenium/docs/api/py/webdriver/selenium.webdriver.common.keys.html).
The Browser library takes the recorded identifiers as they are.

SeleniumLibrary also cannot send a key down without releasing it, so
adjacent key presses are grouped into a single chord before rendering.
"""

import logging
import re
from typing import List, Sequence

from rf_recorder.recording.models import Key, KeyDownStep, Step
from rf_recorder.translator.options import TranslatorConfig

logger = logging.getLogger(__name__)


_PASSTHROUGH_CHARACTERS = frozenset([
    ";", "=", ",", ".", "`", "[", "\\", "]", "'", "(", ")", "!", "@", "#",
    "%", "^", "&", ":", "<", ">", "?", "~", "{", "}", "\"", "_", "|",
])

_CONTROL_KEYS = frozenset([
    "Cancel",
    "Help",
    "Backspace",
    "Tab",
    "Clear",
    "Enter",
    "Pause",
    "Escape",
    "Space",
    "End",
    "Home",
    "Insert",
    "Delete",
    "Semicolon",
    "Shift",
    "Control",
    "Alt",
    "Meta",
])

_ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]")
_NUMPAD_DIGIT = re.compile(r"Numpad[0-9]")
_DIGIT = re.compile(r"Digit[0-9]")
_LETTER = re.compile(r"Key[a-zA-Z]")
_FUNCTION_KEY = re.compile(r"F[0-9]+")

# Escaped control characters arrive as the literal escape sequence text.
_KEY_TABLE = {
    "\\r": "RETURN",
    "\\n": "ENTER",
    "\\u0000": "NULL",
    "NumpadEnter": "ENTER",
    "ShiftLeft": "LEFT_SHIFT",
    "ShiftRight": "RIGHT_SHIFT",
    "ControlLeft": "LEFT_CONTROL",
    "ControlRight": "RIGHT_CONTROL",
    "AltLeft": "LEFT_ALT",
    "AltRight": "RIGHT_ALT",
    "MetaLeft": "LEFT_META",
    "MetaRight": "RIGHT_META",
    "PageUp": "PAGE_UP",
    "PageDown": "PAGE_DOWN",
    "ArrowLeft": "ARROW_LEFT",
    "ArrowUp": "ARROW_UP",
    "ArrowRight": "ARROW_RIGHT",
    "ArrowDown": "ARROW_DOWN",
    "NumpadDecimal": "DECIMAL",
    "Period": "DECIMAL",
    "NumpadMultiply": "MULTIPLY",
    "*": "MULTIPLY",
    "NumpadAdd": "ADD",
    "+": "ADD",
    "NumpadSubtract": "SUBTRACT",
    "Minus": "SUBTRACT",
    "-": "SUBTRACT",
    "NumpadDivide": "DIVIDE",
    "Slash": "DIVIDE",
    "/": "DIVIDE",
    "Equal": "EQUALS",
    "NumpadEqual": "EQUALS",
    " ": "SPACE",
    "Comma": ",",
}


def translate_key(key: str) -> str:
    """
    Translate a recorded key identifier to a SeleniumLibrary key name.

    Args:
        key: Key identifier as recorded (e.g. "a", "Enter", "KeyA", "ShiftLeft")

    Returns:
        Selenium key name or character, or a comment line naming the key
        if it has no equivalent
    """
    if _ALPHANUMERIC.fullmatch(key):
        return key

    if key in _PASSTHROUGH_CHARACTERS:
        return key

    if key in _CONTROL_KEYS:
        return key.upper()

    if _NUMPAD_DIGIT.fullmatch(key):
        return key.upper()

    if _DIGIT.fullmatch(key):
        # Not an exact equivalent, Selenium has no top-row digit keys
        return key.replace("Digit", "NUMPAD")

    if _LETTER.fullmatch(key):
        return key.replace("Key", "")

    if _FUNCTION_KEY.fullmatch(key):
        return key

    if key in _KEY_TABLE:
        return _KEY_TABLE[key]

    logger.warning(f"Key {key!r} has no SeleniumLibrary equivalent")
    return f"# Key {key} not supported by selenium"


def format_key(key: Key, config: TranslatorConfig) -> str:
    """
    Render a step key for the configured backend.

    The Browser library gets the key as recorded. SeleniumLibrary gets
    translated names, chords joined with ``+``.
    """
    if not config.targets_alternate_backend:
        return key if isinstance(key, str) else "+".join(key)
    if isinstance(key, str):
        return translate_key(key)
    return "+".join(translate_key(k) for k in key)


def group_key_presses(steps: Sequence[Step]) -> List[Step]:
    """
    Merge each run of adjacent key-down steps into one chord.

    ``[down A, down B, up A, up B]`` becomes ``[down [A, B], up A, up B]``.
    A key-down step that is not followed by another one keeps its key
    as recorded. Other steps are left untouched.

    Args:
        steps: Steps in recorded order

    Returns:
        New list of steps
    """
    if len(steps) <= 1:
        return list(steps)

    grouped: List[Step] = []
    run: List[str] = []

    def flush() -> None:
        if len(run) == 1:
            grouped.append(KeyDownStep(key=run[0]))
        elif run:
            grouped.append(KeyDownStep(key=list(run)))
        run.clear()

    for step in steps:
        if isinstance(step, KeyDownStep):
            if isinstance(step.key, str):
                run.append(step.key)
            else:
                run.extend(step.key)
            continue
        flush()
        grouped.append(step)
    flush()

    return grouped
