"""
Step serializer - Render one recorded step as a Robot Framework keyword line.
"""

import logging
from typing import Any, Callable, Dict, Union

from rf_recorder.recording.models import (
    ChangeStep,
    KeyDownStep,
    KeyUpStep,
    NavigateStep,
    Step,
    StepType,
)
from rf_recorder.translator.keys import format_key
from rf_recorder.translator.options import TranslatorConfig
from rf_recorder.translator.selectors import resolve_selector

logger = logging.getLogger(__name__)


class StepSerializer:
    """
    Renders steps with the keyword vocabulary of one backend.

    Lines carry no indentation and no trailing newline. Steps that cannot
    be expressed produce a comment line instead of an error.

    Example:
        >>> serializer = StepSerializer(TranslatorConfig(targets_alternate_backend=True))
        >>> serializer.serialize(NavigateStep(url="https://x.test"))
        'Go To  https://x.test'
    """

    def __init__(self, config: TranslatorConfig):
        self._config = config
        self._profile = config.profile
        self._renderers: Dict[str, Callable[[Any], Dict[str, str]]] = {
            StepType.CLICK.value: self._selector_fields,
            StepType.CHANGE.value: self._change_fields,
            StepType.NAVIGATE.value: self._navigate_fields,
            StepType.HOVER.value: self._selector_fields,
            StepType.DOUBLE_CLICK.value: self._selector_fields,
            StepType.KEY_DOWN.value: self._key_fields,
            StepType.KEY_UP.value: self._key_fields,
            StepType.WAIT_FOR_ELEMENT.value: self._selector_fields,
        }

    @property
    def config(self) -> TranslatorConfig:
        return self._config

    def serialize(self, step: Step) -> str:
        """
        Render a step as a single keyword line.

        Args:
            step: The step to render

        Returns:
            Keyword line, or a comment line for unknown step kinds
        """
        render = self._renderers.get(step.type)
        template = self._profile.keywords.get(step.type)
        if render is None or template is None:
            return self._unknown(step)
        return template.format(**render(step))

    # ==================== Field extraction ====================

    def _selector_fields(self, step: Step) -> Dict[str, str]:
        return {"selector": resolve_selector(getattr(step, "selectors", []), self._config)}

    def _change_fields(self, step: ChangeStep) -> Dict[str, str]:
        fields = self._selector_fields(step)
        fields["value"] = step.value
        return fields

    def _navigate_fields(self, step: NavigateStep) -> Dict[str, str]:
        return {"url": step.url}

    def _key_fields(self, step: Union[KeyDownStep, KeyUpStep]) -> Dict[str, str]:
        if isinstance(step, KeyUpStep) and not self._profile.supports_key_release:
            # The comment names the key as recorded
            return {"key": step.key}
        return {"key": format_key(step.key, self._config)}

    def _unknown(self, step: Step) -> str:
        logger.warning(f"Unknown step type '{step.type}'")
        selectors = getattr(step, "selectors", None)
        if selectors is not None:
            return f"# Unknown step type {step.type} on selector: {resolve_selector(selectors, self._config)}"
        return f"# Unknown step type {step.type}"
