"""
Robot Framework stringifier - Turn a whole recording into a test case.

Example:
    >>> stringifier = RobotFrameworkStringifier(TranslatorConfig())
    >>> script = stringifier.stringify(recording)
"""

import logging
from typing import List, Optional, Sequence

from rf_recorder.interfaces.stringifier import IStringifier
from rf_recorder.recording.models import Recording, Step, StepType
from rf_recorder.translator.keys import group_key_presses
from rf_recorder.translator.options import TranslatorConfig
from rf_recorder.translator.serializer import StepSerializer

logger = logging.getLogger(__name__)

INDENT = "    "

SELECTOR_ATTRIBUTE_WARNING = (
    f"{INDENT}# WARNING: To have more robust selectors, we recommend you set 'name' "
    "as the 'selector attribute' when starting the recording,\n"
    f"{INDENT}# since, e.g. '[name=Login]' is less subject to change than "
    "'label:nth-of-type(1) > input'\n"
)


def prepare_steps(steps: Sequence[Step], config: TranslatorConfig) -> List[Step]:
    """
    Select and reshape the steps that will be rendered.

    Viewport changes are always dropped. For backends that press keys as
    chords, adjacent key presses are grouped and key releases dropped.

    Args:
        steps: Steps as recorded
        config: Translator configuration

    Returns:
        Steps to render, in order
    """
    kept = [s for s in steps if s.type != StepType.SET_VIEWPORT.value]
    if config.profile.groups_key_presses:
        kept = [s for s in group_key_presses(kept) if s.type != StepType.KEY_UP.value]
    return kept


class RobotFrameworkStringifier(IStringifier):
    """
    Generates a Robot Framework test case from a recording.

    The output has a Settings section importing the backend's library and
    a single test case named after the recording, one keyword per step.
    """

    def __init__(self, config: Optional[TranslatorConfig] = None):
        """
        Initialize the stringifier.

        Args:
            config: Translator configuration (defaults to the Browser
                library without ARIA-as-text)
        """
        self._config = config or TranslatorConfig()
        self._serializer = StepSerializer(self._config)

    @property
    def config(self) -> TranslatorConfig:
        return self._config

    def stringify(self, recording: Recording) -> str:
        """
        Generate the script for a recording.

        Args:
            recording: The recording to convert

        Returns:
            Robot Framework script, without trailing newline
        """
        profile = self._config.profile
        steps = prepare_steps(recording.steps, self._config)
        logger.debug(
            f"Stringifying '{recording.title}' for {profile.library}: "
            f"{len(steps)} of {len(recording.steps)} steps kept"
        )

        header = (
            "*** Settings ***\n"
            f"Library    {profile.library}\n\n"
            "*** Test Cases ***\n"
            f"{recording.title}\n"
            f"{INDENT}{profile.open_browser}\n"
        )
        if recording.selector_attribute is None:
            header += SELECTOR_ATTRIBUTE_WARNING

        return header + "\n".join(f"{INDENT}{self.stringify_step(step)}" for step in steps)

    def stringify_step(self, step: Step) -> str:
        """Render one step as a keyword line, without indentation."""
        return self._serializer.serialize(step)
