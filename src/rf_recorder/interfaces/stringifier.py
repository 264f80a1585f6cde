"""
Stringifier Interface - Contract between the host and script generators.

A host (the recorder extension, the CLI) hands a finished recording to a
stringifier and persists or displays the text it returns.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rf_recorder.recording.models import Recording, Step


class IStringifier(ABC):
    """
    Abstract interface for recording-to-script generators.

    Example:
        >>> class MyStringifier(IStringifier):
        ...     def stringify(self, recording):
        ...         return "\\n".join(self.stringify_step(s) for s in recording.steps)
        ...     def stringify_step(self, step):
        ...         return step.type
    """

    @abstractmethod
    def stringify(self, recording: "Recording") -> str:
        """
        Generate the complete script for a recording.

        Args:
            recording: The recording to convert

        Returns:
            Script text
        """
        ...

    @abstractmethod
    def stringify_step(self, step: "Step") -> str:
        """
        Generate the script line for a single step.

        Args:
            step: The step to convert

        Returns:
            One line of script text
        """
        ...
