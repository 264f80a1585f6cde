"""
Recording-related exceptions.

Translation itself never raises; these cover the host side of loading
a recording exported by the browser recorder.
"""

from rf_recorder.exceptions.base import RFRecorderError


class RecordingError(RFRecorderError):
    """Base exception for recording-related errors."""
    pass


class RecordingLoadError(RecordingError):
    """
    A recording could not be loaded.

    Raised when the file is missing or unreadable, is not valid JSON,
    or lacks the top-level fields needed to build a Recording.
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message, {"path": path} if path else None)
        self.path = path
