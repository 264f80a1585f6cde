"""
Exceptions module - Custom exception hierarchy.

The translator never raises for content problems (they become commented
diagnostic lines in the script). These exceptions cover configuration
and recording loading done by the host layer.
"""

from rf_recorder.exceptions.base import (
    RFRecorderError,
    ConfigurationError,
)
from rf_recorder.exceptions.recording import (
    RecordingError,
    RecordingLoadError,
)

__all__ = [
    # Base exceptions
    "RFRecorderError",
    "ConfigurationError",
    # Recording exceptions
    "RecordingError",
    "RecordingLoadError",
]
