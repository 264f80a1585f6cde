"""
Recording loader - Read recorder JSON exports from disk.
"""

import json
import logging
from pathlib import Path
from typing import Union

from rf_recorder.exceptions import RecordingLoadError
from rf_recorder.recording.models import Recording

logger = logging.getLogger(__name__)


def load_recording(path: Union[str, Path]) -> Recording:
    """
    Load a recording from a JSON file.

    Args:
        path: Path to the recorder's JSON export

    Returns:
        The parsed Recording

    Raises:
        RecordingLoadError: If the file cannot be read or is not a recording
    """
    path = Path(path)
    if not path.exists():
        raise RecordingLoadError(f"Recording file not found: {path}", path=str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RecordingLoadError(f"Cannot read recording: {e}", path=str(path)) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RecordingLoadError(f"Invalid JSON in recording: {e}", path=str(path)) from e

    if not isinstance(data, dict):
        raise RecordingLoadError("Recording must be a JSON object", path=str(path))

    try:
        recording = Recording.from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise RecordingLoadError(f"Malformed recording: missing or invalid {e}", path=str(path)) from e

    logger.debug(f"Loaded recording '{recording.title}' with {len(recording.steps)} steps from {path}")
    return recording
