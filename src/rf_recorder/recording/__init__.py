"""
Recording Module - Data model of a recorded browser interaction.
"""

from rf_recorder.recording.models import (
    Recording,
    Step,
    StepType,
    ClickStep,
    ChangeStep,
    NavigateStep,
    HoverStep,
    DoubleClickStep,
    KeyDownStep,
    KeyUpStep,
    WaitForElementStep,
    SetViewportStep,
    UnknownStep,
    Selector,
    Selectors,
    Key,
    step_from_dict,
)
from rf_recorder.recording.loader import load_recording

__all__ = [
    "Recording",
    "Step",
    "StepType",
    "ClickStep",
    "ChangeStep",
    "NavigateStep",
    "HoverStep",
    "DoubleClickStep",
    "KeyDownStep",
    "KeyUpStep",
    "WaitForElementStep",
    "SetViewportStep",
    "UnknownStep",
    "Selector",
    "Selectors",
    "Key",
    "step_from_dict",
    "load_recording",
]
