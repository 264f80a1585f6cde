"""
Recording models - Typed steps of a recorded browser interaction.

A recording is produced by an external browser recorder as JSON: a title
plus an ordered list of steps distinguished by their ``type`` string.
Each known kind maps to its own dataclass; anything else is kept as an
UnknownStep so it can still be reported in the generated script.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

# One selector candidate: a plain selector string, or a chain of selectors
# leading through ancestors (only single-element chains are usable).
Selector = Union[str, List[str]]
Selectors = List[Selector]

# A key identifier, or the ordered keys of a chord after grouping.
Key = Union[str, List[str]]


class StepType(str, Enum):
    """Step kinds understood by the translator."""
    CLICK = "click"
    CHANGE = "change"
    NAVIGATE = "navigate"
    HOVER = "hover"
    DOUBLE_CLICK = "doubleClick"
    KEY_DOWN = "keyDown"
    KEY_UP = "keyUp"
    WAIT_FOR_ELEMENT = "waitForElement"
    SET_VIEWPORT = "setViewport"


@dataclass
class Step(ABC):
    """Base class for all recorded steps."""

    type = ""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert to the recorder's JSON shape."""
        ...


@dataclass
class ClickStep(Step):
    """Single click on an element."""
    selectors: Selectors = field(default_factory=list)

    type = StepType.CLICK.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "selectors": self.selectors}


@dataclass
class ChangeStep(Step):
    """Value typed into a form field."""
    selectors: Selectors = field(default_factory=list)
    value: str = ""

    type = StepType.CHANGE.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "selectors": self.selectors, "value": self.value}


@dataclass
class NavigateStep(Step):
    """Navigation to a URL."""
    url: str = ""

    type = StepType.NAVIGATE.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "url": self.url}


@dataclass
class HoverStep(Step):
    """Mouse moved over an element."""
    selectors: Selectors = field(default_factory=list)

    type = StepType.HOVER.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "selectors": self.selectors}


@dataclass
class DoubleClickStep(Step):
    """Double click on an element."""
    selectors: Selectors = field(default_factory=list)

    type = StepType.DOUBLE_CLICK.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "selectors": self.selectors}


@dataclass
class KeyDownStep(Step):
    """
    Key pressed down.

    ``key`` is a single key identifier as recorded, or a list of them once
    adjacent presses have been grouped into a chord.
    """
    key: Key = ""

    type = StepType.KEY_DOWN.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "key": self.key}


@dataclass
class KeyUpStep(Step):
    """Key released."""
    key: str = ""

    type = StepType.KEY_UP.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "key": self.key}


@dataclass
class WaitForElementStep(Step):
    """Wait until an element is present."""
    selectors: Selectors = field(default_factory=list)

    type = StepType.WAIT_FOR_ELEMENT.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "selectors": self.selectors}


@dataclass
class SetViewportStep(Step):
    """Viewport resize. Never rendered."""
    width: int = 0
    height: int = 0

    type = StepType.SET_VIEWPORT.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "width": self.width, "height": self.height}


@dataclass
class UnknownStep(Step):
    """
    Step of a kind the translator does not know.

    Attributes:
        step_type: The original ``type`` string
        selectors: Selectors, if the step carried any
        data: The raw step as recorded
    """
    step_type: str = ""
    selectors: Optional[Selectors] = None
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> str:  # type: ignore[override]
        return self.step_type

    def to_dict(self) -> Dict[str, Any]:
        result = dict(self.data)
        result["type"] = self.step_type
        if self.selectors is not None:
            result["selectors"] = self.selectors
        return result


_STEP_BUILDERS: Dict[str, Callable[[Dict[str, Any]], Step]] = {
    StepType.CLICK.value: lambda d: ClickStep(selectors=d.get("selectors", [])),
    StepType.CHANGE.value: lambda d: ChangeStep(
        selectors=d.get("selectors", []), value=d.get("value", ""),
    ),
    StepType.NAVIGATE.value: lambda d: NavigateStep(url=d.get("url", "")),
    StepType.HOVER.value: lambda d: HoverStep(selectors=d.get("selectors", [])),
    StepType.DOUBLE_CLICK.value: lambda d: DoubleClickStep(selectors=d.get("selectors", [])),
    StepType.KEY_DOWN.value: lambda d: KeyDownStep(key=d.get("key", "")),
    StepType.KEY_UP.value: lambda d: KeyUpStep(key=d.get("key", "")),
    StepType.WAIT_FOR_ELEMENT.value: lambda d: WaitForElementStep(selectors=d.get("selectors", [])),
    StepType.SET_VIEWPORT.value: lambda d: SetViewportStep(
        width=d.get("width", 0), height=d.get("height", 0),
    ),
}


def step_from_dict(data: Dict[str, Any]) -> Step:
    """
    Build a typed step from its recorded JSON form.

    Unrecognized kinds are preserved as UnknownStep.
    """
    step_type = str(data.get("type", ""))
    builder = _STEP_BUILDERS.get(step_type)
    if builder is None:
        return UnknownStep(
            step_type=step_type,
            selectors=data.get("selectors"),
            data={k: v for k, v in data.items() if k not in ("type", "selectors")},
        )
    return builder(data)


@dataclass
class Recording:
    """
    A complete recording as exported by the browser recorder.

    Attributes:
        title: Name of the recording, used as the test case name
        steps: Ordered steps
        selector_attribute: Custom attribute the recorder was told to use
            for selectors, or None if it was not set
    """
    title: str
    steps: List[Step] = field(default_factory=list)
    selector_attribute: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: Dict[str, Any] = {
            "title": self.title,
            "steps": [s.to_dict() for s in self.steps],
        }
        if self.selector_attribute is not None:
            result["selectorAttribute"] = self.selector_attribute
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Recording":
        """Create from dictionary."""
        return cls(
            title=data["title"],
            steps=[step_from_dict(s) for s in data["steps"]],
            selector_attribute=data.get("selectorAttribute"),
        )

    @classmethod
    def from_json(cls, json_str: str) -> "Recording":
        """Create from JSON string."""
        return cls.from_dict(json.loads(json_str))
