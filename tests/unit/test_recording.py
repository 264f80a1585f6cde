"""
Tests for the recording model and loader.
"""

import json

import pytest

from rf_recorder.exceptions import RecordingLoadError
from rf_recorder.recording import (
    ChangeStep,
    ClickStep,
    KeyDownStep,
    NavigateStep,
    Recording,
    SetViewportStep,
    Step,
    StepType,
    UnknownStep,
    load_recording,
    step_from_dict,
)


class TestStepFromDict:
    """Test building typed steps."""

    def test_known_kinds(self, login_recording):
        """Test each recorded kind maps to its dataclass."""
        assert [type(s) for s in login_recording.steps[:4]] == [
            SetViewportStep, NavigateStep, ClickStep, ChangeStep,
        ]
        assert login_recording.steps[3].value == "me@x.test"
        assert login_recording.steps[4] == KeyDownStep(key="Enter")

    def test_type_values(self):
        assert ClickStep().type == StepType.CLICK.value == "click"
        assert step_from_dict({"type": "doubleClick", "selectors": []}).type == "doubleClick"

    def test_base_step_is_abstract(self):
        """Test only concrete step kinds can be built."""
        with pytest.raises(TypeError):
            Step()

    def test_unknown_kind_is_preserved(self):
        """Test unknown kinds keep their type, selectors and raw data."""
        step = step_from_dict({"type": "scroll", "x": 0, "y": 100, "selectors": [["#list"]]})

        assert isinstance(step, UnknownStep)
        assert step.type == "scroll"
        assert step.selectors == [["#list"]]
        assert step.data == {"x": 0, "y": 100}
        assert step.to_dict() == {"type": "scroll", "x": 0, "y": 100, "selectors": [["#list"]]}

    def test_unknown_kind_without_selectors(self):
        step = step_from_dict({"type": "emulateNetworkConditions"})
        assert step.selectors is None


class TestRecording:
    """Test the Recording dataclass."""

    def test_from_dict(self, login_recording):
        assert login_recording.title == "Login"
        assert login_recording.selector_attribute == "name"
        assert len(login_recording.steps) == 6

    def test_selector_attribute_absent_or_null(self):
        """Test a missing or null selectorAttribute both mean unset."""
        assert Recording.from_dict({"title": "T", "steps": []}).selector_attribute is None
        data = {"title": "T", "steps": [], "selectorAttribute": None}
        assert Recording.from_dict(data).selector_attribute is None

    def test_to_dict(self, login_recording, login_recording_data):
        assert login_recording.to_dict() == login_recording_data

    def test_to_dict_without_selector_attribute(self):
        recording = Recording(title="T", steps=[NavigateStep(url="https://x.test")])
        assert recording.to_dict() == {
            "title": "T",
            "steps": [{"type": "navigate", "url": "https://x.test"}],
        }

    def test_from_json(self, login_recording_data):
        recording = Recording.from_json(json.dumps(login_recording_data))
        assert recording.title == "Login"


class TestLoadRecording:
    """Test loading recordings from disk."""

    def test_load(self, recording_file, login_recording):
        assert load_recording(recording_file) == login_recording

    def test_load_from_string_path(self, recording_file):
        assert load_recording(str(recording_file)).title == "Login"

    def test_missing_file(self, tmp_path):
        """Test a clear error for missing files."""
        path = tmp_path / "missing.json"
        with pytest.raises(RecordingLoadError, match="Recording file not found") as exc_info:
            load_recording(path)
        assert exc_info.value.path == str(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RecordingLoadError, match="Invalid JSON"):
            load_recording(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(RecordingLoadError, match="must be a JSON object"):
            load_recording(path)

    @pytest.mark.parametrize("data", [
        {"steps": []},
        {"title": "T"},
        {"title": "T", "steps": ["click"]},
    ])
    def test_malformed(self, tmp_path, data):
        """Test missing fields are reported as load errors."""
        path = tmp_path / "malformed.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(RecordingLoadError, match="Malformed recording"):
            load_recording(path)
