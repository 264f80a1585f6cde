"""
Pytest configuration and fixtures.
"""

import json

import pytest


@pytest.fixture
def browser_config():
    """Browser library, CSS first."""
    from rf_recorder.translator import TranslatorConfig
    return TranslatorConfig()


@pytest.fixture
def aria_config():
    """Browser library, ARIA labels / text before plain CSS."""
    from rf_recorder.translator import TranslatorConfig
    return TranslatorConfig(prefer_aria_as_text=True)


@pytest.fixture
def selenium_config():
    """SeleniumLibrary."""
    from rf_recorder.translator import TranslatorConfig
    return TranslatorConfig(targets_alternate_backend=True)


@pytest.fixture
def login_recording_data():
    """A small recording as exported by the browser recorder."""
    return {
        "title": "Login",
        "selectorAttribute": "name",
        "steps": [
            {"type": "setViewport", "width": 1280, "height": 720},
            {"type": "navigate", "url": "https://x.test"},
            {"type": "click", "selectors": [["aria/Email"], ["[name=\"email\"]"]]},
            {"type": "change", "selectors": [["[name=\"email\"]"]], "value": "me@x.test"},
            {"type": "keyDown", "key": "Enter"},
            {"type": "keyUp", "key": "Enter"},
        ],
    }


@pytest.fixture
def login_recording(login_recording_data):
    """The login recording as a Recording."""
    from rf_recorder.recording import Recording
    return Recording.from_dict(login_recording_data)


@pytest.fixture
def recording_file(tmp_path, login_recording_data):
    """The login recording written to a JSON file."""
    path = tmp_path / "login.json"
    path.write_text(json.dumps(login_recording_data), encoding="utf-8")
    return path


@pytest.fixture
def registry():
    """Provide a clean component registry for testing."""
    from rf_recorder.registry import ComponentRegistry

    ComponentRegistry.clear_all()
    yield ComponentRegistry
    ComponentRegistry.clear_all()
