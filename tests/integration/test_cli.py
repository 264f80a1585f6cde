"""
Integration tests for the CLI commands.
"""

import json

import pytest
from typer.testing import CliRunner

from rf_recorder.config import ConfigLoader


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch, registry):
    """Run commands from an empty directory with a fresh registry."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(ConfigLoader, "DEFAULT_CONFIG_PATHS", [tmp_path / "rf-recorder.yaml"])
    for name in ("RF_RECORDER__EXPORT__BACKEND", "RF_RECORDER__EXPORT__ARIA_AS_TEXT",
                 "RF_RECORDER__EXPORT__VARIANT"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


class TestCLIConvert:
    """Test the 'convert' CLI command."""

    def test_convert_help(self, runner):
        """Test help for convert command."""
        from rf_recorder.main import app
        result = runner.invoke(app, ["convert", "--help"])
        assert result.exit_code == 0
        assert "--selenium" in result.stdout

    def test_convert_to_stdout(self, runner, recording_file):
        """Test the script is printed with the Browser library by default."""
        from rf_recorder.main import app
        result = runner.invoke(app, ["convert", str(recording_file)])
        assert result.exit_code == 0
        assert result.stdout.startswith("*** Settings ***\nLibrary    Browser\n")
        assert "    Click  [name=\"email\"]\n" in result.stdout

    def test_convert_selenium(self, runner, recording_file):
        """Test the selenium flag."""
        from rf_recorder.main import app
        result = runner.invoke(app, ["convert", str(recording_file), "--selenium"])
        assert result.exit_code == 0
        assert "Library    SeleniumLibrary" in result.stdout
        assert "    Press Keys  None  ENTER" in result.stdout

    def test_convert_variant(self, runner, tmp_path):
        """Test choosing a registered variant by name."""
        from rf_recorder.main import app
        path = tmp_path / "aria.json"
        path.write_text(json.dumps({
            "title": "Aria",
            "selectorAttribute": "id",
            "steps": [{"type": "click", "selectors": [["#go"], ["aria/Go"]]}],
        }))
        result = runner.invoke(app, [
            "convert", str(path), "-V", "RobotFrameworkRecorder (Browser, aria as text)",
        ])
        assert result.exit_code == 0
        assert result.stdout.rstrip("\n").endswith("    Click  \"Go\"")

    def test_convert_backend_from_config(self, runner, recording_file, tmp_path):
        """Test the backend is read from the config file."""
        from rf_recorder.main import app
        (tmp_path / "rf-recorder.yaml").write_text("export:\n  backend: selenium\n")
        result = runner.invoke(app, ["convert", str(recording_file)])
        assert result.exit_code == 0
        assert "Library    SeleniumLibrary" in result.stdout

    def test_convert_to_directory(self, runner, recording_file, tmp_path):
        """Test a directory output gets a file named after the title."""
        from rf_recorder.main import app
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        result = runner.invoke(app, ["convert", str(recording_file), "-o", str(out_dir)])
        assert result.exit_code == 0

        script = (out_dir / "Login.robot").read_text(encoding="utf-8")
        assert script.startswith("*** Settings ***\n")
        assert script.endswith("\n")

    def test_convert_to_new_directory(self, runner, recording_file, tmp_path):
        """Test a trailing separator names a directory that does not exist yet."""
        from rf_recorder.main import app
        out_dir = tmp_path / "generated"
        result = runner.invoke(app, ["convert", str(recording_file), "-o", f"{out_dir}/"])
        assert result.exit_code == 0
        assert out_dir.is_dir()
        assert (out_dir / "Login.robot").read_text(encoding="utf-8").startswith("*** Settings ***\n")

    def test_convert_to_path_without_suffix(self, runner, recording_file, tmp_path):
        """Test an output without suffix is created as a directory."""
        from rf_recorder.main import app
        out_dir = tmp_path / "suite" / "tests"
        result = runner.invoke(app, ["convert", str(recording_file), "-o", str(out_dir)])
        assert result.exit_code == 0
        assert (out_dir / "Login.robot").is_file()

    def test_convert_logs_rendered_lines(self, runner, recording_file, tmp_path, monkeypatch):
        """Test the log reports the lines written, not the recorded steps."""
        from rf_recorder import main
        messages = []
        monkeypatch.setattr(main.logger, "info", lambda msg, *args, **kwargs: messages.append(msg))

        target = tmp_path / "login.robot"
        result = runner.invoke(main.app, ["convert", str(recording_file), "-o", str(target)])

        assert result.exit_code == 0
        lines = len(target.read_text(encoding="utf-8").splitlines())
        assert messages == [f"Wrote {lines} lines to {target}"]
        assert lines == 11

    def test_convert_to_file(self, runner, recording_file, tmp_path):
        from rf_recorder.main import app
        target = tmp_path / "suite" / "login_test.robot"
        result = runner.invoke(app, ["convert", str(recording_file), "--output", str(target)])
        assert result.exit_code == 0
        assert "*** Test Cases ***\nLogin\n" in target.read_text(encoding="utf-8")

    def test_convert_nonexistent_file(self, runner, tmp_path):
        """Test error on nonexistent file."""
        from rf_recorder.main import app
        result = runner.invoke(app, ["convert", str(tmp_path / "nonexistent.json")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_convert_invalid_json(self, runner, tmp_path):
        from rf_recorder.main import app
        path = tmp_path / "bad.json"
        path.write_text("{")
        result = runner.invoke(app, ["convert", str(path)])
        assert result.exit_code == 1

    def test_convert_unknown_variant(self, runner, recording_file):
        """Test an unknown variant name is rejected."""
        from rf_recorder.main import app
        result = runner.invoke(app, ["convert", str(recording_file), "-V", "Nope"])
        assert result.exit_code == 1
        assert "Unknown stringifier" in result.output

    def test_convert_missing_config(self, runner, recording_file, tmp_path):
        from rf_recorder.main import app
        result = runner.invoke(app, [
            "convert", str(recording_file), "-c", str(tmp_path / "missing.yaml"),
        ])
        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestCLIVariants:
    """Test the 'variants' CLI command."""

    def test_variants_lists_builtins(self, runner):
        """Test the built-in variants are listed."""
        from rf_recorder.main import app
        result = runner.invoke(app, ["variants"], env={"COLUMNS": "200"})
        assert result.exit_code == 0
        assert "RobotFrameworkRecorder (Browser, no aria)" in result.stdout
        assert "RobotFrameworkRecorder (Selenium)" in result.stdout
        assert "SeleniumLibrary" in result.stdout


class TestCLIVersion:
    """Test the 'version' CLI command."""

    def test_version(self, runner):
        """Test version command."""
        from rf_recorder.main import app
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "rf-recorder v0.1.0" in result.stdout
