"""Tests for the version command and the top-level app."""
from typer.testing import CliRunner

from versionitis_cli.main import app

runner = CliRunner()


def test_version():
    """Test version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
    assert "Core" in result.output
    assert "Python" in result.output


def test_no_args_shows_help():
    """Test the bare command lists the command groups."""
    result = runner.invoke(app, [])
    assert "range" in result.output
    assert "repo" in result.output
    assert "manifest" in result.output


def test_log_level_option(workdir):
    """Test --log-level is accepted before a command."""
    result = runner.invoke(app, ["--log-level", "debug", "range", "parse", "1.0"])
    assert result.exit_code == 0
    assert "Single" in result.output


def test_json_logging(workdir):
    """Test --log-json emits JSON log lines for persistence."""
    result = runner.invoke(app, ["--log-json", "repo", "add", "foo", "0.1.0"])
    assert result.exit_code == 0
    assert '"message": "Saved repo with 1 package(s) to repo.yaml"' in result.output


def test_invalid_log_level():
    """Test an unknown --log-level is rejected."""
    result = runner.invoke(app, ["--log-level", "verbose", "version"])
    assert result.exit_code == 1
    assert "Unsupported log level" in result.output


def test_warn_log_level_alias(workdir):
    """Test --log-level accepts warn as well as warning."""
    for level in ("warn", "WARNING"):
        result = runner.invoke(app, ["--log-level", level, "range", "parse", "1.0"])
        assert result.exit_code == 0, result.output


def test_invalid_log_level_env(monkeypatch):
    """Test a bad VERSIONITIS_LOG_LEVEL is reported instead of crashing."""
    from versionitis_common import clear_settings_cache
    from versionitis_common.constants import ENV_LOG_LEVEL

    monkeypatch.setenv(ENV_LOG_LEVEL, "verbose")
    clear_settings_cache()
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Unsupported log level" in result.output
    assert "Traceback" not in result.output
