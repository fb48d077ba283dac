"""Tests for the command line entry point and version reporting."""

import logging
from unittest.mock import patch

import pytest
from modit import __main__ as cli
from modit.version import BuildInfo, get_version_string


def test_version_string_with_build_info():
    info = BuildInfo(commit="0123456789abcdef", date="2024-01-02T03:04:05+00:00", dirty=True)
    with patch("modit.version.get_build_info", return_value=info), \
            patch("modit.version.get_package_version", return_value="0.1.0"):
        assert get_version_string() == "modit 0.1.0 (0123456-dirty 2024-01-02T03:04:05+00:00)"


def test_version_string_without_build_info():
    info = BuildInfo(commit=None, date=None, dirty=False)
    with patch("modit.version.get_build_info", return_value=info), \
            patch("modit.version.get_package_version", return_value="0.1.0"):
        assert get_version_string() == "modit 0.1.0 (unknown unknown)"


def test_version_flag_prints_and_returns(capsys, monkeypatch):
    monkeypatch.setattr("sys.argv", ["modit", "--version"])
    with patch("modit.__main__.get_version_string", return_value="modit 9.9"):
        cli.main()
    assert capsys.readouterr().out.strip() == "modit 9.9"


def test_unreadable_file_exits_with_diagnostic(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("sys.argv", ["modit", str(tmp_path)])
    monkeypatch.setenv("MODIT_CONFIG", str(tmp_path / "settings.json"))
    with patch("modit.__main__.configure_logging"), \
            patch("modit.editor.TerminalInterface"):
        with pytest.raises(SystemExit) as excinfo:
            cli.main()
    assert excinfo.value.code == 1
    assert "Cannot read" in capsys.readouterr().err


def test_configure_logging_uses_env_level(tmp_path, monkeypatch):
    monkeypatch.setenv("MODIT_LOG_LEVEL", "debug")
    monkeypatch.setattr("platformdirs.user_log_dir", lambda name: str(tmp_path / name))
    with patch("logging.basicConfig") as basic_config:
        log_file = cli.configure_logging()
    assert log_file == tmp_path / "modit" / "modit.log"
    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
