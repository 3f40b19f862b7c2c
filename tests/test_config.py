"""Tests for loading the TOML configuration file."""

from pathlib import Path

import pytest

from pylox.config import CONFIG_FILE_NAME, ConfigError, InterpreterConfig, load_config
from pylox.report.reporter import LogLevel


def test_defaults_without_config_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert load_config() == InterpreterConfig(LogLevel.ERROR, False)


def test_config_file_in_working_directory(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / CONFIG_FILE_NAME).write_text(
        'log-level = "verbose"\nstrict-division = true\n', encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    cfg = load_config()

    assert cfg.log_level == LogLevel.VERBOSE
    assert cfg.strict_division is True


def test_explicit_path_and_partial_fields(tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    path.write_text('log-level = "silent"\n', encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg.log_level == LogLevel.SILENT
    assert cfg.strict_division is False


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.toml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path)) == InterpreterConfig()


def test_missing_explicit_path(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as excinfo:
        load_config(str(tmp_path / "nope.toml"))

    assert "does not exist" in excinfo.value.message


def test_wrong_field_type(tmp_path: Path) -> None:
    path = tmp_path / "bad.toml"
    path.write_text('strict-division = "yes"\n', encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_config(str(path))

    assert excinfo.value.message == "field `strict-division` must be of type bool"


def test_unknown_log_level(tmp_path: Path) -> None:
    path = tmp_path / "bad.toml"
    path.write_text('log-level = "chatty"\n', encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_config(str(path))

    assert excinfo.value.message == "unknown log level: `chatty`"


def test_malformed_toml(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("log-level = \n", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_config(str(path))

    assert excinfo.value.message.startswith("error parsing configuration file")
    assert str(excinfo.value).startswith(str(path))
