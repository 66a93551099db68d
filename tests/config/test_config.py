"""Test configuration management."""

import logging
import tomllib
from pathlib import Path

import pytest

from pyhead.config.config import READ_CHUNK_SIZE_DEFAULT, Config


def test_defaults_when_file_missing(config_runtime_env: Path) -> None:
    """A missing config file yields defaults and is not created."""

    config = Config.load()

    assert config.log_file is None
    assert config.read_chunk_size == READ_CHUNK_SIZE_DEFAULT
    assert config.stdin_marker == "-"
    assert not config_runtime_env.exists()


def test_load_toml(config_runtime_env: Path) -> None:
    _ = config_runtime_env.write_text(
        'log_file = "/tmp/pyhead/pyhead.log"\n'
        "read_chunk_size = 64\n"
        'stdin_marker = "STDIN"\n',
        encoding="utf-8",
    )

    config = Config.load()

    assert config.log_file == Path("/tmp/pyhead/pyhead.log")
    assert config.read_chunk_size == 64
    assert config.stdin_marker == "STDIN"


def test_empty_log_file_means_none(config_runtime_env: Path) -> None:
    _ = config_runtime_env.write_text('log_file = ""\n', encoding="utf-8")

    assert Config.load().log_file is None


def test_unknown_keys_are_ignored(
    config_runtime_env: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _ = config_runtime_env.write_text("colour = true\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        config = Config.load()

    assert config.read_chunk_size == READ_CHUNK_SIZE_DEFAULT
    assert "Ignoring unknown configuration key: colour" in caplog.messages


def test_invalid_toml_raises(config_runtime_env: Path) -> None:
    _ = config_runtime_env.write_text("log_file = \n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()


def test_singleton_behavior(config_runtime_env: Path) -> None:
    """Repeated loads return the cached instance."""

    first = Config.load()
    _ = config_runtime_env.write_text("read_chunk_size = 1\n", encoding="utf-8")

    assert Config.load() is first


def test_explicit_file_bypasses_cache(config_runtime_env: Path, tmp_path: Path) -> None:
    _ = Config.load()
    other = tmp_path / "other.toml"
    _ = other.write_text("read_chunk_size = 16\n", encoding="utf-8")

    assert Config.load(other).read_chunk_size == 16
