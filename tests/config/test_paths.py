"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from pyhead.config.paths import (
    default_config_dir,
    default_config_path,
    resolve_overridable_path,
)


def test_config_path_prefers_env_override(tmp_path: Path) -> None:
    target = tmp_path / "custom.toml"
    env = {"PYHEAD_CONFIG": str(target), "XDG_CONFIG_HOME": str(tmp_path / "xdg")}

    assert default_config_path(env) == target.resolve()


def test_config_path_uses_xdg_config_home(tmp_path: Path) -> None:
    env = {"XDG_CONFIG_HOME": str(tmp_path)}

    assert default_config_dir(env) == tmp_path.resolve() / "pyhead"
    assert default_config_path(env) == tmp_path.resolve() / "pyhead" / "config.toml"


def test_config_path_falls_back_to_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    assert default_config_path({}) == (tmp_path / ".config" / "pyhead" / "config.toml").resolve()


def test_blank_env_value_is_ignored(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"X": "   "},
        env_var="X",
        default_factory=lambda: tmp_path / "default",
    )

    assert resolved == (tmp_path / "default").resolve()


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit",
        env={"X": str(tmp_path / "env")},
        env_var="X",
        default_factory=lambda: tmp_path / "default",
    )

    assert resolved == (tmp_path / "explicit").resolve()
