from __future__ import annotations

import logging
import os
import sys

import pytest

from filepath import ConfigError, Path
from filepath.utils import env, paths


def test_log_level_defaults_to_warning(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(env.LOG_LEVEL_ENV_VAR, raising=False)

    assert env.get_log_level() == logging.WARNING


@pytest.mark.parametrize(
    ("value", "level"),
    [("debug", logging.DEBUG), ("INFO", logging.INFO), (" error ", logging.ERROR), ("15", 15)],
)
def test_log_level_from_environment(
    monkeypatch: pytest.MonkeyPatch, value: str, level: int
) -> None:
    monkeypatch.setenv(env.LOG_LEVEL_ENV_VAR, value)

    assert env.get_log_level() == level


def test_invalid_log_level_is_a_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(env.LOG_LEVEL_ENV_VAR, "LOUD")

    with pytest.raises(ConfigError):
        env.get_log_level()


def test_unknown_directory_role() -> None:
    with pytest.raises(ConfigError):
        env.get_dir_override("downloads")


@pytest.mark.parametrize(
    ("role", "factory"),
    [
        ("home", Path.home_dir),
        ("temp", Path.temporary_dir),
        ("cache", Path.cache_dir),
        ("documents", Path.documents_dir),
    ],
)
def test_directory_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path, role: str, factory) -> None:
    target = tmp_path / role
    monkeypatch.setenv(env.DIR_OVERRIDE_ENV_VARS[role], str(target))

    assert factory() == Path(str(target))


def test_default_directories_are_absolute(monkeypatch: pytest.MonkeyPatch) -> None:
    for variable in env.DIR_OVERRIDE_ENV_VARS.values():
        monkeypatch.delenv(variable, raising=False)

    for factory in (Path.home_dir, Path.temporary_dir, Path.cache_dir, Path.documents_dir):
        assert os.path.isabs(factory().raw)


def test_temporary_dir_follows_tempfile(monkeypatch: pytest.MonkeyPatch) -> None:
    import tempfile

    monkeypatch.delenv(env.DIR_OVERRIDE_ENV_VARS["temp"], raising=False)

    assert Path.temporary_dir().raw == tempfile.gettempdir()


@pytest.mark.skipif(
    sys.platform == "darwin" or sys.platform.startswith("win"),
    reason="XDG lookup applies to Linux and other POSIX systems",
)
def test_cache_dir_honours_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.delenv(env.DIR_OVERRIDE_ENV_VARS["cache"], raising=False)
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))

    assert paths.cache_dir() == str(tmp_path)

    monkeypatch.delenv("XDG_CACHE_HOME")
    monkeypatch.setenv(env.DIR_OVERRIDE_ENV_VARS["home"], str(tmp_path))
    assert paths.cache_dir() == os.path.join(str(tmp_path), ".cache")


def test_well_known_directories_are_usable(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv(env.DIR_OVERRIDE_ENV_VARS["temp"], str(tmp_path))
    box = Path.temporary_dir().child("sandbox")

    assert box.mkdir().is_success
    assert box.child("hoge.txt").touch().is_success
    assert box.child("hoge.txt").parent == box
