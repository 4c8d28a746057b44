from __future__ import annotations

import importlib

import pytest

from ai2fs import config


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)
    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config, monkeypatch) -> None:
    for key in ("AI2FS_ROOT_FOLDER", "AI2FS_ALLOW_UNSAFE_PATHS", "AI2FS_MAX_LINE_LENGTH"):
        monkeypatch.delenv(key, raising=False)
    cfg = reload_config()

    assert cfg.ROOT_FOLDER == "generated-code"
    assert cfg.ALLOW_UNSAFE_PATHS is False
    assert cfg.MAX_LINE_LENGTH == 4096


@pytest.mark.parametrize("value, expected", [
    ("ON", True), ("true", True), ("1", True),
    ("OFF", False), ("false", False), ("0", False), ("maybe", False),
])
def test_unsafe_paths_flag(reload_config, value: str, expected: bool) -> None:
    assert reload_config(AI2FS_ALLOW_UNSAFE_PATHS=value).ALLOW_UNSAFE_PATHS is expected


def test_bad_line_length_falls_back(reload_config, capsys) -> None:
    cfg = reload_config(AI2FS_MAX_LINE_LENGTH="lots")

    assert cfg.MAX_LINE_LENGTH == 4096
    assert "AI2FS_MAX_LINE_LENGTH" in capsys.readouterr().out


def test_custom_root(reload_config) -> None:
    assert reload_config(AI2FS_ROOT_FOLDER="out").ROOT_FOLDER == "out"


def test_log_dir_defaults_to_working_directory(reload_config, monkeypatch) -> None:
    monkeypatch.delenv("AI2FS_LOG_DIR", raising=False)

    assert reload_config().LOG_DIR == "logs"


def test_bad_encoding_falls_back(reload_config, capsys) -> None:
    cfg = reload_config(AI2FS_INPUT_ENCODING="utf8x")

    assert cfg.INPUT_ENCODING == "utf-8"
    assert "AI2FS_INPUT_ENCODING" in capsys.readouterr().out


def test_known_encoding_is_kept(reload_config) -> None:
    assert reload_config(AI2FS_INPUT_ENCODING="latin-1").INPUT_ENCODING == "latin-1"
