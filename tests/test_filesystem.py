from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from ai2fs.utils.errors import OutputCreateError
from ai2fs.utils.filesystem import (
    create_directories,
    prepare_root,
    resolve_output_path,
    write_file,
)


def test_prepare_root_is_idempotent(out_root: Path) -> None:
    prepare_root(str(out_root))
    prepare_root(str(out_root))

    assert out_root.is_dir()


def test_directories_are_owner_only(out_root: Path) -> None:
    old_umask = os.umask(0)
    try:
        create_directories(str(out_root / "a" / "b" / "file.txt"))
    finally:
        os.umask(old_umask)

    mode = stat.S_IMODE((out_root / "a" / "b").stat().st_mode)
    assert mode == 0o700


@pytest.mark.parametrize("rel_path, reason", [
    ("../x.txt", "path escapes the output root"),
    ("a/../../x.txt", "path escapes the output root"),
    ("/etc/passwd.txt", "absolute paths are not allowed"),
    ("C:\\Windows\\win.ini", "absolute paths are not allowed"),
    (".", "path escapes the output root"),
])
def test_unsafe_paths_are_rejected(out_root: Path, rel_path: str, reason: str) -> None:
    full_path, error = resolve_output_path(str(out_root), rel_path)

    assert full_path is None
    assert error == reason


def test_safe_path_resolves_under_root(out_root: Path) -> None:
    full_path, error = resolve_output_path(str(out_root), "src\\app.js")

    assert error is None
    assert Path(full_path) == out_root / "src" / "app.js"


def test_write_file_overwrites(out_root: Path) -> None:
    target = str(out_root / "dir" / "f.txt")
    write_file(target, "first version, longer\n")
    write_file(target, "second\n")

    assert Path(target).read_text() == "second\n"


def test_write_file_raises_output_create_error(out_root: Path) -> None:
    out_root.mkdir()
    (out_root / "taken").write_text("file, not a directory")

    with pytest.raises(OutputCreateError) as excinfo:
        write_file(str(out_root / "taken" / "x.txt"), "content")

    assert excinfo.value.path.endswith("x.txt")
    assert excinfo.value.reason
