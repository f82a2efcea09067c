from __future__ import annotations

"""
Unit tests for the FileSystem Infrastructure Layer.

Verifies archive naming, line counting and the archive/recreate cycle.
"""

import os
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from asrr_core.infra.fs import (
    archive_file,
    build_archive_path,
    count_lines,
    ensure_file,
    ensure_parent_dir,
    get_default_log_path,
)

MOMENT = datetime(2026, 10, 19, 15, 4, 5)


def _stamp(moment: datetime) -> str:
    return moment.strftime("%x %X").replace("/", "-").replace(":", "_")


def test_archive_path_inserts_stamp_before_log_suffix(tmp_path: Path) -> None:
    original = tmp_path / "app.log"

    archive = build_archive_path(str(original), MOMENT)

    assert os.path.dirname(archive) == str(tmp_path)
    assert os.path.basename(archive) == f"app{_stamp(MOMENT)}.log"


def test_archive_name_has_no_separator_characters(tmp_path: Path) -> None:
    name = os.path.basename(build_archive_path(str(tmp_path / "app.log"), MOMENT))
    assert "/" not in name
    assert ":" not in name


def test_archive_path_for_other_extensions(tmp_path: Path) -> None:
    txt = build_archive_path(str(tmp_path / "trace.txt"), MOMENT)
    bare = build_archive_path(str(tmp_path / "trace"), MOMENT)

    assert os.path.basename(txt) == f"trace{_stamp(MOMENT)}.txt"
    assert os.path.basename(bare) == f"trace{_stamp(MOMENT)}"


def test_count_lines_handles_terminators(tmp_path: Path) -> None:
    f = tmp_path / "mixed.log"
    f.write_bytes(b"a\nb\r\nc\rd")
    assert count_lines(str(f)) == 4

    empty = tmp_path / "empty.log"
    empty.write_text("", encoding="utf-8")
    assert count_lines(str(empty)) == 0


def test_ensure_parent_dir_and_file(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c.log"

    ensure_parent_dir(str(target))
    assert target.parent.is_dir()

    assert ensure_file(str(target)) is True
    assert ensure_file(str(target)) is False
    assert target.read_text(encoding="utf-8") == ""


def test_archive_file_moves_content(tmp_path: Path) -> None:
    original = tmp_path / "app.log"
    original.write_text("one\ntwo\n", encoding="utf-8")
    archive = tmp_path / "app-old.log"

    archive_file(str(original), str(archive))

    assert archive.read_text(encoding="utf-8") == "one\ntwo\n"
    assert original.exists()
    assert original.stat().st_size == 0


def test_archive_file_refuses_to_overwrite(tmp_path: Path) -> None:
    original = tmp_path / "app.log"
    original.write_text("new\n", encoding="utf-8")
    archive = tmp_path / "taken.log"
    archive.write_text("old\n", encoding="utf-8")

    with pytest.raises(FileExistsError):
        archive_file(str(original), str(archive))

    assert original.read_text(encoding="utf-8") == "new\n"
    assert archive.read_text(encoding="utf-8") == "old\n"


def test_default_log_path_uses_user_data_dir(tmp_path: Path) -> None:
    with patch("asrr_core.infra.fs.get_user_data_dir", return_value=str(tmp_path)):
        path = get_default_log_path("session")

    assert path == os.path.join(str(tmp_path), "logs", "session.log")
