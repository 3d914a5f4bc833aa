"""Tests for the atomic writer."""

import pytest

from flowgen.errors import WriteError
from flowgen.writer import write_atomic


def test_write_creates_file(tmp_path):
    dest = tmp_path / "out" / "flow.go"

    written = write_atomic(dest, "package main\n")

    assert written == dest.resolve()
    assert dest.read_text() == "package main\n"


def test_write_replaces_existing_content(tmp_path):
    dest = tmp_path / "flow.py"
    dest.write_text("old content that is longer than the new one\n")

    write_atomic(dest, "new\n")

    assert dest.read_text() == "new\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["flow.py"]


def test_failed_write_leaves_no_temp_file(tmp_path):
    dest = tmp_path / "flow.py"
    dest.mkdir()

    with pytest.raises(WriteError) as exc_info:
        write_atomic(dest, "x = 1\n")

    assert str(dest) in str(exc_info.value)
    assert [p.name for p in tmp_path.iterdir()] == ["flow.py"]
    assert dest.is_dir()
