"""Tests for the jobs directory scanner."""

import pytest

from flowgen.errors import ScanError
from flowgen.scan import read_candidate, scan_directory


def test_scan_returns_files_sorted_by_name(jobs_dir, write_job):
    write_job("b_job.go", "")
    write_job("a_job.go", "")
    write_job("c.txt", "")

    names = [p.name for p in scan_directory(jobs_dir)]

    assert names == ["a_job.go", "b_job.go", "c.txt"]


def test_scan_is_not_recursive(jobs_dir, write_job):
    write_job("a_job.go", "")
    nested = jobs_dir / "nested_job"
    nested.mkdir()
    (nested / "b_job.go").write_text("// goflow: B b\n")

    assert [p.name for p in scan_directory(jobs_dir)] == ["a_job.go"]


def test_scan_missing_directory(tmp_path):
    missing = tmp_path / "nope"

    with pytest.raises(ScanError) as exc_info:
        scan_directory(missing)

    assert exc_info.value.path == missing
    assert str(missing) in str(exc_info.value)


def test_scan_empty_directory(jobs_dir):
    assert scan_directory(jobs_dir) == []


def test_read_candidate(write_job):
    path = write_job("ingest_job.go", "// goflow: IngestJob ingest\n")

    candidate = read_candidate(path)

    assert candidate.path == path
    assert candidate.content == "// goflow: IngestJob ingest\n"


def test_read_candidate_rejects_binary(jobs_dir):
    path = jobs_dir / "blob_job.bin"
    path.write_bytes(b"\xff\xfe\x00\x80")

    with pytest.raises(ScanError):
        read_candidate(path)
