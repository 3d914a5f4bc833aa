"""Tests for the run_generate command."""

import pytest

import run_generate


def test_main_writes_default_output(tmp_path, monkeypatch, capsys, clean_env):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "jobs").mkdir()
    (tmp_path / "jobs" / "ingest_job.py").write_text("# goflow: build ingest\n")

    assert run_generate.main([]) == 0

    out = capsys.readouterr().out
    assert out.count("Wrote 1 jobs to:") == 1
    text = (tmp_path / "flow.py").read_text()
    assert "from jobs import ingest_job as _ingest_job" in text
    assert '    if name == "ingest":\n' in text


def test_main_go_target_from_env(tmp_path, monkeypatch, clean_env):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("FLOWGEN_TARGET", "go")
    (tmp_path / "jobs").mkdir()
    (tmp_path / "jobs" / "ingest_job.go").write_text("// goflow: IngestJob ingest\n")

    assert run_generate.main([]) == 0
    assert "return jobs.IngestJob" in (tmp_path / "flow.go").read_text()


def test_main_fails_without_jobs_directory(tmp_path, monkeypatch, caplog, clean_env):
    monkeypatch.chdir(tmp_path)

    assert run_generate.main([]) == 1
    assert "generation failed: cannot read jobs:" in caplog.text
    assert not (tmp_path / "flow.py").exists()


def test_main_fails_on_bad_config(tmp_path, monkeypatch, caplog, clean_env):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("FLOWGEN_TARGET", "rust")

    assert run_generate.main([]) == 1
    assert "invalid generator configuration" in caplog.text


def test_main_reports_each_malformed_file_once(tmp_path, monkeypatch, caplog, clean_env):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "jobs").mkdir()
    (tmp_path / "jobs" / "bad_job.py").write_text("# goflow: build\n")

    assert run_generate.main([]) == 1
    assert caplog.text.count("bad_job.py") == 1
    assert not (tmp_path / "flow.py").exists()


def test_main_rejects_options(clean_env):
    with pytest.raises(SystemExit) as exc_info:
        run_generate.main(["--jobs", "elsewhere"])

    assert exc_info.value.code == 2
