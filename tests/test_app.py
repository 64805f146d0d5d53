"""End-to-end tests for the ccost command line."""

import json

import pytest

from ccost.app import run

from helpers import assistant_line, user_line, write_main_log, write_subagent_log


@pytest.fixture
def log_dir(projects_dir):
    write_main_log(projects_dir, [
        user_line(timestamp="2026-02-14T09:00:00Z", cwd="/home/u/myproject"),
        assistant_line("m1", timestamp="2026-02-14T10:00:00Z", cwd="/home/u/myproject",
                       input_tokens=100, output_tokens=50, cache_creation=200, cache_read=300),
        assistant_line("m2", timestamp="2026-02-15T10:00:00Z", cwd="/home/u/myproject",
                       model="claude-sonnet-4-5-20250929", input_tokens=1000, output_tokens=1000),
    ], project_dir="-home-u-myproject")
    write_subagent_log(projects_dir, [
        assistant_line("s1", timestamp="2026-02-14T09:30:00Z", cwd="/home/u/myproject",
                       model="claude-haiku-4-5-20251001", input_tokens=1000, output_tokens=500),
    ], project_dir="-home-u-myproject")
    return projects_dir


def _run_json(capsys, *args):
    code = run(list(args))
    captured = capsys.readouterr()
    return code, json.loads(captured.out), captured.err


def _base_args(log_dir, settings_path):
    return ["--dir", str(log_dir), "--config", str(settings_path)]


def test_json_by_date(log_dir, settings_path, capsys):
    code, data, err = _run_json(capsys, *_base_args(log_dir, settings_path), "--all", "--json")
    assert code == 0
    assert err == ""
    assert [row["key"] for row in data["rows"]] == ["2026-02-14", "2026-02-15"]
    first = data["rows"][0]
    assert first["input_tokens"] == 1100
    assert first["duration_seconds"] == 3600
    assert data["total"]["key"] == "TOTAL"
    assert data["total"]["input_tokens"] == 2100


def test_json_by_project_with_models(log_dir, settings_path, capsys):
    code, data, _ = _run_json(capsys, *_base_args(log_dir, settings_path),
                              "--all", "--json", "--by-project", "--models")
    assert code == 0
    assert [(r["key"], r["model"]) for r in data["rows"]] == [
        ("myproject", "claude-haiku-4-5"),
        ("myproject", "claude-opus-4-6"),
        ("myproject", "claude-sonnet-4-5"),
    ]
    assert data["rows"][0]["duration_seconds"] == 3600
    assert "duration_seconds" not in data["rows"][1]


def test_date_range(log_dir, settings_path, capsys):
    code, data, _ = _run_json(capsys, *_base_args(log_dir, settings_path),
                              "--since", "2026-02-15", "--until", "2026-02-15", "--json")
    assert code == 0
    assert [row["key"] for row in data["rows"]] == ["2026-02-15"]
    # 1000*3/1M + 1000*15/1M
    assert data["rows"][0]["cost"] == 0.02


def test_until_only(log_dir, settings_path, capsys):
    code, data, _ = _run_json(capsys, *_base_args(log_dir, settings_path),
                              "--until", "2026-02-14", "--json")
    assert code == 0
    assert [row["key"] for row in data["rows"]] == ["2026-02-14"]


def test_unknown_model_warning(projects_dir, settings_path, capsys):
    write_main_log(projects_dir, [
        assistant_line("m1", model="claude-future-99"),
        assistant_line("m2", model="claude-future-99"),
    ])
    code, data, err = _run_json(capsys, *_base_args(projects_dir, settings_path), "--all", "--json")
    assert code == 0
    assert err.count("warning: unknown model: claude-future-99") == 1
    assert data["total"]["cost"] == -1


def test_no_records(projects_dir, settings_path, capsys):
    code = run(_base_args(projects_dir, settings_path) + ["--all"])
    captured = capsys.readouterr()
    assert code == 0
    assert "no records found" in captured.err
    assert captured.out == ""


def test_default_window_excludes_old_logs(log_dir, settings_path, capsys):
    """Without date flags only the trailing window is reported; these logs are older."""
    code = run(_base_args(log_dir, settings_path))
    assert code == 0
    assert "no records found" in capsys.readouterr().err


def test_default_window_from_config(log_dir, settings_path, capsys):
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text(json.dumps({"general/defaultDays": 100000}))
    code, data, _ = _run_json(capsys, *_base_args(log_dir, settings_path), "--json")
    assert code == 0
    assert len(data["rows"]) == 2


@pytest.mark.parametrize("flag", ["--since", "--until"])
def test_bad_date_flag(log_dir, settings_path, capsys, flag):
    code = run(_base_args(log_dir, settings_path) + [flag, "14-02-2026"])
    assert code == 1
    assert f"invalid {flag} date" in capsys.readouterr().err


def test_table_output(log_dir, settings_path, capsys, monkeypatch):
    monkeypatch.setenv("COLUMNS", "200")
    code = run(_base_args(log_dir, settings_path) + ["--all", "--exact", "--models"])
    out = capsys.readouterr().out
    assert code == 0
    assert "TOTAL" in out
    assert "Date (2026)" in out
    assert "claude-haiku-4-5" in out
    assert "1,000" in out


def test_project_filter(log_dir, settings_path, capsys):
    code = run(_base_args(log_dir, settings_path) + ["--all", "--project", "nomatch"])
    assert code == 0
    assert "no records found" in capsys.readouterr().err


def test_workers_flag(log_dir, settings_path, capsys):
    code, data, _ = _run_json(capsys, *_base_args(log_dir, settings_path),
                              "--all", "--json", "--workers", "3")
    assert code == 0
    assert data["total"]["input_tokens"] == 2100


def test_table_output_narrow_terminal(log_dir, settings_path, capsys, monkeypatch):
    monkeypatch.setenv("COLUMNS", "80")
    code = run(_base_args(log_dir, settings_path) + ["--all", "--exact", "--models"])
    out = capsys.readouterr().out
    assert code == 0
    assert "…" not in out
    assert max(len(line) for line in out.splitlines()) <= 80


def test_log_root_from_config(log_dir, settings_path, capsys):
    settings_path.parent.mkdir(parents=True)
    settings_path.write_text(json.dumps({"general/sessionDir": str(log_dir)}))
    code, data, _ = _run_json(capsys, "--config", str(settings_path), "--all", "--json")
    assert code == 0
    assert data["total"]["input_tokens"] == 2100
