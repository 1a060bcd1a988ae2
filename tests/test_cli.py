"""
コマンドラインと設定のテスト
"""

import json

import pytest

from markdownsift import ConfigError
from markdownsift.cli import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, main
from markdownsift.config import SiftConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "MARKDOWNSIFT_PATH",
        "MARKDOWNSIFT_TAGS",
        "MARKDOWNSIFT_OUTPUT",
        "MARKDOWNSIFT_OUTPUT_DIR",
        "MARKDOWNSIFT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_config_from_values():
    config = SiftConfig.from_values(path=" /notes ", tags="work,#ai", output="FILE", output_dir="/out")
    assert config.path == "/notes"
    assert config.tags == ["#work", "#ai"]
    assert config.output == "file"
    assert config.writes_files is True
    assert config.log_level == "WARNING"


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"path": ""}, "path cannot be empty"),
        ({"path": "/notes", "output": "pdf"}, "output must be either"),
        ({"path": "/notes", "output": "file"}, "output-dir is required"),
        ({"path": "/notes", "log_level": "chatty"}, "unknown log level"),
    ],
)
def test_config_validation(kwargs, message):
    with pytest.raises(ConfigError, match=message):
        SiftConfig.from_values(**kwargs)


def test_cli_writes_to_stdout(notes_dir, capsys):
    assert main(["--path", str(notes_dir), "--tags", "project"]) == EXIT_OK
    out = capsys.readouterr().out
    assert out == "# Content tagged by #project\n2024-01-01:\nPlanning #work #project\nMilestones\n\n"


def test_cli_writes_files(notes_dir, tmp_path, capsys):
    out_dir = tmp_path / "topics"
    code = main(["--path", str(notes_dir), "--output", "file", "--output-dir", str(out_dir)])

    assert code == EXIT_OK
    assert capsys.readouterr().out == ""
    assert sorted(p.name for p in out_dir.iterdir()) == ["personal.md", "project.md", "work.md"]
    assert (out_dir / "personal.md").read_text(encoding="utf-8") == (
        "# Content tagged by #personal\n2024-01-02:\nLunch #personal\n\n"
    )


def test_cli_path_from_environment(notes_dir, monkeypatch, capsys):
    monkeypatch.setenv("MARKDOWNSIFT_PATH", str(notes_dir))
    assert main(["--tags", "personal"]) == EXIT_OK
    assert "# Content tagged by #personal" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["--path", ""],
        ["--path", "/notes", "--output", "pdf"],
        ["--path", "/notes", "--output", "file"],
    ],
)
def test_cli_invalid_flags_print_usage(argv, capsys):
    assert main(argv) == EXIT_USAGE
    err = capsys.readouterr().err
    assert err.startswith("Error:")
    assert "usage: markdownsift" in err


def test_cli_missing_directory_fails(tmp_path, capsys):
    assert main(["--path", str(tmp_path / "missing")]) == EXIT_FAILURE
    assert "Error:" in capsys.readouterr().err


def test_cli_missing_directory_leaves_no_output_directory(tmp_path, capsys):
    out_dir = tmp_path / "topics"
    code = main(["--path", str(tmp_path / "missing"), "--output", "file", "--output-dir", str(out_dir)])
    assert code == EXIT_FAILURE
    assert not out_dir.exists()


def test_cli_output_directory_failure(notes_dir, tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    code = main(["--path", str(notes_dir), "--output", "file", "--output-dir", str(blocker / "out")])
    assert code == EXIT_FAILURE


def test_cli_stats(notes_dir, capsys):
    assert main(["--path", str(notes_dir), "--stats"]) == EXIT_OK
    err = capsys.readouterr().err
    stats = json.loads(err[err.index("{"):])
    assert stats["documents_processed"] == 2
    assert stats["fragments"] == 4
