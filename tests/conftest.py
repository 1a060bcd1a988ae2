"""
pytest の共通フィクスチャ
"""

from datetime import date
from pathlib import Path

import pytest


@pytest.fixture
def note_date() -> date:
    return date(2024, 3, 15)


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """日付名のノート・対象外ファイル・サブディレクトリを含むディレクトリ"""
    notes = tmp_path / "notes"
    notes.mkdir()
    (notes / "2024-01-02.md").write_text(
        "Kickoff #work\nAgenda\n\nLunch #personal\n",
        encoding="utf-8",
    )
    (notes / "2024-01-01.md").write_text(
        "Planning #work #project\nMilestones\n",
        encoding="utf-8",
    )
    (notes / "README.md").write_text("Ignored #work\n", encoding="utf-8")
    (notes / "2024-01-03.txt").write_text("Ignored #work\n", encoding="utf-8")
    (notes / "2024-01-04.md").mkdir()
    return notes
