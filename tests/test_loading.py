"""
DatedFileSelector / DatedNoteLoader のテスト
"""

import re
from datetime import date

import pytest

from markdownsift import DatedFileSelector, DatedNoteLoader, DirectoryAccessError, parse_filename_date


def test_select_matches_only_dated_markdown_files(notes_dir):
    names = DatedFileSelector().select(str(notes_dir))
    assert sorted(names) == ["2024-01-01.md", "2024-01-02.md"]


def test_select_ignores_matching_subdirectories(notes_dir):
    assert "2024-01-04.md" not in DatedFileSelector().select(str(notes_dir))


def test_select_empty_directory_returns_empty_list(tmp_path):
    assert DatedFileSelector().select(str(tmp_path)) == []


def test_select_missing_directory_raises(tmp_path):
    missing = tmp_path / "missing"
    with pytest.raises(DirectoryAccessError) as excinfo:
        DatedFileSelector().select(str(missing))
    assert excinfo.value.path == str(missing)


def test_select_file_instead_of_directory_raises(tmp_path):
    target = tmp_path / "2024-01-01.md"
    target.write_text("x", encoding="utf-8")
    with pytest.raises(DirectoryAccessError):
        DatedFileSelector().select(str(target))


@pytest.mark.parametrize(
    "name, expected",
    [
        ("2024-01-01.md", True),
        ("2024-1-01.md", False),
        ("2024-01-01.md.bak", False),
        ("x2024-01-01.md", False),
        ("2024-01-01.MD", False),
    ],
)
def test_matches_is_full_string(name, expected):
    assert DatedFileSelector().matches(name) is expected


def test_custom_pattern(tmp_path):
    (tmp_path / "note.txt").write_text("x", encoding="utf-8")
    (tmp_path / "2024-01-01.md").write_text("x", encoding="utf-8")
    selector = DatedFileSelector(pattern=re.compile(r".*\.txt"))
    assert selector.select(str(tmp_path)) == ["note.txt"]


def test_parse_filename_date():
    assert parse_filename_date("2024-02-29.md") == (date(2024, 2, 29), True)
    assert parse_filename_date("/notes/2023-12-31.md") == (date(2023, 12, 31), True)


def test_parse_filename_date_falls_back_to_today():
    fallback = date(2030, 1, 1)
    assert parse_filename_date("2024-13-45.md", today=fallback) == (fallback, False)
    assert parse_filename_date("notes.md", today=fallback) == (fallback, False)


@pytest.mark.parametrize("name", ["2024-1-5.md", "2024-01-5.md", "24-01-05.md"])
def test_parse_filename_date_requires_zero_padded_name(name):
    fallback = date(2030, 1, 1)
    assert parse_filename_date(name, today=fallback) == (fallback, False)


def test_load_from_text_with_unpadded_name_is_undated():
    doc = DatedNoteLoader().load_from_text("2024-1-5.md", "#work")
    assert doc.dated is False


def test_parse_filename_date_default_fallback_is_today():
    parsed, dated = parse_filename_date("someday.md")
    assert dated is False
    assert parsed == date.today()


def test_loader_reads_document(notes_dir):
    doc = DatedNoteLoader().load(str(notes_dir / "2024-01-01.md"))
    assert doc.name == "2024-01-01.md"
    assert doc.date == date(2024, 1, 1)
    assert doc.dated is True
    assert doc.content == "Planning #work #project\nMilestones\n"


def test_loader_marks_undated_document(tmp_path):
    path = tmp_path / "2024-99-99.md"
    path.write_text("#work", encoding="utf-8")
    doc = DatedNoteLoader().load(str(path))
    assert doc.dated is False


def test_loader_propagates_missing_file(tmp_path):
    with pytest.raises(OSError):
        DatedNoteLoader().load(str(tmp_path / "2024-01-01.md"))


def test_loader_propagates_decode_error(tmp_path):
    path = tmp_path / "2024-01-01.md"
    path.write_bytes(b"\xff\xfe\xfa #work")
    with pytest.raises(UnicodeDecodeError):
        DatedNoteLoader().load(str(path))
