from __future__ import annotations

import io
from pathlib import Path

import pytest

from ceai_analyzer.errors import EmptyFileError, ErrorKind, InvalidFileTypeError, UnreadableFileError
from ceai_analyzer.intake import accept_file, is_csv_file, load_csv_path, read_text


class BrokenStream(io.RawIOBase):
    def read(self, size=-1):
        raise OSError("device went away")


@pytest.mark.parametrize(
    "name,media_type,expected",
    [
        ("survey.csv", "text/csv", True),
        ("survey.CSV", None, True),
        ("export", "text/csv; charset=utf-8", True),
        ("survey.csv", "application/vnd.ms-excel", True),
        ("notes.txt", "text/plain", False),
        ("survey.xlsx", None, False),
    ],
)
def test_is_csv_file(name, media_type, expected) -> None:
    assert is_csv_file(name, media_type) is expected


def test_accepted_content_round_trips() -> None:
    text = "Department,Q1,Q2\nR&D,4,5\nVentes,3,4\n"
    raw = text.encode("utf-8")
    file = accept_file("survey.csv", "text/csv", io.BytesIO(raw), len(raw))
    assert file.content == text
    assert file.name == "survey.csv"
    assert file.size == len(raw)


def test_progress_is_reported_until_100() -> None:
    raw = b"a,b\n" * 1000
    seen: list[int] = []
    read_text(io.BytesIO(raw), len(raw), on_progress=seen.append, chunk_size=1000)
    assert seen == sorted(seen)
    assert seen[0] == 25
    assert seen[-1] == 100


def test_unknown_size_still_reaches_100() -> None:
    seen: list[int] = []
    read_text(io.BytesIO(b"x,y\n"), 0, on_progress=seen.append)
    assert seen == [100]


def test_non_csv_is_rejected_without_reading() -> None:
    stream = io.BytesIO(b"hello")
    with pytest.raises(InvalidFileTypeError) as ei:
        accept_file("notes.txt", "text/plain", stream, 5)
    assert str(ei.value) == "Invalid file type. Please upload a CSV file."
    assert ei.value.kind is ErrorKind.INVALID_FILE_TYPE
    assert stream.tell() == 0


def test_empty_file_is_an_error() -> None:
    with pytest.raises(EmptyFileError) as ei:
        accept_file("empty.csv", "text/csv", io.BytesIO(b""), 0)
    assert "valid text-based CSV" in str(ei.value)


def test_binary_content_is_unreadable() -> None:
    raw = b"\xff\xfe\x00\x81garbage"
    with pytest.raises(UnreadableFileError):
        accept_file("survey.csv", "text/csv", io.BytesIO(raw), len(raw))


def test_stream_failure_is_unreadable() -> None:
    with pytest.raises(UnreadableFileError) as ei:
        read_text(BrokenStream(), 10)
    assert str(ei.value) == "Failed to read file. Please try again."


def test_load_csv_path(tmp_path: Path) -> None:
    p = tmp_path / "ceai.csv"
    p.write_text("Department,Q1\nHR,4\n", encoding="utf-8")
    file = load_csv_path(p)
    assert file.content == "Department,Q1\nHR,4\n"
    assert file.size_kb == f"{p.stat().st_size / 1024:.2f} KB"
