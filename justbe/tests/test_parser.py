from __future__ import annotations

from pathlib import Path

import pytest

from justbe.tidbit_harvester import parser
from justbe.tidbit_harvester.errors import (
    OpenError,
    ReadError,
    StatsOpenError,
    StatsReadError,
)
from justbe.tidbit_harvester.parser import MatchRecord


@pytest.fixture()
def notes(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    path.write_text(
        "* Alpha tidbits\n** beta TIDBITS\nnot a heading\n* Alpha tidbits\n",
        encoding="utf-8",
    )
    return path


def test_scan_file_extracts_records_in_line_order(notes: Path) -> None:
    records = parser.scan_file(notes)
    assert records == [
        MatchRecord(str(notes), 1, "Alpha", 1),
        MatchRecord(str(notes), 2, "beta", 2),
        MatchRecord(str(notes), 4, "Alpha", 1),
    ]
    assert records[0].location == f"{notes}:1"


def test_blank_lines_advance_line_numbers(tmp_path: Path) -> None:
    path = tmp_path / "gaps.txt"
    path.write_text("\n\n* Late tidbits\n\n", encoding="utf-8")
    records = parser.scan_file(path)
    assert [record.line_number for record in records] == [3]
    assert parser.count_lines(path) == 4


def test_crlf_line_endings_are_matched(tmp_path: Path) -> None:
    path = tmp_path / "windows.txt"
    path.write_bytes(b"* Crlf tidbits\r\nplain\r\n")
    records = parser.scan_file(path)
    assert [record.name for record in records] == ["Crlf"]
    assert parser.count_lines(path) == 2


def test_bare_carriage_return_stays_inside_the_line(tmp_path: Path) -> None:
    path = tmp_path / "cr.txt"
    path.write_bytes(b"* A tidbits\r* B tidbits\n* C tidbits\n")
    records = parser.scan_file(path)
    assert [(record.line_number, record.name) for record in records] == [
        (1, "A tidbits\r* B"),
        (2, "C"),
    ]
    assert parser.count_lines(path) == 2


def test_count_lines_handles_missing_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "tail.txt"
    path.write_text("one\ntwo\nthree", encoding="utf-8")
    assert parser.count_lines(path) == 3


def test_empty_file_has_no_lines_or_matches(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert parser.scan_file(path) == []
    assert parser.count_lines(path) == 0


def test_scan_file_missing_raises_open_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    with pytest.raises(OpenError) as excinfo:
        parser.scan_file(missing)
    assert excinfo.value.path == str(missing)
    assert not isinstance(excinfo.value, StatsOpenError)


def test_scan_file_invalid_utf8_raises_read_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.txt"
    path.write_bytes(b"* Good tidbits\n\xff\xfe\xfa broken\n")
    with pytest.raises(ReadError):
        parser.scan_file(path)


def test_count_lines_uses_stats_errors(tmp_path: Path) -> None:
    with pytest.raises(StatsOpenError):
        parser.count_lines(tmp_path / "missing.txt")
    broken = tmp_path / "broken.txt"
    broken.write_bytes(b"ok\n\xff\xfe\n")
    with pytest.raises(StatsReadError):
        parser.count_lines(broken)


def test_scan_paths_preserves_file_then_line_order(tmp_path: Path) -> None:
    first = tmp_path / "b.txt"
    second = tmp_path / "a.txt"
    first.write_text("* Zed tidbits\n* Yak tidbits\n", encoding="utf-8")
    second.write_text("filler\n* Ant tidbits\n", encoding="utf-8")
    records = parser.scan_paths([first, second])
    assert [(Path(r.file_path).name, r.line_number, r.name) for r in records] == [
        ("b.txt", 1, "Zed"),
        ("b.txt", 2, "Yak"),
        ("a.txt", 2, "Ant"),
    ]


def test_scan_paths_fails_fast(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    good = tmp_path / "good.txt"
    good.write_text("* Fine tidbits\n", encoding="utf-8")
    after = tmp_path / "after.txt"
    after.write_text("* Never tidbits\n", encoding="utf-8")
    scanned: list[str] = []
    original = parser.scan_file

    def recording_scan(path: str | Path) -> list[MatchRecord]:
        scanned.append(Path(path).name)
        return original(path)

    monkeypatch.setattr(parser, "scan_file", recording_scan)
    with pytest.raises(OpenError):
        parser.scan_paths([good, tmp_path / "missing.txt", after])
    assert scanned == ["good.txt", "missing.txt"]


def test_scan_paths_returns_new_list_per_call(notes: Path) -> None:
    first = parser.scan_paths([notes])
    second = parser.scan_paths([notes])
    assert first == second
    assert first is not second


def test_match_record_is_immutable(notes: Path) -> None:
    record = parser.scan_file(notes)[0]
    with pytest.raises(AttributeError):
        record.name = "Other"  # type: ignore[misc]
