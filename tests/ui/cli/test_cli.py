"""Tests for CLI functionality."""

from collections.abc import Callable
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from flacscan.features.scan import MUTAGEN_READER, STREAMING_READER, MatchCount, ScanResult
from flacscan.ui.cli import CommandProcessor


@pytest.fixture(autouse=True)
def no_file_logging(mocker: MockerFixture) -> None:
    _ = mocker.patch("flacscan.ui.cli.args.parser.setup_logger")


def test_count_prints_one_line_per_reader(
    write_flac: Callable[..., Path],
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _ = write_flac("lib/a.flac", ["ARTIST=Miles Davis"])
    _ = write_flac("lib/b.flac", ["ARTIST=Miles Davis", "TITLE=Milestones"])

    CommandProcessor.process_command(["count", str(tmp_path / "lib"), "--quiet"])

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith(f"{MUTAGEN_READER} returns 2 results in ")
    assert lines[1].startswith(f"{STREAMING_READER} returns 2 results in ")


def test_count_delegates_to_service(tmp_path: Path, mocker: MockerFixture) -> None:
    service = mocker.patch("flacscan.ui.cli.commands.count.LibraryScanService")
    service.return_value.run.return_value = [
        ScanResult(reader=STREAMING_READER, count=MatchCount(matches=1, files=1), elapsed_seconds=0.1)
    ]

    CommandProcessor.process_command(["count", str(tmp_path), "--value", "Coltrane", "--skip-baseline"])

    request = service.return_value.run.call_args.args[0]
    assert request.root == tmp_path
    assert request.value == "Coltrane"
    assert request.include_baseline is False


def test_tags_lists_entries(
    write_flac: Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    track = write_flac("track.flac", ["ARTIST=Miles Davis", "TITLE=So What"])

    CommandProcessor.process_command(["tags", str(track)])

    out = capsys.readouterr().out
    assert "Miles Davis" in out
    assert "So What" in out


def test_tags_exits_on_invalid_file(tmp_path: Path) -> None:
    bogus = tmp_path / "bogus.flac"
    _ = bogus.write_bytes(b"RIFF....WAVE")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["tags", str(bogus)])
    assert excinfo.value.code == 1


def test_unexpected_errors_exit_with_one(tmp_path: Path, mocker: MockerFixture) -> None:
    service = mocker.patch("flacscan.ui.cli.commands.count.LibraryScanService")
    service.return_value.run.side_effect = RuntimeError("boom")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["count", str(tmp_path)])
    assert excinfo.value.code == 1


def test_keyboard_interrupt_exits_with_130(tmp_path: Path, mocker: MockerFixture) -> None:
    service = mocker.patch("flacscan.ui.cli.commands.count.LibraryScanService")
    service.return_value.run.side_effect = KeyboardInterrupt

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["count", str(tmp_path)])
    assert excinfo.value.code == 130
