"""Tests for CLI module."""

import io
import json
import logging
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from runner_reporter.cli import EXIT_STREAM_ERROR, main, replay, run
from runner_reporter.models.events import AssemblyFinished, AssemblyStarting


def write_events(path: Path, *events: dict[str, object]) -> Path:
    path.write_text(
        "".join(json.dumps(event) + "\n" for event in events), encoding="utf-8"
    )
    return path


def test_replay_feeds_events_in_order() -> None:
    """Passes every event to the handler in order."""
    handler = Mock()
    events = [
        AssemblyStarting(assembly_name="a"),
        AssemblyFinished(assembly_name="a"),
    ]

    count = replay(handler, events)

    assert count == 2
    assert [c.args[0] for c in handler.on_message.call_args_list] == events


class TestRun:
    """Tests for run function."""

    def test_renders_events_from_file(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Logs rendered lines and returns 0."""
        path = write_events(
            tmp_path / "events.jsonl",
            {"kind": "assembly-starting", "assembly_name": "testAssembly"},
            {"kind": "test-skipped", "test_display_name": "t", "reason": "r"},
        )

        with caplog.at_level(logging.INFO, logger="runner_reporter"):
            exit_code = run(str(path))

        assert exit_code == 0
        assert [r.getMessage() for r in caplog.records] == [
            "[Imp] => Starting:    testAssembly",
            "[Wrn] =>    t [SKIP]",
            "[Imp] =>       r",
        ]

    def test_reads_stdin(self, caplog: pytest.LogCaptureFixture) -> None:
        """Reads the stream from stdin for '-'."""
        stdin = io.StringIO(
            json.dumps({"kind": "assembly-finished", "assembly_name": "x"}) + "\n"
        )

        with (
            patch("runner_reporter.cli.sys.stdin", stdin),
            caplog.at_level(logging.INFO, logger="runner_reporter"),
        ):
            exit_code = run("-")

        assert exit_code == 0
        assert "[Imp] => Finished:    x" in caplog.text

    def test_returns_error_for_invalid_stream(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Returns 2 and logs the decoding error."""
        path = tmp_path / "events.jsonl"
        path.write_text("{}\n", encoding="utf-8")

        with caplog.at_level(logging.ERROR):
            exit_code = run(str(path))

        assert exit_code == EXIT_STREAM_ERROR
        assert "Cannot read event stream" in caplog.text

    def test_returns_error_for_missing_file(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Returns 2 when the stream file does not exist."""
        with caplog.at_level(logging.ERROR):
            exit_code = run(str(tmp_path / "missing.jsonl"))

        assert exit_code == EXIT_STREAM_ERROR
        assert "Event stream not found" in caplog.text

    def test_returns_error_for_undecodable_file(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Returns 2 when the stream is not valid UTF-8."""
        path = tmp_path / "events.jsonl"
        path.write_bytes(b"\xff\xfe\x00garbage\n")

        with caplog.at_level(logging.ERROR):
            exit_code = run(str(path))

        assert exit_code == EXIT_STREAM_ERROR
        assert "Cannot read event stream" in caplog.text

    def test_returns_error_for_directory(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Returns 2 when the stream path is a directory."""
        with caplog.at_level(logging.ERROR):
            exit_code = run(str(tmp_path))

        assert exit_code == EXIT_STREAM_ERROR
        assert "Cannot read event stream" in caplog.text


def test_main_exits_with_run_result(tmp_path: Path) -> None:
    """Parses arguments and exits with the run exit code."""
    path = write_events(
        tmp_path / "events.jsonl",
        {"kind": "assembly-finished", "assembly_name": "a"},
    )

    with (
        patch("sys.argv", ["runner-reporter", "--events", str(path)]),
        patch("runner_reporter.cli.logging.basicConfig"),
        pytest.raises(SystemExit) as exc_info,
    ):
        main()

    assert exc_info.value.code == 0
