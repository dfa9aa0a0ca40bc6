"""CLI entry point that replays a recorded event stream."""

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from runner_reporter.event_loader import EventStreamError, iter_events, load_events
from runner_reporter.handler import ReporterMessageHandler
from runner_reporter.models.events import LifecycleEvent
from runner_reporter.sinks.logging_sink import LoggingRunnerLogger

EXIT_STREAM_ERROR = 2


def replay(handler: ReporterMessageHandler, events: Iterable[LifecycleEvent]) -> int:
    """Feed events to the handler in order and return how many were handled."""
    count = 0
    for event in events:
        handler.on_message(event)
        count += 1
    return count


def run(events_path: str) -> int:
    """Render every event of a stream and return exit code."""
    log = logging.getLogger("runner_reporter.cli")
    handler = ReporterMessageHandler(logger=LoggingRunnerLogger())

    if events_path == "-":
        events = iter_events(sys.stdin)
    else:
        events = load_events(Path(events_path))

    try:
        count = replay(handler, events)
    except EventStreamError as e:
        log.error("Cannot read event stream %s: %s", events_path, e)
        return EXIT_STREAM_ERROR
    except FileNotFoundError:
        log.error("Event stream not found: %s", events_path)
        return EXIT_STREAM_ERROR
    except (OSError, UnicodeDecodeError) as e:
        log.error("Cannot read event stream %s: %s", events_path, e)
        return EXIT_STREAM_ERROR

    log.debug("Replayed %d event(s)", count)
    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Render recorded test lifecycle events as runner log lines"
    )
    parser.add_argument(
        "--events",
        default="-",
        help="JSON Lines file with one event per line ('-' reads stdin)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Minimum level of lines to show",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(args.events))


if __name__ == "__main__":  # pragma: no cover
    main()
