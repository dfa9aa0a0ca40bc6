"""Decode lifecycle events from a JSON Lines stream."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from runner_reporter.models.events import LifecycleEvent

log = logging.getLogger(__name__)

_EVENT_ADAPTER: TypeAdapter[LifecycleEvent] = TypeAdapter(LifecycleEvent)


class EventStreamError(Exception):
    """Raised when a line of an event stream cannot be decoded."""


def parse_event(data: Mapping[str, Any]) -> LifecycleEvent:
    """Validate a decoded JSON object into its event variant."""
    return _EVENT_ADAPTER.validate_python(data)


def iter_events(lines: Iterable[str]) -> Iterator[LifecycleEvent]:
    """Yield events from JSON Lines text, one object per line.

    Blank lines are skipped.

    Raises:
        EventStreamError: If a line is not a valid event

    """
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield _EVENT_ADAPTER.validate_json(line)
        except ValidationError as e:
            raise EventStreamError(
                f"Invalid event on line {line_number}: {e.error_count()} error(s)\n{e}"
            ) from e


def load_events(path: Path) -> Iterator[LifecycleEvent]:
    """Yield events from a JSON Lines file."""
    log.debug("Reading events from %s", path)
    with path.open(encoding="utf-8") as f:
        yield from iter_events(f)
