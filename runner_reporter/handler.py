"""Turn lifecycle events into runner log lines."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from runner_reporter.failure_formatter import (
    HEADER_INDENT,
    MESSAGE_INDENT,
    error_header,
    escape,
    format_failure,
)
from runner_reporter.models.events import (
    AssemblyDiscoveryFinished,
    AssemblyDiscoveryStarting,
    AssemblyFinished,
    AssemblyStarting,
    CleanupFailure,
    CleanupScope,
    ExecutionSummaryReady,
    TestFailed,
    TestSkipped,
)
from runner_reporter.models.failure import FailureInformation
from runner_reporter.sinks.base import RunnerLogger, Severity
from runner_reporter.stack_frame import StackFrameInfo
from runner_reporter.summary_table import format_summary

log = logging.getLogger(__name__)

FATAL_ERROR_LABEL = "FATAL ERROR"

CLEANUP_LABELS: Mapping[CleanupScope, str] = {
    CleanupScope.ASSEMBLY: "Test Assembly Cleanup Failure",
    CleanupScope.COLLECTION: "Test Collection Cleanup Failure",
    CleanupScope.CLASS: "Test Class Cleanup Failure",
    CleanupScope.METHOD: "Test Method Cleanup Failure",
    CleanupScope.CASE: "Test Case Cleanup Failure",
    CleanupScope.TEST: "Test Cleanup Failure",
}


@dataclass(frozen=True, kw_only=True)
class RenderedLine:
    """A line ready for the sink."""

    severity: Severity
    message: str
    location: StackFrameInfo | None = None


def cleanup_label(event: CleanupFailure) -> str:
    """Label naming the fixture whose cleanup failed."""
    if event.scope is CleanupScope.ERROR:
        return FATAL_ERROR_LABEL
    return f"{CLEANUP_LABELS[event.scope]} ({escape(event.subject_name)})"


def thread_count_text(max_parallel_threads: int) -> str:
    """Describe the thread limit; negative means no limit."""
    if max_parallel_threads < 0:
        return "unlimited"
    return str(max_parallel_threads)


def on_off(flag: bool) -> str:
    return "on" if flag else "off"


@dataclass(frozen=True, kw_only=True)
class ReporterMessageHandler:
    """Render each lifecycle event and forward its lines to a runner logger.

    Rendering is a pure function of the event; the handler keeps no state
    between events.
    """

    logger: RunnerLogger

    def on_message(self, event: object) -> None:
        """Render an event and append its lines to the logger in order."""
        lines = self.render(event)
        log.debug("Rendered %s into %d line(s)", type(event).__name__, len(lines))
        for line in lines:
            self.logger.log(line.severity, line.message, line.location)

    def render(self, event: object) -> Sequence[RenderedLine]:
        """Render an event without touching the logger."""
        match event:
            case AssemblyDiscoveryStarting():
                return [self._info(self._discovery_starting(event))]
            case AssemblyDiscoveryFinished():
                return [self._info(self._discovery_finished(event))]
            case AssemblyStarting():
                return [self._info(self._assembly_starting(event))]
            case AssemblyFinished():
                return [self._info(f"Finished:    {escape(event.assembly_name)}")]
            case TestFailed():
                header = f"{escape(event.test_display_name)} [FAIL]"
                return self._failure(header, event.failure)
            case TestSkipped():
                name = escape(event.test_display_name)
                return [
                    RenderedLine(
                        severity=Severity.WARNING,
                        message=f"{HEADER_INDENT}{name} [SKIP]",
                    ),
                    self._info(MESSAGE_INDENT + escape(event.reason)),
                ]
            case CleanupFailure():
                header = error_header(cleanup_label(event), event.failure)
                return self._failure(header, event.failure)
            case ExecutionSummaryReady():
                return [
                    self._info(line)
                    for line in format_summary(event.summaries, event.clock_time)
                ]
            case _:
                log.debug("Ignoring unsupported event %r", type(event).__name__)
                return []

    @staticmethod
    def _info(message: str) -> RenderedLine:
        return RenderedLine(severity=Severity.INFO, message=message)

    @staticmethod
    def _failure(header: str, failure: FailureInformation) -> Sequence[RenderedLine]:
        location = StackFrameInfo.from_failure(failure)
        return [
            RenderedLine(severity=severity, message=message, location=location)
            for severity, message in format_failure(header, failure)
        ]

    @staticmethod
    def _discovery_starting(event: AssemblyDiscoveryStarting) -> str:
        message = f"Discovering: {escape(event.assembly_name)}"
        if not event.diagnostic_messages:
            return message
        return (
            f"{message} (method display = {event.method_display}, "
            "parallel test collections = "
            f"{on_off(event.parallelize_test_collections)}, "
            f"max threads = {thread_count_text(event.max_parallel_threads)})"
        )

    @staticmethod
    def _discovery_finished(event: AssemblyDiscoveryFinished) -> str:
        message = f"Discovered:  {escape(event.assembly_name)}"
        if not event.diagnostic_messages:
            return message
        return (
            f"{message} (running {event.test_cases_to_run} of "
            f"{event.test_cases_discovered} test cases)"
        )

    @staticmethod
    def _assembly_starting(event: AssemblyStarting) -> str:
        message = f"Starting:    {escape(event.assembly_name)}"
        if not event.diagnostic_messages:
            return message
        return (
            f"{message} (parallel test collections = "
            f"{on_off(event.parallelize_test_collections)}, "
            f"max threads = {thread_count_text(event.max_parallel_threads)})"
        )
