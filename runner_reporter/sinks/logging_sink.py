"""Runner log sink backed by the standard logging module."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from runner_reporter.sinks.base import RunnerLogger, Severity
from runner_reporter.stack_frame import StackFrameInfo

SEVERITY_TO_LEVEL: Mapping[Severity, int] = {
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.INFO: logging.INFO,
    Severity.SEPARATOR: logging.INFO,
}


@dataclass(frozen=True, kw_only=True)
class LoggingRunnerLogger(RunnerLogger):
    """Forward every tagged line to a ``logging.Logger``."""

    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("runner_reporter")
    )

    def log(
        self,
        severity: Severity,
        message: str,
        location: StackFrameInfo | None = None,
    ) -> None:
        """Emit the tagged line at the level matching its severity."""
        self.logger.log(
            SEVERITY_TO_LEVEL[severity],
            "%s",
            self.format_line(severity, message, location),
        )
