"""Runner logger that records formatted lines."""

from dataclasses import dataclass, field

from runner_reporter.sinks.base import RunnerLogger, Severity
from runner_reporter.stack_frame import StackFrameInfo


@dataclass(kw_only=True)
class SpyRunnerLogger(RunnerLogger):
    """Keep every line exactly as a console sink would print it."""

    messages: list[str] = field(default_factory=list)

    def log(
        self,
        severity: Severity,
        message: str,
        location: StackFrameInfo | None = None,
    ) -> None:
        self.messages.append(self.format_line(severity, message, location))
