"""Abstract base class for runner log sinks."""

from abc import ABC, abstractmethod
from enum import Enum

from runner_reporter.stack_frame import StackFrameInfo


class Severity(Enum):
    """Classification of a rendered line, used only to pick its tag."""

    ERROR = "Err"
    WARNING = "Wrn"
    INFO = "Imp"
    SEPARATOR = "---"

    @property
    def tag(self) -> str:
        """Three-character tag shown in front of the line."""
        return self.value


class RunnerLogger(ABC):
    """Append-only sink for rendered lines.

    Implementations receive lines strictly in the order they were rendered
    and are never read back by the reporter.
    """

    @abstractmethod
    def log(
        self,
        severity: Severity,
        message: str,
        location: StackFrameInfo | None = None,
    ) -> None:
        """Append one line.

        Args:
            severity: Classification of the line
            message: Rendered text, without any tag
            location: Source frame the line is attributed to, if known

        """

    def log_error(self, message: str, location: StackFrameInfo | None = None) -> None:
        """Append an error line."""
        self.log(Severity.ERROR, message, location)

    def log_warning(self, message: str, location: StackFrameInfo | None = None) -> None:
        """Append a warning line."""
        self.log(Severity.WARNING, message, location)

    def log_important_message(
        self, message: str, location: StackFrameInfo | None = None
    ) -> None:
        """Append an informational line."""
        self.log(Severity.INFO, message, location)

    def log_message(self, message: str, location: StackFrameInfo | None = None) -> None:
        """Append a separator line."""
        self.log(Severity.SEPARATOR, message, location)

    @staticmethod
    def format_line(
        severity: Severity,
        message: str,
        location: StackFrameInfo | None = None,
    ) -> str:
        """Prefix a line with its tag and, when known, its source location."""
        if location is None:
            return f"[{severity.tag}] => {message}"
        return f"[{severity.tag} @ {location}] => {message}"
