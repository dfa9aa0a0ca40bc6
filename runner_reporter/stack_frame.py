"""Locate source positions in raw stack traces."""

import re
from dataclasses import dataclass

from runner_reporter.models.failure import FailureInformation

FRAME_PATTERN = re.compile(
    r"^\s*at (?P<member>.*) in (?P<path>.*):line (?P<line>\d+)\s*$"
)
LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, kw_only=True)
class StackFrameInfo:
    """Source file and line a failure block is attributed to."""

    file_path: str
    line_number: int

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line_number}"

    @classmethod
    def from_failure(cls, failure: FailureInformation) -> "StackFrameInfo | None":
        """Locate the frame of the representative stack trace."""
        return find_stack_frame(failure.stack_trace)


def find_stack_frame(stack_trace: str | None) -> StackFrameInfo | None:
    """Return the location of the first frame that names a source file.

    Args:
        stack_trace: Raw, possibly multi-line stack trace

    Returns:
        The path (verbatim, separators untouched) and line number of the first
        ``at <member> in <path>:line <N>`` frame, or None when no line matches

    """
    if not stack_trace:
        return None

    for line in LINE_BREAK.split(stack_trace):
        if match := FRAME_PATTERN.match(line):
            return StackFrameInfo(
                file_path=match["path"], line_number=int(match["line"])
            )
    return None


def transform_frame(line: str) -> str:
    """Rewrite a source frame as ``<path>(<N>,0): at <member>``."""
    if match := FRAME_PATTERN.match(line):
        return f"{match['path']}({match['line']},0): at {match['member']}"
    return line
