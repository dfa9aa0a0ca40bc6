"""Render exception chains as indented blocks of log lines."""

from collections.abc import Sequence

from runner_reporter.models.failure import FailureInformation
from runner_reporter.sinks.base import Severity
from runner_reporter.stack_frame import LINE_BREAK, transform_frame

HEADER_INDENT = "   "
MESSAGE_INDENT = "      "
STACK_FRAME_INDENT = "         "

UNKNOWN_EXCEPTION_TYPE = "(Unknown Exception Type)"

_ESCAPES = str.maketrans({"\r": "\\r", "\n": "\\n", "\t": "\\t"})


def escape(text: str | None) -> str:
    """Make a display name safe to embed inline in a single log line."""
    if text is None:
        return ""
    return text.translate(_ESCAPES)


def split_lines(text: str | None) -> Sequence[str]:
    """Split on real line breaks only; other control characters are kept."""
    return LINE_BREAK.split(text or "")


def error_header(label: str, failure: FailureInformation) -> str:
    """Header for failures owned by a fixture or by the engine itself."""
    exception_type = failure.exception_types[0] or UNKNOWN_EXCEPTION_TYPE
    return f"[{label}] {escape(exception_type)}"


def format_failure(
    header: str, failure: FailureInformation
) -> Sequence[tuple[Severity, str]]:
    """Render a failure as a header, one block per exception, then the stack.

    Message bodies keep their tabs and are split into separate lines; only the
    header is expected to be escaped by the caller.
    """
    lines: list[tuple[Severity, str]] = [(Severity.ERROR, HEADER_INDENT + header)]

    for exception_type, message in zip(
        failure.exception_types, failure.messages, strict=True
    ):
        first, *rest = split_lines(message)
        lines.append(
            (
                Severity.INFO,
                f"{MESSAGE_INDENT}{exception_type or UNKNOWN_EXCEPTION_TYPE} : {first}",
            )
        )
        lines.extend((Severity.INFO, MESSAGE_INDENT + line) for line in rest)

    lines.extend(format_stack_trace(failure.stack_trace))
    return lines


def format_stack_trace(stack_trace: str | None) -> Sequence[tuple[Severity, str]]:
    """Render the non-empty frames of a stack trace under a marker line."""
    frames = [line for line in split_lines(stack_trace) if line]
    if not frames:
        return []

    return [
        (Severity.SEPARATOR, MESSAGE_INDENT + "Stack Trace:"),
        *(
            (Severity.INFO, STACK_FRAME_INDENT + transform_frame(frame))
            for frame in frames
        ),
    ]
