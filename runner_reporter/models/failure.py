"""Failure information carried by failed tests and cleanup failures."""

from collections.abc import Sequence

from pydantic import Field, model_validator

from runner_reporter.models.base import Model


class FailureInformation(Model):
    """Chain of exceptions, outermost first.

    The three sequences are parallel: entry ``i`` of each describes the same
    exception.
    """

    exception_types: Sequence[str | None] = Field(
        ..., description="Exception type names"
    )
    messages: Sequence[str | None] = Field(..., description="Exception messages")
    stack_traces: Sequence[str | None] = Field(
        ..., description="Raw stack traces"
    )

    @model_validator(mode="after")
    def check_parallel_sequences(self) -> "FailureInformation":
        """Reject chains that are empty or whose sequences differ in length."""
        lengths = {
            len(self.exception_types),
            len(self.messages),
            len(self.stack_traces),
        }
        if len(lengths) != 1:
            raise ValueError(
                "exception_types, messages and stack_traces must have the same "
                f"length (got {len(self.exception_types)}, {len(self.messages)}, "
                f"{len(self.stack_traces)})"
            )
        if 0 in lengths:
            raise ValueError("failure information must describe at least one exception")
        return self

    @property
    def stack_trace(self) -> str:
        """Representative stack trace of the chain."""
        return self.stack_traces[0] or ""
