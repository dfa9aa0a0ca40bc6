"""Lifecycle events delivered by the test-execution engine."""

from collections.abc import Sequence
from decimal import Decimal
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field, model_validator

from runner_reporter.models.base import Model
from runner_reporter.models.failure import FailureInformation
from runner_reporter.models.summary import ExecutionSummary


class CleanupScope(StrEnum):
    """Fixture level whose teardown failed."""

    ERROR = "error"
    ASSEMBLY = "assembly"
    COLLECTION = "collection"
    CLASS = "class"
    METHOD = "method"
    CASE = "case"
    TEST = "test"


class AssemblyDiscoveryStarting(Model):
    """Discovery is about to begin for an assembly."""

    kind: Literal["assembly-discovery-starting"] = "assembly-discovery-starting"
    assembly_name: str
    diagnostic_messages: bool = False
    method_display: str = "ClassAndMethod"
    parallelize_test_collections: bool = True
    max_parallel_threads: int = 0


class AssemblyDiscoveryFinished(Model):
    """Discovery completed for an assembly."""

    kind: Literal["assembly-discovery-finished"] = "assembly-discovery-finished"
    assembly_name: str
    diagnostic_messages: bool = False
    test_cases_discovered: int = Field(default=0, ge=0)
    test_cases_to_run: int = Field(default=0, ge=0)


class AssemblyStarting(Model):
    """Execution is about to begin for an assembly."""

    kind: Literal["assembly-starting"] = "assembly-starting"
    assembly_name: str
    diagnostic_messages: bool = False
    parallelize_test_collections: bool = True
    max_parallel_threads: int = 0


class AssemblyFinished(Model):
    """Execution completed for an assembly."""

    kind: Literal["assembly-finished"] = "assembly-finished"
    assembly_name: str


class TestFailed(Model):
    """A single test failed."""

    __test__ = False

    kind: Literal["test-failed"] = "test-failed"
    test_display_name: str
    failure: FailureInformation


class TestSkipped(Model):
    """A single test was skipped."""

    __test__ = False

    kind: Literal["test-skipped"] = "test-skipped"
    test_display_name: str
    reason: str


class CleanupFailure(Model):
    """Tearing down a fixture raised, or the engine hit a fatal error.

    ``subject_name`` names the owning entity (assembly path, collection,
    class, method, test case or test display name). It is unused for
    ``CleanupScope.ERROR``.
    """

    kind: Literal["cleanup-failure"] = "cleanup-failure"
    scope: CleanupScope
    subject_name: str = ""
    failure: FailureInformation

    @model_validator(mode="after")
    def check_subject_name(self) -> "CleanupFailure":
        """Require the owning entity for every scope but engine errors."""
        if self.scope is not CleanupScope.ERROR and not self.subject_name:
            raise ValueError(
                f"subject_name is required for {self.scope} cleanup failures"
            )
        return self


class ExecutionSummaryReady(Model):
    """Final per-assembly summaries for the whole run."""

    kind: Literal["execution-summary"] = "execution-summary"
    clock_time: Decimal = Field(..., ge=0, description="Wall-clock seconds")
    summaries: Sequence[tuple[str, ExecutionSummary]] = Field(default_factory=list)


LifecycleEvent = Annotated[
    AssemblyDiscoveryStarting
    | AssemblyDiscoveryFinished
    | AssemblyStarting
    | AssemblyFinished
    | TestFailed
    | TestSkipped
    | CleanupFailure
    | ExecutionSummaryReady,
    Field(discriminator="kind"),
]
