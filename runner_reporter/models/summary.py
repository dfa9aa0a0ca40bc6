"""Per-assembly execution counters."""

from decimal import Decimal

from pydantic import Field

from runner_reporter.models.base import Model


class ExecutionSummary(Model):
    """Counters reported for one test assembly."""

    total: int = Field(default=0, ge=0, description="Tests run")
    errors: int = Field(default=0, ge=0, description="Errors outside of tests")
    failed: int = Field(default=0, ge=0, description="Failed tests")
    skipped: int = Field(default=0, ge=0, description="Skipped tests")
    time: Decimal = Field(
        default=Decimal(0), ge=0, description="Execution time in seconds"
    )
