"""Destinations for rendered runner log lines."""

from runner_reporter.sinks.base import RunnerLogger, Severity
from runner_reporter.sinks.logging_sink import LoggingRunnerLogger

__all__ = ["LoggingRunnerLogger", "RunnerLogger", "Severity"]
