"""Render test-execution lifecycle events as runner log lines."""
