"""Helpers for testing code that produces or renders lifecycle events."""
