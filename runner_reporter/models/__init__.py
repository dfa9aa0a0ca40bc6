"""Data model for lifecycle events, failures and execution summaries."""
