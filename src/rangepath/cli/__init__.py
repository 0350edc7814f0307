"""Command-line interface for rangepath."""
