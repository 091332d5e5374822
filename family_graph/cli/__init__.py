"""Command-line interface for Family Graph."""
