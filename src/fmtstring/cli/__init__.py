"""Command-line interface for fmtstring."""
