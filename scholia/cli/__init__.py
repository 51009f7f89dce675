"""Command-line interface for Scholia."""
