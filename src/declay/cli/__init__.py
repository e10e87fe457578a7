"""Command-line interface for declay."""
