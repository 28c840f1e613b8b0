"""Command-line interface for USERFIELDS."""
