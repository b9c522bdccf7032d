"""Command-line entry point for USTRING."""
