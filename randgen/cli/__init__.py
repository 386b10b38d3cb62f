"""Command-line interface for the weighted random generator."""
