"""Command-line interface for MindStore."""
