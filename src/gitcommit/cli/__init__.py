"""Command-line interface for gitcommit."""
