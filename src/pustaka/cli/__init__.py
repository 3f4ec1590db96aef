"""Command-line entrypoints printing JSON results."""
