"""Command-line interface for gitinternals."""
