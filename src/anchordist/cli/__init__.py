"""Command-line interface for anchordist."""
