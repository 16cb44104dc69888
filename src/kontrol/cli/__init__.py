"""Command-line interface for kontrol."""
