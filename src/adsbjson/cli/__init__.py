"""Command-line interface for adsbjson."""
