"""Command-line helpers for the travel catalog API."""
