"""Utility helpers shared by the API and services."""
