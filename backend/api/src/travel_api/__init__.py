"""FastAPI REST API for the travel catalog."""

__version__ = "0.1.0"
