"""Shared domain package for the travel catalog API.

Holds the pydantic models, the bundled catalog datasets, and the services
(filtering, mock payments, seat availability) used by the HTTP layer.
"""

__version__ = "0.1.0"
