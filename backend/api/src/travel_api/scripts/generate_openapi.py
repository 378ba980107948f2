#!/usr/bin/env python3
"""Generate the OpenAPI document for the travel catalog API.

The document comes from FastAPI's native schema generation, with a
``servers`` entry so clients resolve paths against the deployment URL.

Usage:
    python -m travel_api.scripts.generate_openapi
    python -m travel_api.scripts.generate_openapi --server-url https://api.example.com
    python -m travel_api.scripts.generate_openapi --output openapi.json

Output:
    JSON to stdout (or to --output).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi


def generate_openapi(app: FastAPI | None = None, server_url: str | None = None) -> dict[str, Any]:
    """Build the OpenAPI document.

    Args:
        app: Application to describe. Defaults to ``travel_api.main.app``.
        server_url: Base URL added under ``servers``. Omitted when None.

    Returns:
        OpenAPI schema dict.
    """
    if app is None:
        from travel_api.main import app

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )
    if server_url:
        schema["servers"] = [{"url": server_url.rstrip("/")}]
    return schema


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--server-url", help="Base URL for the servers section")
    parser.add_argument("--output", type=Path, help="Write to this file instead of stdout")
    args = parser.parse_args(argv)

    document = json.dumps(generate_openapi(server_url=args.server_url), indent=2)

    if args.output:
        args.output.write_text(document + "\n")
    else:
        sys.stdout.write(document + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
