"""Catalog data loading and management service.

The catalog (accommodations, packages, excursions, transport routes) is static reference data
bundled as JSON. It is loaded once per process into an immutable ``Catalog``
and handed to route handlers; nothing ever writes to it afterwards.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from travel_shared.models import Accommodation, Excursion, TransportRoute, TravelPackage

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"

ACCOMMODATIONS_FILE = "accommodations.json"
PACKAGES_FILE = "packages.json"
EXCURSIONS_FILE = "excursions.json"
TRANSPORT_FILE = "transport.json"


class Catalog(BaseModel):
    """Read-only snapshot of every dataset."""

    model_config = ConfigDict(frozen=True)

    accommodations: tuple[Accommodation, ...] = ()
    packages: tuple[TravelPackage, ...] = ()
    excursions: tuple[Excursion, ...] = ()
    transport_routes: tuple[TransportRoute, ...] = ()


# In-memory catalog, loaded lazily on first access
_CATALOG: Catalog | None = None


def get_catalog_data_store() -> Catalog | None:
    """Get the current catalog, or None if nothing is loaded yet."""
    return _CATALOG


def set_catalog_data_store(catalog: Catalog | None) -> None:
    """Set the catalog (for testing or initialization).

    Passing None clears it so the next ``ensure_catalog_loaded`` reloads.
    """
    global _CATALOG
    _CATALOG = catalog


def build_catalog_from_dicts(
    accommodations: list[dict[str, Any]] | None = None,
    packages: list[dict[str, Any]] | None = None,
    excursions: list[dict[str, Any]] | None = None,
    transport_routes: list[dict[str, Any]] | None = None,
) -> Catalog:
    """Build a Catalog from raw camelCase dictionaries.

    Useful for loading from JSON files or test fixtures.

    Raises:
        pydantic.ValidationError: If a record does not match its model.
    """
    return Catalog(
        accommodations=tuple(Accommodation.model_validate(a) for a in accommodations or []),
        packages=tuple(TravelPackage.model_validate(p) for p in packages or []),
        excursions=tuple(Excursion.model_validate(e) for e in excursions or []),
        transport_routes=tuple(
            TransportRoute.model_validate(t) for t in transport_routes or []
        ),
    )


def _read_records(path: Path, key: str) -> list[dict[str, Any]]:
    """Read the list stored under ``key`` in a dataset file.

    A missing file is logged and treated as an empty dataset.

    Raises:
        json.JSONDecodeError: If the file is not valid JSON.
    """
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Catalog file {path} not found, starting with empty {key}")
        return []
    return data.get(key, [])


def load_catalog_from_json(data_dir: Path | str | None = None) -> Catalog:
    """Load every dataset from a directory of JSON files.

    Args:
        data_dir: Directory holding the dataset files. If None, uses the
            bundled data directory.

    Returns:
        The loaded Catalog, which also becomes the current data store.
    """
    global _CATALOG

    data_dir = Path(data_dir) if data_dir is not None else DEFAULT_DATA_DIR

    catalog = build_catalog_from_dicts(
        accommodations=_read_records(data_dir / ACCOMMODATIONS_FILE, "accommodations"),
        packages=_read_records(data_dir / PACKAGES_FILE, "packages"),
        excursions=_read_records(data_dir / EXCURSIONS_FILE, "excursions"),
        transport_routes=_read_records(data_dir / TRANSPORT_FILE, "routes"),
    )
    _CATALOG = catalog

    logger.info(
        f"Loaded catalog from {data_dir}: "
        f"{len(catalog.accommodations)} accommodations, "
        f"{len(catalog.packages)} packages, "
        f"{len(catalog.excursions)} excursions, "
        f"{len(catalog.transport_routes)} transport routes"
    )
    return catalog


def ensure_catalog_loaded(data_dir: Path | str | None = None) -> Catalog:
    """Return the catalog, loading it from ``data_dir`` on first use."""
    if _CATALOG is None:
        return load_catalog_from_json(data_dir)
    return _CATALOG
