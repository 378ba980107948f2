"""Transport route search over the static catalog."""

import datetime as dt
import logging
from collections.abc import Mapping, Sequence

from travel_shared.models import TransportRoute, TransportSearchResult, iso_timestamp
from travel_shared.services.filters import TRANSPORT_FILTERS, apply_filters

logger = logging.getLogger(__name__)


def make_search_id(now: dt.datetime) -> str:
    """Build ``search-<epoch milliseconds>`` for a moment."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=dt.UTC)
    return f"search-{int(now.timestamp() * 1000)}"


def search_transport(
    routes: Sequence[TransportRoute],
    params: Mapping[str, str | None],
    now: dt.datetime | None = None,
) -> TransportSearchResult:
    """Find routes matching the search parameters.

    Args:
        routes: Transport routes in dataset order.
        params: ``origin``, ``destination`` and ``mode`` query values. Origin
            and destination only narrow the result when both are given.
        now: Moment of the search; defaults to the current time.

    Returns:
        Matching routes with a search ID and timestamp for the same moment.
    """
    now = now or dt.datetime.now(dt.UTC)
    matches = apply_filters(routes, params, TRANSPORT_FILTERS)
    search_id = make_search_id(now)

    logger.info(f"Transport search {search_id}: {len(matches)} of {len(routes)} routes")
    return TransportSearchResult(
        routes=matches,
        search_id=search_id,
        timestamp=iso_timestamp(now),
    )
