"""Query filter engine for the static catalog datasets.

A filter table maps a query-string key to a predicate factory. Given the raw
query values, every key that is present (and non-empty) contributes one
predicate; records are kept when all predicates hold. Predicates are pure and
independent, so the order they run in never changes the result, and the
output preserves dataset order.

A table key may also be a tuple of query keys. Its factory takes one value
per key and only runs when every one of them is present, which is how a
filter on a pair of parameters (an origin and a destination) is expressed.

Numeric bounds parse their value the way browsers' ``parseInt`` does: the
leading run of ASCII digits counts and anything after it is ignored, and a
``0x`` prefix reads the digits as hexadecimal. A value with no leading digits
cannot be parsed and the bound then matches nothing, so ``minPrice=abc``
yields an empty result instead of an error. Non-ASCII digits such as
``"٥٠"`` are not digits here.
"""

import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

R = TypeVar("R")

Predicate = Callable[[Any], bool]
PredicateFactory = Callable[..., Predicate]
FilterTable = Mapping[str | tuple[str, ...], PredicateFactory]

_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def parse_int_prefix(value: str) -> int | None:
    """Parse the leading integer of ``value``.

    Returns:
        The integer, or None when ``value`` does not start with digits
        (after optional whitespace and sign), or is a bare ``0x``.
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        number = int(hex_digits, 16)
    else:
        number = int(digits)
    return -number if sign == "-" else number


def _never(_record: Any) -> bool:
    return False


def equals(getter: Callable[[Any], Any]) -> PredicateFactory:
    """Exact, case-sensitive equality against the query value."""

    def factory(value: str) -> Predicate:
        return lambda record: getter(record) == value

    return factory


def equals_unless(getter: Callable[[Any], Any], wildcard: str) -> PredicateFactory:
    """Exact equality, except that ``wildcard`` keeps every record."""

    def factory(value: str) -> Predicate:
        if value == wildcard:
            return lambda record: True
        return lambda record: getter(record) == value

    return factory


def contains_casefold(getter: Callable[[Any], str]) -> PredicateFactory:
    """Case-insensitive substring match."""

    def factory(value: str) -> Predicate:
        needle = value.lower()
        return lambda record: needle in getter(record).lower()

    return factory


def any_equals(getter: Callable[[Any], Iterable[Any]]) -> PredicateFactory:
    """Keep records where any element of a collection equals the value."""

    def factory(value: str) -> Predicate:
        return lambda record: any(item == value for item in getter(record))

    return factory


def flag(getter: Callable[[Any], bool], enabling_value: str = "true") -> PredicateFactory:
    """Boolean flag: only ``enabling_value`` narrows, anything else is ignored."""

    def factory(value: str) -> Predicate:
        if value != enabling_value:
            return lambda record: True
        return lambda record: bool(getter(record))

    return factory


def at_least(getter: Callable[[Any], float]) -> PredicateFactory:
    """Inclusive numeric lower bound."""

    def factory(value: str) -> Predicate:
        bound = parse_int_prefix(value)
        if bound is None:
            return _never
        return lambda record: getter(record) >= bound

    return factory


def at_most(getter: Callable[[Any], float]) -> PredicateFactory:
    """Inclusive numeric upper bound."""

    def factory(value: str) -> Predicate:
        bound = parse_int_prefix(value)
        if bound is None:
            return _never
        return lambda record: getter(record) <= bound

    return factory


def endpoints_contain(
    start: Callable[[Any], str],
    end: Callable[[Any], str],
) -> PredicateFactory:
    """Case-insensitive substring match on both ends of a journey.

    Used under a ``(origin, destination)`` table key, so it only applies when
    both values are given.
    """

    def factory(origin: str, destination: str) -> Predicate:
        origin_needle = origin.lower()
        destination_needle = destination.lower()
        return lambda record: (
            origin_needle in start(record).lower()
            and destination_needle in end(record).lower()
        )

    return factory


def build_predicates(
    params: Mapping[str, str | None],
    table: FilterTable,
) -> list[Predicate]:
    """Turn query values into predicates, skipping absent and empty keys.

    Keys with no entry in ``table`` are ignored. A tuple key produces a
    predicate only when all of its keys are present.
    """
    predicates: list[Predicate] = []
    for key, factory in table.items():
        keys = key if isinstance(key, tuple) else (key,)
        values = [params.get(k) for k in keys]
        if all(values):
            predicates.append(factory(*values))
    return predicates


def apply_filters(
    records: Sequence[R],
    params: Mapping[str, str | None],
    table: FilterTable,
) -> list[R]:
    """Narrow ``records`` to those matching every present filter.

    Args:
        records: Dataset in its published order.
        params: Raw query values keyed by query-string name.
        table: Filter table for this dataset.

    Returns:
        Matching records in their original order. With no filters present
        this is every record.
    """
    predicates = build_predicates(params, table)
    return [record for record in records if all(p(record) for p in predicates)]


def find_by_id(records: Iterable[R], record_id: str) -> R | None:
    """Return the first record whose ``id`` equals ``record_id``, or None."""
    return next((r for r in records if getattr(r, "id", None) == record_id), None)


ACCOMMODATION_FILTERS: dict[str, PredicateFactory] = {
    "country": equals(lambda a: a.location.country),
    "type": equals(lambda a: a.type),
    "minPrice": at_least(lambda a: a.price_per_night),
    "maxPrice": at_most(lambda a: a.price_per_night),
}

PACKAGE_FILTERS: dict[str, PredicateFactory] = {
    "featured": flag(lambda p: p.featured),
    "country": any_equals(lambda p: (loc.country for loc in p.locations)),
    "minDuration": at_least(lambda p: p.duration),
    "maxDuration": at_most(lambda p: p.duration),
}

EXCURSION_FILTERS: dict[str, PredicateFactory] = {
    "category": equals_unless(lambda e: e.category, wildcard="all"),
    "location": contains_casefold(lambda e: e.location.city),
    "minPrice": at_least(lambda e: e.price),
    "maxPrice": at_most(lambda e: e.price),
}

TRANSPORT_FILTERS: dict[str | tuple[str, ...], PredicateFactory] = {
    ("origin", "destination"): endpoints_contain(
        lambda r: r.origin.city, lambda r: r.destination.city
    ),
    "mode": any_equals(lambda r: (segment.mode for segment in r.segments)),
}
