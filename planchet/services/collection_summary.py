"""
Collection aggregation.

Sorts a fetched collection for display and summarizes it per issuer.
Pure functions over already-fetched items; no I/O.

Resolution rules:
- issuer: name of the item's type issuer, UNKNOWN_ISSUER when absent
- year: gregorian year of the item's issue, None when the item has no
  issue or the issue has no gregorian year
- items without a year sort before all dated items of the same issuer
"""

from collections.abc import Iterable
from dataclasses import dataclass

from planchet.models.user import CollectedItem

UNKNOWN_ISSUER = "<Unknown>"


@dataclass(frozen=True, slots=True)
class IssuerSummary:
    """
    Aggregate over one issuer's items.

    Attributes:
        issuer: Issuer name the items were grouped by
        total_items: Number of collected items (not pieces) for the issuer
        oldest_year: Earliest gregorian year, None if no item has a year
        newest_year: Latest gregorian year, None if no item has a year
    """

    issuer: str
    total_items: int
    oldest_year: int | None = None
    newest_year: int | None = None


def issuer_name(item: CollectedItem) -> str:
    issuer = item.type_info.issuer
    return issuer.name if issuer is not None else UNKNOWN_ISSUER


def gregorian_year(item: CollectedItem) -> int | None:
    return item.issue.gregorian_year if item.issue is not None else None


def display_year(item: CollectedItem) -> int | None:
    """Year as written on the piece, for output."""
    return item.issue.year if item.issue is not None else None


def _display_key(item: CollectedItem) -> tuple[str, bool, int, str]:
    year = gregorian_year(item)
    return (issuer_name(item), year is not None, year or 0, item.type_info.title)


def sort_for_display(items: Iterable[CollectedItem]) -> list[CollectedItem]:
    """
    Order items by issuer name, gregorian year, then title (all ascending).

    The sort is stable: items with equal keys keep their input order.
    """
    return sorted(items, key=_display_key)


def summarize_by_issuer(items: Iterable[CollectedItem]) -> dict[str, IssuerSummary]:
    """
    Group items by exact issuer name and compute count and year bounds.

    Undated items count toward the total but not the bounds.

    Returns:
        Dict mapping issuer name to its summary, in order of first appearance
    """
    counts: dict[str, int] = {}
    bounds: dict[str, tuple[int, int]] = {}

    for item in items:
        name = issuer_name(item)
        counts[name] = counts.get(name, 0) + 1

        year = gregorian_year(item)
        if year is None:
            continue
        if name in bounds:
            oldest, newest = bounds[name]
            bounds[name] = (min(oldest, year), max(newest, year))
        else:
            bounds[name] = (year, year)

    summaries: dict[str, IssuerSummary] = {}
    for name, count in counts.items():
        if name in bounds:
            oldest, newest = bounds[name]
            summaries[name] = IssuerSummary(name, count, oldest, newest)
        else:
            summaries[name] = IssuerSummary(name, count)
    return summaries
