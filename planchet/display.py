"""
Plain-text rendering for the CLI.

Functions here return strings; printing is left to the caller.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from planchet.models.catalogue import (
    CoinSide,
    Issue,
    NumistaType,
    PricesResponse,
    SearchTypeResult,
)
from planchet.models.user import CollectedItem
from planchet.services.collection_summary import (
    IssuerSummary,
    display_year,
    issuer_name,
)

UNKNOWN = "<Unknown>"

SUMMARY_HEADERS = ("Issuer", "Total Items", "Oldest Item", "Newest Item")


def _or_unknown(value: int | None) -> str:
    return str(value) if value is not None else UNKNOWN


def format_collection_line(item: CollectedItem) -> str:
    """
    One dump line: "<issuer> - <title> (<year>)".

    Numista titles already lead with the denomination ("5 Cents - Victoria").
    """
    return f"{issuer_name(item)} - {item.type_info.title} ({_or_unknown(display_year(item))})"


def format_collection(items: Iterable[CollectedItem]) -> str:
    return "\n".join(format_collection_line(item) for item in items)


def format_table(headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    """Render rows as a boxed ASCII table with left-aligned cells."""
    body = [[str(cell) for cell in row] for row in rows]
    widths = [len(header) for header in headers]
    for row in body:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def render(cells: Sequence[str]) -> str:
        return "|" + "|".join(f" {cell:<{w}} " for cell, w in zip(cells, widths)) + "|"

    lines = [border, render(headers), border]
    lines.extend(render(row) for row in body)
    lines.append(border)
    return "\n".join(lines)


def format_summary(summaries: Iterable[IssuerSummary]) -> str:
    """Issuer summary table, sorted by issuer name."""
    rows = [
        (s.issuer, s.total_items, _or_unknown(s.oldest_year), _or_unknown(s.newest_year))
        for s in sorted(summaries, key=lambda s: s.issuer)
    ]
    return format_table(SUMMARY_HEADERS, rows)


def _years(min_year: int | None, max_year: int | None) -> str:
    if min_year is None and max_year is None:
        return ""
    if min_year == max_year or max_year is None:
        return f" ({min_year})"
    if min_year is None:
        return f" ({max_year})"
    return f" ({min_year}-{max_year})"


def format_search_results(results: Iterable[SearchTypeResult]) -> str:
    return "\n".join(
        f"[{r.id}] {r.issuer.name} - {r.title}{_years(r.min_year, r.max_year)}" for r in results
    )


def format_issues(issues: Iterable[Issue]) -> str:
    lines: list[str] = []
    for issue in issues:
        parts = [f"[{issue.id}]", _or_unknown(issue.year)]
        if issue.mint_letter:
            parts.append(issue.mint_letter)
        if issue.mintage is not None:
            parts.append(f"mintage {issue.mintage:,}")
        if issue.comment:
            parts.append(issue.comment)
        lines.append(" ".join(parts))
    return "\n".join(lines)


def format_prices(prices: PricesResponse) -> str:
    return format_table(
        ("Grade", f"Price ({prices.currency})"),
        [(p.grade.value.upper(), f"{p.price:.2f}") for p in prices.prices],
    )


class _DetailWriter:
    """Accumulates indented "key: value" lines, skipping empty values."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def line(self, text: str, indent: int) -> None:
        self.lines.append(" " * indent + text)

    def value(self, key: str, value: Any, indent: int) -> None:
        if value is None or value == "" or value == []:
            return
        self.line(f"{key.replace('_', ' ')}: {value}", indent)

    def listing(self, key: str, entries: list[str] | None, indent: int) -> None:
        if not entries:
            return
        self.line(f"{key.replace('_', ' ')}:", indent)
        for entry in entries:
            self.line(f"- {entry}", indent + 2)

    def side(self, key: str, side: CoinSide | None, indent: int) -> None:
        if side is None:
            return
        self.line(f"{key}:", indent)
        self.value("engravers", ", ".join(side.engravers), indent + 2)
        self.value("designers", ", ".join(side.designers), indent + 2)
        self.value("description", side.description, indent + 2)
        self.value("lettering", side.lettering, indent + 2)
        self.value("unabridged_legend", side.unabridged_legend, indent + 2)
        self.value("lettering_translation", side.lettering_translation, indent + 2)
        self.value("picture", side.picture, indent + 2)


def format_type(numista_type: NumistaType, indent: int = 0) -> str:
    """Detailed multi-line view of a catalogue type."""
    t = numista_type
    out = _DetailWriter()

    out.value("id", t.id, indent)
    out.value("url", t.url, indent)
    out.value("title", t.title, indent)
    out.value("category", t.category.value.capitalize(), indent)
    out.line("issuer:", indent)
    out.value("code", t.issuer.code, indent + 2)
    out.value("name", t.issuer.name, indent + 2)
    out.value("min_year", t.min_year, indent)
    out.value("max_year", t.max_year, indent)
    out.value("type", t.type_name, indent)
    if t.value is not None:
        out.value("value", t.value.text, indent)
    out.listing("ruling_authorities", [r.name for r in t.ruler or []], indent)
    out.value("shape", t.shape, indent)
    if t.composition is not None:
        out.value("composition", t.composition.text, indent)
    if t.technique is not None:
        out.value("technique", t.technique.text, indent)
    if t.demonetization is not None:
        out.line("demonetization:", indent)
        out.value("is_demonetized", t.demonetization.is_demonetized, indent + 2)
        out.value("demonetization_date", t.demonetization.demonetization_date, indent + 2)
    out.value("weight", t.weight, indent)
    out.value("size", t.size, indent)
    out.value("thickness", t.thickness, indent)
    out.side("obverse", t.obverse, indent)
    out.side("reverse", t.reverse, indent)
    out.side("edge", t.edge, indent)
    out.side("watermark", t.watermark, indent)
    out.value("mints", ", ".join(m.name for m in t.mints or [] if m.name), indent)
    out.listing("printers", [p.name for p in t.printers or []], indent)
    out.value("series", t.series, indent)
    out.value("commemorated_topic", t.commemorated_topic, indent)
    out.value("comments", t.comments, indent)
    out.value("tags", ", ".join(t.tags), indent)
    out.listing("related_types", [f"[{r.id}] {r.title}" for r in t.related_types or []], indent)
    out.listing(
        "references", [f"{r.catalogue.code}: {r.number}" for r in t.references or []], indent
    )
    return "\n".join(out.lines)
