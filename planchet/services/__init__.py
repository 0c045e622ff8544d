from planchet.services.collection_summary import (
    UNKNOWN_ISSUER,
    IssuerSummary,
    sort_for_display,
    summarize_by_issuer,
)

__all__ = [
    "UNKNOWN_ISSUER",
    "IssuerSummary",
    "sort_for_display",
    "summarize_by_issuer",
]
