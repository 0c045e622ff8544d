"""
A typed async client for the Numista catalogue API.

Example:
    from planchet import ClientBuilder, SearchTypesParams

    client = ClientBuilder().api_key("YOUR_API_KEY").build()
    response = await client.search_types(SearchTypesParams().q("victoria"))
    print(f"Found {response.count} types")
"""

from planchet.client import Client, ClientBuilder
from planchet.errors import (
    ApiError,
    ClientError,
    ConfigurationError,
    DecodeError,
    KnownApiError,
    TransportError,
)
from planchet.models import GetCollectedItemsParams, SearchTypesParams
from planchet.services import IssuerSummary, sort_for_display, summarize_by_issuer

__all__ = [
    "ApiError",
    "Client",
    "ClientBuilder",
    "ClientError",
    "ConfigurationError",
    "DecodeError",
    "GetCollectedItemsParams",
    "IssuerSummary",
    "KnownApiError",
    "SearchTypesParams",
    "TransportError",
    "sort_for_display",
    "summarize_by_issuer",
]
