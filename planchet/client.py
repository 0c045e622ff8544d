"""
Numista API client.

Each method builds the endpoint path and query, sends it through the
Transport, and decodes the body with the matching decoder. A non-success
status becomes ApiError before any decoding is attempted.

Usage:
    client = ClientBuilder().api_key("...").build()
    response = await client.search_types(SearchTypesParams().q("victoria"))
"""

import logging
from collections.abc import AsyncIterator, Callable, Mapping
from typing import Any, TypeVar

from planchet.config import DEFAULT_API_URL
from planchet.errors import ApiError, ConfigurationError
from planchet.models.catalogue import (
    CataloguesResponse,
    Issue,
    IssuersResponse,
    MintDetail,
    MintsResponse,
    NumistaType,
    PricesResponse,
    Publication,
    SearchByImageResponse,
    SearchTypeResult,
    SearchTypesResponse,
)
from planchet.models.request import (
    AddCollectedItemParams,
    EditCollectedItemParams,
    GetCollectedItemsParams,
    OAuthTokenParams,
    SearchByImageParams,
    SearchTypesParams,
)
from planchet.models.user import (
    CollectedItem,
    CollectedItems,
    CollectionsResponse,
    OAuthToken,
    User,
)
from planchet.parsers import numista
from planchet.transport import RawResponse, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _raise_for_status(response: RawResponse) -> None:
    if not response.is_success:
        raise ApiError(response.status, numista.decode_api_error_message(response.body))


class Client:
    """
    Async client for the Numista v3 API.

    Holds only immutable configuration (transport and language), so a
    single instance can be shared by concurrent callers.
    """

    def __init__(self, transport: Transport, lang: str | None = None) -> None:
        self.transport = transport
        self.lang = lang

    async def _call(
        self,
        method: str,
        path: str,
        decoder: Callable[[bytes], T],
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> T:
        query = dict(params or {})
        if self.lang:
            query["lang"] = self.lang

        response = await self.transport.send(method, path, params=query, json=json)
        _raise_for_status(response)
        return decoder(response.body)

    async def search_types(self, params: SearchTypesParams) -> SearchTypesResponse:
        """
        Search the catalogue.

        Args:
            params: Search filters and pagination

        Returns:
            One page of results plus the total match count
        """
        return await self._call("GET", "/types", numista.decode_search_response, params.build())

    async def iter_types(self, params: SearchTypesParams) -> AsyncIterator[SearchTypeResult]:
        """
        Yield every type matching `params`, fetching pages as needed.

        Starts at page 1 regardless of any page set on `params`. Stops once
        the reported count has been yielded or a page comes back empty.
        Errors propagate on the page that failed.
        """
        page = 1
        fetched = 0
        total: int | None = None

        while total is None or fetched < total:
            response = await self.search_types(params.page(page))
            if total is None:
                total = response.count
            if not response.types:
                return

            for result in response.types:
                yield result
                fetched += 1
            page += 1

    async def get_type(self, type_id: int) -> NumistaType:
        return await self._call("GET", f"/types/{type_id}", numista.decode_type)

    async def get_issues(self, type_id: int) -> list[Issue]:
        return await self._call("GET", f"/types/{type_id}/issues", numista.decode_issues)

    async def get_prices(
        self, type_id: int, issue_id: int, currency: str | None = None
    ) -> PricesResponse:
        """
        Get price estimates for an issue.

        Args:
            type_id: Type the issue belongs to
            issue_id: Issue to price
            currency: ISO 4217 code; Numista defaults to EUR
        """
        return await self._call(
            "GET",
            f"/types/{type_id}/issues/{issue_id}/prices",
            numista.decode_prices,
            {"currency": currency},
        )

    async def get_issuers(self) -> IssuersResponse:
        return await self._call("GET", "/issuers", numista.decode_issuers)

    async def get_mints(self) -> MintsResponse:
        return await self._call("GET", "/mints", numista.decode_mints)

    async def get_mint(self, mint_id: int) -> MintDetail:
        return await self._call("GET", f"/mints/{mint_id}", numista.decode_mint)

    async def get_catalogues(self) -> CataloguesResponse:
        return await self._call("GET", "/catalogues", numista.decode_catalogues)

    async def get_publication(self, publication_id: str) -> Publication:
        return await self._call(
            "GET", f"/publications/{publication_id}", numista.decode_publication
        )

    async def get_user(self, user_id: int) -> User:
        return await self._call("GET", f"/users/{user_id}", numista.decode_user)

    async def get_user_collections(self, user_id: int) -> CollectionsResponse:
        return await self._call(
            "GET", f"/users/{user_id}/collections", numista.decode_collections
        )

    async def get_collected_items(
        self, user_id: int, params: GetCollectedItemsParams | None = None
    ) -> CollectedItems:
        """
        Get a user's collected items with the collection counters.

        Requires a bearer token with the view_collection scope.
        """
        query = params.build() if params is not None else None
        return await self._call(
            "GET", f"/users/{user_id}/collected_items", numista.decode_collected_items, query
        )

    async def get_collection(
        self, user_id: int, params: GetCollectedItemsParams | None = None
    ) -> list[CollectedItem]:
        """Get just the items of a user's collection."""
        response = await self.get_collected_items(user_id, params)
        logger.debug("User %d has %d collected items", user_id, len(response.items))
        return response.items

    async def get_collected_item(self, user_id: int, item_id: int) -> CollectedItem:
        return await self._call(
            "GET", f"/users/{user_id}/collected_items/{item_id}", numista.decode_collected_item
        )

    async def add_collected_item(
        self, user_id: int, item: AddCollectedItemParams
    ) -> CollectedItem:
        return await self._call(
            "POST",
            f"/users/{user_id}/collected_items",
            numista.decode_collected_item,
            json=item.to_payload(),
        )

    async def edit_collected_item(
        self, user_id: int, item_id: int, item: EditCollectedItemParams
    ) -> CollectedItem:
        return await self._call(
            "PATCH",
            f"/users/{user_id}/collected_items/{item_id}",
            numista.decode_collected_item,
            json=item.to_payload(),
        )

    async def delete_collected_item(self, user_id: int, item_id: int) -> None:
        """Delete an item. Succeeds on any 2xx; the body is ignored."""
        await self._call(
            "DELETE", f"/users/{user_id}/collected_items/{item_id}", lambda _body: None
        )

    async def get_oauth_token(self, params: OAuthTokenParams) -> OAuthToken:
        return await self._call(
            "GET", "/oauth_token", numista.decode_oauth_token, params.to_payload()
        )

    async def search_by_image(self, request: SearchByImageParams) -> SearchByImageResponse:
        return await self._call(
            "POST", "/search_by_image", numista.decode_search_by_image, json=request.to_payload()
        )


class ClientBuilder:
    """
    Collects client configuration and builds a Client.

    The API key is mandatory; build() fails without it, so a missing key
    never surfaces as a per-request error.
    """

    def __init__(self) -> None:
        self._api_key: str | None = None
        self._base_url: str = DEFAULT_API_URL
        self._bearer_token: str | None = None
        self._lang: str | None = None
        self._timeout: float = 30.0

    def api_key(self, api_key: str) -> "ClientBuilder":
        self._api_key = api_key
        return self

    def base_url(self, base_url: str) -> "ClientBuilder":
        """Override the API root. Mostly useful for tests."""
        self._base_url = base_url
        return self

    def bearer_token(self, bearer_token: str) -> "ClientBuilder":
        self._bearer_token = bearer_token
        return self

    def lang(self, lang: str) -> "ClientBuilder":
        """ISO 639-1 language for translated fields (en, es, fr)."""
        self._lang = lang.lower()
        return self

    def timeout(self, timeout: float) -> "ClientBuilder":
        self._timeout = timeout
        return self

    def build(self) -> Client:
        """
        Build the client.

        Raises:
            ConfigurationError: If no API key was set
        """
        if not self._api_key:
            raise ConfigurationError("Numista API key is required")

        transport = Transport(
            self._base_url,
            self._api_key,
            bearer_token=self._bearer_token,
            timeout=self._timeout,
        )
        return Client(transport, lang=self._lang)
