"""
HTTP transport for the Numista API.

Sends one request per call with the credential headers attached and hands back
the raw status and body. Status codes are not interpreted here; a 404 is a
perfectly good RawResponse.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from planchet.errors import TransportError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "Numista-API-Key"
USER_AGENT = "planchet/0.3"


@dataclass(frozen=True)
class RawResponse:
    """Status, body and headers of a completed HTTP exchange."""

    status: int
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300


def _drop_unset(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Remove unset query parameters. Numista treats `?q=` differently from no q."""
    if not params:
        return {}
    return {key: str(value) for key, value in params.items() if value is not None}


class Transport:
    """
    Issues requests against a base URL with fixed credential headers.

    Holds no mutable state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        bearer_token: str | None = None,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            base_url: API root, e.g. https://api.numista.com/v3
            api_key: Sent as the Numista-API-Key header
            bearer_token: OAuth token for user-scoped endpoints
            timeout: Request timeout in seconds
            client: Optional httpx client for connection reuse
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

        headers = {
            API_KEY_HEADER: api_key,
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }
        if bearer_token:
            headers["Authorization"] = f"Bearer {bearer_token}"
        self._headers = headers

    async def send(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> RawResponse:
        """
        Send a single request.

        Args:
            method: HTTP method
            path: Path relative to the base URL, starting with "/"
            params: Query parameters; None values are omitted
            json: Optional JSON body

        Returns:
            RawResponse for any HTTP status

        Raises:
            TransportError: If no response was received
        """
        url = f"{self.base_url}{path}"
        query = _drop_unset(params)
        logger.debug("%s %s params=%s", method, url, query)

        try:
            if self._client is not None:
                response = await self._client.request(
                    method,
                    url,
                    params=query,
                    json=json,
                    headers=self._headers,
                    timeout=self.timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.request(
                        method, url, params=query, json=json, headers=self._headers
                    )
        except httpx.RequestError as e:
            logger.debug("%s %s failed: %s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug(
            "%s %s -> %d (%d bytes)", method, url, response.status_code, len(response.content)
        )
        return RawResponse(
            status=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )
