"""
Numista response decoders.

One function per endpoint shape. Each one takes the raw response body and
returns typed records, or raises DecodeError naming the offending field.

Unknown fields are ignored. Missing required fields and type mismatches
are errors; nothing is coerced ("1858" is not an integer).
"""

import json
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from planchet.errors import DecodeError
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
    SearchTypesResponse,
)
from planchet.models.user import (
    CollectedItem,
    CollectedItems,
    CollectionsResponse,
    OAuthToken,
    User,
)

T = TypeVar("T")

BODY_FIELD = "<body>"

# pydantic error type -> kind of value the field should have held
_EXPECTED_KINDS: dict[str, str] = {
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "float_type": "number",
    "float_parsing": "number",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "string_type": "string",
    "list_type": "list",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
    "date_type": "date",
    "date_parsing": "date",
    "date_from_datetime_parsing": "date",
    "enum": "one of the documented values",
}


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _to_decode_error(error: ValidationError) -> DecodeError:
    """Reduce a pydantic ValidationError to its first problem."""
    first = error.errors()[0]
    error_type = first["type"]
    field = ".".join(str(part) for part in first["loc"]) or BODY_FIELD

    if error_type == "missing":
        reason = "missing required field"
    elif error_type in _EXPECTED_KINDS:
        reason = f"expected {_EXPECTED_KINDS[error_type]}"
    else:
        reason = first["msg"]

    return DecodeError(field, reason)


def decode(target: type[T] | Any, body: bytes | str) -> T:
    """
    Decode a JSON body into `target` (a model class or a typing form like list[Issue]).

    Raises:
        DecodeError: If the body is not valid JSON or does not match `target`
    """
    try:
        return _adapter(target).validate_json(body)  # type: ignore[no-any-return]
    except ValidationError as e:
        raise _to_decode_error(e) from e


def decode_search_response(body: bytes | str) -> SearchTypesResponse:
    return decode(SearchTypesResponse, body)


def decode_type(body: bytes | str) -> NumistaType:
    return decode(NumistaType, body)


def decode_issues(body: bytes | str) -> list[Issue]:
    return decode(list[Issue], body)


def decode_prices(body: bytes | str) -> PricesResponse:
    return decode(PricesResponse, body)


def decode_user(body: bytes | str) -> User:
    return decode(User, body)


def decode_collected_items(body: bytes | str) -> CollectedItems:
    return decode(CollectedItems, body)


def decode_collection(body: bytes | str) -> list[CollectedItem]:
    """Items of a collected_items response, without the counters."""
    return decode_collected_items(body).items


def decode_collected_item(body: bytes | str) -> CollectedItem:
    return decode(CollectedItem, body)


def decode_collections(body: bytes | str) -> CollectionsResponse:
    return decode(CollectionsResponse, body)


def decode_issuers(body: bytes | str) -> IssuersResponse:
    return decode(IssuersResponse, body)


def decode_mints(body: bytes | str) -> MintsResponse:
    return decode(MintsResponse, body)


def decode_mint(body: bytes | str) -> MintDetail:
    return decode(MintDetail, body)


def decode_catalogues(body: bytes | str) -> CataloguesResponse:
    return decode(CataloguesResponse, body)


def decode_publication(body: bytes | str) -> Publication:
    return decode(Publication, body)


def decode_oauth_token(body: bytes | str) -> OAuthToken:
    return decode(OAuthToken, body)


def decode_search_by_image(body: bytes | str) -> SearchByImageResponse:
    return decode(SearchByImageResponse, body)


def decode_api_error_message(body: bytes | str) -> str:
    """
    Best-effort `error_message` from an error response.

    Returns an empty string when the body is empty, not JSON, or has no message.
    """
    if not body:
        return ""
    try:
        data = json.loads(body)
    except ValueError:
        return ""
    if isinstance(data, dict):
        message = data.get("error_message")
        if isinstance(message, str):
            return message
    return ""
