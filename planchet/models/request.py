"""
Request parameters.

Query-string parameters use immutable fluent builders: every setter returns
a new instance and `build()` yields only the fields that were set.
JSON bodies are pydantic models; unset fields are left out on serialization.

Nothing here validates values beyond presence. Numista rejects bad
values itself with a 400.
"""

from collections.abc import Mapping
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from planchet.models.catalogue import Category, Grade
from planchet.models.user import GrantType

B = TypeVar("B", bound="QueryParams")


def _query_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class QueryParams:
    """Immutable set of query parameters built through fluent setters."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: Mapping[str, Any] = MappingProxyType(dict(values or {}))

    def _with(self: B, name: str, value: Any) -> B:
        return type(self)({**self._values, name: value})

    def get(self, name: str) -> Any:
        """Value of a parameter by its wire name, or None if unset."""
        return self._values.get(name)

    def build(self) -> dict[str, str]:
        """Query parameters to send. Unset fields are absent, never empty."""
        return {
            name: _query_value(value) for name, value in self._values.items() if value is not None
        }

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return dict(self._values) == dict(other._values)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(self.build().items()))))

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"{type(self).__name__}({fields})"


class SearchTypesParams(QueryParams):
    """
    Parameters for searching the catalogue.

    Example:
        SearchTypesParams().q("victoria").year_range(1850, 1900).count(50)
    """

    __slots__ = ()

    def category(self, category: Category) -> "SearchTypesParams":
        return self._with("category", category)

    def q(self, q: str) -> "SearchTypesParams":
        """Free-text query."""
        return self._with("q", q)

    def issuer(self, issuer: str) -> "SearchTypesParams":
        """Issuer code, e.g. "canada"."""
        return self._with("issuer", issuer)

    def catalogue(self, catalogue: int) -> "SearchTypesParams":
        return self._with("catalogue", catalogue)

    def number(self, number: str) -> "SearchTypesParams":
        """Number within `catalogue`."""
        return self._with("number", number)

    def ruler(self, ruler: int) -> "SearchTypesParams":
        return self._with("ruler", ruler)

    def material(self, material: int) -> "SearchTypesParams":
        return self._with("material", material)

    def year(self, year: int) -> "SearchTypesParams":
        return self._with("year", str(year))

    def year_range(self, min_year: int, max_year: int) -> "SearchTypesParams":
        return self._with("year", f"{min_year}-{max_year}")

    def date(self, year: int) -> "SearchTypesParams":
        return self._with("date", str(year))

    def date_range(self, min_year: int, max_year: int) -> "SearchTypesParams":
        return self._with("date", f"{min_year}-{max_year}")

    def size(self, size: str) -> "SearchTypesParams":
        return self._with("size", size)

    def weight(self, weight: str) -> "SearchTypesParams":
        return self._with("weight", weight)

    def page(self, page: int) -> "SearchTypesParams":
        """1-based page number."""
        return self._with("page", page)

    def count(self, count: int) -> "SearchTypesParams":
        """Results per page."""
        return self._with("count", count)


class GetCollectedItemsParams(QueryParams):
    """Filters for a user's collected items."""

    __slots__ = ()

    def category(self, category: Category) -> "GetCollectedItemsParams":
        return self._with("category", category)

    def type_id(self, type_id: int) -> "GetCollectedItemsParams":
        return self._with("type", type_id)

    def collection(self, collection: int) -> "GetCollectedItemsParams":
        return self._with("collection", collection)


class RequestModel(BaseModel):
    """Base for JSON bodies and structured query parameters."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Wire representation, with unset fields left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class OAuthTokenParams(RequestModel):
    """Query parameters for /oauth_token."""

    grant_type: GrantType
    code: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    redirect_uri: str | None = None
    scope: str | None = None


class ItemPriceParams(RequestModel):
    value: float
    currency: str


class GradingDetailsParams(RequestModel):
    grading_company: int | None = None
    slab_grade: int | None = None
    slab_number: str | None = None
    cac_sticker: str | None = None
    grading_designations: list[int] | None = None
    grading_strike: int | None = None
    grading_surface: int | None = None


class EditCollectedItemParams(RequestModel):
    """Fields to change on a collected item. Everything is optional."""

    type_id: int | None = Field(default=None, alias="type")
    issue: int | None = None
    quantity: int | None = None
    grade: Grade | None = None
    for_swap: bool | None = None
    private_comment: str | None = None
    public_comment: str | None = None
    price: ItemPriceParams | None = None
    collection: int | None = None
    storage_location: str | None = None
    acquisition_place: str | None = None
    acquisition_date: date | None = None
    serial_number: str | None = None
    internal_id: str | None = None
    weight: float | None = None
    size: float | None = None
    axis: int | None = None
    grading_details: GradingDetailsParams | None = None


class AddCollectedItemParams(EditCollectedItemParams):
    """A new collected item. Only the type is required."""

    type_id: int = Field(alias="type")


class Image(RequestModel):
    mime_type: Literal["image/jpeg", "image/png"]
    # Base64-encoded
    image_data: str


class SearchByImageParams(RequestModel):
    category: Category | None = None
    images: list[Image]
    max_results: int | None = None
