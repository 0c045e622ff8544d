"""User accounts and their collections."""

from datetime import date
from enum import Enum

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from planchet.models.base import NumistaModel
from planchet.models.catalogue import Category, Grade, Issue, Issuer


class GrantType(str, Enum):
    AUTHORIZATION_CODE = "authorization_code"
    CLIENT_CREDENTIALS = "client_credentials"


class User(NumistaModel):
    username: str
    avatar: str | None = None


class Collection(NumistaModel):
    """A named sub-collection a user files items into."""

    id: StrictInt
    name: str


class CollectionsResponse(NumistaModel):
    count: StrictInt
    collections: list[Collection]


class ItemPrice(NumistaModel):
    value: StrictFloat
    currency: str


class Picture(NumistaModel):
    url: str
    thumbnail_url: str


class GradingCompany(NumistaModel):
    id: StrictInt
    name: str


class GradingValue(NumistaModel):
    """An id/value pair used for slab grades, designations, strike and surface."""

    id: StrictInt
    value: str


class GradingDetails(NumistaModel):
    grading_company: GradingCompany | None = None
    slab_grade: GradingValue | None = None
    slab_number: str | None = None
    cac_sticker: str | None = None
    grading_designations: list[GradingValue] | None = None
    grading_strike: GradingValue | None = None
    grading_surface: GradingValue | None = None


class CollectedItemType(NumistaModel):
    """The catalogue type a collected item refers to."""

    id: StrictInt
    title: str
    category: Category
    issuer: Issuer | None = None


class CollectedItem(NumistaModel):
    """
    One entry in a user's collection.

    Attributes:
        id: Item ID, unique within the user's collection
        quantity: Number of pieces held
        type_info: Catalogue type the item belongs to ("type" on the wire)
        issue: Specific issue, if the user recorded one
        grade: User-assigned grade
    """

    id: StrictInt
    quantity: StrictInt
    type_info: CollectedItemType = Field(alias="type")
    issue: Issue | None = None
    for_swap: StrictBool
    grade: Grade | None = None
    private_comment: str | None = None
    public_comment: str | None = None
    price: ItemPrice | None = None
    collection: Collection | None = None
    pictures: list[Picture] | None = None
    storage_location: str | None = None
    acquisition_place: str | None = None
    acquisition_date: date | None = None
    serial_number: str | None = None
    internal_id: str | None = None
    weight: StrictFloat | None = None
    size: StrictFloat | None = None
    axis: StrictInt | None = None
    grading_details: GradingDetails | None = None


class CollectedItems(NumistaModel):
    """Response of the collected_items endpoint."""

    item_count: StrictInt
    item_for_swap_count: StrictInt
    item_type_count: StrictInt
    item_type_for_swap_count: StrictInt
    items: list[CollectedItem]


class OAuthToken(NumistaModel):
    access_token: str
    token_type: str
    expires_in: StrictInt
    user_id: StrictInt
