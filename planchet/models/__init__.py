from planchet.models.catalogue import (
    Catalogue,
    CatalogueDetail,
    CataloguesResponse,
    Category,
    CoinSide,
    Demonetization,
    Grade,
    GradePrice,
    Issue,
    Issuer,
    IssuerDetail,
    IssuersResponse,
    MintDetail,
    MintsResponse,
    NumistaType,
    Orientation,
    Printer,
    PricesResponse,
    Publication,
    Reference,
    RelatedType,
    RulingAuthority,
    SearchByImageResponse,
    SearchByImageTypeResult,
    SearchTypeResult,
    SearchTypesResponse,
    Value,
)
from planchet.models.request import (
    AddCollectedItemParams,
    EditCollectedItemParams,
    GetCollectedItemsParams,
    GradingDetailsParams,
    Image,
    ItemPriceParams,
    OAuthTokenParams,
    SearchByImageParams,
    SearchTypesParams,
)
from planchet.models.user import (
    CollectedItem,
    CollectedItems,
    CollectedItemType,
    Collection,
    CollectionsResponse,
    GradingDetails,
    GrantType,
    ItemPrice,
    OAuthToken,
    User,
)

__all__ = [
    "AddCollectedItemParams",
    "Catalogue",
    "CatalogueDetail",
    "CataloguesResponse",
    "Category",
    "CoinSide",
    "CollectedItem",
    "CollectedItemType",
    "CollectedItems",
    "Collection",
    "CollectionsResponse",
    "Demonetization",
    "EditCollectedItemParams",
    "GetCollectedItemsParams",
    "Grade",
    "GradePrice",
    "GradingDetails",
    "GradingDetailsParams",
    "GrantType",
    "Image",
    "Issue",
    "Issuer",
    "IssuerDetail",
    "IssuersResponse",
    "ItemPrice",
    "ItemPriceParams",
    "MintDetail",
    "MintsResponse",
    "NumistaType",
    "OAuthToken",
    "OAuthTokenParams",
    "Orientation",
    "PricesResponse",
    "Printer",
    "Publication",
    "Reference",
    "RelatedType",
    "RulingAuthority",
    "SearchByImageParams",
    "SearchByImageResponse",
    "SearchByImageTypeResult",
    "SearchTypeResult",
    "SearchTypesParams",
    "SearchTypesResponse",
    "User",
    "Value",
]
