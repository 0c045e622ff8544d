"""
Catalogue records: types, issues, prices and the reference lists
(issuers, mints, catalogues, publications).

Integer and boolean fields are strict. "1858" is not a year.
"""

from datetime import date
from enum import Enum

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from planchet.models.base import NumistaModel


class Category(str, Enum):
    """Top-level catalogue section."""

    COIN = "coin"
    BANKNOTE = "banknote"
    EXONUMIA = "exonumia"


class Grade(str, Enum):
    """Condition grades, lowest first."""

    G = "g"
    VG = "vg"
    F = "f"
    VF = "vf"
    XF = "xf"
    AU = "au"
    UNC = "unc"


class Orientation(str, Enum):
    COIN = "coin"
    MEDAL = "medal"
    VARIABLE = "variable"
    THREE = "three"
    NINE = "nine"


class Issuer(NumistaModel):
    code: str
    name: str


class Currency(NumistaModel):
    id: StrictInt
    name: str
    full_name: str


class Value(NumistaModel):
    """Face value. `text` is the display form ("5 Cents")."""

    text: str | None = None
    numeric_value: StrictFloat | None = None
    numerator: StrictInt | None = None
    denominator: StrictInt | None = None
    currency: Currency | None = None


class RulingAuthority(NumistaModel):
    id: StrictInt
    name: str
    wikidata_id: str | None = None
    nomisma_id: str | None = None


class Composition(NumistaModel):
    text: str | None = None


class Technique(NumistaModel):
    text: str | None = None


class Demonetization(NumistaModel):
    is_demonetized: StrictBool
    demonetization_date: date | None = None


class LetteringScript(NumistaModel):
    name: str


class CoinSide(NumistaModel):
    """One face of a coin (obverse, reverse, edge) or a banknote watermark."""

    engravers: list[str] = Field(default_factory=list)
    designers: list[str] = Field(default_factory=list)
    description: str | None = None
    lettering: str | None = None
    lettering_scripts: list[LetteringScript] | None = None
    unabridged_legend: str | None = None
    lettering_translation: str | None = None
    picture: str | None = None
    thumbnail: str | None = None
    picture_copyright: str | None = None
    picture_copyright_url: str | None = None
    picture_license_name: str | None = None
    picture_license_url: str | None = None


class MintDetail(NumistaModel):
    id: StrictInt
    name: str | None = None
    local_name: str | None = None
    place: str | None = None
    country: Issuer | None = None
    start_year: StrictInt | None = None
    end_year: StrictInt | None = None
    nomisma_id: str | None = None
    wikidata_id: str | None = None


class Printer(NumistaModel):
    id: StrictInt
    name: str


class Catalogue(NumistaModel):
    id: StrictInt
    code: str


class Reference(NumistaModel):
    catalogue: Catalogue
    number: str


class RelatedType(NumistaModel):
    id: StrictInt
    title: str
    category: Category
    issuer: Issuer
    min_year: StrictInt | None = None
    max_year: StrictInt | None = None


class NumistaType(NumistaModel):
    """
    A catalogue type: one coin, banknote or exonumia design.

    Attributes:
        id: Numista type ID (N# on the website)
        title: Display title, usually "<denomination> - <ruler or motif>"
        category: Catalogue section
        issuer: Issuing country or territory
        min_year: First year of issue, if known
        max_year: Last year of issue, if known
        type_name: Type label such as "Standard circulation coin"
        comments: HTML-formatted comments
    """

    id: StrictInt
    url: str | None = None
    title: str
    category: Category
    issuer: Issuer
    min_year: StrictInt | None = None
    max_year: StrictInt | None = None
    type_name: str | None = Field(default=None, alias="type")
    value: Value | None = None
    ruler: list[RulingAuthority] | None = None
    shape: str | None = None
    composition: Composition | None = None
    technique: Technique | None = None
    demonetization: Demonetization | None = None
    weight: StrictFloat | None = None
    size: StrictFloat | None = None
    thickness: StrictFloat | None = None
    orientation: Orientation | None = None
    obverse: CoinSide | None = None
    reverse: CoinSide | None = None
    edge: CoinSide | None = None
    watermark: CoinSide | None = None
    mints: list[MintDetail] | None = None
    printers: list[Printer] | None = None
    series: str | None = None
    commemorated_topic: str | None = None
    comments: str | None = None
    related_types: list[RelatedType] | None = None
    tags: list[str] = Field(default_factory=list)
    references: list[Reference] | None = None


class SearchTypeResult(NumistaModel):
    """Compact type record returned by the search endpoint."""

    id: StrictInt
    title: str
    category: Category
    issuer: Issuer
    min_year: StrictInt | None = None
    max_year: StrictInt | None = None
    obverse_thumbnail: str | None = None
    reverse_thumbnail: str | None = None


class SearchTypesResponse(NumistaModel):
    """One page of search results. `count` is the total across all pages."""

    count: StrictInt
    types: list[SearchTypeResult]


class Mark(NumistaModel):
    id: StrictInt
    title: str | None = None
    picture: str | None = None
    letters: str | None = None


class Signature(NumistaModel):
    signer_name: str
    signer_title: str | None = None


class Issue(NumistaModel):
    """
    A dated or undated issue of a type.

    `year` is as written on the piece (may be a non-Gregorian era);
    `gregorian_year` is what sorting and summaries use.
    """

    id: StrictInt
    is_dated: StrictBool
    year: StrictInt | None = None
    gregorian_year: StrictInt | None = None
    min_year: StrictInt | None = None
    max_year: StrictInt | None = None
    mint_letter: str | None = None
    mintage: StrictInt | None = None
    comment: str | None = None
    marks: list[Mark] | None = None
    signatures: list[Signature] | None = None
    references: list[Reference] | None = None


class GradePrice(NumistaModel):
    grade: Grade
    price: StrictFloat


class PricesResponse(NumistaModel):
    """Price estimates for one issue, in a single currency (ISO 4217 code)."""

    currency: str
    prices: list[GradePrice]


class IssuerDetail(NumistaModel):
    code: str
    name: str
    flag: str | None = None
    wikidata_id: str | None = None
    parent: Issuer | None = None
    level: StrictInt | None = None


class IssuersResponse(NumistaModel):
    count: StrictInt
    issuers: list[IssuerDetail]


class MintsResponse(NumistaModel):
    count: StrictInt
    mints: list[MintDetail]


class CatalogueDetail(NumistaModel):
    id: StrictInt
    code: str
    title: str
    author: str
    publisher: str
    isbn13: str | None = None


class CataloguesResponse(NumistaModel):
    count: StrictInt
    catalogues: list[CatalogueDetail]


class PublicationType(str, Enum):
    VOLUME = "volume"
    ARTICLE = "article"
    VOLUME_GROUP = "volume_group"
    ARTICLE_GROUP = "article_group"


class Cover(str, Enum):
    SOFTCOVER = "softcover"
    HARDCOVER = "hardcover"
    SPIRAL = "spiral"
    HIDDEN_SPIRAL = "hidden_spiral"


class Contributor(NumistaModel):
    role: str
    name: str
    id: StrictInt | None = None


class Publisher(NumistaModel):
    name: str
    id: StrictInt | None = None


class PublicationPlace(NumistaModel):
    name: str
    geonames_id: str | None = None


class PublicationPart(NumistaModel):
    type_name: PublicationType = Field(alias="type")
    id: str
    title: str
    volume_number: str | None = None


class Publication(NumistaModel):
    """A reference work from the Numista bibliography."""

    id: str
    url: str
    type_name: PublicationType = Field(alias="type")
    title: str
    translated_title: str | None = None
    volume_number: str | None = None
    subtitle: str | None = None
    translated_subtitle: str | None = None
    edition: str | None = None
    languages: list[str] = Field(default_factory=list)
    year: StrictInt | None = None
    page_count: StrictInt | None = None
    pages: str | None = None
    cover: Cover | None = None
    isbn10: str | None = None
    isbn13: str | None = None
    issn: str | None = None
    oclc_number: str | None = None
    contributors: list[Contributor] | None = None
    publishers: list[Publisher] | None = None
    publication_places: list[PublicationPlace] | None = None
    part_of: list[PublicationPart] | None = None
    bibliographical_notice: str | None = None
    homepage_url: str | None = None
    download_urls: list[str] | None = None


class SearchByImageTypeResult(SearchTypeResult):
    similarity_distance: StrictFloat


class SearchByImageResponse(NumistaModel):
    count: StrictInt
    types: list[SearchByImageTypeResult]
    experimental_tentative_year: StrictInt | None = None
    experimental_tentative_grade: Grade | None = None
