import json
from typing import Any

import pytest

from planchet.models.user import CollectedItem

BASE_URL = "https://api.numista.test/v3"


def collected_item_payload(
    item_id: int,
    title: str,
    issuer: str | None = "Canada",
    year: int | None = None,
    *,
    gregorian_year: int | None = None,
    with_issue: bool = True,
) -> dict[str, Any]:
    """Build a collected_items entry as Numista returns it."""
    payload: dict[str, Any] = {
        "id": item_id,
        "quantity": 1,
        "for_swap": False,
        "type": {
            "id": 1000 + item_id,
            "title": title,
            "category": "coin",
            "issuer": (
                {"code": issuer.lower().replace(" ", "-"), "name": issuer} if issuer else None
            ),
        },
        "grade": None,
    }
    if with_issue:
        payload["issue"] = {
            "id": 2000 + item_id,
            "is_dated": year is not None,
            "year": year,
            "gregorian_year": gregorian_year if gregorian_year is not None else year,
        }
    return payload


def make_item(
    title: str,
    issuer: str | None = "Canada",
    year: int | None = None,
    item_id: int = 1,
) -> CollectedItem:
    """A CollectedItem decoded from a realistic JSON payload."""
    return CollectedItem.model_validate_json(
        json.dumps(collected_item_payload(item_id, title, issuer, year))
    )


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def type_payload() -> dict[str, Any]:
    """GET /types/420"""
    return {
        "id": 420,
        "url": "https://en.numista.com/catalogue/pieces420.html",
        "title": "5 Cents - Victoria",
        "category": "coin",
        "issuer": {"code": "canada", "name": "Canada"},
        "min_year": 1858,
        "max_year": 1901,
        "type": "Standard circulation coin",
        "value": {
            "text": "5 Cents",
            "numeric_value": 0.05,
            "currency": {"id": 61, "name": "Dollar", "full_name": "Canadian dollar"},
        },
        "ruler": [{"id": 1080, "name": "Victoria"}],
        "shape": "Round",
        "composition": {"text": "Silver (.925)"},
        "technique": {"text": "Milled"},
        "demonetization": {"is_demonetized": False},
        "weight": 1.162,
        "size": 15.5,
        "orientation": "coin",
        "obverse": {
            "engravers": ["Leonard Charles Wyon"],
            "designers": [],
            "description": "Laureate head of Queen Victoria facing left",
            "lettering": "VICTORIA DEI GRATIA REGINA CANADA",
        },
        "reverse": {"engravers": [], "designers": [], "lettering": "5 CENTS 1858"},
        "mints": [{"id": 14, "name": "Royal Mint, Tower Hill"}],
        "tags": ["Victoria"],
        "references": [{"catalogue": {"id": 3, "code": "KM"}, "number": "2"}],
    }


@pytest.fixture
def search_payload() -> dict[str, Any]:
    """GET /types?q=victoria"""
    return {
        "count": 2,
        "types": [
            {
                "id": 420,
                "title": "5 Cents - Victoria",
                "category": "coin",
                "issuer": {"code": "canada", "name": "Canada"},
                "min_year": 1858,
                "max_year": 1901,
            },
            {
                "id": 421,
                "title": "10 Cents - Victoria",
                "category": "coin",
                "issuer": {"code": "canada", "name": "Canada"},
                "min_year": 1858,
                "max_year": 1901,
                "obverse_thumbnail": "https://en.numista.com/catalogue/photos/canada/421-180.jpg",
            },
        ],
    }


@pytest.fixture
def issues_payload() -> list[dict[str, Any]]:
    """GET /types/420/issues"""
    return [
        {
            "id": 51234,
            "is_dated": True,
            "year": 1858,
            "gregorian_year": 1858,
            "mintage": 1500000,
        },
        {
            "id": 51235,
            "is_dated": True,
            "year": 1870,
            "gregorian_year": 1870,
            "mint_letter": "H",
            "mintage": 2800000,
            "comment": "Wide rim",
        },
    ]


@pytest.fixture
def prices_payload() -> dict[str, Any]:
    """GET /types/420/issues/51234/prices"""
    return {
        "currency": "USD",
        "prices": [
            {"grade": "f", "price": 25},
            {"grade": "vf", "price": 45.5},
            {"grade": "xf", "price": 90.0},
        ],
    }


@pytest.fixture
def user_payload() -> dict[str, Any]:
    """GET /users/1"""
    return {"username": "coinfan", "avatar": "https://en.numista.com/avatars/1.png"}


@pytest.fixture
def collected_items_payload() -> dict[str, Any]:
    """GET /users/1/collected_items"""
    return {
        "item_count": 3,
        "item_for_swap_count": 0,
        "item_type_count": 3,
        "item_type_for_swap_count": 0,
        "items": [
            collected_item_payload(1, "5 Cents - Victoria", "Canada", 1858),
            collected_item_payload(2, "1 Cent - George V", "Canada", 1920),
            collected_item_payload(3, "1 Cent - Elizabeth II", None, None),
        ],
    }


@pytest.fixture
def token_payload() -> dict[str, Any]:
    """GET /oauth_token"""
    return {
        "access_token": "test_token",
        "token_type": "bearer",
        "expires_in": 3600,
        "user_id": 1,
    }


@pytest.fixture
def item_factory():
    """Factory for CollectedItems: item_factory(title, issuer="Canada", year=None, item_id=1)."""
    return make_item


@pytest.fixture
def item_payload_factory():
    """Factory for raw collected item payloads."""
    return collected_item_payload


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the developer's NUMISTA_* variables and .env file out of tests."""
    for name in ("NUMISTA_API_KEY", "NUMISTA_API_URL", "NUMISTA_LANG", "NUMISTA_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
