"""Tests for the planchet command line."""

import httpx
import pytest
import respx

from planchet.cli import EXIT_CLIENT_ERROR, EXIT_OK, EXIT_USAGE, build_parser, main


@pytest.fixture
def api_env(monkeypatch: pytest.MonkeyPatch, base_url: str) -> None:
    """Point the CLI at the mocked API with a key in the environment."""
    monkeypatch.setenv("NUMISTA_API_URL", base_url)
    monkeypatch.setenv("NUMISTA_API_KEY", "env-key")


@pytest.fixture
def collection_api(base_url: str, token_payload: dict, collected_items_payload: dict):
    """Mock the token exchange and the collection endpoint."""
    with respx.mock(assert_all_called=False) as mock:
        mock.get(f"{base_url}/oauth_token").mock(
            return_value=httpx.Response(200, json=token_payload)
        )
        mock.get(f"{base_url}/users/1/collected_items").mock(
            return_value=httpx.Response(200, json=collected_items_payload)
        )
        yield mock


class TestParser:
    def test_global_options(self) -> None:
        args = build_parser().parse_args(["-a", "k", "--user-id", "7", "dump"])

        assert args.api_key == "k"
        assert args.user_id == 7
        assert args.command == "dump"

    def test_types_options(self) -> None:
        args = build_parser().parse_args(["types", "--q", "victoria", "--year", "1858", "--all"])

        assert args.q == "victoria"
        assert args.year == 1858
        assert args.all


class TestHelp:
    def test_help_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["help"]) == EXIT_OK
        assert "summarize" in capsys.readouterr().out

    def test_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == EXIT_USAGE
        assert "usage" in capsys.readouterr().err


class TestDump:
    def test_prints_sorted_collection(
        self, api_env: None, collection_api, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Items print as issuer - title (year), unknown issuers first."""
        exit_code = main(["--user-id", "1", "dump"])

        assert exit_code == EXIT_OK
        assert capsys.readouterr().out.splitlines() == [
            "<Unknown> - 1 Cent - Elizabeth II (<Unknown>)",
            "Canada - 5 Cents - Victoria (1858)",
            "Canada - 1 Cent - George V (1920)",
        ]

    def test_uses_bearer_token_for_collection(self, api_env: None, collection_api) -> None:
        """The collection request carries the token from /oauth_token."""
        main(["--user-id", "1", "dump"])

        token_request = collection_api.calls[0].request
        items_request = collection_api.calls[1].request
        assert token_request.url.params["grant_type"] == "client_credentials"
        assert token_request.url.params["scope"] == "view_collection"
        assert token_request.headers["Numista-API-Key"] == "env-key"
        assert items_request.headers["Authorization"] == "Bearer test_token"

    def test_api_key_flag_overrides_environment(self, api_env: None, collection_api) -> None:
        main(["--api-key", "flag-key", "--user-id", "1", "dump"])

        assert collection_api.calls[0].request.headers["Numista-API-Key"] == "flag-key"

    def test_requires_user_id(self, api_env: None, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["dump"]) == EXIT_USAGE
        assert "--user-id" in capsys.readouterr().err

    def test_requires_api_key(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """No key anywhere fails before any request."""
        with respx.mock(assert_all_called=False) as mock:
            assert main(["--user-id", "1", "dump"]) == EXIT_USAGE
            assert not mock.calls

        assert "API key" in capsys.readouterr().err

    def test_unknown_user(
        self, api_env: None, base_url: str, token_payload: dict, capsys
    ) -> None:
        with respx.mock:
            respx.get(f"{base_url}/oauth_token").mock(
                return_value=httpx.Response(200, json=token_payload)
            )
            respx.get(f"{base_url}/users/1/collected_items").mock(
                return_value=httpx.Response(404, json={"error_message": "User not found"})
            )

            assert main(["--user-id", "1", "dump"]) == EXIT_CLIENT_ERROR

        err = capsys.readouterr().err
        assert "404" in err
        assert "User not found" in err

    def test_unexpected_response(self, api_env: None, base_url: str, capsys) -> None:
        with respx.mock:
            respx.get(f"{base_url}/oauth_token").mock(
                return_value=httpx.Response(200, json={"token_type": "bearer"})
            )

            assert main(["--user-id", "1", "dump"]) == EXIT_CLIENT_ERROR

        assert "access_token" in capsys.readouterr().err

    def test_connection_failure(self, api_env: None, base_url: str, capsys) -> None:
        with respx.mock:
            respx.get(f"{base_url}/oauth_token").mock(side_effect=httpx.ConnectError("refused"))

            assert main(["--user-id", "1", "dump"]) == EXIT_CLIENT_ERROR

        assert "refused" in capsys.readouterr().err


class TestSummarize:
    def test_prints_issuer_table(
        self, api_env: None, collection_api, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--user-id", "1", "summarize"]) == EXIT_OK

        lines = capsys.readouterr().out.splitlines()
        assert "Issuer" in lines[1]
        assert "Total Items" in lines[1]
        assert lines[3].split("|")[1].strip() == "<Unknown>"
        assert [cell.strip() for cell in lines[4].split("|")[1:5]] == [
            "Canada",
            "2",
            "1858",
            "1920",
        ]


class TestCatalogueCommands:
    def test_types(self, api_env: None, base_url: str, search_payload: dict, capsys) -> None:
        with respx.mock:
            route = respx.get(f"{base_url}/types").mock(
                return_value=httpx.Response(200, json=search_payload)
            )

            assert main(["types", "--q", "victoria", "--category", "coin"]) == EXIT_OK

        assert dict(route.calls.last.request.url.params) == {"q": "victoria", "category": "coin"}
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Found 2 types"
        assert out[1] == "[420] Canada - 5 Cents - Victoria (1858-1901)"

    def test_type(self, api_env: None, base_url: str, type_payload: dict, capsys) -> None:
        with respx.mock:
            respx.get(f"{base_url}/types/420").mock(
                return_value=httpx.Response(200, json=type_payload)
            )

            assert main(["type", "420"]) == EXIT_OK

        assert "title: 5 Cents - Victoria" in capsys.readouterr().out

    def test_lang_flag(self, api_env: None, base_url: str, type_payload: dict) -> None:
        with respx.mock:
            route = respx.get(f"{base_url}/types/420").mock(
                return_value=httpx.Response(200, json=type_payload)
            )

            main(["--lang", "FR", "type", "420"])

        assert route.calls.last.request.url.params["lang"] == "fr"

    def test_issues(self, api_env: None, base_url: str, issues_payload: list, capsys) -> None:
        with respx.mock:
            respx.get(f"{base_url}/types/420/issues").mock(
                return_value=httpx.Response(200, json=issues_payload)
            )

            assert main(["issues", "420"]) == EXIT_OK

        assert "[51235] 1870 H" in capsys.readouterr().out

    def test_prices(self, api_env: None, base_url: str, prices_payload: dict, capsys) -> None:
        with respx.mock:
            route = respx.get(f"{base_url}/types/420/issues/51234/prices").mock(
                return_value=httpx.Response(200, json=prices_payload)
            )

            assert main(["prices", "420", "51234", "--currency", "USD"]) == EXIT_OK

        assert route.calls.last.request.url.params["currency"] == "USD"
        assert "Price (USD)" in capsys.readouterr().out

    def test_type_not_found(self, api_env: None, base_url: str, capsys) -> None:
        with respx.mock:
            respx.get(f"{base_url}/types/1").mock(return_value=httpx.Response(404))

            assert main(["type", "1"]) == EXIT_CLIENT_ERROR

        assert "status 404" in capsys.readouterr().err
