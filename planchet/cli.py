"""
Command-line front end for the Numista API.

Usage:
    planchet --api-key KEY --user-id 123 dump
    planchet --user-id 123 summarize          # key from NUMISTA_API_KEY
    planchet types --q victoria --year 1858
    planchet type 420

Exit codes: 0 on success, 1 when a request fails, 2 for missing
configuration or bad arguments. Errors are reported on stderr.
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable

from pydantic import ValidationError

from planchet.client import Client, ClientBuilder
from planchet.config import Settings, load_settings
from planchet.display import (
    format_collection,
    format_issues,
    format_prices,
    format_search_results,
    format_summary,
    format_type,
)
from planchet.errors import ApiError, ClientError, ConfigurationError, DecodeError
from planchet.models.catalogue import Category
from planchet.models.request import OAuthTokenParams, SearchTypesParams
from planchet.models.user import CollectedItem, GrantType
from planchet.services.collection_summary import sort_for_display, summarize_by_issuer

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CLIENT_ERROR = 1
EXIT_USAGE = 2

COLLECTION_SCOPE = "view_collection"

Handler = Callable[[argparse.Namespace, Settings], Awaitable[None]]


def build_client(
    args: argparse.Namespace, settings: Settings, bearer_token: str | None = None
) -> Client:
    """
    Build a client from CLI arguments, falling back to settings.

    Raises:
        ConfigurationError: If no API key is available
    """
    builder = (
        ClientBuilder()
        .api_key(args.api_key or settings.api_key)
        .base_url(settings.api_url)
        .timeout(settings.timeout)
    )
    lang = args.lang or settings.lang
    if lang:
        builder = builder.lang(lang)
    if bearer_token:
        builder = builder.bearer_token(bearer_token)
    return builder.build()


def _require_user_id(args: argparse.Namespace) -> int:
    if args.user_id is None:
        raise ConfigurationError(f"--user-id is required for the {args.command} command")
    return int(args.user_id)


async def fetch_collection(args: argparse.Namespace, settings: Settings) -> list[CollectedItem]:
    """
    Fetch a user's whole collection.

    Collected items need a bearer token, so this first exchanges the API key
    for a client_credentials token, then fetches items with it.
    """
    user_id = _require_user_id(args)
    client = build_client(args, settings)

    token = await client.get_oauth_token(
        OAuthTokenParams(grant_type=GrantType.CLIENT_CREDENTIALS, scope=COLLECTION_SCOPE)
    )
    logger.debug("Obtained %s token for user %d", token.token_type, token.user_id)

    user_client = build_client(args, settings, bearer_token=token.access_token)
    items = await user_client.get_collection(user_id)
    logger.info("Fetched %d collected items for user %d", len(items), user_id)
    return items


async def dump_collection(args: argparse.Namespace, settings: Settings) -> None:
    items = await fetch_collection(args, settings)
    output = format_collection(sort_for_display(items))
    if output:
        print(output)


async def summarize_collection(args: argparse.Namespace, settings: Settings) -> None:
    items = await fetch_collection(args, settings)
    print(format_summary(summarize_by_issuer(items).values()))


def _search_params(args: argparse.Namespace) -> SearchTypesParams:
    params = SearchTypesParams()
    if args.q:
        params = params.q(args.q)
    if args.issuer:
        params = params.issuer(args.issuer)
    if args.category:
        params = params.category(Category(args.category))
    if args.year is not None:
        params = params.year(args.year)
    if args.page is not None:
        params = params.page(args.page)
    if args.count is not None:
        params = params.count(args.count)
    return params


async def search_types(args: argparse.Namespace, settings: Settings) -> None:
    client = build_client(args, settings)
    params = _search_params(args)

    if args.all:
        results = [result async for result in client.iter_types(params)]
        print(f"Found {len(results)} types")
    else:
        response = await client.search_types(params)
        results = response.types
        print(f"Found {response.count} types")

    if results:
        print(format_search_results(results))


async def show_type(args: argparse.Namespace, settings: Settings) -> None:
    client = build_client(args, settings)
    print(format_type(await client.get_type(args.type_id)))


async def show_issues(args: argparse.Namespace, settings: Settings) -> None:
    client = build_client(args, settings)
    issues = await client.get_issues(args.type_id)
    if issues:
        print(format_issues(issues))


async def show_prices(args: argparse.Namespace, settings: Settings) -> None:
    client = build_client(args, settings)
    print(format_prices(await client.get_prices(args.type_id, args.issue_id, args.currency)))


HANDLERS: dict[str, Handler] = {
    "dump": dump_collection,
    "summarize": summarize_collection,
    "types": search_types,
    "type": show_type,
    "issues": show_issues,
    "prices": show_prices,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planchet",
        description="Query the Numista catalogue and summarize user collections.",
    )
    parser.add_argument(
        "-a",
        "--api-key",
        help="Numista API key (default: NUMISTA_API_KEY environment variable)",
    )
    parser.add_argument(
        "--user-id",
        type=int,
        help="User whose collection to fetch (required for dump and summarize)",
    )
    parser.add_argument("--lang", help="Response language: en, es or fr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", metavar="<command>")
    commands.add_parser("dump", help="Print the collection sorted by issuer, year and title")
    commands.add_parser("summarize", help="Summarize the collection by issuer")

    types = commands.add_parser("types", help="Search catalogue types")
    types.add_argument("--q", help="Free-text query")
    types.add_argument("--issuer", help="Issuer code, e.g. canada")
    types.add_argument("--category", choices=[c.value for c in Category])
    types.add_argument("--year", type=int)
    types.add_argument("--page", type=int)
    types.add_argument("--count", type=int, help="Results per page")
    types.add_argument("--all", action="store_true", help="Fetch every page of results")

    show = commands.add_parser("type", help="Show a catalogue type")
    show.add_argument("type_id", type=int)

    issues = commands.add_parser("issues", help="List the issues of a type")
    issues.add_argument("type_id", type=int)

    prices = commands.add_parser("prices", help="Show price estimates for an issue")
    prices.add_argument("type_id", type=int)
    prices.add_argument("issue_id", type=int)
    prices.add_argument("--currency", help="ISO 4217 currency code (default: EUR)")

    commands.add_parser("help", help="Show this message")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "help":
        parser.print_help()
        return EXIT_OK
    if args.command is None:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"error: invalid NUMISTA_* setting: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        asyncio.run(HANDLERS[args.command](args, settings))
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except ApiError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CLIENT_ERROR
    except DecodeError as e:
        print(
            f"error: unexpected response from Numista ({e}). "
            "The API may have changed; please report this.",
            file=sys.stderr,
        )
        return EXIT_CLIENT_ERROR
    except ClientError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CLIENT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
