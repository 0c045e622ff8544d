from planchet.parsers.numista import (
    decode,
    decode_api_error_message,
    decode_catalogues,
    decode_collected_item,
    decode_collected_items,
    decode_collection,
    decode_collections,
    decode_issuers,
    decode_issues,
    decode_mint,
    decode_mints,
    decode_oauth_token,
    decode_prices,
    decode_publication,
    decode_search_by_image,
    decode_search_response,
    decode_type,
    decode_user,
)

__all__ = [
    "decode",
    "decode_api_error_message",
    "decode_catalogues",
    "decode_collected_item",
    "decode_collected_items",
    "decode_collection",
    "decode_collections",
    "decode_issuers",
    "decode_issues",
    "decode_mint",
    "decode_mints",
    "decode_oauth_token",
    "decode_prices",
    "decode_publication",
    "decode_search_by_image",
    "decode_search_response",
    "decode_type",
    "decode_user",
]
