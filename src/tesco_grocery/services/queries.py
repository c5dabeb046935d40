"""Query construction for grocery API commands."""

from collections.abc import Sequence
from enum import Enum
from urllib.parse import urlencode

QueryParams = list[tuple[str, str]]


class ApiCommand(Enum):
    """Values of the COMMAND query parameter."""

    LOGIN = "LOGIN"
    PRODUCT_SEARCH = "PRODUCTSEARCH"
    CHANGE_BASKET = "CHANGEBASKET"
    LIST_BASKET = "LISTBASKET"


def yes_no(flag: bool) -> str:
    """Encode a boolean the way the API expects."""
    return "Y" if flag else "N"


def build_url(base_url: str, params: Sequence[tuple[str, str]]) -> str:
    """Append query parameters to the endpoint, keeping their order."""
    return f"{base_url}?{urlencode(list(params))}"


def login_params(
    developer_key: str, application_key: str, email: str, password: str
) -> QueryParams:
    return [
        ("COMMAND", ApiCommand.LOGIN.value),
        ("DEVELOPERKEY", developer_key),
        ("APPLICATIONKEY", application_key),
        ("EMAIL", email),
        ("PASSWORD", password),
    ]


def product_search_params(
    session_key: str, search_text: str, page: int, extended: bool
) -> QueryParams:
    return [
        ("COMMAND", ApiCommand.PRODUCT_SEARCH.value),
        ("SESSIONKEY", session_key),
        ("SEARCHTEXT", search_text),
        ("PAGE", str(page)),
        ("EXTENDEDINFO", yes_no(extended)),
    ]


def change_basket_params(
    session_key: str, product_id: str, quantity: int, substitute: bool
) -> QueryParams:
    return [
        ("COMMAND", ApiCommand.CHANGE_BASKET.value),
        ("SESSIONKEY", session_key),
        ("PRODUCTID", product_id),
        ("CHANGEQUANTITY", str(quantity)),
        ("SUBSTITUTION", yes_no(substitute)),
    ]


def list_basket_params(session_key: str, fast: bool) -> QueryParams:
    return [
        ("COMMAND", ApiCommand.LIST_BASKET.value),
        ("SESSIONKEY", session_key),
        ("FAST", yes_no(fast)),
    ]
