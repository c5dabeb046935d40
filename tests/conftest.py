"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlsplit

import pytest

from tesco_grocery.adapters.http_transport import Transport
from tesco_grocery.config import Settings
from tesco_grocery.services.session import GrocerySession

API_URL = "https://api.test/groceryapi/restservice.aspx"


def query_of(url: str) -> dict[str, str]:
    """Return the query parameters of a URL as a dict."""
    return dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))


@dataclass
class FakeTransport(Transport):
    """Fake transport replaying canned bodies and recording requested URLs."""

    responses: list[bytes | Exception] = field(default_factory=list)
    urls: list[str] = field(default_factory=list)

    def get(self, url: str) -> bytes:
        self.urls.append(url)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@dataclass
class FakeGroceryServer(Transport):
    """In-memory stand-in for the grocery service with basket rules."""

    email: str = "shopper@example.com"
    password: str = "secret"
    session_key: str = "sess-0001"
    basket: dict[str, int] = field(default_factory=dict)
    commands: list[str] = field(default_factory=list)

    def get(self, url: str) -> bytes:
        query = query_of(url)
        command = query["COMMAND"]
        self.commands.append(command)
        if command == "LOGIN":
            return self._login(query)
        if query.get("SESSIONKEY") != self.session_key:
            return _json({"StatusCode": 200, "StatusInfo": "Invalid session key"})
        if command == "CHANGEBASKET":
            return self._change_basket(query)
        if command == "LISTBASKET":
            return self._list_basket()
        return _json({"StatusCode": 999, "StatusInfo": "Unknown command"})

    def _login(self, query: dict[str, str]) -> bytes:
        if query["EMAIL"] != self.email or query["PASSWORD"] != self.password:
            return (
                b'{"StatusCode": "150", '
                b'"StatusInfo": "Unable to login with email and password"}'
            )
        return _json(
            {
                "StatusCode": 0,
                "StatusInfo": "Command Processed OK",
                "BranchNumber": "2435",
                "CustomerId": "12345",
                "CustomerName": "Mrs Shopper",
                "CustomerForename": "Sam",
                "SessionKey": self.session_key,
                "InAmendOrderMode": "N",
                "ChosenDeliverySlotInfo": "No delivery slot is reserved.",
            }
        )

    def _change_basket(self, query: dict[str, str]) -> bytes:
        product_id = query["PRODUCTID"]
        quantity = self.basket.get(product_id, 0) + int(query["CHANGEQUANTITY"])
        if quantity > 0:
            self.basket[product_id] = quantity
        else:
            self.basket.pop(product_id, None)
        return _json({"StatusCode": 0, "StatusInfo": "Command Processed OK"})

    def _list_basket(self) -> bytes:
        lines = [
            {
                "ProductId": product_id,
                "Name": f"Product {product_id}",
                "BasketLineQuantity": str(quantity),
                "Price": 1.25,
            }
            for product_id, quantity in self.basket.items()
        ]
        return _json(
            {
                "StatusCode": 0,
                "StatusInfo": "Command Processed OK",
                "BasketID": "98765",
                "InAmendOrderMode": "N",
                "BasketQuantity": str(sum(self.basket.values())),
                "BasketLines": lines,
            }
        )


def _json(payload: dict[str, object]) -> bytes:
    return json.dumps(payload).encode()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        developer_key="dev-key",
        application_key="app-key",
        api_url=API_URL,
    )


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def session(fake_transport: FakeTransport) -> GrocerySession:
    return GrocerySession(
        developer_key="dev-key",
        application_key="app-key",
        transport=fake_transport,
        base_url=API_URL,
    )


@pytest.fixture
def grocery_server() -> FakeGroceryServer:
    return FakeGroceryServer()


@pytest.fixture
def server_session(grocery_server: FakeGroceryServer) -> GrocerySession:
    return GrocerySession(
        developer_key="dev-key",
        application_key="app-key",
        transport=grocery_server,
        base_url=API_URL,
    )
