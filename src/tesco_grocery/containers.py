"""Dependency container wiring for the client."""

from collections.abc import Callable
from dataclasses import dataclass

from tesco_grocery.adapters.http_transport import HttpxTransport, Transport
from tesco_grocery.config import Settings
from tesco_grocery.services.session import GrocerySession


@dataclass
class ClientContainer:
    """Holds client-wide dependencies."""

    settings: Settings
    transport: Transport
    session: GrocerySession
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> ClientContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    transport = HttpxTransport.create(timeout=resolved_settings.request_timeout_seconds)
    session = GrocerySession(
        developer_key=resolved_settings.developer_key,
        application_key=resolved_settings.application_key,
        transport=transport,
        base_url=resolved_settings.api_url,
        debug=resolved_settings.debug,
    )

    def close_resources() -> None:
        transport.close()

    return ClientContainer(
        settings=resolved_settings,
        transport=transport,
        session=session,
        close_resources=close_resources,
    )
