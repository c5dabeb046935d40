"""Session against the grocery REST service."""

import logging
from dataclasses import dataclass, field

from tesco_grocery.adapters.http_transport import Transport
from tesco_grocery.config import DEFAULT_API_URL
from tesco_grocery.domain.errors import PreconditionError
from tesco_grocery.domain.models import (
    BasketListing,
    ChangeBasketResult,
    LoginResult,
    SearchResult,
)
from tesco_grocery.domain.session_state import (
    Authenticated,
    SessionState,
    Unauthenticated,
)
from tesco_grocery.services.decoding import (
    decode_response,
    ensure_success,
    payload_text,
)
from tesco_grocery.services.queries import (
    QueryParams,
    build_url,
    change_basket_params,
    list_basket_params,
    login_params,
    product_search_params,
)
from tesco_grocery.services.repair import (
    repair_missing_commas,
    repair_quoted_status_code,
)

_logger = logging.getLogger(__name__)


@dataclass
class GrocerySession:
    """Credentials plus the session key issued by a successful login.

    A session is not safe to share between threads without external locking.
    """

    developer_key: str
    application_key: str
    transport: Transport
    base_url: str = DEFAULT_API_URL
    debug: bool = False
    state: SessionState = field(default_factory=Unauthenticated)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.session_key)

    @property
    def session_key(self) -> str:
        """Current session key, empty before login."""
        if isinstance(self.state, Authenticated):
            return self.state.session_key
        return ""

    def login(self, email: str, password: str) -> LoginResult:
        """Log in with a customer account and store the issued session key."""
        text = self._fetch(
            login_params(self.developer_key, self.application_key, email, password)
        )
        # LOGIN reports some failures (e.g. 150) with a quoted status code.
        text = repair_quoted_status_code(text)
        result = ensure_success(decode_response(LoginResult, text))
        self.state = Authenticated(session_key=result.session_key)
        if self.debug:
            _logger.info("Logged in: customer_id=%s", result.customer_id)
        return result

    def product_search(
        self, search_text: str, page: int = 1, extended: bool = False
    ) -> SearchResult:
        """Search products by text or 13-digit barcode.

        Extended searches include nutrients and ingredients but are very slow
        on generic text, so prefer them for product id or barcode lookups.
        """
        session_key = self._require_session_key()
        text = self._fetch(
            product_search_params(session_key, search_text, page, extended)
        )
        if extended:
            text = repair_missing_commas(text)
        result = ensure_success(decode_response(SearchResult, text))
        if self.debug:
            _logger.info(
                "Product search: page=%s/%s products=%s",
                result.page_number,
                result.total_page_count,
                len(result.products),
            )
        return result

    def change_basket(
        self, product_id: str, quantity: int, substitute: bool = False
    ) -> ChangeBasketResult:
        """Change the basket quantity of a product by a signed amount.

        A positive quantity inserts an absent product or increases a present
        one. A negative quantity decreases it, and removes the line once its
        magnitude reaches the current quantity. Products sold by weight are
        still counted "each", so 2 adds two apples rather than 2 kg.
        """
        session_key = self._require_session_key()
        text = self._fetch(
            change_basket_params(session_key, product_id, quantity, substitute)
        )
        result = ensure_success(decode_response(ChangeBasketResult, text))
        if self.debug:
            _logger.info("Basket changed: product_id=%s by %s", product_id, quantity)
        return result

    def list_basket(self, fast: bool = False) -> BasketListing:
        """List the basket contents.

        ``fast`` makes the server skip looking up some core attributes such as
        EANBarcode in exchange for a much quicker answer.
        """
        if not self.is_authenticated:
            # TODO: decide whether LISTBASKET should require login like the
            # other basket and search commands once the server behaviour is known.
            _logger.warning("Listing basket without a session key")
        text = self._fetch(list_basket_params(self.session_key, fast))
        result = ensure_success(decode_response(BasketListing, text))
        if self.debug:
            _logger.info("Basket listed: lines=%s", len(result.basket_lines))
        return result

    def _require_session_key(self) -> str:
        session_key = self.session_key
        if not session_key:
            raise PreconditionError("no session key, must log in first")
        return session_key

    def _fetch(self, params: QueryParams) -> str:
        return payload_text(self.transport.get(build_url(self.base_url, params)))
