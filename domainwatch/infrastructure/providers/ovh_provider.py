"""OVH registrar provider (key/secret based, cart order)."""
import logging
from datetime import datetime, timezone
from fnmatch import fnmatchcase
from typing import Any, Callable, Dict, List, Optional

from domainwatch.domain.entities.domain import Domain
from domainwatch.domain.entities.order import Offer, OrderSession, OrderState
from domainwatch.domain.exceptions import (
    ExpiredCredentialError,
    InsufficientPermissionError,
    InvalidCredentialError,
    NoOfferError,
    OrderRejectedError,
    ProviderAPIError,
    SchemaError,
    TransportError,
)
from domainwatch.domain.interfaces.registrar_provider import IRegistrarProvider, ITldCacheItem
from domainwatch.domain.interfaces.tld_cache import ITldCache
from domainwatch.infrastructure.clients.ovh_api_client import OvhAPIClient, is_known_endpoint
from domainwatch.infrastructure.providers.credential_policy import (
    require_consent,
    require_orderable,
    require_strings,
)
from domainwatch.infrastructure.repositories.tld_cache import TldCacheItem
from domainwatch.middleware.monitoring import track_provider_call


REQUIRED_FIELDS = ("appKey", "appSecret", "apiEndpoint", "consumerKey", "ovhSubsidiary", "pricingMode")

REQUIRED_ROUTES = (
    {"method": "GET", "path": "/domain/extensions"},
    {"method": "GET", "path": "/order/cart"},
    {"method": "GET", "path": "/order/cart/*"},
    {"method": "POST", "path": "/order/cart"},
    {"method": "POST", "path": "/order/cart/*"},
    {"method": "DELETE", "path": "/order/cart/*"},
)

DEFAULT_PRICING_MODE = "create-default"
CART_DESCRIPTION = "Domain Watchdog"

OvhClientFactory = Callable[[str, str, str, str], OvhAPIClient]


def _parse_expiration(value: str) -> datetime:
    expiration = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if expiration.tzinfo is None:
        expiration = expiration.replace(tzinfo=timezone.utc)
    return expiration


def missing_routes(rules: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Return the required routes no allowed rule grants (method equality, glob on path)."""
    return [
        required for required in REQUIRED_ROUTES
        if not any(
            rule.get("method") == required["method"]
            and fnmatchcase(required["path"], rule.get("path", ""))
            for rule in rules
        )
    ]


class OvhProvider(IRegistrarProvider):
    """
    OVH API provider.

    Ordering is a cart saga:
    create cart -> list offers -> add item -> assign -> configure
    -> checkout summary -> (committed runs only) checkout.
    A cart with no orderable offer is deleted before failing.

    order() returns its OrderSession; the session of the latest attempt,
    failed ones included, stays on ``last_session``.
    """

    name = "ovh"

    def __init__(
        self,
        auth_data: Dict[str, Any],
        tld_cache: ITldCache,
        client_factory: Optional[OvhClientFactory] = None
    ):
        """
        Args:
            auth_data: Operator-supplied credential bag
            tld_cache: Cache backing cached_tlds()
            client_factory: Builds an API client from (appKey, appSecret,
                apiEndpoint, consumerKey)
        """
        self.auth_data = auth_data
        self.tld_cache = tld_cache
        self.client_factory = client_factory or OvhAPIClient
        self.last_session: Optional[OrderSession] = None
        self._logger = logging.getLogger(__name__)

    def _connect(self, auth_data: Dict[str, Any]) -> OvhAPIClient:
        return self.client_factory(
            auth_data["appKey"],
            auth_data["appSecret"],
            auth_data["apiEndpoint"],
            auth_data["consumerKey"],
        )

    @track_provider_call("verify")
    def verify(self, auth_data: Dict[str, Any]) -> Dict[str, Any]:
        require_strings(auth_data, REQUIRED_FIELDS)
        if not is_known_endpoint(auth_data["apiEndpoint"]):
            self._logger.info(f"Unknown OVH API endpoint alias: {auth_data['apiEndpoint']}")
            raise SchemaError()
        consent = require_consent(auth_data)

        conn = self._connect(auth_data)
        try:
            credential = conn.get("/auth/currentCredential")
        except ProviderAPIError as e:
            if 400 <= e.status < 500:
                raise InvalidCredentialError(e.message) from e
            raise

        expiration = credential.get("expiration")
        if expiration is not None and _parse_expiration(expiration) < datetime.now(timezone.utc):
            raise ExpiredCredentialError()

        status = credential.get("status")
        if status != "validated":
            raise InvalidCredentialError(f"The status of these credentials is not valid ({status})")

        missing = missing_routes(credential.get("rules") or [])
        if missing:
            self._logger.warning(f"OVH credential lacks routes: {missing}")
            raise InsufficientPermissionError()

        normalized = {field: auth_data[field] for field in REQUIRED_FIELDS}
        normalized.update(consent)
        return normalized

    @track_provider_call("order")
    def order(self, domain: Domain, dry_run: bool = False) -> OrderSession:
        ldh_name = require_orderable(domain)
        auth_data = self.verify(self.auth_data)

        session = OrderSession(provider=self.name, ldh_name=ldh_name, dry_run=dry_run)
        self.last_session = session
        session.advance(OrderState.CREDENTIAL_VERIFIED)
        conn = self._connect(auth_data)

        cart = conn.post("/order/cart", {
            "ovhSubsidiary": auth_data["ovhSubsidiary"],
            "description": CART_DESCRIPTION,
        })
        session.cart_id = cart["cartId"]
        session.advance(OrderState.CART_CREATED)
        self._logger.info(f"OVH cart {session.cart_id} created for {ldh_name}")

        offers = [Offer.from_dict(offer) for offer in conn.get(f"/order/cart/{session.cart_id}/domain", domain=ldh_name)]
        pricing_modes = {DEFAULT_PRICING_MODE, auth_data["pricingMode"]}
        if not any(self._is_acceptable(offer, pricing_modes) for offer in offers):
            conn.delete(f"/order/cart/{session.cart_id}")
            session.advance(OrderState.ABORTED)
            self._logger.warning(f"No orderable offer for {ldh_name}, cart {session.cart_id} deleted")
            raise NoOfferError()

        item = conn.post(f"/order/cart/{session.cart_id}/domain", {
            "domain": ldh_name,
            "duration": "P1Y",
        })
        session.item_id = item["itemId"]
        session.advance(OrderState.OFFER_SELECTED)

        conn.post(f"/order/cart/{session.cart_id}/assign")
        conn.get(f"/order/cart/{session.cart_id}/item/{session.item_id}/requiredConfiguration")

        configuration = {
            "ACCEPT_CONDITIONS": auth_data["acceptConditions"],
            "OWNER_LEGAL_AGE": auth_data["ownerLegalAge"],
        }
        for label, value in configuration.items():
            conn.post(f"/order/cart/{session.cart_id}/item/{session.item_id}/configuration", {
                "cartId": session.cart_id,
                "itemId": session.item_id,
                "label": label,
                "value": value,
            })
        session.advance(OrderState.CONFIGURED)

        conn.get(f"/order/cart/{session.cart_id}/checkout")
        session.advance(OrderState.CHECKED)

        if dry_run:
            self._logger.info(f"Dry run for {ldh_name} stopped at checkout summary (cart {session.cart_id})")
            return session

        try:
            conn.post(f"/order/cart/{session.cart_id}/checkout", {
                "autoPayWithPreferredPaymentMethod": True,
                "waiveRetractationPeriod": auth_data["waiveRetractationPeriod"],
            })
        except TransportError as e:
            session.advance(OrderState.ABORTED)
            self._logger.error(f"OVH checkout failed for cart {session.cart_id}: {e.message}")
            raise OrderRejectedError(e.message) from e

        session.advance(OrderState.COMPLETED)
        self._logger.info(f"OVH order for {ldh_name} completed (cart {session.cart_id})")
        return session

    @staticmethod
    def _is_acceptable(offer: Offer, pricing_modes: set) -> bool:
        return offer.action == "create" and offer.orderable and offer.pricing_mode in pricing_modes

    @track_provider_call("supported_tlds")
    def supported_tlds(self) -> List[str]:
        auth_data = self.verify(self.auth_data)
        conn = self._connect(auth_data)
        return conn.get("/domain/extensions", ovhSubsidiary=auth_data["ovhSubsidiary"])

    def cached_tlds(self) -> ITldCacheItem:
        return TldCacheItem(self.tld_cache, f"provider.{self.name}.supported-tld")
