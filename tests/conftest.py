"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Domain and watch list entities
- Credential bags for each registrar
- Fake registrar connections and HTTP responses
"""

import os

os.environ.setdefault("FLASK_ENV", "testing")
os.environ.setdefault("ENABLE_METRICS", "false")

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest

from domainwatch.domain.entities.domain import Domain, DomainEvent, EventAction
from domainwatch.domain.entities.watch_list import TriggerAction, User, WatchList, WatchListTrigger
from domainwatch.domain.exceptions import TransportError
from domainwatch.domain.interfaces.tld_cache import ITldCache
from domainwatch.infrastructure.service_container import ServiceContainer


def utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def make_response(status_code: int = 200, json_data: Any = None, text: Optional[str] = None) -> Mock:
    """Build a requests.Response stand-in."""
    response = Mock()
    response.status_code = status_code
    if json_data is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = json_data
    response.text = text if text is not None else ("" if json_data is None else "json")
    return response


class DictTldCache(ITldCache):
    """TLD cache backed by a dict."""

    def __init__(self):
        self.store: Dict[str, List[str]] = {}
        self.get_calls = 0
        self.set_calls = 0

    def get(self, key: str) -> Optional[List[str]]:
        self.get_calls += 1
        return self.store.get(key)

    def set(self, key: str, tlds: List[str]) -> None:
        self.set_calls += 1
        self.store[key] = list(tlds)


VALID_OVH_CREDENTIAL = {
    "status": "validated",
    "expiration": None,
    "rules": [
        {"method": "GET", "path": "/*"},
        {"method": "POST", "path": "/*"},
        {"method": "DELETE", "path": "/*"},
    ],
}


class FakeOvhConnection:
    """Records every call made on an OVH connection and answers like the API."""

    def __init__(
        self,
        credential: Optional[Dict[str, Any]] = None,
        offers: Optional[List[Dict[str, Any]]] = None,
        checkout_error: Optional[TransportError] = None
    ):
        self.calls: List[tuple] = []
        self.credential = credential if credential is not None else dict(VALID_OVH_CREDENTIAL)
        self.offers = offers if offers is not None else [
            {"action": "create", "orderable": True, "pricingMode": "create-default"},
        ]
        self.checkout_error = checkout_error

    def get(self, path: str, **params: Any) -> Any:
        self.calls.append(("GET", path, params or None))
        if path == "/auth/currentCredential":
            return self.credential
        if path == "/domain/extensions":
            return ["com", "fr", "net"]
        if path.endswith("/domain"):
            return self.offers
        return {}

    def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        self.calls.append(("POST", path, data))
        if path == "/order/cart":
            return {"cartId": "cart-1"}
        if path == "/order/cart/cart-1/domain":
            return {"itemId": 42}
        if path == "/order/cart/cart-1/checkout" and self.checkout_error is not None:
            raise self.checkout_error
        return {}

    def delete(self, path: str) -> Any:
        self.calls.append(("DELETE", path, None))
        return None

    def routes(self) -> List[tuple]:
        """Calls without payloads, in order."""
        return [(method, path) for method, path, _ in self.calls]


@pytest.fixture(autouse=True)
def reset_container():
    """Start every test with a fresh service container."""
    ServiceContainer.reset()
    yield
    ServiceContainer.reset()


@pytest.fixture
def user() -> User:
    return User(email="watcher@example.com")


@pytest.fixture
def expiration_watch_list(user: User) -> WatchList:
    return WatchList(
        token="wl-token",
        user=user,
        triggers=(WatchListTrigger(event=EventAction.EXPIRATION, action=TriggerAction.SEND_EMAIL),),
    )


@pytest.fixture
def deleted_domain() -> Domain:
    return Domain(
        ldh_name="example.com",
        deleted=True,
        events=(
            DomainEvent(EventAction.REGISTRATION, utc(2020, 1, 1)),
            DomainEvent(EventAction.DELETION, utc(2025, 2, 1)),
        ),
    )


@pytest.fixture
def registered_domain() -> Domain:
    return Domain(
        ldh_name="example.com",
        deleted=False,
        status_codes={"active"},
        events=(DomainEvent(EventAction.REGISTRATION, utc(2020, 1, 1)),),
    )


@pytest.fixture
def gandi_auth_data() -> Dict[str, Any]:
    return {
        "token": "gandi-pat",
        "acceptConditions": True,
        "ownerLegalAge": True,
        "waiveRetractationPeriod": True,
    }


@pytest.fixture
def ovh_auth_data() -> Dict[str, Any]:
    return {
        "appKey": "app-key",
        "appSecret": "app-secret",
        "apiEndpoint": "ovh-eu",
        "consumerKey": "consumer-key",
        "ovhSubsidiary": "FR",
        "pricingMode": "create-default",
        "acceptConditions": True,
        "ownerLegalAge": True,
        "waiveRetractationPeriod": True,
    }


@pytest.fixture
def tld_cache() -> DictTldCache:
    return DictTldCache()
