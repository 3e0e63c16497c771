"""
Tests for the connector HTTP endpoints.

The Flask app runs with TestingConfig; the provider registry only
knows a Gandi provider backed by a mocked API client.
"""

from unittest.mock import Mock, patch

import pytest

from domainwatch import create_app
from domainwatch.config.settings import TestingConfig
from domainwatch.domain.entities.domain import Domain
from domainwatch.infrastructure.clients.gandi_api_client import GandiAPIClient
from domainwatch.infrastructure.providers.gandi_provider import GandiProvider
from domainwatch.infrastructure.providers.provider_registry import ProviderRegistry
from domainwatch.infrastructure.repositories.memory_repository import (
    InMemoryDomainRepository,
    InMemoryWatchListRepository,
)
from domainwatch.infrastructure.service_container import ServiceContainer
from tests.conftest import make_response


@pytest.fixture
def gandi_client() -> Mock:
    client = Mock(spec=GandiAPIClient)
    client.get_user_info.return_value = make_response(200, {"email": "owner@example.com"})
    client.create_domain.side_effect = lambda token, payload, dry_run, sharing_id=None: make_response(
        200 if dry_run else 202, {"message": "ok"}
    )
    client.list_tlds.return_value = make_response(200, [{"name": "com"}, {"name": "fr"}])
    return client


@pytest.fixture
def app(gandi_client, tld_cache, deleted_domain):
    registry = ProviderRegistry(tld_cache, register_defaults=False)
    registry.register("gandi", lambda auth_data: GandiProvider(auth_data, tld_cache, gandi_client))
    ServiceContainer._provider_registry = registry
    ServiceContainer.configure_repositories(
        InMemoryDomainRepository([deleted_domain, Domain(ldh_name="taken.com", deleted=False)]),
        InMemoryWatchListRepository(),
    )
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


class TestVerifyEndpoint:
    """Tests for POST /api/connectors/<provider>/verify."""

    def test_valid_credentials(self, client, gandi_auth_data) -> None:
        response = client.post("/api/connectors/gandi/verify", json={"authData": gandi_auth_data})

        assert response.status_code == 200
        assert response.get_json() == {
            "status": "ok",
            "provider": "gandi",
            "fields": ["acceptConditions", "ownerLegalAge", "token", "waiveRetractationPeriod"],
        }
        assert "gandi-pat" not in response.get_data(as_text=True)

    def test_missing_auth_data(self, client) -> None:
        response = client.post("/api/connectors/gandi/verify", json={})

        assert response.status_code == 400
        assert response.get_json()["message"] == "Bad authData schema"

    def test_missing_consent(self, client, gandi_auth_data, gandi_client) -> None:
        gandi_auth_data["ownerLegalAge"] = False

        response = client.post("/api/connectors/gandi/verify", json={"authData": gandi_auth_data})

        assert response.status_code == 451
        gandi_client.get_user_info.assert_not_called()

    def test_rejected_token(self, client, gandi_auth_data, gandi_client) -> None:
        gandi_client.get_user_info.return_value = make_response(401, {"message": "Invalid token"})

        response = client.post("/api/connectors/gandi/verify", json={"authData": gandi_auth_data})

        assert response.status_code == 400
        assert response.get_json() == {"status": "error", "message": "Invalid token"}

    def test_unknown_provider(self, client, gandi_auth_data) -> None:
        response = client.post("/api/connectors/namecheap/verify", json={"authData": gandi_auth_data})

        assert response.status_code == 400


class TestOrderEndpoint:
    """Tests for POST /api/connectors/<provider>/order."""

    def test_dry_run_by_default(self, client, gandi_auth_data, gandi_client) -> None:
        response = client.post("/api/connectors/gandi/order", json={
            "authData": gandi_auth_data,
            "ldhName": "example.com",
        })

        assert response.status_code == 200
        assert response.get_json()["dryRun"] is True
        assert response.get_json()["state"] == "checked"
        assert gandi_client.create_domain.call_args.kwargs["dry_run"] is True

    def test_committed_order(self, client, gandi_auth_data) -> None:
        response = client.post("/api/connectors/gandi/order", json={
            "authData": gandi_auth_data,
            "ldhName": "example.com",
            "dryRun": False,
        })

        assert response.status_code == 202
        assert response.get_json()["dryRun"] is False
        assert response.get_json()["state"] == "completed"

    def test_unknown_domain(self, client, gandi_auth_data) -> None:
        response = client.post("/api/connectors/gandi/order", json={
            "authData": gandi_auth_data,
            "ldhName": "unknown.com",
        })

        assert response.status_code == 404

    def test_still_registered(self, client, gandi_auth_data, gandi_client) -> None:
        response = client.post("/api/connectors/gandi/order", json={
            "authData": gandi_auth_data,
            "ldhName": "taken.com",
        })

        assert response.status_code == 400
        assert "WHOIS" in response.get_json()["message"]
        gandi_client.get_user_info.assert_not_called()


class TestTldsEndpoint:

    def test_lists_and_caches(self, client, gandi_auth_data, gandi_client, tld_cache) -> None:
        for _ in range(2):
            response = client.post("/api/connectors/gandi/tlds", json={"authData": gandi_auth_data})
            assert response.status_code == 200
            assert response.get_json()["tlds"] == ["com", "fr"]

        gandi_client.list_tlds.assert_called_once()
        assert tld_cache.store["provider.gandi.supported-tld"] == ["com", "fr"]


class TestHealth:

    def test_liveness(self, client) -> None:
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.get_json()["status"] == "alive"

    def test_unknown_route(self, client) -> None:
        assert client.get("/nowhere").status_code == 404

    @patch("domainwatch.views.health.RedisClientFactory.get_client", return_value=None)
    def test_not_ready_without_redis(self, _get_client, client) -> None:
        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.get_json() == {
            "status": "not_ready",
            "checks": {"redis": False},
            "providers": ["gandi"],
        }

    @patch("domainwatch.views.health.RedisClientFactory.get_client")
    def test_ready(self, get_client, client) -> None:
        get_client.return_value.ping.return_value = True

        assert client.get("/health/ready").status_code == 200
