"""Gandi registrar provider (token based, direct order)."""
import logging
from typing import Any, Dict, List, Optional

import requests

from domainwatch.domain.entities.domain import Domain
from domainwatch.domain.entities.order import OrderSession, OrderState
from domainwatch.domain.exceptions import InvalidCredentialError, OrderRejectedError, ProviderAPIError, SchemaError
from domainwatch.domain.interfaces.registrar_provider import IRegistrarProvider, ITldCacheItem
from domainwatch.domain.interfaces.tld_cache import ITldCache
from domainwatch.infrastructure.clients.gandi_api_client import GandiAPIClient
from domainwatch.infrastructure.providers.credential_policy import (
    require_consent,
    require_orderable,
    require_strings,
)
from domainwatch.infrastructure.repositories.tld_cache import TldCacheItem
from domainwatch.middleware.monitoring import track_provider_call


def _response_message(response: requests.Response) -> Optional[str]:
    try:
        return response.json().get("message")
    except (ValueError, AttributeError):
        return None


class GandiProvider(IRegistrarProvider):
    """
    Gandi v5 API provider.

    Orders are a single request; the Dry-Run header makes Gandi validate
    the order without charging (HTTP 200 instead of 202).
    """

    name = "gandi"

    def __init__(
        self,
        auth_data: Dict[str, Any],
        tld_cache: ITldCache,
        client: Optional[GandiAPIClient] = None
    ):
        """
        Args:
            auth_data: Operator-supplied credential bag
            tld_cache: Cache backing cached_tlds()
            client: Gandi API client (Dependency Injection)
        """
        self.auth_data = auth_data
        self.tld_cache = tld_cache
        self.client = client or GandiAPIClient()
        self.last_session: Optional[OrderSession] = None
        self._logger = logging.getLogger(__name__)

    @track_provider_call("verify")
    def verify(self, auth_data: Dict[str, Any]) -> Dict[str, Any]:
        require_strings(auth_data, ["token"])
        if "sharingId" in auth_data and not isinstance(auth_data["sharingId"], str):
            raise SchemaError()
        consent = require_consent(auth_data)

        token = auth_data["token"]
        response = self.client.get_user_info(token)
        if response.status_code != 200:
            self._logger.warning(f"Gandi rejected credentials (HTTP {response.status_code})")
            raise InvalidCredentialError(_response_message(response))

        normalized = {"token": token, **consent}
        if "sharingId" in auth_data:
            normalized["sharingId"] = auth_data["sharingId"]
        return normalized

    @track_provider_call("order")
    def order(self, domain: Domain, dry_run: bool = False) -> OrderSession:
        ldh_name = require_orderable(domain)
        auth_data = self.verify(self.auth_data)

        session = OrderSession(provider=self.name, ldh_name=ldh_name, dry_run=dry_run)
        self.last_session = session
        session.advance(OrderState.CREDENTIAL_VERIFIED)

        token = auth_data["token"]
        profile_response = self.client.get_user_info(token)
        if profile_response.status_code != 200:
            raise ProviderAPIError(profile_response.status_code, _response_message(profile_response))
        profile = profile_response.json()

        payload = {
            "fqdn": ldh_name,
            "owner": self._owner_contact(profile),
            "tld_period": "golive",
        }
        session.advance(OrderState.CONFIGURED)

        response = self.client.create_domain(
            token,
            payload,
            dry_run=dry_run,
            sharing_id=auth_data.get("sharingId")
        )
        expected_status = 200 if dry_run else 202
        if response.status_code != expected_status:
            session.advance(OrderState.ABORTED)
            self._logger.error(f"Gandi rejected order for {ldh_name} (HTTP {response.status_code})")
            raise OrderRejectedError(_response_message(response))

        session.advance(OrderState.CHECKED if dry_run else OrderState.COMPLETED)
        self._logger.info(f"Gandi order for {ldh_name} {session.state.value} (dry_run={dry_run})")
        return session

    @staticmethod
    def _owner_contact(profile: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "email": profile.get("email"),
            "given": profile.get("firstname"),
            "family": profile.get("lastname"),
            "streetaddr": profile.get("streetaddr"),
            "zip": profile.get("zip"),
            "city": profile.get("city"),
            "state": profile.get("state"),
            "phone": profile.get("phone"),
            "country": profile.get("country"),
            "type": "individual",
        }

    @track_provider_call("supported_tlds")
    def supported_tlds(self) -> List[str]:
        auth_data = self.verify(self.auth_data)
        response = self.client.list_tlds(auth_data["token"])
        if response.status_code != 200:
            raise ProviderAPIError(response.status_code, _response_message(response))
        return [tld["name"] for tld in response.json()]

    def cached_tlds(self) -> ITldCacheItem:
        return TldCacheItem(self.tld_cache, f"provider.{self.name}.supported-tld")
