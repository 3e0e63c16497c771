"""Gandi API client for making token-authenticated requests."""
import logging
import requests
from typing import Optional, Dict, Any

from domainwatch.config.settings import Config
from domainwatch.domain.exceptions import TransportError


class GandiAPIClient:
    """
    Client for interacting with the Gandi v5 API.

    Returns raw responses: status codes carry meaning for Gandi
    (200 for dry runs, 202 for accepted orders).
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None
    ):
        """
        Initialize the Gandi API client.

        Args:
            session: HTTP session (defaults to a new requests.Session)
            base_url: Base URL for Gandi API (defaults to Config value)
            timeout: Request timeout in seconds (defaults to Config value)
        """
        self.session = session or requests.Session()
        self.base_url = base_url or Config.GANDI_BASE_URL
        self.timeout = timeout or Config.PROVIDER_HTTP_TIMEOUT
        self._logger = logging.getLogger(__name__)

    def _request(
        self,
        method: str,
        endpoint: str,
        token: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None
    ) -> requests.Response:
        """
        Make an authenticated HTTP request to the Gandi API.

        Raises:
            TransportError: If the request could not complete
        """
        url = f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"
        request_headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {token}",
        }
        request_headers.update(headers or {})

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=request_headers,
                params=params,
                json=json_data,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            self._logger.error(f"Gandi request failed: {method} {url} - {e}")
            raise TransportError(str(e)) from e

        self._logger.debug(f"Request: {method} {url} -> {response.status_code}")
        return response

    def get_user_info(self, token: str) -> requests.Response:
        """Fetch the profile of the organization owning ``token``."""
        return self._request("GET", "/v5/organization/user-info", token)

    def list_tlds(self, token: str) -> requests.Response:
        return self._request("GET", "/v5/domain/tlds", token)

    def create_domain(
        self,
        token: str,
        payload: Dict[str, Any],
        dry_run: bool,
        sharing_id: Optional[str] = None
    ) -> requests.Response:
        """
        Submit a domain creation order.

        Args:
            token: Personal access token
            payload: Order body (fqdn, owner, tld_period)
            dry_run: Sent as the Dry-Run header
            sharing_id: Optional organization to bill

        Returns:
            Raw response
        """
        params = {"sharing_id": sharing_id} if sharing_id is not None else None
        return self._request(
            "POST",
            "/v5/domain/domains",
            token,
            headers={"Dry-Run": "1" if dry_run else "0"},
            params=params,
            json_data=payload
        )
