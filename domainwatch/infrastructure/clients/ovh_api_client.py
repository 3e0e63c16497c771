"""OVH API client built on the official ``ovh`` SDK.

The SDK signs every request and keeps the clock offset with the API;
this adapter only maps its exceptions onto domainwatch errors.
"""
import logging
from typing import Any, Callable, Dict, Optional

import ovh
from ovh.client import ENDPOINTS
from ovh.exceptions import APIError, HTTPError, NetworkError

from domainwatch.config.settings import Config
from domainwatch.domain.exceptions import ProviderAPIError, TransportError


def is_known_endpoint(api_endpoint: str) -> bool:
    """Whether ``api_endpoint`` is an SDK endpoint alias (``ovh-eu``, ``ovh-ca``...)."""
    return api_endpoint in ENDPOINTS


class OvhAPIClient:
    """Client for interacting with the OVH API."""

    def __init__(
        self,
        application_key: str,
        application_secret: str,
        api_endpoint: str,
        consumer_key: str,
        timeout: Optional[int] = None,
        client: Optional[ovh.Client] = None
    ):
        """
        Initialize the OVH client.

        Args:
            application_key: Application key (appKey)
            application_secret: Application secret (appSecret)
            api_endpoint: Endpoint alias (apiEndpoint)
            consumer_key: Consumer key bound to the operator account
            timeout: Request timeout in seconds (defaults to Config value)
            client: Prebuilt SDK client
        """
        self.endpoint = api_endpoint
        self._client = client or ovh.Client(
            endpoint=api_endpoint,
            application_key=application_key,
            application_secret=application_secret,
            consumer_key=consumer_key,
            timeout=timeout or Config.PROVIDER_HTTP_TIMEOUT,
        )
        self._logger = logging.getLogger(__name__)

    def get(self, path: str, **params: Any) -> Any:
        return self._call("GET", path, self._client.get, **params)

    def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return self._call("POST", path, self._client.post, **(data or {}))

    def delete(self, path: str) -> Any:
        return self._call("DELETE", path, self._client.delete)

    def _call(self, method: str, path: str, send: Callable[..., Any], **kwargs: Any) -> Any:
        """
        Send one request through the SDK.

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            ProviderAPIError: If the API answers with an error status
            TransportError: If the request could not complete
        """
        try:
            result = send(path, **kwargs)
        except (HTTPError, NetworkError) as e:
            self._logger.error(f"OVH request failed: {method} {path} - {e}")
            raise TransportError(_error_message(e)) from e
        except APIError as e:
            response = getattr(e, "response", None)
            status = response.status_code if response is not None else 502
            self._logger.error(f"HTTP {status} error: {method} {path} ({_error_message(e)})")
            raise ProviderAPIError(status, _error_message(e)) from e

        self._logger.debug(f"Request: {method} {self.endpoint}{path}")
        return result


def _error_message(error: APIError) -> Optional[str]:
    if error.args and isinstance(error.args[0], str):
        return error.args[0]
    return None
