"""Typed errors reported to the immediate caller.

Each error carries an HTTP-like ``status_code`` so the web layer can
surface it without knowing the error taxonomy.
"""
from typing import Optional


class DomainWatchError(Exception):
    """Base class for all domainwatch errors."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# Credential verification

class SchemaError(DomainWatchError):
    """A required credential field is missing or malformed."""

    status_code = 400
    default_message = "Bad authData schema"


class ConsentError(DomainWatchError):
    """One of the consent flags is not literally true."""

    status_code = 451
    default_message = "The user has not given explicit consent"


class InvalidCredentialError(DomainWatchError):
    status_code = 400
    default_message = "The status of these credentials is not valid"


class ExpiredCredentialError(DomainWatchError):
    status_code = 400
    default_message = "These credentials have expired"


class InsufficientPermissionError(DomainWatchError):
    status_code = 400
    default_message = (
        "This Connector does not have enough permissions on the Provider API. "
        "Please recreate this Connector."
    )


# Ordering

class DomainStillRegisteredError(DomainWatchError):
    status_code = 400
    default_message = "The domain name still appears in the WHOIS database"


class InvalidDomainError(DomainWatchError):
    status_code = 400
    default_message = "Domain name cannot be null"


class NoOfferError(DomainWatchError):
    status_code = 400
    default_message = "Cannot buy this domain name"


class OrderRejectedError(DomainWatchError):
    status_code = 400
    default_message = "The order was rejected by the provider"


# Notification

class DeliveryError(DomainWatchError):
    status_code = 503
    default_message = "The notification could not be delivered"


# Transport and lookups

class TransportError(DomainWatchError):
    """Network fault (timeout, connection reset) talking to a remote service."""

    status_code = 502
    default_message = "The provider could not be reached"


class ProviderAPIError(TransportError):
    """The provider answered with an unexpected status."""

    def __init__(self, status: int, message: Optional[str] = None):
        self.status = status
        super().__init__(message or f"Unexpected response from provider (HTTP {status})")


class UnknownProviderError(DomainWatchError):
    status_code = 400
    default_message = "Unknown provider"


class ResourceNotFoundError(DomainWatchError):
    status_code = 404
    default_message = "Resource not found"
