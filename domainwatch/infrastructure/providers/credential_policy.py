"""Checks shared by every registrar provider.

Structural and consent checks run before any network call so that a
malformed or unconsented credential bag never reaches a provider API.
"""
from typing import Any, Dict, Iterable

from domainwatch.domain.entities.domain import Domain
from domainwatch.domain.exceptions import (
    ConsentError,
    DomainStillRegisteredError,
    InvalidDomainError,
    SchemaError,
)

CONSENT_FIELDS = ("acceptConditions", "ownerLegalAge", "waiveRetractationPeriod")


def require_strings(auth_data: Any, fields: Iterable[str]) -> None:
    """
    Check that every field is a non-empty string.

    Raises:
        SchemaError: If ``auth_data`` is not a mapping or a field is absent or malformed
    """
    if not isinstance(auth_data, dict):
        raise SchemaError()
    for field in fields:
        value = auth_data.get(field)
        if not isinstance(value, str) or not value:
            raise SchemaError()


def require_consent(auth_data: Dict[str, Any]) -> Dict[str, bool]:
    """
    Check that every consent flag is literally ``True``.

    Returns:
        The consent flags

    Raises:
        ConsentError: If any flag is missing or not ``True``
    """
    if any(auth_data.get(field) is not True for field in CONSENT_FIELDS):
        raise ConsentError()
    return {field: True for field in CONSENT_FIELDS}


def require_orderable(domain: Domain) -> str:
    """
    Check order preconditions.

    Returns:
        The domain's ldh name

    Raises:
        DomainStillRegisteredError: If the registry still holds the domain
        InvalidDomainError: If the domain has no name
    """
    if not domain.deleted:
        raise DomainStillRegisteredError()
    if not domain.ldh_name:
        raise InvalidDomainError()
    return domain.ldh_name
