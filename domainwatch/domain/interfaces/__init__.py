"""Domain interfaces following Dependency Inversion Principle."""

from domainwatch.domain.interfaces.registrar_provider import IRegistrarProvider, ITldCacheItem
from domainwatch.domain.interfaces.mailer import EmailNotification, IMailer
from domainwatch.domain.interfaces.repositories import IDomainRepository, IWatchListRepository
from domainwatch.domain.interfaces.tld_cache import ITldCache

__all__ = [
    "IRegistrarProvider",
    "ITldCacheItem",
    "EmailNotification",
    "IMailer",
    "IDomainRepository",
    "IWatchListRepository",
    "ITldCache",
]
