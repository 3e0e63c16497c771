"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Optional

from domainwatch.application.services.notification_dispatcher import NotificationDispatcher
from domainwatch.application.services.tld_catalog import TldCatalog
from domainwatch.application.use_cases.process_domain_trigger_use_case import (
    ProcessDomainTrigger,
    TriggerMessageHandler,
)
from domainwatch.config.settings import Config
from domainwatch.domain.interfaces.mailer import IMailer
from domainwatch.domain.interfaces.repositories import IDomainRepository, IWatchListRepository
from domainwatch.domain.interfaces.tld_cache import ITldCache
from domainwatch.infrastructure.mailers.console_mailer import ConsoleMailer
from domainwatch.infrastructure.mailers.smtp_mailer import SmtpMailer
from domainwatch.infrastructure.messaging.handler_registry import MessageHandlerRegistry
from domainwatch.infrastructure.providers.provider_registry import ProviderRegistry
from domainwatch.infrastructure.repositories.memory_repository import (
    InMemoryDomainRepository,
    InMemoryWatchListRepository,
)
from domainwatch.infrastructure.repositories.tld_cache import RedisTldCache


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    Follows Singleton pattern. Storage is external to this service:
    repositories must be supplied with configure_repositories(), otherwise
    empty in-memory repositories are used.
    """

    _instance: Optional['ServiceContainer'] = None
    _domain_repository: Optional[IDomainRepository] = None
    _watch_list_repository: Optional[IWatchListRepository] = None
    _mailer: Optional[IMailer] = None
    _tld_cache: Optional[ITldCache] = None
    _provider_registry: Optional[ProviderRegistry] = None
    _tld_catalog: Optional[TldCatalog] = None
    _notification_dispatcher: Optional[NotificationDispatcher] = None
    _trigger_message_handler: Optional[TriggerMessageHandler] = None
    _message_handler_registry: Optional[MessageHandlerRegistry] = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize service container."""
        self._logger = logging.getLogger(__name__)

    @classmethod
    def configure_repositories(
        cls,
        domain_repository: IDomainRepository,
        watch_list_repository: IWatchListRepository
    ) -> None:
        """Wire the external storage lookups."""
        cls._domain_repository = domain_repository
        cls._watch_list_repository = watch_list_repository
        cls._trigger_message_handler = None
        cls._message_handler_registry = None

    def get_domain_repository(self) -> IDomainRepository:
        if self._domain_repository is None:
            self._logger.warning("No domain repository configured, using an empty in-memory one")
            ServiceContainer._domain_repository = InMemoryDomainRepository()
        return self._domain_repository

    def get_watch_list_repository(self) -> IWatchListRepository:
        if self._watch_list_repository is None:
            self._logger.warning("No watch list repository configured, using an empty in-memory one")
            ServiceContainer._watch_list_repository = InMemoryWatchListRepository()
        return self._watch_list_repository

    def get_mailer(self) -> IMailer:
        """Get or create mailer instance."""
        if self._mailer is None:
            backend = Config.MAILER_BACKEND.lower()
            if backend == "smtp":
                ServiceContainer._mailer = SmtpMailer()
            elif backend == "console":
                ServiceContainer._mailer = ConsoleMailer()
            else:
                raise ValueError(f"Unsupported mailer backend: {backend}")
            self._logger.info(f"Mailer created: {backend}")
        return self._mailer

    def get_tld_cache(self) -> ITldCache:
        if self._tld_cache is None:
            ServiceContainer._tld_cache = RedisTldCache()
        return self._tld_cache

    def get_provider_registry(self) -> ProviderRegistry:
        """Get or create provider registry instance."""
        if self._provider_registry is None:
            ServiceContainer._provider_registry = ProviderRegistry(tld_cache=self.get_tld_cache())
            self._logger.info(f"ProviderRegistry created: {self._provider_registry.names()}")
        return self._provider_registry

    def get_tld_catalog(self) -> TldCatalog:
        if self._tld_catalog is None:
            ServiceContainer._tld_catalog = TldCatalog()
        return self._tld_catalog

    def get_notification_dispatcher(self) -> NotificationDispatcher:
        if self._notification_dispatcher is None:
            ServiceContainer._notification_dispatcher = NotificationDispatcher(
                mailer=self.get_mailer(),
                sender_email=Config.MAILER_SENDER_EMAIL,
                locale=Config.MAILER_LOCALE
            )
        return self._notification_dispatcher

    def get_trigger_message_handler(self) -> TriggerMessageHandler:
        """Get or create trigger message handler instance."""
        if self._trigger_message_handler is None:
            ServiceContainer._trigger_message_handler = TriggerMessageHandler(
                domain_repository=self.get_domain_repository(),
                watch_list_repository=self.get_watch_list_repository(),
                dispatcher=self.get_notification_dispatcher()
            )
            self._logger.info("TriggerMessageHandler created")
        return self._trigger_message_handler

    def get_message_handler_registry(self) -> MessageHandlerRegistry:
        """Get or create the message-kind -> handler table."""
        if self._message_handler_registry is None:
            registry = MessageHandlerRegistry()
            registry.register(ProcessDomainTrigger.KIND, self.get_trigger_message_handler())
            ServiceContainer._message_handler_registry = registry
        return self._message_handler_registry

    @classmethod
    def reset(cls) -> None:
        """Reset all service instances (useful for testing)."""
        cls._instance = None
        cls._domain_repository = None
        cls._watch_list_repository = None
        cls._mailer = None
        cls._tld_cache = None
        cls._provider_registry = None
        cls._tld_catalog = None
        cls._notification_dispatcher = None
        cls._trigger_message_handler = None
        cls._message_handler_registry = None
