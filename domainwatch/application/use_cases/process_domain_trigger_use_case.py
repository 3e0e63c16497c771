"""Use case for processing a queued "domain updated" message (Use Case Pattern)."""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List

from domainwatch.application.services.notification_dispatcher import NotificationDispatcher
from domainwatch.application.services.trigger_evaluator import TriggerMatch, evaluate
from domainwatch.domain.entities.domain import Domain
from domainwatch.domain.entities.watch_list import WatchList
from domainwatch.domain.exceptions import ResourceNotFoundError
from domainwatch.domain.interfaces.repositories import IDomainRepository, IWatchListRepository


logger = logging.getLogger(__name__)

Evaluator = Callable[[Domain, WatchList, datetime], List[TriggerMatch]]


@dataclass(frozen=True)
class ProcessDomainTrigger:
    """Message emitted by ingestion when a watched domain was refreshed."""

    KIND = "process_domain_trigger"

    watch_list_token: str
    ldh_name: str
    updated_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "watchListToken": self.watch_list_token,
            "ldhName": self.ldh_name,
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ProcessDomainTrigger":
        updated_at = payload["updatedAt"]
        if isinstance(updated_at, str):
            updated_at = datetime.fromisoformat(updated_at)
        return cls(
            watch_list_token=payload["watchListToken"],
            ldh_name=payload["ldhName"],
            updated_at=updated_at,
        )


class TriggerMessageHandler:
    """
    Wires trigger evaluation into notification dispatch for one message.

    Stateless between invocations; re-delivery of the same message sends
    the same notifications again.
    """

    def __init__(
        self,
        domain_repository: IDomainRepository,
        watch_list_repository: IWatchListRepository,
        dispatcher: NotificationDispatcher,
        evaluator: Evaluator = evaluate,
    ):
        """
        Initialize handler with dependencies (Dependency Injection).

        Args:
            domain_repository: Lookup of domains by ldh name
            watch_list_repository: Lookup of watch lists by token
            dispatcher: Executes matched trigger actions
            evaluator: Computes matched (event, trigger) pairs
        """
        self.domain_repository = domain_repository
        self.watch_list_repository = watch_list_repository
        self.dispatcher = dispatcher
        self.evaluator = evaluator

    def handle(self, message: ProcessDomainTrigger) -> int:
        """
        Process one message.

        Returns:
            Number of dispatched actions

        Raises:
            ResourceNotFoundError: If the watch list or the domain is unknown
            DeliveryError: If a notification could not be sent
        """
        watch_list = self.watch_list_repository.find_by_token(message.watch_list_token)
        if watch_list is None:
            raise ResourceNotFoundError(f"Unknown watch list {message.watch_list_token}")

        domain = self.domain_repository.find_by_ldh_name(message.ldh_name)
        if domain is None:
            raise ResourceNotFoundError(f"Unknown domain {message.ldh_name}")

        matches = self.evaluator(domain, watch_list, message.updated_at)
        logger.info(
            f"{len(matches)} trigger(s) matched for {domain.ldh_name} "
            f"on watch list {watch_list.token}"
        )

        for match in matches:
            self.dispatcher.dispatch(match.trigger.action, match.event, watch_list.user)
        return len(matches)

    def __call__(self, payload: Dict[str, Any]) -> int:
        return self.handle(ProcessDomainTrigger.from_dict(payload))
