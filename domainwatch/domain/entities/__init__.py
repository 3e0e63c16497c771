"""Domain entities."""
from domainwatch.domain.entities.domain import Domain, DomainEntity, DomainEvent, EventAction
from domainwatch.domain.entities.watch_list import TriggerAction, User, WatchList, WatchListTrigger
from domainwatch.domain.entities.order import Offer, OrderSession, OrderState

__all__ = [
    "Domain",
    "DomainEntity",
    "DomainEvent",
    "EventAction",
    "TriggerAction",
    "User",
    "WatchList",
    "WatchListTrigger",
    "Offer",
    "OrderSession",
    "OrderState",
]
