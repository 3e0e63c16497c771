"""Domain name entities as reported by the registry (RDAP)."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Set, Tuple


class EventAction(str, Enum):
    """Lifecycle event kinds attached to a domain."""

    REGISTRATION = "registration"
    REREGISTRATION = "reregistration"
    TRANSFER = "transfer"
    LAST_CHANGED = "last changed"
    EXPIRATION = "expiration"
    DELETION = "deletion"


@dataclass(frozen=True)
class DomainEvent:
    """Domain entity representing a dated lifecycle event. Immutable once created."""

    action: EventAction
    date: datetime


@dataclass(frozen=True)
class DomainEntity:
    """A contact attached to a domain together with its roles."""

    contact: str
    roles: Tuple[str, ...] = ()


@dataclass
class Domain:
    """
    Domain entity owning its events and contacts.

    Events are kept ordered by date at construction and are never
    reordered afterwards.
    """

    ldh_name: str
    deleted: bool = False
    status_codes: Set[str] = field(default_factory=set)
    events: Tuple[DomainEvent, ...] = ()
    entities: List[DomainEntity] = field(default_factory=list)

    def __post_init__(self):
        self.events = tuple(sorted(self.events, key=lambda event: event.date))

    def events_after(self, cutoff: datetime) -> Tuple[DomainEvent, ...]:
        """Return events strictly newer than ``cutoff``."""
        return tuple(event for event in self.events if event.date > cutoff)
