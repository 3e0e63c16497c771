"""Watch list entities: a subscriber's triggers over domain events."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from domainwatch.domain.entities.domain import EventAction


class TriggerAction(str, Enum):
    """Action executed when a trigger matches an event."""

    SEND_EMAIL = "email"


@dataclass(frozen=True)
class User:
    """Owner of a watch list."""

    email: str


@dataclass(frozen=True)
class WatchListTrigger:
    """Binds an event kind to an action."""

    event: EventAction
    action: TriggerAction


@dataclass
class WatchList:
    """
    Domain entity representing one subscriber's interest in event kinds.

    A watch list may hold several triggers for the same event, one per action.
    """

    token: str
    user: User
    triggers: Tuple[WatchListTrigger, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.token:
            raise ValueError("token is required")
        self.triggers = tuple(self.triggers)
