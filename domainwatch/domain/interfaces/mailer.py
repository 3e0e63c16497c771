"""Interface for outbound mail transport."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict

PRIORITY_HIGHEST = 1
PRIORITY_NORMAL = 3


@dataclass
class EmailNotification:
    """A templated message ready to be rendered and sent."""

    sender: str
    recipient: str
    subject: str
    template: str
    context: Dict[str, Any] = field(default_factory=dict)
    priority: int = PRIORITY_NORMAL
    locale: str = "en"


class IMailer(ABC):
    """Interface for rendering and transmitting notifications."""

    @abstractmethod
    def send(self, notification: EmailNotification) -> None:
        """
        Render and transmit one message.

        Raises:
            DeliveryError: If the transport fails
        """
        pass
