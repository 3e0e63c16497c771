"""Entities local to a registrar ordering workflow."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class OrderState(str, Enum):
    """
    States of an order saga.

    Init -> CredentialVerified -> [provider setup] -> OfferSelected
    -> Configured -> Checked -> Completed | Aborted

    Checked is terminal for dry runs.
    """

    INIT = "init"
    CREDENTIAL_VERIFIED = "credential_verified"
    CART_CREATED = "cart_created"
    OFFER_SELECTED = "offer_selected"
    CONFIGURED = "configured"
    CHECKED = "checked"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class Offer:
    """A purchasable line item proposed by a provider."""

    action: str
    orderable: bool
    pricing_mode: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Offer":
        return cls(
            action=data.get("action", ""),
            orderable=data.get("orderable") is True,
            pricing_mode=data.get("pricingMode", ""),
        )


@dataclass
class OrderSession:
    """One order attempt. Never reused across attempts."""

    provider: str
    ldh_name: str
    dry_run: bool
    cart_id: Optional[str] = None
    item_id: Optional[int] = None
    state: OrderState = OrderState.INIT
    history: List[OrderState] = field(default_factory=list)

    def advance(self, state: OrderState) -> None:
        self.history.append(self.state)
        self.state = state
