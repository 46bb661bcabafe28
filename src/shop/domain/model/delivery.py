"""Delivery: shipping record owned by exactly one Order."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from shop.domain.exceptions import IllegalOrderStateError
from shop.domain.model.value_objects import Address


class DeliveryStatus(Enum):
    READY = "READY"
    COMP = "COMP"


@dataclass
class Delivery:
    """Created together with its order and destroyed with it.

    ``order_id`` is a lookup-only back reference filled in by the
    repository once the owning order has an identity.
    """

    id: int | None
    address: Address | None
    status: DeliveryStatus = DeliveryStatus.READY
    order_id: int | None = None

    def complete(self) -> None:
        """Transition READY -> COMP."""
        if self.status == DeliveryStatus.COMP:
            raise IllegalOrderStateError("Delivery is already completed")
        self.status = DeliveryStatus.COMP
