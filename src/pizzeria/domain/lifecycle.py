"""Order type and order status lifecycle models.

Order status follows a validated transition table::

    pending -> preparing -> ready -> delivered
    (any non-terminal status) -> cancelled

``delivered`` and ``cancelled`` are terminal. Callers that need the old
unguarded behavior pass ``strict=False`` to ``Order.update_status``.
"""

from __future__ import annotations

from enum import StrEnum


class OrderType(StrEnum):
    """How the customer receives the order."""

    DINE_IN = "dine_in"
    TAKEAWAY = "takeaway"
    DELIVERY = "delivery"


class OrderStatus(StrEnum):
    """Machine status of an order."""

    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# --- Transition map ---

ORDER_TRANSITIONS: dict[str, list[str]] = {
    "pending": ["preparing", "cancelled"],
    "preparing": ["ready", "cancelled"],
    "ready": ["delivered", "cancelled"],
    "delivered": [],
    "cancelled": [],
}

TERMINAL_STATUSES = frozenset(s for s, targets in ORDER_TRANSITIONS.items() if not targets)


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]],
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed


def allowed_transitions(current: str) -> list[str]:
    """Statuses reachable from *current* in one step."""
    return list(ORDER_TRANSITIONS.get(current, []))
