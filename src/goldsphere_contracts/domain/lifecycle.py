"""Order status lifecycle.

Orders move forward only. Cancellation is possible until the order
ships; a delivered order can only be completed.
"""

from __future__ import annotations

from enum import StrEnum


class OrderStatus(StrEnum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


ORDER_TRANSITIONS: dict[str, list[str]] = {
    "pending": ["confirmed", "cancelled"],
    "confirmed": ["processing", "cancelled"],
    "processing": ["shipped", "cancelled"],
    "shipped": ["delivered"],
    "delivered": ["completed"],
    "completed": [],
    "cancelled": [],
}

ACTIVE_ORDER_STATUSES: frozenset[str] = frozenset({"pending", "confirmed", "processing", "shipped"})
TERMINAL_ORDER_STATUSES: frozenset[str] = frozenset({"completed", "cancelled"})


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]] = ORDER_TRANSITIONS,
) -> bool:
    """Check if transitioning from *current* to *target* is allowed.

    Status names are matched case-insensitively.
    """
    allowed = transitions.get(current.lower(), [])
    return target.lower() in allowed


def next_statuses(current: str) -> list[str]:
    """Statuses reachable in one step from *current* (empty for unknown)."""
    return list(ORDER_TRANSITIONS.get(current.lower(), []))
