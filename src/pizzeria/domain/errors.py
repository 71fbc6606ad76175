"""Domain error types.

Every failure in the domain layer is a caller-input failure reported
synchronously. Services translate these into ``ServiceError`` codes.
"""

from __future__ import annotations


class PizzeriaError(Exception):
    """Base class for all pizzeria domain errors."""


class OutOfRangeError(PizzeriaError, IndexError):
    """A catalog index fell outside ``[0, size)``.

    ``index`` is 0-based; the message uses the 1-based ``number`` shown on
    the menu.
    """

    def __init__(self, category: str, index: int, size: int) -> None:
        self.category = category
        self.index = index
        self.number = index + 1
        self.size = size
        super().__init__(f"No {category} number {self.number} (menu lists {size})")


class InvalidTransitionError(PizzeriaError, ValueError):
    """An order status change is not an edge of the transition table."""

    def __init__(
        self, current: str, target: str, allowed: list[str], *, terminal: bool = False
    ) -> None:
        self.current = current
        self.target = target
        self.allowed = allowed
        self.terminal = terminal
        if terminal:
            msg = (
                f"Invalid status transition: {current} -> {target}. "
                f"Order is already {current} and cannot change status"
            )
        else:
            msg = f"Invalid status transition: {current} -> {target}. Allowed: {allowed}"
        super().__init__(msg)
