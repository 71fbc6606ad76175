"""Sequential order ID generation.

Order IDs are plain integers starting at 1 (configurable) and growing by
one per claimed ID. The sequence is explicit state owned by the shop and
injected where needed, so tests control ID assignment deterministically.

INVARIANT: IDs are unique only under single-threaded, sequential use.
"""

from __future__ import annotations


class OrderIdSequence:
    """Monotonic in-memory counter for order IDs."""

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            msg = f"Order IDs start at 1 or above, got {start}"
            raise ValueError(msg)
        self._next = start

    def next_id(self) -> int:
        """Claim and return the next ID."""
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        """Return the ID the next ``next_id()`` call will claim."""
        return self._next
