"""Shared service-layer helper functions."""

from __future__ import annotations

from decimal import Decimal


def money(amount: Decimal) -> str:
    """Render *amount* as a 2-decimal string (``Decimal("9.9")`` -> ``"9.90"``)."""
    return f"{amount:.2f}"


def display_number(index: int) -> int:
    """Convert a 0-based catalog index to the 1-based number shown to users."""
    return index + 1
