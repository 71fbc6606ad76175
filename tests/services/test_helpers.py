"""Tests for shared service helpers."""

from decimal import Decimal

from pizzeria.services._helpers import display_number, money


class TestMoney:
    def test_two_decimals(self) -> None:
        assert money(Decimal("9.9")) == "9.90"
        assert money(Decimal("6")) == "6.00"

    def test_negative_kept(self) -> None:
        assert money(Decimal("-1.5")) == "-1.50"


class TestDisplayNumber:
    def test_one_based(self) -> None:
        assert display_number(0) == 1
        assert display_number(4) == 5
