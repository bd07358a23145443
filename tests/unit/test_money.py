"""Tests for money and quantity primitives."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from invoicecalc.calc.money import (
    MAX_CENTS,
    dollars_to_cents,
    exact_quantity,
    format_quantity,
    format_usd,
    parse_quantity,
    to_cents,
)
from invoicecalc.core.exceptions import InvalidAmount, InvalidQuantity


class TestParseQuantity:
    def test_time_notation_converts_to_decimal_hours(self):
        assert parse_quantity("02:30") == Decimal("2.5")
        assert parse_quantity("100:00") == Decimal("100")
        assert parse_quantity("1:15") == Decimal("1.25")

    def test_bare_decimal(self):
        assert parse_quantity("2.5") == Decimal("2.5")
        assert parse_quantity(" 10 ") == Decimal("10")
        assert parse_quantity(3) == Decimal("3")

    def test_odd_minutes_keep_precision(self):
        # 03:25 at $60/hr bills exactly $205
        assert to_cents(parse_quantity("03:25") * 6000) == 20500

    def test_negative_rejected(self):
        with pytest.raises(InvalidQuantity):
            parse_quantity("-1")

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidQuantity) as exc:
            parse_quantity("abc", field="quantity")
        assert exc.value.field == "quantity"

    def test_minutes_out_of_range_rejected(self):
        with pytest.raises(InvalidQuantity):
            parse_quantity("01:60")

    def test_empty_and_nan_rejected(self):
        with pytest.raises(InvalidQuantity):
            parse_quantity("")
        with pytest.raises(InvalidQuantity):
            parse_quantity("NaN")


class TestExactQuantity:
    def test_time_notation_is_exact_minutes(self):
        assert exact_quantity("00:11") == Fraction(11, 60)
        assert exact_quantity("40:59") == Fraction(40 * 60 + 59, 60)

    def test_decimal_notation_is_exact(self):
        assert exact_quantity("2.5") == Fraction(5, 2)
        assert exact_quantity(Decimal("0.1")) == Fraction(1, 10)

    def test_half_cent_from_minutes_rounds_up(self):
        # 11/60 h at 1530 cents is exactly 280.5
        assert to_cents(exact_quantity("00:11") * 1530) == 281
        assert to_cents(exact_quantity("00:02") * 165) == 6

    def test_errors_carry_field(self):
        with pytest.raises(InvalidQuantity) as exc:
            exact_quantity("-0:30", field="line_items.2.quantity")
        assert exc.value.field == "line_items.2.quantity"


class TestToCents:
    def test_rounds_half_up(self):
        assert to_cents(Decimal("100.5")) == 101
        assert to_cents(Decimal("100.49")) == 100

    def test_whole_amount_unchanged(self):
        assert to_cents(Decimal("15000")) == 15000

    def test_accepts_fractions(self):
        assert to_cents(Fraction(561, 2)) == 281
        assert to_cents(Fraction(-25, 2)) == -13

    def test_huge_amount_does_not_overflow(self):
        assert to_cents(Decimal("1e30") * 6000) == 6 * 10**33


class TestDollarsToCents:
    def test_converts(self):
        assert dollars_to_cents("45.99") == 4599
        assert dollars_to_cents(Decimal("150.75")) == 15075
        assert dollars_to_cents(100) == 10000

    def test_float_goes_through_string(self):
        assert dollars_to_cents(25.5) == 2550

    def test_garbage_rejected(self):
        with pytest.raises(InvalidAmount):
            dollars_to_cents("twelve")

    def test_too_large_rejected(self):
        with pytest.raises(InvalidAmount, match="too large"):
            dollars_to_cents("1e30", field="expenses.0.amount")
        assert dollars_to_cents(Decimal(MAX_CENTS) / 100) == MAX_CENTS


class TestFormatting:
    def test_format_quantity(self):
        assert format_quantity(Decimal("10")) == "10:00"
        assert format_quantity(Decimal("2.5")) == "02:30"

    def test_format_usd(self):
        assert format_usd(600000) == "$6,000"
        assert format_usd(4599) == "$45.99"
        assert format_usd(0) == "$0"
        assert format_usd(-1250) == "-$12.50"
