# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from paymentplan.core import (
    CurrencyConversion,
    InvalidAmountError,
    PercentOrAmount,
    format_currency,
    parse_amount,
    parse_percent,
    round2,
    sanitize_amount_text,
)
from paymentplan.core.primitives import (
    CurrencyEnum,
    InputModeEnum,
    ParsingSettings,
    ProjectionSettings,
)

STRICT = ProjectionSettings(parsing=ParsingSettings(strict_amount_parsing=True))


class TestSanitation:
    def test_strips_thousands_separators(self):
        assert sanitize_amount_text("1,250,000") == "1250000"

    def test_strips_stray_characters(self):
        assert sanitize_amount_text("US$ 4,500.75 ") == "4500.75"

    def test_truncates_to_two_decimals(self):
        assert sanitize_amount_text("99.999") == "99.99"

    def test_rejects_second_decimal_point(self):
        assert sanitize_amount_text("1.000.50") == ""

    def test_custom_separator(self):
        assert sanitize_amount_text("1.250.000", separator=".") == "1250000"


class TestParseAmount:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1,500.50", 1500.50),
            ("", 0.0),
            ("   ", 0.0),
            ("abc", 0.0),
            ("1.2.3", 0.0),
            (".", 0.0),
            ("12.345", 12.34),
        ],
    )
    def test_free_text_degrades_to_zero(self, text, expected):
        assert parse_amount(text) == pytest.approx(expected)

    def test_numbers_pass_through(self):
        assert parse_amount(2500) == 2500.0
        assert parse_amount(-10.5) == -10.5
        assert parse_amount(None) == 0.0

    def test_non_finite_number_degrades_to_zero(self):
        assert parse_amount(float("nan")) == 0.0

    def test_strict_parsing_raises_on_malformed_text(self):
        with pytest.raises(InvalidAmountError):
            parse_amount("12abc", STRICT)
        with pytest.raises(InvalidAmountError):
            parse_amount("1.2.3", STRICT)

    def test_strict_parsing_accepts_clean_text(self):
        assert parse_amount("1,500.25", STRICT) == 1500.25
        assert parse_amount("", STRICT) == 0.0

    def test_invalid_amount_error_is_value_error(self):
        assert issubclass(InvalidAmountError, ValueError)


class TestParsePercent:
    def test_clamps_to_range(self):
        assert parse_percent("150") == 100.0
        assert parse_percent(-5) == 0.0

    def test_malformed_is_zero(self):
        assert parse_percent("1.2.3") == 0.0
        assert parse_percent("") == 0.0

    def test_keeps_decimals(self):
        assert parse_percent("12.345%") == pytest.approx(12.345)


class TestRounding:
    def test_round_half_up(self):
        assert round2(2.675) == 2.68
        assert round2(1.005) == 1.01
        assert round2(-1.005) == -1.01

    def test_precision(self):
        assert round2(1234.5678, 0) == 1235.0


class TestPercentOrAmount:
    def test_percent_mode_follows_base(self):
        discount = PercentOrAmount.percent(5)
        assert discount.amount_of(300_000) == pytest.approx(15_000)
        assert discount.amount_of(400_000) == pytest.approx(20_000)
        assert discount.percent_of(400_000) == 5

    def test_amount_mode_stays_fixed(self):
        discount = PercentOrAmount.amount(15_000)
        assert discount.amount_of(400_000) == 15_000
        assert discount.percent_of(300_000) == pytest.approx(5)

    def test_zero_base_yields_zero(self):
        assert PercentOrAmount.percent(10).amount_of(0) == 0.0
        assert PercentOrAmount.amount(10).percent_of(0) == 0.0

    def test_toggle_percent_to_amount(self):
        toggled = PercentOrAmount.percent(12.5).toggled(250_000)
        assert toggled.mode == InputModeEnum.AMOUNT
        assert toggled.value == 31_250.0

    def test_derived_amount_keeps_full_precision(self):
        toggled = PercentOrAmount.percent(33.33).toggled(10)
        assert toggled.value == pytest.approx(3.333)
        assert toggled.toggled(10).value == 33.33

    def test_small_base_round_trip(self):
        assert PercentOrAmount.percent(0.5).toggled(1).toggled(1).value == 0.5

    def test_toggle_amount_to_percent_rounds(self):
        toggled = PercentOrAmount.amount(10_000).toggled(300_000)
        assert toggled.mode == InputModeEnum.PERCENT
        assert toggled.value == 3.33

    @pytest.mark.parametrize("base", [0.37, 1.0, 10.0, 1_000.0, 87_654.32, 300_000.0, 1_250_000.0])
    @pytest.mark.parametrize("percent", [0.0, 0.01, 7.5, 33.33, 50.0, 99.99, 100.0])
    def test_round_trip_is_idempotent(self, base, percent):
        """Test that percent -> amount -> percent reproduces the percentage within 0.01."""
        round_trip = PercentOrAmount.percent(percent).toggled(base).toggled(base)
        assert round_trip.mode == InputModeEnum.PERCENT
        assert abs(round_trip.value - percent) <= 0.01

    def test_repeated_toggles_do_not_drift(self):
        value = PercentOrAmount.percent(17.25)
        for _ in range(10):
            value = value.toggled(432_100).toggled(432_100)
        assert value.value == 17.25

    def test_from_text(self):
        assert PercentOrAmount.from_text("12,000.999").value == 12_000.99
        percent = PercentOrAmount.from_text("250", InputModeEnum.PERCENT)
        assert percent.value == 100.0

    def test_value_accepts_form_text(self):
        assert PercentOrAmount(mode=InputModeEnum.AMOUNT, value="15,000").value == 15_000.0
        assert PercentOrAmount(mode=InputModeEnum.AMOUNT, value="").value == 0.0
        assert PercentOrAmount(mode=InputModeEnum.AMOUNT, value="1.2.3").value == 0.0

    def test_negative_value_rejected(self):
        with pytest.raises(ValidationError):
            PercentOrAmount(mode=InputModeEnum.AMOUNT, value=-1)


class TestCurrency:
    def test_conversion_round_trip(self):
        conversion = CurrencyConversion(rate=63.90)
        dop = conversion.convert(1_000, CurrencyEnum.USD, CurrencyEnum.DOP)
        assert dop == pytest.approx(63_900)
        assert conversion.convert(dop, CurrencyEnum.DOP, CurrencyEnum.USD) == pytest.approx(1_000)

    def test_same_currency_is_identity(self):
        conversion = CurrencyConversion(rate=63.90)
        assert conversion.convert(55.5, CurrencyEnum.USD, CurrencyEnum.USD) == 55.5

    def test_rate_must_be_positive(self):
        with pytest.raises(ValidationError):
            CurrencyConversion(rate=0)

    def test_format_currency(self):
        assert format_currency(1234.5) == "US$1,234.50"
        assert format_currency(1234.5, CurrencyEnum.DOP) == "RD$1,234.50"
        assert format_currency(-20) == "-US$20.00"
