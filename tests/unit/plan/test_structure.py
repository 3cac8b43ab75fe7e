# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pandas as pd
import pytest
from pydantic import ValidationError

from paymentplan.core import PercentOrAmount
from paymentplan.plan import ConstructionWindow, PaymentStructure


class TestPaymentStructure:
    def test_delivery_percent_is_derived(self):
        structure = PaymentStructure(deposit_percent=20, construction_percent=50)
        assert structure.delivery_percent == 30

    def test_construction_clamped_when_sum_exceeds_100(self):
        structure = PaymentStructure(deposit_percent=30, construction_percent=80)
        assert structure.construction_percent == 70
        assert structure.delivery_percent == 0

    def test_deposit_increase_clamps_construction(self):
        structure = PaymentStructure(deposit_percent=20, construction_percent=70)
        updated = structure.with_deposit_percent(45)
        assert updated.deposit_percent == 45
        assert updated.construction_percent == 55
        # original is untouched
        assert structure.construction_percent == 70

    def test_deposit_clamped_to_100(self):
        updated = PaymentStructure(construction_percent=40).with_deposit_percent(120)
        assert updated.deposit_percent == 100
        assert updated.construction_percent == 0

    def test_construction_update_clamped(self):
        updated = PaymentStructure(deposit_percent=25).with_construction_percent(90)
        assert updated.construction_percent == 75

    def test_from_deposit_amount(self):
        structure = PaymentStructure.from_deposit(
            PercentOrAmount.amount(60_000), base=300_000, construction_percent=50
        )
        assert structure.deposit_percent == pytest.approx(20)
        assert structure.construction_percent == 50

    def test_from_deposit_amount_above_base(self):
        structure = PaymentStructure.from_deposit(
            PercentOrAmount.amount(400_000), base=300_000, construction_percent=50
        )
        assert structure.deposit_percent == 100
        assert structure.construction_percent == 0

    def test_numeric_text_is_clamped_after_coercion(self):
        structure = PaymentStructure(deposit_percent="20", construction_percent="90")
        assert structure.construction_percent == 80
        assert structure.delivery_percent == 0

    def test_construction_update_above_100_clamped(self):
        updated = PaymentStructure(deposit_percent=10).with_construction_percent(150)
        assert updated.construction_percent == 90

    def test_percent_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            PaymentStructure(deposit_percent=-5)


class TestConstructionWindow:
    def test_months_span(self, sample_window: ConstructionWindow):
        assert sample_window.start == pd.Period("2025-01", freq="M")
        assert sample_window.delivery == pd.Period("2027-01", freq="M")
        assert sample_window.months_span == 24

    def test_last_installment_month_precedes_delivery(self, sample_window: ConstructionWindow):
        assert sample_window.last_installment_month == pd.Period("2026-12", freq="M")

    def test_delivery_before_start_is_empty(self):
        window = ConstructionWindow.from_months("2026-06", "2025-06")
        assert window.months_span == 0
        assert window.is_empty

    def test_delivery_in_start_month_is_empty(self):
        window = ConstructionWindow(
            start_month=5, start_year=2025, delivery_month=5, delivery_year=2025
        )
        assert window.months_span == 0

    def test_month_must_be_1_to_12(self):
        with pytest.raises(ValidationError):
            ConstructionWindow(
                start_month=13, start_year=2025, delivery_month=1, delivery_year=2026
            )
