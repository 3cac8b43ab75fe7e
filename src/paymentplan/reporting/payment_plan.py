# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Payment plan reports

Tabular views of a schedule projection and of a balloon plan, ready for
on-screen tables or spreadsheet export.
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np
import pandas as pd

from ..balloon import BalloonPlanResult
from ..core.amounts import format_currency
from ..plan import ScheduleProjectionResult
from .base import BaseReport

SCHEDULE_COLUMNS = [
    "Payment",
    "Description",
    "Kind",
    "Amount",
    "Cumulative Paid",
    "Remaining Balance",
]


class PaymentScheduleReport(BaseReport):
    """
    Row-per-payment view of a projected schedule.

    The remaining balance starts from what is owed after the deposit
    (discounted value - deposit) and decreases with every scheduled payment.
    """

    def _validate(self, results: Any) -> None:
        if not isinstance(results, ScheduleProjectionResult):
            raise TypeError("PaymentScheduleReport requires a ScheduleProjectionResult")

    def generate(self, formatted: bool = False) -> pd.DataFrame:
        """
        Generate the payment schedule table.

        Args:
            formatted: Render amounts as currency strings instead of floats

        Returns:
            DataFrame indexed by month (PeriodIndex named "Month")
        """
        results: ScheduleProjectionResult = self._results
        entries = results.entries
        if not entries:
            return pd.DataFrame(
                columns=SCHEDULE_COLUMNS,
                index=pd.PeriodIndex([], freq="M", name="Month"),
            )

        amounts = np.array([self._display(entry.amount) for entry in entries])
        cumulative = np.cumsum(amounts)
        owed_after_deposit = self._display(
            results.discounted_value - results.total_deposit
        )

        df = pd.DataFrame(
            {
                "Payment": np.arange(1, len(entries) + 1),
                "Description": [entry.description for entry in entries],
                "Kind": [entry.kind.value for entry in entries],
                "Amount": amounts,
                "Cumulative Paid": cumulative,
                "Remaining Balance": owed_after_deposit - cumulative,
            },
            index=pd.PeriodIndex([entry.date for entry in entries], freq="M", name="Month"),
        )

        if formatted:
            for column in ("Amount", "Cumulative Paid", "Remaining Balance"):
                df[column] = df[column].map(
                    lambda value: format_currency(value, self.currency, self.precision)
                )
        return df


class PaymentPlanSummaryReport(BaseReport):
    """Scalar breakdown of a projection: price, deposit, installments, delivery."""

    def _validate(self, results: Any) -> None:
        if not isinstance(results, ScheduleProjectionResult):
            raise TypeError("PaymentPlanSummaryReport requires a ScheduleProjectionResult")

    def generate(self) -> pd.Series:
        results: ScheduleProjectionResult = self._results
        lines: Dict[str, Any] = {
            "Discounted Value": self._display(results.discounted_value),
            "Deposit %": results.deposit_percent,
            "Total Deposit": self._display(results.total_deposit),
            "Due at Signing": self._display(results.signing_balance),
            "Construction %": results.construction_percent,
            "Construction Total": self._display(results.construction_total),
            "Extra Payments Total": self._display(results.extra_payments_total),
            "Installment Count": results.installment_count,
            "Installment Amount": self._display(results.installment_amount),
            "Delivery %": results.delivery_percent,
            "Delivery Amount": self._display(results.delivery_amount),
            "First Payment": results.entries[0].date if results.entries else None,
            "Last Payment": results.entries[-1].date if results.entries else None,
        }
        return pd.Series(lines, name=f"Payment Plan ({self.currency.value})")


class BalloonPlanReport(BaseReport):
    """Summary of a balloon plan with its extra-payment occurrence months."""

    def _validate(self, results: Any) -> None:
        if not isinstance(results, BalloonPlanResult):
            raise TypeError("BalloonPlanReport requires a BalloonPlanResult")

    def generate(self) -> pd.Series:
        results: BalloonPlanResult = self._results
        return pd.Series(
            {
                "Feasible": results.is_feasible,
                "Extra Payment": self._display(results.required_extra_payment),
                "Occurrences": results.occurrence_count,
                "Frequency (months)": results.frequency_months,
                "Annual Rate %": results.applied_rate_percent,
                "Installments Value": self._display(results.installments_value),
                "Deficit": self._display(results.deficit),
                "Narrative": results.narrative,
            },
            name=f"Balloon Plan ({self.currency.value})",
        )

    def occurrences(self) -> pd.Series:
        """Extra payment amount keyed by month offset from the start of the term."""
        results: BalloonPlanResult = self._results
        return pd.Series(
            self._display(results.required_extra_payment),
            index=pd.Index(results.occurrence_months, name="Month"),
            name="Extra Payment",
            dtype=float,
        )
