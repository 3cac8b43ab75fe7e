# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Iterable, List

import pandas as pd
from pydantic import field_validator

from ..core.primitives import Model, ScheduleEntryKindEnum, to_month


class ScheduleEntry(Model):
    """
    One dated cash flow of a payment plan.

    Attributes:
        date: Calendar month the payment is due
        amount: Amount due in the working currency
        description: Human-readable label
        kind: Stream that produced the entry (regular, extra or delivery)
    """

    date: pd.Period
    amount: float
    description: str
    kind: ScheduleEntryKindEnum

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, v: Any) -> pd.Period:
        """Ensure date is a monthly pd.Period."""
        return to_month(v)


def sort_entries(entries: Iterable[ScheduleEntry]) -> List[ScheduleEntry]:
    """Stable ascending sort by month; same-month entries keep their input order."""
    return sorted(entries, key=lambda entry: entry.date)


def total_amount(entries: Iterable[ScheduleEntry]) -> float:
    return sum((entry.amount for entry in entries), 0.0)
