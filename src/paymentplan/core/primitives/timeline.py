# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calendar month arithmetic for payment plans.

Every date in a payment plan is a calendar month, represented as a monthly
``pd.Period``. Recurring payments, regular installments and balloon occurrence
months are all arithmetic sequences bounded by a window, so they share one
generator: ``stepped_offsets`` over integers and ``month_sequence`` over
months built on top of it.
"""

from __future__ import annotations

from datetime import date
from typing import Iterator, Union

import pandas as pd

MonthLike = Union[pd.Period, date, str]


def to_month(value: MonthLike) -> pd.Period:
    """Normalize a date-like value to a monthly pd.Period."""
    if isinstance(value, pd.Period):
        if value.freqstr != "M":
            return value.asfreq("M", how="start")
        return value
    return pd.Period(value, freq="M")


def month_of(month: int, year: int) -> pd.Period:
    """Build the monthly period for a 1-based month number and a year."""
    return pd.Period(year=year, month=month, freq="M")


def months_between(start: MonthLike, end: MonthLike) -> int:
    """
    Signed number of calendar months from ``start`` to ``end``.

    ``months_between("2025-01", "2027-01") == 24``; negative when ``end``
    precedes ``start``.
    """
    start_period = to_month(start)
    end_period = to_month(end)
    return (end_period.year - start_period.year) * 12 + (
        end_period.month - start_period.month
    )


def stepped_offsets(first: int, step: int, last: int) -> Iterator[int]:
    """
    Yield ``first, first + step, first + 2 * step, ...`` while ``<= last``.

    A non-positive ``step`` denotes a single occurrence: ``first`` is yielded
    once when it does not exceed ``last``.

    Examples:
        >>> list(stepped_offsets(12, 12, 60))
        [12, 24, 36, 48, 60]
        >>> list(stepped_offsets(0, 0, 5))
        [0]
        >>> list(stepped_offsets(13, 13, 12))
        []
    """
    if step <= 0:
        if first <= last:
            yield first
        return
    offset = first
    while offset <= last:
        yield offset
        offset += step


def month_sequence(
    start: MonthLike, step_months: int, end: MonthLike
) -> Iterator[pd.Period]:
    """
    Yield months from ``start`` advancing by ``step_months`` until past ``end``.

    Args:
        start: First month of the sequence
        step_months: Months between consecutive items; 0 yields ``start`` only
        end: Last month that may be yielded (inclusive)

    Returns:
        Iterator of monthly periods, ascending
    """
    start_period = to_month(start)
    span = months_between(start_period, end)
    for offset in stepped_offsets(0, step_months, span):
        yield start_period + offset
