# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Extra payments and their expansion into dated occurrences.

An extra payment is defined once by the user (a one-time payment, or one
repeating every N months) and expanded here into the concrete occurrences
that fall inside the construction window. Occurrences outside the window
are dropped, never moved to the boundary.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

import pandas as pd
from pydantic import Field

from ..core.amounts import parse_amount
from ..core.primitives import (
    DEFAULT_SETTINGS,
    Model,
    MonthLike,
    MonthNumber,
    PositiveInt,
    ProjectionSettings,
    ScheduleEntryKindEnum,
    month_of,
    month_sequence,
    to_month,
)
from .entries import ScheduleEntry

logger = logging.getLogger(__name__)


class ExtraPaymentDefinition(Model):
    """
    A user-entered extra payment.

    The amount is kept as entered (number or free text) and parsed during
    expansion, so a half-typed amount never blocks the projection.

    Attributes:
        amount: Amount per occurrence, as a number or form text
        description: Label for the schedule; blank uses the default label
        start_month: Month of the first occurrence (1-12)
        start_year: Year of the first occurrence
        frequency_months: 0 for a one-time payment, otherwise months between occurrences

    Examples:
        >>> bonus = ExtraPaymentDefinition(
        ...     amount="5,000", description="Year-end bonus",
        ...     start_month=12, start_year=2025, frequency_months=12,
        ... )
        >>> bonus.is_recurring
        True
    """

    amount: Union[float, str] = ""
    description: str = ""
    start_month: MonthNumber
    start_year: int = Field(ge=1)
    frequency_months: PositiveInt = 0

    @property
    def first_month(self) -> pd.Period:
        return month_of(self.start_month, self.start_year)

    @property
    def is_recurring(self) -> bool:
        return self.frequency_months > 0

    def parsed_amount(self, settings: Optional[ProjectionSettings] = None) -> float:
        return parse_amount(self.amount, settings)


def _occurrences(
    definition: ExtraPaymentDefinition, window_start: pd.Period, window_end: pd.Period
) -> List[pd.Period]:
    # A one-time payment is the degenerate sequence with a zero step.
    return [
        month
        for month in month_sequence(
            definition.first_month, definition.frequency_months, window_end
        )
        if month >= window_start
    ]


def expand_extra_payments(
    definitions: Iterable[ExtraPaymentDefinition],
    window_start: MonthLike,
    window_end: MonthLike,
    settings: Optional[ProjectionSettings] = None,
) -> List[ScheduleEntry]:
    """
    Expand extra-payment definitions into the occurrences inside a window.

    For a one-time definition a single entry is emitted iff its month lies in
    ``[window_start, window_end]``. A recurring definition advances from its
    first month by ``frequency_months`` until past ``window_end``, emitting
    every month inside the window; months before ``window_start`` are
    skipped without ending the sequence.

    Definitions whose amount is blank, malformed or non-positive contribute
    nothing (under strict parsing, malformed text raises instead).

    Args:
        definitions: User-entered extra payments (read-only)
        window_start: First month that may receive an extra payment
        window_end: Last month that may receive an extra payment (inclusive)
        settings: Projection settings (defaults when omitted)

    Returns:
        Extra-payment entries, grouped per definition in input order and
        ascending within each definition

    Raises:
        InvalidAmountError: Malformed amount text under strict parsing
    """
    settings = settings or DEFAULT_SETTINGS
    start = to_month(window_start)
    end = to_month(window_end)

    entries: List[ScheduleEntry] = []
    for definition in definitions:
        amount = definition.parsed_amount(settings)
        if amount <= 0:
            if str(definition.amount).strip():
                logger.debug(
                    f"Skipping extra payment {definition.description!r}: "
                    f"amount {definition.amount!r} is not positive"
                )
            continue

        description = definition.description.strip() or settings.labels.extra
        months = _occurrences(definition, start, end)
        if not months:
            logger.debug(
                f"Extra payment {description!r} starting {definition.first_month} "
                f"has no occurrence within {start}..{end}"
            )
        entries.extend(
            ScheduleEntry(
                date=month,
                amount=amount,
                description=description,
                kind=ScheduleEntryKindEnum.EXTRA,
            )
            for month in months
        )

    return entries
