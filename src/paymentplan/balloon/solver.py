# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Balloon (recurring extra) payment solver.

Given a debt, the installment a buyer proposes to pay every month and a term,
the solver finds the size of a recurring extra payment, due every
``extra_frequency_months``, that closes whatever the installments leave
uncovered. Two regimes are supported:

- Zero interest: currency units are time-equivalent; the undiscounted deficit
  is split evenly across the extra-payment occurrences.
- Compound interest: installments and extra payments are discounted at the
  monthly rate; the present-value deficit is divided by the sum of discount
  factors at the occurrence months.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np
from pydantic import Field
from pyxirr import pv

from ..core.amounts import SignedFormAmount, round2
from ..core.primitives import (
    DEFAULT_SETTINGS,
    Model,
    MonthNumber,
    ProjectionSettings,
    stepped_offsets,
)
from ..plan.extra_payments import ExtraPaymentDefinition

logger = logging.getLogger(__name__)


class BalloonPlanInputs(Model):
    """
    Inputs of the balloon solver.

    Non-positive values are accepted here and reported as an infeasible plan
    by ``solve_balloon`` rather than rejected. Amounts may be given as form
    text; blank or malformed text reads as zero.

    Attributes:
        debt: Amount to amortize
        proposed_installment: Monthly installment the buyer proposes
        total_months: Term in months
        extra_frequency_months: Months between extra payments (3, 6, 12, ...)
        annual_rate_percent: Annual interest rate in percent; None or <= 0 means zero interest
    """

    debt: SignedFormAmount
    proposed_installment: SignedFormAmount
    total_months: int
    extra_frequency_months: int
    annual_rate_percent: Optional[float] = None

    @property
    def has_interest(self) -> bool:
        return self.annual_rate_percent is not None and self.annual_rate_percent > 0

    @property
    def monthly_rate(self) -> float:
        """Monthly decimal rate; 0 in the zero-interest regime."""
        if not self.has_interest:
            return 0.0
        return self.annual_rate_percent / 100 / 12


class BalloonPlanResult(Model):
    """
    Outcome of a balloon solve.

    Attributes:
        required_extra_payment: Amount of each extra payment, rounded to cents
        occurrence_count: Number of extra payments within the term
        is_feasible: False when inputs are non-positive or no occurrence fits the term
        narrative: Human-readable summary of the plan
        deficit: Amount the extra payments cover (present value under interest)
        installments_value: Amount recovered by installments (present value under interest)
        has_interest: Whether the compound-interest regime was used
        applied_rate_percent: Annual rate applied (0 without interest)
        frequency_months: Months between extra payments
        occurrence_months: Month offsets (1-based from the start of the term) of each extra payment
    """

    required_extra_payment: float = 0.0
    occurrence_count: int = 0
    is_feasible: bool
    narrative: str
    deficit: float = 0.0
    installments_value: float = 0.0
    has_interest: bool = False
    applied_rate_percent: float = 0.0
    frequency_months: int = 0
    occurrence_months: Tuple[int, ...] = Field(default_factory=tuple)

    @property
    def needs_extra_payments(self) -> bool:
        return self.is_feasible and self.required_extra_payment > 0

    def to_extra_payment(
        self,
        start_month: MonthNumber,
        start_year: int,
        description: str = "Balloon payment",
    ) -> ExtraPaymentDefinition:
        """
        Recurring extra-payment definition at the solved amount and frequency.

        Raises:
            ValueError: If the plan is infeasible or needs no extra payment
        """
        if not self.needs_extra_payments:
            raise ValueError(
                "Only a feasible plan with a positive extra payment can be applied"
            )
        return ExtraPaymentDefinition(
            amount=self.required_extra_payment,
            description=description,
            start_month=start_month,
            start_year=start_year,
            frequency_months=self.frequency_months,
        )


def _infeasible(narrative: str, **fields) -> BalloonPlanResult:
    logger.debug(f"Balloon plan infeasible: {narrative}")
    return BalloonPlanResult(is_feasible=False, narrative=narrative, **fields)


def _format_amount(amount: float, precision: int) -> str:
    return f"{amount:,.{precision}f}"


def solve_balloon(
    inputs: BalloonPlanInputs, settings: Optional[ProjectionSettings] = None
) -> BalloonPlanResult:
    """
    Solve for the recurring extra payment that fully amortizes a debt.

    Extra payments fall at months ``f, 2f, 3f, ...`` up to ``total_months``
    where ``f`` is ``extra_frequency_months``.

    Zero interest (no rate, or rate <= 0):
        collected = installment x months
        extra = (debt - collected) / occurrences

    Compound interest (present value):
        i = annual % / 100 / 12
        PV installments = installment x (1 - (1 + i)^-n) / i
        extra = (debt - PV installments) / sum((1 + i)^-m for each occurrence month m)

    Intermediate values are unrounded; only the extra payment is rounded to
    ``currency_precision`` decimals.

    Args:
        inputs: Solver inputs
        settings: Projection settings (defaults when omitted)

    Returns:
        BalloonPlanResult; never raises for numeric inputs

    Example:
        >>> result = solve_balloon(BalloonPlanInputs(
        ...     debt=500_000, proposed_installment=3_000,
        ...     total_months=60, extra_frequency_months=12,
        ... ))
        >>> result.occurrence_count, result.required_extra_payment
        (5, 64000.0)
    """
    settings = settings or DEFAULT_SETTINGS
    precision = settings.currency_precision

    if (
        inputs.debt <= 0
        or inputs.proposed_installment <= 0
        or inputs.total_months <= 0
        or inputs.extra_frequency_months <= 0
    ):
        return _infeasible("All values must be greater than zero")

    frequency = inputs.extra_frequency_months
    occurrence_months = tuple(stepped_offsets(frequency, frequency, inputs.total_months))
    occurrence_count = len(occurrence_months)
    if occurrence_count == 0:
        return _infeasible(
            f"Extra-payment frequency ({frequency} months) exceeds the total "
            f"term ({inputs.total_months} months)",
            installments_value=inputs.proposed_installment * inputs.total_months,
            frequency_months=frequency,
        )

    common = dict(
        occurrence_count=occurrence_count,
        frequency_months=frequency,
        occurrence_months=occurrence_months,
        has_interest=inputs.has_interest,
        applied_rate_percent=inputs.annual_rate_percent if inputs.has_interest else 0.0,
    )

    if not inputs.has_interest:
        installments_value = inputs.proposed_installment * inputs.total_months
        deficit = inputs.debt - installments_value
        if deficit <= 0:
            return BalloonPlanResult(
                is_feasible=True,
                narrative="Monthly installments cover the full debt. No extra payments required.",
                installments_value=installments_value,
                **common,
            )
        required = round2(deficit / occurrence_count, precision)
        narrative = (
            f"Plan viable: {occurrence_count} extra payments of "
            f"{_format_amount(required, precision)} every {frequency} months"
        )
    else:
        monthly_rate = inputs.monthly_rate
        # pyxirr follows the spreadsheet sign convention: outflows are negative.
        installments_value = -pv(
            monthly_rate, inputs.total_months, inputs.proposed_installment
        )
        deficit = inputs.debt - installments_value
        if deficit <= 0:
            return BalloonPlanResult(
                is_feasible=True,
                narrative=(
                    "Monthly installments cover the full debt (including interest). "
                    "No extra payments required."
                ),
                installments_value=installments_value,
                **common,
            )
        discount_factors = np.power(
            1.0 + monthly_rate, -np.asarray(occurrence_months, dtype=float)
        )
        required = round2(deficit / float(discount_factors.sum()), precision)
        narrative = (
            f"Plan viable at {inputs.annual_rate_percent:g}% interest: "
            f"{occurrence_count} extra payments of "
            f"{_format_amount(required, precision)} every {frequency} months"
        )

    logger.debug(
        f"Balloon solved: deficit ${deficit:,.2f} over {occurrence_count} "
        f"payments -> ${required:,.2f} each"
    )
    return BalloonPlanResult(
        required_extra_payment=required,
        is_feasible=True,
        narrative=narrative,
        deficit=deficit,
        installments_value=installments_value,
        **common,
    )
