# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Payment schedule projection for an off-plan property sale.

The projector splits the discounted price into deposit, construction and
delivery shares, spreads the construction share (net of extra payments) over
regular installments, and merges installments, extra payments and the
delivery balance into a single chronologically ordered schedule.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Tuple

from pydantic import Field

from ..core.amounts import FormAmount, PercentOrAmount
from ..core.primitives import (
    DEFAULT_SETTINGS,
    Model,
    PaymentFrequencyEnum,
    ProjectionSettings,
    ScheduleEntryKindEnum,
    month_sequence,
)
from .entries import ScheduleEntry, sort_entries, total_amount
from .extra_payments import ExtraPaymentDefinition, expand_extra_payments
from .structure import ConstructionWindow, PaymentStructure

logger = logging.getLogger(__name__)


class ScheduleProjectorInputs(Model):
    """
    Everything the projector needs, in the working currency.

    Monetary fields accept form text such as ``"300,000"``; blank or
    malformed text reads as zero.

    Attributes:
        property_value: List price of the property
        discount: Discount as a percentage of, or an amount off, the list price
        reservation: Amount already paid to reserve the unit; credited against the deposit
        structure: Deposit / construction split of the discounted price
        window: Construction window
        payment_frequency: Cadence of the regular installments
        extra_payments: Extra-payment entries already expanded over the window
    """

    property_value: FormAmount
    discount: PercentOrAmount = Field(default_factory=PercentOrAmount)
    reservation: FormAmount = 0.0
    structure: PaymentStructure = Field(default_factory=PaymentStructure)
    window: ConstructionWindow
    payment_frequency: PaymentFrequencyEnum = PaymentFrequencyEnum.MONTHLY
    extra_payments: Tuple[ScheduleEntry, ...] = ()

    @classmethod
    def with_extra_definitions(
        cls,
        definitions: Iterable[ExtraPaymentDefinition],
        settings: Optional[ProjectionSettings] = None,
        **fields,
    ) -> "ScheduleProjectorInputs":
        """
        Build inputs, expanding extra-payment definitions over the window.

        Extra payments count from the first construction month through the
        month before delivery.
        """
        window = fields["window"]
        if isinstance(window, dict):
            window = ConstructionWindow(**window)
            fields["window"] = window
        expanded = expand_extra_payments(
            definitions, window.start, window.last_installment_month, settings
        )
        return cls(extra_payments=tuple(expanded), **fields)


class ScheduleProjectionResult(Model):
    """
    Scalar breakdown and merged schedule of a projection.

    ``remaining_construction_balance`` and ``delivery_amount`` are reported
    unclamped; when either is negative the matching flag is set and a
    warning is recorded, and no negative cash flow is scheduled.
    """

    entries: Tuple[ScheduleEntry, ...]
    discounted_value: float
    total_deposit: float
    signing_balance: float
    construction_total: float
    extra_payments_total: float
    remaining_construction_balance: float
    delivery_amount: float
    months_span: int
    installment_count: int
    installment_amount: float
    deposit_percent: float
    construction_percent: float
    delivery_percent: float
    warnings: Tuple[str, ...] = ()

    @property
    def construction_overfunded(self) -> bool:
        """Extra payments exceed the construction share."""
        return self.remaining_construction_balance < 0

    @property
    def delivery_negative(self) -> bool:
        return self.delivery_amount < 0

    def entries_of(self, kind: ScheduleEntryKindEnum) -> List[ScheduleEntry]:
        return [entry for entry in self.entries if entry.kind == kind]

    @property
    def regular_entries(self) -> List[ScheduleEntry]:
        return self.entries_of(ScheduleEntryKindEnum.REGULAR)

    @property
    def extra_entries(self) -> List[ScheduleEntry]:
        return self.entries_of(ScheduleEntryKindEnum.EXTRA)

    @property
    def delivery_entry(self) -> Optional[ScheduleEntry]:
        delivery = self.entries_of(ScheduleEntryKindEnum.DELIVERY)
        return delivery[0] if delivery else None

    @property
    def scheduled_total(self) -> float:
        """Sum of every scheduled cash flow (deposit excluded)."""
        return total_amount(self.entries)


def _installment_count(months_span: int, frequency: PaymentFrequencyEnum) -> int:
    if frequency == PaymentFrequencyEnum.MONTHLY:
        return months_span
    return math.ceil(months_span / frequency.months)


def _regular_entries(
    inputs: ScheduleProjectorInputs,
    count: int,
    amount: float,
    settings: ProjectionSettings,
) -> List[ScheduleEntry]:
    if count <= 0 or amount <= 0:
        return []
    step = inputs.payment_frequency.months
    start = inputs.window.start
    return [
        ScheduleEntry(
            date=month,
            amount=amount,
            description=settings.labels.regular,
            kind=ScheduleEntryKindEnum.REGULAR,
        )
        for month in month_sequence(start, step, start + step * (count - 1))
    ]


def project_schedule(
    inputs: ScheduleProjectorInputs, settings: Optional[ProjectionSettings] = None
) -> ScheduleProjectionResult:
    """
    Project the full payment schedule of a sale.

    Calculation steps:
    1. Discounted value = list price - discount, floored at zero
    2. Deposit = discounted value x deposit %; signing balance = deposit - reservation, floored at zero
    3. Construction share = discounted value x construction %, reduced by the extra payments
    4. Delivery balance = discounted value - deposit - construction share
    5. Installments: one per month (monthly) or per started quarter (quarterly) before delivery
    6. Merge installments, extra payments and delivery balance, sorted by month

    Args:
        inputs: Projection inputs (read-only)
        settings: Projection settings (defaults when omitted)

    Returns:
        ScheduleProjectionResult with the sorted schedule and scalar breakdown

    Example:
        >>> result = project_schedule(ScheduleProjectorInputs(
        ...     property_value=300_000, reservation=10_000,
        ...     structure=PaymentStructure(deposit_percent=20, construction_percent=50),
        ...     window=ConstructionWindow(start_month=1, start_year=2025,
        ...                               delivery_month=1, delivery_year=2027),
        ... ))
        >>> result.installment_count, result.installment_amount
        (24, 6250.0)
    """
    settings = settings or DEFAULT_SETTINGS
    structure = inputs.structure

    discount_amount = inputs.discount.amount_of(inputs.property_value)
    discounted_value = max(inputs.property_value - discount_amount, 0.0)

    total_deposit = discounted_value * structure.deposit_percent / 100
    signing_balance = max(total_deposit - inputs.reservation, 0.0)
    construction_total = discounted_value * structure.construction_percent / 100

    extra_payments_total = total_amount(inputs.extra_payments)
    remaining_construction_balance = construction_total - extra_payments_total
    delivery_amount = discounted_value - total_deposit - construction_total

    months_span = inputs.window.months_span
    installment_count = _installment_count(months_span, inputs.payment_frequency)
    installment_amount = (
        remaining_construction_balance / installment_count
        if installment_count > 0 and remaining_construction_balance > 0
        else 0.0
    )

    warnings: List[str] = []
    if remaining_construction_balance < 0:
        warnings.append(
            f"Extra payments ({extra_payments_total:,.2f}) exceed the construction "
            f"share ({construction_total:,.2f}); installments set to zero"
        )
    if delivery_amount < 0:
        warnings.append(
            f"Deposit and construction shares exceed the discounted value; "
            f"delivery residual is {delivery_amount:,.2f}"
        )
    if months_span == 0 and construction_total > 0:
        warnings.append(
            "Construction window is empty; the construction share has no installments"
        )
    for message in warnings:
        logger.warning(message)

    entries = _regular_entries(inputs, installment_count, installment_amount, settings)
    entries.extend(
        entry
        if entry.kind == ScheduleEntryKindEnum.EXTRA
        else entry.model_copy(update={"kind": ScheduleEntryKindEnum.EXTRA})
        for entry in inputs.extra_payments
    )
    if delivery_amount > settings.delivery_epsilon:
        entries.append(
            ScheduleEntry(
                date=inputs.window.delivery,
                amount=delivery_amount,
                description=settings.labels.delivery,
                kind=ScheduleEntryKindEnum.DELIVERY,
            )
        )

    logger.debug(
        f"Projected {len(entries)} entries: deposit ${total_deposit:,.2f}, "
        f"{installment_count} x ${installment_amount:,.2f}, "
        f"extras ${extra_payments_total:,.2f}, delivery ${delivery_amount:,.2f}"
    )

    return ScheduleProjectionResult(
        entries=tuple(sort_entries(entries)),
        discounted_value=discounted_value,
        total_deposit=total_deposit,
        signing_balance=signing_balance,
        construction_total=construction_total,
        extra_payments_total=extra_payments_total,
        remaining_construction_balance=remaining_construction_balance,
        delivery_amount=delivery_amount,
        months_span=months_span,
        installment_count=installment_count,
        installment_amount=installment_amount,
        deposit_percent=structure.deposit_percent,
        construction_percent=structure.construction_percent,
        delivery_percent=structure.delivery_percent,
        warnings=tuple(warnings),
    )
