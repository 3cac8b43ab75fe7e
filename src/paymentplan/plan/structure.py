# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Payment split and construction window of a sale.
"""

from __future__ import annotations

import pandas as pd
from pydantic import Field, ValidationInfo, field_validator

from ..core.amounts import PercentOrAmount
from ..core.primitives import (
    Model,
    MonthLike,
    MonthNumber,
    Percentage,
    month_of,
    months_between,
    to_month,
)


class PaymentStructure(Model):
    """
    Deposit / construction / delivery split of the discounted price.

    Only the deposit and construction shares are stored; the delivery share is
    whatever remains. When deposit plus construction would exceed 100 the
    construction share is clamped down so the sum is exactly 100.

    Attributes:
        deposit_percent: Share due up front, reservation included
        construction_percent: Share paid in installments during construction

    Examples:
        >>> PaymentStructure(deposit_percent=30, construction_percent=80)
        PaymentStructure(deposit_percent=30.0, construction_percent=70.0)
    """

    deposit_percent: Percentage = 0.0
    construction_percent: Percentage = 0.0

    @field_validator("construction_percent")
    @classmethod
    def clamp_construction_share(cls, v: float, info: ValidationInfo) -> float:
        deposit = info.data.get("deposit_percent")
        if deposit is not None and deposit + v > 100:
            return 100.0 - deposit
        return v

    @property
    def delivery_percent(self) -> float:
        """Residual share due at delivery."""
        return 100.0 - self.deposit_percent - self.construction_percent

    def with_deposit_percent(self, percent: float) -> "PaymentStructure":
        """New structure with the deposit share replaced (clamped to 0-100)."""
        return PaymentStructure(
            deposit_percent=min(max(percent, 0.0), 100.0),
            construction_percent=self.construction_percent,
        )

    def with_construction_percent(self, percent: float) -> "PaymentStructure":
        """New structure with the construction share replaced."""
        return PaymentStructure(
            deposit_percent=self.deposit_percent,
            construction_percent=min(max(percent, 0.0), 100.0),
        )

    @classmethod
    def from_deposit(
        cls,
        deposit: PercentOrAmount,
        base: float,
        construction_percent: float = 0.0,
    ) -> "PaymentStructure":
        """
        Build a structure from a deposit entered as a percentage or an amount.

        Args:
            deposit: Deposit in either representation
            base: Amount the deposit percentage applies to (the discounted price)
            construction_percent: Construction share

        Returns:
            PaymentStructure with the deposit percentage derived against ``base``
        """
        return cls(
            deposit_percent=min(max(deposit.percent_of(base), 0.0), 100.0),
            construction_percent=min(max(construction_percent, 0.0), 100.0),
        )


class ConstructionWindow(Model):
    """
    Calendar span of construction, from the first installment to delivery.

    The delivery month carries only the delivery balance, so the last month
    that accrues a regular installment is the month before delivery. A
    delivery that precedes the start yields an empty window (zero months),
    never a negative one.

    Attributes:
        start_month: First construction month (1-12)
        start_year: Year of the first construction month
        delivery_month: Delivery month (1-12)
        delivery_year: Year of delivery
    """

    start_month: MonthNumber
    start_year: int = Field(ge=1)
    delivery_month: MonthNumber
    delivery_year: int = Field(ge=1)

    @classmethod
    def from_months(cls, start: MonthLike, delivery: MonthLike) -> "ConstructionWindow":
        """Create a window from two date-like values."""
        start_period = to_month(start)
        delivery_period = to_month(delivery)
        return cls(
            start_month=start_period.month,
            start_year=start_period.year,
            delivery_month=delivery_period.month,
            delivery_year=delivery_period.year,
        )

    @property
    def start(self) -> pd.Period:
        return month_of(self.start_month, self.start_year)

    @property
    def delivery(self) -> pd.Period:
        return month_of(self.delivery_month, self.delivery_year)

    @property
    def last_installment_month(self) -> pd.Period:
        """Month immediately preceding delivery."""
        return self.delivery - 1

    @property
    def months_span(self) -> int:
        """Calendar months strictly before delivery, floored at zero."""
        return max(months_between(self.start, self.delivery), 0)

    @property
    def is_empty(self) -> bool:
        return self.months_span == 0
