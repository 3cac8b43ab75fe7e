# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .enums import CurrencyEnum
from .model import Model
from .types import PositiveFloat, PositiveInt


class ParsingSettings(Model):
    """Settings for turning free-text form values into amounts."""

    strict_amount_parsing: bool = Field(
        default=False,
        description=(
            "If True, malformed amount text raises InvalidAmountError; "
            "otherwise it degrades to zero so the projection always completes."
        ),
    )
    thousands_separator: str = Field(
        default=",", min_length=1, max_length=1,
        description="Grouping character stripped from amount text.",
    )


class LabelSettings(Model):
    """Descriptions written on generated schedule entries."""

    regular: str = "Construction installment"
    extra: str = "Extra payment"
    delivery: str = "Delivery balance"


class ProjectionSettings(Model):
    """Projection settings

    Configures the tolerances, precision and labels shared by the schedule
    projector, the extra-payment expander and the balloon solver.
    """

    delivery_epsilon: PositiveFloat = Field(
        default=0.005,
        description="Delivery residuals at or below this amount are treated as zero and omitted.",
    )
    currency_precision: PositiveInt = Field(
        default=2, description="Number of decimal places for currency values."
    )
    working_currency: CurrencyEnum = Field(
        default=CurrencyEnum.USD,
        description="Currency every calculation is performed in.",
    )
    display_currency: CurrencyEnum = Field(
        default=CurrencyEnum.USD,
        description=(
            "Default currency reports show amounts in; a currency other than the "
            "working currency requires a CurrencyConversion."
        ),
    )
    parsing: ParsingSettings = Field(default_factory=ParsingSettings)
    labels: LabelSettings = Field(default_factory=LabelSettings)


DEFAULT_SETTINGS = ProjectionSettings()
