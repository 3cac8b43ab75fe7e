# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
paymentplan Core Primitives

Building blocks shared by the schedule projector and the balloon solver:
the immutable model base, constrained types, enums, settings and calendar
month arithmetic.
"""

from .enums import (
    CURRENCY_SYMBOLS,
    EXTRA_PAYMENT_FREQUENCY_PRESETS,
    CurrencyEnum,
    InputModeEnum,
    PaymentFrequencyEnum,
    ScheduleEntryKindEnum,
)
from .model import Model
from .settings import (
    DEFAULT_SETTINGS,
    LabelSettings,
    ParsingSettings,
    ProjectionSettings,
)
from .timeline import (
    MonthLike,
    month_of,
    month_sequence,
    months_between,
    stepped_offsets,
    to_month,
)
from .types import MonthNumber, Percentage, PositiveFloat, PositiveInt

__all__ = [
    # Core models
    "Model",
    # Settings
    "ProjectionSettings",
    "ParsingSettings",
    "LabelSettings",
    "DEFAULT_SETTINGS",
    # Enums
    "CurrencyEnum",
    "InputModeEnum",
    "PaymentFrequencyEnum",
    "ScheduleEntryKindEnum",
    "CURRENCY_SYMBOLS",
    "EXTRA_PAYMENT_FREQUENCY_PRESETS",
    # Types
    "MonthNumber",
    "Percentage",
    "PositiveFloat",
    "PositiveInt",
    # Month arithmetic
    "MonthLike",
    "month_of",
    "month_sequence",
    "months_between",
    "stepped_offsets",
    "to_month",
]
