# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Dict


class PaymentFrequencyEnum(str, Enum):
    """
    Cadence of the regular construction installments.

    Options:
        MONTHLY: One installment per calendar month
        QUARTERLY: One installment every three months
    """

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"

    @property
    def months(self) -> int:
        """Number of calendar months between consecutive installments."""
        return 1 if self is PaymentFrequencyEnum.MONTHLY else 3


class ScheduleEntryKindEnum(str, Enum):
    """
    Stream a schedule entry belongs to.

    The projector merges three independently generated streams into one
    schedule; the kind tells consumers which stream produced each row.
    """

    REGULAR = "regular"  # Construction installment
    EXTRA = "extra"  # One-time or recurring extra payment
    DELIVERY = "delivery"  # Residual balance due at delivery


class InputModeEnum(str, Enum):
    """Active representation of a dual percent/amount input."""

    PERCENT = "percent"
    AMOUNT = "amount"


class CurrencyEnum(str, Enum):
    """Currencies a plan can be displayed in."""

    USD = "USD"
    DOP = "DOP"

    @property
    def symbol(self) -> str:
        return CURRENCY_SYMBOLS[self]


CURRENCY_SYMBOLS: Dict[CurrencyEnum, str] = {
    CurrencyEnum.USD: "US$",
    CurrencyEnum.DOP: "RD$",
}

# Extra-payment cadences offered for balloon plans (months -> label)
EXTRA_PAYMENT_FREQUENCY_PRESETS: Dict[int, str] = {
    3: "Quarterly (every 3 months)",
    6: "Semi-annual (every 6 months)",
    12: "Annual (every 12 months)",
}
