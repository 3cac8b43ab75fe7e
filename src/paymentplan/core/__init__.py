# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
paymentplan Core

Primitives plus the amount handling shared by every calculator: form-text
sanitation, the percent/amount dual input and display-time currency
conversion.
"""

from . import primitives
from .amounts import (
    AmountInput,
    CurrencyConversion,
    FormAmount,
    InvalidAmountError,
    PercentOrAmount,
    SignedFormAmount,
    amount_to_percent,
    format_currency,
    parse_amount,
    parse_percent,
    percent_to_amount,
    round2,
    sanitize_amount_text,
)

__all__ = [
    "primitives",
    "AmountInput",
    "CurrencyConversion",
    "FormAmount",
    "InvalidAmountError",
    "PercentOrAmount",
    "SignedFormAmount",
    "amount_to_percent",
    "format_currency",
    "parse_amount",
    "parse_percent",
    "percent_to_amount",
    "round2",
    "sanitize_amount_text",
]
