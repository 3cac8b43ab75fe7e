# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Monetary amounts as they arrive from forms.

Amounts are typed by people, so they come in as free text with thousands
separators, stray characters and sometimes a second decimal point. This
module sanitizes that text, converts between the percentage and amount views
of one value, and handles the display-time currency conversion.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated, Any, Optional, Union

from pydantic import BeforeValidator, Field

from .primitives import (
    DEFAULT_SETTINGS,
    CurrencyEnum,
    InputModeEnum,
    Model,
    PositiveFloat,
    ProjectionSettings,
)

logger = logging.getLogger(__name__)

AmountInput = Union[float, int, str, None]

_DISALLOWED = re.compile(r"[^0-9.]")
_STRICT_ALLOWED = re.compile(r"^\s*\d*(\.\d*)?\s*$")


class InvalidAmountError(ValueError):
    """Raised for malformed amount text when strict parsing is enabled."""


def round2(value: float, precision: int = 2) -> float:
    """Round half away from zero to ``precision`` decimals."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def sanitize_amount_text(text: str, separator: str = ",", decimals: int = 2) -> str:
    """
    Clean free-text amount input.

    Thousands separators and any character other than digits and the decimal
    point are stripped, and the fractional part is truncated to ``decimals``.
    Text with more than one decimal point is rejected and returns ``""``.

    Examples:
        >>> sanitize_amount_text("US$ 1,250,000.456")
        '1250000.45'
        >>> sanitize_amount_text("1.2.3")
        ''
    """
    cleaned = _DISALLOWED.sub("", text.replace(separator, ""))
    parts = cleaned.split(".")
    if len(parts) > 2:
        return ""
    if len(parts) == 2 and len(parts[1]) > decimals:
        parts[1] = parts[1][:decimals]
    return ".".join(parts)


def parse_amount(
    value: AmountInput, settings: Optional[ProjectionSettings] = None
) -> float:
    """
    Parse a form amount to a float.

    Numbers pass through unchanged. Text is sanitized first; blank or
    unusable text parses to ``0.0``. With ``strict_amount_parsing`` enabled,
    text that needed more than separator removal raises ``InvalidAmountError``.

    Args:
        value: Number, free text, or None
        settings: Projection settings (defaults when omitted)

    Returns:
        Parsed amount (may be negative only when a number was passed in)

    Raises:
        InvalidAmountError: Malformed text under strict parsing
    """
    settings = settings or DEFAULT_SETTINGS
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
        if not math.isfinite(number):
            if settings.parsing.strict_amount_parsing:
                raise InvalidAmountError(f"Amount must be finite, got {value!r}")
            return 0.0
        return number

    separator = settings.parsing.thousands_separator
    if settings.parsing.strict_amount_parsing:
        if not _STRICT_ALLOWED.match(value.replace(separator, "")):
            raise InvalidAmountError(f"Invalid amount text: {value!r}")

    cleaned = sanitize_amount_text(
        value, separator=separator, decimals=settings.currency_precision
    )
    if cleaned in ("", "."):
        if value.strip():
            logger.debug(f"Amount text {value!r} degraded to zero")
        return 0.0
    return float(cleaned)


def parse_percent(value: AmountInput) -> float:
    """Parse a percentage field, clamped to ``[0, 100]``."""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value) if math.isfinite(value) else 0.0
    else:
        cleaned = _DISALLOWED.sub("", value)
        if cleaned.count(".") > 1 or cleaned in ("", "."):
            return 0.0
        number = float(cleaned)
    return min(max(number, 0.0), 100.0)


def _form_amount(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float)):
        return parse_amount(value)
    return value


# Monetary model fields accept form text ("300,000", "", "12abc") as well as numbers.
FormAmount = Annotated[float, BeforeValidator(_form_amount), Field(ge=0)]
SignedFormAmount = Annotated[float, BeforeValidator(_form_amount)]


def percent_to_amount(base: float, percent: float) -> float:
    """Amount represented by ``percent`` of ``base``."""
    return base * percent / 100 if base > 0 else 0.0


def amount_to_percent(base: float, amount: float) -> float:
    """Percentage of ``base`` represented by ``amount``."""
    return amount / base * 100 if base > 0 else 0.0


class PercentOrAmount(Model):
    """
    One value entered either as a percentage of a base or as an amount.

    The active mode's number is the stored canonical value; the other view
    is derived on read against whatever base is current. A percent-mode
    discount therefore follows a changing property price, while an
    amount-mode discount stays fixed. The stored value is only recomputed
    by an explicit ``toggled`` call.

    Attributes:
        mode: Which representation ``value`` holds
        value: Percentage (0-100) in percent mode, amount otherwise

    Examples:
        >>> discount = PercentOrAmount.percent(5)
        >>> discount.amount_of(300_000)
        15000.0
        >>> discount.toggled(300_000)
        PercentOrAmount(mode=<InputModeEnum.AMOUNT: 'amount'>, value=15000.0)
    """

    mode: InputModeEnum = InputModeEnum.AMOUNT
    value: FormAmount = 0.0

    @classmethod
    def percent(cls, value: float) -> "PercentOrAmount":
        return cls(mode=InputModeEnum.PERCENT, value=value)

    @classmethod
    def amount(cls, value: float) -> "PercentOrAmount":
        return cls(mode=InputModeEnum.AMOUNT, value=value)

    @classmethod
    def from_text(
        cls,
        text: AmountInput,
        mode: InputModeEnum = InputModeEnum.AMOUNT,
        settings: Optional[ProjectionSettings] = None,
    ) -> "PercentOrAmount":
        """Build from form text, sanitizing according to ``mode``."""
        if mode == InputModeEnum.PERCENT:
            return cls(mode=mode, value=parse_percent(text))
        return cls(mode=mode, value=max(parse_amount(text, settings), 0.0))

    @property
    def is_percent(self) -> bool:
        return self.mode == InputModeEnum.PERCENT

    def amount_of(self, base: float) -> float:
        """Amount view against ``base``."""
        if self.is_percent:
            return percent_to_amount(base, self.value)
        return self.value

    def percent_of(self, base: float) -> float:
        """Percentage view against ``base``."""
        if self.is_percent:
            return self.value
        return amount_to_percent(base, self.value)

    def toggled(self, base: float, precision: int = 2) -> "PercentOrAmount":
        """
        Switch the active representation.

        The percentage is the canonical number: an amount derived from it is
        kept at full precision (round it for display only), and a percentage
        derived from an amount is rounded to ``precision`` decimals and capped
        at 100. Percent -> amount -> percent therefore reproduces the
        percentage for any positive base.
        """
        if self.is_percent:
            return PercentOrAmount(mode=InputModeEnum.AMOUNT, value=self.amount_of(base))
        return PercentOrAmount(
            mode=InputModeEnum.PERCENT,
            value=round2(min(self.percent_of(base), 100.0), precision),
        )


class CurrencyConversion(Model):
    """
    Display-time conversion between the working currency and one other.

    The projector always computes in ``base``; amounts are multiplied by
    ``rate`` to show them in ``quote`` and divided to come back.
    """

    rate: PositiveFloat = Field(..., gt=0, description="Units of quote per unit of base")
    base: CurrencyEnum = CurrencyEnum.USD
    quote: CurrencyEnum = CurrencyEnum.DOP

    def convert(
        self, amount: float, source: CurrencyEnum, target: CurrencyEnum
    ) -> float:
        """Convert ``amount`` from ``source`` to ``target``."""
        if source == target:
            return amount
        if source == self.base and target == self.quote:
            return amount * self.rate
        if source == self.quote and target == self.base:
            return amount / self.rate
        raise ValueError(
            f"Conversion {source.value}->{target.value} is not covered by "
            f"{self.base.value}/{self.quote.value}"
        )


def format_currency(
    amount: float, currency: CurrencyEnum = CurrencyEnum.USD, precision: int = 2
) -> str:
    """Render an amount as ``US$1,234.56``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency.symbol}{abs(amount):,.{precision}f}"
