# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base reporting classes for payment plan presentation.

Reports turn calculator results into tabular pandas objects consumed by
on-screen tables and export collaborators (PDF, image, spreadsheet).
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..core.amounts import CurrencyConversion
from ..core.primitives import DEFAULT_SETTINGS, CurrencyEnum, ProjectionSettings


class BaseReport(ABC):
    """
    Abstract base class for all report formatters.

    Reports only format and present results; they never recalculate.
    Amounts may be shown in a second currency through a display-time
    ``CurrencyConversion``; the underlying result is never modified.
    """

    def __init__(
        self,
        results: Any,
        conversion: Optional[CurrencyConversion] = None,
        currency: Optional[CurrencyEnum] = None,
        settings: Optional[ProjectionSettings] = None,
    ):
        """
        Initialize report with calculator results.

        Args:
            results: Result object the report presents
            conversion: Exchange rate used when ``currency`` differs from the working currency
            currency: Display currency; defaults to ``settings.display_currency``
            settings: Projection settings (defaults when omitted)

        Raises:
            TypeError: If ``results`` is not the report's result type
            ValueError: If the display currency differs from the working currency
                and ``conversion`` does not cover the pair
        """
        self._validate(results)
        self._settings = settings or DEFAULT_SETTINGS
        self._working_currency = self._settings.working_currency
        self._currency = currency or self._settings.display_currency
        self._results = results
        self._conversion = conversion

        if self._currency != self._working_currency:
            if conversion is None:
                raise ValueError(
                    f"Displaying {self._currency.value} amounts requires a CurrencyConversion "
                    f"from the working currency {self._working_currency.value}"
                )
            if {conversion.base, conversion.quote} != {self._working_currency, self._currency}:
                raise ValueError(
                    f"Conversion {conversion.base.value}/{conversion.quote.value} does not "
                    f"cover {self._working_currency.value}->{self._currency.value}"
                )

    @abstractmethod
    def _validate(self, results: Any) -> None:
        """Raise TypeError when ``results`` is not the report's result type."""

    @property
    def currency(self) -> CurrencyEnum:
        return self._currency

    @property
    def precision(self) -> int:
        return self._settings.currency_precision

    def _display(self, amount: float) -> float:
        """Amount converted from the working currency to the display currency."""
        if self._currency == self._working_currency:
            return amount
        return self._conversion.convert(amount, self._working_currency, self._currency)

    @abstractmethod
    def generate(self, **kwargs) -> Any:
        """
        Generate the formatted report output.

        This method should transform the results into the appropriate
        output format (DataFrame, Series, ...) without performing any
        financial calculations.
        """
