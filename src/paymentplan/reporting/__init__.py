# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
paymentplan Reporting Module

Presentation-ready views of calculator results:

    schedule = PaymentScheduleReport(result).generate()
    summary = PaymentPlanSummaryReport(result, conversion, CurrencyEnum.DOP).generate()
    balloon = BalloonPlanReport(balloon_result).generate()
"""

from .base import BaseReport
from .payment_plan import (
    SCHEDULE_COLUMNS,
    BalloonPlanReport,
    PaymentPlanSummaryReport,
    PaymentScheduleReport,
)

__all__ = [
    "BaseReport",
    "BalloonPlanReport",
    "PaymentPlanSummaryReport",
    "PaymentScheduleReport",
    "SCHEDULE_COLUMNS",
]
