#!/usr/bin/env python3
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Balloon Payment Plan Example

A buyer owes US$500,000 and can afford US$3,000 a month over five years.
This script solves for the yearly balloon payment that closes the gap, first
without interest and then at 6% annual interest, and applies the zero-interest
plan back to a payment schedule as a recurring extra payment.
"""

from paymentplan.balloon import BalloonPlanInputs, solve_balloon
from paymentplan.core import format_currency
from paymentplan.core.primitives import EXTRA_PAYMENT_FREQUENCY_PRESETS
from paymentplan.plan import (
    ConstructionWindow,
    PaymentStructure,
    ScheduleProjectorInputs,
    project_schedule,
)
from paymentplan.reporting import BalloonPlanReport


def main():
    print("=" * 70)
    print("BALLOON PAYMENT PLAN")
    print("=" * 70)
    print()

    results = {}
    for rate in (None, 6.0):
        inputs = BalloonPlanInputs(
            debt=500_000,
            proposed_installment=3_000,
            total_months=60,
            extra_frequency_months=12,
            annual_rate_percent=rate,
        )
        result = solve_balloon(inputs)
        results[rate] = result
        print(BalloonPlanReport(result).generate().to_string())
        print()

    print("FREQUENCY COMPARISON (no interest)")
    print("-" * 70)
    for months, label in EXTRA_PAYMENT_FREQUENCY_PRESETS.items():
        result = solve_balloon(
            BalloonPlanInputs(
                debt=500_000,
                proposed_installment=3_000,
                total_months=60,
                extra_frequency_months=months,
            )
        )
        print(
            f"{label:<30} {result.occurrence_count:>3} x "
            f"{format_currency(result.required_extra_payment)}"
        )
    print()

    # Apply the yearly balloon to a 60-month construction plan
    balloon = results[None]
    window = ConstructionWindow(
        start_month=1, start_year=2025, delivery_month=1, delivery_year=2030
    )
    projection = project_schedule(
        ScheduleProjectorInputs.with_extra_definitions(
            [balloon.to_extra_payment(start_month=12, start_year=2025)],
            property_value=500_000,
            structure=PaymentStructure(deposit_percent=0, construction_percent=100),
            window=window,
        )
    )
    print("APPLIED TO SCHEDULE")
    print("-" * 70)
    print(f"Balloon payments:  {len(projection.extra_entries)}")
    print(
        f"Installments:      {projection.installment_count} x "
        f"{format_currency(projection.installment_amount)}"
    )

    return results


if __name__ == "__main__":
    main()
