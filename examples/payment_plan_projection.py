#!/usr/bin/env python3
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Off-Plan Apartment Payment Plan Example

This script projects the payment schedule of a pre-construction apartment
sale: a deposit at signing (net of the reservation), monthly installments
during construction, a recurring year-end bonus payment and the balance due
at delivery.

## Deal Overview

- List price: US$300,000 with a 5% discount
- Reservation: US$10,000, credited against the deposit
- Structure: 20% deposit, 50% during construction, 30% at delivery
- Construction: January 2025 through December 2026, delivery January 2027
- Extra payments: US$5,000 every December

The schedule is shown in US dollars and again in Dominican pesos at a
display-only exchange rate.
"""

from paymentplan.core import CurrencyConversion, PercentOrAmount, format_currency
from paymentplan.core.primitives import CurrencyEnum, PaymentFrequencyEnum
from paymentplan.plan import (
    ConstructionWindow,
    ExtraPaymentDefinition,
    PaymentStructure,
    ScheduleProjectorInputs,
    project_schedule,
)
from paymentplan.reporting import PaymentPlanSummaryReport, PaymentScheduleReport


def create_inputs() -> ScheduleProjectorInputs:
    """Inputs of the example sale, with the year-end bonus expanded over the window."""
    return ScheduleProjectorInputs.with_extra_definitions(
        [
            ExtraPaymentDefinition(
                amount="5,000",
                description="Year-end bonus",
                start_month=12,
                start_year=2025,
                frequency_months=12,
            )
        ],
        property_value=300_000,
        discount=PercentOrAmount.percent(5),
        reservation=10_000,
        structure=PaymentStructure(deposit_percent=20, construction_percent=50),
        window=ConstructionWindow(
            start_month=1, start_year=2025, delivery_month=1, delivery_year=2027
        ),
        payment_frequency=PaymentFrequencyEnum.MONTHLY,
    )


def main():
    print("=" * 70)
    print("OFF-PLAN APARTMENT PAYMENT PLAN")
    print("=" * 70)
    print()

    inputs = create_inputs()
    result = project_schedule(inputs)

    print(f"Discounted Value:   {format_currency(result.discounted_value)}")
    print(
        f"Deposit ({result.deposit_percent:g}%):      {format_currency(result.total_deposit)}"
        f"  (due at signing: {format_currency(result.signing_balance)})"
    )
    print(
        f"Construction ({result.construction_percent:g}%): "
        f"{format_currency(result.construction_total)}"
    )
    print(f"  Extra payments:   {format_currency(result.extra_payments_total)}")
    print(
        f"  Installments:     {result.installment_count} x "
        f"{format_currency(result.installment_amount)}"
    )
    print(
        f"Delivery ({result.delivery_percent:g}%):     {format_currency(result.delivery_amount)}"
    )
    for message in result.warnings:
        print(f"WARNING: {message}")
    print()

    schedule = PaymentScheduleReport(result).generate(formatted=True)
    print("PAYMENT SCHEDULE (USD)")
    print("-" * 70)
    print(schedule.to_string())
    print()

    conversion = CurrencyConversion(rate=60.50)
    summary = PaymentPlanSummaryReport(result, conversion, CurrencyEnum.DOP).generate()
    print(f"SUMMARY (DOP @ {conversion.rate:.2f})")
    print("-" * 70)
    print(summary.to_string())

    return result


if __name__ == "__main__":
    main()
