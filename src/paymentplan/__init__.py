# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging
import warnings

# Silence pandas FutureWarning related to the monthly frequency alias 'M'.
# Every calendar month in paymentplan is a monthly pd.Period.
warnings.filterwarnings(
    "ignore",
    message=".*'M' is deprecated and will be removed in a future version.*",
    category=FutureWarning,
)

"""
paymentplan - Payment plan projection for off-plan property sales

Turns a property price, a discount, a deposit/construction/delivery split,
extra payments and a construction window into one chronologically ordered
cash-flow schedule, and solves backward for the recurring extra payment that
closes a financing gap.

Key Entry Points:
- paymentplan.plan.project_schedule() - Deposit, construction and delivery schedule
- paymentplan.plan.expand_extra_payments() - Dated occurrences of extra payments
- paymentplan.balloon.solve_balloon() - Recurring extra payment for a target debt
- paymentplan.reporting.* - pandas views for tables and exports

Example Usage:
    ```python
    from paymentplan.plan import (
        ConstructionWindow,
        PaymentStructure,
        ScheduleProjectorInputs,
        project_schedule,
    )

    inputs = ScheduleProjectorInputs(
        property_value=300_000,
        reservation=10_000,
        structure=PaymentStructure(deposit_percent=20, construction_percent=50),
        window=ConstructionWindow(
            start_month=1, start_year=2025, delivery_month=1, delivery_year=2027
        ),
    )
    result = project_schedule(inputs)
    print(f"Installment: {result.installment_amount:,.2f} x {result.installment_count}")
    ```
"""

# Libraries should not configure logging; applications attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "balloon",
    "core",
    "plan",
    "reporting",
]


_LAZY_MODULES = {
    "balloon": "paymentplan.balloon",
    "core": "paymentplan.core",
    "plan": "paymentplan.plan",
    "reporting": "paymentplan.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'paymentplan' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
