# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .entries import ScheduleEntry, sort_entries, total_amount
from .extra_payments import ExtraPaymentDefinition, expand_extra_payments
from .projector import (
    ScheduleProjectionResult,
    ScheduleProjectorInputs,
    project_schedule,
)
from .structure import ConstructionWindow, PaymentStructure

__all__ = [
    # Inputs
    "ConstructionWindow",
    "ExtraPaymentDefinition",
    "PaymentStructure",
    "ScheduleProjectorInputs",
    # Results
    "ScheduleEntry",
    "ScheduleProjectionResult",
    # Calculations
    "expand_extra_payments",
    "project_schedule",
    "sort_entries",
    "total_amount",
]
