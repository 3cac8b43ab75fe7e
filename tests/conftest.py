# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for paymentplan testing.

This module provides ready-made inputs for the reference sale used across
the suite: a 300,000 unit with a 20% deposit, 50% during construction,
10,000 reserved, construction from January 2025 and delivery in January 2027.
"""

from __future__ import annotations

import pytest

from paymentplan.plan import (
    ConstructionWindow,
    PaymentStructure,
    ScheduleProjectorInputs,
)


def create_test_window(
    start: str = "2025-01", delivery: str = "2027-01"
) -> ConstructionWindow:
    """
    Create a construction window for testing.

    Args:
        start: First construction month in YYYY-MM format
        delivery: Delivery month in YYYY-MM format

    Returns:
        ConstructionWindow ready for testing
    """
    return ConstructionWindow.from_months(start, delivery)


def create_test_inputs(**overrides) -> ScheduleProjectorInputs:
    """Create projector inputs for the reference sale, with field overrides."""
    fields = dict(
        property_value=300_000,
        reservation=10_000,
        structure=PaymentStructure(deposit_percent=20, construction_percent=50),
        window=create_test_window(),
    )
    fields.update(overrides)
    return ScheduleProjectorInputs(**fields)


@pytest.fixture
def sample_window() -> ConstructionWindow:
    return create_test_window()


@pytest.fixture
def sample_inputs() -> ScheduleProjectorInputs:
    return create_test_inputs()


@pytest.fixture
def make_inputs():
    """Factory fixture: reference sale inputs with field overrides."""
    return create_test_inputs
