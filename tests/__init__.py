# paymentplan Test Suite
# Copyright 2024 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
paymentplan test suite.

This package contains tests for the schedule projector, the extra-payment
expander and the balloon solver, organized into unit and end-to-end test
categories.
"""
