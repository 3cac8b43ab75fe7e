# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .solver import BalloonPlanInputs, BalloonPlanResult, solve_balloon

__all__ = [
    "BalloonPlanInputs",
    "BalloonPlanResult",
    "solve_balloon",
]
