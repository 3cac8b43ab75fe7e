# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model for every plan input and result.

    Instances are immutable: calculators read their inputs and build new
    result objects, so the same inputs can be shared between callers.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,  # pd.Period fields
        frozen=True,
        extra="forbid",  # Catches typos in field names immediately
    )
