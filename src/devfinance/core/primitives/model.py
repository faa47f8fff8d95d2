# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models. Inputs and results are both frozen; the mutable working
    state of a calculation lives in local variables of the function doing it.

    Fields are snake_case in Python and accept their camelCase alias on input,
    so records loaded from the surrounding application validate unchanged.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",  # Catches typos and missing field definitions immediately
        alias_generator=to_camel,
        validate_by_name=True,
    )
