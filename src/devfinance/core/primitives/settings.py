# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .enums import RoundingMethod
from .model import Model


class DrawdownSettings(Model):
    """
    Configuration for the drawdown engine.

    Settings are passed explicitly to each call; there is no module-level
    default instance that callers can mutate.

    Usage Examples:
        # Reference behaviour (ties round away from zero, labels M1, M2, ...)
        settings = DrawdownSettings()

        # Banker's rounding with quarter-style labels
        settings = DrawdownSettings(
            rounding=RoundingMethod.HALF_EVEN,
            month_label_prefix="Month ",
        )
    """

    rounding: RoundingMethod = Field(
        default=RoundingMethod.HALF_UP,
        description="Tie-breaking rule when rounding monthly interest to whole minor units.",
    )
    month_label_prefix: str = Field(
        default="M",
        min_length=1,
        description="Prefix for generated month labels when none are supplied (e.g. 'M' -> 'M1').",
    )

    def month_label(self, index: int) -> str:
        """Default label for the zero-based month ``index``."""
        return f"{self.month_label_prefix}{index + 1}"


class SizingSettings(Model):
    """Configuration for LVR-based facility sizing."""

    gst_rate: float = Field(
        default=0.10,
        ge=0,
        le=1.0,
        description="GST rate used to gross up ex-GST cost bases for *_inc_gst LVR methods.",
    )
