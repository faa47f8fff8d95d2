# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Facility sizing from LVR (loan-to-value / loan-to-cost) percentages.

An auto-sized facility's limit is a percentage of one project metric: sales
revenue (GRV), total development cost excluding funding costs (TDC), or
construction cost with or without contingency (TCC). Inc-GST variants of the
cost bases gross the ex-GST figure up by the configured GST rate.
"""

import logging
from typing import Optional, Union

from pydantic import Field

from ..core.primitives import LvrMethod, Model, SizingSettings, round_amount
from .facility import FacilityTerms

logger = logging.getLogger(__name__)


class FacilitySizingContext(Model):
    """
    Project totals an LVR percentage can be applied to (minor units).

    Attributes:
        total_revenue_ex_gst: Gross realisation value excluding GST
        total_revenue: Gross realisation value as sold (including GST)
        total_costs_ex_funding: Total development cost excluding funding costs
        construction_costs: Construction cost total
        contingency_costs: Contingency total
    """

    total_revenue_ex_gst: float = Field(0.0)
    total_revenue: float = Field(0.0)
    total_costs_ex_funding: float = Field(0.0)
    construction_costs: float = Field(0.0)
    contingency_costs: float = Field(0.0)


def lvr_base(
    method: LvrMethod,
    context: FacilitySizingContext,
    settings: Optional[SizingSettings] = None,
) -> Union[int, float]:
    """
    Project metric an LVR method applies to.

    Args:
        method: LVR method (unknown values fall back to TDC ex GST)
        context: Project totals
        settings: Sizing settings (GST rate)

    Returns:
        Base amount in minor units
    """
    settings = settings or SizingSettings()
    gross_up = 1 + settings.gst_rate
    method = LvrMethod(method)

    if method == LvrMethod.GRV_EX_GST:
        return context.total_revenue_ex_gst
    if method == LvrMethod.GRV_INC_GST:
        return context.total_revenue
    if method == LvrMethod.TDC_INC_GST:
        return round_amount(context.total_costs_ex_funding * gross_up)
    if method == LvrMethod.TCC_EX_GST:
        return context.construction_costs
    if method == LvrMethod.TCC_INC_GST:
        return round_amount(context.construction_costs * gross_up)
    if method == LvrMethod.TCC_CONT_EX_GST:
        return context.construction_costs + context.contingency_costs
    if method == LvrMethod.TCC_CONT_INC_GST:
        return round_amount(
            (context.construction_costs + context.contingency_costs) * gross_up
        )
    return context.total_costs_ex_funding


def resolve_facility_size(
    terms: FacilityTerms,
    context: FacilitySizingContext,
    settings: Optional[SizingSettings] = None,
) -> Union[int, float]:
    """
    Resolve a facility's limit, either as stated or auto-sized from its LVR.

    Args:
        terms: Stored facility record
        context: Project totals for AUTO sizing
        settings: Sizing settings (GST rate)

    Returns:
        Facility limit in minor units

    Example:
        # 65% of a $10M TDC
        terms = FacilityTerms(id="f1", calculation_type="auto",
                              lvr_method="tdc_ex_gst", lvr_pct=65)
        ctx = FacilitySizingContext(total_costs_ex_funding=10_000_000_00)
        resolve_facility_size(terms, ctx)  # 6_500_000_00
    """
    if not terms.is_auto:
        return terms.total_facility

    base = lvr_base(terms.lvr_method, context, settings)
    size = round_amount(base * (terms.lvr_pct / 100))
    logger.debug(
        f"{terms.name or terms.id}: sized at {terms.lvr_pct}% of "
        f"{terms.lvr_method.value} ({base:,.0f}) = {size:,.0f}"
    )
    return size
