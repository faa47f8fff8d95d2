# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
devfinance - Development Finance Drawdown Modeling

Month-by-month drawdown of a development project's funding facilities
against its cost schedule, with interest accrual, capitalisation and
utilisation reporting.

Key Entry Points:
- devfinance.drawdown.compute_drawdowns() - Per-facility monthly schedules
- devfinance.debt.* - Facility records, sizing and funding plans
- devfinance.reporting.* - DataFrame views over drawdown results

Example Usage:
    ```python
    from devfinance.debt import Facility
    from devfinance.drawdown import compute_drawdowns

    senior = Facility(
        id="f1",
        name="Senior Construction",
        size=8_000_000_00,
        interest_rate=7.25,
        land_loan_type="provisioned",
        priority="senior",
    )
    results = compute_drawdowns([senior], monthly_costs=[1_500_000_00] * 12)
    print(results[0].total_interest)
    ```
"""

# Libraries should not configure logging; applications attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "debt",
    "drawdown",
    "reporting",
]


_LAZY_MODULES = {
    "core": "devfinance.core",
    "debt": "devfinance.debt",
    "drawdown": "devfinance.drawdown",
    "reporting": "devfinance.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'devfinance' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
