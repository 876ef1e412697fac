"""
Projection engine: per-age recurrences, college amortization, the row
builder and the sequence driver.
"""

from .analytics import (
    build_result,
    chart_series,
    cumulative_totals,
    next_sort_config,
    sort_rows,
    summarize,
)
from .college import college_overlay, college_schedule, college_surcharge, college_years
from .engine import ProjectionEngine, compute_row, cumulative_surplus_deficit, portfolio_value, project
from .recurrences import (
    charitable_giving,
    monthly_investment,
    net_job_income,
    passive_income,
    spending_need,
)

__all__ = [
    "ProjectionEngine",
    "build_result",
    "charitable_giving",
    "chart_series",
    "college_overlay",
    "college_schedule",
    "college_surcharge",
    "college_years",
    "compute_row",
    "cumulative_surplus_deficit",
    "cumulative_totals",
    "monthly_investment",
    "net_job_income",
    "next_sort_config",
    "passive_income",
    "portfolio_value",
    "project",
    "sort_rows",
    "spending_need",
    "summarize",
]
