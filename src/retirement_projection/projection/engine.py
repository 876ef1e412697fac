"""
Deterministic year-by-year projection engine.
"""

import datetime
import logging
from typing import List, Optional

from ..config import MONTHS_PER_YEAR
from ..models import DataRow, Inputs
from .recurrences import (
    charitable_giving,
    monthly_investment,
    net_job_income,
    passive_income,
    spending_need,
)

logger = logging.getLogger(__name__)


def portfolio_value(inputs: Inputs, age: int) -> float:
    """
    Portfolio value entering year ``age``.

    Walks from initial_age, adding a year of contributions while working and
    compounding every year. Nothing is withdrawn after retirement; spending
    only shows up in the surplus/deficit column.
    """
    value = inputs.portfolio_value
    for y in range(inputs.initial_age, age):
        value = _grow(inputs, value, y)
    return value


def _grow(inputs: Inputs, value: float, age: int) -> float:
    """Carry the portfolio through year ``age``."""
    if age < inputs.retirement_age:
        value += monthly_investment(inputs, age) * MONTHS_PER_YEAR
    return value * (1 + inputs.annual_growth_rate)


def _build_row(inputs: Inputs, age: int, year: int, starting_portfolio: float) -> DataRow:
    job = net_job_income(inputs, age)
    passive = passive_income(inputs, age)
    giving = charitable_giving(inputs, age)
    spending = spending_need(inputs, age)
    growth = starting_portfolio * inputs.annual_growth_rate

    total_income = job + passive
    investment_expenses = monthly_investment(inputs, age) * MONTHS_PER_YEAR
    total_expenses = spending + giving + investment_expenses

    return DataRow(
        year=year,
        age=age,
        portfolio_value=starting_portfolio,
        net_job_income=job,
        portfolio_growth=growth,
        passive_income=passive,
        total_income=total_income,
        spending_need=spending,
        charitable_giving=giving,
        investment_expenses=investment_expenses,
        surplus_deficit=total_income - total_expenses,
    )


class ProjectionEngine:
    """Builds the projection rows for one set of inputs."""

    def __init__(self, inputs: Inputs, start_year: Optional[int] = None):
        """
        Args:
            inputs: The projection configuration
            start_year: Calendar year of initial_age (defaults to this year)
        """
        self.inputs = inputs
        self.start_year = start_year if start_year is not None else datetime.date.today().year
        self.horizon = inputs.max_age - inputs.initial_age

    def year_of(self, age: int) -> int:
        return self.start_year + (age - self.inputs.initial_age)

    def compute_row(self, age: int) -> DataRow:
        """Row for a single age, recomputing the portfolio from initial_age."""
        return _build_row(self.inputs, age, self.year_of(age), portfolio_value(self.inputs, age))

    def run(self) -> List[DataRow]:
        """All rows for [initial_age, max_age) in a single forward pass."""
        rows: List[DataRow] = []
        value = self.inputs.portfolio_value
        for offset in range(self.horizon):
            age = self.inputs.initial_age + offset
            rows.append(_build_row(self.inputs, age, self.year_of(age), value))
            value = _grow(self.inputs, value, age)

        if not rows:
            logger.info(
                "Empty projection: max_age %d <= initial_age %d",
                self.inputs.max_age, self.inputs.initial_age,
            )
        return rows

    def cumulative_surplus_deficit(self, age: int) -> float:
        """Sum of surplus/deficit from initial_age through ``age`` inclusive."""
        total = 0.0
        value = self.inputs.portfolio_value
        for a in range(self.inputs.initial_age, age + 1):
            total += _build_row(self.inputs, a, self.year_of(a), value).surplus_deficit
            value = _grow(self.inputs, value, a)
        return total


def compute_row(inputs: Inputs, age: int, start_year: Optional[int] = None) -> DataRow:
    return ProjectionEngine(inputs, start_year).compute_row(age)


def project(inputs: Inputs, start_year: Optional[int] = None) -> List[DataRow]:
    """Ordered rows for every age in [initial_age, max_age)."""
    return ProjectionEngine(inputs, start_year).run()


def cumulative_surplus_deficit(inputs: Inputs, age: int) -> float:
    return ProjectionEngine(inputs).cumulative_surplus_deficit(age)
