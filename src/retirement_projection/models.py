"""
Pydantic models for the retirement projection service.
All data models and validation logic.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, conint, confloat
from pydantic.alias_generators import to_camel

from .config import (
    DEFAULT_ANNUAL_GROWTH_RATE,
    DEFAULT_COLLEGE_COST,
    DEFAULT_COLLEGE_DURATION,
    DEFAULT_INFLATION_RATE,
    DEFAULT_INITIAL_AGE,
    DEFAULT_MAX_AGE,
    DEFAULT_NUM_KIDS,
    DEFAULT_RETIREMENT_AGE,
    MAX_AGE_LIMIT,
    MAX_COUNT_LIMIT,
)

Currency = confloat(ge=0, allow_inf_nan=False)
Rate = confloat(ge=0, allow_inf_nan=False)
Age = conint(ge=0, le=MAX_AGE_LIMIT)
Count = conint(ge=0, le=MAX_COUNT_LIMIT)


class CamelModel(BaseModel):
    """Base model serialized with camelCase names (the form / storage keys)."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ============================
# Input Model
# ============================
class Inputs(CamelModel):
    """Complete projection configuration, immutable within a run"""

    # Starting balances and cash flows (values at initial_age)
    portfolio_value: Currency = 0.0
    net_job_income: Currency = 0.0  # annual take-home pay
    monthly_investment: Currency = 0.0  # contribution while working
    passive_income: Currency = 0.0  # rental / dividend income, never stops
    spending_need: Currency = 0.0  # annual household spending

    # Age parameters; the modeled range is [initial_age, max_age)
    initial_age: Age = DEFAULT_INITIAL_AGE
    retirement_age: Age = DEFAULT_RETIREMENT_AGE
    max_age: Age = DEFAULT_MAX_AGE

    # Rates (annual, compounding)
    inflation_rate: Rate = DEFAULT_INFLATION_RATE
    annual_growth_rate: Rate = DEFAULT_ANNUAL_GROWTH_RATE

    charitable_giving_enabled: bool = True

    # College costs
    college_costs_enabled: bool = False
    num_kids: Count = DEFAULT_NUM_KIDS
    college_cost: Currency = DEFAULT_COLLEGE_COST  # per kid, per year
    college_start_age: Age = 0  # parent's age when the oldest starts
    college_end_age: Age = 0  # parent's age when the youngest finishes
    college_duration: Count = DEFAULT_COLLEGE_DURATION


# ============================
# Output Models
# ============================
class DataRow(CamelModel):
    """One year's financial breakdown"""
    year: int
    age: int
    portfolio_value: float  # value entering this year
    net_job_income: float
    portfolio_growth: float
    passive_income: float
    total_income: float
    spending_need: float
    charitable_giving: float
    investment_expenses: float
    surplus_deficit: float


class ProjectionSummary(CamelModel):
    """Headline metrics over a projection"""
    years: int
    lifetime_surplus: float
    average_annual_surplus: Optional[float] = None  # undefined for an empty range
    final_portfolio: float
    lifetime_charitable_giving: float


class ProjectionResult(CamelModel):
    """Rows plus derived aggregates"""
    rows: List[DataRow]
    cumulative_surplus_deficit: List[float]
    summary: ProjectionSummary


class SortConfig(CamelModel):
    """Current table sort state"""
    key: Optional[str] = None
    direction: Literal["ascending", "descending"] = "ascending"


class ChartSeries(CamelModel):
    """Chart-ready columns keyed by DataRow field name"""
    x_field: str
    x: List[int]
    series: Dict[str, List[float]] = Field(default_factory=dict)
