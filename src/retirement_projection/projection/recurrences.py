"""
Per-age income, spending and giving recurrences.

Every function is a pure function of ``(inputs, age)``. Amounts compound
annually by ``1 + inflation_rate`` from ``initial_age``.
"""

from ..config import (
    POST_RETIREMENT_GIVING_RATE,
    PRE_RETIREMENT_GIVING_RATE,
    RETIREMENT_SPENDING_FACTOR,
)
from ..models import Inputs
from .college import college_overlay


def _inflate(inputs: Inputs, amount: float, age: int) -> float:
    """Grow ``amount`` from initial_age to ``age`` at the inflation rate."""
    growth_rate = 1 + inputs.inflation_rate
    years_of_growth = age - inputs.initial_age
    return amount * growth_rate ** years_of_growth


def net_job_income(inputs: Inputs, age: int) -> float:
    """Take-home pay; zero before initial_age and from retirement on."""
    if age < inputs.initial_age:
        return 0.0
    if age >= inputs.retirement_age:
        return 0.0
    return _inflate(inputs, inputs.net_job_income, age)


def passive_income(inputs: Inputs, age: int) -> float:
    """Non-job income; keeps growing after retirement."""
    if age < inputs.initial_age:
        return inputs.passive_income
    return _inflate(inputs, inputs.passive_income, age)


def monthly_investment(inputs: Inputs, age: int) -> float:
    """Monthly portfolio contribution rate; stops at retirement."""
    if age < inputs.initial_age:
        return inputs.monthly_investment
    if age >= inputs.retirement_age:
        return 0.0
    return _inflate(inputs, inputs.monthly_investment, age)


def charitable_giving(inputs: Inputs, age: int) -> float:
    """10% of income while working, 20% of income once retired."""
    if not inputs.charitable_giving_enabled:
        return 0.0
    if age < inputs.initial_age:
        return 0.0
    total_income = net_job_income(inputs, age) + passive_income(inputs, age)
    if age < inputs.retirement_age:
        percentage = PRE_RETIREMENT_GIVING_RATE
    else:
        percentage = POST_RETIREMENT_GIVING_RATE
    return total_income * percentage


def spending_need(inputs: Inputs, age: int) -> float:
    """
    Household spending for ``age``.

    Inflated from initial_age, cut by 20% from retirement on, plus the
    amortized college surcharge when ``age`` is a college year.
    """
    if age < inputs.initial_age:
        return inputs.spending_need
    spending = _inflate(inputs, inputs.spending_need, age)
    if age >= inputs.retirement_age:
        spending *= RETIREMENT_SPENDING_FACTOR

    spending += college_overlay(inputs, age)
    return spending
