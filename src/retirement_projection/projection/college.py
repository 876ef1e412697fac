"""
College cost amortization.

Kids attend one after another (the k-th kid starts ``k`` years after the
oldest), each for ``college_duration`` years. The total bill for all kids
is spread evenly over every parent age in which at least one kid is in
college and which falls inside the configured college window.
"""

import logging
from functools import lru_cache
from typing import FrozenSet, List, NamedTuple

import numpy as np

from ..models import Inputs

logger = logging.getLogger(__name__)


class CollegeSchedule(NamedTuple):
    """Distinct college years and the flat per-year surcharge"""
    years: FrozenSet[int]
    total: float
    surcharge: float


def college_years(inputs: Inputs) -> List[int]:
    """Sorted distinct parent ages with at least one kid in college."""
    start = min(inputs.college_start_age, inputs.college_end_age)
    end = max(inputs.college_start_age, inputs.college_end_age)
    years = set()
    for kid in range(inputs.num_kids):
        kid_start = inputs.college_start_age + kid
        for yr in range(inputs.college_duration):
            year = kid_start + yr
            if start <= year < end:
                years.add(year)
    return sorted(years)


def total_college_cost(inputs: Inputs) -> float:
    return inputs.num_kids * inputs.college_cost * inputs.college_duration


def college_surcharge(inputs: Inputs) -> float:
    """
    Per-year share of the total college bill.

    Uses IEEE division, so an empty set of college years yields ``inf``
    (or ``nan`` when the total is zero) rather than raising. Such a value is
    never applied to a row because no age belongs to an empty set.
    """
    n_years = len(college_years(inputs))
    with np.errstate(divide="ignore", invalid="ignore"):
        surcharge = np.float64(total_college_cost(inputs)) / np.float64(n_years)
    if n_years == 0:
        logger.warning(
            "College window [%d, %d) contains no college years; surcharge is %s",
            min(inputs.college_start_age, inputs.college_end_age),
            max(inputs.college_start_age, inputs.college_end_age),
            surcharge,
        )
    return float(surcharge)


@lru_cache(maxsize=64)
def college_schedule(inputs: Inputs) -> CollegeSchedule:
    """College years and surcharge for ``inputs`` (cached; inputs are frozen)."""
    return CollegeSchedule(
        years=frozenset(college_years(inputs)),
        total=total_college_cost(inputs),
        surcharge=college_surcharge(inputs),
    )


def college_overlay(inputs: Inputs, age: int) -> float:
    """Surcharge added to spending at ``age`` (0 outside college years or when disabled)."""
    if not inputs.college_costs_enabled:
        return 0.0
    schedule = college_schedule(inputs)
    if age in schedule.years:
        return schedule.surcharge
    return 0.0
