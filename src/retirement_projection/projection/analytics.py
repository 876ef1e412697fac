"""
Aggregates and views over a sequence of projection rows.
"""

from typing import Iterable, List, Optional, Sequence

import numpy as np
from pydantic.alias_generators import to_camel

from ..models import ChartSeries, DataRow, ProjectionResult, ProjectionSummary, SortConfig

# camelCase name -> attribute name
ROW_FIELDS = {to_camel(name): name for name in DataRow.model_fields}


def resolve_field(key: str) -> str:
    """Map a camelCase or snake_case DataRow field name to its attribute."""
    if key in ROW_FIELDS:
        return ROW_FIELDS[key]
    if key in ROW_FIELDS.values():
        return key
    raise ValueError(f"Unknown DataRow field: {key!r}")


def _column(rows: Sequence[DataRow], attr: str) -> np.ndarray:
    return np.array([getattr(r, attr) for r in rows], dtype=float)


def cumulative_totals(rows: Sequence[DataRow]) -> List[float]:
    """Running surplus/deficit total for each row, in row order."""
    if not rows:
        return []
    return np.cumsum(_column(rows, "surplus_deficit")).tolist()


def summarize(rows: Sequence[DataRow]) -> ProjectionSummary:
    """
    Headline metrics for the dashboard cards.

    The average is left undefined for an empty projection instead of
    dividing by zero.
    """
    years = len(rows)
    if years == 0:
        return ProjectionSummary(
            years=0,
            lifetime_surplus=0.0,
            average_annual_surplus=None,
            final_portfolio=0.0,
            lifetime_charitable_giving=0.0,
        )

    surplus = _column(rows, "surplus_deficit")
    lifetime_surplus = float(surplus.sum())
    last = rows[-1]
    return ProjectionSummary(
        years=years,
        lifetime_surplus=lifetime_surplus,
        average_annual_surplus=lifetime_surplus / years,
        final_portfolio=last.portfolio_value + last.surplus_deficit,
        lifetime_charitable_giving=float(_column(rows, "charitable_giving").sum()),
    )


def build_result(rows: List[DataRow]) -> ProjectionResult:
    return ProjectionResult(
        rows=rows,
        cumulative_surplus_deficit=cumulative_totals(rows),
        summary=summarize(rows),
    )


def sort_rows(rows: Iterable[DataRow], key: str, direction: str = "ascending") -> List[DataRow]:
    """Stable sort by any DataRow field; ties keep their current order."""
    if direction not in ("ascending", "descending"):
        raise ValueError(f"Unknown sort direction: {direction!r}")
    attr = resolve_field(key)
    return sorted(rows, key=lambda r: getattr(r, attr), reverse=direction == "descending")


def next_sort_config(current: Optional[SortConfig], key: str) -> SortConfig:
    """Toggle to descending when re-sorting the same key, else ascending."""
    key = to_camel(resolve_field(key))
    if current is not None and current.key == key and current.direction == "ascending":
        return SortConfig(key=key, direction="descending")
    return SortConfig(key=key, direction="ascending")


def chart_series(rows: Sequence[DataRow], fields: Sequence[str], x: str = "age") -> ChartSeries:
    """Columns for a chart: ``x`` (age or year) plus one list per field."""
    if x not in ("age", "year"):
        raise ValueError(f"Chart x axis must be 'age' or 'year', got {x!r}")
    series = {}
    for field in fields:
        series[field] = _column(rows, resolve_field(field)).tolist()
    return ChartSeries(
        x_field=x,
        x=[getattr(r, x) for r in rows],
        series=series,
    )
