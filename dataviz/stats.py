"""
Descriptive statistics over a Table.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import pandas as pd

from dataviz.table import Table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnSummary:
    name: str
    count: int
    mean: float
    min: float
    max: float

    @property
    def mean_display(self) -> str:
        return f"{self.mean:.2f}"


@dataclass(frozen=True)
class TableSummary:
    row_count: int
    column_count: int
    columns: List[ColumnSummary] = field(default_factory=list)

    def get(self, name: str) -> Optional[ColumnSummary]:
        return next((c for c in self.columns if c.name == name), None)


def summarize_values(name: str, values: Sequence[float]) -> Optional[ColumnSummary]:
    """Summary of a numeric sample (NaN entries ignored), or None for an empty one."""
    s = pd.Series(values, dtype=float).dropna()
    if s.empty:
        return None
    lo, hi = float(s.min()), float(s.max())
    # rounding in the division can land one ulp outside the sample range
    mean = min(max(float(s.mean()), lo), hi)
    return ColumnSummary(name=name, count=int(s.count()), mean=mean, min=lo, max=hi)


def summarize(table: Table) -> TableSummary:
    """
    Row/column counts plus a ColumnSummary for every column holding at least
    one numeric cell. Columns without numeric cells are left out; an empty
    table yields an empty summary.
    """
    if table.is_empty:
        return TableSummary(row_count=0, column_count=0)
    numbers = table.numeric_frame()
    columns = []
    for name in table.columns:
        summary = summarize_values(name, numbers[name])
        if summary is not None:
            columns.append(summary)
    logger.debug("Summarized %d rows: %d numeric columns of %d", len(table), len(columns), len(table.columns))
    return TableSummary(row_count=len(table), column_count=len(table.columns), columns=columns)
