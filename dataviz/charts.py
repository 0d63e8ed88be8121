"""
Chart-series derivation.

Turns a Table plus the user's chart kind and axis selection into index-aligned
labels and values, and describes how the chart should be titled and coloured.
Drawing is left to dataviz.plotting.
"""

import enum
import logging
import math
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import List, Optional

from dataviz.histogram import DEFAULT_BIN_COUNT, build_histogram
from dataviz.table import Cell, Table

logger = logging.getLogger(__name__)

DEFAULT_MAX_POINTS = 50

PALETTE = [
    "#667eea",
    "#764ba2",
    "#f093fb",
    "#f5576c",
    "#4facfe",
    "#00f2fe",
    "#43e97b",
    "#38f9d7",
    "#ffecd2",
    "#fcb69f",
    "#a8edea",
    "#fed6e3",
]


class ChartKind(enum.Enum):
    LINE = "line"
    BAR = "bar"
    SCATTER = "scatter"
    PIE = "pie"
    HISTOGRAM = "histogram"


@dataclass(frozen=True)
class ChartSeries:
    labels: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)
    name: str = ""

    def __len__(self):
        return len(self.labels)

    def points(self):
        return list(zip(self.labels, self.values))


@dataclass(frozen=True)
class ChartLayout:
    kind: ChartKind
    render_as: str
    title: str
    x_title: Optional[str]
    y_title: Optional[str]
    show_legend: bool


def _is_blank(cell: Cell) -> bool:
    return cell.is_missing or (cell.is_number and cell.value == 0)


def pie_series(table: Table, x_column: str, y_column: Optional[str] = None) -> ChartSeries:
    """
    Group rows by their X value, in first-seen order.

    Without a Y column each row counts once. With one, the group value is the
    sum of Y, where a non-numeric Y cell counts as 1. Rows whose X is missing
    or zero are skipped.
    """
    xs = table.column(x_column)
    ys = table.numeric_series(y_column).fillna(1.0) if y_column else None
    grouped = OrderedDict()
    for i, x in enumerate(xs):
        if _is_blank(x):
            continue
        key = x.display()
        amount = 1.0 if ys is None else float(ys.iat[i])
        grouped[key] = grouped.get(key, 0.0) + amount
    return ChartSeries(labels=list(grouped), values=list(grouped.values()), name=y_column or x_column)


def histogram_series(table: Table, x_column: str, bin_count: int = DEFAULT_BIN_COUNT,
                     name: Optional[str] = None) -> ChartSeries:
    """Bin the numeric values of the X column; an empty series if it has none."""
    name = name or x_column
    values = table.numeric_values(x_column)
    if not values:
        return ChartSeries(name=name)
    bins = build_histogram(values, bin_count)
    return ChartSeries(labels=[b.label for b in bins], values=[b.count for b in bins], name=name)


def sampled_series(table: Table, x_column: str, y_column: Optional[str] = None,
                   max_points: int = DEFAULT_MAX_POINTS) -> ChartSeries:
    """
    Every step-th row, step = ceil(rows / max_points).

    Labels are the X values as displayed; values are Y coerced to a number
    (0 when it is not one), or the row index when no Y column is chosen.
    """
    xs = table.column(x_column)
    ys = table.numeric_series(y_column).fillna(0.0) if y_column else None
    if not xs:
        return ChartSeries(name=y_column or x_column)
    step = math.ceil(len(xs) / max_points)
    labels, values = [], []
    for i in range(0, len(xs), step):
        labels.append(xs[i].display())
        values.append(i if ys is None else float(ys.iat[i]))
    return ChartSeries(labels=labels, values=values, name=y_column or x_column)


def build_series(table: Table, kind, x_column: str, y_column: Optional[str] = None,
                 max_points: int = DEFAULT_MAX_POINTS, bin_count: int = DEFAULT_BIN_COUNT) -> ChartSeries:
    """
    Chart data for ``kind`` (a ChartKind or its string value).

    Raises ValueError for an unknown kind and ColumnNotFoundError when a
    selected column is not in a non-empty table. An empty table, with or
    without a header, gives an empty series.
    """
    kind = ChartKind(kind)
    y_column = y_column or None
    if table.is_empty:
        return ChartSeries(name=y_column or x_column)
    table.require_column(x_column)
    if y_column:
        table.require_column(y_column)

    if kind is ChartKind.PIE:
        series = pie_series(table, x_column, y_column)
    elif kind is ChartKind.HISTOGRAM:
        # histograms only ever bin the X column
        series = histogram_series(table, x_column, bin_count, name=y_column)
    else:
        series = sampled_series(table, x_column, y_column, max_points)
    logger.debug("Built %s series for %s/%s: %d points", kind.value, x_column, y_column, len(series))
    return series


def describe_chart(kind, x_column: str, y_column: Optional[str] = None) -> ChartLayout:
    kind = ChartKind(kind)
    title = f"{kind.value.capitalize()} Chart: {x_column}"
    if y_column:
        title += f" vs {y_column}"
    is_pie = kind is ChartKind.PIE
    return ChartLayout(
        kind=kind,
        render_as="bar" if kind is ChartKind.HISTOGRAM else kind.value,
        title=title,
        x_title=None if is_pie else x_column,
        y_title=None if is_pie else (y_column or "Count"),
        show_legend=is_pie,
    )


def series_colors(count: int) -> List[str]:
    return [PALETTE[i % len(PALETTE)] for i in range(count)]
