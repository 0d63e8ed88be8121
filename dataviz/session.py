"""
Analysis session: the one place that holds the currently loaded table.

The Streamlit app keeps a single AnalysisSession in ``st.session_state``;
every computation receives its inputs from it explicitly.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from dataviz.charts import ChartLayout, ChartSeries, build_series, describe_chart
from dataviz.config import Settings
from dataviz.errors import NoDataError, SelectionError
from dataviz.insights import generate_insights
from dataviz.stats import TableSummary, summarize
from dataviz.table import Table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    summary: TableSummary
    series: ChartSeries
    layout: ChartLayout
    insights: List[str] = field(default_factory=list)


class AnalysisSession:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.table: Optional[Table] = None
        self.filename: Optional[str] = None
        self.last_series: Optional[ChartSeries] = None

    @property
    def has_data(self) -> bool:
        return self.table is not None and not self.table.is_empty

    def load(self, table: Table, filename: Optional[str] = None) -> None:
        """Replace the current table; anything derived from the old one is dropped."""
        self.table = table
        self.filename = filename
        self.last_series = None
        logger.info("Session table replaced: %s (%d rows)", filename or "<unnamed>", len(table))

    def clear(self) -> None:
        self.table = None
        self.filename = None
        self.last_series = None

    def summary(self) -> TableSummary:
        if self.table is None:
            return TableSummary(row_count=0, column_count=0)
        return summarize(self.table)

    def analyze(self, kind, x_column: Optional[str], y_column: Optional[str] = None) -> AnalysisResult:
        """
        Full computation pass for the current selection: statistics, chart
        series and insights, all recomputed from the table.
        """
        if not self.has_data:
            raise NoDataError("Please upload data first.")
        if not x_column:
            raise SelectionError("Please select X-axis column.")
        y_column = y_column or None
        s = self.settings
        series = build_series(self.table, kind, x_column, y_column, max_points=s.max_points, bin_count=s.bin_count)
        insights = generate_insights(
            self.table,
            x_column,
            y_column,
            missing_threshold=s.missing_threshold,
            skew_factor=s.skew_factor,
            categorical_ratio=s.categorical_ratio,
        )
        self.last_series = series
        return AnalysisResult(
            summary=summarize(self.table),
            series=series,
            layout=describe_chart(kind, x_column, y_column),
            insights=insights,
        )
