"""
DataViz Pro: summary statistics, chart data and rule-based insights for CSV files.
"""

from dataviz.charts import ChartKind, ChartLayout, ChartSeries, build_series, describe_chart
from dataviz.config import Settings, load_settings
from dataviz.histogram import HistogramBin, build_histogram
from dataviz.insights import generate_insights
from dataviz.loader import load_csv, load_sample
from dataviz.session import AnalysisResult, AnalysisSession
from dataviz.stats import ColumnSummary, TableSummary, summarize
from dataviz.table import Cell, CellKind, Table, coerce_number

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "AnalysisSession",
    "Cell",
    "CellKind",
    "ChartKind",
    "ChartLayout",
    "ChartSeries",
    "ColumnSummary",
    "HistogramBin",
    "Settings",
    "Table",
    "TableSummary",
    "build_histogram",
    "build_series",
    "coerce_number",
    "describe_chart",
    "generate_insights",
    "load_csv",
    "load_sample",
    "load_settings",
    "summarize",
]
