"""
Rule-based insights.

A fixed battery of checks run in order; each contributes zero or more plain
text observations. Order matters and is preserved in the output.
"""

import logging
from typing import List, Optional

from dataviz.table import Table

logger = logging.getLogger(__name__)

MISSING_THRESHOLD = 0.1
SKEW_FACTOR = 1.2
CATEGORICAL_RATIO = 0.5


def index_median(values: List[float]) -> float:
    """
    Element at index n // 2 of the sorted sample.

    For even n this is the upper of the two middle values, not their average:
    [1, 2, 3, 4] gives 3.
    """
    ordered = sorted(values)
    return ordered[len(ordered) // 2]


def summary_insight(table: Table) -> str:
    return f"📊 Dataset contains {len(table)} records with {len(table.columns)} features"


def missing_data_insight(table: Table, threshold: float = MISSING_THRESHOLD) -> Optional[str]:
    ratios = table.value_frame().isna().sum() / len(table)
    flagged = [f"{name} ({ratio * 100:.1f}% missing)" for name, ratio in ratios.items() if ratio > threshold]
    if not flagged:
        return None
    return f"⚠️ High missing data in: {', '.join(flagged)}"


def distribution_insights(table: Table, y_column: str, skew_factor: float = SKEW_FACTOR) -> List[str]:
    values = table.numeric_series(y_column).dropna()
    if values.empty:
        return []
    mean = float(values.mean())
    median = index_median(values.tolist())
    insights = [f"📈 {y_column}: Mean = {mean:.2f}, Median = {median:.2f}"]
    if mean > median * skew_factor:
        insights.append(f"🔍 {y_column} shows positive skewness (right-tailed distribution)")
    elif median > mean * skew_factor:
        insights.append(f"🔍 {y_column} shows negative skewness (left-tailed distribution)")
    return insights


def categorical_insight(table: Table, ratio: float = CATEGORICAL_RATIO) -> Optional[str]:
    limit = len(table) * ratio
    distinct = table.value_frame().nunique(dropna=True)
    flagged = [f"{name} ({n} categories)" for name, n in distinct.items() if 1 < n < limit]
    if not flagged:
        return None
    return f"🏷️ Categorical features detected: {', '.join(flagged)}"


def generate_insights(table: Table, x_column: Optional[str] = None, y_column: Optional[str] = None,
                      missing_threshold: float = MISSING_THRESHOLD, skew_factor: float = SKEW_FACTOR,
                      categorical_ratio: float = CATEGORICAL_RATIO) -> List[str]:
    """
    Run every check in order and collect the resulting observations.

    The X column is validated but no check depends on it. An empty table,
    with or without a header, yields no insights and no column checks.
    """
    if table.is_empty:
        return []
    if x_column:
        table.require_column(x_column)
    if y_column:
        table.require_column(y_column)

    insights = [summary_insight(table)]
    missing = missing_data_insight(table, missing_threshold)
    if missing:
        insights.append(missing)
    if y_column:
        insights.extend(distribution_insights(table, y_column, skew_factor))
    categorical = categorical_insight(table, categorical_ratio)
    if categorical:
        insights.append(categorical)
    logger.debug("Generated %d insights", len(insights))
    return insights
