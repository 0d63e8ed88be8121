"""
Plain-text analysis report, offered as a download next to the chart.
"""

from datetime import datetime, timezone
from typing import List, Optional

from dataviz.charts import ChartSeries
from dataviz.stats import TableSummary
from dataviz.table import format_number


def build_text_report(summary: TableSummary, insights: List[str], series: Optional[ChartSeries] = None,
                      filename: Optional[str] = None, generated_at: Optional[datetime] = None) -> str:
    generated_at = generated_at or datetime.now(timezone.utc)
    lines = ["DataViz Pro report"]
    if filename:
        lines.append(f"Source: {filename}")
    lines.append(f"Generated: {generated_at.isoformat()}")
    lines.append("")

    lines.append("Dataset overview")
    lines.append(f"- Rows: {summary.row_count}")
    lines.append(f"- Columns: {summary.column_count}")
    lines.append("")

    if summary.columns:
        lines.append("Numeric columns")
        for col in summary.columns:
            lines.append(
                f"- {col.name}: count={col.count}, mean={col.mean_display}, "
                f"min={format_number(col.min)}, max={format_number(col.max)}"
            )
    else:
        lines.append("No numeric columns available for statistical summary.")
    lines.append("")

    lines.append("Insights")
    if insights:
        lines.extend(f"- {text}" for text in insights)
    else:
        lines.append("No specific insights generated for current analysis.")

    if series is not None and len(series):
        lines.append("")
        lines.append(f"Chart data ({series.name})")
        for label, value in series.points():
            lines.append(f"- {label}: {format_number(value)}")
    return "\n".join(lines) + "\n"
