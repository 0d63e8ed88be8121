"""
Matplotlib rendering of chart series.
"""

import math
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns

from dataviz.charts import ChartLayout, ChartSeries, series_colors

MAX_TICK_LABELS = 20


def _message_figure(text: str, layout: ChartLayout):
    fig, ax = plt.subplots(figsize=(7, 4))
    ax.axis("off")
    ax.text(0.5, 0.5, text, ha="center", va="center", fontsize=12, color="#6b7280")
    ax.set_title(layout.title)
    return fig


def _set_category_ticks(ax, labels: List[str]):
    step = max(1, math.ceil(len(labels) / MAX_TICK_LABELS))
    positions = list(range(0, len(labels), step))
    ax.set_xticks(positions)
    ax.set_xticklabels([labels[i] for i in positions], rotation=45, ha="right")


def render_chart(series: ChartSeries, layout: ChartLayout, *, grid: bool = True):
    """
    Draw ``series`` as described by ``layout`` and return the Figure.

    The caller owns the figure and should close it after display.
    """
    if not len(series):
        return _message_figure("No data to display", layout)

    colors = series_colors(len(series))
    positions = list(range(len(series)))

    if layout.render_as == "pie":
        if any(v < 0 for v in series.values) or sum(series.values) <= 0:
            return _message_figure("Pie charts need positive values", layout)
        fig, ax = plt.subplots(figsize=(7, 5))
        wedges, _ = ax.pie(series.values, colors=colors, startangle=90, counterclock=False)
        ax.axis("equal")
        if layout.show_legend:
            ax.legend(wedges, series.labels, title=series.name, loc="center left", bbox_to_anchor=(1, 0.5), fontsize=8)
        ax.set_title(layout.title)
        fig.tight_layout()
        return fig

    with sns.axes_style("whitegrid" if grid else "white"):
        fig, ax = plt.subplots(figsize=(8, 4.5))
        if layout.render_as == "bar":
            ax.bar(positions, series.values, color=colors, edgecolor="#667eea", linewidth=1)
        elif layout.render_as == "scatter":
            ax.scatter(positions, series.values, color=colors, edgecolor="#667eea")
        else:
            ax.plot(positions, series.values, color="#667eea", linewidth=2, marker="o", markersize=3)
        _set_category_ticks(ax, series.labels)
        ax.set_xlabel(layout.x_title or "")
        ax.set_ylabel(layout.y_title or "")
        ax.set_title(layout.title)
        if layout.show_legend:
            ax.legend([series.name])
        sns.despine(ax=ax)
        fig.tight_layout()
    return fig
