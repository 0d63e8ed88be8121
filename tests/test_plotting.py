"""Unit tests for chart rendering (Agg backend)."""

import matplotlib.pyplot as plt
import pytest

from dataviz.charts import ChartSeries, describe_chart
from dataviz.plotting import MAX_TICK_LABELS, render_chart


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestRenderChart:
    """Tests for render_chart()."""

    def test_bar(self) -> None:
        series = ChartSeries(labels=["a", "b", "c"], values=[1, 5, 2], name="sales")
        fig = render_chart(series, describe_chart("bar", "region", "sales"))
        ax = fig.axes[0]
        assert ax.get_title() == "Bar Chart: region vs sales"
        assert ax.get_xlabel() == "region"
        assert ax.get_ylabel() == "sales"
        assert len(ax.patches) == 3

    def test_histogram_draws_bars(self) -> None:
        series = ChartSeries(labels=["0.00 - 1.00", "1.00 - 2.00"], values=[4, 1], name="age")
        fig = render_chart(series, describe_chart("histogram", "age"))
        ax = fig.axes[0]
        assert len(ax.patches) == 2
        assert ax.get_ylabel() == "Count"

    def test_line_and_scatter(self) -> None:
        series = ChartSeries(labels=["x", "y"], values=[1, 2], name="v")
        line = render_chart(series, describe_chart("line", "k", "v"), grid=False)
        assert len(line.axes[0].lines) == 1
        scatter = render_chart(series, describe_chart("scatter", "k", "v"))
        assert len(scatter.axes[0].collections) == 1

    def test_tick_labels_are_thinned(self) -> None:
        labels = [f"r{i}" for i in range(50)]
        series = ChartSeries(labels=labels, values=list(range(50)), name="r")
        fig = render_chart(series, describe_chart("line", "r"))
        assert len(fig.axes[0].get_xticks()) <= MAX_TICK_LABELS

    def test_pie_has_legend(self) -> None:
        series = ChartSeries(labels=["x", "y"], values=[2, 1], name="b")
        fig = render_chart(series, describe_chart("pie", "b"))
        ax = fig.axes[0]
        assert ax.get_legend() is not None
        assert [t.get_text() for t in ax.get_legend().get_texts()] == ["x", "y"]

    def test_pie_with_negative_values(self) -> None:
        series = ChartSeries(labels=["x", "y"], values=[2, -1], name="b")
        fig = render_chart(series, describe_chart("pie", "b"))
        texts = [t.get_text() for t in fig.axes[0].texts]
        assert "Pie charts need positive values" in texts

    def test_empty_series(self) -> None:
        fig = render_chart(ChartSeries(name="a"), describe_chart("line", "a"))
        assert [t.get_text() for t in fig.axes[0].texts] == ["No data to display"]
