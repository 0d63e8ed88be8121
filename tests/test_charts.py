"""Unit tests for chart-series derivation and chart layout."""

import pytest

from dataviz.charts import (
    PALETTE,
    ChartKind,
    ChartSeries,
    build_series,
    describe_chart,
    series_colors,
)
from dataviz.errors import ColumnNotFoundError
from dataviz.table import Table


class TestSampledSeries:
    """Tests for line / bar / scatter series."""

    def test_line_without_y_plots_row_indices(self, long_table: Table) -> None:
        series = build_series(long_table, "line", "label")
        # ceil(120 / 50) = 3
        assert series.values == list(range(0, 120, 3))
        assert all(a < b for a, b in zip(series.values, series.values[1:]))
        assert series.labels[:3] == ["row0", "row3", "row6"]
        assert series.name == "label"

    def test_y_values_are_coerced(self) -> None:
        table = Table.from_records([
            {"day": "mon", "sales": 10},
            {"day": "tue", "sales": "n/a"},
            {"day": "wed", "sales": " 7.5 "},
        ])
        series = build_series(table, ChartKind.BAR, "day", "sales")
        assert series.labels == ["mon", "tue", "wed"]
        assert series.values == [10.0, 0.0, 7.5]
        assert series.name == "sales"

    def test_labels_use_display_form(self) -> None:
        table = Table.from_records([{"x": 1, "y": 2}, {"x": 2.5, "y": 3}, {"x": None, "y": 4}])
        series = build_series(table, "scatter", "x", "y")
        assert series.labels == ["1", "2.5", ""]

    @pytest.mark.parametrize("rows,expected", [(50, 50), (51, 26), (1, 1), (100, 50), (101, 34)])
    def test_downsampling(self, rows: int, expected: int) -> None:
        table = Table.from_records([{"x": i} for i in range(rows)])
        assert len(build_series(table, "line", "x")) == expected

    def test_custom_max_points(self, long_table: Table) -> None:
        series = build_series(long_table, "line", "id", "value", max_points=10)
        assert series.values == [i * 2.0 for i in range(0, 120, 12)]

    def test_empty_table(self, empty_table: Table) -> None:
        series = build_series(empty_table, "line", "a", "b")
        assert series == ChartSeries(labels=[], values=[], name="b")

    @pytest.mark.parametrize("kind", [k.value for k in ChartKind])
    def test_table_without_header(self, kind: str) -> None:
        table = Table.from_records([])
        assert build_series(table, kind, "a") == ChartSeries(name="a")
        assert build_series(table, kind, "a", "b") == ChartSeries(name="b")


class TestPieSeries:
    """Tests for pie grouping."""

    def test_counts_in_first_seen_order(self) -> None:
        table = Table.from_records([{"c": v} for v in ["b", "a", "b", "c", "a", "b"]])
        series = build_series(table, "pie", "c")
        assert series.labels == ["b", "a", "c"]
        assert series.values == [3, 2, 1]
        assert sum(series.values) == len(table)

    def test_sums_y(self, letters_table: Table) -> None:
        series = build_series(letters_table, "pie", "b", "a")
        assert series.labels == ["x", "y"]
        assert series.values == [4.0, 2.0]
        assert series.name == "a"

    def test_non_numeric_y_counts_as_one(self) -> None:
        table = Table.from_records([
            {"k": "p", "v": 5},
            {"k": "p", "v": "?"},
            {"k": "q", "v": None},
        ])
        series = build_series(table, "pie", "k", "v")
        assert series.values == [6.0, 1.0]

    def test_blank_and_zero_keys_skipped(self) -> None:
        table = Table.from_records([{"k": "a"}, {"k": None}, {"k": ""}, {"k": 0}, {"k": 3}])
        series = build_series(table, "pie", "k")
        assert series.labels == ["a", "3"]
        assert series.values == [1, 1]

    def test_whitespace_keys_skipped(self) -> None:
        table = Table.from_records([{"k": "  "}, {"k": "a"}, {"k": "\t"}, {"k": "a"}])
        series = build_series(table, "pie", "k")
        assert series.labels == ["a"]
        assert series.values == [2]

    def test_numeric_zero_y_contributes_nothing(self) -> None:
        table = Table.from_records([
            {"k": "p", "v": 0},
            {"k": "p", "v": 2},
            {"k": "q", "v": "0"},
        ])
        series = build_series(table, "pie", "k", "v")
        assert series.labels == ["p", "q"]
        assert series.values == [2.0, 0.0]


class TestHistogramSeries:
    """Tests for histogram series."""

    def test_bins_x_column(self) -> None:
        table = Table.from_records([{"v": i} for i in range(1, 11)] + [{"v": "oops"}])
        series = build_series(table, "histogram", "v")
        assert len(series) == 20
        assert sum(series.values) == 10
        assert series.labels[0] == "1.00 - 1.45"

    def test_bin_count(self) -> None:
        table = Table.from_records([{"v": i} for i in range(10)])
        series = build_series(table, "histogram", "v", bin_count=3)
        assert series.values == [3, 3, 4]

    def test_no_numeric_values(self, letters_table: Table) -> None:
        series = build_series(letters_table, "histogram", "b")
        assert len(series) == 0
        assert series.name == "b"


class TestBuildSeriesValidation:
    """Tests for argument validation and determinism."""

    def test_unknown_kind(self, letters_table: Table) -> None:
        with pytest.raises(ValueError):
            build_series(letters_table, "radar", "a")

    def test_unknown_column(self, letters_table: Table) -> None:
        with pytest.raises(ColumnNotFoundError):
            build_series(letters_table, "line", "missing")
        with pytest.raises(ColumnNotFoundError):
            build_series(letters_table, "line", "a", "missing")

    def test_empty_y_means_no_y(self, letters_table: Table) -> None:
        series = build_series(letters_table, "line", "b", "")
        assert series.values == [0, 1, 2]
        assert series.name == "b"

    @pytest.mark.parametrize("kind", [k.value for k in ChartKind])
    def test_deterministic(self, long_table: Table, kind: str) -> None:
        first = build_series(long_table, kind, "id", "value")
        second = build_series(long_table, kind, "id", "value")
        assert first == second
        assert len(first.labels) == len(first.values)


class TestDescribeChart:
    """Tests for chart layout."""

    def test_line_with_y(self) -> None:
        layout = describe_chart("line", "month", "sales")
        assert layout.title == "Line Chart: month vs sales"
        assert layout.render_as == "line"
        assert (layout.x_title, layout.y_title) == ("month", "sales")
        assert not layout.show_legend

    def test_without_y_counts(self) -> None:
        layout = describe_chart("bar", "month")
        assert layout.title == "Bar Chart: month"
        assert layout.y_title == "Count"

    def test_histogram_draws_as_bar(self) -> None:
        layout = describe_chart(ChartKind.HISTOGRAM, "age")
        assert layout.render_as == "bar"
        assert layout.title == "Histogram Chart: age"

    def test_pie(self) -> None:
        layout = describe_chart("pie", "region", "sales")
        assert layout.show_legend
        assert layout.x_title is None and layout.y_title is None


class TestSeriesColors:
    def test_palette_cycles(self) -> None:
        colors = series_colors(14)
        assert len(colors) == 14
        assert colors[12] == colors[0] == PALETTE[0]
        assert series_colors(0) == []
