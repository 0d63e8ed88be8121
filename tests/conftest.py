"""Shared fixtures for the dataviz tests."""

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from dataviz.table import Table  # noqa: E402


@pytest.fixture
def letters_table() -> Table:
    """Three rows: numeric column ``a`` and text column ``b``."""
    return Table.from_records([
        {"a": 1, "b": "x"},
        {"a": 2, "b": "y"},
        {"a": 3, "b": "x"},
    ])


@pytest.fixture
def empty_table() -> Table:
    return Table(["a", "b"])


@pytest.fixture
def long_table() -> Table:
    """120 rows with an id, a numeric value and a text label."""
    return Table.from_records([
        {"id": i, "value": i * 2, "label": f"row{i}"} for i in range(120)
    ])
