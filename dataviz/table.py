"""
Table model: the parsed CSV as an ordered list of rows of typed cells.

A cell is one of three kinds (number, text, missing). Raw values coming from
the CSV parser are typed once, when the table is built, with the same
"looks like a number" rule used everywhere else in the package.
"""

import enum
import math
import numbers
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from dataviz.errors import ColumnNotFoundError


class CellKind(enum.Enum):
    NUMBER = "number"
    TEXT = "text"
    MISSING = "missing"


def to_numbers(values: Iterable[Any]) -> pd.Series:
    """
    Coerce raw values to floats with ``pd.to_numeric(errors="coerce")``.

    Anything that does not convert, and anything that converts to NaN or an
    infinity ("nan", "inf", "1e999"), comes back as NaN.
    """
    series = pd.to_numeric(pd.Series(list(values), dtype=object), errors="coerce").astype(float)
    return series.where(np.isfinite(series))


def _parse_finite(text: str) -> Optional[float]:
    value = to_numbers([text.strip()]).iat[0]
    return None if pd.isna(value) else float(value)


def looks_numeric(text: str) -> bool:
    """True if the whole string (surrounding whitespace ignored) is a finite decimal number."""
    return _parse_finite(text) is not None


def format_number(value: float) -> str:
    """Render a number the way a spreadsheet user expects: 3 rather than 3.0."""
    if float(value).is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class Cell:
    kind: CellKind
    value: Any = None

    @classmethod
    def number(cls, value) -> "Cell":
        return cls(CellKind.NUMBER, float(value))

    @classmethod
    def text(cls, value: str) -> "Cell":
        return cls(CellKind.TEXT, value)

    @classmethod
    def parse(cls, raw) -> "Cell":
        """
        Type a raw field as produced by a CSV parser.

        None, NaN, infinities and empty or whitespace-only strings are missing.
        Strings that look numeric become numbers; booleans and everything
        else are kept as text.
        """
        if raw is None:
            return MISSING
        if isinstance(raw, str):
            if not raw.strip():
                return MISSING
            value = _parse_finite(raw)
            if value is not None:
                return cls.number(value)
            return cls.text(raw)
        if isinstance(raw, (bool, np.bool_)):
            return cls.text(str(raw))
        if isinstance(raw, numbers.Real):
            if not math.isfinite(raw):
                return MISSING
            return cls.number(raw)
        if pd.api.types.is_scalar(raw) and pd.isna(raw):
            return MISSING
        return cls.text(str(raw))

    @property
    def is_missing(self) -> bool:
        return self.kind is CellKind.MISSING

    @property
    def is_number(self) -> bool:
        return self.kind is CellKind.NUMBER

    def display(self) -> str:
        if self.kind is CellKind.NUMBER:
            return format_number(self.value)
        if self.kind is CellKind.TEXT:
            return self.value
        return ""


MISSING = Cell(CellKind.MISSING)


def coerce_number(cell) -> Optional[float]:
    """
    Numeric value of a cell, or None when it has none.

    Accepts a Cell or a raw field; raw fields are typed with Cell.parse first.
    """
    if not isinstance(cell, Cell):
        cell = Cell.parse(cell)
    if cell.kind is CellKind.NUMBER:
        return cell.value
    if cell.kind is CellKind.TEXT:
        return _parse_finite(cell.value)
    return None


class Table:
    """
    Ordered rows sharing one header.

    The header is fixed when the table is built and rows are stored as
    tuples of cells aligned with it, so a Table never changes after
    construction.
    """

    def __init__(self, columns: Sequence[str], rows: Iterable[Sequence[Cell]] = ()):
        self._columns = tuple(columns)
        self._index = {name: i for i, name in enumerate(self._columns)}
        self._rows = tuple(tuple(row) for row in rows)
        for row in self._rows:
            if len(row) != len(self._columns):
                raise ValueError(
                    f"Row has {len(row)} cells but the header has {len(self._columns)} columns"
                )

    # ----------------------------- Constructors -----------------------------
    @classmethod
    def from_records(cls, records: Sequence[Mapping[str, Any]], columns: Optional[Sequence[str]] = None) -> "Table":
        """
        Build a table from parsed CSV records (one mapping per row).

        The header defaults to the keys of the first record. Keys absent from
        a record are missing cells; keys outside the header are ignored.
        """
        records = list(records)
        if columns is None:
            columns = list(records[0].keys()) if records else []
        rows = [[Cell.parse(record.get(col)) for col in columns] for record in records]
        return cls(columns, rows)

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "Table":
        columns = [str(c) for c in df.columns]
        rows = [[Cell.parse(v) for v in values] for values in df.itertuples(index=False, name=None)]
        return cls(columns, rows)

    # ----------------------------- Access -----------------------------
    @property
    def columns(self) -> tuple:
        return self._columns

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[dict]:
        for row in self._rows:
            yield dict(zip(self._columns, row))

    def __eq__(self, other):
        if not isinstance(other, Table):
            return NotImplemented
        return self._columns == other._columns and self._rows == other._rows

    def __repr__(self):
        return f"Table(columns={list(self._columns)!r}, rows={len(self._rows)})"

    @property
    def is_empty(self) -> bool:
        return not self._rows

    def has_column(self, name: str) -> bool:
        return name in self._index

    def require_column(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise ColumnNotFoundError(name) from None

    def column(self, name: str) -> List[Cell]:
        i = self.require_column(name)
        return [row[i] for row in self._rows]

    def cell(self, row: int, name: str) -> Cell:
        return self._rows[row][self.require_column(name)]

    def numeric_series(self, name: str) -> pd.Series:
        """Row-aligned coerced values of a column; NaN where a cell is not numeric."""
        return to_numbers(c.value for c in self.column(name))

    def numeric_values(self, name: str) -> List[float]:
        """Coerced numeric values of a column in row order, non-numeric cells dropped."""
        return self.numeric_series(name).dropna().tolist()

    def numeric_frame(self) -> pd.DataFrame:
        """Every column coerced with numeric_series."""
        return pd.DataFrame(
            {name: self.numeric_series(name) for name in self._columns},
            index=pd.RangeIndex(len(self._rows)),
            columns=list(self._columns),
        )

    def value_frame(self) -> pd.DataFrame:
        """Cell values as an object frame, None for missing cells."""
        return pd.DataFrame(
            [[c.value for c in row] for row in self._rows],
            columns=list(self._columns),
            dtype=object,
        )

    def to_frame(self, limit: Optional[int] = None) -> pd.DataFrame:
        """Display frame (strings) of the first ``limit`` rows, for previews."""
        rows = self._rows if limit is None else self._rows[:limit]
        return pd.DataFrame([[c.display() for c in row] for row in rows], columns=list(self._columns))
