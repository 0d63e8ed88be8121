"""
Exceptions raised by the dataviz package.

Every error carries a message that is safe to show to the user as-is; the UI
reports them through ``st.error(str(exc))``.
"""


class DataVizError(Exception):
    """Base class for all dataviz errors."""


class CsvLoadError(DataVizError):
    """A file could not be turned into a Table."""


class UnsupportedFileError(CsvLoadError):
    pass


class CsvParseError(CsvLoadError):
    pass


class ColumnNotFoundError(DataVizError, KeyError):
    """A selected column is not part of the table header."""

    def __init__(self, column):
        self.column = column
        super().__init__(f"Unknown column: {column}")

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class NoDataError(DataVizError):
    pass


class SelectionError(DataVizError):
    pass
