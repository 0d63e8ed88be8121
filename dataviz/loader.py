"""
CSV ingestion.

pandas does the parsing (header row, quoting, blank lines); every field is
read as a string so that typing happens in one place, dataviz.table.
"""

import io
import logging
from typing import Optional, Union

import pandas as pd

from dataviz.errors import CsvParseError, UnsupportedFileError
from dataviz.table import Table

logger = logging.getLogger(__name__)

ENCODINGS = ("utf-8", "cp1252", "latin1")

SAMPLE_CSV = """temperature,sales,humidity
30,200,40
32,220,42
35,250,44
36,260,45
38,280,46
40,300,48
"""


def _read_bytes(source) -> Union[bytes, str]:
    if isinstance(source, (bytes, str)):
        return source
    if hasattr(source, "seek"):
        source.seek(0)
    data = source.read()
    if hasattr(source, "seek"):
        source.seek(0)
    return data


def decode(data: bytes) -> str:
    """Decode trying utf-8 first; latin1 maps every byte and ends the chain."""
    for enc in ENCODINGS[:-1]:
        try:
            return data.decode(enc).lstrip("\ufeff")
        except UnicodeDecodeError:
            continue
    return data.decode(ENCODINGS[-1])


def parse_csv_text(text: str) -> Table:
    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        raise CsvParseError("Error parsing CSV: the file is empty") from None
    except (pd.errors.ParserError, ValueError) as e:
        logger.warning("CSV parse failed: %s", e)
        raise CsvParseError(f"Error parsing CSV: {e}") from e
    return Table.from_frame(df)


def load_csv(source, filename: Optional[str] = None) -> Table:
    """
    Read a CSV upload into a Table.

    ``source`` may be bytes, text or a binary file-like object such as a
    Streamlit UploadedFile (its ``name`` is used when ``filename`` is not
    given). Files whose name does not end in .csv are rejected.
    """
    filename = filename or getattr(source, "name", None)
    if filename is not None and not str(filename).lower().endswith(".csv"):
        raise UnsupportedFileError("Please select a CSV file.")
    raw = _read_bytes(source)
    text = decode(raw) if isinstance(raw, bytes) else raw
    table = parse_csv_text(text)
    logger.info("Loaded %s: %d rows x %d columns", filename or "<csv>", len(table), len(table.columns))
    return table


def load_sample() -> Table:
    return parse_csv_text(SAMPLE_CSV)
