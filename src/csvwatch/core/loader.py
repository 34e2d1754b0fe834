"""
CSV loading and row filtering
"""

import csv
from pathlib import Path
from typing import AbstractSet, List, Union

from .errors import DataFileError
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)

Record = List[str]


class _LineRecorder:
    """Line iterator that keeps the raw text of the record being parsed"""

    def __init__(self, lines):
        self.lines = iter(lines)
        self.consumed: List[str] = []

    def __iter__(self):
        return self

    def __next__(self) -> str:
        line = next(self.lines)
        self.consumed.append(line)
        return line

    def take(self) -> str:
        raw = ''.join(self.consumed)
        self.consumed.clear()
        return raw


def has_bare_quote(raw: str) -> bool:
    """True if a ``"`` appears inside a field that does not start with one.

    ``csv.reader`` keeps such quotes as literal text; they are treated as
    malformed input instead.
    """
    field_start, quoted, closing = True, False, False
    for ch in raw:
        if quoted:
            if closing:
                # "" inside a quoted field is an escaped quote
                closing = False
                if ch != '"':
                    quoted = False
                    field_start = ch in ',\r\n'
            elif ch == '"':
                closing = True
        elif ch in ',\r\n':
            field_start = True
        elif ch == '"':
            if not field_start:
                return True
            quoted, field_start = True, False
        else:
            field_start = False
    return False


def load_records(path: Union[str, Path], exclude: AbstractSet[str] = frozenset()) -> List[Record]:
    """Read a CSV file and return its rows minus the excluded categories.

    Every row is treated as data. Rows keep their source order; a row is
    dropped when its first field is in ``exclude``. Blank lines are skipped
    and every row must have as many fields as the first one. Bytes that
    are not valid UTF-8 are replaced rather than rejected.

    Args:
        path: CSV file to read
        exclude: Category keys (first-column values) to leave out

    Returns:
        The remaining rows as lists of strings

    Raises:
        DataFileError: if the file can't be opened or a row is malformed
    """
    records: List[Record] = []
    expected_fields = None

    try:
        with open(path, 'r', newline='', encoding='utf-8-sig', errors='replace') as fp:
            lines = _LineRecorder(fp)
            reader = csv.reader(lines, strict=True)
            for row in reader:
                raw = lines.take()
                if not row:
                    continue
                if has_bare_quote(raw):
                    raise DataFileError(
                        f'record on line {reader.line_num}: bare " in non-quoted-field'
                    )
                if expected_fields is None:
                    expected_fields = len(row)
                elif len(row) != expected_fields:
                    raise DataFileError(
                        f"record on line {reader.line_num}: wrong number of fields"
                    )
                if row[0] in exclude:
                    continue
                records.append(row)
    except DataFileError:
        raise
    except csv.Error as e:
        raise DataFileError(f"{path}: {e}") from e
    except OSError as e:
        raise DataFileError(str(e)) from e

    logger.debug(f"Loaded {len(records)} record(s) from {path}")
    return records
