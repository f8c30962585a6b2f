"""Reader for timestamp series files.

Supports:
A) One timestamp per line:
   2001-03-01T00:00:00
   2001-04-01

B) CSV with header, timestamps taken from a named column or the first
   column whose name contains ``time`` or ``date``:
   date,value
   2001-03-01,1.5

Blank lines and lines starting with ``#`` are ignored.
"""

from __future__ import annotations

import csv
import pathlib
import re
from datetime import datetime, timezone
from typing import List, Optional, TextIO, Union

# Timestamp grammar (ISO date-time / date / year-month / year / float epoch)
TIMESTAMP_RE = re.compile(
    r"""^\s*(?:
            (?P<iso>\d{4}-\d{2}-\d{2}[T\s]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:\d{2})?)
          | (?P<date>\d{4}-\d{2}-\d{2})
          | (?P<month>(?P<m_year>\d{4})-(?P<m_mon>\d{2}))
          | (?P<year>\d{4})
          | (?P<float>-?\d+\.\d*|-?\d{5,})
        )\s*$""",
    re.VERBOSE,
)


def parse_timestamp(token: str) -> datetime:
    """Parse a single timestamp token.

    Four-digit integers are read as calendar years; other bare numbers are
    seconds since the Unix epoch in UTC.
    """

    m = TIMESTAMP_RE.match(token)
    if not m:
        raise ValueError(f"Unrecognised timestamp: {token!r}")

    if m.group("iso"):
        return datetime.fromisoformat(m.group("iso").replace("Z", "+00:00"))
    if m.group("date"):
        return datetime.strptime(m.group("date"), "%Y-%m-%d")
    if m.group("month"):
        return datetime(int(m.group("m_year")), int(m.group("m_mon")), 1)
    if m.group("year"):
        return datetime(int(m.group("year")), 1, 1)
    if m.group("float"):
        return datetime.fromtimestamp(float(m.group("float")), tz=timezone.utc)

    raise ValueError(f"Unsupported timestamp: {token!r}")


class TimestampParseError(ValueError):
    """Raised when a timestamp file cannot be parsed."""

    def __init__(self, message: str, *, path: Union[str, pathlib.Path], line: int):
        self.path = str(path)
        self.line = line
        super().__init__(f"{self.path}:{self.line}: {message}")


def _is_comment(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def _pick_column(headers: List[str], column: Optional[str]) -> Optional[str]:
    if column is not None:
        return column if column in headers else None
    for name in headers:
        lower = name.lower()
        if "time" in lower or "date" in lower:
            return name
    return headers[0] if headers else None


def _read_csv(
    fh: TextIO, *, column: Optional[str], path: Union[str, pathlib.Path]
) -> List[datetime]:
    rows = (
        (lineno, next(csv.reader([raw])))
        for lineno, raw in enumerate(fh, start=1)
        if not _is_comment(raw)
    )
    try:
        header_line, header = next(rows)
    except StopIteration:
        return []
    headers = [name.strip() for name in header]

    field = _pick_column(headers, column)
    if field is None:
        raise TimestampParseError(
            f"column {column!r} not found in CSV header", path=path, line=header_line
        )
    idx = headers.index(field)

    out: List[datetime] = []
    for lineno, row in rows:
        if idx >= len(row):
            raise TimestampParseError(
                f"row has {len(row)} columns; missing {field!r}", path=path, line=lineno
            )
        try:
            out.append(parse_timestamp(row[idx]))
        except ValueError as exc:
            raise TimestampParseError(str(exc), path=path, line=lineno) from exc
    return out


def _read_text(fh: TextIO, *, path: Union[str, pathlib.Path]) -> List[datetime]:
    out: List[datetime] = []
    for lineno, raw in enumerate(fh, start=1):
        if _is_comment(raw):
            continue
        try:
            out.append(parse_timestamp(raw))
        except ValueError as exc:
            raise TimestampParseError(str(exc), path=path, line=lineno) from exc
    return out


def read_timestamps(
    path: Union[str, pathlib.Path, TextIO],
    *,
    column: Optional[str] = None,
) -> List[datetime]:
    """Return the timestamps stored in ``path`` in file order.

    ``.csv`` files are read with a header row; ``column`` selects the
    timestamp column.  Any other file, or a file-like object, is read as one
    timestamp per line.
    """

    if isinstance(path, (str, pathlib.Path)):
        p = pathlib.Path(path)
        with open(p, "r", encoding="utf8", newline="") as fh:
            if p.suffix.lower() == ".csv":
                return _read_csv(fh, column=column, path=p)
            return _read_text(fh, path=p)

    stream_name = getattr(path, "name", "<stream>")
    return _read_text(path, path=stream_name)
