"""CSV export of tabular report data.

Layout of the produced file::

    Report Name: HR Overtime Report      <- optional metadata preamble
    Period: January 2026
    Generated: 05/02/2026 09:30
                                         <- one blank line after the preamble
    Employee No.,Name,Total OT Hours     <- header labels
    E001,"Tan, Mei Ling",12.5            <- data rows

Lines are joined with ``\\n``. String values always have their double quotes
doubled but are only wrapped in quotes when they contain a comma.
"""
from __future__ import annotations

from collections.abc import Mapping
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Optional, Sequence, Union

from ..core.constants import CSV_MIMETYPE


@dataclass(frozen=True)
class CsvHeader:
    key: str
    label: str


@dataclass(frozen=True)
class CsvMetadata:
    report_name: Optional[str] = None
    period: Optional[str] = None
    generated_date: Optional[str] = None

    def preamble(self) -> list[str]:
        lines = []
        if self.report_name:
            lines.append(f"Report Name: {self.report_name}")
        if self.period:
            lines.append(f"Period: {self.period}")
        if self.generated_date:
            lines.append(f"Generated: {self.generated_date}")
        return lines


@dataclass(frozen=True)
class CsvFile:
    filename: str
    content: str
    mimetype: str = CSV_MIMETYPE

    def to_bytes(self) -> bytes:
        return self.content.encode("utf-8")


HeaderLike = Union[CsvHeader, Mapping[str, str]]


def _as_header(header: HeaderLike) -> CsvHeader:
    if isinstance(header, CsvHeader):
        return header
    return CsvHeader(key=header["key"], label=header["label"])


def _float_text(value: float) -> str:
    """Shortest round-trip text, exponent only below 1e-6 or from 1e21 up."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 2 ** 53:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text[:-2] if text.endswith(".0") else text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


def escape_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        escaped = value.replace('"', '""')
        return f'"{escaped}"' if "," in value else escaped
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_text(value)
    return str(value)


def _cell(row: Any, key: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(key)
    return getattr(row, key, None)


def build_csv(
    data: Iterable[Any],
    headers: Sequence[HeaderLike],
    metadata: Optional[CsvMetadata] = None,
) -> str:
    columns = [_as_header(h) for h in headers]

    lines: list[str] = []
    if metadata is not None:
        preamble = [escape_value(line) for line in metadata.preamble()]
        if preamble:
            lines.extend(preamble)
            lines.append("")

    lines.append(",".join(c.label for c in columns))
    for row in data:
        lines.append(",".join(escape_value(_cell(row, c.key)) for c in columns))

    return "\n".join(lines)


def export_to_csv(
    data: Iterable[Any],
    filename: str,
    headers: Sequence[HeaderLike],
    metadata: Optional[CsvMetadata] = None,
) -> CsvFile:
    """Build a downloadable CSV file named ``{filename}.csv``."""
    return CsvFile(filename=f"{filename}.csv", content=build_csv(data, headers, metadata))
