"""CSV export/import of employee records.

The on-disk format is kept compatible with files produced by earlier
versions of the directory: only name, department and position are quoted
and no field is escaped. Values containing commas or double quotes do not
survive a round trip.
"""

from __future__ import annotations

import logging
import re
import time
from datetime import datetime, timezone

from app.models.employee import DEFAULT_EMPLOYMENT_TYPE, DEFAULT_STATUS, Employee

logger = logging.getLogger(__name__)

CSV_HEADERS: tuple[str, ...] = (
    "ID",
    "Name",
    "Department",
    "Position",
    "Email",
    "Phone",
    "Employment Type",
    "Hire Date",
    "Status",
)

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"
BOM = "\ufeff"
MIN_COLUMNS = len(CSV_HEADERS)

NO_FILE_MESSAGE = "No file selected"
READ_FAILED_MESSAGE = "Failed to read the file"

_EDGE_QUOTE_RE = re.compile(r'^"|"\Z')


class CsvImportError(Exception):
    pass


def _quoted(value: str) -> str:
    return f'"{value}"'


def _clean(value: str) -> str:
    return _EDGE_QUOTE_RE.sub("", value).strip()


class CsvCodec:
    def encode(self, employees: list[Employee]) -> str:
        lines = [",".join(CSV_HEADERS)]
        for emp in employees:
            lines.append(
                ",".join(
                    [
                        emp.id,
                        _quoted(emp.name),
                        _quoted(emp.department),
                        _quoted(emp.position),
                        emp.email,
                        emp.phone,
                        emp.employment_type,
                        emp.hire_date,
                        emp.status,
                    ]
                )
            )
        return BOM + "\n".join(lines)

    def export_filename(self, now: datetime | None = None) -> str:
        current = now or datetime.now(timezone.utc)
        return f"employees_{current.date().isoformat()}.csv"

    def decode(self, content: str) -> list[Employee]:
        lines = [line for line in content.split("\n") if line.strip()]
        if len(lines) < 2:
            return []

        # Header row is positional only; its labels are not checked.
        stamp = int(time.time() * 1000)
        employees: list[Employee] = []

        for row_index, line in enumerate(lines[1:], start=1):
            values = [_clean(value) for value in line.split(",")]
            if len(values) < MIN_COLUMNS:
                logger.debug("Dropping CSV row %d: %d columns", row_index, len(values))
                continue

            employees.append(
                Employee(
                    id=values[0] or f"emp_{stamp}_{row_index}",
                    name=values[1],
                    department=values[2],
                    position=values[3],
                    email=values[4],
                    phone=values[5],
                    employment_type=values[6] or DEFAULT_EMPLOYMENT_TYPE,
                    hire_date=values[7],
                    status=values[8] or DEFAULT_STATUS,
                )
            )

        return employees

    def read(self, file_bytes: bytes | None, max_size: int) -> list[Employee]:
        """Decode an uploaded file; only an unreadable file is an error."""
        if file_bytes is None:
            raise CsvImportError(NO_FILE_MESSAGE)

        if len(file_bytes) > max_size:
            raise CsvImportError(f"{READ_FAILED_MESSAGE}: {len(file_bytes)} bytes (max {max_size})")

        # Undecodable bytes become U+FFFD instead of failing the import.
        content = file_bytes.decode("utf-8-sig", errors="replace")

        return self.decode(content)


csv_codec = CsvCodec()
