# ── src/routers/sheetlog/store.py ─────────────────────────────────────
"""
Log Table access.

`LogTable` is the narrow surface the appender and the retention policy
need (append / row count / bulk delete).  `GoogleSheetTable` implements it
on top of a gspread worksheet; `open_log_table()` opens the configured
spreadsheet once per process and is what the routes receive through the
`get_log_table` dependency.

Row indices are 1-based and the header is row 1, as in the Sheets UI.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import List, Protocol, Sequence

import gspread
from google.oauth2.service_account import Credentials

import settings

_logger = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive",
]


class LogTable(Protocol):
    def append_row(self, values: Sequence[str]) -> None: ...

    def row_count(self) -> int: ...

    def delete_rows(self, start_index: int, count: int) -> None: ...


class GoogleSheetTable:
    """gspread-backed Log Table (one worksheet of one spreadsheet)."""

    def __init__(self, worksheet: gspread.Worksheet):
        self._ws = worksheet

    @property
    def title(self) -> str:
        return self._ws.title

    def append_row(self, values: Sequence[str]) -> None:
        # RAW keeps payloads such as "=..." or "1e5" from being interpreted
        self._ws.append_row(list(values), value_input_option="RAW")

    def row_count(self) -> int:
        # last row with content, not the grid size (`Worksheet.row_count`);
        # column A is never blank (header, server time or error text)
        column: List[str] = self._ws.col_values(1)
        return len(column)

    def delete_rows(self, start_index: int, count: int) -> None:
        self._ws.delete_rows(start_index, start_index + count - 1)


# ── credentials ---------------------------------------------------------
def _credentials() -> Credentials:
    if (raw := settings.service_account_json()):
        try:
            info = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise RuntimeError("GOOGLE_SERVICE_ACCOUNT_JSON is not valid JSON") from exc
        return Credentials.from_service_account_info(info, scopes=SCOPES)

    if (path := settings.service_account_file()):
        return Credentials.from_service_account_file(path, scopes=SCOPES)

    raise RuntimeError(
        "No Google credentials: set GOOGLE_SERVICE_ACCOUNT_JSON or GOOGLE_APPLICATION_CREDENTIALS"
    )


@lru_cache(maxsize=1)
def open_log_table() -> GoogleSheetTable:
    url = settings.sheet_url()
    if not url:
        raise RuntimeError("SHEET_URL app setting is required")

    client = gspread.authorize(_credentials())
    worksheet = client.open_by_url(url).worksheet(settings.sheet_name())
    _logger.info("Opened log sheet %r", worksheet.title)
    return GoogleSheetTable(worksheet)


def get_log_table() -> LogTable:
    """FastAPI dependency; overridden in tests."""
    return open_log_table()
