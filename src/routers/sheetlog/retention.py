# ── src/routers/sheetlog/retention.py ─────────────────────────────────
from __future__ import annotations

import logging
from typing import Optional

import settings

from .store import LogTable

_logger = logging.getLogger(__name__)

HEADER_ROWS = 1


def clean_up_sheet(
    table: LogTable,
    max_rows: Optional[int] = None,
    rows_to_delete: Optional[int] = None,
) -> int:
    """
    Keep the log within bounds by deleting the oldest entries.

    Once the table holds `max_rows` rows or more (header counted as row 1),
    exactly `rows_to_delete` rows directly below the header are removed.
    Below the ceiling nothing happens.  Backing-store errors propagate.

    Returns the number of rows deleted.
    """
    if max_rows is None:
        max_rows = settings.max_rows()
    if rows_to_delete is None:
        rows_to_delete = settings.rows_to_delete()

    last_row = table.row_count()
    if last_row < max_rows:
        return 0

    table.delete_rows(HEADER_ROWS + 1, rows_to_delete)
    _logger.info(
        "Retention: %s rows >= %s, deleted %s oldest rows",
        last_row, max_rows, rows_to_delete,
    )
    return rows_to_delete
