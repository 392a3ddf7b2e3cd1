# ── src/routers/sheetlog/appender.py ──────────────────────────────────
"""
Log Appender: one inbound relay event → one row in the log table.

Flow (every call):
1. server timestamp "yyyy-MM-dd HH:mm:ss" in the operator zone
2. unpack event / coreid / published_at / data (missing → empty)
3. append [timestamp, coreid, published_at, data]
4. if 1-3 raise, append a single diagnostic row instead (error text +
   raw request body); that append is not guarded
5. run the retention policy
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

import settings

from .models import AppendResult, DiagnosticRow, LogRow, PostData, RequestRecord
from .retention import clean_up_sheet
from .store import LogTable

_logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


# ── Helpers ------------------------------------------------------------
def server_timestamp(now: Optional[datetime] = None) -> str:
    """Format `now` (default: current time) in the operator's zone."""
    tz = ZoneInfo(settings.log_timezone())
    moment = datetime.now(tz) if now is None else now.astimezone(tz)
    return moment.strftime(TIMESTAMP_FORMAT)


def build_row(record: Optional[RequestRecord], timestamp: str) -> LogRow:
    if record is None:
        raise ValueError("request carried no parameters")

    # `event` is unpacked but not part of the row
    _event = record.event

    return LogRow(
        server_timestamp=timestamp,
        coreid=record.coreid,
        device_timestamp=record.published_at,
        payload=record.data,
    )


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


# ── Operation ----------------------------------------------------------
def add_log_row(
    record: Optional[RequestRecord],
    table: LogTable,
    post_data: Optional[PostData] = None,
) -> AppendResult:
    try:
        row = build_row(record, server_timestamp())
        values = row.as_values()
        table.append_row(values)
        result = AppendResult(kind="row", values=values)
        _logger.info("Appended row coreid=%s published_at=%s", row.coreid, row.device_timestamp)
    except Exception as exc:  # noqa: BLE001
        _logger.exception("Log row failed – writing diagnostic row")
        values = DiagnosticRow(error=_describe(exc), post_data=post_data).as_values()
        table.append_row(values)
        result = AppendResult(kind="diagnostic", values=values)

    # keep the number of rows within bounds by deleting the oldest entries
    clean_up_sheet(table)

    return result
