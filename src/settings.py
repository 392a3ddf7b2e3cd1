# src/settings.py
"""
Environment-driven settings for the sheet-log webhook.

Environment:
- SHEET_URL:                      spreadsheet URL (required once the sheet is opened)
- SHEET_NAME:                     worksheet/tab name (default "NewData")
- LOG_TIMEZONE:                   IANA zone for the server timestamp (default "America/Los_Angeles")
- SHEET_MAX_ROWS:                 retention ceiling, header counted as row 1 (default 3000)
- SHEET_ROWS_TO_DELETE:           oldest rows dropped per cleanup (default 500)
- GOOGLE_SERVICE_ACCOUNT_JSON:    inline service-account key (JSON text)
- GOOGLE_APPLICATION_CREDENTIALS: path to a service-account key file
- LOG_LEVEL:                      python logging level (default "INFO")
- SHEETLOG_SELFTEST:              "1" exposes POST /api/sheetlog/selftest (default off)

Values are read on every call so tests can monkeypatch the environment.
"""

from __future__ import annotations

import os as _os
from typing import Optional

DEFAULT_SHEET_NAME     = "NewData"
DEFAULT_TIMEZONE       = "America/Los_Angeles"
DEFAULT_MAX_ROWS       = 3000
DEFAULT_ROWS_TO_DELETE = 500


# ───────────────────────── env helpers ─────────────────────────

def _env_str(name: str, default: str = "") -> str:
    return (_os.getenv(name) or default).strip()


def _env_bool(name: str, default: bool = False) -> bool:
    v = _env_str(name).lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    return default


def _env_int(name: str, default: int) -> int:
    v = _env_str(name)
    if not v:
        return default
    try:
        return int(v)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {v!r}") from exc


def _env_optional(name: str) -> Optional[str]:
    return _env_str(name) or None


# ───────────────────────── public accessors ─────────────────────────

def sheet_url() -> Optional[str]:
    return _env_optional("SHEET_URL")


def sheet_name() -> str:
    return _env_str("SHEET_NAME", DEFAULT_SHEET_NAME)


def log_timezone() -> str:
    return _env_str("LOG_TIMEZONE", DEFAULT_TIMEZONE)


def max_rows() -> int:
    return _env_int("SHEET_MAX_ROWS", DEFAULT_MAX_ROWS)


def rows_to_delete() -> int:
    return _env_int("SHEET_ROWS_TO_DELETE", DEFAULT_ROWS_TO_DELETE)


def service_account_json() -> Optional[str]:
    return _env_optional("GOOGLE_SERVICE_ACCOUNT_JSON")


def service_account_file() -> Optional[str]:
    return _env_optional("GOOGLE_APPLICATION_CREDENTIALS")


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def self_test_enabled() -> bool:
    return _env_bool("SHEETLOG_SELFTEST", False)


__all__ = [
    "DEFAULT_SHEET_NAME",
    "DEFAULT_TIMEZONE",
    "DEFAULT_MAX_ROWS",
    "DEFAULT_ROWS_TO_DELETE",
    "sheet_url",
    "sheet_name",
    "log_timezone",
    "max_rows",
    "rows_to_delete",
    "service_account_json",
    "service_account_file",
    "log_level",
    "self_test_enabled",
]
