# ── src/routers/sheetlog/endpoints.py ─────────────────────────────────
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, NamedTuple, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

import settings

from .appender import add_log_row
from .models import AppendResult, PostData, RequestRecord
from .store import LogTable, get_log_table

_logger = logging.getLogger(__name__)

router = APIRouter()

# ── Self-test record ---------------------------------------------------
SELF_TEST_EVENT  = "sheetTest1"
SELF_TEST_DATA   = 'Any Ki{nd & of te,st \r\n data "can ] go: here"'
SELF_TEST_COREID = "1f0030001647ffffffffffff"


# ── Pydantic response --------------------------------------------------
class SheetLogResponse(BaseModel):
    status: int = Field(0, description="Always 0 once the request was handled")
    result: str = Field(..., description="row | diagnostic")


class Inbound(NamedTuple):
    record:    RequestRecord
    post_data: Optional[PostData]


# ── Request decoding ---------------------------------------------------
def _is_form(content_type: str) -> bool:
    return content_type.startswith(
        ("application/x-www-form-urlencoded", "multipart/form-data")
    )


async def _from_query(request: Request) -> Inbound:
    return Inbound(RequestRecord.from_params(request.query_params), None)


async def _from_body(request: Request) -> Inbound:
    """
    Merge query-string parameters with the body parameters (form fields or
    a flat JSON object).  A body that cannot be decoded contributes nothing;
    it is still kept verbatim for the diagnostic row.
    """
    body = await request.body()
    content_type = request.headers.get("content-type") or ""
    params: Dict[str, Any] = dict(request.query_params)

    if body:
        if _is_form(content_type):
            try:
                form = await request.form()
            except Exception as exc:  # noqa: BLE001
                _logger.warning("Form body not decodable (content-type=%r): %s", content_type, exc)
                form = {}
            params.update({k: v for k, v in form.items() if isinstance(v, str)})
        else:
            try:
                parsed = json.loads(body)
            except ValueError:
                _logger.warning("Body is not JSON (content-type=%r) – ignoring", content_type)
                parsed = None
            if isinstance(parsed, dict):
                params.update(parsed)

    return Inbound(
        RequestRecord.from_params(params),
        PostData.from_body(body, content_type or None),
    )


def _respond(result: AppendResult) -> SheetLogResponse:
    return SheetLogResponse(status=0, result=result.kind)


# ── Endpoints ----------------------------------------------------------
@router.get(
    "/api/sheetlog",
    response_model=SheetLogResponse,
    summary="Append a relay event to the log sheet (query parameters)",
)
def handle_get(
    inbound: Inbound = Depends(_from_query),
    table: LogTable = Depends(get_log_table),
):
    return _respond(add_log_row(inbound.record, table, inbound.post_data))


@router.post(
    "/api/sheetlog",
    response_model=SheetLogResponse,
    summary="Append a relay event to the log sheet (form or JSON body)",
)
def handle_post(
    inbound: Inbound = Depends(_from_body),
    table: LogTable = Depends(get_log_table),
):
    return _respond(add_log_row(inbound.record, table, inbound.post_data))


# ── Manual smoke test --------------------------------------------------
def self_test_record() -> RequestRecord:
    return RequestRecord(
        event=SELF_TEST_EVENT,
        data=SELF_TEST_DATA,
        coreid=SELF_TEST_COREID,
        published_at=(
            datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        ),
    )


def run_self_test(table: LogTable) -> SheetLogResponse:
    """Feed a synthetic record with awkward quoting through the POST path."""
    return handle_post(inbound=Inbound(self_test_record(), None), table=table)


def _self_test_enabled() -> None:
    # off unless SHEETLOG_SELFTEST is set; checked before the sheet is opened
    if not settings.self_test_enabled():
        raise HTTPException(status_code=404, detail="Not Found")


@router.post(
    "/api/sheetlog/selftest",
    response_model=SheetLogResponse,
    dependencies=[Depends(_self_test_enabled)],
    summary="Write a synthetic test row (manual smoke test, SHEETLOG_SELFTEST=1)",
)
def self_test(table: LogTable = Depends(get_log_table)):
    return run_self_test(table)
