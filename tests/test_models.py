from __future__ import annotations

from routers.sheetlog.models import DiagnosticRow, LogRow, PostData, RequestRecord


def test_from_params_ignores_unknown_keys() -> None:
    record = RequestRecord.from_params(
        {"event": "e", "data": "d", "coreid": "c", "published_at": "p", "ttl": "60"}
    )

    assert record == RequestRecord(event="e", data="d", coreid="c", published_at="p")


def test_from_params_renders_scalars_as_text() -> None:
    record = RequestRecord.from_params({"data": 42, "coreid": None, "published_at": {"a": 1}})

    assert record.data == "42"
    assert record.coreid is None
    assert record.published_at == '{"a": 1}'


def test_log_row_values_order() -> None:
    row = LogRow(server_timestamp="2026-01-01 00:00:00", coreid="c", device_timestamp="p", payload=None)

    assert row.as_values() == ["2026-01-01 00:00:00", "c", "p", ""]


def test_post_data_keeps_undecodable_bytes() -> None:
    post = PostData.from_body(b"\xff{", None)

    assert post.length == 2
    assert post.contents.endswith("{")
    assert DiagnosticRow(error="boom", post_data=post).as_values()[0] == "Error in sheetlog: boom"
