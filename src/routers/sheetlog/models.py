# ── src/routers/sheetlog/models.py ────────────────────────────────────
from __future__ import annotations

import json
from typing import Any, List, Literal, Mapping, Optional

from pydantic import BaseModel, Field

# Keys consumed from the relay's parameter set
RECORD_KEYS = ("event", "data", "coreid", "published_at")


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


# ── Inbound record -----------------------------------------------------
class RequestRecord(BaseModel):
    event:        Optional[str] = Field(None, description="Relay event name (read, not logged)")
    data:         Optional[str] = Field(None, description="Raw payload published by the hub")
    coreid:       Optional[str] = Field(None, description="Publishing device id")
    published_at: Optional[str] = Field(None, description="Relay-side publish timestamp")

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "RequestRecord":
        """
        Decode a flat parameter mapping. Unknown keys are ignored and
        missing keys stay None; non-string scalars are rendered as text.
        """
        return cls(**{key: _as_text(params.get(key)) for key in RECORD_KEYS})


# ── Raw request body (for diagnostic rows) ----------------------------
class PostData(BaseModel):
    type:     Optional[str] = None
    length:   int           = 0
    contents: str           = ""

    @classmethod
    def from_body(cls, body: bytes, content_type: Optional[str]) -> "PostData":
        return cls(
            type=content_type,
            length=len(body),
            contents=body.decode("utf-8", errors="replace"),
        )


# ── Rows written to the log table -------------------------------------
class LogRow(BaseModel):
    server_timestamp: str
    coreid:           Optional[str] = None
    device_timestamp: Optional[str] = None
    payload:          Optional[str] = None

    def as_values(self) -> List[str]:
        return [
            self.server_timestamp,
            self.coreid or "",
            self.device_timestamp or "",
            self.payload or "",
        ]


class DiagnosticRow(BaseModel):
    error:     str
    post_data: Optional[PostData] = None

    def as_values(self) -> List[str]:
        dump = "null" if self.post_data is None else self.post_data.model_dump_json()
        return [f"Error in sheetlog: {self.error}", f"PostData: {dump}"]


class AppendResult(BaseModel):
    kind:   Literal["row", "diagnostic"]
    values: List[str]

    @property
    def is_diagnostic(self) -> bool:
        return self.kind == "diagnostic"
