# ── src/routers/sheetlog/__init__.py ──────────────────────────────────
"""
Sheet-log sub-router.

Receives the relay webhook (GET query string or POST form/JSON body) for
events published by the LoRa hub and appends one row per event to the
"NewData" worksheet:

    [server time (operator zone), coreid, published_at, data]

Failures while building or writing that row become a single diagnostic
row instead; afterwards the oldest rows are trimmed once the sheet reaches
its row ceiling.
"""
from .endpoints import router  # re-export for `include_router`
