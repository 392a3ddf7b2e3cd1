# ── src/main.py ───────────────────────────────────────────────────────────────
import logging
from fastapi import FastAPI

import settings

logging.basicConfig(
    level=settings.log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Server-to-server webhook: the relay never sends an Origin, so no CORS layer.
app = FastAPI(title="LoRa sheet-log webhook")

# ── core modules -------------------------------------------------------------
from routers.healthz.endpoints import router as health_router
from routers.sheetlog          import router as sheetlog_router

# ── include routes -----------------------------------------------------------
app.include_router(health_router)
app.include_router(sheetlog_router)

# ── root ---------------------------------------------------------------------
@app.get("/", include_in_schema=False)
def root():
    return {
        "status": "ok",
        "info": "/healthz, /api/sheetlog (GET|POST)",
    }
