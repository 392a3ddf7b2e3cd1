from fastapi import APIRouter
from fastapi.responses import JSONResponse

import settings

router = APIRouter()

@router.get("/healthz", include_in_schema=False)
def health_check():
    # configuration only; the spreadsheet is not contacted here
    return JSONResponse({
        "status":         "healthy",
        "sheet_name":     settings.sheet_name(),
        "sheet_url_set":  settings.sheet_url() is not None,
        "timezone":       settings.log_timezone(),
        "max_rows":       settings.max_rows(),
        "rows_to_delete": settings.rows_to_delete(),
    })
