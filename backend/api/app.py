"""FastAPI application entrypoint."""

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.routes import categories
from backend.api.routes import conversions
from backend.api.routes import time_table

CORS_ORIGINS_ENV_VAR = "UNIT_CONVERTER_CORS_ORIGINS"


def cors_origins() -> list[str]:
    """Comma-separated origins from the environment; any origin when unset."""
    raw = os.environ.get(CORS_ORIGINS_ENV_VAR, "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


app = FastAPI(title="Unit Converter API", version="0.1.0")
# No credentials; GET and POST only.
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(categories.router, prefix="/categories", tags=["categories"])
app.include_router(conversions.router, prefix="/convert", tags=["conversions"])
app.include_router(time_table.router, prefix="/time-table", tags=["time-table"])


@app.get("/health", tags=["health"])
def healthcheck() -> dict[str, str]:
    return {"status": "ok"}
