"""
FinAPI FastAPI application.

This is the entry point for the application.
All routers and error handlers are registered here.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from finapi.config import get_settings
from finapi.logging_config import setup_logging
from finapi.models.base import init_db
from finapi.api.health import router as health_router
from finapi.api.accounts import router as accounts_router
from finapi.api.statements import router as statements_router

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s %s ready", settings.APP_NAME, settings.APP_VERSION)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="An in-memory banking ledger keyed by cpf",
    debug=settings.DEBUG,
    lifespan=lifespan,
)


# --- Error payloads ---
# Every error leaves the API as {"error": "<message>"}.

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies, missing fields and bad dates are all a 400."""
    first = exc.errors()[0]
    # Malformed JSON is reported at ("body", <char offset>); only
    # named parts of the location identify a field.
    field = ".".join(
        part for part in first["loc"]
        if isinstance(part, str) and part != "body"
    )
    return JSONResponse(
        status_code=400,
        content={"error": f"{field}: {first['msg']}" if field else first["msg"]},
    )


# Register routers
app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(statements_router)


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
