from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from radio_schedule import __version__
from radio_schedule.config import settings, setup_logging
from radio_schedule.errors import JsValueMismatch, ScheduleError
from radio_schedule.routers import main_router
from radio_schedule.schemas import ErrorDetail, StandardErrorResponse


setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    logger.info("Starting Radio Schedule Service...")
    logger.info(f"  Radio 357 source: {settings.radio357_url}")
    logger.info(f"  Radio Nowy Świat source: {settings.rns_url}")
    logger.info("Radio Schedule Service started successfully")

    yield

    logger.info("Radio Schedule Service stopped")


app = FastAPI(
    title="Radio Schedule Service",
    version=__version__,
    lifespan=lifespan
)

app.include_router(main_router)

frontend_dir = Path(settings.frontend_dir)
if frontend_dir.is_dir():
    app.mount("/", StaticFiles(directory=frontend_dir, html=True), name="frontend")
    logger.info(f"Serving front end from {frontend_dir}")


@app.exception_handler(ScheduleError)
async def schedule_error_handler(request: Request, exc: ScheduleError):
    """Log the failure kind and answer with a generic server error"""
    logger.error(
        f"{request.method} {request.url.path} failed with {exc.code}: {exc}",
        exc_info=exc
    )

    context = None
    if isinstance(exc, JsValueMismatch):
        context = {"path": exc.path, "expected": exc.expected, "actual": exc.actual}

    body = StandardErrorResponse(
        timestamp=datetime.now(timezone.utc).isoformat(),
        error=ErrorDetail(code=exc.code, message=str(exc), context=context)
    )
    return JSONResponse(status_code=500, content=body.model_dump())
