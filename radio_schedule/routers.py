from typing import Annotated
from fastapi import APIRouter, Depends
import logging

from radio_schedule import __version__
from radio_schedule.config import CustomSettings
from radio_schedule.dependencies import get_document_fetcher, get_settings
from radio_schedule.schemas import ScheduleItemResponse
from radio_schedule.services import (
    DocumentFetcher,
    get_radio357_schedule,
    get_rns_schedule,
)


logger = logging.getLogger(__name__)

main_router = APIRouter()


@main_router.get("/")
async def root() -> dict:
    """Root endpoint with service information"""
    return {
        "service": "Radio Schedule Service",
        "version": __version__,
        "endpoints": {
            "357": "/api/357 - Radio 357 schedule",
            "rns": "/api/rns - Radio Nowy Świat schedule for the next 7 days",
            "health": "/health - Health check"
        }
    }


@main_router.get("/health")
async def health_check() -> dict:
    """Health check endpoint"""
    return {"status": "ok"}


@main_router.get("/api/357", response_model=list[ScheduleItemResponse])
async def schedule_357(
    fetcher: Annotated[DocumentFetcher, Depends(get_document_fetcher)],
    settings: Annotated[CustomSettings, Depends(get_settings)]
) -> list[ScheduleItemResponse]:
    """
    Radio 357 schedule, read from the page's embedded application state

    Any deviation from the expected state shape fails the whole request.
    """
    items = await get_radio357_schedule(fetcher, settings)
    return [ScheduleItemResponse(**item.to_dict()) for item in items]


@main_router.get("/api/rns", response_model=list[ScheduleItemResponse])
async def schedule_rns(
    fetcher: Annotated[DocumentFetcher, Depends(get_document_fetcher)],
    settings: Annotated[CustomSettings, Depends(get_settings)]
) -> list[ScheduleItemResponse]:
    """Radio Nowy Świat schedule for the seven days starting today"""
    items = await get_rns_schedule(fetcher, settings)
    return [ScheduleItemResponse(**item.to_dict()) for item in items]
