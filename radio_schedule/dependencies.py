"""
Dependency providers

FastAPI dependencies for settings and the document fetcher, overridable in
tests through ``app.dependency_overrides``.
"""
from typing import Annotated

from fastapi import Depends

from radio_schedule.config import CustomSettings, settings
from radio_schedule.services.document_fetcher import DocumentFetcher


def get_settings() -> CustomSettings:
    """Application settings"""
    return settings


def get_document_fetcher(
    settings: Annotated[CustomSettings, Depends(get_settings)]
) -> DocumentFetcher:
    """A new fetcher per request; fetchers hold no state"""
    return DocumentFetcher(
        timeout=settings.fetch_timeout_sec,
        user_agent=settings.user_agent,
    )
