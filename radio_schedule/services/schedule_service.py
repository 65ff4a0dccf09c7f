"""
Schedule Service

Runs one pipeline per request: fetch the upstream page, then parse and
extract off the event loop with timeout protection.
"""
import asyncio
import logging
from datetime import date
from functools import partial
from typing import Callable, TypeVar

from radio_schedule.config import CustomSettings
from radio_schedule.errors import ExtractionTimeout
from radio_schedule.services.document_fetcher import DocumentFetcher
from radio_schedule.services.embedded_state_service import extract_schedule_state
from radio_schedule.services.schedule_types import ScheduleItem
from radio_schedule.services.state_mapper_service import map_schedule_state
from radio_schedule.services.tabbed_schedule_service import scrape_tabbed_schedule
from radio_schedule.utils.html_document import parse_document
from radio_schedule.utils.logging_helpers import log_pipeline_end, log_pipeline_start
from radio_schedule.utils.timezone import resolve_timezone, today_in


logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_extraction(func: Callable[[], T], timeout_seconds: float | None) -> T:
    """
    Run synchronous parsing/extraction in the thread pool executor.

    Args:
        func: Zero-argument callable doing the work
        timeout_seconds: Timeout in seconds (0/None disables timeout)

    Returns:
        Whatever func returns

    Raises:
        ExtractionTimeout: If the work exceeds the timeout
    """
    effective_timeout = timeout_seconds if timeout_seconds and timeout_seconds > 0 else None

    loop = asyncio.get_running_loop()
    task = loop.run_in_executor(None, func)
    if not effective_timeout:
        return await task

    try:
        return await asyncio.wait_for(task, timeout=effective_timeout)
    except asyncio.TimeoutError as e:
        logger.error("Schedule extraction timed out after %ss", effective_timeout)
        raise ExtractionTimeout(f"schedule extraction timed out after {effective_timeout}s") from e


def extract_radio357(content: bytes, *, time_limit_seconds: float, memory_limit_bytes: int) -> list[ScheduleItem]:
    """Parse a Radio 357 page and map its embedded schedule state"""
    document = parse_document(content)
    state = extract_schedule_state(
        document,
        time_limit_seconds=time_limit_seconds,
        memory_limit_bytes=memory_limit_bytes,
    )
    return map_schedule_state(state)


def extract_rns(content: bytes, today: date, tz) -> list[ScheduleItem]:
    """Parse a Radio Nowy Świat page and scrape its day tabs"""
    document = parse_document(content)
    return scrape_tabbed_schedule(document, today, tz)


async def get_radio357_schedule(fetcher: DocumentFetcher, settings: CustomSettings) -> list[ScheduleItem]:
    """
    Current Radio 357 schedule

    Raises:
        ScheduleError: Any fetch, script or shape failure; there is no partial result
    """
    log_pipeline_start(logger, "357", settings.radio357_url)

    content = await fetcher.fetch(settings.radio357_url)
    items = await run_extraction(
        partial(
            extract_radio357,
            content,
            time_limit_seconds=settings.script_time_limit_sec,
            memory_limit_bytes=settings.script_memory_limit_mb * 1024 * 1024,
        ),
        settings.extraction_timeout_sec,
    )

    log_pipeline_end(logger, "357", len(items))
    return items


async def get_rns_schedule(
    fetcher: DocumentFetcher,
    settings: CustomSettings,
    today: date | None = None
) -> list[ScheduleItem]:
    """
    Radio Nowy Świat schedule for the seven days starting today

    Args:
        fetcher: Document fetcher
        settings: Application settings
        today: Anchor date, defaults to the current date in the schedule timezone

    Raises:
        ScheduleError: Fetch failures or a malformed show time range
    """
    log_pipeline_start(logger, "rns", settings.rns_url)

    tz = resolve_timezone(settings.schedule_timezone)
    anchor = today or today_in(tz)
    logger.debug(f"  Week anchor: {anchor.isoformat()} ({anchor.strftime('%A')})")

    content = await fetcher.fetch(settings.rns_url)
    items = await run_extraction(
        partial(extract_rns, content, anchor, tz),
        settings.extraction_timeout_sec,
    )

    log_pipeline_end(logger, "rns", len(items))
    return items
