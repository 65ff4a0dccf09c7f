from datetime import date, datetime, timezone
import time

import pytest

from radio_schedule.config import CustomSettings
from radio_schedule.errors import ExtractionTimeout, ScriptMissing
from radio_schedule.services.schedule_service import get_radio357_schedule, get_rns_schedule, run_extraction
from radio_schedule.utils.timezone import to_epoch_millis

from tests.conftest import FakeFetcher, make_radio357_page


@pytest.fixture
def settings() -> CustomSettings:
    return CustomSettings(schedule_timezone="Europe/Warsaw")


async def test_radio357_pipeline(settings, radio357_page, expected_radio357_items):
    fetcher = FakeFetcher(content=radio357_page)
    assert await get_radio357_schedule(fetcher, settings) == expected_radio357_items
    assert fetcher.urls == [settings.radio357_url]


async def test_radio357_pipeline_failure_is_terminal(settings):
    with pytest.raises(ScriptMissing):
        await get_radio357_schedule(FakeFetcher(content=make_radio357_page(None).encode()), settings)


async def test_rns_pipeline_uses_schedule_timezone(settings, rns_page):
    sunday = date(2024, 1, 7)
    items = await get_rns_schedule(FakeFetcher(content=rns_page), settings, today=sunday)

    assert len(items) == 4
    # Monday 06:00 in Warsaw (UTC+1)
    assert items[0].start_at == to_epoch_millis(datetime(2024, 1, 8, 5, 0, tzinfo=timezone.utc))


async def test_run_extraction_returns_result():
    assert await run_extraction(lambda: 42, 1.0) == 42
    assert await run_extraction(lambda: "no limit", 0) == "no limit"


async def test_run_extraction_timeout():
    with pytest.raises(ExtractionTimeout):
        await run_extraction(lambda: time.sleep(1.0), 0.05)


async def test_run_extraction_timeout_chains_cause():
    with pytest.raises(ExtractionTimeout) as exc_info:
        await run_extraction(lambda: time.sleep(1.0), 0.05)
    assert exc_info.value.__cause__ is not None
