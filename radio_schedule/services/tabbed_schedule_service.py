"""
Tabbed Schedule Scraping Service

Scrapes the Radio Nowy Świat weekly schedule. The page lays the week out as
seven Monday-first day tabs, each holding show cards. Card fields are
extracted best-effort: anything missing becomes an empty value, and only an
unparseable time range fails the schedule.
"""
from datetime import date, tzinfo
import logging

from lxml import html  # type: ignore

from radio_schedule.services.schedule_types import ScheduleItem
from radio_schedule.utils.html_document import ChildSelector, all_texts, find_by_class, first_text
from radio_schedule.utils.logging_helpers import log_day_summary
from radio_schedule.utils.timezone import show_interval, tab_date


logger = logging.getLogger(__name__)

DAY_TAB_CLASS = "proradio-tabs__content"
SHOW_CARD_CLASS = "proradio-post__card--shows"

_HEADER = "proradio-post__headercont--ex"
_CAPTION = "proradio-post__card__cap"

NAME_SELECTORS = [
    ChildSelector(_HEADER, child_tag="h4"),
    ChildSelector(_CAPTION, child_class="proradio-post__title"),
]
DESCRIPTION_SELECTORS = [ChildSelector(_HEADER, child_tag="p")]
HOSTS_SELECTOR = ChildSelector(_HEADER, child_tag="h6")
TIME_RANGE_SELECTORS = [ChildSelector(_CAPTION, child_class="proradio-itemmetas")]

DEFAULT_TIME_RANGE = "00:00 - 00:00"


def parse_show_card(card: html.HtmlElement, day: date, tz: tzinfo | None) -> ScheduleItem:
    """
    Build a ScheduleItem from one show card

    Host entries are taken verbatim, one per ``h6``; a single entry naming
    several people is not split.

    Args:
        card: Show card element
        day: Date of the card's day tab
        tz: Timezone of the printed times (None = local)

    Raises:
        ParseTimeError: If the card's time range is malformed
    """
    time_range = first_text(card, TIME_RANGE_SELECTORS)
    if time_range is None:
        time_range = DEFAULT_TIME_RANGE
    start_at, end_at = show_interval(day, time_range, tz)

    return ScheduleItem(
        start_at=start_at,
        end_at=end_at,
        name=first_text(card, NAME_SELECTORS) or "",
        description=first_text(card, DESCRIPTION_SELECTORS) or "",
        hosts=all_texts(card, HOSTS_SELECTOR)
    )


def scrape_tabbed_schedule(
    document: html.HtmlElement,
    today: date,
    tz: tzinfo | None = None
) -> list[ScheduleItem]:
    """
    Extract all shows of the week from a parsed schedule page

    Tab ``i`` is Monday + ``i``; tabs for days already past this week are
    dated next week, so the result covers the seven days starting today.

    Args:
        document: Parsed HTML document
        today: Anchor date for tab dating
        tz: Timezone of the printed times (None = local)

    Returns:
        Items in document order

    Raises:
        ParseTimeError: If any show's time range is malformed
    """
    items: list[ScheduleItem] = []

    for tab_index, tab in enumerate(find_by_class(document, DAY_TAB_CLASS)):
        day = tab_date(today, tab_index)
        cards = find_by_class(tab, SHOW_CARD_CLASS)
        items.extend(parse_show_card(card, day, tz) for card in cards)
        log_day_summary(logger, tab_index, day.isoformat(), len(cards))

    logger.debug(f"Scraped {len(items)} shows")
    return items
