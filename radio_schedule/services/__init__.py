"""
Services package for Radio Schedule Service

This package contains the fetching and extraction pipelines.
"""
from radio_schedule.services.document_fetcher import DocumentFetcher
from radio_schedule.services.schedule_service import get_radio357_schedule, get_rns_schedule
from radio_schedule.services.schedule_types import ScheduleItem

__all__ = [
    'DocumentFetcher',
    'ScheduleItem',
    'get_radio357_schedule',
    'get_rns_schedule',
]
