"""
Structured logging helpers for consistent log formatting.

Provides utilities for structured, clean logging of schedule pipeline runs.
"""
import logging


def log_pipeline_start(logger: logging.Logger, pipeline: str, url: str) -> None:
    """
    Log the start of a schedule pipeline run.

    Args:
        logger: Logger instance
        pipeline: Pipeline name (e.g. "357", "rns")
        url: Upstream URL being scraped
    """
    logger.info(f"[{pipeline}] Starting schedule extraction from {url}")


def log_pipeline_end(logger: logging.Logger, pipeline: str, items_count: int) -> None:
    """
    Log the end of a schedule pipeline run.

    Args:
        logger: Logger instance
        pipeline: Pipeline name
        items_count: Number of schedule items produced
    """
    logger.info(f"[{pipeline}] Completed schedule extraction: {items_count} items")


def log_day_summary(logger: logging.Logger, day_index: int, label: str, items_count: int) -> None:
    """
    Log per-day extraction statistics.

    Args:
        logger: Logger instance
        day_index: 0-based day position in the source
        label: Human-readable day label (date or weekday)
        items_count: Number of items found for the day
    """
    logger.debug(f"  Day {day_index} ({label}): {items_count} items")
