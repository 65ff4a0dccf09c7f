"""
State Shape Validation & Mapping Service

Turns the Radio 357 schedule state into ScheduleItems. The state is treated
as an API contract: every day, item, host and program must have exactly the
expected shape, and the first deviation fails the whole schedule.
"""
from enum import Enum
import logging
from typing import Any

from radio_schedule.errors import JsValueMismatch
from radio_schedule.services.schedule_types import ScheduleItem
from radio_schedule.utils.logging_helpers import log_day_summary


logger = logging.getLogger(__name__)


class ValueKind(str, Enum):
    """Node kinds of a structured value tree"""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    LIST = "list"
    MAP = "map"


def kind_of(value: Any) -> ValueKind:
    """Classify a decoded value; bool is checked before number since it subclasses int"""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.LIST
    if isinstance(value, dict):
        return ValueKind.MAP
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def expect(value: Any, kind: ValueKind, path: str) -> Any:
    """Return value unchanged if it is of the given kind, otherwise raise JsValueMismatch"""
    actual = kind_of(value)
    if actual is not kind:
        raise JsValueMismatch(path, kind.value, actual.value)
    return value


def expect_field(mapping: dict, key: str, kind: ValueKind, path: str) -> Any:
    """Return a required key of a map, checked against the expected kind"""
    field_path = f"{path}.{key}"
    if key not in mapping:
        raise JsValueMismatch(field_path, kind.value, "missing")
    return expect(mapping[key], kind, field_path)


def _map_host(host: Any, path: str) -> str:
    host = expect(host, ValueKind.MAP, path)
    firstname = expect_field(host, "firstname", ValueKind.STRING, path)
    lastname = expect_field(host, "lastname", ValueKind.STRING, path)
    return f"{firstname} {lastname}"


def _map_item(item: Any, path: str) -> ScheduleItem:
    item = expect(item, ValueKind.MAP, path)
    start_at = expect_field(item, "start_at", ValueKind.NUMBER, path)
    end_at = expect_field(item, "end_at", ValueKind.NUMBER, path)
    hosts = expect_field(item, "hosts", ValueKind.LIST, path)
    program = expect_field(item, "program", ValueKind.MAP, path)

    host_names = [_map_host(host, f"{path}.hosts[{i}]") for i, host in enumerate(hosts)]
    name = expect_field(program, "name", ValueKind.STRING, f"{path}.program")
    description = expect_field(program, "description", ValueKind.STRING, f"{path}.program")

    return ScheduleItem(
        start_at=start_at,
        end_at=end_at,
        name=name,
        description=description,
        hosts=host_names
    )


def map_schedule_state(state: Any) -> list[ScheduleItem]:
    """
    Validate the schedule state and flatten it into ScheduleItems

    Expected shape::

        [{"items": [{"start_at": number, "end_at": number,
                     "hosts": [{"firstname": str, "lastname": str}, ...],
                     "program": {"name": str, "description": str}}, ...]}, ...]

    Extra keys are ignored. Items keep their order, day by day.

    Args:
        state: Structured value tree read from the page

    Returns:
        All items across all days

    Raises:
        JsValueMismatch: On the first node that is missing or of the wrong kind
    """
    days = expect(state, ValueKind.LIST, "$")

    items: list[ScheduleItem] = []
    for day_index, day in enumerate(days):
        day_path = f"$[{day_index}]"
        day = expect(day, ValueKind.MAP, day_path)
        day_items = expect_field(day, "items", ValueKind.LIST, day_path)

        for item_index, item in enumerate(day_items):
            items.append(_map_item(item, f"{day_path}.items[{item_index}]"))

        log_day_summary(logger, day_index, str(day.get("date", "?")), len(day_items))

    logger.debug(f"Mapped {len(items)} items from {len(days)} days")
    return items
