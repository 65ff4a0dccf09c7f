"""
Shared dataclasses used by both schedule pipelines.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass(slots=True)
class ScheduleItem:
    """One scheduled program occurrence, as emitted by either pipeline.

    ``start_at`` and ``end_at`` are milliseconds since the Unix epoch.
    """
    start_at: float
    end_at: float
    name: str = ""
    description: str = ""
    hosts: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


__all__ = ["ScheduleItem"]
