from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import CalendarEvent, LayoutEntry, TimelineBounds
from ..services.day_view import DayView, TimelineBlock


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None)
    title: str
    start: str
    end: str
    all_day: bool = Field(default=False, alias="allDay")
    description: str = Field(default="")
    location: str = Field(default="")
    calendar_id: Optional[str] = Field(default=None, alias="calendarId")
    calendar_color: str = Field(alias="calendarColor")
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, event: CalendarEvent) -> "EventPayload":
        return cls.model_validate(event.to_record())


class BoundsPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_hour: int = Field(alias="startHour", ge=0, le=24)
    end_hour: int = Field(alias="endHour", ge=0, le=24)

    @classmethod
    def from_domain(cls, bounds: TimelineBounds) -> "BoundsPayload":
        return cls(start_hour=bounds.start_hour, end_hour=bounds.end_hour)


class LayoutEntryPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event: EventPayload
    column: int = Field(ge=0)
    total_columns: int = Field(alias="totalColumns", ge=1)

    @classmethod
    def from_domain(cls, entry: LayoutEntry) -> "LayoutEntryPayload":
        return cls(
            event=EventPayload.from_domain(entry.event),
            column=entry.column,
            total_columns=entry.total_columns,
        )


class BlockPayload(LayoutEntryPayload):
    top_px: float = Field(alias="topPx")
    height_px: float = Field(alias="heightPx")
    offset_fraction: float = Field(alias="offsetFraction")
    width_fraction: float = Field(alias="widthFraction")

    @classmethod
    def from_block(cls, block: TimelineBlock) -> "BlockPayload":
        return cls(
            event=EventPayload.from_domain(block.event),
            column=block.entry.column,
            total_columns=block.entry.total_columns,
            top_px=block.top_px,
            height_px=block.height_px,
            offset_fraction=block.offset_fraction,
            width_fraction=block.width_fraction,
        )


class DayViewPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bounds: BoundsPayload
    px_per_hour: int = Field(alias="pxPerHour")
    height_px: int = Field(alias="heightPx")
    all_day: List[EventPayload] = Field(default_factory=list, alias="allDay")
    blocks: List[BlockPayload] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, view: DayView) -> "DayViewPayload":
        return cls(
            bounds=BoundsPayload.from_domain(view.bounds),
            px_per_hour=view.px_per_hour,
            height_px=view.height_px,
            all_day=[EventPayload.from_domain(event) for event in view.all_day],
            blocks=[BlockPayload.from_block(block) for block in view.blocks],
        )
