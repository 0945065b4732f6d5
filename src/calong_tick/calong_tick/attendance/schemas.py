from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, Field, NonNegativeInt

from ..common.datetime_utils import to_local_naive
from ..core.enums import ReportPeriod
from ..employees.schemas import PinPayload
from ..payroll.model import SummaryFilter
from .model import EntryChanges

# Timestamps with an offset are moved to local time; naive ones are local already.
LocalDateTime = Annotated[datetime, AfterValidator(to_local_naive)]

Week = Annotated[int, Field(ge=1, le=53)]
Month = Annotated[int, Field(ge=1, le=12)]
Year = Annotated[int, Field(ge=1970, le=9999)]


class ClockOutRequest(PinPayload):
    notes: Optional[str] = None


class OwnEntriesRequest(PinPayload):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    period: Optional[ReportPeriod] = None


class _NewEntryFields(BaseModel):
    clock_in: LocalDateTime
    clock_out: LocalDateTime
    break_minutes: Optional[NonNegativeInt] = 0
    notes: Optional[str] = None

    def entry_kwargs(self) -> dict:
        return {
            "clock_in": self.clock_in,
            "clock_out": self.clock_out,
            "break_minutes": self.break_minutes or 0,
            "notes": self.notes,
        }


class ManualEntryRequest(_NewEntryFields):
    employee_id: int


class OwnEntryRequest(PinPayload, _NewEntryFields):
    pass


class EntryUpdateRequest(BaseModel):
    clock_in: Optional[LocalDateTime] = None
    clock_out: Optional[LocalDateTime] = None
    break_minutes: Optional[NonNegativeInt] = None
    notes: Optional[str] = None

    def to_changes(self) -> EntryChanges:
        return EntryChanges(
            clock_in=self.clock_in,
            clock_out=self.clock_out,
            break_minutes=self.break_minutes,
            notes=self.notes,
        )


class OwnEntryUpdateRequest(PinPayload, EntryUpdateRequest):
    pass


class EntryListQuery(BaseModel):
    employee_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    week: Optional[Week] = None
    month: Optional[Month] = None
    year: Optional[Year] = None


class SummaryQuery(BaseModel):
    employee_id: Optional[int] = None
    period: Optional[ReportPeriod] = None
    week: Optional[Week] = None
    month: Optional[Month] = None
    year: Optional[Year] = None

    def to_filter(self) -> SummaryFilter:
        return SummaryFilter(
            employee_id=self.employee_id,
            period=self.period,
            week=self.week,
            month=self.month,
            year=self.year,
        )
