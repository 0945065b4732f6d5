from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from ..attendance.calendar import bucket
from ..attendance.repository import TimeEntryRepository
from ..common.datetime_utils import now_local
from ..core.enums import ReportPeriod
from .model import ReportEntry, SummaryFilter, SummaryRow
from .money import estimated_pay


class ReportService:
    """Per-employee totals and estimated pay over a reporting period."""

    def __init__(self, entries: TimeEntryRepository, *, clock: Callable[[], datetime] = now_local):
        self._entries = entries
        self._clock = clock

    def _period_entries(self, flt: SummaryFilter, now: datetime) -> list[ReportEntry]:
        current = bucket(now)
        year = flt.year or current.year

        # Filter values are only honoured when their period is selected.
        if flt.period == ReportPeriod.WEEK:
            kwargs = {"week": flt.week or current.week, "year": year}
        elif flt.period == ReportPeriod.MONTH:
            kwargs = {"month": flt.month or current.month, "year": year}
        elif flt.period == ReportPeriod.YEAR:
            kwargs = {"year": year}
        else:
            kwargs = {}
        return list(self._entries.get_report_entries(employee_id=flt.employee_id, **kwargs))

    def summarize(self, flt: SummaryFilter, *, now: Optional[datetime] = None) -> list[SummaryRow]:
        now = now or self._clock()
        employees = self._entries.get_report_employees(employee_id=flt.employee_id)

        grouped: dict[int, list[ReportEntry]] = {e.employee_id: [] for e in employees}
        for entry in self._period_entries(flt, now):
            if entry.employee_id in grouped:
                grouped[entry.employee_id].append(entry)

        summary: list[SummaryRow] = []
        for emp in employees:
            rows = grouped[emp.employee_id]
            # Open entries have no total yet and count as zero.
            total_minutes = sum(int(r.total_minutes or 0) for r in rows)
            dates = [r.entry_date for r in rows]
            summary.append(
                SummaryRow(
                    employee_id=emp.employee_id,
                    employee_name=emp.name,
                    employee_type=emp.employee_type,
                    hourly_rate=emp.hourly_rate,
                    entry_count=len(rows),
                    total_minutes=total_minutes,
                    first_entry_date=min(dates) if dates else None,
                    last_entry_date=max(dates) if dates else None,
                    total_hours=total_minutes // 60,
                    remaining_minutes=total_minutes % 60,
                    estimated_pay=estimated_pay(total_minutes, emp.hourly_rate),
                )
            )

        # Same order as the case-insensitive ORDER BY name of the database.
        summary.sort(key=lambda s: s.employee_name.casefold())
        return summary
