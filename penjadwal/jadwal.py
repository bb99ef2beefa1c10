"""Monthly shift scheduling and its reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from penjadwal.dokter import DAYS_IN_MONTH, Doctor, Shift

DAYS_PER_WEEK = 7
WEEKS_IN_MONTH = 5
EMPTY_SLOT = "0"


@dataclass
class ScheduleEntry:
    """The doctors on duty for one day, one text field per shift."""

    morning: str = EMPTY_SLOT
    afternoon: str = EMPTY_SLOT
    night: str = EMPTY_SLOT

    _FIELDS = ("morning", "afternoon", "night")

    def get(self, shift: int) -> str:
        return getattr(self, self._FIELDS[Shift(shift)])

    def set(self, shift: int, value: str) -> None:
        setattr(self, self._FIELDS[Shift(shift)], value)

    def append_name(self, shift: int, name: str) -> None:
        """Add a name to a shift, separating names with a comma."""
        current = self.get(shift)
        self.set(shift, name if current == EMPTY_SLOT else f"{current}, {name}")


@dataclass
class Violations:
    """Preference and weekly-limit violations of one doctor."""

    preference: int = 0
    max_shift: int = 0

    @property
    def total(self) -> int:
        return self.preference + self.max_shift


def _week_days(week: int, limit: int = DAYS_IN_MONTH) -> range:
    start = week * DAYS_PER_WEEK
    return range(start, min(start + DAYS_PER_WEEK, limit))


def _shifts_on(doctor: Doctor, days: range) -> int:
    return sum(doctor.is_assigned(day, shift) for day in days for shift in Shift)


def shifts_in_week(doctor: Doctor, day: int) -> int:
    """Count the doctor's shifts in the week that contains the given day."""
    return _shifts_on(doctor, _week_days(day // DAYS_PER_WEEK))


def compute_violations(doctors: Sequence[Doctor]) -> list[Violations]:
    """Compute violations for every doctor, in roster order."""
    result = []
    for doctor in doctors:
        preference = sum(
            1
            for day in range(DAYS_IN_MONTH)
            for shift in Shift
            if doctor.is_assigned(day, shift) and doctor.prefers_against(shift)
        )
        max_shift = sum(
            max(0, _shifts_on(doctor, _week_days(week)) - doctor.max_shifts_per_week)
            for week in range(WEEKS_IN_MONTH)
        )
        result.append(Violations(preference=preference, max_shift=max_shift))
    return result


def find_best_doctor(doctors: Sequence[Doctor], day: int, shift: int) -> int | None:
    """Return the index of the lowest-scoring doctor for a slot, or None."""
    if not doctors:
        return None
    violations = compute_violations(doctors)

    def score(index: int) -> int:
        doctor = doctors[index]
        return (
            (shifts_in_week(doctor, day) >= doctor.max_shifts_per_week)
            + doctor.prefers_against(shift)
            + violations[index].total
        )

    return min(range(len(doctors)), key=score)


def build_schedule(doctors: Sequence[Doctor]) -> list[ScheduleEntry]:
    """Assign shifts for the month and return one entry per day."""
    for doctor in doctors:
        doctor.reset_assignments()
    schedule = [ScheduleEntry() for _ in range(DAYS_IN_MONTH)]

    for day, entry in enumerate(schedule):
        for shift in Shift:
            chosen = find_best_doctor(doctors, day, shift)
            if chosen is not None:
                doctors[chosen].assign(day, shift)
                entry.set(shift, doctors[chosen].name)

    for day, entry in enumerate(schedule):
        for shift in Shift:
            for doctor in doctors:
                if (
                    shifts_in_week(doctor, day) < doctor.max_shifts_per_week
                    and doctor.preferences[shift] == 1
                    and not doctor.is_assigned(day, shift)
                ):
                    doctor.assign(day, shift)
                    entry.append_name(shift, doctor.name)
    return schedule


def _daily_lines(schedule: Sequence[ScheduleEntry], day: int) -> list[str]:
    if not 0 <= day < len(schedule):
        raise ValueError("Hari tidak valid.")
    entry = schedule[day]
    return [
        "",
        f"Jadwal Hari {day + 1}:",
        *(f"{shift.label}: {entry.get(shift)}" for shift in Shift),
    ]


def format_daily(schedule: Sequence[ScheduleEntry], day: int) -> str:
    """Render the schedule of one day (0-based)."""
    return "\n".join(_daily_lines(schedule, day))


def format_weekly(schedule: Sequence[ScheduleEntry], week: int) -> str:
    """Render the schedule of one week (0-based)."""
    if not 0 <= week < WEEKS_IN_MONTH:
        raise ValueError("Minggu tidak valid.")
    lines = ["", f"Jadwal Minggu {week + 1}:"]
    for day in _week_days(week, min(len(schedule), DAYS_IN_MONTH)):
        lines.extend(_daily_lines(schedule, day))
    return "\n".join(lines)


def format_monthly(schedule: Sequence[ScheduleEntry]) -> str:
    """Render the whole month."""
    lines = ["", "Jadwal Bulanan:"]
    for day in range(min(len(schedule), DAYS_IN_MONTH)):
        lines.extend(_daily_lines(schedule, day))
    return "\n".join(lines)


def format_shift_counts(doctors: Sequence[Doctor]) -> str:
    """Render how many shifts each doctor holds."""
    lines = ["", "Jumlah Shift Dokter:"]
    lines.extend(f"{d.name} (ID: {d.id}): {d.total_shifts} shift" for d in doctors)
    return "\n".join(lines)


def format_violations(doctors: Sequence[Doctor]) -> str:
    """Render preference and weekly-limit violations of every doctor."""
    lines = ["", "Jumlah Shift Dokter:"]
    for doctor, v in zip(doctors, compute_violations(doctors)):
        lines.extend(
            [
                "",
                f"{doctor.name} (ID: {doctor.id})",
                f"Pelanggaran Preferensi: {v.preference}",
                f"Pelanggaran Shift: {v.max_shift}",
            ]
        )
    return "\n".join(lines)