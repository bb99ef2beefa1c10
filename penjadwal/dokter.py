"""Doctors and the roster that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator, Sequence

NAME_MAX = 50
DOCTORS_MAX = 100
DAYS_IN_MONTH = 30


class Shift(IntEnum):
    """The three shifts of a day."""

    MORNING = 0
    AFTERNOON = 1
    NIGHT = 2

    @property
    def label(self) -> str:
        return ("Pagi", "Siang", "Malam")[self]


class RosterFullError(Exception):
    """Raised when the roster already holds the maximum number of doctors."""


class DoctorNotFoundError(LookupError):
    """Raised when no doctor with the given name is on the roster."""


def _empty_assignments() -> list[list[bool]]:
    return [[False] * len(Shift) for _ in range(DAYS_IN_MONTH)]


@dataclass
class Doctor:
    """A doctor with shift limits, preferences and monthly assignments.

    A preference flag of 0 marks a shift whose assignment the scheduler
    counts as a preference violation; 1 marks a shift the doctor may take
    freely.
    """

    id: int
    name: str
    max_shifts_per_week: int
    preferences: tuple[int, int, int]
    assignments: list[list[bool]] = field(default_factory=_empty_assignments, repr=False)

    def __post_init__(self) -> None:
        prefs = tuple(int(p) for p in self.preferences)
        if len(prefs) != len(Shift):
            raise ValueError(f"expected {len(Shift)} preferences, got {len(prefs)}")
        self.preferences = prefs  # type: ignore[assignment]

    @property
    def total_shifts(self) -> int:
        """Number of shifts assigned over the month."""
        return sum(sum(day) for day in self.assignments)

    def reset_assignments(self) -> None:
        """Clear every assigned shift."""
        self.assignments = _empty_assignments()

    def is_assigned(self, day: int, shift: int) -> bool:
        return self.assignments[day][shift]

    def assign(self, day: int, shift: int) -> None:
        self.assignments[day][shift] = True

    def prefers_against(self, shift: int) -> bool:
        """True if taking this shift counts as a preference violation."""
        return self.preferences[shift] == 0

    def describe(self) -> str:
        morning, afternoon, night = self.preferences
        return (
            f"ID: {self.id}, Nama: {self.name}, Maks Shift/Minggu: {self.max_shifts_per_week}, "
            f"Preferensi (Pagi, Siang, Malam): {morning}, {afternoon}, {night}"
        )


class Roster:
    """An ordered list of at most DOCTORS_MAX doctors."""

    def __init__(self, doctors: Iterable[Doctor] = ()) -> None:
        self._doctors: list[Doctor] = []
        self.replace(doctors)

    def add(self, name: str, max_shifts_per_week: int, preferences: Sequence[int]) -> Doctor:
        """Create a doctor whose id is one past the current count, and add it."""
        if len(self._doctors) >= DOCTORS_MAX:
            raise RosterFullError("Tidak dapat menambah dokter, batas tercapai.")
        doctor = Doctor(
            id=len(self._doctors) + 1,
            name=name[: NAME_MAX - 1],
            max_shifts_per_week=max_shifts_per_week,
            preferences=tuple(preferences),
        )
        self._doctors.append(doctor)
        return doctor

    def append(self, doctor: Doctor) -> None:
        if len(self._doctors) >= DOCTORS_MAX:
            raise RosterFullError("Tidak dapat menambah dokter, batas tercapai.")
        self._doctors.append(doctor)

    def remove(self, name: str) -> Doctor:
        """Remove and return the first doctor with this exact name."""
        for index, doctor in enumerate(self._doctors):
            if doctor.name == name:
                return self._doctors.pop(index)
        raise DoctorNotFoundError("Dokter tidak ditemukan.")

    def replace(self, doctors: Iterable[Doctor]) -> None:
        """Replace the whole roster with the given doctors."""
        new = list(doctors)
        if len(new) > DOCTORS_MAX:
            raise RosterFullError("Tidak dapat menambah dokter, batas tercapai.")
        self._doctors = new

    def __len__(self) -> int:
        return len(self._doctors)

    def __iter__(self) -> Iterator[Doctor]:
        return iter(self._doctors)

    def __getitem__(self, index: int) -> Doctor:
        return self._doctors[index]


def format_doctors(doctors: Iterable[Doctor]) -> str:
    """Render the doctor listing."""
    lines = ["", "Daftar Dokter:"]
    lines.extend(doctor.describe() for doctor in doctors)
    return "\n".join(lines)