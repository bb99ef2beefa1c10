"""Reading the doctor list and writing the schedule as CSV files."""

from __future__ import annotations

import re
from itertools import islice
from os import PathLike
from typing import Callable, Sequence

from penjadwal.dokter import DAYS_IN_MONTH, DOCTORS_MAX, NAME_MAX, Doctor
from penjadwal.jadwal import ScheduleEntry

SCHEDULE_HEADER = "hari,pagi,siang,malam"

_INT = r"\s*([+-]?\d+)"
_DOCTOR_LINE = re.compile(rf"{_INT},([^,]+),{_INT},{_INT},{_INT},{_INT}")
_EOL = re.compile(r"[\r\n]")


class DoctorFileError(OSError):
    """Raised when a doctor or schedule file cannot be read or written."""


def _strip_eol(line: str) -> str:
    return _EOL.split(line, maxsplit=1)[0]


def parse_doctor_line(line: str) -> Doctor:
    """Parse one data row of the form id,name,max_shifts,morning,afternoon,night.

    Anything after the sixth field is ignored. Raises ValueError when the
    row does not match.
    """
    match = _DOCTOR_LINE.match(_strip_eol(line))
    if match is None:
        raise ValueError(f"Gagal parsing baris: {line}")
    doctor_id, name, max_shifts, morning, afternoon, night = match.groups()
    return Doctor(
        id=int(doctor_id),
        name=name[: NAME_MAX - 1],
        max_shifts_per_week=int(max_shifts),
        preferences=(int(morning), int(afternoon), int(night)),
    )


def read_doctors(
    path: str | PathLike[str],
    log: Callable[[str], object] | None = None,
) -> list[Doctor]:
    """Read at most DOCTORS_MAX doctors from a CSV file with a header row.

    Rows that cannot be parsed are reported through ``log`` and skipped.
    """
    emit = log if log is not None else (lambda message: None)
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise DoctorFileError(f"Tidak dapat membuka file {path}") from exc

    doctors: list[Doctor] = []
    with handle:
        if not handle.readline():
            raise DoctorFileError(f"Gagal membaca header file {path}")
        for raw in handle:
            if len(doctors) >= DOCTORS_MAX:
                break
            line = _strip_eol(raw)
            try:
                doctor = parse_doctor_line(line)
            except ValueError:
                emit(f"Gagal parsing baris: {line}")
                continue
            morning, afternoon, night = doctor.preferences
            emit(
                f"Dokter dibaca: ID={doctor.id}, Nama={doctor.name}, "
                f"MaksShift={doctor.max_shifts_per_week}, "
                f"Pagi={morning}, Siang={afternoon}, Malam={night}"
            )
            doctors.append(doctor)

    if not doctors:
        emit(f"Tidak ada dokter yang berhasil dibaca dari file {path}")
    return doctors


def save_schedule(schedule: Sequence[ScheduleEntry], path: str | PathLike[str]) -> None:
    """Write at most one month of the schedule as day,morning,afternoon,night rows."""
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(f"{SCHEDULE_HEADER}\n")
            for day, entry in enumerate(islice(schedule, DAYS_IN_MONTH), start=1):
                handle.write(f"{day},{entry.morning},{entry.afternoon},{entry.night}\n")
    except OSError as exc:
        raise DoctorFileError(f"Tidak dapat membuka file {path}") from exc