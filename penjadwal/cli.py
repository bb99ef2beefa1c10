"""Interactive menu for managing doctors and building the monthly schedule."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, TextIO

from penjadwal.dokter import (
    DOCTORS_MAX,
    DAYS_IN_MONTH,
    DoctorNotFoundError,
    Roster,
    RosterFullError,
    format_doctors,
)
from penjadwal.file_io import DoctorFileError, read_doctors, save_schedule
from penjadwal.jadwal import (
    WEEKS_IN_MONTH,
    ScheduleEntry,
    build_schedule,
    format_daily,
    format_monthly,
    format_shift_counts,
    format_violations,
    format_weekly,
)

DEFAULT_DOCTORS_FILE = "daftar_dokter.csv"
DEFAULT_SCHEDULE_FILE = "jadwal.csv"
EXIT_CHOICE = 12

MENU = "\n".join(
    [
        "",
        "Sistem Penjadwalan Rumah Sakit",
        "1. Baca dokter dari file",
        "2. Tambah dokter",
        "3. Hapus dokter",
        "4. Tampilkan dokter",
        "5. Buat jadwal",
        "6. Tampilkan jadwal harian",
        "7. Tampilkan jadwal mingguan",
        "8. Tampilkan jadwal bulanan",
        "9. Tampilkan jumlah shift dokter",
        "10. Tampilkan pelanggaran preferensi",
        "11. Simpan jadwal ke file",
        "12. Keluar",
    ]
)

_INT_PATTERN = re.compile(r"[+-]?\d+")


class App:
    """The menu loop, holding the roster and the current schedule."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        doctors_file: str = DEFAULT_DOCTORS_FILE,
        schedule_file: str = DEFAULT_SCHEDULE_FILE,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._buffer = ""
        self.doctors_file = doctors_file
        self.schedule_file = schedule_file
        self.roster = Roster()
        self.schedule: list[ScheduleEntry] = []
        self._actions: dict[int, Callable[[], None]] = {
            1: self._load_doctors,
            2: self._add_doctor,
            3: self._remove_doctor,
            4: self._show_doctors,
            5: self._build_schedule,
            6: self._show_daily,
            7: self._show_weekly,
            8: self._show_monthly,
            9: self._show_shift_counts,
            10: self._show_violations,
            11: self._save_schedule,
        }

    # --- input and output -------------------------------------------------

    def _print(self, text: str = "") -> None:
        self._out.write(f"{text}\n")

    def _prompt(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _fill(self) -> None:
        line = self._in.readline()
        if not line:
            raise EOFError
        self._buffer += line

    def _skip_whitespace(self) -> None:
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                self._buffer = stripped
                return
            self._buffer = ""
            self._fill()

    def _read_int(self) -> int:
        self._skip_whitespace()
        match = _INT_PATTERN.match(self._buffer)
        if match is None:
            _, _, self._buffer = self._buffer.partition("\n")
            raise ValueError("expected an integer")
        self._buffer = self._buffer[match.end():]
        return int(match.group())

    def _read_line(self) -> str:
        self._skip_whitespace()
        text, _, self._buffer = self._buffer.partition("\n")
        return text.rstrip("\r")

    # --- menu actions -----------------------------------------------------

    def _load_doctors(self) -> None:
        try:
            doctors = read_doctors(self.doctors_file, log=self._print)
        except DoctorFileError as exc:
            self._print(str(exc))
            doctors = []
        self.roster.replace(doctors)
        self._print(f"Berhasil membaca {len(self.roster)} dokter dari file.")

    def _add_doctor(self) -> None:
        if len(self.roster) >= DOCTORS_MAX:
            self._print("Tidak dapat menambah dokter, batas tercapai.")
            return
        self._prompt("Masukkan nama dokter: ")
        name = self._read_line()
        try:
            self._prompt("Masukkan maksimum shift per minggu: ")
            max_shifts = self._read_int()
            self._prompt(
                "Masukkan preferensi (0=diinginkan, 1=tidak diinginkan) untuk pagi, siang, malam: "
            )
            preferences = [self._read_int() for _ in range(3)]
        except ValueError:
            self._print("Input tidak valid.")
            return
        try:
            self.roster.add(name, max_shifts, preferences)
        except RosterFullError as exc:
            self._print(str(exc))
            return
        self._print("Dokter berhasil ditambahkan.")

    def _remove_doctor(self) -> None:
        self._prompt("Masukkan nama dokter yang akan dihapus: ")
        name = self._read_line()
        try:
            self.roster.remove(name)
        except DoctorNotFoundError as exc:
            self._print(str(exc))
            return
        self._print("Dokter berhasil dihapus.")

    def _show_doctors(self) -> None:
        self._print(format_doctors(self.roster))

    def _build_schedule(self) -> None:
        self.schedule = build_schedule(list(self.roster))
        self._print(f"Jadwal dibuat untuk {len(self.schedule)} hari.")

    def _show_daily(self) -> None:
        self._prompt(f"Masukkan hari (1-{DAYS_IN_MONTH}): ")
        try:
            day = self._read_int()
            if not 1 <= day <= DAYS_IN_MONTH:
                raise ValueError("Hari tidak valid.")
            self._print(format_daily(self.schedule, day - 1))
        except ValueError:
            self._print("Hari tidak valid.")

    def _show_weekly(self) -> None:
        self._prompt(f"Masukkan minggu (1-{WEEKS_IN_MONTH}): ")
        try:
            week = self._read_int()
            if not 1 <= week <= WEEKS_IN_MONTH:
                raise ValueError("Minggu tidak valid.")
        except ValueError:
            self._print("Minggu tidak valid.")
            return
        self._print(format_weekly(self.schedule, week - 1))

    def _show_monthly(self) -> None:
        self._print(format_monthly(self.schedule))

    def _show_shift_counts(self) -> None:
        self._print(format_shift_counts(list(self.roster)))

    def _show_violations(self) -> None:
        self._print(format_violations(list(self.roster)))

    def _save_schedule(self) -> None:
        try:
            save_schedule(self.schedule, self.schedule_file)
        except DoctorFileError as exc:
            self._print(str(exc))
            return
        self._print(f"Jadwal disimpan ke {self.schedule_file}")

    # --- main loop ----------------------------------------------------------

    def run(self) -> None:
        """Show the menu and carry out choices until exit or end of input."""
        while True:
            self._print(MENU)
            self._prompt("Masukkan pilihan: ")
            try:
                try:
                    choice = self._read_int()
                except ValueError:
                    self._print("Pilihan tidak valid.")
                    continue
                if choice == EXIT_CHOICE:
                    return
                action = self._actions.get(choice)
                if action is None:
                    self._print("Pilihan tidak valid.")
                else:
                    action()
            except EOFError:
                self._print()
                return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="penjadwal", description="Sistem Penjadwalan Rumah Sakit"
    )
    parser.add_argument("--doctors", default=DEFAULT_DOCTORS_FILE, help="doctor CSV file")
    parser.add_argument("--schedule", default=DEFAULT_SCHEDULE_FILE, help="schedule CSV output")
    args = parser.parse_args(argv)
    App(doctors_file=args.doctors, schedule_file=args.schedule).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())