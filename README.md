# penjadwal

A small hospital shift scheduler. It keeps a roster of doctors, builds a
30-day schedule with three shifts per day (morning, afternoon, night), and
reports how often each doctor's shift preferences and weekly shift limits
were broken. Messages and reports are in Indonesian.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Interactive use

Start the menu-driven program:

```
penjadwal
```

Options:

- `--doctors PATH` – doctor CSV file to load (default `daftar_dokter.csv`)
- `--schedule PATH` – where to save the schedule (default `jadwal.csv`)

The menu lets you:

1. Load doctors from the doctor file (this replaces the current roster)
2. Add a doctor (name, maximum shifts per week, three preference flags)
3. Remove a doctor by exact name
4. List doctors
5. Build the schedule
6. Show the schedule for one day (1–30)
7. Show the schedule for one week (1–5)
8. Show the whole month
9. Show the shift count per doctor
10. Show preference and weekly-limit violations
11. Save the schedule to the schedule file
12. Quit

The program also stops at the end of input.

### Doctor file

The doctor file has a header line followed by one doctor per line:

```
id,nama,maks_shift,pagi,siang,malam
1,Dr. Andi,5,1,1,0
2,Dr. Budi,4,0,1,1
```

The last three columns are preference flags for the morning, afternoon and
night shifts. A doctor given a shift whose flag is `0` counts as a
preference violation; only shifts whose flag is `1` receive extra doctors.
Lines that do not parse are reported and skipped, anything after the sixth
field is ignored, names are cut to 49 characters, and at most 100 doctors
are read.

### Schedule file

The saved schedule has the header `hari,pagi,siang,malam` and one line per
day. A shift with nobody on it is written as `0`; a shift with several
doctors lists them separated by `, `.

## Library use

```python
from penjadwal.dokter import Roster, format_doctors
from penjadwal.jadwal import build_schedule, format_daily, format_violations
from penjadwal.file_io import read_doctors, save_schedule

roster = Roster()
roster.add("Dr. Andi", 5, (1, 1, 0))
roster.add("Dr. Budi", 4, (0, 1, 1))

schedule = build_schedule(list(roster))
print(format_daily(schedule, 0))
print(format_violations(list(roster)))
save_schedule(schedule, "jadwal.csv")

roster.replace(read_doctors("daftar_dokter.csv", log=print))
```

Modules:

- `penjadwal.dokter` – `Shift`, `Doctor`, `Roster` (at most 100 doctors;
  `add` raises `RosterFullError`, `remove` raises `DoctorNotFoundError`)
  and `format_doctors`.
- `penjadwal.jadwal` – `build_schedule`, `find_best_doctor`,
  `shifts_in_week`, `compute_violations` (returning `Violations`),
  `ScheduleEntry`, and the report functions `format_daily`,
  `format_weekly`, `format_monthly`, `format_shift_counts` and
  `format_violations`. Days and weeks are 0-based here; an out-of-range
  day or week raises `ValueError`.
- `penjadwal.file_io` – `parse_doctor_line`, `read_doctors` and
  `save_schedule`; a file that cannot be opened, or a doctor file without a
  header line, raises `DoctorFileError`.
- `penjadwal.cli` – `App` and `main`.

The scheduler first picks one main doctor per shift, preferring doctors who
are under their weekly limit, whose flag for the shift is `1`, and who have
the fewest violations so far. It then adds extra doctors to shifts whose
flag is `1`, as long as they remain under their weekly limit.

## What it does not do

The roster lives only in memory: doctors added or removed in the menu are
not written back to the doctor file, and only the schedule can be saved.
The month is always 30 days in five weeks of seven days (the fifth has two);
there is no calendar awareness.