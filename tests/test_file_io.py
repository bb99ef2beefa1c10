import pytest

from penjadwal.dokter import DAYS_IN_MONTH, DOCTORS_MAX, NAME_MAX, Doctor
from penjadwal.file_io import (
    SCHEDULE_HEADER,
    DoctorFileError,
    parse_doctor_line,
    read_doctors,
    save_schedule,
)
from penjadwal.jadwal import ScheduleEntry, build_schedule

HEADER = "id,nama,maks_shift,pagi,siang,malam\n"


def _write(tmp_path, text, name="dokter.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_parse_basic_line():
    doctor = parse_doctor_line("7,Dr Budi,4,1,0,1")
    assert (doctor.id, doctor.name, doctor.max_shifts_per_week, doctor.preferences) == (
        7,
        "Dr Budi",
        4,
        (1, 0, 1),
    )
    assert doctor.total_shifts == 0


def test_parse_ignores_trailing_fields():
    doctor = parse_doctor_line("1,Ani,3,0,0,1,extra")
    assert doctor.preferences == (0, 0, 1)
    assert doctor.name == "Ani"


def test_parse_allows_space_before_numbers():
    doctor = parse_doctor_line(" 2,Ani, 3, 1, 1, 0")
    assert doctor.id == 2
    assert doctor.max_shifts_per_week == 3
    assert doctor.preferences == (1, 1, 0)


def test_parse_strips_line_ending():
    doctor = parse_doctor_line("3,Citra,2,0,1,0\r\n")
    assert doctor.preferences == (0, 1, 0)


@pytest.mark.parametrize(
    "line",
    ["", "x,Ani,3,0,0,1", "1,,3,0,0,1", "1,Ani,3,0,0", "1,Ani,three,0,0,1"],
)
def test_parse_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_doctor_line(line)


def test_parse_truncates_long_name():
    doctor = parse_doctor_line("1," + "a" * 80 + ",3,0,0,1")
    assert doctor.name == "a" * (NAME_MAX - 1)


def test_read_skips_header_and_bad_rows(tmp_path):
    path = _write(tmp_path, HEADER + "1,Andi,5,0,1,1\nbad\n2,Budi,4,1,1,0\n")
    messages = []
    doctors = read_doctors(path, log=messages.append)
    assert [d.name for d in doctors] == ["Andi", "Budi"]
    assert "Gagal parsing baris: bad" in messages
    assert sum(m.startswith("Dokter dibaca: ") for m in messages) == len(doctors)


def test_read_handles_crlf(tmp_path):
    path = tmp_path / "crlf.csv"
    path.write_bytes(b"id,nama\r\n1,Andi,5,0,1,1\r\n")
    doctors = read_doctors(path)
    assert [d.name for d in doctors] == ["Andi"]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(DoctorFileError, match="Tidak dapat membuka file"):
        read_doctors(tmp_path / "absent.csv")


def test_read_empty_file_raises(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(DoctorFileError, match="Gagal membaca header file"):
        read_doctors(path)


def test_read_header_only_reports_nothing_read(tmp_path):
    path = _write(tmp_path, HEADER)
    messages = []
    assert read_doctors(path, log=messages.append) == []
    assert messages == [f"Tidak ada dokter yang berhasil dibaca dari file {path}"]


def test_read_stops_at_maximum(tmp_path):
    rows = "".join(f"{i},Dokter {i},5,0,1,1\n" for i in range(1, DOCTORS_MAX + 20))
    path = _write(tmp_path, HEADER + rows)
    doctors = read_doctors(path)
    assert len(doctors) == DOCTORS_MAX
    assert doctors[-1].id == DOCTORS_MAX


def test_save_empty_entries(tmp_path):
    path = tmp_path / "jadwal.csv"
    save_schedule([ScheduleEntry()], path)
    assert path.read_text(encoding="utf-8").splitlines() == [SCHEDULE_HEADER, "1,0,0,0"]


def test_save_writes_names_unquoted(tmp_path):
    path = tmp_path / "jadwal.csv"
    entry = ScheduleEntry(morning="A, B", afternoon="C", night="D")
    save_schedule([entry], path)
    assert path.read_text(encoding="utf-8").splitlines()[1] == "1,A, B,C,D"


def test_save_limits_to_one_month(tmp_path):
    path = tmp_path / "jadwal.csv"
    save_schedule([ScheduleEntry() for _ in range(DAYS_IN_MONTH + 5)], path)
    assert len(path.read_text(encoding="utf-8").splitlines()) == DAYS_IN_MONTH + 1


def test_save_round_trips_built_schedule(tmp_path):
    doctors = [
        Doctor(id=1, name="Andi", max_shifts_per_week=5, preferences=(0, 1, 1)),
        Doctor(id=2, name="Budi", max_shifts_per_week=4, preferences=(1, 0, 1)),
    ]
    schedule = build_schedule(doctors)
    path = tmp_path / "jadwal.csv"
    save_schedule(schedule, path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == SCHEDULE_HEADER
    for day, (line, entry) in enumerate(zip(lines[1:], schedule), start=1):
        assert line == f"{day},{entry.morning},{entry.afternoon},{entry.night}"


def test_save_to_missing_directory_raises(tmp_path):
    with pytest.raises(DoctorFileError):
        save_schedule([ScheduleEntry()], tmp_path / "no" / "such" / "jadwal.csv")