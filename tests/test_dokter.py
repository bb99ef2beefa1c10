import pytest

from penjadwal.dokter import (
    DOCTORS_MAX,
    Doctor,
    DoctorNotFoundError,
    Roster,
    RosterFullError,
    Shift,
    format_doctors,
)


def make_roster(*names):
    roster = Roster()
    for name in names:
        roster.add(name, 5, (0, 1, 0))
    return roster


def test_add_assigns_ids_from_count():
    roster = make_roster("Budi", "Sari")
    assert [d.id for d in roster] == [1, len(roster)]
    assert roster[1].name == "Sari"


def test_add_beyond_limit_raises():
    roster = Roster()
    for i in range(DOCTORS_MAX):
        roster.add(f"D{i}", 5, (1, 1, 1))
    assert len(roster) == DOCTORS_MAX
    with pytest.raises(RosterFullError):
        roster.add("Extra", 5, (1, 1, 1))


def test_append_beyond_limit_raises():
    roster = Roster(Doctor(i + 1, f"D{i}", 3, (1, 1, 1)) for i in range(DOCTORS_MAX))
    with pytest.raises(RosterFullError):
        roster.append(Doctor(0, "Extra", 3, (1, 1, 1)))


def test_replace_too_many_raises():
    roster = Roster()
    doctors = [Doctor(i, f"D{i}", 3, (1, 1, 1)) for i in range(DOCTORS_MAX + 1)]
    with pytest.raises(RosterFullError):
        roster.replace(doctors)


def test_remove_keeps_order_of_the_rest():
    roster = make_roster("A", "B", "C")
    removed = roster.remove("B")
    assert removed.name == "B"
    assert [d.name for d in roster] == ["A", "C"]


def test_remove_only_first_match():
    roster = make_roster("A", "A")
    roster.remove("A")
    assert [d.id for d in roster] == [2]


def test_remove_missing_raises():
    roster = make_roster("A")
    with pytest.raises(DoctorNotFoundError):
        roster.remove("Z")
    assert len(roster) == 1


def test_id_after_remove_follows_count():
    roster = make_roster("A", "B")
    roster.remove("A")
    new = roster.add("C", 5, (1, 1, 1))
    assert new.id == roster[0].id


def test_assign_and_reset():
    doctor = Doctor(1, "A", 5, (1, 1, 1))
    doctor.assign(3, Shift.NIGHT)
    assert doctor.is_assigned(3, Shift.NIGHT)
    assert not doctor.is_assigned(3, Shift.MORNING)
    assert doctor.total_shifts == 1
    doctor.reset_assignments()
    assert doctor.total_shifts == 0
    assert not doctor.is_assigned(3, Shift.NIGHT)


def test_prefers_against_reads_zero_flags():
    doctor = Doctor(1, "A", 5, (0, 1, 0))
    assert [doctor.prefers_against(s) for s in Shift] == [True, False, True]


def test_wrong_preference_count_raises():
    with pytest.raises(ValueError):
        Doctor(1, "A", 5, (0, 1))


def test_format_doctors_line():
    roster = make_roster("Budi")
    text = format_doctors(roster)
    assert text.startswith("\nDaftar Dokter:\n")
    assert (
        "ID: 1, Nama: Budi, Maks Shift/Minggu: 5, Preferensi (Pagi, Siang, Malam): 0, 1, 0"
        in text.splitlines()
    )