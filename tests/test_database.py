import pytest

from gymmy.database import (
    DatabaseError,
    Member,
    format_record,
    load_members,
    parse_record,
    save_members,
)


def _member(member_id=1, name="Budi"):
    return Member(member_id, name, "0800", 25, "Gold", "L", "Andi")


def test_format_record_layout():
    assert format_record(_member(), 3) == "ANGGOTA,1,Budi,0800,25,Gold,L,Andi,3"


def test_parse_record_round_trip():
    member = _member(7, "Sari")
    assert parse_record(format_record(member, 9)) == (member, 9)


def test_parse_record_strips_line_ending():
    member = _member()
    assert parse_record(format_record(member, 1) + "\r\n") == (member, 1)


def test_parse_record_ignores_other_types():
    assert parse_record("PELATIH,1,Andi") is None


def test_parse_record_missing_fields_raises():
    with pytest.raises(DatabaseError):
        parse_record("ANGGOTA,1,Budi")


def test_parse_record_bad_age_raises():
    with pytest.raises(DatabaseError):
        parse_record("ANGGOTA,1,Budi,0800,tua,Gold,L,Andi,1")


def test_parse_record_accepts_leading_spaces_in_numbers():
    member, last_id = parse_record("ANGGOTA, 4,Budi,0800, 30,Gold,L,Andi, 4")
    assert (member.id, member.age, last_id) == (4, 30, 4)


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "db.txt"
    members = [_member(1, "Budi"), _member(2, "Sari")]
    save_members(path, members, 2)
    assert load_members(path) == (members, 2)


def test_load_takes_last_id_from_file(tmp_path):
    path = tmp_path / "db.txt"
    save_members(path, [_member(1)], 5)
    assert load_members(path)[1] == 5


def test_load_skips_unknown_lines(tmp_path):
    path = tmp_path / "db.txt"
    path.write_text("JADWAL,1,2\n" + format_record(_member(), 1) + "\n", encoding="utf-8")
    assert load_members(path) == ([_member()], 1)


def test_load_empty_file(tmp_path):
    path = tmp_path / "db.txt"
    path.write_text("", encoding="utf-8")
    assert load_members(path) == ([], 0)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(DatabaseError, match="Gagal membuka file"):
        load_members(tmp_path / "missing.txt")


def test_save_to_directory_raises(tmp_path):
    with pytest.raises(DatabaseError):
        save_members(tmp_path, [_member()], 1)