import pytest

from gymmy.coaches import Coach, CoachNotFoundError, CoachRoster, RosterFullError


def _coach(name, specialty="Cardio"):
    return Coach(name, "0800", 30, "P", specialty)


def test_add_keeps_order():
    roster = CoachRoster()
    roster.add(_coach("Andi"))
    roster.add(_coach("Rina"))
    assert [c.name for c in roster] == ["Andi", "Rina"]
    assert len(roster) == 2


def test_find_returns_first_match():
    roster = CoachRoster()
    roster.add(_coach("Andi", "Yoga"))
    roster.add(_coach("Andi", "Boxing"))
    assert roster.find("Andi").specialty == "Yoga"


def test_find_missing_raises():
    with pytest.raises(CoachNotFoundError):
        CoachRoster().find("Andi")


def test_edit_replaces_in_place():
    roster = CoachRoster()
    roster.add(_coach("Andi"))
    roster.add(_coach("Rina"))
    roster.edit("Andi", _coach("Budi", "Yoga"))
    assert [c.name for c in roster] == ["Budi", "Rina"]
    assert roster.find("Budi").specialty == "Yoga"


def test_edit_missing_raises():
    with pytest.raises(CoachNotFoundError):
        CoachRoster().edit("Andi", _coach("Budi"))


def test_remove_shifts_later_coaches():
    roster = CoachRoster()
    for name in ("Andi", "Rina", "Tono"):
        roster.add(_coach(name))
    removed = roster.remove("Rina")
    assert removed.name == "Rina"
    assert [c.name for c in roster] == ["Andi", "Tono"]


def test_remove_missing_raises():
    roster = CoachRoster()
    roster.add(_coach("Andi"))
    with pytest.raises(CoachNotFoundError):
        roster.remove("Rina")
    assert len(roster) == 1


def test_small_capacity_full():
    roster = CoachRoster(capacity=2)
    roster.add(_coach("Andi"))
    roster.add(_coach("Rina"))
    with pytest.raises(RosterFullError):
        roster.add(_coach("Tono"))
    assert len(roster) == 2


def test_default_capacity_holds_a_thousand():
    roster = CoachRoster()
    for number in range(1000):
        roster.add(_coach(f"C{number}"))
    with pytest.raises(RosterFullError):
        roster.add(_coach("extra"))