"""In-memory member registry kept in sync with the database file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Union

from gymmy.database import Member, load_members, save_members


class MemberNotFoundError(LookupError):
    """Raised when no member has the requested id."""

    def __init__(self, member_id: int) -> None:
        super().__init__(f"Anggota dengan ID {member_id} tidak ditemukan.")
        self.member_id = member_id


class MemberRegistry:
    """Ordered collection of members, saved after every change."""

    def __init__(self, path: Union[str, Path] = "database.txt") -> None:
        self.path = Path(path)
        self._members: List[Member] = []
        self._last_id = 0

    def load(self) -> None:
        """Append the members stored in the database file."""
        members, last_id = load_members(self.path)
        self._members.extend(members)
        if members:
            self._last_id = last_id

    def save(self) -> None:
        """Write every member to the database file."""
        save_members(self.path, self._members, self._last_id)

    def add(self, name, phone, age, package, gender, coach) -> Member:
        """Register a new member under the next id and save."""
        member = Member(self._last_id + 1, name, phone, age, package, gender, coach)
        self._members.append(member)
        self._last_id += 1
        self.save()
        return member

    def edit(self, member_id, name, phone, age, package, gender, coach) -> Member:
        """Replace a member's details and save."""
        member = self.get(member_id)
        member.name = name
        member.phone = phone
        member.age = age
        member.package = package
        member.gender = gender
        member.coach = coach
        self.save()
        return member

    def remove(self, member_id: int) -> Member:
        """Delete a member and save; ids are never reused."""
        member = self.get(member_id)
        self._members.remove(member)
        self.save()
        return member

    def get(self, member_id: int) -> Member:
        """Return the member with the given id."""
        for member in self._members:
            if member.id == member_id:
                return member
        raise MemberNotFoundError(member_id)

    def __iter__(self) -> Iterator[Member]:
        return iter(list(self._members))

    def __len__(self) -> int:
        return len(self._members)

    @property
    def last_id(self) -> int:
        """The highest id handed out so far."""
        return self._last_id