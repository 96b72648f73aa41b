"""Flat-file storage for gym member records."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

RECORD_TYPE = "ANGGOTA"
_FIELD_COUNT = 9
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

PathLike = Union[str, Path]


@dataclass
class Member:
    """A registered gym member."""

    id: int
    name: str
    phone: str
    age: int
    package: str
    gender: str
    coach: str


class DatabaseError(Exception):
    """Raised when the member database cannot be read or written."""


def _to_int(text: str, field: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise DatabaseError(f"Nilai {field} tidak valid: {text!r}")
    return int(match.group(1))


def format_record(member: Member, last_id: int) -> str:
    """Render one member as a database line, without the line ending."""
    fields = (
        RECORD_TYPE,
        member.id,
        member.name,
        member.phone,
        member.age,
        member.package,
        member.gender,
        member.coach,
        last_id,
    )
    return ",".join(str(field) for field in fields)


def parse_record(line: str) -> Optional[Tuple[Member, int]]:
    """Parse a database line into a member and the stored last id.

    Lines of any other record type give None.
    """
    parts = line.rstrip("\r\n").split(",")
    if parts[0] != RECORD_TYPE:
        return None
    parts += [""] * (_FIELD_COUNT - len(parts))
    _, id_text, name, phone, age_text, package, gender, coach, last_text = parts[:_FIELD_COUNT]
    member = Member(
        id=_to_int(id_text, "id"),
        name=name,
        phone=phone,
        age=_to_int(age_text, "umur"),
        package=package,
        gender=gender,
        coach=coach,
    )
    return member, _to_int(last_text, "id terakhir")


def save_members(path: PathLike, members: Iterable[Member], last_id: int) -> None:
    """Write all members to the database file, replacing its contents."""
    try:
        with open(path, "w", encoding="utf-8") as handle:
            for member in members:
                handle.write(format_record(member, last_id) + "\n")
    except OSError as exc:
        raise DatabaseError(f"Gagal membuka file {path}") from exc


def load_members(path: PathLike) -> Tuple[List[Member], int]:
    """Read members from the database file.

    Returns the members in file order and the last id stored on the final
    member line (0 when there are none).
    """
    members: List[Member] = []
    last_id = 0
    try:
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                record = parse_record(line)
                if record is None:
                    continue
                member, last_id = record
                members.append(member)
    except OSError as exc:
        raise DatabaseError(f"Gagal membuka file {path}") from exc
    return members, last_id