# gymmy

A small console tool for a gym's front desk. It keeps a register of members,
stored in a text file, and a roster of coaches held in memory. The prompts and
messages are in Indonesian.

## Installation

```
pip install .
```

## Usage

Start the main menu:

```
gymmy
```

Options:

- `--database PATH` – the member database file (default: `database.txt` in
  the current working directory).
- `--coaches` – run only the coach management menu instead of the main menu.

The main menu offers:

```
1. Manajemen Anggota   (member management)
2. Manajemen Pelatih   (coach management)
3. Manajemen Jadwal    (schedule management)
0. Keluar              (quit)
```

Only choice 1 and 0 do anything from the main menu; 2 and 3 are answered with
"Menu tidak valid". Coach management is reached with `gymmy --coaches`.

### Members

The member menu lets you add (1), remove (2), list (3) and edit (4) members,
and 0 goes back. Each member has a name, phone number, age, package, gender
and coach name. A new member gets the id after the highest one handed out so
far; ids of removed members are not reused. An age that is not a number is
asked for again.

The database file is read once at start-up (a missing file is reported and
the register starts empty) and is rewritten after every add, edit and remove.
Each member is one line:

```
ANGGOTA,<id>,<name>,<phone>,<age>,<package>,<gender>,<coach>,<last id>
```

Fields are not quoted, so a comma inside a name or other text field will
shift the fields that follow it when the file is read back.

### Coaches

The coach menu lets you list (1), add (2), edit (3) and remove (4) coaches,
and 0 goes back. Coaches are looked up by exact name; the first match is used.
The roster holds at most 1000 coaches.

## What it does not do

- Coaches are not saved anywhere; the roster is lost when the program exits.
- There is no schedule management.
- Members and coaches are not linked: a member's coach is free text.

## Using it as a library

```python
from gymmy.members import MemberRegistry
from gymmy.coaches import Coach, CoachRoster

registry = MemberRegistry("database.txt")
registry.load()
member = registry.add("Budi", "0000", 25, "Gold", "L", "Andi")
registry.edit(member.id, "Budi", "0000", 26, "Platinum", "L", "Andi")
registry.remove(member.id)
print(len(registry), registry.last_id)

roster = CoachRoster(1000)
roster.add(Coach(name="Andi", phone="0000", age=30, gender="L", specialty="Strength"))
print(roster.find("Andi"))
```

- `gymmy.database` holds the `Member` dataclass and the file format:
  `format_record`, `parse_record`, `save_members` and `load_members`. Read and
  write failures, and unparseable numbers, raise `DatabaseError`.
- `MemberRegistry.get`, `edit` and `remove` raise `MemberNotFoundError` when
  no member has the given id.
- `CoachRoster.add` raises `RosterFullError` once the roster is full (see
  `is_full`). `find`, `edit` and `remove` raise `CoachNotFoundError` when no
  coach has the given name.
- `gymmy.cli` provides `member_menu(registry, stdin, stdout)` and
  `coach_menu(roster, stdin, stdout)`, which can be driven with any text
  streams, plus `format_member` and `format_coach`.

## Running the tests

```
pip install .[test]
pytest
```