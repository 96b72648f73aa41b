"""Interactive text menus for managing members and coaches."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, TextIO

from gymmy.coaches import Coach, CoachNotFoundError, CoachRoster
from gymmy.database import DatabaseError, Member
from gymmy.members import MemberNotFoundError, MemberRegistry

_MAIN_MENU = (
    "--------------------\n"
    "GYMMY\n"
    "--------------------\n"
    "Main Menu\n"
    "1. Manajemen Anggota\n"
    "2. Manajemen Pelatih\n"
    "3. Manajemen Jadwal\n"
    "0. Keluar\n"
)

_MEMBER_MENU = (
    "\nMenu Manajemen Anggota:\n"
    "1. Tambah Anggota\n"
    "2. Hapus Anggota\n"
    "3. Lihat Anggota\n"
    "4. Edit Anggota\n"
    "0. Kembali\n"
)

_COACH_MENU = (
    "=== Menu Manajemen Pelatih===\n"
    "1. Lihat Pelatih\n"
    "2. Tambah Pelatih\n"
    "3. Edit Pelatih\n"
    "4. Hapus Pelatih\n"
    "0. Kembali\n"
)


class _Console:
    def __init__(self, stdin: Optional[TextIO], stdout: Optional[TextIO]) -> None:
        self._in = sys.stdin if stdin is None else stdin
        self._out = sys.stdout if stdout is None else stdout

    def write(self, text: str) -> None:
        self._out.write(text)

    def say(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def ask_int(self, prompt: str) -> Optional[int]:
        try:
            return int(self.ask(prompt).strip())
        except ValueError:
            return None

    def ask_age(self, prompt: str) -> int:
        while True:
            value = self.ask_int(prompt)
            if value is not None:
                return value
            self.say("Masukkan angka yang valid.")


def format_member(member: Member) -> str:
    """Describe a member over several lines."""
    return (
        f"ID: {member.id}\n"
        f"Nama: {member.name}\n"
        f"No. Telp: {member.phone}\n"
        f"Umur: {member.age}\n"
        f"Paket: {member.package}\n"
        f"Jenis Kelamin: {member.gender}\n"
        f"Pelatih: {member.coach}"
    )


def format_coach(position: int, coach: Coach) -> str:
    """Describe a coach under its 1-based list position."""
    return (
        f"[{position}]\n"
        f"Nama : {coach.name}\n"
        f"Spesialis : {coach.specialty}\n"
        f"Umur : {coach.age}\n"
        f"Jenis : {coach.gender}"
    )


def _add_member(registry: MemberRegistry, console: _Console) -> None:
    name = console.ask("Masukkan nama anggota: ")
    phone = console.ask("Masukkan nomor telepon anggota: ")
    age = console.ask_age("Masukkan umur anggota: ")
    package = console.ask("Masukkan paket anggota: ")
    gender = console.ask("Masukkan jenis kelamin anggota: ")
    coach = console.ask("Masukkan nama pelatih anggota: ")
    member = registry.add(name, phone, age, package, gender, coach)
    console.say(f"Anggota berhasil ditambahkan dengan ID: {member.id}")


def _remove_member(registry: MemberRegistry, console: _Console) -> None:
    member_id = console.ask_int("Masukkan ID anggota yang ingin dihapus: ")
    if member_id is None:
        console.say("ID tidak valid.")
        return
    try:
        registry.remove(member_id)
    except MemberNotFoundError as exc:
        console.say(str(exc))
        return
    console.say(f"Anggota dengan ID {member_id} telah dihapus.")


def _view_members(registry: MemberRegistry, console: _Console) -> None:
    if not len(registry):
        console.say("Tidak ada anggota yang terdaftar.")
        return
    for member in registry:
        console.say(format_member(member))
        console.say()


def _edit_member(registry: MemberRegistry, console: _Console) -> None:
    member_id = console.ask_int("Masukkan id anggota yang ingin diedit: ")
    name = console.ask("Masukkan nama baru anggota: ")
    phone = console.ask("Masukkan nomor telepon baru anggota: ")
    age = console.ask_age("Masukkan umur baru anggota: ")
    package = console.ask("Masukkan paket baru anggota: ")
    gender = console.ask("Masukkan jenis kelamin baru anggota: ")
    coach = console.ask("Masukkan nama pelatih baru anggota: ")
    if member_id is None:
        console.say("Anggota tidak ditemukan")
        return
    try:
        registry.edit(member_id, name, phone, age, package, gender, coach)
    except MemberNotFoundError:
        console.say("Anggota tidak ditemukan")
        return
    console.say(f"Data anggota dengan ID {member_id} telah diperbarui.")


_MEMBER_ACTIONS = {1: _add_member, 2: _remove_member, 3: _view_members, 4: _edit_member}


def member_menu(registry: MemberRegistry, stdin=None, stdout=None) -> None:
    """Run the member management menu until the user goes back."""
    console = _Console(stdin, stdout)
    try:
        while True:
            console.write(_MEMBER_MENU)
            choice = console.ask_int("Pilih menu: ")
            if choice == 0:
                return
            action = _MEMBER_ACTIONS.get(choice)
            if action is None:
                console.say("Pilihan tidak valid. Silakan coba lagi.")
                continue
            try:
                action(registry, console)
            except DatabaseError as exc:
                console.say(str(exc))
    except EOFError:
        return


def _ask_coach(console: _Console, suffix: str) -> Coach:
    name = console.ask(f"Nama{suffix} : ")
    specialty = console.ask(f"Spesialis{suffix} : ")
    age = console.ask_age(f"Umur{suffix} : ")
    gender = console.ask(f"Jenis Kelamin{suffix} : ")
    phone = console.ask(f"No. Telepon{suffix} : ")
    return Coach(name=name, phone=phone, age=age, gender=gender, specialty=specialty)


def _view_coaches(roster: CoachRoster, console: _Console) -> None:
    if not len(roster):
        console.say("Belum ada pelatih")
        return
    for position, coach in enumerate(roster, start=1):
        console.say(format_coach(position, coach))


def _add_coach(roster: CoachRoster, console: _Console) -> None:
    if roster.is_full:
        console.say("Data Penuh.")
        return
    roster.add(_ask_coach(console, ""))
    console.say("Pelatih berhasil ditambahkan.")


def _edit_coach(roster: CoachRoster, console: _Console) -> None:
    name = console.ask("Masukkan nama pelatih yang ingin diedit: ")
    try:
        roster.find(name)
    except CoachNotFoundError as exc:
        console.say(str(exc))
        return
    roster.edit(name, _ask_coach(console, " Baru"))
    console.say("Data berhasil diedit.")


def _remove_coach(roster: CoachRoster, console: _Console) -> None:
    name = console.ask("Masukkan nama pelatih yang ingin dihapus : ")
    try:
        roster.remove(name)
    except CoachNotFoundError as exc:
        console.say(str(exc))
        return
    console.say("Pelatih berhasil dihapus.")


_COACH_ACTIONS = {1: _view_coaches, 2: _add_coach, 3: _edit_coach, 4: _remove_coach}


def coach_menu(roster: CoachRoster, stdin=None, stdout=None) -> None:
    """Run the coach management menu until the user goes back."""
    console = _Console(stdin, stdout)
    try:
        while True:
            console.write(_COACH_MENU)
            choice = console.ask_int("Pilih menu : ")
            if choice == 0:
                console.say("Kembali ke menu utama.")
                return
            action = _COACH_ACTIONS.get(choice)
            if action is None:
                console.say("Pilihan tidak valid. Silahkan coba lagi.")
                continue
            action(roster, console)
    except EOFError:
        return


def main(argv=None) -> int:
    """Start the gym manager's main menu."""
    parser = argparse.ArgumentParser(prog="gymmy", description="Gym membership manager.")
    parser.add_argument("--database", default="database.txt", help="member database file")
    parser.add_argument(
        "--coaches", action="store_true", help="run only the coach management menu"
    )
    args = parser.parse_args(argv)

    if args.coaches:
        coach_menu(CoachRoster())
        return 0

    console = _Console(None, None)
    registry = MemberRegistry(args.database)
    try:
        registry.load()
    except DatabaseError as exc:
        console.say(str(exc))

    try:
        while True:
            console.write(_MAIN_MENU)
            choice = console.ask_int("Pilih menu: ")
            if choice == 0:
                console.say("Terima kasih telah menggunakan Gymmy!")
                return 0
            if choice == 1:
                member_menu(registry)
            else:
                console.say("Menu tidak valid. Silakan coba lagi.")
    except EOFError:
        return 0