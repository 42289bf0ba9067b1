"""The user database: a text file holding one whitespace-separated record per user."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator, TextIO

from hospitalms.entities import Patient, Staff, User

DEFAULT_USERS_PATH = Path("./database/users.txt")


def format_record(user: User) -> str:
    """Return the line stored for a user, including patient or staff details."""
    fields = [
        user.login,
        user.password,
        user.last_name,
        user.first_name,
        str(user.date_of_birth),
        user.gender,
    ]
    record = " ".join(fields)
    if isinstance(user, Patient):
        record += f" {int(user.has_insurance)} {user.insurance_provider} "
        if user.room is not None:
            room = user.room
            record += f"{int(room.available)}{room.floor}{room.number}"
    if isinstance(user, Staff):
        record += (
            f" {user.id_number} {int(user.clearance_level)} "
            f"{user.job_title} {user.date_of_hire}"
        )
    return record + " \n"


class UserDatabase:
    """Looks up, verifies and stores users in the user file."""

    def __init__(self, path: str | Path = DEFAULT_USERS_PATH, out: TextIO | None = None) -> None:
        self.path = Path(path)
        self.out = out

    def _write(self, message: str) -> None:
        print(message, file=self.out if self.out is not None else sys.stdout)

    def _records(self) -> Iterator[list[str]]:
        try:
            with self.path.open(encoding="utf-8") as handle:
                for line in handle:
                    tokens = line.split()
                    if tokens:
                        yield tokens
        except FileNotFoundError:
            return

    def contains(self, login: str) -> bool:
        """Whether a record starts with this login."""
        return any(tokens[0] == login for tokens in self._records())

    def check_password(self, login: str, password: str) -> bool:
        """Whether a record holds this login and password as its first two fields."""
        return any(
            len(tokens) >= 2 and tokens[0] == login and tokens[1] == password
            for tokens in self._records()
        )

    def verify(self, login: str, password: str) -> bool:
        """Whether the user exists and one of its records carries the password."""
        found_user = False
        second = ""
        for tokens in self._records():
            if tokens[0] != login:
                continue
            found_user = True
            if len(tokens) >= 2:
                second = tokens[1]
            if second == password:
                return True
        return found_user and False

    def store(self, user: User) -> bool:
        """Append the user unless the login is taken; return whether it was written."""
        if self.contains(user.login):
            self._write(f"{user.login} already exists in database.")
            return False
        if isinstance(user, Patient) and user.room is None:
            self._write("Room isn't set.")
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(format_record(user))
        self._write("User data written to file.")
        return True