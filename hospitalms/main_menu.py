"""The start menu: account creation, login and the program entry point."""

from __future__ import annotations

import argparse
import re
import sys
from datetime import date
from typing import Any, Callable, Optional, TextIO

from hospitalms.accounts import UserDatabase
from hospitalms.entities import Patient, User

SECTION_BREAK = "==================================================\n"
TITLE = "UHD Hospital Management System"
WELCOME = "Welcome to the Hospital Management System"
CLEAR_LINES = 40
SHORT_MIN = -(2**15)
SHORT_MAX = 2**15 - 1

START_OPTIONS = (
    "Please, select an option.",
    "1.\tCreate an Account",
    "2.\tLogin to an Existing Account",
    "0.\tExit",
)
BIRTHDATE_FORMAT_ERROR = "Invalid entry."
BIRTHDATE_RANGE_ERROR = "Invalid birthdate. Please enter a date between 1900 and today."


def parse_birthdate(text: str, today: Optional[date] = None) -> int:
    """Parse a YYYYMMDD birth date and return it as an integer.

    Raises ValueError when the text is not a date, or when the date lies
    before 1900 or after today.
    """
    match = re.match(r"(\d{4})(\d{2})(\d{2})", text.strip())
    if match is None:
        raise ValueError(BIRTHDATE_FORMAT_ERROR)
    try:
        born = date(*(int(group) for group in match.groups()))
    except ValueError as exc:
        raise ValueError(BIRTHDATE_FORMAT_ERROR) from exc
    current = today if today is not None else date.today()
    if born.year < 1900 or born.year > current.year or born > current:
        raise ValueError(BIRTHDATE_RANGE_ERROR)
    return int(born.strftime("%Y%m%d"))


class _Goto(Exception):
    """Moves the menu flow to another screen."""

    def __init__(self, screen: Callable[[], Any]) -> None:
        super().__init__()
        self.screen = screen


class _Input:
    """Reads words, characters and small integers from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> None:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._buffer = line

    def word(self) -> str:
        self._fill()
        match = re.match(r"\S+", self._buffer)
        self._buffer = self._buffer[match.end():]
        return match.group(0)

    def char(self) -> str:
        self._fill()
        ch, self._buffer = self._buffer[0], self._buffer[1:]
        return ch

    def integer(self) -> Optional[int]:
        """Read a small integer; on bad input drop the rest of the line and return None."""
        self._fill()
        match = re.match(r"[+-]?\d+", self._buffer)
        if match is None or not SHORT_MIN <= int(match.group(0)) <= SHORT_MAX:
            self.discard_line()
            return None
        self._buffer = self._buffer[match.end():]
        return int(match.group(0))

    def discard_line(self) -> None:
        end = self._buffer.find("\n")
        self._buffer = "" if end == -1 else self._buffer[end + 1:]


class MainMenu:
    """The text menus a user meets first: sign up or log in.

    Every public method runs the flow from its own screen and returns what
    the flow ended with: a login name, a new user or patient, or None.
    Running out of input raises EOFError.
    """

    def __init__(
        self,
        users: UserDatabase | None = None,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
        today: Optional[date] = None,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.users = users if users is not None else UserDatabase(out=self.out)
        self.today = today
        self._input = _Input(stdin if stdin is not None else sys.stdin)

    def _write(self, text: str) -> None:
        self.out.write(text)

    def _header(self) -> None:
        self._write(f"{SECTION_BREAK}{TITLE:>40}\n{SECTION_BREAK}")

    def _clear_screen(self) -> None:
        self._write("\n" * CLEAR_LINES)

    @staticmethod
    def _run(screen: Callable[[], Any]) -> Any:
        while True:
            try:
                return screen()
            except _Goto as jump:
                screen = jump.screen

    def start(self) -> Any:
        """Run the flow from the start menu."""
        return self._run(self._start_screen)

    def login_menu(self) -> Any:
        """Run the flow from the login screen."""
        return self._run(self._login_screen)

    def account_create_menu(self) -> Any:
        """Run the flow from the account type screen."""
        return self._run(self._account_screen)

    def generic_user_creation(self) -> Any:
        """Run the flow from the screens that ask for a new user's details."""
        return self._run(self._user_screen)

    def patient_account_creation(self) -> Any:
        """Run the flow that creates a patient account."""
        return self._run(self._patient_screen)

    def _start_screen(self) -> Any:
        self._clear_screen()
        self._header()
        self._write("".join(f"{line:<38}\n" for line in START_OPTIONS))
        self._write(SECTION_BREAK)
        choice = self._input.integer()
        if choice is None:
            raise _Goto(self._start_screen)
        if choice == 1:
            self._write("You've opted to create an account.\n")
            raise _Goto(self._account_screen)
        if choice == 2:
            self._write("You've opted to login.\n")
            raise _Goto(self._login_screen)
        if choice == 0:
            self._write("Exiting.\n")
            return None
        self._write("You've entered an incorrect choice.\n")
        raise _Goto(self._start_screen)

    def _login_screen(self) -> str:
        self._clear_screen()
        self._header()
        self._write(f"{'Enter User Login:':<35}")
        login = self._input.word()
        self._write(SECTION_BREAK + "\n")
        if self.users.contains(login):
            while True:
                self._write(f"{'Enter User Password:':<35}")
                if self.users.check_password(login, self._input.word()):
                    break
            self._write(SECTION_BREAK + "\n")
            self._write("LOGIN PASSED\n")
            return login
        self._write(
            "User Not Found.\n"
            "Would you like to create a new account?\n\n"
            "Type y for yes.\n"
            "Type n for try again.\n\n" + SECTION_BREAK
        )
        answer = self._input.char().lower()
        if answer == "y":
            raise _Goto(self._account_screen)
        if answer == "n":
            raise _Goto(self._login_screen)
        raise _Goto(self._start_screen)

    def _account_screen(self) -> Any:
        self._clear_screen()
        self._header()
        self._write(
            "Select your account type.\n"
            "1.\tPatient\n"
            "2.\tStaff\n"
            "9.\tGo Back\n"
            "0.\tGo to Main Menu\n" + SECTION_BREAK
        )
        choice = self._input.integer()
        if choice == 1:
            raise _Goto(self._patient_screen)
        if choice == 2:
            self._write("Staff class to be used\n")
            return None
        if choice == 9:
            raise _Goto(self._login_screen)
        if choice == 0:
            raise _Goto(self._start_screen)
        raise _Goto(self._account_screen)

    def _ask_unused_login(self) -> str:
        self._clear_screen()
        self._header()
        self._write("Enter a username:\t")
        login = self._input.word()
        self._write(SECTION_BREAK)
        while self.users.contains(login):
            self._clear_screen()
            self._header()
            self._write(
                f"Username '{login}' already exists.\n"
                "1.\tEnter a different username\n"
                "0.\tMain Menu\n" + SECTION_BREAK
            )
            choice = self._input.integer()
            if choice is None:
                self._clear_screen()
                raise _Goto(self._account_screen)
            if choice == 0:
                raise _Goto(self._start_screen)
            if choice == 1:
                raise _Goto(self._patient_screen)
        return login

    def _ask_password(self) -> str:
        while True:
            self._clear_screen()
            self._header()
            self._write("Enter a password:\t")
            first = self._input.word()
            self._write("Confirm your password:\t")
            if first == self._input.word():
                break
            self._write("Passwords don't match.\n" + SECTION_BREAK)
        self._write("Password confirmed.\n" + SECTION_BREAK)
        return first

    def _ask_birthdate(self) -> int:
        while True:
            self._clear_screen()
            self._header()
            self._write("Enter your date of birth (YYYYMMDD): ")
            try:
                born = parse_birthdate(self._input.word(), self.today)
            except ValueError as exc:
                self._write(f"{exc}\n")
                continue
            self._write(SECTION_BREAK)
            return born

    def _ask_gender(self) -> str:
        while True:
            self._clear_screen()
            self._header()
            self._write(
                "Enter your Sex.\n"
                "Enter either:\nM for male\nF for female\nX to not answer\n"
                + SECTION_BREAK
            )
            gender = self._input.char().lower()
            if gender in ("m", "f", "x"):
                self._write(SECTION_BREAK)
                return gender
            self._input.discard_line()
            self._write("Invalid entry.\n")

    def _user_screen(self) -> User:
        login = self._ask_unused_login()
        secret = self._ask_password()
        self._clear_screen()
        self._header()
        self._write("Enter your first name:\t")
        first_name = self._input.word()
        self._write("Enter your last name:\t")
        last_name = self._input.word()
        self._write(SECTION_BREAK)
        born = self._ask_birthdate()
        gender = self._ask_gender()
        return User(login, secret, last_name, first_name, born, gender)

    def _patient_screen(self) -> Patient:
        patient = Patient.from_user(self._user_screen())
        while True:
            self._clear_screen()
            self._header()
            self._write("Do you have any insurance?\n1.\tYes\n2.\tNo\n" + SECTION_BREAK)
            choice = self._input.integer()
            if choice in (1, 2):
                break
            if choice is not None:
                self._input.discard_line()
            self._write("Invalid entry.\n")
        patient.has_insurance = choice == 1
        if patient.has_insurance:
            self._clear_screen()
            self._header()
            self._write("Write your insurance provider:\n" + SECTION_BREAK)
            patient.insurance_provider = self._input.word()
        return patient

    def login_interface(self) -> str:
        """Ask for login and password until they match a user; return the login."""
        self._write(f"{SECTION_BREAK}{WELCOME:>45}\n{SECTION_BREAK}")
        while True:
            self._write(f"{'Enter User Login:':<38}")
            login = self._input.word()
            self._write(f"{'Enter User Password:':<38}")
            if self.users.verify(login, self._input.word()):
                self._write("Login Successful\n")
                break
            self._write("\nIncorrect User Name and Password\n\n")
        self._write(SECTION_BREAK + "\n")
        return login


def main(argv: Optional[list[str]] = None) -> int:
    """Run the hospital management start menu."""
    parser = argparse.ArgumentParser(
        prog="hospitalms", description="Hospital management system."
    )
    parser.parse_args(argv)
    try:
        MainMenu().start()
    except EOFError:
        pass
    return 0