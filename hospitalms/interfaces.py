"""Patient and staff menus built on the shared schedule file."""

from __future__ import annotations

import re
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

DEFAULT_SCHEDULES_PATH = Path("./database/schedules.csv")

SCHEDULE_OPEN_ERROR = "Error: Unable to open the schedules file.\n"
FILE_OPEN_ERROR = "Error: Unable to open file.\n"


class ScheduleFile:
    """The schedule file: one free-form appointment entry per line."""

    def __init__(self, path: str | Path = DEFAULT_SCHEDULES_PATH) -> None:
        self.path = Path(path)

    def entries(self) -> list[str]:
        """Return every line of the file. Raises FileNotFoundError if it is missing."""
        with self.path.open(encoding="utf-8", newline="") as handle:
            text = handle.read()
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def add(self, entry: str) -> None:
        """Append an entry as a new line, creating the file if needed."""
        with self.path.open("a", encoding="utf-8", newline="") as handle:
            handle.write(f"{entry}\n")

    def remove(self, entry: str) -> bool:
        """Drop every line equal to the entry; return whether any was found."""
        lines = self.entries()
        kept = [line for line in lines if line != entry]
        if len(kept) == len(lines):
            return False
        with self.path.open("w", encoding="utf-8", newline="") as handle:
            handle.writelines(f"{line}\n" for line in kept)
        return True

    def appointments_for(self, patient_name: str) -> list[str]:
        """Return "time - procedure" for each entry whose patient field matches exactly.

        Entries are read as room-time-patient-procedure, split on '-'.
        """
        found = []
        for line in self.entries():
            parts = line.split("-", 3)
            parts += [""] * (4 - len(parts))
            _room, date_time, name, procedure = parts
            if name == patient_name:
                found.append(f"{date_time} - {procedure}")
        return found


class _Input:
    """Reads whitespace-separated words and whole lines from a stream."""

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

    def integer(self) -> int:
        """Read a word as an integer; a word that is not one reads as 0."""
        match = re.match(r"[+-]?\d+", self.word())
        return int(match.group(0)) if match else 0

    def line(self) -> str:
        """Skip leading whitespace, then return the rest of the current line."""
        self._fill()
        end = self._buffer.find("\n")
        if end == -1:
            text, self._buffer = self._buffer, ""
        else:
            text, self._buffer = self._buffer[:end], self._buffer[end + 1:]
        return text.rstrip("\r")


class UserInterface(ABC):
    """A menu-driven front end for one kind of user."""

    def __init__(
        self,
        schedule: ScheduleFile | None = None,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.schedule = schedule if schedule is not None else ScheduleFile()
        self.out = out if out is not None else sys.stdout
        self._input = _Input(stdin if stdin is not None else sys.stdin)

    def _write(self, text: str) -> None:
        self.out.write(text)

    @abstractmethod
    def display_main_menu(self) -> None:
        """Run the menu until the user logs out."""


class PatientInterface(UserInterface):
    """Menu for a patient, who can look up their own appointments."""

    def __init__(
        self,
        patient_name: str,
        schedule: ScheduleFile | None = None,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
    ) -> None:
        super().__init__(schedule, stdin, out)
        self.patient_name = patient_name

    def display_main_menu(self) -> None:
        """Run the patient menu until logout or end of input."""
        messages = {
            2: "updateProfile() ran\n",
            3: "viewMedicalRecords() ran\n",
            4: "payBills() ran\n",
        }
        try:
            while True:
                self._write(
                    "\nPatient Menu:\n"
                    "1. View My Appointments\n"
                    "2. Update My Profile\n"
                    "3. View My Medical Records\n"
                    "4. Pay Bills\n"
                    "5. Log Out\n"
                    "Enter your choice: "
                )
                choice = self._input.integer()
                if choice == 1:
                    self._write("viewAppointments() ran\n")
                    self.view_appointments()
                elif choice in messages:
                    self._write(messages[choice])
                elif choice == 5:
                    self._write("Logging out...\n")
                    return
                else:
                    self._write("Invalid choice. Please try again.\n")
        except EOFError:
            return

    def view_appointments(self) -> None:
        """List this patient's appointments from the schedule file."""
        try:
            appointments = self.schedule.appointments_for(self.patient_name)
        except OSError:
            self._write(SCHEDULE_OPEN_ERROR)
            return
        self._write("Your Appointments:\n")
        if not appointments:
            self._write("No scheduled appointments.\n")
        for appointment in appointments:
            self._write(f"- {appointment}\n")


class StaffInterface(UserInterface):
    """Menu for staff, who can view and edit the whole schedule."""

    def display_main_menu(self) -> None:
        """Run the staff menu until logout or end of input."""
        messages = {
            2: "managePatientRecords() ran\n",
            3: "accessInventory() ran \n",
            4: "processBillingInformation() ran\n",
        }
        try:
            while True:
                self._write(
                    "\nStaff Menu:\n"
                    "1. View Schedule\n"
                    "2. Manage Patient Records\n"
                    "3. Access Inventory\n"
                    "4. Process Billing Information\n"
                    "5. Log Out\n"
                    "Enter your choice: "
                )
                choice = self._input.integer()
                if choice == 1:
                    self._schedule_loop()
                elif choice in messages:
                    self._write(messages[choice])
                elif choice == 5:
                    self._write("Logging out...\n")
                    return
                else:
                    self._write("Invalid choice. Please try again.\n")
        except EOFError:
            return

    def _schedule_loop(self) -> None:
        while True:
            self._write("viewSchedule() ran\n")
            self.view_schedule()
            self._write("1. add to schedule\n2. remove from schedule\n3. exit\n")
            response = self._input.integer()
            if response == 1:
                self.add_schedule()
            elif response == 2:
                self.remove_schedule()
            elif response == 3:
                return

    def view_schedule(self) -> None:
        """List every entry of the schedule file."""
        try:
            entries = self.schedule.entries()
        except OSError:
            self._write(SCHEDULE_OPEN_ERROR)
            return
        self._write("Staff Schedule:\n")
        if not entries:
            self._write("No scheduled appointments.\n")
        for entry in entries:
            self._write(f"- {entry}\n")

    def add_schedule(self) -> None:
        """Read one entry line and append it to the schedule file."""
        self._write(
            "Enter schedule details (Format: Room - Date & Time - Patient - Procedure): "
        )
        entry = self._input.line()
        try:
            self.schedule.add(entry)
        except OSError:
            self._write(FILE_OPEN_ERROR)
            return
        self._write("Schedule added successfully.\n")

    def remove_schedule(self) -> None:
        """Read one entry line and remove every matching line from the file."""
        self._write("Enter the exact schedule details to remove: ")
        entry = self._input.line()
        try:
            removed = self.schedule.remove(entry)
        except OSError:
            self._write(FILE_OPEN_ERROR)
            return
        self._write("Schedule removed successfully.\n" if removed else "Schedule not found.\n")