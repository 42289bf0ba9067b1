"""Room availability and schedule reports, and the operations that change them."""

from __future__ import annotations

import copy
import sys
from datetime import datetime
from typing import Mapping, MutableMapping, TextIO

from hospitalms.entities import Patient, Procedure, Room, Schedule, Staff

SCHEDULE_SEPARATOR = "************************\n"
TIME_FORMAT = "%m-%d-%Y %H:%M:%S"


def generate_room_report(rooms: Mapping[int, Room]) -> str:
    """Describe every room, ordered by its key, one line per room."""
    lines = []
    for key in sorted(rooms):
        room = rooms[key]
        status = "Available" if room.available else "Unavailable"
        lines.append(f"Room: {room.number} Floor: {room.floor} Availability: {status}\n")
    return "".join(lines)


def generate_schedule_report(schedules: list[Schedule]) -> str:
    """Describe every appointment in order, framed by separator lines."""
    parts = [SCHEDULE_SEPARATOR]
    for entry in schedules:
        parts.append(f"Date & Time: {entry.time.strftime(TIME_FORMAT)}\n")
        parts.append(f"Patient: {entry.patient.last_name}, {entry.patient.first_name}\n")
        parts.append(f"Staff: {entry.staffer.last_name}, {entry.staffer.first_name}\n")
        parts.append(f"Room: {entry.room.number}\n")
        parts.append(f"Procedure: {entry.procedure.name}\n")
        parts.append(SCHEDULE_SEPARATOR)
    return "".join(parts)


def book_room(room_number: int, rooms: MutableMapping[int, Room]) -> None:
    """Mark a room as taken. Raises KeyError for an unknown room."""
    rooms[room_number].available = False


def return_room(room_number: int, rooms: MutableMapping[int, Room]) -> None:
    """Mark a room as available again. Raises KeyError for an unknown room."""
    rooms[room_number].available = True


def add_event(
    schedules: list[Schedule],
    time: datetime,
    staff: Staff,
    patient: Patient,
    room: Room,
    procedure: Procedure,
) -> Schedule:
    """Append an appointment built from copies of the given records and return it."""
    entry = Schedule(
        time=time,
        staffer=copy.deepcopy(staff),
        patient=copy.deepcopy(patient),
        room=copy.deepcopy(room),
        procedure=copy.deepcopy(procedure),
    )
    schedules.append(entry)
    return entry


def display_room_report(rooms: Mapping[int, Room], out: TextIO | None = None) -> None:
    """Write the room availability report under its heading."""
    stream = out if out is not None else sys.stdout
    stream.write("Room Availability Report:\n")
    stream.write(generate_room_report(rooms) + "\n")


def display_schedule_report(schedules: list[Schedule], out: TextIO | None = None) -> None:
    """Write the schedule report under its heading."""
    stream = out if out is not None else sys.stdout
    stream.write("Schedule Report:\n")
    stream.write(generate_schedule_report(schedules) + "\n")