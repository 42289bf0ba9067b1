"""Core records of the hospital system: users, patients, staff, rooms and more."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Optional

DEFAULT_DATE = 19000101


@dataclass
class User:
    """A person with an account. Dates are integers in YYYYMMDD form."""

    login: str = ""
    password: str = ""
    last_name: str = ""
    first_name: str = ""
    date_of_birth: int = DEFAULT_DATE
    gender: str = "X"


@dataclass
class Room:
    """A hospital room on a floor, either available or taken."""

    number: int = 0
    floor: int = 0
    available: bool = False


@dataclass
class Patient(User):
    """A user admitted as a patient, with insurance details and an optional room."""

    has_insurance: bool = False
    insurance_provider: str = "N/A"
    room: Optional[Room] = None

    @classmethod
    def from_user(cls, user: User) -> "Patient":
        """Build a patient from a plain user, with default insurance and no room."""
        base = {f.name: getattr(user, f.name) for f in dataclasses.fields(User)}
        return cls(**base)


class Clearance(IntEnum):
    """Access level of a staff member."""

    ENTRY = 0
    JANITORIAL = 1
    NURSING = 2
    MEDICAL = 3
    ADMIN = 4


@dataclass
class Staff(User):
    """A user employed by the hospital."""

    id_number: int = 0
    clearance_level: int = Clearance.ENTRY
    job_title: str = ""
    date_of_hire: int = DEFAULT_DATE


@dataclass
class InventoryItem:
    """A stocked item with its count and reorder threshold."""

    name: str = ""
    count: int = 0
    threshold: int = 0


@dataclass
class Procedure:
    """A billable procedure and the inventory it consumes."""

    name: str = ""
    cost: float = 0.0
    items_used: list[InventoryItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.items_used = list(self.items_used)


@dataclass
class Schedule:
    """An appointment: when, who treats whom, where, and what is done."""

    time: datetime = field(default_factory=datetime.now)
    staffer: Staff = field(default_factory=Staff)
    patient: Patient = field(default_factory=Patient)
    room: Room = field(default_factory=Room)
    procedure: Procedure = field(default_factory=Procedure)