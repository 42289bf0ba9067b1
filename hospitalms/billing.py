"""Patient bills: the patient block and the list of procedures with a running total."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from hospitalms.entities import Patient, Procedure

SECTION_BREAK = "|_______________________________________________________________________________\n"
SECTION_BREAK_BEGINNING = "________________________________________________________________________________\n"
SECTION_BREAK_END = "|===============================================================================\n"


class BillGenerator:
    """Formats bill sections; the total grows with every procedure listed."""

    def __init__(self) -> None:
        self.total = 0.0

    def patient_info(self, patient: Patient) -> str:
        """Return the patient and insurance block of a bill."""
        full_name = f"| {patient.first_name} {patient.last_name}"
        return "".join(
            [
                SECTION_BREAK_BEGINNING,
                f"{'| Patient Information':<40}| Patient Health Insurence\n",
                f"{'|':<40}|\n",
                f"{full_name:<40}| {patient.insurance_provider}\n| ",
                f"{patient.date_of_birth:<38}|\n",
                f"{'|':<40}|\n",
                SECTION_BREAK_END,
            ]
        )

    def procedures(self, procedures: Iterable[Procedure]) -> str:
        """Return the procedure lines and the balance, adding their costs to the total."""
        parts = [f"{'| Procedure':<35}| Amount\n", f"{'|':<35}|\n"]
        for procedure in procedures:
            parts.append(f"| {procedure.name:<33}| {procedure.cost:.2f}\n")
            self.total += procedure.cost
        parts.append(f"{'|':<35}|\n")
        parts.append(SECTION_BREAK_END)
        parts.append(f"|  Total Balance : ${self.total:.2f}\n")
        parts.append(SECTION_BREAK)
        return "".join(parts)


def display_bill(
    patient: Patient, procedures: Iterable[Procedure], out: TextIO | None = None
) -> None:
    """Write a complete bill for the patient."""
    stream = out if out is not None else sys.stdout
    generator = BillGenerator()
    stream.write(generator.patient_info(patient))
    stream.write(generator.procedures(procedures))