import io

import pytest

from hospitalms.accounts import UserDatabase, format_record
from hospitalms.entities import Patient, Room, Staff, User

password = "password"


@pytest.fixture
def alice():
    return User(
        login="alice",
        password=password,
        last_name="Smith",
        first_name="Alice",
        date_of_birth=19900101,
        gender="F",
    )


@pytest.fixture
def db(tmp_path):
    return UserDatabase(tmp_path / "users.txt", out=io.StringIO())


def test_format_record_plain_user(alice):
    record = format_record(alice)
    assert record.endswith(" \n")
    assert record.split() == ["alice", "password", "Smith", "Alice", "19900101", "F"]


def test_format_record_patient_without_room(alice):
    patient = Patient.from_user(alice)
    tokens = format_record(patient).split()
    assert tokens[6:] == ["0", "N/A"]


def test_format_record_patient_with_room(alice):
    patient = Patient.from_user(alice)
    patient.has_insurance = True
    patient.insurance_provider = "Acme"
    patient.room = Room(101, 5, True)
    tokens = format_record(patient).split()
    assert tokens[6:] == ["1", "Acme", "15101"]


def test_format_record_staff():
    staff = Staff(
        login="bob",
        password=password,
        last_name="Jones",
        first_name="Bob",
        id_number=42,
        clearance_level=3,
        job_title="Nurse",
        date_of_hire=20200102,
    )
    tokens = format_record(staff).split()
    assert tokens[6:] == ["42", "3", "Nurse", "20200102"]


def test_missing_file_has_no_users(db):
    assert db.contains("alice") is False
    assert db.check_password("alice", "password") is False
    assert db.verify("alice", "password") is False


def test_store_then_lookup(db, alice):
    assert db.store(alice) is True
    assert db.contains("alice") is True
    assert db.contains("bob") is False
    assert "User data written to file." in db.out.getvalue()


def test_store_duplicate_rejected(db, alice):
    db.store(alice)
    assert db.store(alice) is False
    assert "alice already exists in database." in db.out.getvalue()
    lines = db.path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1


def test_store_patient_without_room_warns(db, alice):
    db.store(Patient.from_user(alice))
    assert "Room isn't set." in db.out.getvalue()


def test_check_password(db, alice):
    db.store(alice)
    assert db.check_password("alice", "password") is True
    assert db.check_password("alice", "secret") is False
    assert db.check_password("bob", "password") is False


def test_verify(db, alice):
    db.store(alice)
    assert db.verify("alice", "password") is True
    assert db.verify("alice", "secret") is False
    assert db.verify("nobody", "password") is False


def test_stored_record_matches_format(db, alice):
    db.store(alice)
    assert db.path.read_text(encoding="utf-8") == format_record(alice)