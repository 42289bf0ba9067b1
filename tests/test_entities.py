from datetime import datetime

from hospitalms.entities import (
    Clearance,
    InventoryItem,
    Patient,
    Procedure,
    Room,
    Schedule,
    Staff,
    User,
)


def test_user_defaults():
    user = User()
    assert user.login == ""
    assert user.date_of_birth == 19000101
    assert user.gender == "X"


def test_temporary_user_keeps_login_and_password():
    password = "password"
    user = User("alice", password)
    assert (user.login, user.password) == ("alice", "password")


def test_patient_defaults():
    patient = Patient()
    assert patient.has_insurance is False
    assert patient.insurance_provider == "N/A"
    assert patient.room is None
    assert patient.date_of_birth == 19000101


def test_patient_from_user_copies_base_fields():
    user = User("bob", "secret", "Smith", "Bob", 19880814, "M")
    patient = Patient.from_user(user)
    assert patient.login == "bob"
    assert patient.last_name == "Smith"
    assert patient.first_name == "Bob"
    assert patient.date_of_birth == 19880814
    assert patient.gender == "M"
    assert patient.insurance_provider == "N/A"
    assert patient.room is None


def test_patient_room_is_shared_reference():
    room = Room(101, 5, True)
    patient = Patient()
    patient.room = room
    room.available = False
    assert patient.room.available is False
    assert patient.room.number == 101


def test_staff_defaults():
    staff = Staff()
    assert staff.id_number == 0
    assert staff.clearance_level == Clearance.ENTRY
    assert staff.job_title == ""
    assert staff.date_of_hire == 19000101


def test_staff_clearance_level_ordering():
    admin = Staff(clearance_level=Clearance.ADMIN)
    nurse = Staff(clearance_level=Clearance.NURSING)
    assert admin.clearance_level == 4
    assert Staff().clearance_level == 0
    assert Staff().clearance_level < nurse.clearance_level < admin.clearance_level


def test_room_defaults():
    room = Room()
    assert (room.number, room.floor, room.available) == (0, 0, False)


def test_inventory_item_defaults_and_values():
    assert InventoryItem() == InventoryItem("", 0, 0)
    item = InventoryItem("gauze", 600, 100)
    assert item.count == 600


def test_procedure_copies_items_list():
    items = [InventoryItem("gauze", 1, 1)]
    procedure = Procedure("stitches", 120.5, items)
    items.append(InventoryItem("tape", 2, 2))
    assert len(procedure.items_used) == 1
    assert procedure.cost == 120.5


def test_procedure_default_items_independent():
    a = Procedure()
    b = Procedure()
    a.items_used.append(InventoryItem("x", 1, 1))
    assert b.items_used == []


def test_schedule_default_time_is_now():
    before = datetime.now()
    schedule = Schedule()
    after = datetime.now()
    assert before <= schedule.time <= after
    assert schedule.room == Room()


def test_schedule_holds_given_values():
    when = datetime(2024, 1, 2, 3, 4, 5)
    staff = Staff(login="doc", last_name="House")
    patient = Patient(login="pat")
    room = Room(303, 2, True)
    procedure = Procedure("scan", 50.0)
    schedule = Schedule(when, staff, patient, room, procedure)
    assert schedule.time == when
    assert schedule.staffer.last_name == "House"
    assert schedule.patient.login == "pat"
    assert schedule.room.number == 303
    assert schedule.procedure.name == "scan"