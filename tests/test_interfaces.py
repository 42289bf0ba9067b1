import io

import pytest

from hospitalms.interfaces import (
    PatientInterface,
    ScheduleFile,
    StaffInterface,
    UserInterface,
)


@pytest.fixture
def schedule(tmp_path):
    return ScheduleFile(tmp_path / "schedules.csv")


def test_entries_missing_file_raises(schedule):
    with pytest.raises(FileNotFoundError):
        schedule.entries()


def test_add_then_entries_round_trip(schedule):
    schedule.add("101-0900-Jane-Checkup")
    schedule.add("202-1000-John-Scan")
    assert schedule.entries() == ["101-0900-Jane-Checkup", "202-1000-John-Scan"]


def test_remove_drops_all_matching_lines(schedule):
    for entry in ["a-b-c-d", "x-y-z-w", "a-b-c-d"]:
        schedule.add(entry)
    assert schedule.remove("a-b-c-d") is True
    assert schedule.entries() == ["x-y-z-w"]


def test_remove_absent_entry_leaves_file(schedule):
    schedule.add("a-b-c-d")
    assert schedule.remove("nothing") is False
    assert schedule.entries() == ["a-b-c-d"]


def test_remove_missing_file_raises(schedule):
    with pytest.raises(FileNotFoundError):
        schedule.remove("a-b-c-d")


def test_appointments_for_matches_exact_name(schedule):
    schedule.add("101-0900-Jane-Checkup")
    schedule.add("102-1100-John-Scan")
    schedule.add("103-1300-Jane-X-ray")
    assert schedule.appointments_for("Jane") == ["0900 - Checkup", "1300 - X-ray"]
    assert schedule.appointments_for(" Jane") == []


def test_appointments_short_line_has_empty_fields(schedule):
    schedule.add("101-0900-Jane")
    assert schedule.appointments_for("Jane") == ["0900 - "]


def test_user_interface_is_abstract():
    with pytest.raises(TypeError):
        UserInterface()


def test_patient_views_appointments(schedule):
    schedule.add("101-0900-Jane-Checkup")
    out = io.StringIO()
    ui = PatientInterface("Jane", schedule, io.StringIO("1\n5\n"), out)
    ui.display_main_menu()
    text = out.getvalue()
    assert "Your Appointments:\n- 0900 - Checkup\n" in text
    assert text.endswith("Logging out...\n")


def test_patient_no_appointments(schedule):
    schedule.add("101-0900-John-Checkup")
    out = io.StringIO()
    PatientInterface("Jane", schedule, io.StringIO(), out).view_appointments()
    assert out.getvalue() == "Your Appointments:\nNo scheduled appointments.\n"


def test_patient_missing_file_reports_error(schedule):
    out = io.StringIO()
    PatientInterface("Jane", schedule, io.StringIO(), out).view_appointments()
    assert out.getvalue() == "Error: Unable to open the schedules file.\n"


def test_patient_invalid_choice(schedule):
    out = io.StringIO()
    PatientInterface("Jane", schedule, io.StringIO("9\nabc\n5\n"), out).display_main_menu()
    assert out.getvalue().count("Invalid choice. Please try again.\n") == 2


def test_patient_menu_stops_at_end_of_input(schedule):
    out = io.StringIO()
    PatientInterface("Jane", schedule, io.StringIO("2\n"), out).display_main_menu()
    text = out.getvalue()
    assert "updateProfile() ran\n" in text
    assert "Logging out..." not in text


def test_staff_adds_entry_with_spaces(schedule):
    schedule.add("101-0900-Jane-Checkup")
    out = io.StringIO()
    stdin = io.StringIO("1\n1\n   202 - 1000 - John - Scan\n3\n5\n")
    StaffInterface(schedule, stdin, out).display_main_menu()
    assert schedule.entries() == ["101-0900-Jane-Checkup", "202 - 1000 - John - Scan"]
    assert "Schedule added successfully.\n" in out.getvalue()


def test_staff_removes_entry(schedule):
    schedule.add("101-0900-Jane-Checkup")
    schedule.add("102-1100-John-Scan")
    out = io.StringIO()
    stdin = io.StringIO("1\n2\n101-0900-Jane-Checkup\n3\n5\n")
    StaffInterface(schedule, stdin, out).display_main_menu()
    assert schedule.entries() == ["102-1100-John-Scan"]
    assert "Schedule removed successfully.\n" in out.getvalue()


def test_staff_remove_not_found(schedule):
    schedule.add("101-0900-Jane-Checkup")
    out = io.StringIO()
    StaffInterface(schedule, io.StringIO("nothing here\n"), out).remove_schedule()
    assert out.getvalue().endswith("Schedule not found.\n")
    assert schedule.entries() == ["101-0900-Jane-Checkup"]


def test_staff_view_schedule_lists_entries(schedule):
    schedule.add("101-0900-Jane-Checkup")
    out = io.StringIO()
    StaffInterface(schedule, io.StringIO(), out).view_schedule()
    assert out.getvalue() == "Staff Schedule:\n- 101-0900-Jane-Checkup\n"


def test_staff_view_empty_schedule(schedule):
    schedule.path.write_text("")
    out = io.StringIO()
    StaffInterface(schedule, io.StringIO(), out).view_schedule()
    assert out.getvalue() == "Staff Schedule:\nNo scheduled appointments.\n"


def test_staff_add_to_missing_directory_reports_error(tmp_path):
    schedule = ScheduleFile(tmp_path / "missing" / "schedules.csv")
    out = io.StringIO()
    StaffInterface(schedule, io.StringIO("entry\n"), out).add_schedule()
    assert out.getvalue().endswith("Error: Unable to open file.\n")
    assert not schedule.path.exists()


def test_staff_other_choices(schedule):
    out = io.StringIO()
    StaffInterface(schedule, io.StringIO("2 3 4 7 5\n"), out).display_main_menu()
    text = out.getvalue()
    assert "managePatientRecords() ran\n" in text
    assert "accessInventory() ran \n" in text
    assert "processBillingInformation() ran\n" in text
    assert "Invalid choice. Please try again.\n" in text