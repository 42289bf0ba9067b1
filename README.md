# hospitalms

A console hospital management system. It keeps user accounts, rooms,
appointment schedules, a supply inventory and patient bills. Data is kept in
plain text files under `./database/` in the current working directory:

- `./database/users.txt`: one user per line, fields separated by spaces
  (login, password, last name, first name, date of birth as `YYYYMMDD`,
  gender, then patient or staff details).
- `./database/inventory.txt`: one item per line, `name<TAB>count<TAB>threshold`.
- `./database/schedules.csv`: one free-form appointment per line, read as
  `Room-Date & Time-Patient-Procedure` split on `-`.

It needs nothing beyond the standard library.

## Installing

```
pip install .
```

## Running

```
hospitalms
```

This opens the start menu, which offers:

1. **Create an Account**: choose Patient or Staff. For a patient it asks for
   an unused username, a password (entered twice), first and last name, date
   of birth (`YYYYMMDD`, between 1900 and today), sex (`M`, `F` or `X`) and
   insurance details.
2. **Login to an Existing Account**: asks for a login that is in
   `users.txt`, then for its password until it matches, and prints
   `LOGIN PASSED`.
0. **Exit**.

The command ends when input runs out. `hospitalms --help` shows the usage.

## What the command does not do

- A patient account built in the menu is returned by the menu but not
  written to `users.txt`; use `UserDatabase.store` to save users.
- Choosing a Staff account prints `Staff class to be used` and ends; there is
  no staff sign-up screen.
- After a successful login the command stops; it does not go on to the
  patient, staff or inventory menus. Those menus are available as classes
  (below) for a program to start itself.

## Using it as a library

### Records — `hospitalms.entities`

Dataclasses `User`, `Patient` (with `Patient.from_user`), `Staff` (with its
`Clearance` levels `ENTRY` to `ADMIN`), `Room`, `InventoryItem`, `Procedure`
and `Schedule`. Dates are integers in `YYYYMMDD` form.

### Accounts — `hospitalms.accounts`

`UserDatabase(path="./database/users.txt")` offers:

- `contains(login)`: whether a record starts with that login;
- `check_password(login, password)` and `verify(login, password)`: whether a
  record holds that login and password;
- `store(user)`: appends the user unless the login is taken, and returns
  whether it was written.

`format_record(user)` returns the line that is written for a user.

```python
from hospitalms.accounts import UserDatabase
from hospitalms.entities import Patient

db = UserDatabase("users.txt")
db.store(Patient("jdoe", "password", "Doe", "Jane", 19880814, "f"))
db.check_password("jdoe", "password")   # True
```

### Rooms and schedules — `hospitalms.reports`

- `book_room(number, rooms)` and `return_room(number, rooms)` mark a room in a
  mapping of room number to `Room` as taken or available (`KeyError` for an
  unknown room).
- `add_event(schedules, time, staff, patient, room, procedure)` appends a
  `Schedule` built from copies of its arguments and returns it.
- `generate_room_report(rooms)` and `generate_schedule_report(schedules)`
  return the reports as text; `display_room_report` and
  `display_schedule_report` write them under a heading.

```python
from hospitalms.entities import Room
from hospitalms.reports import book_room, generate_room_report

rooms = {101: Room(101, 1, True), 303: Room(303, 3, True)}
book_room(101, rooms)
print(generate_room_report(rooms), end="")
# Room: 101 Floor: 1 Availability: Unavailable
# Room: 303 Floor: 3 Availability: Available
```

### Bills — `hospitalms.billing`

`BillGenerator.patient_info(patient)` returns the patient and insurance block;
`BillGenerator.procedures(procedures)` returns the procedure lines and the
balance, adding their costs to the generator's `total`.
`display_bill(patient, procedures)` writes a complete bill.

### Inventory — `hospitalms.inventory` and `hospitalms.inventory_menu`

- `InventoryStore` reads and writes the inventory file: `contains`, `append`,
  `load`, `save`.
- `InventoryManager` adds items (`add_item`, refusing a name that exists),
  lists them (`format_inventory`) and changes them (`modify_count`,
  `modify_threshold`, `modify_both`, each returning how many items changed).
  Negative quantities and names that are empty or contain whitespace raise
  `ValueError`.
- `place_order(items, rng=None)` returns a random order number when any item
  has a count below 500, and `None` otherwise.
- `InventoryMenu(...).run()` is the interactive inventory menu.

### Patient and staff menus — `hospitalms.interfaces`

`ScheduleFile` reads and edits the schedule file (`entries`, `add`, `remove`,
`appointments_for`). `PatientInterface(patient_name).display_main_menu()`
lets a patient list their appointments; `StaffInterface().display_main_menu()`
lets staff view, add and remove schedule entries.

### Start menu — `hospitalms.main_menu`

`MainMenu` runs the menus described under *Running*, from any of its screens:
`start`, `login_menu`, `account_create_menu`, `generic_user_creation`,
`patient_account_creation`, and `login_interface`, a plain login prompt that
repeats until the login and password match. `parse_birthdate(text, today)`
checks a `YYYYMMDD` date and returns it as an integer, raising `ValueError`
otherwise. `main()` is the entry point of the `hospitalms` command.

The menu classes take `stdin` and `out` streams, so they can be driven from
files or strings.

## Tests

```
pip install .[test]
pytest
```