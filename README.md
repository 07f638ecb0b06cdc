# carehub

A small library for keeping hospital records: users and their roles, clinics,
doctors' patient queues, prescriptions, a drug inventory with drug groups,
ambulances and a map of locations joined by routes. All of it is held in one
`Database` object (`carehub.database`) that can be written to a file and read
back.

## Modules

The records are defined in `carehub.entities`:

- `Role`: `PATIENT`, `DOCTOR`, `PHARMACIST`, `TRIAGE_SUPERVISOR`, `EMERGENCY_DOCTOR`, `ADMIN`
- `User`: identified and ordered by `username`; the password is stored only as
  a hex SHA-256 digest (`hash_password`) and checked with `verify_password`
- `Clinic`, `DoctorsList` (a doctor's `PriorityQueue` of `Patient`s, lowest
  priority value first), `Prescription` (a `Stack` of medication names),
  `Drug` (identified and ordered by `id`), `DrugGroup` (a list of drug ids)
  and `Ambulance`

They sit on simple data structures that ship with the package and can be used
on their own:

- `carehub.linked_list.LinkedList`: a singly linked list, newest item first
- `carehub.stack.Stack`: a last-in, first-out stack; iteration runs top to bottom
- `carehub.hash_map.HashMap`: a map made of chained buckets
- `carehub.max_heap.MaxHeap`: a binary max-heap holding at most 100 items by
  default; pushing onto a full heap raises `HeapOverflowError`
- `carehub.priority_queue.PriorityQueue`: gives back the smallest item first
- `carehub.trie.Trie`: stores words made of the letters a-z and completes them
  from a prefix (`auto_complete`); any other character raises `ValueError`
- `carehub.bst.TreeNode`: a binary search tree that can rebalance itself, with
  drug lookups by id and name and `remove_drug_by_id`
- `carehub.map.Graph`: a directed map of locations (`LocationType`) holding
  named objects (`MapObject`), with `move_object`, `shortest_path`,
  `format_graph` and `print_graph`
- `carehub.sha256.Sha256` and `sha256_hex`: a SHA-256 digest

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from carehub.database import Database
from carehub.entities import Drug, Role, User, hash_password
from carehub.map import LocationType

db = Database()

password = "password"
db.insert_user(User("doc1", hash_password(password), "Dr. Example", "000", 30, Role.DOCTOR))
assert db.get_user("doc1").verify_password(password)

db.insert_drug(Drug(0, "Aspirin", 32.99, 50))
db.insert_drug(Drug(1, "Ibuprofen", 12.99, 100))
print(db.get_drug_by_name("Ibuprofen").quantity)

db.map.add_node("Hospital A", LocationType.HOSPITAL)
db.map.add_node("Home A", LocationType.HOME)
db.map.add_edge("Hospital A", "Home A")
print(list(db.map.shortest_path("Hospital A", "Home A")))

db.insert_log("ambulance sent")

db.save_to_file("records.db")
again = Database.load_from_file("records.db")
```

An insert whose username, clinic name, doctor's list, drug id or name, drug
group or ambulance name is already taken raises `AlreadyExistsError`.
Prescriptions may be inserted more than once for the same patient.

`Database.commit()` saves to `database.bin` in the working directory.
Files are written with `pickle`, so only load files you wrote yourself.

Passwords are kept only as SHA-256 hex digests:

```python
from carehub.sha256 import sha256_hex

sha256_hex(b"hello world")
# 'b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9'
```

## What it does not do

carehub is a library only. It has no command, no interactive menus, and no
login or sign-up flow for the different roles; it does not book appointments,
dispense medications or dispatch ambulances by itself. Those are left to the
program that uses the `Database` and the records above.