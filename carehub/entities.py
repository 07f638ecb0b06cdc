"""Records kept by the hospital database."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from enum import Enum

from carehub.linked_list import LinkedList, UniqueAttribute
from carehub.priority_queue import PriorityQueue
from carehub.sha256 import sha256_hex
from carehub.stack import Stack


def hash_password(password: str) -> str:
    """Return the hex SHA-256 digest under which a password is stored."""
    return sha256_hex(password.encode("utf-8"))


class Role(Enum):
    PATIENT = "Patient"
    DOCTOR = "Doctor"
    PHARMACIST = "Pharmacist"
    TRIAGE_SUPERVISOR = "TriageSupervisor"
    EMERGENCY_DOCTOR = "EmergencyDoctor"
    ADMIN = "Admin"


@functools.total_ordering
@dataclass(eq=False)
class User(UniqueAttribute):
    """An account; users are identified and ordered by username."""

    username: str
    password_hash: str
    full_name: str
    ssn: str
    age: int
    role: Role

    def uattr(self) -> str:
        return self.username

    def verify_password(self, password: str) -> bool:
        """Return True if ``password`` hashes to the stored digest."""
        return self.password_hash == hash_password(password)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.username == other.username

    def __lt__(self, other: "User") -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.username < other.username


@dataclass
class Clinic(UniqueAttribute):
    """A clinic and the usernames of its doctors."""

    name: str
    doctors: LinkedList[str] = field(default_factory=LinkedList)

    def uattr(self) -> str:
        return self.name


@functools.total_ordering
@dataclass(eq=False)
class Patient(UniqueAttribute):
    """A queued patient; patients compare by priority alone."""

    name: str
    priority: int

    def uattr(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Patient):
            return NotImplemented
        return self.priority == other.priority

    def __lt__(self, other: "Patient") -> bool:
        if not isinstance(other, Patient):
            return NotImplemented
        return self.priority < other.priority


@dataclass
class DoctorsList(UniqueAttribute):
    """A doctor's queue of patients, lowest priority value first."""

    doctor: str
    patients: PriorityQueue[Patient] = field(default_factory=PriorityQueue)

    def uattr(self) -> str:
        return self.doctor


@dataclass
class Prescription(UniqueAttribute):
    """Medications prescribed to a patient, most recent on top."""

    patient_name: str
    medications: Stack[str] = field(default_factory=Stack)

    def uattr(self) -> str:
        return self.patient_name


@functools.total_ordering
@dataclass(eq=False)
class Drug(UniqueAttribute):
    """A stocked drug; drugs are identified and ordered by id."""

    id: int
    name: str
    price: float
    quantity: int

    def uattr(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Drug):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: "Drug") -> bool:
        if not isinstance(other, Drug):
            return NotImplemented
        return self.id < other.id


@dataclass
class DrugGroup(UniqueAttribute):
    """A named group of drug ids."""

    name: str
    drugs: LinkedList[int] = field(default_factory=LinkedList)

    def uattr(self) -> str:
        return self.name


@dataclass
class Ambulance(UniqueAttribute):
    """An ambulance, its home hospital and where it is now."""

    name: str
    hospital: str
    location: str

    def uattr(self) -> str:
        return self.name