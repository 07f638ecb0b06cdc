"""The hospital's in-memory database and its on-disk snapshot."""

from __future__ import annotations

import pickle
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from carehub.bst import TreeNode, remove_drug_by_id
from carehub.entities import (
    Ambulance,
    Clinic,
    DoctorsList,
    Drug,
    DrugGroup,
    Prescription,
    User,
)
from carehub.hash_map import HashMap
from carehub.linked_list import LinkedList
from carehub.map import Graph

DEFAULT_FILENAME = "database.bin"

PathLike = Union[str, Path]


class AlreadyExistsError(ValueError):
    """Raised when inserting a record whose identifier is already taken."""


def _insert_unique(
    records: Optional[LinkedList], record, key: str, message: str
) -> LinkedList:
    if records is None:
        records = LinkedList()
    elif records.get_by_uniq_attr(key) is not None:
        raise AlreadyExistsError(message)
    records.insert(record)
    return records


@dataclass
class Database:
    """All records of the hospital, kept in the package's own data structures."""

    users_data: Optional[TreeNode[User]] = None
    clinics_data: Optional[LinkedList[Clinic]] = None
    doctors_data: Optional[LinkedList[DoctorsList]] = None
    prescriptions_data: Optional[LinkedList[Prescription]] = None
    drugs_data: Optional[TreeNode[Drug]] = None
    drug_groups: Optional[LinkedList[DrugGroup]] = None
    map: Graph = field(default_factory=Graph)
    ambulances_data: Optional[LinkedList[Ambulance]] = None
    logs_data: HashMap[str, str] = field(default_factory=HashMap)

    # --- inserting -------------------------------------------------------

    def insert_user(self, user: User) -> None:
        """Add a user; raises AlreadyExistsError if the username is taken."""
        if self.users_data is None:
            self.users_data = TreeNode(user)
            return
        if self.users_data.get_by_uniq_attr(user.username) is not None:
            raise AlreadyExistsError("Username already exists")
        self.users_data.insert(user)

    def insert_clinic(self, clinic: Clinic) -> None:
        """Add a clinic; raises AlreadyExistsError if the name is taken."""
        self.clinics_data = _insert_unique(
            self.clinics_data, clinic, clinic.name, "Clinic name already exists"
        )

    def insert_doctors_list(self, doctors_list: DoctorsList) -> None:
        """Add a doctor's patient queue; raises AlreadyExistsError if one exists."""
        self.doctors_data = _insert_unique(
            self.doctors_data,
            doctors_list,
            doctors_list.doctor,
            "Doctors list already exists",
        )

    def insert_prescription(self, prescription: Prescription) -> None:
        """Add a prescription; several may exist for the same patient."""
        if self.prescriptions_data is None:
            self.prescriptions_data = LinkedList()
        self.prescriptions_data.insert(prescription)

    def insert_drug(self, drug: Drug) -> None:
        """Add a drug and rebalance; raises AlreadyExistsError on a taken id or name."""
        if self.drugs_data is None:
            self.drugs_data = TreeNode(drug)
            return
        if (
            self.drugs_data.get_drug_by_id(drug.id) is not None
            or self.drugs_data.get_drug_by_name(drug.name) is not None
        ):
            raise AlreadyExistsError("Drug with the same id or name already exists")
        self.drugs_data.insert(drug)
        self.drugs_data.balance()

    def insert_drug_group(self, drug_group: DrugGroup) -> None:
        """Add a drug group; raises AlreadyExistsError if the name is taken."""
        self.drug_groups = _insert_unique(
            self.drug_groups, drug_group, drug_group.name, "Drug group already exists"
        )

    def insert_ambulance(self, ambulance: Ambulance) -> None:
        """Add an ambulance; raises AlreadyExistsError if the name is taken."""
        self.ambulances_data = _insert_unique(
            self.ambulances_data, ambulance, ambulance.name, "Ambulance already exists"
        )

    def insert_log(self, data_str: str) -> None:
        """Record a log line under the current local date and time."""
        self.logs_data.insert(str(datetime.now().astimezone()), data_str)

    # --- looking up ------------------------------------------------------

    def get_user(self, username: str) -> Optional[User]:
        if self.users_data is None:
            return None
        return self.users_data.get_by_uniq_attr(username)

    def get_doctors_list(self, doctor: str) -> Optional[DoctorsList]:
        if self.doctors_data is None:
            return None
        return self.doctors_data.get_by_uniq_attr(doctor)

    def get_clinic(self, name: str) -> Optional[Clinic]:
        if self.clinics_data is None:
            return None
        return self.clinics_data.get_by_uniq_attr(name)

    def get_prescription(self, patient_name: str) -> Optional[Prescription]:
        if self.prescriptions_data is None:
            return None
        return self.prescriptions_data.get_by_uniq_attr(patient_name)

    def get_drug_by_id(self, drug_id: int) -> Optional[Drug]:
        if self.drugs_data is None:
            return None
        return self.drugs_data.get_drug_by_id(drug_id)

    def get_drug_by_name(self, name: str) -> Optional[Drug]:
        if self.drugs_data is None:
            return None
        return self.drugs_data.get_drug_by_name(name)

    def get_drug_group(self, name: str) -> Optional[DrugGroup]:
        if self.drug_groups is None:
            return None
        return self.drug_groups.get_by_uniq_attr(name)

    def get_ambulance(self, name: str) -> Optional[Ambulance]:
        if self.ambulances_data is None:
            return None
        return self.ambulances_data.get_by_uniq_attr(name)

    # --- removing --------------------------------------------------------

    def remove_prescription(self, patient_name: str) -> bool:
        if self.prescriptions_data is None:
            return False
        return self.prescriptions_data.remove_by_uniq_attr(patient_name)

    def remove_drug(self, drug_id: int) -> None:
        """Remove the drug with ``drug_id`` if present."""
        if self.drugs_data is not None:
            self.drugs_data = remove_drug_by_id(self.drugs_data, drug_id)

    def remove_drug_group(self, name: str) -> bool:
        if self.drug_groups is None:
            return False
        return self.drug_groups.remove_by_uniq_attr(name)

    def remove_ambulance(self, name: str) -> bool:
        if self.ambulances_data is None:
            return False
        return self.ambulances_data.remove_by_uniq_attr(name)

    # --- persistence -----------------------------------------------------

    def commit(self) -> None:
        """Save the database to the default file in the working directory."""
        self.save_to_file(DEFAULT_FILENAME)

    def save_to_file(self, filename: PathLike) -> None:
        with open(filename, "wb") as handle:
            pickle.dump(self, handle, protocol=pickle.HIGHEST_PROTOCOL)

    @classmethod
    def load_from_file(cls, filename: PathLike) -> "Database":
        """Read a database saved by save_to_file; raises OSError if unreadable."""
        with open(filename, "rb") as handle:
            database = pickle.load(handle)
        if not isinstance(database, cls):
            raise TypeError(f"{filename} does not hold a {cls.__name__}")
        return database