import pytest

from carehub.entities import (
    Ambulance,
    Clinic,
    DoctorsList,
    Drug,
    DrugGroup,
    Patient,
    Prescription,
    Role,
    User,
    hash_password,
)
from carehub.linked_list import LinkedList


def make_user(username, role=Role.PATIENT):
    password = "password"
    return User(username, hash_password(password), "Test Person", "id-placeholder", 30, role)


def test_hash_password_matches_known_digest():
    assert hash_password("hello world") == (
        "b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9"
    )
    assert hash_password("") == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_verify_password():
    user = make_user("alice")
    password = "password"
    assert user.verify_password(password) is True
    assert user.verify_password("secret") is False


def test_user_identity_and_order_by_username():
    a = make_user("alice", Role.DOCTOR)
    a2 = make_user("alice", Role.ADMIN)
    b = make_user("bob")
    assert a == a2
    assert a < b
    assert sorted([b, a]) == [a, b]
    assert a.uattr() == "alice"


def test_role_from_value():
    assert Role("TriageSupervisor") is Role.TRIAGE_SUPERVISOR
    with pytest.raises(ValueError):
        Role("Nurse")


def test_patient_compares_by_priority():
    low = Patient("Ann", 1)
    high = Patient("Ben", 5)
    assert low < high
    assert Patient("Cat", 5) == high
    assert high.uattr() == "Ben"


def test_doctors_list_queue_orders_patients():
    doctors_list = DoctorsList("doc1")
    for patient in (Patient("Ann", 3), Patient("Ben", 1), Patient("Cat", 2)):
        doctors_list.patients.push(patient)
    assert doctors_list.uattr() == "doc1"
    assert [doctors_list.patients.pop().name for _ in range(3)] == ["Ben", "Cat", "Ann"]
    assert doctors_list.patients.is_empty()


def test_prescription_medications_stack():
    prescription = Prescription("Ann")
    prescription.medications.push("Aspirin")
    prescription.medications.push("Ibuprofen")
    assert prescription.uattr() == "Ann"
    assert prescription.medications.pop() == "Ibuprofen"
    assert prescription.medications.pop() == "Aspirin"


def test_drug_identity_and_order_by_id():
    a = Drug(0, "Aspirin", 32.99, 50)
    b = Drug(1, "Ibuprofen", 12.99, 100)
    assert Drug(0, "Other", 1.0, 1) == a
    assert a < b
    assert sorted([b, a]) == [a, b]
    assert a.uattr() == "Aspirin"


def test_clinic_and_drug_group_defaults():
    clinic = Clinic("Clinic A")
    group = DrugGroup("Painkiller", LinkedList([0, 1, 2]))
    assert clinic.uattr() == "Clinic A"
    assert len(clinic.doctors) == 0
    assert group.uattr() == "Painkiller"
    assert 1 in group.drugs
    assert 7 not in group.drugs


def test_ambulance_uattr():
    ambulance = Ambulance("Ambulance A", "Hospital A", "Other B")
    assert ambulance.uattr() == "Ambulance A"
    assert ambulance.location == "Other B"


def test_entities_in_linked_list_lookup():
    users = LinkedList([make_user("alice"), make_user("bob")])
    assert users.get_by_uniq_attr("bob").username == "bob"
    assert users.remove_by_uniq_attr("alice") is True
    assert users.get_by_uniq_attr("alice") is None