from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from medibook.core.exceptions import StorageError
from medibook.models.appointment import Appointment
from medibook.models.doctor import Doctor
from medibook.models.patient import Gender, Patient
from medibook.services.doctor_service import DoctorService
from medibook.services.integrity_service import ReferentialIntegrityManager
from medibook.services.patient_service import PatientService
from tests.conftest import TestingSessionLocal


@pytest.fixture
def clinic(db):
    """Two patients and two doctors with a grid of appointments between them."""
    patients = [
        Patient(name="Ann", age=30, gender=Gender.FEMALE, contact="1", address="1 Rd"),
        Patient(name="Bob", age=41, gender=Gender.MALE, contact="2", address="2 Rd"),
    ]
    doctors = [
        Doctor(name="Dr. C", specialization="GP", experience=5, contact="3", email="c@example.com"),
        Doctor(name="Dr. D", specialization="ENT", experience=9, contact="4", email="d@example.com"),
    ]
    db.add_all(patients + doctors)
    db.commit()

    for day, patient in enumerate(patients, start=1):
        for doctor in doctors:
            db.add(Appointment(
                patient_id=patient.id, doctor_id=doctor.id,
                date=date(2024, 6, day), time="09:00", reason="visit"
            ))
    db.commit()
    return {"patients": patients, "doctors": doctors}


def pairs(db):
    return sorted((a.patient_id, a.doctor_id) for a in db.query(Appointment).all())


class TestCascade:

    def test_delete_patient_removes_only_their_appointments(self, db, clinic):
        ann, bob = clinic["patients"]
        c, d = clinic["doctors"]

        removed = PatientService(db).delete(ann.id)

        assert removed == 2
        assert pairs(db) == [(bob.id, c.id), (bob.id, d.id)]

    def test_delete_doctor_removes_only_their_appointments(self, db, clinic):
        ann, bob = clinic["patients"]
        c, d = clinic["doctors"]

        removed = DoctorService(db).delete(d.id)

        assert removed == 2
        assert pairs(db) == [(ann.id, c.id), (bob.id, c.id)]

    def test_remove_for_unknown_parent_is_a_no_op(self, db, clinic):
        assert ReferentialIntegrityManager(db).remove_patient_appointments(999) == 0
        assert len(pairs(db)) == 4

    def test_failed_cascade_is_not_compensated(self, db, clinic, monkeypatch):
        """If the bulk delete fails the parent stays deleted and its appointments remain."""
        ann = clinic["patients"][0]
        ann_id = ann.id
        original_query = db.query

        def failing_query(*entities):
            if entities and entities[0] is Appointment:
                raise OperationalError("DELETE FROM appointments", {}, Exception("disk I/O error"))
            return original_query(*entities)

        monkeypatch.setattr(db, "query", failing_query)

        with pytest.raises(StorageError) as exc_info:
            PatientService(db).delete(ann_id)
        assert exc_info.value.status_code == 500
        assert "disk I/O error" in exc_info.value.detail

        check = TestingSessionLocal()
        try:
            assert check.query(Patient).filter(Patient.id == ann_id).first() is None
            orphans = check.query(Appointment).filter(Appointment.patient_id == ann_id).count()
            assert orphans == 2
        finally:
            check.close()
