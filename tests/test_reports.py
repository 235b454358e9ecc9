from datetime import date, datetime, timedelta

from medibook.models.appointment import Appointment, AppointmentStatus
from medibook.models.doctor import Doctor
from medibook.models.patient import Gender, Patient
from medibook.services.report_service import ReportService

NOW = datetime(2024, 6, 10, 10, 0)
TODAY = NOW.date()


def add_appointment(db, day, status=AppointmentStatus.SCHEDULED, time="09:00"):
    db.add(Appointment(
        patient_id=1, doctor_id=1, date=day, time=time, reason="checkup", status=status
    ))


class TestReportService:

    def test_empty_database(self, db):
        stats = ReportService(db).detailed(now=NOW)

        assert stats.total_patients == 0
        assert stats.total_doctors == 0
        assert stats.total_appointments == 0
        assert stats.today_appointments == 0
        assert stats.appointments_by_status == {}
        assert stats.last_7_days_appointments == {}

    def test_summary_counts(self, db):
        db.add(Patient(name="Ann", age=30, gender=Gender.FEMALE, contact="555", address="1 Rd"))
        db.add(Doctor(name="Dr. B", specialization="GP", experience=3, contact="1", email="b@example.com"))
        add_appointment(db, TODAY)
        add_appointment(db, TODAY + timedelta(days=3))
        db.commit()

        summary = ReportService(db).summary()
        assert (summary.total_patients, summary.total_doctors, summary.total_appointments) == (1, 1, 2)

    def test_today_and_status_breakdown(self, db):
        """Three appointments today: one scheduled, two completed."""
        add_appointment(db, TODAY, AppointmentStatus.SCHEDULED)
        add_appointment(db, TODAY, AppointmentStatus.COMPLETED, time="10:00")
        add_appointment(db, TODAY, AppointmentStatus.COMPLETED, time="11:00")
        db.commit()

        stats = ReportService(db).detailed(now=NOW)
        assert stats.today_appointments == 3
        assert stats.appointments_by_status == {"scheduled": 1, "completed": 2}

    def test_last_7_days_window(self, db):
        """The rollup covers today and the seven days before it, ascending."""
        add_appointment(db, TODAY, AppointmentStatus.SCHEDULED)
        add_appointment(db, TODAY, AppointmentStatus.COMPLETED)
        add_appointment(db, TODAY, AppointmentStatus.COMPLETED)
        add_appointment(db, TODAY - timedelta(days=7))
        add_appointment(db, TODAY - timedelta(days=2), AppointmentStatus.NO_SHOW)
        add_appointment(db, TODAY - timedelta(days=8), AppointmentStatus.CANCELLED)
        add_appointment(db, TODAY + timedelta(days=1), AppointmentStatus.NO_SHOW)
        db.commit()

        stats = ReportService(db).detailed(now=NOW)
        rollup = stats.last_7_days_appointments
        assert rollup == {"2024-06-03": 1, "2024-06-08": 1, "2024-06-10": 3}
        assert list(rollup) == sorted(rollup)

        # Aggregation consistency with a single writer
        assert stats.total_appointments == sum(stats.appointments_by_status.values())
        in_window = [
            a for a in db.query(Appointment).all()
            if TODAY - timedelta(days=7) <= a.date <= TODAY
        ]
        assert sum(rollup.values()) == len(in_window)
        assert stats.appointments_by_status == {
            "scheduled": 2, "completed": 2, "cancelled": 1, "no_show": 2
        }


class TestStatsEndpoints:

    def test_stats(self, client, patient, doctor, book):
        book("2024-06-10")

        response = client.get("/api/stats")
        assert response.status_code == 200
        assert response.json() == {
            "totalPatients": 1,
            "totalDoctors": 1,
            "totalAppointments": 1
        }

    def test_detailed_stats(self, client, book):
        """Today's three appointments show up in every figure."""
        today = date.today()
        book(today, time="09:00")
        completed = [book(today, time="10:00"), book(today, time="11:00")]
        for appointment in completed:
            client.patch(f"/api/appointments/{appointment['id']}/status", json={"status": "completed"})

        response = client.get("/api/stats/detailed")
        assert response.status_code == 200

        data = response.json()
        assert data["totalAppointments"] == 3
        assert data["todayAppointments"] == 3
        assert data["appointmentsByStatus"] == {"scheduled": 1, "completed": 2}
        assert data["last7DaysAppointments"] == {today.isoformat(): 3}
