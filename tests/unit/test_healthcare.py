"""Unit tests for the healthcare lookup."""
from datetime import datetime

import pytest

from crud_apps.healthcare.app import (
    NO_PRESCRIPTIONS_MESSAGE,
    HealthSystemApp,
    parse_patient_id,
)
from crud_apps.healthcare.models import Patient, Prescription


@pytest.fixture
def app():
    app = HealthSystemApp()
    app.seed_data()
    app.build_prescription_map()
    return app


class TestParsePatientId:
    """Tests for parse_patient_id."""

    @pytest.mark.parametrize("raw, expected", [("1", 1), (" 42 \n", 42), ("-3", -3)])
    def test_valid(self, raw, expected):
        assert parse_patient_id(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", "one", None])
    def test_invalid(self, raw):
        assert parse_patient_id(raw) is None


class TestPrescriptionMap:
    def test_grouped_by_patient_in_insertion_order(self, app):
        assert [p.id for p in app.get_prescriptions_for_patient(1)] == [101, 103]
        assert [p.id for p in app.get_prescriptions_for_patient(2)] == [102, 105]
        assert [p.id for p in app.get_prescriptions_for_patient(3)] == [104]

    def test_unknown_patient_has_no_prescriptions(self, app):
        assert app.get_prescriptions_for_patient(99) == []

    def test_rebuild_reflects_removed_prescription(self, app):
        app.prescriptions.remove(103)
        app.build_prescription_map()

        assert [p.id for p in app.get_prescriptions_for_patient(1)] == [101]

    def test_returned_list_is_a_copy(self, app):
        app.get_prescriptions_for_patient(1).clear()

        assert len(app.get_prescriptions_for_patient(1)) == 2


class TestConsoleOutput:
    def test_print_all_patients(self, app, capsys):
        app.print_all_patients()

        out = capsys.readouterr().out
        assert "=== All Patients ===" in out
        assert "Ama Mensah (ID: 1, Age: 29, Gender: Female)" in out
        assert "Kwame Boateng (ID: 2, Age: 42, Gender: Male)" in out

    def test_print_prescriptions(self, app, capsys):
        app.print_prescriptions_for_patient(2)

        out = capsys.readouterr().out
        assert "=== Prescriptions for Patient ID 2 ===" in out
        assert "Paracetamol (Issued: " in out
        assert "Cetirizine (Issued: " in out

    def test_print_prescriptions_none_found(self, app, capsys):
        app.print_prescriptions_for_patient(99)

        assert NO_PRESCRIPTIONS_MESSAGE in capsys.readouterr().out


class TestModels:
    def test_prescription_display(self):
        p = Prescription(id=1, patient_id=1, medication_name="Ibuprofen", date_issued=datetime(2026, 1, 9))

        assert str(p) == "Ibuprofen (Issued: 09-Jan-2026)"

    def test_patients_have_no_quantity_field(self, app):
        with pytest.raises(TypeError):
            app.patients.update_quantity(1, 30)

        assert app.patients.get_by_id(1).age == 29

    def test_patient_age_must_be_non_negative(self):
        with pytest.raises(ValueError):
            Patient(id=1, name="X", age=-1, gender="Male")
