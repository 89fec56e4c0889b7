"""
Healthcare lookup application.

Holds patients and prescriptions in two repositories and groups
prescriptions by patient for lookup.
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from crud_apps.core.formatting import print_header
from crud_apps.core.repository import KeyedRepository
from crud_apps.healthcare.models import Patient, Prescription

logger = logging.getLogger(__name__)

NO_PRESCRIPTIONS_MESSAGE = "No prescriptions found for this patient."
INVALID_INPUT_MESSAGE = "Invalid input. Please enter a valid Patient ID."


def parse_patient_id(raw: Optional[str]) -> Optional[int]:
    """
    Parse a patient id typed by the user.

    Surrounding whitespace and a leading sign are accepted, anything else
    that is not an integer yields None.
    """
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


class HealthSystemApp:

    def __init__(self):
        self.patients: KeyedRepository[Patient] = KeyedRepository(quantity_field=None, name="patients")
        self.prescriptions: KeyedRepository[Prescription] = KeyedRepository(
            quantity_field=None, name="prescriptions"
        )
        self._prescription_map: Dict[int, List[Prescription]] = {}

    def seed_data(self) -> None:
        self.patients.add(Patient(id=1, name="Ama Mensah", age=29, gender="Female"))
        self.patients.add(Patient(id=2, name="Kwame Boateng", age=42, gender="Male"))
        self.patients.add(Patient(id=3, name="Akua Asante", age=35, gender="Female"))

        now = datetime.now()
        self.prescriptions.add(Prescription(id=101, patient_id=1, medication_name="Amoxicillin", date_issued=now - timedelta(days=5)))
        self.prescriptions.add(Prescription(id=102, patient_id=2, medication_name="Paracetamol", date_issued=now - timedelta(days=3)))
        self.prescriptions.add(Prescription(id=103, patient_id=1, medication_name="Ibuprofen", date_issued=now - timedelta(days=1)))
        self.prescriptions.add(Prescription(id=104, patient_id=3, medication_name="Vitamin C", date_issued=now))
        self.prescriptions.add(Prescription(id=105, patient_id=2, medication_name="Cetirizine", date_issued=now - timedelta(days=2)))
        logger.info(f"Seeded {len(self.patients)} patients and {len(self.prescriptions)} prescriptions")

    def build_prescription_map(self) -> Dict[int, List[Prescription]]:
        """Group prescriptions by patient id, rebuilding the map from scratch."""
        self._prescription_map = {}
        for prescription in self.prescriptions.list_all():
            self._prescription_map.setdefault(prescription.patient_id, []).append(prescription)
        return self._prescription_map

    def get_prescriptions_for_patient(self, patient_id: int) -> List[Prescription]:
        return list(self._prescription_map.get(patient_id, []))

    def print_all_patients(self) -> None:
        print_header("All Patients")
        for patient in self.patients.list_all():
            print(patient)

    def print_prescriptions_for_patient(self, patient_id: int) -> None:
        print_header(f"Prescriptions for Patient ID {patient_id}")
        prescriptions = self.get_prescriptions_for_patient(patient_id)
        if not prescriptions:
            print(NO_PRESCRIPTIONS_MESSAGE)
            return
        for prescription in prescriptions:
            print(prescription)
