"""Healthcare lookup: patients, prescriptions and per-patient prescription lists."""

from .app import HealthSystemApp, parse_patient_id
from .models import Patient, Prescription

__all__ = ["HealthSystemApp", "parse_patient_id", "Patient", "Prescription"]
