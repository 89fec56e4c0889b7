from datetime import datetime

from pydantic import Field

from crud_apps.core.entity import Entity
from crud_apps.core.formatting import format_date


class Patient(Entity):
    name: str = Field(..., description="Full name")
    age: int = Field(..., ge=0, description="Age in years")
    gender: str = Field(..., description="Gender as recorded at intake")

    def __str__(self) -> str:
        return f"{self.name} (ID: {self.id}, Age: {self.age}, Gender: {self.gender})"


class Prescription(Entity):
    patient_id: int = Field(..., description="Id of the patient the prescription was issued to")
    medication_name: str = Field(..., description="Prescribed medication")
    date_issued: datetime = Field(..., description="Issue date")

    def __str__(self) -> str:
        return f"{self.medication_name} (Issued: {format_date(self.date_issued)})"
