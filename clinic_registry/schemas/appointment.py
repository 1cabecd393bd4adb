from pydantic import BaseModel
from typing import Optional

from ..models.appointment import Appointment
from .professional import ProfessionalResponse

class AppointmentCreate(BaseModel):
    patient_name: Optional[str] = None
    patient_mobile: Optional[str] = None
    time_slot: Optional[str] = None
    doctor_id: Optional[int] = None

class AppointmentResponse(BaseModel):
    patient_name: str
    patient_mobile: str
    time_slot: str
    doctor: ProfessionalResponse

    @classmethod
    def from_appointment(cls, appointment: Appointment) -> "AppointmentResponse":
        return cls(
            patient_name=appointment.patient_name,
            patient_mobile=appointment.patient_mobile,
            time_slot=appointment.time_slot,
            doctor=ProfessionalResponse.from_professional(appointment.doctor)
        )

class CancellationResponse(BaseModel):
    message: str
    patient_mobile: str
