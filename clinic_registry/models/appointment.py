from dataclasses import dataclass
from typing import Optional

from ..core.errors import ClinicError, ErrorKind, Result
from ..core.validators import validate_mobile, validate_not_blank, validate_time_slot
from .professional import HealthProfessional, format_professional_info

@dataclass(frozen=True)
class Appointment:
    patient_name: str
    patient_mobile: str
    time_slot: str  # HH:mm, 24-hour

    # Shared with the directory and other appointments, never copied
    doctor: HealthProfessional

    def conflicts_with(self, doctor: HealthProfessional, time_slot: str) -> bool:
        """Same doctor id booked at the same time slot."""
        return self.doctor.id == doctor.id and self.time_slot == time_slot

    def __repr__(self):
        return f"<Appointment(patient='{self.patient_name}', doctor_id={self.doctor.id}, time_slot='{self.time_slot}')>"

def _validate_doctor(doctor: Optional[HealthProfessional]) -> Optional[ClinicError]:
    if doctor is None:
        return ClinicError(
            ErrorKind.MISSING_REFERENCE,
            "An appointment cannot be created without selecting a doctor",
            "doctor"
        )
    return None

def new_appointment(
    patient_name: str,
    patient_mobile: str,
    time_slot: str,
    doctor: Optional[HealthProfessional]
) -> Result[Appointment]:
    """Validate name, mobile, time slot and doctor in that order."""
    error = (
        validate_not_blank(patient_name, "patient_name", "The patient's name cannot be left blank")
        or validate_mobile(patient_mobile)
        or validate_time_slot(time_slot)
        or _validate_doctor(doctor)
    )
    if error:
        return Result(error=error)

    return Result.success(Appointment(
        patient_name=patient_name,
        patient_mobile=patient_mobile,
        time_slot=time_slot,
        doctor=doctor
    ))

def format_appointment_info(appointment: Appointment) -> str:
    return "\n".join([
        "=== Appointment Details ===",
        f"Patient: {appointment.patient_name} | Mobile: {appointment.patient_mobile}",
        f"Appointment Time: {appointment.time_slot} | Assigned Doctor:",
        format_professional_info(appointment.doctor),
        "=================",
    ])

def print_appointment_info(appointment: Appointment) -> None:
    print(format_appointment_info(appointment))
