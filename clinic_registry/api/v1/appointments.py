from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from typing import List

from ...api.deps import ClinicHTTPError, NotFoundError, get_directory, get_registry
from ...schemas.appointment import (
    AppointmentCreate, AppointmentResponse, CancellationResponse
)
from ...services.appointment_service import AppointmentRegistry
from ...services.professional_service import ProfessionalDirectory

router = APIRouter(prefix="/appointments", tags=["Appointments"])

@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
def create_appointment(
    data: AppointmentCreate,
    registry: AppointmentRegistry = Depends(get_registry),
    directory: ProfessionalDirectory = Depends(get_directory)
):
    """Book a patient with a doctor at a time slot."""
    # An unknown doctor id surfaces as a missing reference
    doctor = directory.get(data.doctor_id) if data.doctor_id is not None else None

    result = registry.create_appointment(
        data.patient_name, data.patient_mobile, data.time_slot, doctor
    )
    if not result.ok:
        raise ClinicHTTPError(result.error)

    return AppointmentResponse.from_appointment(result.value)

@router.get("", response_model=List[AppointmentResponse])
def list_appointments(
    registry: AppointmentRegistry = Depends(get_registry)
):
    """Appointments in booking order."""
    return [AppointmentResponse.from_appointment(a) for a in registry.appointments()]

@router.get("/report", response_class=PlainTextResponse)
def appointments_report(
    registry: AppointmentRegistry = Depends(get_registry)
):
    """Plain-text listing of every appointment."""
    return "\n".join(registry.list_appointments())

@router.delete("/{mobile}", response_model=CancellationResponse)
def cancel_appointment(
    mobile: str,
    registry: AppointmentRegistry = Depends(get_registry)
):
    """Cancel the first appointment booked with this mobile number."""
    result = registry.cancel_appointment(mobile)
    if not result.ok:
        raise ClinicHTTPError(result.error)
    if not result.value:
        raise NotFoundError(f"No appointment found with mobile number: {mobile}")

    return CancellationResponse(
        message="Appointment canceled successfully",
        patient_mobile=mobile
    )
