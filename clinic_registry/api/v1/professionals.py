from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import PlainTextResponse
from typing import List

from ...api.deps import ClinicHTTPError, NotFoundError, get_directory
from ...models.professional import (
    HealthProfessional, format_professional_info, new_general_practitioner,
    new_pediatrician
)
from ...schemas.professional import (
    GeneralPractitionerCreate, ProfessionalCreate, ProfessionalResponse
)
from ...services.professional_service import ProfessionalDirectory

router = APIRouter(prefix="/professionals", tags=["Professionals"])

def _get_or_404(directory: ProfessionalDirectory, professional_id: int) -> HealthProfessional:
    professional = directory.get(professional_id)
    if professional is None:
        raise NotFoundError(f"No professional with ID {professional_id}")
    return professional

@router.post("", response_model=ProfessionalResponse, status_code=status.HTTP_201_CREATED)
def create_professional(
    data: ProfessionalCreate = Body(..., discriminator="kind"),
    directory: ProfessionalDirectory = Depends(get_directory)
):
    """Register a general practitioner or a pediatrician."""
    if isinstance(data, GeneralPractitionerCreate):
        result = new_general_practitioner(
            data.id, data.name, data.work_experience, data.specialty, data.accepts_children
        )
    else:
        result = new_pediatrician(
            data.id, data.name, data.work_experience, data.specialty, data.max_age
        )

    if result.ok:
        result = directory.register(result.value)
    if not result.ok:
        raise ClinicHTTPError(result.error)

    return ProfessionalResponse.from_professional(result.value)

@router.get("", response_model=List[ProfessionalResponse])
def list_professionals(
    directory: ProfessionalDirectory = Depends(get_directory)
):
    """List professionals in registration order."""
    return [ProfessionalResponse.from_professional(p) for p in directory.all()]

@router.get("/{professional_id}", response_model=ProfessionalResponse)
def get_professional(
    professional_id: int,
    directory: ProfessionalDirectory = Depends(get_directory)
):
    return ProfessionalResponse.from_professional(_get_or_404(directory, professional_id))

@router.get("/{professional_id}/report", response_class=PlainTextResponse)
def get_professional_report(
    professional_id: int,
    directory: ProfessionalDirectory = Depends(get_directory)
):
    """Plain-text information sheet for one professional."""
    return format_professional_info(_get_or_404(directory, professional_id))
