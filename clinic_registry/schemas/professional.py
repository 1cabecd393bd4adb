from pydantic import BaseModel
from typing import Literal, Optional, Union

from ..models.professional import (
    GeneralPractice, HealthProfessional, ProfessionalKind,
    get_service_description
)

# Field rules (blank names, id ranges, ...) are enforced by the domain
# constructors so that every violation reports a ClinicError kind.

class GeneralPractitionerCreate(BaseModel):
    kind: Literal["general_practitioner"] = "general_practitioner"
    id: int
    name: Optional[str] = None
    work_experience: int
    specialty: Optional[str] = None
    accepts_children: bool = False

class PediatricianCreate(BaseModel):
    kind: Literal["pediatrician"] = "pediatrician"
    id: int
    name: Optional[str] = None
    work_experience: int
    specialty: Optional[str] = None
    max_age: int

# Request body, discriminated on "kind"
ProfessionalCreate = Union[GeneralPractitionerCreate, PediatricianCreate]

class ProfessionalResponse(BaseModel):
    id: int
    kind: ProfessionalKind
    name: str
    work_experience: int
    specialty: str
    accepts_children: Optional[bool] = None
    max_age: Optional[int] = None
    service_description: str

    @classmethod
    def from_professional(cls, professional: HealthProfessional) -> "ProfessionalResponse":
        practice = professional.practice
        if isinstance(practice, GeneralPractice):
            variant = {"accepts_children": practice.accepts_children}
        else:
            variant = {"max_age": practice.max_age}

        return cls(
            id=professional.id,
            kind=professional.kind,
            name=professional.name,
            work_experience=professional.work_experience,
            specialty=professional.specialty,
            service_description=get_service_description(professional),
            **variant
        )
