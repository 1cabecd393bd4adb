from dataclasses import asdict, dataclass
from functools import singledispatch
from typing import Optional, Union
import enum

from ..core.errors import ClinicError, Result
from ..core.validators import (
    validate_max_age, validate_not_blank, validate_professional_id,
    validate_work_experience
)

class ProfessionalKind(str, enum.Enum):
    GENERAL_PRACTITIONER = "general_practitioner"
    PEDIATRICIAN = "pediatrician"

@dataclass(frozen=True)
class GeneralPractice:
    specialty: str
    accepts_children: bool = False

@dataclass(frozen=True)
class Pediatrics:
    specialty: str
    max_age: int

Practice = Union[GeneralPractice, Pediatrics]

@dataclass(frozen=True)
class HealthProfessional:
    """
    A doctor: the shared fields plus the variant payload in ``practice``.

    Instances are only obtained through the ``new_*`` constructors, which
    validate every field first.
    """
    id: int
    name: str
    work_experience: int
    practice: Practice

    @property
    def kind(self) -> ProfessionalKind:
        if isinstance(self.practice, Pediatrics):
            return ProfessionalKind.PEDIATRICIAN
        return ProfessionalKind.GENERAL_PRACTITIONER

    @property
    def specialty(self) -> str:
        return self.practice.specialty

    def __repr__(self):
        return f"<HealthProfessional(id={self.id}, name='{self.name}', kind='{self.kind.value}')>"

def _validate_common(id: int, name: str, work_experience: int) -> Optional[ClinicError]:
    return (
        validate_professional_id(id)
        or validate_not_blank(name, "name", "Doctor's name cannot be empty")
        or validate_work_experience(work_experience)
    )

@singledispatch
def _validate_practice(practice) -> Optional[ClinicError]:
    raise TypeError(f"Unsupported practice type: {type(practice).__name__}")

@_validate_practice.register
def _(practice: GeneralPractice) -> Optional[ClinicError]:
    return validate_not_blank(
        practice.specialty, "specialty",
        "General practitioner's specialty cannot be empty (e.g., 'Community General Practice')"
    )

@_validate_practice.register
def _(practice: Pediatrics) -> Optional[ClinicError]:
    return (
        validate_not_blank(
            practice.specialty, "specialty",
            "Pediatrician's specialty cannot be empty (e.g., 'Pediatric Respiratory Medicine')"
        )
        or validate_max_age(practice.max_age)
    )

def new_professional(
    id: int,
    name: str,
    work_experience: int,
    practice: Practice
) -> Result[HealthProfessional]:
    """Validate shared fields, then the practice payload."""
    error = _validate_common(id, name, work_experience) or _validate_practice(practice)
    if error:
        return Result(error=error)

    return Result.success(HealthProfessional(
        id=id,
        name=name,
        work_experience=work_experience,
        practice=practice
    ))

def new_general_practitioner(
    id: int,
    name: str,
    work_experience: int,
    specialty: str,
    accepts_children: bool
) -> Result[HealthProfessional]:
    return new_professional(
        id, name, work_experience,
        GeneralPractice(specialty=specialty, accepts_children=bool(accepts_children))
    )

def new_pediatrician(
    id: int,
    name: str,
    work_experience: int,
    specialty: str,
    max_age: int
) -> Result[HealthProfessional]:
    return new_professional(
        id, name, work_experience,
        Pediatrics(specialty=specialty, max_age=max_age)
    )

def update_professional(professional: HealthProfessional, **changes) -> Result[HealthProfessional]:
    """
    Return a copy of ``professional`` with ``changes`` applied.

    Changes may name shared fields (id, name, work_experience) or fields of
    the current practice (specialty, accepts_children / max_age). The
    merged fields go through the same validation as construction; the
    original object is left untouched either way.
    """
    common = {
        "id": professional.id,
        "name": professional.name,
        "work_experience": professional.work_experience
    }
    practice_fields = asdict(professional.practice)

    for key, value in changes.items():
        if key in common:
            common[key] = value
        elif key in practice_fields:
            practice_fields[key] = value
        else:
            raise TypeError(f"{professional.kind.value} has no field '{key}'")

    practice = type(professional.practice)(**practice_fields)
    return new_professional(practice=practice, **common)

# Service descriptions and reports

@singledispatch
def _describe(practice) -> str:
    raise TypeError(f"Unsupported practice type: {type(practice).__name__}")

@_describe.register
def _(practice: GeneralPractice) -> str:
    description = "Provides general disease diagnosis, chronic disease management, health check-ups"
    if practice.accepts_children:
        description += ", and can treat children under 14 years old"
    return description

@_describe.register
def _(practice: Pediatrics) -> str:
    return (
        "Provides diagnosis of common illnesses, vaccination guidance, "
        f"and growth assessment for children under {practice.max_age} years old"
    )

def get_service_description(professional: HealthProfessional) -> str:
    """Human-readable scope of services for any kind of professional."""
    return _describe(professional.practice)

@singledispatch
def _report_lines(practice, professional: HealthProfessional) -> list:
    raise TypeError(f"Unsupported practice type: {type(practice).__name__}")

@_report_lines.register
def _(practice: GeneralPractice, professional: HealthProfessional) -> list:
    return [
        "=== General Practitioner Information ===",
        f"ID: {professional.id} | Name: {professional.name}",
        f"Specialty: {practice.specialty} | Accepts Children: {'Yes' if practice.accepts_children else 'No'}",
        f"[General Practice Service Scope]: {get_service_description(professional)}, "
        f"Work Experience: {professional.work_experience} years",
    ]

@_report_lines.register
def _(practice: Pediatrics, professional: HealthProfessional) -> list:
    return [
        "=== Pediatrician Information ===",
        f"ID: {professional.id} | Name: {professional.name}",
        f"Specialty: {practice.specialty} | Maximum Patient Age: {practice.max_age} years",
        f"[Pediatric Service Scope]: {get_service_description(professional)}, "
        f"Work Experience: {professional.work_experience} years",
    ]

def format_professional_info(professional: HealthProfessional) -> str:
    """Multi-line report: id, name, specialty line and service scope."""
    return "\n".join(_report_lines(professional.practice, professional))

def print_professional_info(professional: HealthProfessional) -> None:
    print(format_professional_info(professional))
