"""
Console walkthrough of the registry.

Prints four sample doctors, books four appointments, lists them, cancels
one by mobile number and lists the remainder.

Run with ``python -m clinic_registry.demo``.
"""

import sys
from typing import List

from .core.errors import ClinicException
from .models.professional import (
    HealthProfessional, new_general_practitioner, new_pediatrician,
    print_professional_info
)
from .services.appointment_service import AppointmentRegistry

SAMPLE_APPOINTMENTS = [
    ("Alex Taylor", "13800138000", "09:30", 1),
    ("Jamie Lee", "13900139000", "10:15", 1),
    ("Sam Wilson", "13700137000", "14:00", 3),
    ("Casey Zhang", "13600136000", "15:30", 3),
]

CANCELLED_MOBILE = "13800138000"

def build_sample_professionals() -> List[HealthProfessional]:
    """Two general practitioners and two pediatricians."""
    return [
        new_general_practitioner(1, "Dr. Sarah Johnson", 8, "Community General Practice", True).unwrap(),
        new_general_practitioner(2, "Dr. Michael Chen", 5, "Family Medicine", False).unwrap(),
        new_pediatrician(3, "Dr. Emily Rodriguez", 6, "Pediatric Respiratory Medicine", 12).unwrap(),
        new_pediatrician(4, "Dr. David Kim", 4, "Pediatric Gastroenterology", 10).unwrap(),
    ]

def show_professionals(doctors: List[HealthProfessional]) -> None:
    for doctor in doctors:
        print_professional_info(doctor)
        print("-----------------------------------")

def print_all_appointments(registry: AppointmentRegistry) -> None:
    for report in registry.list_appointments():
        print(report)

def manage_appointments(registry: AppointmentRegistry, doctors: List[HealthProfessional]) -> None:
    by_id = {doctor.id: doctor for doctor in doctors}

    for patient_name, mobile, time_slot, doctor_id in SAMPLE_APPOINTMENTS:
        result = registry.create_appointment(patient_name, mobile, time_slot, by_id.get(doctor_id))
        if not result.ok:
            print(f"Appointment operation failed: {result.error.message}", file=sys.stderr)
            continue
        print(f"Appointment created successfully for: {patient_name}")

    print("\n[All Appointments After Creation]")
    print_all_appointments(registry)

    result = registry.cancel_appointment(CANCELLED_MOBILE)
    if not result.ok:
        print(f"Appointment operation failed: {result.error.message}", file=sys.stderr)
    elif result.value:
        print(f"Appointment canceled successfully (mobile: {CANCELLED_MOBILE})")
    else:
        print(f"No appointment found with mobile number: {CANCELLED_MOBILE}")

    print("\n[Appointments After Cancellation]")
    print_all_appointments(registry)

def main() -> int:
    print("===== Part 1: Health Professional Details =====")
    try:
        doctors = build_sample_professionals()
    except ClinicException as e:
        print(f"Error creating doctors: {e}", file=sys.stderr)
        return 0
    show_professionals(doctors)

    print("\n===== Part 2: Appointment Management =====")
    manage_appointments(AppointmentRegistry(), doctors)
    return 0

if __name__ == "__main__":
    sys.exit(main())
