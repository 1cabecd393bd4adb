from threading import RLock
from typing import Iterator, List, Optional, Tuple
import logging

from ..core.errors import ErrorKind, Result
from ..core.validators import validate_mobile
from ..models.appointment import Appointment, format_appointment_info, new_appointment
from ..models.professional import HealthProfessional

logger = logging.getLogger(__name__)

NO_APPOINTMENTS_MESSAGE = "No appointments found in the system."

class AppointmentRegistry:
    """
    Ordered, in-memory collection of appointments.

    No two records share the same doctor id and time slot. Each registry
    owns its own list, so callers (and tests) can keep independent ones.
    """

    def __init__(self):
        self._appointments: List[Appointment] = []
        self._lock = RLock()

    def __len__(self) -> int:
        return len(self._appointments)

    def __iter__(self) -> Iterator[Appointment]:
        return iter(self.appointments())

    def appointments(self) -> Tuple[Appointment, ...]:
        """Snapshot of the current records in insertion order."""
        with self._lock:
            return tuple(self._appointments)

    def create_appointment(
        self,
        patient_name: str,
        mobile: str,
        time_slot: str,
        doctor: Optional[HealthProfessional]
    ) -> Result[Appointment]:
        """Check for a conflict, validate, then append the new appointment."""
        with self._lock:
            if doctor is not None:
                conflict = self._find_conflict(doctor, time_slot)
                if conflict:
                    logger.warning(
                        f"Scheduling conflict for doctor {doctor.id} at {time_slot} "
                        f"(booked by {conflict.patient_name})"
                    )
                    return Result.failure(
                        ErrorKind.SCHEDULING_CONFLICT,
                        f"Conflict: {doctor.name} is already booked at {time_slot}",
                        "time_slot"
                    )

            result = new_appointment(patient_name, mobile, time_slot, doctor)
            if not result.ok:
                logger.info(f"Rejected appointment: {result.error.message}")
                return result

            self._appointments.append(result.value)

        logger.info(f"Appointment created successfully for: {patient_name}")
        return result

    def list_appointments(self) -> Iterator[str]:
        """
        Yield the report of every appointment in insertion order.

        Each call starts a new pass over a snapshot, so repeated calls give
        the same output while the registry is unchanged.
        """
        snapshot = self.appointments()
        if not snapshot:
            yield NO_APPOINTMENTS_MESSAGE
            return

        for appointment in snapshot:
            yield format_appointment_info(appointment)

    def cancel_appointment(self, mobile: str) -> Result[bool]:
        """
        Remove the first appointment booked with ``mobile``.

        The result value is True when a record was removed and False when
        none matched. A malformed mobile is an INVALID_FORMAT error.
        """
        error = validate_mobile(mobile, "Cannot cancel: invalid mobile number format")
        if error:
            return Result(error=error)

        with self._lock:
            for index, appointment in enumerate(self._appointments):
                if appointment.patient_mobile == mobile:
                    del self._appointments[index]
                    logger.info(f"Appointment canceled successfully (mobile: {mobile})")
                    return Result.success(True)

        logger.info(f"No appointment found with mobile number: {mobile}")
        return Result.success(False)

    def find_by_mobile(self, mobile: str) -> Optional[Appointment]:
        """First appointment booked with ``mobile``, if any."""
        with self._lock:
            for appointment in self._appointments:
                if appointment.patient_mobile == mobile:
                    return appointment
        return None

    def _find_conflict(self, doctor: HealthProfessional, time_slot: str) -> Optional[Appointment]:
        for appointment in self._appointments:
            if appointment.conflicts_with(doctor, time_slot):
                return appointment
        return None
