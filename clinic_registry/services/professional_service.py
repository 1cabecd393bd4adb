from threading import RLock
from typing import Dict, List, Optional
import logging

from ..core.errors import ErrorKind, Result
from ..models.professional import HealthProfessional

logger = logging.getLogger(__name__)

class ProfessionalDirectory:
    """Doctors known to the clinic, keyed by their unique id."""

    def __init__(self):
        self._professionals: Dict[int, HealthProfessional] = {}
        self._lock = RLock()

    def __len__(self) -> int:
        return len(self._professionals)

    def register(self, professional: HealthProfessional) -> Result[HealthProfessional]:
        """Add a validated professional; ids must be unique."""
        with self._lock:
            if professional.id in self._professionals:
                return Result.failure(
                    ErrorKind.DUPLICATE_ID,
                    f"A professional with ID {professional.id} is already registered",
                    "id"
                )
            self._professionals[professional.id] = professional

        logger.info(f"Registered {professional.kind.value} {professional.id}: {professional.name}")
        return Result.success(professional)

    def get(self, professional_id: int) -> Optional[HealthProfessional]:
        with self._lock:
            return self._professionals.get(professional_id)

    def all(self) -> List[HealthProfessional]:
        """Professionals in registration order."""
        with self._lock:
            return list(self._professionals.values())
