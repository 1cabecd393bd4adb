from fastapi import HTTPException, Request, status

from ..core.errors import ClinicError, ErrorKind
from ..services.appointment_service import AppointmentRegistry
from ..services.professional_service import ProfessionalDirectory

ERROR_STATUS_CODES = {
    ErrorKind.EMPTY_FIELD: 422,
    ErrorKind.OUT_OF_RANGE: 422,
    ErrorKind.INVALID_FORMAT: 422,
    ErrorKind.MISSING_REFERENCE: 422,
    ErrorKind.SCHEDULING_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.DUPLICATE_ID: status.HTTP_409_CONFLICT,
}

class ClinicHTTPError(HTTPException):
    def __init__(self, error: ClinicError):
        super().__init__(
            status_code=ERROR_STATUS_CODES.get(error.kind, status.HTTP_400_BAD_REQUEST),
            detail=error.as_dict(),
        )

class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )

# Registry dependencies
def get_registry(request: Request) -> AppointmentRegistry:
    """Appointment registry owned by the running application."""
    return request.app.state.registry

def get_directory(request: Request) -> ProfessionalDirectory:
    """Professional directory owned by the running application."""
    return request.app.state.directory
