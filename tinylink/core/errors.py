from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    GENERATION_EXHAUSTED = "generation_exhausted"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ServiceError:
    """Failure value returned by service functions instead of raising."""
    kind: ErrorKind
    message: str


# kind -> (HTTP status, error title)
ERROR_STATUS = {
    ErrorKind.VALIDATION: (400, "Validation Error"),
    ErrorKind.NOT_FOUND: (404, "Not Found"),
    ErrorKind.GENERATION_EXHAUSTED: (500, "Failed to generate unique short code"),
    ErrorKind.INTERNAL: (500, "Internal Server Error"),
}


def validation_error(message: str) -> ServiceError:
    return ServiceError(ErrorKind.VALIDATION, message)


def not_found(message: str = "Short URL not found") -> ServiceError:
    return ServiceError(ErrorKind.NOT_FOUND, message)
