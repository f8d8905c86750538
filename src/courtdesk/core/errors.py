"""Exception types raised by the courtdesk client and edit session."""

from typing import Dict, Optional


class CourtDeskError(Exception):
    """Base class for all courtdesk errors."""

    pass


class InvalidIdentifier(CourtDeskError, ValueError):
    """Raised when a route identifier is not a non-negative integer."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name} '{value}': expected a non-negative integer")


class ApiError(CourtDeskError):
    """Raised when the booking API answers with an error status."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API Error ({status_code}): {detail}")


class NotFound(ApiError):
    """Raised when the requested entity does not exist."""

    def __init__(self, detail: str = "Not found"):
        super().__init__(404, detail)


class NetworkError(CourtDeskError):
    """Raised when the API could not be reached at all."""

    pass


class FormValidationError(CourtDeskError, ValueError):
    """Raised when form values fail validation.

    Attributes:
        errors: Mapping of form field name to its first error message
    """

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        if message is None:
            message = "; ".join(f"{k}: {v}" for k, v in self.errors.items())
        super().__init__(message)
