"""API client and error types for courtdesk."""

from .api import ApiClient, BranchApi, FieldApi
from .errors import (
    ApiError,
    CourtDeskError,
    FormValidationError,
    InvalidIdentifier,
    NetworkError,
    NotFound,
)

__all__ = [
    "ApiClient",
    "BranchApi",
    "FieldApi",
    "ApiError",
    "CourtDeskError",
    "FormValidationError",
    "InvalidIdentifier",
    "NetworkError",
    "NotFound",
]
