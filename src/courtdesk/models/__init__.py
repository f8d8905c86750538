"""Core data models for courtdesk."""

from .base import CourtDeskBaseModel
from .branch import Branch, BranchEnvelope, BranchListEnvelope
from .field import Field, FieldStatus, FieldType
from .form import FieldForm, FieldUpdate, FormState, validate_form
from .image import ACCEPTED_IMAGE_TYPES, ImageFile

__all__ = [
    "CourtDeskBaseModel",
    "Branch",
    "BranchEnvelope",
    "BranchListEnvelope",
    "Field",
    "FieldStatus",
    "FieldType",
    "FieldForm",
    "FieldUpdate",
    "FormState",
    "validate_form",
    "ACCEPTED_IMAGE_TYPES",
    "ImageFile",
]
