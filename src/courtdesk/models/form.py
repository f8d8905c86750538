"""Form state and validation schema for the field edit session.

Form values are kept as text, exactly as an operator types them, and are
only coerced to numbers after :func:`validate_form` accepts them.
"""

import re
from typing import Any, Dict, Mapping

from pydantic import ConfigDict, Field as PydanticField, ValidationError, field_validator

from ..core.errors import FormValidationError
from .base import CourtDeskBaseModel, format_value, optional_str
from .field import Field, FieldStatus


PRICE_PATTERN = re.compile(r"^\d+$")

ID_PATTERN = re.compile(r"^\d+$")

NAME_MIN_LENGTH = 3

FORM_FIELDS = ("name", "type_id", "branch_id", "price_day", "price_night", "status")

STATUS_VALUES = tuple(status.value for status in FieldStatus)


class FormState(CourtDeskBaseModel):
    """Editable subset of a :class:`Field`, held as strings."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    type_id: str = PydanticField(default="", alias="typeId")
    branch_id: str = PydanticField(default="", alias="branchId")
    price_day: str = PydanticField(default="", alias="priceDay")
    price_night: str = PydanticField(default="", alias="priceNight")
    status: str = ""

    @classmethod
    def from_field(cls, field: Field) -> "FormState":
        """Mirror a remote field into form text."""
        return cls(
            name=field.name or "",
            type_id=optional_str(field.type_id),
            branch_id=optional_str(field.branch_id),
            price_day=optional_str(field.price_day),
            price_night=optional_str(field.price_night),
            status=optional_str(field.status, default=FieldStatus.AVAILABLE.value),
        )

    def values(self) -> Dict[str, str]:
        """Return the form values keyed by attribute name."""
        return self.model_dump()


class FieldUpdate(CourtDeskBaseModel):
    """Coerced partial-update payload produced from a valid form."""

    name: str
    type_id: int = PydanticField(alias="typeId")
    branch_id: int = PydanticField(alias="branchId")
    price_day: float = PydanticField(alias="priceDay")
    price_night: float = PydanticField(alias="priceNight")
    status: FieldStatus

    def to_payload(self) -> Dict[str, Any]:
        """Serialize with the API's camelCase keys."""
        return self.model_dump(by_alias=True)


class FieldForm(CourtDeskBaseModel):
    """Validation schema applied to raw form text before coercion."""

    model_config = ConfigDict(validate_default=True)

    name: str = ""
    type_id: str = PydanticField(default="", alias="typeId")
    branch_id: str = PydanticField(default="", alias="branchId")
    price_day: str = PydanticField(default="", alias="priceDay")
    price_night: str = PydanticField(default="", alias="priceNight")
    status: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        """Treat missing values as empty text and render numbers as text."""
        if v is None:
            return ""
        if isinstance(v, (int, float)):
            return format_value(v)
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if len(v) < NAME_MIN_LENGTH:
            raise ValueError(
                f"Field name must be at least {NAME_MIN_LENGTH} characters"
            )
        return v

    @field_validator("type_id")
    @classmethod
    def validate_type_id(cls, v: str) -> str:
        if not ID_PATTERN.match(v):
            raise ValueError("Field type must be selected")
        return v

    @field_validator("branch_id")
    @classmethod
    def validate_branch_id(cls, v: str) -> str:
        if not ID_PATTERN.match(v):
            raise ValueError("Branch must be selected")
        return v

    @field_validator("price_day", "price_night")
    @classmethod
    def validate_price(cls, v: str, info) -> str:
        label = "Day price" if info.field_name == "price_day" else "Night price"
        if not v:
            raise ValueError(f"{label} is required")
        if not PRICE_PATTERN.match(v):
            raise ValueError("Price must be a number")
        return v

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str) -> str:
        if not v:
            raise ValueError("Status must be selected")
        if v not in STATUS_VALUES:
            raise ValueError(f"Status must be one of: {', '.join(STATUS_VALUES)}")
        return v

    def coerce(self) -> FieldUpdate:
        """Convert validated text into typed payload values."""
        return FieldUpdate(
            name=self.name,
            type_id=int(self.type_id),
            branch_id=int(self.branch_id),
            price_day=float(self.price_day),
            price_night=float(self.price_night),
            status=FieldStatus(self.status),
        )


def _field_name(loc_item: Any) -> str:
    for name, info in FieldForm.model_fields.items():
        if loc_item in (name, info.alias):
            return name
    return str(loc_item)


def validate_form(values: Mapping[str, Any]) -> FieldUpdate:
    """Validate raw form values and return the coerced update payload.

    Args:
        values: Form values keyed by attribute name or camelCase alias

    Returns:
        The typed :class:`FieldUpdate`

    Raises:
        FormValidationError: With one message per failing form field
    """
    try:
        form = FieldForm.model_validate(dict(values))
    except ValidationError as e:
        errors: Dict[str, str] = {}
        for err in e.errors():
            name = _field_name(err["loc"][0]) if err["loc"] else "__form__"
            if err["type"] == "value_error":
                message = str(err["ctx"]["error"])
            else:
                message = err["msg"]
            errors.setdefault(name, message)
        raise FormValidationError(errors) from e

    return form.coerce()
