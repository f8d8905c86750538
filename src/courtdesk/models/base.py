"""Base models for courtdesk."""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict


class CourtDeskBaseModel(BaseModel):
    """Base model for entities exchanged with the booking API.

    The API speaks camelCase; attributes are snake_case and accept either
    spelling on input.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",  # Servers add fields this client does not use
    )


def format_value(value: Any) -> str:
    """Render a value the way a browser form would show it.

    Integral floats lose their trailing ``.0`` and booleans are lowercased,
    so ``100000.0`` becomes ``"100000"`` and ``True`` becomes ``"true"``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def optional_str(value: Optional[Union[int, float, str]], default: str = "") -> str:
    """Convert an optional source value to form text, falling back to ``default``."""
    if value is None:
        return default
    text = format_value(value)
    return text if text else default
