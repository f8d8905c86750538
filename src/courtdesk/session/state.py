"""Mutable state owned by one field edit session."""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Dict, List, Optional

from courtdesk.core.errors import InvalidIdentifier
from courtdesk.models.branch import Branch
from courtdesk.models.field import Field, FieldType
from courtdesk.models.form import FormState
from courtdesk.session.image import ImageAttachment


def parse_route_id(name: str, value: Any) -> int:
    """Parse a route segment as a non-negative integer.

    Raises:
        InvalidIdentifier: If the value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise InvalidIdentifier(name, value)
    if isinstance(value, int):
        if value < 0:
            raise InvalidIdentifier(name, value)
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise InvalidIdentifier(name, value)


@dataclass(frozen=True)
class RouteParams:
    """Identifiers taken from ``/dashboard/branches/{branch_id}/fields/{field_id}/edit``."""

    branch_id: int
    field_id: int

    @classmethod
    def parse(cls, branch_id: Any, field_id: Any) -> "RouteParams":
        return cls(
            branch_id=parse_route_id("branch id", branch_id),
            field_id=parse_route_id("field id", field_id),
        )

    @property
    def branch_detail_path(self) -> str:
        return f"/dashboard/branches/{self.branch_id}"


@dataclass
class EditState:
    """Everything the edit screen renders from.

    Attributes:
        form: Text values of the editable controls
        field: Field as last fetched from the API
        branches: Choices for the branch selector
        field_types: Choices for the field type selector
        branch_locked: True when the branch selector is disabled
        image: Image attachment state machine
        field_errors: Validation messages from the last submit
        loading: Reference data is being fetched
        submitting: An update request is in flight
        closed: The session was torn down; late results are ignored
    """

    form: FormState = dataclass_field(default_factory=FormState)
    field: Optional[Field] = None
    branches: List[Branch] = dataclass_field(default_factory=list)
    field_types: List[FieldType] = dataclass_field(default_factory=list)
    branch_locked: bool = False
    image: ImageAttachment = dataclass_field(default_factory=ImageAttachment)
    field_errors: Dict[str, str] = dataclass_field(default_factory=dict)
    loading: bool = False
    submitting: bool = False
    closed: bool = False

    @property
    def busy(self) -> bool:
        return self.loading or self.submitting

    @property
    def branch_label(self) -> Optional[str]:
        """Name of the first branch on offer, shown in the page header."""
        return self.branches[0].name if self.branches else None
