"""Edit session for a single field under a branch."""

import logging
from typing import Any, Dict, Mapping, Optional, Protocol

from courtdesk.core.api import BranchApi, FieldApi
from courtdesk.core.errors import FormValidationError, InvalidIdentifier
from courtdesk.models.base import format_value
from courtdesk.models.form import FormState, validate_form
from courtdesk.models.image import ImageFile
from courtdesk.session.encoder import SubmissionEncoder
from courtdesk.session.image import ImageAttachment, PreviewReader
from courtdesk.session.loader import ReferenceDataLoader
from courtdesk.session.state import EditState, RouteParams

logger = logging.getLogger(__name__)

BRANCHES_PATH = "/dashboard/branches"


class SessionView(Protocol):
    """Presentation surface the session reports to."""

    def show_error(self, error: Exception, message: str) -> None: ...

    def show_field_errors(self, errors: Dict[str, str]) -> None: ...

    def navigate(self, path: str) -> None: ...

    def set_busy(self, busy: bool) -> None: ...

    def reset_file_input(self) -> None: ...


class FieldEditSession:
    """Loads a field, tracks the operator's edits and saves them.

    Examples:
        session = FieldEditSession(field_api, branch_api, "5", "42", view)
        if session.load():
            session.set_value("name", "Court B")
            session.select_file(ImageFile.from_path("court.png"))
            session.submit()
    """

    def __init__(
        self,
        field_api: FieldApi,
        branch_api: BranchApi,
        branch_id: Any,
        field_id: Any,
        view: SessionView,
        preview_reader: Optional[PreviewReader] = None,
    ):
        """Initialize the session.

        Args:
            field_api: Field endpoints
            branch_api: Branch endpoints
            branch_id: Branch segment of the route
            field_id: Field segment of the route
            view: Presentation surface for errors, navigation and busy state
            preview_reader: Source of image previews
        """
        self.view = view
        self._raw_branch_id = branch_id
        self._raw_field_id = field_id
        self.route: Optional[RouteParams] = None
        self.state = EditState(
            image=ImageAttachment(preview_reader, on_input_reset=self._reset_file_input)
        )
        self.loader = ReferenceDataLoader(field_api, branch_api, self._report)
        self.encoder = SubmissionEncoder(field_api)

    @property
    def form(self) -> FormState:
        return self.state.form

    @property
    def image(self) -> ImageAttachment:
        return self.state.image

    def _resolve_route(self) -> RouteParams:
        if self.route is None:
            self.route = RouteParams.parse(self._raw_branch_id, self._raw_field_id)
        return self.route

    def _report(self, error: Exception, message: str) -> None:
        if self.state.closed:
            return
        self.view.show_error(error, message)

    def _reset_file_input(self) -> None:
        if not self.state.closed:
            self.view.reset_file_input()

    def _set_flags(self, **flags: bool) -> None:
        was_busy = self.state.busy
        for name, value in flags.items():
            setattr(self.state, name, value)
        if self.state.busy != was_busy and not self.state.closed:
            self.view.set_busy(self.state.busy)

    def load(self) -> bool:
        """Fetch the field and its reference data.

        Returns:
            True if every step completed, False if loading failed or was
            already in progress
        """
        if self.state.loading:
            logger.debug("Load already in progress")
            return False

        self._set_flags(loading=True)
        try:
            route = self._resolve_route()
            self.loader.load(self.state, route)
            return True
        except InvalidIdentifier as e:
            logger.error(f"Cannot load field: {e}")
            self._report(e, "Invalid field or branch id")
            return False
        except Exception as e:
            logger.error(f"Failed to load field {self._raw_field_id}: {e}")
            self._report(e, "Failed to load data. Please try again.")
            return False
        finally:
            self._set_flags(loading=False)

    def set_value(self, name: str, value: Any) -> None:
        """Set one form control's text.

        Numbers are stored the way the form renders them and None clears
        the control.

        Raises:
            KeyError: If ``name`` is not a form field
        """
        for attr, info in FormState.model_fields.items():
            if name in (attr, info.alias):
                text = "" if value is None else format_value(value)
                setattr(self.state.form, attr, text)
                self.state.field_errors.pop(attr, None)
                return
        raise KeyError(f"Unknown form field '{name}'")

    def select_file(self, file: Optional[ImageFile]) -> bool:
        """Pick a new image, or cancel the picker with None."""
        try:
            self.state.image.select_file(file)
        except FormValidationError as e:
            self.state.field_errors.update(e.errors)
            self.view.show_field_errors(e.errors)
            return False
        self.state.field_errors.pop("image", None)
        return True

    def remove_image(self) -> None:
        self.state.image.remove()

    def submit(self, values: Optional[Mapping[str, Any]] = None) -> bool:
        """Validate and save the form.

        Args:
            values: Raw form values; defaults to the current form state

        Returns:
            True if the field was saved
        """
        if self.state.submitting:
            logger.debug("Submit already in progress")
            return False

        if values is None:
            values = self.state.form.values()

        try:
            update = validate_form(values)
        except FormValidationError as e:
            self.state.field_errors = dict(e.errors)
            self.view.show_field_errors(e.errors)
            return False
        self.state.field_errors = {}

        self._set_flags(submitting=True)
        try:
            route = self._resolve_route()
            updated = self.encoder.submit(
                route.field_id, update.to_payload(), self.state.image
            )
        except Exception as e:
            logger.error(f"Failed to update field {self._raw_field_id}: {e}")
            self._report(e, "Failed to update field. Please try again.")
            return False
        finally:
            self._set_flags(submitting=False)

        if self.state.closed:
            return True
        if updated is not None:
            self.state.field = updated
        logger.info(f"Field {route.field_id} updated")
        self.view.navigate(route.branch_detail_path)
        return True

    def cancel(self) -> None:
        """Leave the edit screen without saving."""
        try:
            path = self._resolve_route().branch_detail_path
        except InvalidIdentifier:
            path = BRANCHES_PATH
        self.view.navigate(path)

    def close(self) -> None:
        """Tear the session down; responses arriving later are ignored."""
        self.state.closed = True
