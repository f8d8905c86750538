"""Loads the field under edit and its reference catalogs."""

import logging
from typing import Callable, List

from courtdesk.core.api import BranchApi, FieldApi
from courtdesk.core.errors import NotFound
from courtdesk.models.form import FormState
from courtdesk.session.state import EditState, RouteParams

logger = logging.getLogger(__name__)

ErrorReporter = Callable[[Exception, str], None]
LoadStep = Callable[[EditState, RouteParams], None]


class ReferenceDataLoader:
    """Runs the load pipeline: field, branch (or fallback list), field types.

    Steps run in order and each one applies its own result to the state, so
    a failing step leaves earlier results in place. The branch step is the
    only one that recovers from its own failure.
    """

    def __init__(self, field_api: FieldApi, branch_api: BranchApi, report: ErrorReporter):
        self.field_api = field_api
        self.branch_api = branch_api
        self.report = report

    @property
    def steps(self) -> List[LoadStep]:
        return [self.load_field, self.load_branch, self.load_field_types]

    def load(self, state: EditState, route: RouteParams) -> None:
        """Run every step against ``state``.

        Raises:
            Exception: Whatever an unrecovered step raised
        """
        for step in self.steps:
            if state.closed:
                logger.debug("Session closed, stopping load")
                return
            step(state, route)

    def load_field(self, state: EditState, route: RouteParams) -> None:
        field = self.field_api.get_field_by_id(route.field_id)
        if state.closed:
            return

        state.field = field
        state.form = FormState.from_field(field)
        state.image.track_existing(field.image_url)
        logger.info(f"Loaded field {field.id} '{field.name}'")

    def load_branch(self, state: EditState, route: RouteParams) -> None:
        try:
            envelope = self.branch_api.get_branch_by_id(route.branch_id)
            if envelope.data is None:
                raise NotFound(f"Branch {route.branch_id} not found")
        except Exception as e:
            logger.warning(
                f"Branch {route.branch_id} lookup failed ({e}), falling back to operator branches"
            )
            if state.closed:
                return
            self.report(e, "Failed to load branch data. Please try again.")
            self.load_user_branches(state, route)
            return

        if state.closed:
            return
        branch = envelope.data
        state.branches = [branch]
        state.form.branch_id = str(branch.id)
        state.branch_locked = True

    def load_user_branches(self, state: EditState, route: RouteParams) -> None:
        envelope = self.branch_api.get_user_branches()
        if state.closed:
            return
        state.branches = list(envelope.data or [])
        state.branch_locked = False

    def load_field_types(self, state: EditState, route: RouteParams) -> None:
        field_types = self.field_api.get_field_types()
        if state.closed:
            return
        state.field_types = list(field_types or [])
