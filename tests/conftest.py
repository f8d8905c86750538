"""Pytest configuration and shared fixtures."""

import pytest

from courtdesk.core.errors import NetworkError, NotFound
from courtdesk.models import Branch, BranchEnvelope, BranchListEnvelope, Field, FieldType, ImageFile


PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


class FakeFieldApi:
    """In-memory field endpoints recording every call."""

    def __init__(self, calls, field=None, field_types=None, field_error=None):
        self.calls = calls
        self.field = field
        self.field_types = field_types if field_types is not None else []
        self.field_error = field_error
        self.update_error = None
        self.updates = []

    def get_field_by_id(self, field_id):
        self.calls.append(("get_field_by_id", field_id))
        if self.field_error:
            raise self.field_error
        return self.field

    def get_field_types(self):
        self.calls.append(("get_field_types",))
        return self.field_types

    def update_field(self, field_id, payload):
        self.calls.append(("update_field", field_id))
        if self.update_error:
            raise self.update_error
        self.updates.append(("json", field_id, payload))
        return self.field

    def update_field_with_image(self, field_id, fields, image):
        self.calls.append(("update_field_with_image", field_id))
        if self.update_error:
            raise self.update_error
        self.updates.append(("multipart", field_id, fields, image))
        return self.field


class FakeBranchApi:
    """In-memory branch endpoints recording every call."""

    def __init__(self, calls, branch=None, branch_error=None, user_branches=None):
        self.calls = calls
        self.branch = branch
        self.branch_error = branch_error
        self.user_branches = user_branches

    def get_branch_by_id(self, branch_id):
        self.calls.append(("get_branch_by_id", branch_id))
        if self.branch_error:
            raise self.branch_error
        return BranchEnvelope(data=self.branch)

    def get_user_branches(self):
        self.calls.append(("get_user_branches",))
        return BranchListEnvelope(data=self.user_branches)


class RecordingView:
    """SessionView that remembers what it was told."""

    def __init__(self):
        self.errors = []
        self.field_errors = []
        self.paths = []
        self.busy_changes = []
        self.input_resets = 0

    def show_error(self, error, message):
        self.errors.append((error, message))

    def show_field_errors(self, errors):
        self.field_errors.append(dict(errors))

    def navigate(self, path):
        self.paths.append(path)

    def set_busy(self, busy):
        self.busy_changes.append(busy)

    def reset_file_input(self):
        self.input_resets += 1


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.courtdesk and any exported settings."""
    config_dir = tmp_path / ".courtdesk"
    monkeypatch.setenv("COURTDESK_CONFIG_DIR", str(config_dir))
    for var in ("COURTDESK_API_URL", "COURTDESK_API_TOKEN", "COURTDESK_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    yield config_dir


@pytest.fixture
def calls():
    return []


@pytest.fixture
def court_a():
    """The field used throughout the load scenarios."""
    return Field.model_validate(
        {
            "id": 42,
            "name": "Court A",
            "typeId": 1,
            "branchId": 5,
            "priceDay": "100000",
            "priceNight": "150000",
            "status": "available",
            "imageUrl": "http://x/img.png",
        }
    )


@pytest.fixture
def main_branch():
    return Branch(id=5, name="Main Branch")


@pytest.fixture
def field_types():
    return [FieldType(id=1, name="Futsal"), FieldType(id=2, name="Badminton")]


@pytest.fixture
def field_api(calls, court_a, field_types):
    return FakeFieldApi(calls, field=court_a, field_types=field_types)


@pytest.fixture
def branch_api(calls, main_branch):
    return FakeBranchApi(calls, branch=main_branch)


@pytest.fixture
def failing_branch_api(calls):
    return FakeBranchApi(
        calls,
        branch_error=NetworkError("connection refused"),
        user_branches=[Branch(id=5, name="Main Branch"), Branch(id=7, name="East Branch")],
    )


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def png_file():
    return ImageFile(filename="court.png", content_type="image/png", content=PNG_BYTES)


@pytest.fixture
def not_found():
    return NotFound("Field 42 not found")
