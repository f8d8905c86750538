"""Tests for courtdesk data models."""

import pytest
from pathlib import Path
from pydantic import ValidationError

from courtdesk.models import (
    Branch,
    BranchEnvelope,
    Field,
    FieldStatus,
    FormState,
    ImageFile,
)
from courtdesk.models.base import format_value


class TestModels:
    """Test data models."""

    def test_field_from_camel_case(self, court_a):
        """Test reading a field in the API's camelCase shape."""
        assert court_a.id == 42
        assert court_a.type_id == 1
        assert court_a.branch_id == 5
        assert court_a.price_day == 100000.0
        assert court_a.status == "available"
        assert court_a.image_url == "http://x/img.png"

    def test_field_ignores_unknown_keys(self):
        """Test that extra server fields do not break parsing."""
        field = Field.model_validate({"id": 1, "name": "Court", "createdAt": "2024-01-01"})
        assert field.name == "Court"

    def test_field_rejects_negative_price(self):
        """Test that prices must be non-negative."""
        with pytest.raises(ValidationError):
            Field.model_validate({"id": 1, "priceDay": -5})

    def test_field_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            Field.model_validate({"id": 1, "status": "demolished"})

    def test_branch_envelope(self):
        envelope = BranchEnvelope.model_validate({"data": {"id": 5, "name": "Main Branch"}})
        assert envelope.data == Branch(id=5, name="Main Branch")

    def test_empty_branch_envelope(self):
        assert BranchEnvelope.model_validate({}).data is None


class TestFormState:
    """Test mirroring a field into form text."""

    def test_from_field(self, court_a):
        form = FormState.from_field(court_a)

        assert form.values() == {
            "name": "Court A",
            "type_id": "1",
            "branch_id": "5",
            "price_day": "100000",
            "price_night": "150000",
            "status": "available",
        }

    def test_status_defaults_to_available(self):
        form = FormState.from_field(Field(id=1, name="Court"))

        assert form.status == FieldStatus.AVAILABLE.value
        assert form.type_id == ""
        assert form.price_day == ""

    def test_zero_price_is_kept(self):
        """Test that a free field shows 0 rather than an empty box."""
        form = FormState.from_field(Field(id=1, name="Court", priceDay=0))
        assert form.price_day == "0"

    def test_assignment_requires_text(self):
        form = FormState()
        form.name = "Court B"
        assert form.name == "Court B"
        with pytest.raises(ValidationError):
            form.name = None


class TestFormatValue:
    """Test browser-style value rendering."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (100000.0, "100000"),
            (99.5, "99.5"),
            (7, "7"),
            (True, "true"),
            (False, "false"),
            ("Court A", "Court A"),
        ],
    )
    def test_format_value(self, value, expected):
        assert format_value(value) == expected


class TestImageFile:
    """Test local image files."""

    def test_from_path(self, tmp_path: Path):
        path = tmp_path / "court.jpg"
        path.write_bytes(b"\xff\xd8\xff")

        image = ImageFile.from_path(path)

        assert image.filename == "court.jpg"
        assert image.content_type == "image/jpeg"
        assert image.content == b"\xff\xd8\xff"
        assert image.is_accepted

    def test_unknown_type_not_accepted(self, tmp_path: Path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        assert not ImageFile.from_path(path).is_accepted
