"""Local image file selected for upload."""

import mimetypes
from pathlib import Path
from typing import Union

from pydantic import Field as PydanticField

from .base import CourtDeskBaseModel

ACCEPTED_IMAGE_TYPES = ("image/png", "image/jpeg")


class ImageFile(CourtDeskBaseModel):
    """An image picked by the operator, held in memory until submit."""

    filename: str = PydanticField(description="Original file name")
    content_type: str = PydanticField(description="MIME type of the file")
    content: bytes = PydanticField(repr=False, description="Raw file bytes")

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ImageFile":
        """Read an image from disk, guessing its MIME type from the suffix."""
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            content_type=content_type or "application/octet-stream",
            content=path.read_bytes(),
        )

    @property
    def is_accepted(self) -> bool:
        """Whether the file is a PNG or JPEG image."""
        return self.content_type in ACCEPTED_IMAGE_TYPES
