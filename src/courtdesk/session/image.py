"""Image attachment lifecycle for the field edit session.

The attachment is always in exactly one of four states:

- :class:`NoImage` - nothing tracked
- :class:`ExistingImage` - the remote image, untouched
- :class:`ReplacingImage` - a local file is selected and will be uploaded
- :class:`RemovedImage` - the operator asked to delete the remote image

Because each state is its own type, a preview can only exist next to a
selected file, and a selected file can never coexist with a removal.
"""

import base64
import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, Protocol, Union

from courtdesk.core.errors import FormValidationError
from courtdesk.models.image import ACCEPTED_IMAGE_TYPES, ImageFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoImage:
    pass


@dataclass(frozen=True)
class ExistingImage:
    url: str


@dataclass(frozen=True)
class ReplacingImage:
    file: ImageFile
    preview: Optional[str] = None
    # Remote URL shown before the file was picked, restored on cancel
    fallback_url: Optional[str] = None


@dataclass(frozen=True)
class RemovedImage:
    pass


ImageState = Union[NoImage, ExistingImage, ReplacingImage, RemovedImage]


class PreviewReader(Protocol):
    """Produces a displayable preview for a file and hands it to a callback."""

    def read(self, file: ImageFile, on_ready: Callable[[str], None]) -> None: ...


class DataUrlPreviewReader:
    """Builds a base64 ``data:`` URL and delivers it right away."""

    def read(self, file: ImageFile, on_ready: Callable[[str], None]) -> None:
        encoded = base64.b64encode(file.content).decode("ascii")
        on_ready(f"data:{file.content_type};base64,{encoded}")


class ImageAttachment:
    """State machine reacting to the operator's image actions."""

    def __init__(
        self,
        preview_reader: Optional[PreviewReader] = None,
        on_input_reset: Optional[Callable[[], None]] = None,
    ):
        """Initialize with nothing tracked.

        Args:
            preview_reader: Source of file previews (data URLs by default)
            on_input_reset: Called when the file picker should be emptied
        """
        self.preview_reader = preview_reader or DataUrlPreviewReader()
        self.on_input_reset = on_input_reset
        self.state: ImageState = NoImage()

    @property
    def removed(self) -> bool:
        return isinstance(self.state, RemovedImage)

    @property
    def selected_file(self) -> Optional[ImageFile]:
        if isinstance(self.state, ReplacingImage):
            return self.state.file
        return None

    @property
    def preview(self) -> Optional[str]:
        if isinstance(self.state, ReplacingImage):
            return self.state.preview
        return None

    @property
    def current_url(self) -> Optional[str]:
        """Remote image URL still offered to the operator, if any."""
        if isinstance(self.state, ExistingImage):
            return self.state.url
        if isinstance(self.state, ReplacingImage):
            return self.state.fallback_url
        return None

    def track_existing(self, url: Optional[str]) -> None:
        """Start tracking the image stored on the server."""
        self.state = ExistingImage(url) if url else NoImage()

    def select_file(self, file: Optional[ImageFile]) -> None:
        """Handle a file picker change.

        Args:
            file: The picked file, or None when the picker was cancelled

        Raises:
            FormValidationError: If the file is not a PNG or JPEG image
        """
        if file is None:
            if isinstance(self.state, ReplacingImage):
                self.track_existing(self.state.fallback_url)
            return

        if not file.is_accepted:
            raise FormValidationError(
                {"image": f"Image must be one of: {', '.join(ACCEPTED_IMAGE_TYPES)}"}
            )

        logger.debug(f"Selected image {file.filename} ({file.content_type})")
        self.state = ReplacingImage(file=file, fallback_url=self.current_url)
        self.preview_reader.read(file, lambda preview: self._preview_ready(file, preview))

    def _preview_ready(self, file: ImageFile, preview: str) -> None:
        # Drop previews for a file that is no longer selected
        if isinstance(self.state, ReplacingImage) and self.state.file is file:
            self.state = replace(self.state, preview=preview)

    def remove(self) -> None:
        """Discard any selection and mark the remote image for deletion."""
        if self.current_url is not None:
            self.state = RemovedImage()
        elif isinstance(self.state, ReplacingImage):
            self.state = NoImage()

        if self.on_input_reset is not None:
            self.on_input_reset()

    def display_source(self) -> Optional[str]:
        """Image to render: preview, then remote image, then None for a placeholder."""
        return self.preview or self.current_url
