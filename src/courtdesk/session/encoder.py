"""Chooses the request body shape for a field update and sends it."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from courtdesk.core.api import FieldApi
from courtdesk.models.base import format_value
from courtdesk.models.field import Field
from courtdesk.models.image import ImageFile
from courtdesk.session.image import ImageAttachment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JsonSubmission:
    body: Dict[str, Any]


@dataclass(frozen=True)
class MultipartSubmission:
    fields: Dict[str, str]
    image: ImageFile


Submission = Union[JsonSubmission, MultipartSubmission]


def encode_submission(payload: Dict[str, Any], image: ImageAttachment) -> Submission:
    """Pick JSON or multipart encoding from the image state.

    A removal with no replacement sends ``removeImage: true`` as JSON; a
    selected file always goes out as multipart with every payload value
    stringified; otherwise the payload is sent as plain JSON.
    """
    if image.removed and image.selected_file is None:
        return JsonSubmission(body={**payload, "removeImage": True})
    if image.selected_file is not None:
        fields = {key: format_value(value) for key, value in payload.items()}
        return MultipartSubmission(fields=fields, image=image.selected_file)
    return JsonSubmission(body=dict(payload))


class SubmissionEncoder:
    """Sends an encoded field update through the field API."""

    def __init__(self, field_api: FieldApi):
        self.field_api = field_api

    def submit(
        self, field_id: int, payload: Dict[str, Any], image: ImageAttachment
    ) -> Optional[Field]:
        submission = encode_submission(payload, image)
        if isinstance(submission, MultipartSubmission):
            logger.info(
                f"Updating field {field_id} with image {submission.image.filename}"
            )
            return self.field_api.update_field_with_image(
                field_id, submission.fields, submission.image
            )

        logger.info(f"Updating field {field_id}")
        return self.field_api.update_field(field_id, submission.body)
