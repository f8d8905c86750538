"""Field edit session: loading, image handling and submission."""

from .controller import FieldEditSession, SessionView
from .encoder import JsonSubmission, MultipartSubmission, SubmissionEncoder, encode_submission
from .image import (
    DataUrlPreviewReader,
    ExistingImage,
    ImageAttachment,
    NoImage,
    RemovedImage,
    ReplacingImage,
)
from .loader import ReferenceDataLoader
from .state import EditState, RouteParams, parse_route_id

__all__ = [
    "FieldEditSession",
    "SessionView",
    "JsonSubmission",
    "MultipartSubmission",
    "SubmissionEncoder",
    "encode_submission",
    "DataUrlPreviewReader",
    "ExistingImage",
    "ImageAttachment",
    "NoImage",
    "RemovedImage",
    "ReplacingImage",
    "ReferenceDataLoader",
    "EditState",
    "RouteParams",
    "parse_route_id",
]
