"""Service exports."""

from .artifact_handler import (
    DownloadResource,
    PreviewSurface,
    decode_binary,
    ephemeral_download,
    render_preview,
    trigger_download,
)
from .document_editor import (
    append_achievement,
    append_entry,
    missing_required_fields,
    set_achievement,
    set_entry_field,
    set_list_element,
    set_scalar,
)
from .document_store import DocumentStore
from .generation_client import GenerationError, generate_endpoint, request_generation
from .payload_normalizer import clean, normalize, split_skills
from .submission_controller import SubmissionController, SubmissionState

__all__ = [
    "set_scalar",
    "set_entry_field",
    "set_list_element",
    "set_achievement",
    "append_entry",
    "append_achievement",
    "missing_required_fields",
    "DocumentStore",
    "normalize",
    "clean",
    "split_skills",
    "request_generation",
    "generate_endpoint",
    "GenerationError",
    "SubmissionController",
    "SubmissionState",
    "decode_binary",
    "trigger_download",
    "ephemeral_download",
    "DownloadResource",
    "render_preview",
    "PreviewSurface",
]
