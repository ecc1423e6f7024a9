"""Schema exports."""

from .payload import EducationPayload, ExperiencePayload, Payload
from .resume_document import EducationEntry, ExperienceEntry, ResumeDocument, new_document
from .sections import EducationField, EntrySection, ExperienceField, ListSection, ScalarField
from .submission_result import GenerateResponse, SubmissionFailure, SubmissionResult, SubmissionSuccess

__all__ = [
    "ResumeDocument",
    "ExperienceEntry",
    "EducationEntry",
    "new_document",
    "Payload",
    "ExperiencePayload",
    "EducationPayload",
    "GenerateResponse",
    "SubmissionResult",
    "SubmissionSuccess",
    "SubmissionFailure",
    "ScalarField",
    "EntrySection",
    "ListSection",
    "ExperienceField",
    "EducationField",
]
