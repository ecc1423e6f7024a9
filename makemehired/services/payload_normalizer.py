"""Convert an edit-time ResumeDocument into the wire Payload. No side effects."""

from typing import Iterable, List, Optional

from makemehired.config import CV_TEMPLATE
from makemehired.schemas.payload import EducationPayload, ExperiencePayload, Payload
from makemehired.schemas.resume_document import ResumeDocument


def split_skills(text: str) -> List[str]:
    """
    Split comma-separated skills, trim each piece and drop empty ones.
    Order and duplicates are kept.
    """
    return [piece.strip() for piece in (text or "").split(",") if piece.strip()]


def clean(items: Iterable[str]) -> List[str]:
    """Trim every element and drop the ones left empty; survivors keep their order."""
    return [item.strip() for item in (items or ()) if item and item.strip()]


def _optional(value: str) -> Optional[str]:
    # Blank optional fields go out as null; anything else passes through untrimmed
    return value or None


def normalize(doc: ResumeDocument) -> Payload:
    """Build the request payload from a document snapshot."""
    return Payload(
        full_name=doc.full_name,
        email=doc.email,
        phone=doc.phone,
        linkedin=_optional(doc.linkedin),
        summary=_optional(doc.summary),
        job_title_target=doc.job_title_target,
        skills=split_skills(doc.skills),
        experience=[
            ExperiencePayload(
                company=e.company,
                role=e.role,
                duration=e.duration,
                achievements=clean(e.achievements),
            )
            for e in doc.experience
        ],
        education=[
            EducationPayload(degree=ed.degree, institution=ed.institution, year=ed.year)
            for ed in doc.education
        ],
        certifications=clean(doc.certifications),
        projects=clean(doc.projects),
        languages=clean(doc.languages),
        interests=clean(doc.interests),
        template=CV_TEMPLATE,
    )
