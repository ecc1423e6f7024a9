import base64

import httpx
import pytest

from makemehired.schemas.resume_document import EducationEntry, ExperienceEntry, ResumeDocument


@pytest.fixture
def filled_document():
    """A document with two experience entries and a few list items."""
    return ResumeDocument(
        full_name="Ada Lovelace",
        email="ada@example.com",
        phone="+44 20 7946 0000",
        linkedin="https://linkedin.com/in/ada",
        summary="Analytical engine programmer.",
        job_title_target="Software Engineer",
        skills="Go, Rust,  Python ",
        experience=(
            ExperienceEntry(
                company="Babbage & Co",
                role="Programmer",
                duration="1842 - 1843",
                achievements=("Led team", "", "   "),
            ),
            ExperienceEntry(company="Royal Society", role="Author", duration="1843", achievements=("Wrote notes",)),
        ),
        education=(EducationEntry(degree="Mathematics", institution="Private tutoring", year="1835"),),
        certifications=("AWS SAA", ""),
        projects=("Note G",),
        languages=("English", "  French  "),
        interests=("",),
    )


@pytest.fixture
def pdf_bytes():
    return b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<>>\nendobj\n%%EOF"


@pytest.fixture
def pdf_base64(pdf_bytes):
    return base64.b64encode(pdf_bytes).decode("ascii")


@pytest.fixture
def make_client():
    """Build an AsyncClient whose requests are answered by handler(request)."""

    def factory(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
