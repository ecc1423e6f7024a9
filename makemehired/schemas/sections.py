"""Closed sets of names used to address parts of a résumé document."""

from enum import Enum


class ScalarField(str, Enum):
    """Top-level single-value fields."""

    FULL_NAME = "full_name"
    EMAIL = "email"
    PHONE = "phone"
    LINKEDIN = "linkedin"
    SUMMARY = "summary"
    JOB_TITLE_TARGET = "job_title_target"
    SKILLS = "skills"


class EntrySection(str, Enum):
    """Sections whose elements are structured entries."""

    EXPERIENCE = "experience"
    EDUCATION = "education"


class ListSection(str, Enum):
    """Sections whose elements are plain strings."""

    CERTIFICATIONS = "certifications"
    PROJECTS = "projects"
    LANGUAGES = "languages"
    INTERESTS = "interests"


class ExperienceField(str, Enum):
    COMPANY = "company"
    ROLE = "role"
    DURATION = "duration"


class EducationField(str, Enum):
    DEGREE = "degree"
    INSTITUTION = "institution"
    YEAR = "year"


# Fields an entry section accepts in set_entry_field
ENTRY_FIELDS = {
    EntrySection.EXPERIENCE: ExperienceField,
    EntrySection.EDUCATION: EducationField,
}
