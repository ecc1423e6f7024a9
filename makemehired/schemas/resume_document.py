"""Editable résumé snapshot captured from the form."""

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field

from makemehired.config import CV_TEMPLATE


class ExperienceEntry(BaseModel):
    """One job held; achievements may contain blanks until normalized."""

    model_config = ConfigDict(frozen=True)

    company: str = Field(default="", description="Employer name")
    role: str = Field(default="", description="Job title held")
    duration: str = Field(default="", description="Free-text period, e.g. '2021 - 2023'")
    achievements: Tuple[str, ...] = Field(default=("",), min_length=1, description="Bullet points, in order")


class EducationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    degree: str = Field(default="", description="Degree or qualification")
    institution: str = Field(default="", description="School or university")
    year: str = Field(default="", description="Graduation year or period")


class ResumeDocument(BaseModel):
    """
    Immutable snapshot of everything the user has typed.
    Every repeatable section holds at least one element; edits replace the
    whole snapshot (see services.document_editor).
    """

    model_config = ConfigDict(frozen=True)

    full_name: str = Field(default="", description="Required at submit time")
    email: str = Field(default="", description="Required at submit time")
    phone: str = Field(default="", description="Required at submit time")
    linkedin: str = Field(default="", description="Optional profile URL")
    summary: str = Field(default="", description="Optional professional summary")
    job_title_target: str = Field(default="", description="Required at submit time")
    skills: str = Field(default="", description="Comma-separated skills, split only on submit")
    experience: Tuple[ExperienceEntry, ...] = Field(default=(ExperienceEntry(),), min_length=1)
    education: Tuple[EducationEntry, ...] = Field(default=(EducationEntry(),), min_length=1)
    certifications: Tuple[str, ...] = Field(default=("",), min_length=1)
    projects: Tuple[str, ...] = Field(default=("",), min_length=1)
    languages: Tuple[str, ...] = Field(default=("",), min_length=1)
    interests: Tuple[str, ...] = Field(default=("",), min_length=1)
    template: Literal["modern"] = Field(default=CV_TEMPLATE, description="Fixed layout template")


def new_document() -> ResumeDocument:
    """All-empty snapshot used when an editing session starts."""
    return ResumeDocument()
