"""Wire payload sent to the CV generation endpoint."""

from typing import List, Optional

from pydantic import BaseModel, Field


class ExperiencePayload(BaseModel):
    company: str = Field(default="", description="Employer name")
    role: str = Field(default="", description="Job title held")
    duration: str = Field(default="", description="Free-text period")
    achievements: List[str] = Field(default_factory=list, description="Non-blank, trimmed bullet points")


class EducationPayload(BaseModel):
    degree: str = Field(default="")
    institution: str = Field(default="")
    year: str = Field(default="")


class Payload(BaseModel):
    """Normalized request body for POST /api/cv/generate."""

    full_name: str = Field(..., description="Candidate name")
    email: str = Field(..., description="Contact email")
    phone: str = Field(..., description="Contact phone")
    linkedin: Optional[str] = Field(default=None, description="Profile URL; null when left blank")
    summary: Optional[str] = Field(default=None, description="Professional summary; null when left blank")
    job_title_target: str = Field(..., description="Role the CV targets")
    skills: List[str] = Field(default_factory=list, description="Skills split from the comma-separated input")
    experience: List[ExperiencePayload] = Field(default_factory=list)
    education: List[EducationPayload] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)
    projects: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)
    template: str = Field(..., description="Layout template name")
