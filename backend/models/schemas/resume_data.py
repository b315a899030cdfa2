"""Scorer input: a structured resume as produced by the CV builder/parser."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class _ResumePart(BaseModel):
    """Base for resume models: explicit nulls fall back to the field default.

    Fields validate from snake_case names and from the builder's camelCase
    keys (personalInfo, fullName, startDate, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class PersonalInfo(_ResumePart):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""
    summary: str = ""


class WorkExperience(_ResumePart):
    """A single position held."""
    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""
    achievements: list[str] = []


class Education(_ResumePart):
    institution: str = ""
    degree: str = ""
    field: str = ""
    graduation_date: str = ""
    gpa: str | None = None
    honors: str | None = None


class SkillGroup(_ResumePart):
    category: str = ""
    skills: list[str] = []


class Project(_ResumePart):
    name: str = ""
    description: str = ""
    technologies: list[str] = []
    link: str | None = None
    github: str | None = None


class Certification(_ResumePart):
    name: str = ""
    issuer: str = ""
    date: str = ""
    credential_id: str | None = None


class Language(_ResumePart):
    language: str = ""
    proficiency: str = ""


class ResumeData(_ResumePart):
    """Structured resume record scored by the ATS engines.

    Every section defaults to empty and explicit nulls are read as empty,
    so partially-filled builder state always validates.
    """
    personal_info: PersonalInfo = PersonalInfo()
    experience: list[WorkExperience] = []
    education: list[Education] = []
    skills: list[SkillGroup] = []
    projects: list[Project] = []
    certifications: list[Certification] = []
    languages: list[Language] = []


def coerce_resume(resume: "ResumeData | dict") -> ResumeData:
    """Accept a model or a raw dict; dicts are validated into a new model."""
    if isinstance(resume, ResumeData):
        return resume
    return ResumeData.model_validate(resume)
