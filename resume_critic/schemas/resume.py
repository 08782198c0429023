from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Critique(BaseModel):
    # Models sometimes score with a bare number, e.g. "overall": 7.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    strengths: str
    weaknesses: str
    suggestions: str
    overall: str


class _ResumeSection(BaseModel):
    """Base for rewrite output where an explicit ``null`` means "not stated"."""

    @model_validator(mode="before")
    @classmethod
    def _nulls_to_defaults(cls, data):
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ExperienceEntry(_ResumeSection):
    title: str = ""
    company: str = ""
    duration: str = ""
    bullets: list[str] = Field(default_factory=list)


class EducationEntry(_ResumeSection):
    degree: str = ""
    institution: str = ""
    duration: str = ""


class Referee(_ResumeSection):
    name: str = ""
    title: str = ""
    company: str = ""
    phone: str = ""
    email: str = ""


class RewrittenResume(_ResumeSection):
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    # Either referee details or a withheld phrase such as ["Available upon request"].
    references: list[Referee] | list[str] = Field(default_factory=list)
