from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from typing import Any, Optional


class ResumeModel(BaseModel):
    """Base for resume records: camelCase JSON, nulls fall back to field defaults."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# ── Sub-Models ──────────────────────────────────────────────────────────────


class PersonalInfo(ResumeModel):
    """Candidate contact information."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: Optional[str] = None
    website: Optional[str] = None
    github: Optional[str] = None
    photo_url: Optional[str] = None


class Education(ResumeModel):
    """A single education entry."""

    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: Optional[str] = None
    location: Optional[str] = None
    achievements: list[str] = []


class Experience(ResumeModel):
    """A single work experience entry."""

    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    responsibilities: list[str] = []
    achievements: list[str] = []


class Project(ResumeModel):
    """A single project entry."""

    title: str = ""
    description: str = ""
    technologies: list[str] = []
    highlights: list[str] = []
    link: Optional[str] = None
    github: Optional[str] = None


class SkillCategory(ResumeModel):
    """A named group of skills, e.g. Languages: Python, Go."""

    category: str = ""
    items: list[str] = []


class Certification(ResumeModel):
    name: str = ""
    issuer: str = ""
    date: str = ""
    credential_id: Optional[str] = None


# ── Main Resume Model ──────────────────────────────────────────────────────


class ResumeData(ResumeModel):
    """Structured resume document, the input to scoring and enhancement."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    education: list[Education] = []
    experience: list[Experience] = []
    projects: list[Project] = []
    skills: list[SkillCategory] = []
    certifications: list[Certification] = []
