"""Resume document models matching the frontend structure.

Every field is optional. Absent or null text becomes ``""`` and absent or null
sequences become ``[]`` so the analytics engine never has to guard against
missing data.
"""
from typing import Any, List

from pydantic import BaseModel, Field, field_validator


def _coerce_text(v: Any) -> Any:
    """Null becomes an empty string; numbers are stringified."""
    if v is None:
        return ""
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


def _coerce_text_list(v: Any) -> Any:
    """Null becomes an empty list; entries that are not strings become empty strings."""
    if v is None:
        return []
    if isinstance(v, list):
        return [item if isinstance(item, str) else "" for item in v]
    return v


def _coerce_list(v: Any) -> Any:
    return [] if v is None else v


class PersonalInfo(BaseModel):
    """Personal information section of the resume."""
    full_name: str = Field("", alias="fullName", description="Full name")
    email: str = Field("", description="Email address")
    phone: str = Field("", description="Phone number")
    location: str = Field("", description="Location (City, State/Country)")
    linkedin: str = Field("", description="LinkedIn profile URL or username")
    github: str = Field("", description="GitHub username or URL")
    portfolio: str = Field("", description="Portfolio or personal website URL")

    class Config:
        populate_by_name = True

    @field_validator("*", mode="before")
    @classmethod
    def empty_if_missing(cls, v):
        return _coerce_text(v)


class Experience(BaseModel):
    """Work experience entry."""
    id: str = Field("", description="Unique identifier")
    company: str = Field("", description="Company name")
    position: str = Field("", description="Job title/position")
    location: str = Field("", description="Job location")
    start_date: str = Field("", alias="startDate", description="Start date (e.g., '2020-01')")
    end_date: str = Field("", alias="endDate", description="End date or 'present'")
    current: bool = Field(False, description="Is this the current job?")
    description: List[str] = Field(default_factory=list, description="Bullet points/responsibilities")

    class Config:
        populate_by_name = True

    @field_validator("id", "company", "position", "location", "start_date", "end_date", mode="before")
    @classmethod
    def empty_if_missing(cls, v):
        return _coerce_text(v)

    @field_validator("current", mode="before")
    @classmethod
    def false_if_missing(cls, v):
        return False if v is None else v

    @field_validator("description", mode="before")
    @classmethod
    def keep_every_bullet(cls, v):
        """Empty bullets are kept: they still count toward the bullet pool."""
        return _coerce_text_list(v)


class Education(BaseModel):
    """Education entry."""
    id: str = Field("", description="Unique identifier")
    institution: str = Field("", description="School/University name")
    degree: str = Field("", description="Degree type (e.g., 'Bachelor of Science')")
    field: str = Field("", description="Field of study")
    start_date: str = Field("", alias="startDate", description="Start date/year")
    end_date: str = Field("", alias="endDate", description="End date/year")
    gpa: str = Field("", description="GPA (optional)")
    achievements: List[str] = Field(default_factory=list, description="Notable achievements")

    class Config:
        populate_by_name = True

    @field_validator("id", "institution", "degree", "field", "start_date", "end_date", "gpa", mode="before")
    @classmethod
    def empty_if_missing(cls, v):
        return _coerce_text(v)

    @field_validator("achievements", mode="before")
    @classmethod
    def empty_list_if_missing(cls, v):
        return _coerce_text_list(v)


class Skill(BaseModel):
    """Skills category."""
    id: str = Field("", description="Unique identifier")
    category: str = Field("", description="Skill category name")
    items: List[str] = Field(default_factory=list, description="List of skills in this category")

    @field_validator("id", "category", mode="before")
    @classmethod
    def empty_if_missing(cls, v):
        return _coerce_text(v)

    @field_validator("items", mode="before")
    @classmethod
    def empty_list_if_missing(cls, v):
        return _coerce_text_list(v)


class Project(BaseModel):
    """Project entry."""
    id: str = Field("", description="Unique identifier")
    name: str = Field("", description="Project name")
    description: str = Field("", description="Project description")
    technologies: List[str] = Field(default_factory=list, description="Technologies used")
    link: str = Field("", description="Project URL")
    highlights: List[str] = Field(default_factory=list, description="Key achievements as bullet points")

    @field_validator("id", "name", "description", "link", mode="before")
    @classmethod
    def empty_if_missing(cls, v):
        return _coerce_text(v)

    @field_validator("technologies", "highlights", mode="before")
    @classmethod
    def empty_list_if_missing(cls, v):
        return _coerce_text_list(v)


class ResumeDocument(BaseModel):
    """Complete resume document as saved by the editor."""
    id: str = Field("", description="Resume identifier")
    user_id: str = Field("", alias="userId", description="Owner identifier")
    title: str = Field("", description="Resume title shown on the dashboard")
    target_role: str = Field("", alias="targetRole", description="Role the resume is tailored for")
    template: str = Field("", description="Template used for rendering")
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo, alias="personalInfo")
    summary: str = Field("", description="Professional summary")
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)

    class Config:
        populate_by_name = True

    @field_validator("id", "user_id", "title", "target_role", "template", "summary", mode="before")
    @classmethod
    def empty_if_missing(cls, v):
        return _coerce_text(v)

    @field_validator("personal_info", mode="before")
    @classmethod
    def default_personal_info(cls, v):
        return {} if v is None else v

    @field_validator("experience", "education", "skills", "projects", mode="before")
    @classmethod
    def empty_list_if_missing(cls, v):
        return _coerce_list(v)
