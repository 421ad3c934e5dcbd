"""
Resume document model — the structured profile every tool reads.

Field names are snake_case in Python and camelCase on the wire
(`personalInfo`, `startDate`, `linkedIn`); either spelling is accepted
on input. Keys the model does not declare are kept as extras, so the
full document survives a load and dump unchanged. Models are frozen and
sequences are stored as tuples, so a loaded document cannot be changed
in place.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ResumeModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )


class PersonalInfo(_ResumeModel):
    """Name, contact fields and profile links."""

    name: str
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linked_in: str | None = None
    github: str | None = None
    website: str | None = None


class ExperienceEntry(_ResumeModel):
    company: str
    position: str
    start_date: str
    end_date: str | None = None
    current: bool = False
    description: str = ""
    achievements: tuple[str, ...] = ()


class EducationEntry(_ResumeModel):
    institution: str
    degree: str
    field: str
    year: str | int
    gpa: str | int | float | None = None


class Skills(_ResumeModel):
    technical: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    certifications: tuple[str, ...] = ()


class ProjectEntry(_ResumeModel):
    name: str
    description: str = ""
    technologies: tuple[str, ...] = ()
    url: str | None = None


class ResumeDocument(_ResumeModel):
    """The root profile document. Entity lists are never absent, only empty."""

    personal_info: PersonalInfo
    summary: str = ""
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    skills: Skills = Field(default_factory=Skills)
    projects: tuple[ProjectEntry, ...] = ()

    def to_wire(self) -> dict[str, Any]:
        """Plain JSON-ready dict using the camelCase wire names.

        Fields absent from the input stay absent; explicit nulls and
        undeclared keys come back as given.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
