"""Candidate side of an analysis: skills, aggregated experience, education."""

import re
from datetime import date

from pydantic import Field, field_validator, model_validator

from models.schemas.base import EngineModel, require_text
from models.schemas.enums import EducationType, EducationTypeField, ProficiencyField


def normalize_name(name: str) -> str:
    """Canonical comparison form: trimmed, lowercased, single-spaced."""
    return re.sub(r"\s+", " ", name.strip().lower())


class CandidateSkill(EngineModel):
    """One distinct skill the candidate holds."""
    skill_name: str
    proficiency: ProficiencyField
    years_experience: float | None = Field(default=None, ge=0)
    aliases: tuple[str, ...] = ()  # alias names stored with the skill record

    @field_validator("skill_name")
    @classmethod
    def _skill_name_not_blank(cls, v: str) -> str:
        return require_text(v, "skill name")


class RelevantPosition(EngineModel):
    """A position that contributed years to an experience category."""
    job_title: str
    company_name: str
    years: float = Field(ge=0)


class CandidateExperience(EngineModel):
    """Years of experience in one category, summed across work history."""
    category: str
    total_years: float = Field(ge=0)
    relevant_positions: tuple[RelevantPosition, ...] = ()  # set when built from work history

    @field_validator("category")
    @classmethod
    def _category_not_blank(cls, v: str) -> str:
        return require_text(v, "experience category")


class CandidateEducation(EngineModel):
    type: EducationTypeField
    institution_name: str = ""
    degree_or_cert_name: str | None = None
    date_completed: date | None = None
    description: str | None = None

    @model_validator(mode="after")
    def _institution_required(self) -> "CandidateEducation":
        # Self-directed learning has no awarding institution
        exempt = (EducationType.CONTINUOUS_PROFESSIONAL_DEVELOPMENT, EducationType.OTHER)
        if self.type not in exempt and not self.institution_name.strip():
            raise ValueError(f"institution name is required for {self.type.value} education")
        return self


class WorkHistoryEntry(EngineModel):
    """A single position, tagged with the experience categories it counts toward."""
    job_title: str
    company_name: str
    start_date: date
    end_date: date | None = None  # None = current position
    categories: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _dates_in_order(self) -> "WorkHistoryEntry":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError(
                f"end date {self.end_date} is before start date {self.start_date} "
                f"for {self.job_title!r} at {self.company_name!r}"
            )
        return self


class CandidateProfile(EngineModel):
    skills: tuple[CandidateSkill, ...] = ()
    experience: tuple[CandidateExperience, ...] = ()
    education: tuple[CandidateEducation, ...] = ()

    @model_validator(mode="after")
    def _no_duplicates(self) -> "CandidateProfile":
        seen: set[str] = set()
        for skill in self.skills:
            key = normalize_name(skill.skill_name)
            if key in seen:
                raise ValueError(f"duplicate candidate skill {skill.skill_name!r}")
            seen.add(key)

        seen = set()
        for row in self.experience:
            key = normalize_name(row.category)
            if key in seen:
                raise ValueError(f"duplicate experience category {row.category!r}")
            seen.add(key)
        return self
