"""Job side of an analysis: requirements extracted upstream from a posting."""

from typing import Any

from pydantic import Field, field_validator, model_validator

from models.schemas.base import EngineModel, require_text
from models.schemas.enums import EducationTypeField, Priority, PriorityField, ProficiencyField


class SkillRequirement(EngineModel):
    skill_name: str
    category: str = "OTHER"
    is_required: bool = True
    priority: PriorityField = Priority.MEDIUM
    minimum_level: ProficiencyField | None = None
    is_bonus: bool = False
    years_required: float | None = Field(default=None, ge=0)  # informational, not scored
    aliases: tuple[str, ...] = ()

    @field_validator("skill_name")
    @classmethod
    def _skill_name_not_blank(cls, v: str) -> str:
        return require_text(v, "skill name")

    @model_validator(mode="before")
    @classmethod
    def _bonus_defaults_to_optional(cls, data: Any) -> Any:
        if isinstance(data, dict):
            bonus = data.get("isBonus", data.get("is_bonus", False))
            if bonus is True and "isRequired" not in data and "is_required" not in data:
                data = {**data, "is_required": False}
        return data

    @model_validator(mode="after")
    def _bonus_is_optional(self) -> "SkillRequirement":
        if self.is_bonus and self.is_required:
            raise ValueError(f"bonus skill {self.skill_name!r} cannot also be required")
        return self


class ExperienceRequirement(EngineModel):
    category: str
    is_required: bool = True
    years: float | None = Field(default=None, ge=0)
    description: str = ""

    @field_validator("category")
    @classmethod
    def _category_not_blank(cls, v: str) -> str:
        return require_text(v, "experience category")


class EducationRequirement(EngineModel):
    level: EducationTypeField
    field: str | None = None
    is_required: bool = True
    description: str | None = None

    @field_validator("field")
    @classmethod
    def _blank_field_is_unspecified(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


class JobPostingRef(EngineModel):
    id: str
    title: str = ""
    company: str = ""


class JobRequirements(EngineModel):
    """Requirement bundle for one posting.

    Entries in ``bonus_skills`` are re-tagged as bonus, non-required items
    by :meth:`skill_requirements`; an entry there that explicitly claims to
    be required is rejected, as is an entry in ``required_skills`` that is
    flagged bonus or not required.
    """
    job_posting: JobPostingRef | None = None
    required_skills: tuple[SkillRequirement, ...] = ()
    bonus_skills: tuple[SkillRequirement, ...] = ()
    experience_requirements: tuple[ExperienceRequirement, ...] = ()
    education_requirements: tuple[EducationRequirement, ...] = ()

    @model_validator(mode="after")
    def _lists_agree_with_flags(self) -> "JobRequirements":
        for req in self.required_skills:
            if req.is_bonus:
                raise ValueError(f"required skill {req.skill_name!r} is flagged as bonus")
            if not req.is_required:
                raise ValueError(f"required skill {req.skill_name!r} is flagged as not required")
        for req in self.bonus_skills:
            if req.is_required and "is_required" in req.model_fields_set:
                raise ValueError(f"bonus skill {req.skill_name!r} is flagged as required")
        return self

    def skill_requirements(self) -> tuple[SkillRequirement, ...]:
        """Required list followed by the bonus list, each item tagged."""
        bonus = tuple(
            req.model_copy(update={"is_bonus": True, "is_required": False})
            for req in self.bonus_skills
        )
        return self.required_skills + bonus

    @property
    def requirement_count(self) -> int:
        return (
            len(self.required_skills)
            + len(self.bonus_skills)
            + len(self.experience_requirements)
            + len(self.education_requirements)
        )
