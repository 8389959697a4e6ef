"""Per-requirement match results produced by the three matchers."""

from pydantic import Field, model_validator

from models.schemas.base import EngineModel
from models.schemas.candidate_profile import CandidateEducation, CandidateExperience, CandidateSkill
from models.schemas.enums import Compatibility, EducationType
from models.schemas.job_requirements import (
    EducationRequirement,
    ExperienceRequirement,
    SkillRequirement,
)


class SkillMatch(EngineModel):
    """Outcome for one skill requirement.

    At most one of ``user_skill`` (exact name match) and ``similar_skill``
    (alias match) is set.
    """
    requirement: SkillRequirement
    skill: str
    user_skill: CandidateSkill | None = None
    similar_skill: CandidateSkill | None = None
    compatibility: Compatibility
    score: int = Field(ge=0, le=100)
    reason: str

    @model_validator(mode="after")
    def _single_candidate_skill(self) -> "SkillMatch":
        if self.user_skill is not None and self.similar_skill is not None:
            raise ValueError("a skill match cannot have both an exact and a similar skill")
        return self


class ExperienceMatch(EngineModel):
    requirement: ExperienceRequirement
    category: str
    user_experience: CandidateExperience | None = None
    compatibility: Compatibility
    score: int = Field(ge=0, le=100)
    reason: str


class EducationMatch(EngineModel):
    requirement: EducationRequirement
    level: EducationType
    user_education: CandidateEducation | None = None  # entry the decision was made on
    compatibility: Compatibility
    score: int = Field(ge=0, le=100)
    reason: str
