"""Root aggregate returned by the compatibility engine."""

from pydantic import Field

from models.schemas.base import EngineModel
from models.schemas.job_requirements import JobPostingRef
from models.schemas.matches import EducationMatch, ExperienceMatch, SkillMatch


class CompatibilitySummary(EngineModel):
    perfect_matches: int = 0
    partial_matches: int = 0
    missing_requirements: int = 0  # bonus skills excluded
    strong_points: tuple[str, ...] = ()
    improvement_areas: tuple[str, ...] = ()


class CompatibilityReport(EngineModel):
    """Immutable, JSON-serializable result of one analysis.

    Match arrays keep the order of the input requirements (required skills
    first, then bonus skills).
    """
    job_posting: JobPostingRef | None = None
    overall_score: int = Field(ge=0, le=100)
    skill_matches: tuple[SkillMatch, ...] = ()
    experience_matches: tuple[ExperienceMatch, ...] = ()
    education_matches: tuple[EducationMatch, ...] = ()
    summary: CompatibilitySummary = CompatibilitySummary()
