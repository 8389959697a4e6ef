from datetime import date

from pydantic import Field

from models.schemas.base import EngineModel
from models.schemas.candidate_profile import CandidateProfile, WorkHistoryEntry
from models.schemas.job_requirements import JobRequirements


class AnalyzeCompatibilityRequest(EngineModel):
    profile: CandidateProfile
    requirements: JobRequirements
    # Raw positions to aggregate instead of profile.experience
    work_history: tuple[WorkHistoryEntry, ...] = Field(default=(), max_length=200)
    as_of: date | None = Field(default=None, description="Cut-off for open-ended positions; defaults to today")
