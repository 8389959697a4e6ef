"""Input and output contracts for the compatibility engine."""

from models.schemas.candidate_profile import (
    CandidateEducation,
    CandidateExperience,
    CandidateProfile,
    CandidateSkill,
    RelevantPosition,
    WorkHistoryEntry,
)
from models.schemas.compatibility_report import CompatibilityReport, CompatibilitySummary
from models.schemas.enums import Compatibility, EducationType, Priority, ProficiencyLevel
from models.schemas.job_requirements import (
    EducationRequirement,
    ExperienceRequirement,
    JobPostingRef,
    JobRequirements,
    SkillRequirement,
)
from models.schemas.matches import EducationMatch, ExperienceMatch, SkillMatch

__all__ = [
    "CandidateEducation",
    "CandidateExperience",
    "CandidateProfile",
    "CandidateSkill",
    "RelevantPosition",
    "WorkHistoryEntry",
    "CompatibilityReport",
    "CompatibilitySummary",
    "Compatibility",
    "EducationType",
    "Priority",
    "ProficiencyLevel",
    "EducationRequirement",
    "ExperienceRequirement",
    "JobPostingRef",
    "JobRequirements",
    "SkillRequirement",
    "EducationMatch",
    "ExperienceMatch",
    "SkillMatch",
]
