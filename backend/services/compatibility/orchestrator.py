"""Compatibility Report Assembler: the engine's single entry point.

Flow:
    CandidateProfile + JobRequirements
      ├─ skill_matcher.match(skill requirements, skills)            → SkillMatch[]
      ├─ experience_matcher.match(experience requirements, rows)    → ExperienceMatch[]
      ├─ education_matcher.match(education requirements, entries)   → EducationMatch[]
      │               ↓ (independent; optionally on a thread pool)
      └─ score_aggregator.aggregate(all three)                      → overall score + summary
                       ↓
         CompatibilityReport (frozen)

No I/O happens here: inputs arrive fully materialized and the report is
handed back to the caller. Identical inputs give byte-identical reports.
"""

import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from config import settings
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.compatibility_report import CompatibilityReport
from models.schemas.job_requirements import JobRequirements
from services.compatibility.errors import CompatibilityInputError
from services.compatibility.matcher_registry import (
    EDUCATION_MATCHER,
    EXPERIENCE_MATCHER,
    SKILL_MATCHER,
    get_matcher,
)
from services.compatibility.score_aggregator import aggregate

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _coerce(model: type[ModelT], value: ModelT | Mapping[str, Any], what: str) -> ModelT:
    """Accept a validated model or a raw mapping; anything else fails fast."""
    if isinstance(value, model):
        return value
    if not isinstance(value, Mapping):
        raise CompatibilityInputError(
            f"{what} must be a {model.__name__} or a mapping, got {type(value).__name__}",
            field_name=what,
            received_value=value,
            expected=model.__name__,
        )
    try:
        return model.model_validate(value)
    except ValidationError as e:
        logger.warning("Rejected %s: %d validation error(s)", what, e.error_count())
        raise CompatibilityInputError(
            f"Invalid {what}: {e}",
            field_name=what,
            expected=model.__name__,
            errors=e.errors(include_url=False),
        ) from e


def analyze(
    profile: CandidateProfile | Mapping[str, Any],
    requirements: JobRequirements | Mapping[str, Any],
) -> CompatibilityReport:
    """Compare a candidate profile with a job's requirements."""
    profile = _coerce(CandidateProfile, profile, "profile")
    requirements = _coerce(JobRequirements, requirements, "requirements")

    skill_matcher = get_matcher(SKILL_MATCHER)
    experience_matcher = get_matcher(EXPERIENCE_MATCHER)
    education_matcher = get_matcher(EDUCATION_MATCHER)

    jobs = (
        (skill_matcher, requirements.skill_requirements(), profile.skills),
        (experience_matcher, requirements.experience_requirements, profile.experience),
        (education_matcher, requirements.education_requirements, profile.education),
    )

    if settings.parallel_matchers:
        with ThreadPoolExecutor(max_workers=len(jobs), thread_name_prefix="matcher") as pool:
            futures = [pool.submit(svc.match, reqs, data) for svc, reqs, data in jobs]
            skill_matches, experience_matches, education_matches = (f.result() for f in futures)
    else:
        skill_matches, experience_matches, education_matches = (
            svc.match(reqs, data) for svc, reqs, data in jobs
        )

    overall_score, summary = aggregate(skill_matches, experience_matches, education_matches)

    report = CompatibilityReport(
        job_posting=requirements.job_posting,
        overall_score=overall_score,
        skill_matches=skill_matches,
        experience_matches=experience_matches,
        education_matches=education_matches,
        summary=summary,
    )
    logger.info(
        "Compatibility analysis finished: job=%s requirements=%d score=%d "
        "perfect=%d partial=%d missing=%d",
        requirements.job_posting.id if requirements.job_posting else "-",
        requirements.requirement_count,
        overall_score,
        summary.perfect_matches,
        summary.partial_matches,
        summary.missing_requirements,
    )
    return report
