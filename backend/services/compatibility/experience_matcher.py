"""Experience Matcher: compares experience-category requirements with aggregated work history."""

import logging
from collections.abc import Sequence

from models.schemas.candidate_profile import CandidateExperience, normalize_name
from models.schemas.enums import Compatibility
from models.schemas.job_requirements import ExperienceRequirement
from models.schemas.matches import ExperienceMatch
from services.compatibility.base import BaseMatcherService
from services.compatibility.errors import CompatibilityInputError
from services.compatibility.matcher_registry import EXPERIENCE_MATCHER
from services.compatibility.reasons import ReasonKey, render
from services.compatibility.scoring import format_years, shortfall_score

logger = logging.getLogger(__name__)

SHORTFALL_FLOOR = 20


def index_by_category(rows: Sequence[CandidateExperience]) -> dict[str, CandidateExperience]:
    """Case-insensitive category lookup. Duplicate categories are a contract violation."""
    index: dict[str, CandidateExperience] = {}
    for row in rows:
        key = normalize_name(row.category)
        if key in index:
            raise CompatibilityInputError(
                f"Duplicate experience category {row.category!r}",
                field_name="experience",
                received_value=row.category,
                expected="one row per category",
            )
        index[key] = row
    return index


class ExperienceMatcherService(
    BaseMatcherService[ExperienceRequirement, CandidateExperience, ExperienceMatch]
):
    name = EXPERIENCE_MATCHER

    def load(self) -> None:
        # Nothing to prepare; categories are compared by normalized name
        logger.info("Experience matcher ready")

    def match(
        self,
        requirements: Sequence[ExperienceRequirement],
        candidate_data: Sequence[CandidateExperience],
    ) -> tuple[ExperienceMatch, ...]:
        self.ensure_loaded()
        by_category = index_by_category(candidate_data)
        return tuple(
            _match_one(req, by_category.get(normalize_name(req.category)))
            for req in requirements
        )


def _match_one(req: ExperienceRequirement, row: CandidateExperience | None) -> ExperienceMatch:
    category = req.category

    if row is None:
        compatibility, score = Compatibility.MISSING, 0
        reason = render(ReasonKey.EXPERIENCE_NOT_FOUND, category=category)
    elif req.years is None:
        compatibility, score = Compatibility.PERFECT, 100
        reason = render(ReasonKey.EXPERIENCE_PRESENT, held=format_years(row.total_years), category=category)
    elif row.total_years >= req.years:
        compatibility, score = Compatibility.PERFECT, 100
        reason = render(
            ReasonKey.EXPERIENCE_MEETS,
            held=format_years(row.total_years),
            category=category,
            required=format_years(req.years),
        )
    elif row.total_years > 0:
        compatibility = Compatibility.PARTIAL
        score = shortfall_score(row.total_years, req.years, SHORTFALL_FLOOR)
        reason = render(
            ReasonKey.EXPERIENCE_SHORT,
            held=format_years(row.total_years),
            category=category,
            shortfall=format_years(req.years - row.total_years),
            required=format_years(req.years),
        )
    else:
        compatibility, score = Compatibility.MISSING, 0
        reason = render(
            ReasonKey.EXPERIENCE_NONE_RECORDED, category=category, required=format_years(req.years)
        )

    logger.debug("Experience %r -> %s (%d)", category, compatibility.value, score)
    return ExperienceMatch(
        requirement=req,
        category=category,
        user_experience=row,
        compatibility=compatibility,
        score=score,
        reason=reason,
    )
