"""Score Aggregator: one weighted percentage plus the summary block.

Weight per item = (2 if required else 1) x priority weight, where skills use
their own priority (LOW=1, MEDIUM=1.5, HIGH=2, CRITICAL=3) and experience /
education requirements always weigh 1.5.

    overall = round(100 * sum(w_i * score_i / 100) / sum(w_i))

With no requirements at all the candidate is vacuously compatible (100).
All weights are multiples of 0.5 and scores are integers, so the weighted
sums are exact and independent of summation order.
"""

import logging
from collections.abc import Sequence

from models.schemas.compatibility_report import CompatibilitySummary
from models.schemas.enums import Compatibility, Priority
from models.schemas.matches import EducationMatch, ExperienceMatch, SkillMatch
from services.compatibility.reasons import ReasonKey, render
from services.compatibility.scoring import format_years, round_half_up

logger = logging.getLogger(__name__)

PRIORITY_WEIGHTS: dict[Priority, float] = {
    Priority.LOW: 1.0,
    Priority.MEDIUM: 1.5,
    Priority.HIGH: 2.0,
    Priority.CRITICAL: 3.0,
}
NON_SKILL_PRIORITY_WEIGHT = 1.5
REQUIRED_MULTIPLIER = 2.0
MAX_SUMMARY_ITEMS = 5

AnyMatch = SkillMatch | ExperienceMatch | EducationMatch


def requirement_weight(match: AnyMatch) -> float:
    req = match.requirement
    base = REQUIRED_MULTIPLIER if req.is_required else 1.0
    if isinstance(match, SkillMatch):
        return base * PRIORITY_WEIGHTS[req.priority]
    return base * NON_SKILL_PRIORITY_WEIGHT


def is_bonus(match: AnyMatch) -> bool:
    return isinstance(match, SkillMatch) and match.requirement.is_bonus


def compute_overall_score(matches: Sequence[AnyMatch]) -> int:
    total_weight = 0.0
    earned = 0.0
    for m in matches:
        weight = requirement_weight(m)
        total_weight += weight
        earned += weight * m.score
    if total_weight == 0:
        return 100
    return round_half_up(earned / total_weight)


def aggregate(
    skill_matches: Sequence[SkillMatch],
    experience_matches: Sequence[ExperienceMatch],
    education_matches: Sequence[EducationMatch],
) -> tuple[int, CompatibilitySummary]:
    """Combine the three matchers' results into (overall_score, summary)."""
    all_matches: list[AnyMatch] = [*skill_matches, *experience_matches, *education_matches]

    overall = compute_overall_score(all_matches)

    perfect = sum(1 for m in all_matches if m.compatibility == Compatibility.PERFECT)
    partial = sum(1 for m in all_matches if m.compatibility == Compatibility.PARTIAL)
    missing = sum(
        1 for m in all_matches
        if m.compatibility == Compatibility.MISSING and not is_bonus(m)
    )

    summary = CompatibilitySummary(
        perfect_matches=perfect,
        partial_matches=partial,
        missing_requirements=missing,
        strong_points=tuple(_strong_points(all_matches)),
        improvement_areas=tuple(_improvement_areas(all_matches)),
    )
    logger.debug(
        "Aggregated %d matches: score=%d perfect=%d partial=%d missing=%d",
        len(all_matches), overall, perfect, partial, missing,
    )
    return overall, summary


# ---------------------------------------------------------------------------
# Summary sentences
# ---------------------------------------------------------------------------

def _strong_points(matches: Sequence[AnyMatch]) -> list[str]:
    ranked = sorted(
        (
            (-requirement_weight(m), position, m)
            for position, m in enumerate(matches)
            if m.requirement.is_required and m.compatibility == Compatibility.PERFECT
        ),
        key=lambda item: item[:2],
    )
    return [_strong_point(m) for _, _, m in ranked[:MAX_SUMMARY_ITEMS]]


def _improvement_areas(matches: Sequence[AnyMatch]) -> list[str]:
    # Heavier first; at equal weight a missing item outranks a partial one
    ranked = sorted(
        (
            (-requirement_weight(m), 0 if m.compatibility == Compatibility.MISSING else 1, position, m)
            for position, m in enumerate(matches)
            if m.requirement.is_required and m.compatibility != Compatibility.PERFECT
        ),
        key=lambda item: item[:3],
    )
    return [_improvement_area(m) for *_, m in ranked[:MAX_SUMMARY_ITEMS]]


def _strong_point(m: AnyMatch) -> str:
    if isinstance(m, SkillMatch):
        return render(ReasonKey.STRONG_SKILL, skill=m.skill, level=m.user_skill.proficiency.label)
    if isinstance(m, ExperienceMatch):
        return render(
            ReasonKey.STRONG_EXPERIENCE,
            held=format_years(m.user_experience.total_years),
            category=m.category,
        )
    held = m.user_education.degree_or_cert_name or m.user_education.type.label
    return render(ReasonKey.STRONG_EDUCATION, held=held, level=m.level.label)


def _improvement_area(m: AnyMatch) -> str:
    missing = m.compatibility == Compatibility.MISSING

    if isinstance(m, SkillMatch):
        req = m.requirement
        if missing:
            return render(ReasonKey.IMPROVE_SKILL_MISSING, skill=m.skill, priority=req.priority.label)
        if m.similar_skill is not None:
            return render(ReasonKey.IMPROVE_SKILL_SIMILAR, skill=m.skill, similar=m.similar_skill.skill_name)
        return render(
            ReasonKey.IMPROVE_SKILL_LEVEL,
            skill=m.skill,
            level=m.user_skill.proficiency.label,
            minimum=req.minimum_level.label,
        )

    if isinstance(m, ExperienceMatch):
        years = m.requirement.years
        if missing:
            target = f" ({format_years(years)} required)" if years else ""
            return render(ReasonKey.IMPROVE_EXPERIENCE_MISSING, category=m.category, target=target)
        return render(
            ReasonKey.IMPROVE_EXPERIENCE_SHORT,
            shortfall=format_years(years - m.user_experience.total_years),
            category=m.category,
        )

    req = m.requirement
    if missing:
        field = f" in {req.field}" if req.field else ""
        return render(ReasonKey.IMPROVE_EDUCATION_MISSING, level=m.level.label, field=field)
    held = m.user_education
    if m.level.is_ordinal and held.type.is_ordinal and held.type.rank < m.level.rank:
        return render(
            ReasonKey.IMPROVE_EDUCATION_LEVEL,
            held=held.degree_or_cert_name or held.type.label,
            level=m.level.label,
        )
    return render(ReasonKey.IMPROVE_EDUCATION_FIELD, field=req.field)
