"""Skill Matcher: classifies each skill requirement against the candidate's skills.

    exact match, no minimum or minimum met   -> perfect, 100
    exact match, proficiency below minimum   -> partial, scaled by rank, floor 25
    alias match only                         -> partial, 60
    nothing                                  -> missing, 0

Bonus requirements are classified the same way; the aggregator decides how
they count.
"""

import logging
from collections.abc import Sequence

from config import settings
from models.schemas.candidate_profile import CandidateSkill
from models.schemas.enums import Compatibility
from models.schemas.job_requirements import SkillRequirement
from models.schemas.matches import SkillMatch
from services.compatibility.base import BaseMatcherService
from services.compatibility.matcher_registry import SKILL_MATCHER
from services.compatibility.reasons import ReasonKey, render
from services.compatibility.scoring import shortfall_score
from services.compatibility.skill_aliases import SKILL_ALIASES, load_alias_file, merge_alias_groups
from services.compatibility.synonym_resolver import SkillSynonymResolver

logger = logging.getLogger(__name__)

SYNONYM_MATCH_SCORE = 60
BELOW_MINIMUM_FLOOR = 25


class SkillMatcherService(BaseMatcherService[SkillRequirement, CandidateSkill, SkillMatch]):
    name = SKILL_MATCHER

    def __init__(self, resolver: SkillSynonymResolver | None = None) -> None:
        self._resolver = resolver

    def load(self) -> None:
        if self._resolver is not None:
            return
        groups: dict[str, list[str]] = dict(SKILL_ALIASES)
        if settings.skill_aliases_path:
            groups = merge_alias_groups(groups, load_alias_file(settings.skill_aliases_path))
        self._resolver = SkillSynonymResolver(groups)
        logger.info("Skill matcher ready with %d known skill names", self._resolver.known_names)

    @property
    def resolver(self) -> SkillSynonymResolver:
        self.ensure_loaded()
        return self._resolver

    def match(
        self,
        requirements: Sequence[SkillRequirement],
        candidate_data: Sequence[CandidateSkill],
    ) -> tuple[SkillMatch, ...]:
        self.ensure_loaded()
        return tuple(self._match_one(req, candidate_data) for req in requirements)

    def _match_one(
        self, req: SkillRequirement, candidate_skills: Sequence[CandidateSkill]
    ) -> SkillMatch:
        resolution = self._resolver.resolve(req.skill_name, candidate_skills, req.aliases)

        if resolution.exact is not None:
            compatibility, score, reason = _evaluate_exact(req, resolution.exact)
            match = SkillMatch(
                requirement=req,
                skill=req.skill_name,
                user_skill=resolution.exact,
                compatibility=compatibility,
                score=score,
                reason=reason,
            )
        elif resolution.similar is not None:
            match = SkillMatch(
                requirement=req,
                skill=req.skill_name,
                similar_skill=resolution.similar,
                compatibility=Compatibility.PARTIAL,
                score=SYNONYM_MATCH_SCORE,
                reason=render(ReasonKey.SKILL_SIMILAR, similar=resolution.similar.skill_name),
            )
        else:
            match = SkillMatch(
                requirement=req,
                skill=req.skill_name,
                compatibility=Compatibility.MISSING,
                score=0,
                reason=render(ReasonKey.SKILL_MISSING),
            )

        logger.debug("Skill %r -> %s (%d)", req.skill_name, match.compatibility.value, match.score)
        return match


def _evaluate_exact(
    req: SkillRequirement, user_skill: CandidateSkill
) -> tuple[Compatibility, int, str]:
    held = user_skill.proficiency
    minimum = req.minimum_level

    if minimum is None:
        return Compatibility.PERFECT, 100, render(ReasonKey.SKILL_EXACT, level=held.label)

    if held.rank >= minimum.rank:
        reason = render(ReasonKey.SKILL_EXACT_MEETS_MINIMUM, level=held.label, minimum=minimum.label)
        return Compatibility.PERFECT, 100, reason

    score = shortfall_score(held.rank, minimum.rank, BELOW_MINIMUM_FLOOR)
    reason = render(ReasonKey.SKILL_BELOW_MINIMUM, level=held.label, minimum=minimum.label)
    return Compatibility.PARTIAL, score, reason
