"""Skill Synonym Resolver: decides whether two skill names denote the same competency.

Resolution order:
    1. exact  - normalized names are equal (trim, lowercase, collapse whitespace)
    2. similar - the required skill's alias set intersects a candidate skill's
                 name or aliases; highest proficiency wins, ties by name
    3. none

Alias sets come from curated data (see skill_aliases) plus any aliases
stored on the requirement or candidate skill records.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from models.schemas.candidate_profile import CandidateSkill, normalize_name
from services.compatibility.skill_aliases import SKILL_ALIASES, base_skill_name, build_alias_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillResolution:
    """At most one of ``exact`` and ``similar`` is set."""
    exact: CandidateSkill | None = None
    similar: CandidateSkill | None = None

    @property
    def found(self) -> bool:
        return self.exact is not None or self.similar is not None


def _preference(skill: CandidateSkill) -> tuple[int, str]:
    return (-skill.proficiency.rank, normalize_name(skill.skill_name))


class SkillSynonymResolver:
    def __init__(self, alias_groups: Mapping[str, Iterable[str]] | None = None) -> None:
        self._index = build_alias_index(SKILL_ALIASES if alias_groups is None else alias_groups)

    @property
    def known_names(self) -> int:
        return len(self._index)

    def aliases_for(self, skill_name: str, extra_aliases: Iterable[str] = ()) -> frozenset[str]:
        """Every normalized name that denotes the same skill as ``skill_name``."""
        names = {normalize_name(skill_name), base_skill_name(skill_name)}
        names.update(normalize_name(a) for a in extra_aliases if a.strip())
        for name in list(names):
            names |= self._index.get(name, frozenset())
        return frozenset(names)

    def resolve(
        self,
        required_skill_name: str,
        candidate_skills: Sequence[CandidateSkill],
        extra_aliases: Iterable[str] = (),
    ) -> SkillResolution:
        target = normalize_name(required_skill_name)
        exact = [s for s in candidate_skills if normalize_name(s.skill_name) == target]
        if exact:
            return SkillResolution(exact=min(exact, key=_preference))

        required_names = self.aliases_for(required_skill_name, extra_aliases)
        similar = [
            s for s in candidate_skills
            if required_names & self.aliases_for(s.skill_name, s.aliases)
        ]
        if not similar:
            return SkillResolution()

        best = min(similar, key=_preference)
        logger.debug(
            "Resolved %r to related skill %r (%d candidates)",
            required_skill_name, best.skill_name, len(similar),
        )
        return SkillResolution(similar=best)
