"""Education Matcher: compares education requirements with the candidate's records.

Ordinal levels (HIGH_SCHOOL < ASSOCIATE < BACHELOR < MASTER < DOCTORATE)
are satisfied by any entry of equal or higher rank. CERTIFICATION,
CONTINUOUS_PROFESSIONAL_DEVELOPMENT and OTHER are satisfied only by entries
of the same type.

When the requirement names a field, it is looked for in the degree name,
institution and description as a case-insensitive substring, together with
its curated synonyms.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

from models.schemas.candidate_profile import CandidateEducation, normalize_name
from models.schemas.enums import Compatibility
from models.schemas.job_requirements import EducationRequirement
from models.schemas.matches import EducationMatch
from services.compatibility.base import BaseMatcherService
from services.compatibility.matcher_registry import EDUCATION_MATCHER
from services.compatibility.reasons import ReasonKey, render
from services.compatibility.scoring import shortfall_score
from services.compatibility.skill_aliases import FIELD_ALIASES, build_alias_index

logger = logging.getLogger(__name__)

FIELD_MISMATCH_SCORE = 70
BELOW_LEVEL_FLOOR = 25


def _preference(entry: CandidateEducation) -> tuple:
    """Highest rank first, then a stable textual order."""
    return (
        -(entry.type.rank or 0),
        entry.type.value,
        normalize_name(entry.degree_or_cert_name or ""),
        normalize_name(entry.institution_name),
    )


def _held_label(entry: CandidateEducation) -> str:
    return entry.degree_or_cert_name or entry.type.label


class EducationMatcherService(
    BaseMatcherService[EducationRequirement, CandidateEducation, EducationMatch]
):
    name = EDUCATION_MATCHER

    def __init__(self, field_aliases: Mapping[str, Iterable[str]] | None = None) -> None:
        self._field_aliases = FIELD_ALIASES if field_aliases is None else field_aliases
        self._field_index: dict[str, frozenset[str]] = {}

    def load(self) -> None:
        self._field_index = build_alias_index(self._field_aliases)
        logger.info("Education matcher ready with %d field names", len(self._field_index))

    def match(
        self,
        requirements: Sequence[EducationRequirement],
        candidate_data: Sequence[CandidateEducation],
    ) -> tuple[EducationMatch, ...]:
        self.ensure_loaded()
        return tuple(self._match_one(req, candidate_data) for req in requirements)

    def field_matches(self, field: str, entry: CandidateEducation) -> bool:
        """Case-insensitive substring search for the field or one of its synonyms."""
        self.ensure_loaded()
        key = normalize_name(field)
        terms = {key} | self._field_index.get(key, frozenset())
        text = normalize_name(" ".join(
            part for part in (entry.degree_or_cert_name, entry.institution_name, entry.description) if part
        ))
        return any(term in text for term in terms)

    def _match_one(
        self, req: EducationRequirement, education: Sequence[CandidateEducation]
    ) -> EducationMatch:
        level = req.level

        if level.is_ordinal:
            comparable = [e for e in education if e.type.is_ordinal]
            qualifying = [e for e in comparable if e.type.rank >= level.rank]
            if comparable and not qualifying:
                best = min(comparable, key=_preference)
                return self._build(
                    req, best, Compatibility.PARTIAL,
                    shortfall_score(best.type.rank, level.rank, BELOW_LEVEL_FLOOR),
                    render(ReasonKey.EDUCATION_BELOW_LEVEL, held=_held_label(best), level=level.label),
                )
        else:
            qualifying = [e for e in education if e.type == level]

        if not qualifying:
            return self._build(
                req, None, Compatibility.MISSING, 0,
                render(ReasonKey.EDUCATION_NOT_FOUND, level=level.label),
            )
        return self._check_field(req, qualifying)

    def _check_field(
        self, req: EducationRequirement, qualifying: Sequence[CandidateEducation]
    ) -> EducationMatch:
        level = req.level

        if req.field is None:
            best = min(qualifying, key=_preference)
            return self._build(
                req, best, Compatibility.PERFECT, 100,
                render(ReasonKey.EDUCATION_MEETS, held=_held_label(best), level=level.label),
            )

        in_field = [e for e in qualifying if self.field_matches(req.field, e)]
        if in_field:
            best = min(in_field, key=_preference)
            return self._build(
                req, best, Compatibility.PERFECT, 100,
                render(ReasonKey.EDUCATION_MEETS_FIELD, held=_held_label(best), level=level.label, field=req.field),
            )

        best = min(qualifying, key=_preference)
        return self._build(
            req, best, Compatibility.PARTIAL, FIELD_MISMATCH_SCORE,
            render(ReasonKey.EDUCATION_FIELD_MISMATCH, held=_held_label(best), level=level.label, field=req.field),
        )

    @staticmethod
    def _build(
        req: EducationRequirement,
        entry: CandidateEducation | None,
        compatibility: Compatibility,
        score: int,
        reason: str,
    ) -> EducationMatch:
        logger.debug("Education %s -> %s (%d)", req.level.value, compatibility.value, score)
        return EducationMatch(
            requirement=req,
            level=req.level,
            user_education=entry,
            compatibility=compatibility,
            score=score,
            reason=reason,
        )
