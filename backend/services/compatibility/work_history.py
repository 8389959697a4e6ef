"""Aggregates raw work-history positions into per-category experience rows."""

import logging
from collections.abc import Sequence
from datetime import date

from models.schemas.candidate_profile import (
    CandidateExperience,
    RelevantPosition,
    WorkHistoryEntry,
    normalize_name,
)
from services.compatibility.errors import CompatibilityInputError
from services.compatibility.scoring import round_half_up

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365


def years_at_position(start: date, end: date) -> float:
    """Tenure in years, to one decimal place."""
    return round_half_up((end - start).days / DAYS_PER_YEAR * 10) / 10


def aggregate_experience(
    entries: Sequence[WorkHistoryEntry], as_of: date
) -> tuple[CandidateExperience, ...]:
    """Sum tenure per category across positions.

    Open-ended positions run until ``as_of``. Categories are grouped
    case-insensitively; the alphabetically first spelling is kept so the
    result does not depend on entry order. Rows are sorted by category and
    list their contributing positions oldest first.
    """
    totals: dict[str, float] = {}
    spellings: dict[str, str] = {}
    positions: dict[str, list[tuple[tuple, RelevantPosition]]] = {}

    for entry in entries:
        end = entry.end_date or as_of
        if end < entry.start_date:
            raise CompatibilityInputError(
                f"Position {entry.job_title!r} at {entry.company_name!r} starts after {as_of}",
                field_name="start_date",
                received_value=entry.start_date.isoformat(),
                expected=f"a date on or before {as_of.isoformat()}",
            )
        years = years_at_position(entry.start_date, end)
        position = RelevantPosition(job_title=entry.job_title, company_name=entry.company_name, years=years)
        order = (entry.start_date, end, entry.job_title, entry.company_name)

        # A position tagged twice with the same category counts once
        for key in {normalize_name(c) for c in entry.categories if c.strip()}:
            totals[key] = totals.get(key, 0.0) + years
            positions.setdefault(key, []).append((order, position))
        for category in entry.categories:
            key = normalize_name(category)
            if key and (key not in spellings or category.strip() < spellings[key]):
                spellings[key] = category.strip()

    rows = tuple(
        CandidateExperience(
            category=spellings[key],
            total_years=round_half_up(totals[key] * 10) / 10,
            relevant_positions=tuple(p for _, p in sorted(positions[key], key=lambda item: item[0])),
        )
        for key in sorted(totals)
    )
    logger.debug("Aggregated %d positions into %d experience categories", len(entries), len(rows))
    return rows
