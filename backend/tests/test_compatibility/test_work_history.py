"""Tests for work-history aggregation into experience rows."""

from datetime import date

import pytest
from pydantic import ValidationError

from models.schemas.candidate_profile import WorkHistoryEntry
from services.compatibility.errors import CompatibilityInputError
from services.compatibility.work_history import aggregate_experience, years_at_position

AS_OF = date(2024, 1, 1)


def _position(start, end=None, categories=("Backend",), title="Engineer", company="Acme"):
    return WorkHistoryEntry(
        job_title=title, company_name=company, start_date=start, end_date=end, categories=categories
    )


class TestYearsAtPosition:
    def test_whole_years(self):
        assert years_at_position(date(2019, 1, 1), date(2023, 1, 1)) == 4.0

    def test_one_decimal(self):
        assert years_at_position(date(2023, 1, 1), date(2023, 7, 1)) == 0.5

    def test_same_day(self):
        assert years_at_position(date(2023, 1, 1), date(2023, 1, 1)) == 0.0


class TestAggregateExperience:
    def test_sums_per_category(self):
        rows = aggregate_experience(
            [
                _position(date(2018, 1, 1), date(2020, 1, 1), ("Backend", "DevOps")),
                _position(date(2020, 1, 1), date(2022, 1, 1), ("backend",)),
            ],
            AS_OF,
        )
        assert [(r.category, r.total_years) for r in rows] == [("Backend", 4.0), ("DevOps", 2.0)]

    def test_lists_contributing_positions_oldest_first(self):
        rows = aggregate_experience(
            [
                _position(date(2021, 1, 1), None, ("Backend",), title="Lead Engineer", company="Globex"),
                _position(date(2018, 1, 1), date(2020, 1, 1), ("Backend", "DevOps"), title="Engineer", company="Acme"),
                _position(date(2020, 1, 1), date(2021, 1, 1), ("Frontend",), title="UI Developer", company="Initech"),
            ],
            AS_OF,
        )
        backend = rows[0]
        assert backend.category == "Backend"
        assert backend.total_years == 5.0
        assert [(p.job_title, p.company_name, p.years) for p in backend.relevant_positions] == [
            ("Engineer", "Acme", 2.0),
            ("Lead Engineer", "Globex", 3.0),
        ]
        devops = rows[1]
        assert [p.company_name for p in devops.relevant_positions] == ["Acme"]

    def test_duplicate_tag_lists_position_once(self):
        rows = aggregate_experience(
            [_position(date(2020, 1, 1), date(2021, 1, 1), ("Backend", "backend"))], AS_OF
        )
        assert len(rows[0].relevant_positions) == 1

    def test_open_position_runs_until_as_of(self):
        rows = aggregate_experience([_position(date(2022, 1, 1))], AS_OF)
        assert rows[0].total_years == 2.0

    def test_duplicate_tag_counts_once(self):
        rows = aggregate_experience(
            [_position(date(2020, 1, 1), date(2021, 1, 1), ("Frontend", "frontend "))], AS_OF
        )
        assert len(rows) == 1
        assert rows[0].total_years == 1.0

    def test_spelling_does_not_depend_on_order(self):
        a = _position(date(2020, 1, 1), date(2021, 1, 1), ("backend",))
        b = _position(date(2021, 1, 1), date(2022, 1, 1), ("Backend",))
        assert aggregate_experience([a, b], AS_OF) == aggregate_experience([b, a], AS_OF)
        assert aggregate_experience([a, b], AS_OF)[0].category == "Backend"

    def test_untagged_positions_ignored(self):
        assert aggregate_experience([_position(date(2020, 1, 1), categories=())], AS_OF) == ()

    def test_start_after_as_of(self):
        with pytest.raises(CompatibilityInputError) as exc_info:
            aggregate_experience([_position(date(2025, 1, 1))], AS_OF)
        assert exc_info.value.field_name == "start_date"

    def test_end_before_start_rejected_by_model(self):
        with pytest.raises(ValidationError):
            _position(date(2022, 1, 1), date(2021, 1, 1))
