"""Tests for engine models, enums and the small shared helpers."""

import pytest
from pydantic import ValidationError

from models.schemas.candidate_profile import CandidateEducation, CandidateSkill, normalize_name
from models.schemas.enums import EducationType, Priority, ProficiencyLevel
from models.schemas.job_requirements import JobRequirements, SkillRequirement
from models.schemas.matches import SkillMatch
from services.compatibility.reasons import REASON_TEMPLATES, ReasonKey, render
from services.compatibility.scoring import format_years, round_half_up, shortfall_score


class TestEnums:
    def test_ranks(self):
        ranks = [level.rank for level in ProficiencyLevel]
        assert ranks == sorted(ranks) == [1, 2, 3, 4]
        assert EducationType.HIGH_SCHOOL.rank < EducationType.BACHELOR.rank < EducationType.DOCTORATE.rank
        assert EducationType.CERTIFICATION.rank is None
        assert not EducationType.OTHER.is_ordinal

    def test_case_insensitive_parsing(self):
        skill = CandidateSkill(skill_name="Go", proficiency="advanced")
        assert skill.proficiency == ProficiencyLevel.ADVANCED
        assert SkillRequirement(skill_name="Go", priority="High").priority == Priority.HIGH

    @pytest.mark.parametrize("raw,expected", [
        ("BACHELORS", EducationType.BACHELOR),
        ("masters", EducationType.MASTER),
        ("PhD", EducationType.DOCTORATE),
        ("high school", EducationType.HIGH_SCHOOL),
    ])
    def test_education_spellings(self, raw, expected):
        assert CandidateEducation(type=raw, institution_name="Uni").type == expected

    def test_unknown_value(self):
        with pytest.raises(ValidationError, match="expected one of"):
            CandidateSkill(skill_name="Go", proficiency="GURU")


class TestModels:
    def test_normalize_name(self):
        assert normalize_name("  Machine   Learning ") == "machine learning"

    def test_frozen(self):
        skill = CandidateSkill(skill_name="Go", proficiency="EXPERT")
        with pytest.raises(ValidationError):
            skill.proficiency = ProficiencyLevel.BEGINNER

    def test_skill_name_is_trimmed(self):
        assert CandidateSkill(skill_name="  Go ", proficiency="EXPERT").skill_name == "Go"

    def test_requirement_defaults(self):
        req = SkillRequirement.model_validate({"skillName": "Go"})
        assert req.priority == Priority.MEDIUM
        assert req.is_required is True
        assert req.is_bonus is False
        assert req.category == "OTHER"

    def test_bonus_defaults_to_optional(self):
        req = SkillRequirement.model_validate({"skillName": "Go", "isBonus": True})
        assert req.is_required is False

    def test_bonus_cannot_be_required(self):
        with pytest.raises(ValidationError, match="cannot also be required"):
            SkillRequirement(skill_name="Go", is_bonus=True, is_required=True)

    def test_bonus_list_is_tagged(self):
        reqs = JobRequirements.model_validate({
            "requiredSkills": [{"skillName": "Go"}],
            "bonusSkills": [{"skillName": "Docker"}],
        })
        tagged = reqs.skill_requirements()
        assert [(r.skill_name, r.is_required, r.is_bonus) for r in tagged] == [
            ("Go", True, False),
            ("Docker", False, True),
        ]
        assert reqs.requirement_count == 2

    def test_required_list_rejects_optional_item(self):
        with pytest.raises(ValidationError, match="flagged as not required"):
            JobRequirements.model_validate({"requiredSkills": [{"skillName": "Go", "isRequired": False}]})

    def test_institution_required_for_degrees(self):
        with pytest.raises(ValidationError, match="institution name is required"):
            CandidateEducation(type="BACHELOR")
        assert CandidateEducation(type="CPD", degree_or_cert_name="Workshop").institution_name == ""

    def test_skill_match_has_single_candidate_skill(self):
        skill = CandidateSkill(skill_name="Go", proficiency="EXPERT")
        with pytest.raises(ValidationError):
            SkillMatch(
                requirement=SkillRequirement(skill_name="Go"),
                skill="Go",
                user_skill=skill,
                similar_skill=skill,
                compatibility="perfect",
                score=100,
                reason="-",
            )


class TestScoringHelpers:
    def test_round_half_up(self):
        assert round_half_up(62.5) == 63
        assert round_half_up(12.5) == 13
        assert round_half_up(12.49) == 12

    def test_shortfall_score_bounds(self):
        assert shortfall_score(1, 4, 25) == 25
        assert shortfall_score(4.99, 5, 20) == 99
        assert shortfall_score(2, 3, 25) == 67
        with pytest.raises(ValueError):
            shortfall_score(1, 0, 20)

    def test_format_years(self):
        assert format_years(1) == "1 year"
        assert format_years(2.5) == "2.5 years"
        assert format_years(0) == "0 years"
        assert format_years(4.0) == "4 years"


class TestReasons:
    def test_every_key_has_template(self):
        assert set(REASON_TEMPLATES) == set(ReasonKey)

    def test_missing_placeholder_raises(self):
        with pytest.raises(KeyError):
            render(ReasonKey.SKILL_EXACT)
