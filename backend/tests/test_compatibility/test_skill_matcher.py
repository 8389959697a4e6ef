"""Tests for the Skill Matcher."""

import json

from config import settings
from models.schemas.candidate_profile import CandidateSkill
from models.schemas.enums import Compatibility
from models.schemas.job_requirements import SkillRequirement
from services.compatibility.skill_matcher import SkillMatcherService
from services.compatibility.synonym_resolver import SkillSynonymResolver


def _skill(name, level="INTERMEDIATE"):
    return CandidateSkill(skill_name=name, proficiency=level)


class TestSkillMatcher:
    def setup_method(self):
        self.svc = SkillMatcherService(resolver=SkillSynonymResolver())

    def _match(self, req, skills):
        return self.svc.match([req], skills)[0]

    def test_exact_match_meets_minimum(self):
        req = SkillRequirement(skill_name="React", minimum_level="INTERMEDIATE")
        m = self._match(req, [_skill("React", "ADVANCED")])
        assert m.compatibility == Compatibility.PERFECT
        assert m.score == 100
        assert m.reason == "Exact match at Advanced level, meets minimum Intermediate"
        assert m.user_skill.skill_name == "React"
        assert m.similar_skill is None

    def test_exact_match_without_minimum(self):
        m = self._match(SkillRequirement(skill_name="python"), [_skill("Python", "EXPERT")])
        assert m.compatibility == Compatibility.PERFECT
        assert m.score == 100
        assert m.reason == "Exact match at Expert level"

    def test_exact_match_below_minimum(self):
        req = SkillRequirement(skill_name="React", minimum_level="INTERMEDIATE")
        m = self._match(req, [_skill("React", "BEGINNER")])
        assert m.compatibility == Compatibility.PARTIAL
        assert 25 < m.score < 99
        assert m.score == 50
        assert m.reason == "Exact match at Beginner level, below minimum Intermediate"
        assert m.user_skill is not None

    def test_below_minimum_scales_by_rank(self):
        advanced = SkillRequirement(skill_name="Go", minimum_level="ADVANCED")
        assert self._match(advanced, [_skill("Go", "INTERMEDIATE")]).score == 67
        expert = SkillRequirement(skill_name="Go", minimum_level="EXPERT")
        assert self._match(expert, [_skill("Go", "ADVANCED")]).score == 75
        assert self._match(expert, [_skill("Go", "BEGINNER")]).score == 25

    def test_synonym_only(self):
        m = self._match(SkillRequirement(skill_name="ReactJS"), [_skill("React")])
        assert m.compatibility == Compatibility.PARTIAL
        assert m.score == 60
        assert m.similar_skill.skill_name == "React"
        assert m.user_skill is None
        assert m.reason == "No direct match; proficient in related skill React instead"

    def test_synonym_score_ignores_minimum_level(self):
        req = SkillRequirement(skill_name="ReactJS", minimum_level="EXPERT")
        assert self._match(req, [_skill("React", "BEGINNER")]).score == 60

    def test_nothing_found(self):
        m = self._match(SkillRequirement(skill_name="Rust"), [_skill("Python"), _skill("Go")])
        assert m.compatibility == Compatibility.MISSING
        assert m.score == 0
        assert m.user_skill is None and m.similar_skill is None
        assert m.reason == "No matching or related skill found in profile"

    def test_bonus_uses_same_classification(self):
        req = SkillRequirement(skill_name="Docker", is_bonus=True)
        m = self._match(req, [_skill("Docker", "ADVANCED")])
        assert m.compatibility == Compatibility.PERFECT
        assert m.requirement.is_bonus is True

    def test_results_follow_requirement_order(self):
        reqs = [SkillRequirement(skill_name=n) for n in ("Rust", "Python", "TypeScript")]
        results = self.svc.match(reqs, [_skill("Python"), _skill("TS")])
        assert [m.skill for m in results] == ["Rust", "Python", "TypeScript"]
        assert [m.compatibility for m in results] == [
            Compatibility.MISSING, Compatibility.PERFECT, Compatibility.PARTIAL,
        ]

    def test_empty_candidate_skills(self):
        reqs = [SkillRequirement(skill_name="Python"), SkillRequirement(skill_name="SQL")]
        results = self.svc.match(reqs, [])
        assert all(m.compatibility == Compatibility.MISSING and m.score == 0 for m in results)


class TestAliasFileLoading:
    def test_extra_aliases_from_settings(self, tmp_path):
        path = tmp_path / "aliases.json"
        path.write_text(json.dumps({"Kotlin": ["KT"]}), encoding="utf-8")
        original = settings.skill_aliases_path
        try:
            settings.skill_aliases_path = str(path)
            svc = SkillMatcherService()
            m = svc.match([SkillRequirement(skill_name="Kotlin")], [_skill("KT")])[0]
            assert m.compatibility == Compatibility.PARTIAL
            assert m.similar_skill.skill_name == "KT"
            # curated groups are still present
            m = svc.match([SkillRequirement(skill_name="ReactJS")], [_skill("React")])[0]
            assert m.score == 60
        finally:
            settings.skill_aliases_path = original

    def test_lazy_load(self):
        svc = SkillMatcherService()
        assert not svc.is_loaded
        svc.match([], [])
        assert svc.is_loaded
