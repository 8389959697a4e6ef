"""Reason and summary sentence templates.

Every human-readable string in a report comes from this table, keyed by
``<kind>.<outcome>.<subcase>``, so reasons can be asserted by exact value.
"""

from enum import Enum


class ReasonKey(str, Enum):
    # Skill matcher
    SKILL_EXACT = "skill.perfect.exact"
    SKILL_EXACT_MEETS_MINIMUM = "skill.perfect.meets_minimum"
    SKILL_BELOW_MINIMUM = "skill.partial.below_minimum"
    SKILL_SIMILAR = "skill.partial.similar"
    SKILL_MISSING = "skill.missing.none"

    # Experience matcher
    EXPERIENCE_PRESENT = "experience.perfect.no_minimum"
    EXPERIENCE_MEETS = "experience.perfect.meets_years"
    EXPERIENCE_SHORT = "experience.partial.short"
    EXPERIENCE_NONE_RECORDED = "experience.missing.zero_years"
    EXPERIENCE_NOT_FOUND = "experience.missing.not_found"

    # Education matcher
    EDUCATION_MEETS = "education.perfect.level"
    EDUCATION_MEETS_FIELD = "education.perfect.level_and_field"
    EDUCATION_FIELD_MISMATCH = "education.partial.field_mismatch"
    EDUCATION_BELOW_LEVEL = "education.partial.below_level"
    EDUCATION_NOT_FOUND = "education.missing.none"

    # Summary: strong points
    STRONG_SKILL = "summary.strong.skill"
    STRONG_EXPERIENCE = "summary.strong.experience"
    STRONG_EDUCATION = "summary.strong.education"

    # Summary: improvement areas
    IMPROVE_SKILL_MISSING = "summary.improve.skill_missing"
    IMPROVE_SKILL_LEVEL = "summary.improve.skill_level"
    IMPROVE_SKILL_SIMILAR = "summary.improve.skill_similar"
    IMPROVE_EXPERIENCE_MISSING = "summary.improve.experience_missing"
    IMPROVE_EXPERIENCE_SHORT = "summary.improve.experience_short"
    IMPROVE_EDUCATION_MISSING = "summary.improve.education_missing"
    IMPROVE_EDUCATION_LEVEL = "summary.improve.education_level"
    IMPROVE_EDUCATION_FIELD = "summary.improve.education_field"


REASON_TEMPLATES: dict[ReasonKey, str] = {
    ReasonKey.SKILL_EXACT: "Exact match at {level} level",
    ReasonKey.SKILL_EXACT_MEETS_MINIMUM: "Exact match at {level} level, meets minimum {minimum}",
    ReasonKey.SKILL_BELOW_MINIMUM: "Exact match at {level} level, below minimum {minimum}",
    ReasonKey.SKILL_SIMILAR: "No direct match; proficient in related skill {similar} instead",
    ReasonKey.SKILL_MISSING: "No matching or related skill found in profile",

    ReasonKey.EXPERIENCE_PRESENT: "{held} of {category} experience; no minimum specified",
    ReasonKey.EXPERIENCE_MEETS: "{held} of {category} experience, meets required {required}",
    ReasonKey.EXPERIENCE_SHORT: "{held} of {category} experience, {shortfall} short of required {required}",
    ReasonKey.EXPERIENCE_NONE_RECORDED: "No recorded {category} experience against required {required}",
    ReasonKey.EXPERIENCE_NOT_FOUND: "No {category} experience found in work history",

    ReasonKey.EDUCATION_MEETS: "{held} meets required {level}",
    ReasonKey.EDUCATION_MEETS_FIELD: "{held} meets required {level} in {field}",
    ReasonKey.EDUCATION_FIELD_MISMATCH: "{held} meets required {level} but not in {field}",
    ReasonKey.EDUCATION_BELOW_LEVEL: "Highest education {held} is below required {level}",
    ReasonKey.EDUCATION_NOT_FOUND: "No education found satisfying required {level}",

    ReasonKey.STRONG_SKILL: "Strong {skill} skills at {level} level",
    ReasonKey.STRONG_EXPERIENCE: "{held} of {category} experience meets the requirement",
    ReasonKey.STRONG_EDUCATION: "{held} satisfies the {level} requirement",

    ReasonKey.IMPROVE_SKILL_MISSING: "Acquire {skill} ({priority} priority requirement)",
    ReasonKey.IMPROVE_SKILL_LEVEL: "Improve {skill} from {level} to at least {minimum}",
    ReasonKey.IMPROVE_SKILL_SIMILAR: "Gain direct experience with {skill} beyond related skill {similar}",
    ReasonKey.IMPROVE_EXPERIENCE_MISSING: "Build {category} experience{target}",
    ReasonKey.IMPROVE_EXPERIENCE_SHORT: "Gain {shortfall} of additional {category} experience",
    ReasonKey.IMPROVE_EDUCATION_MISSING: "Obtain a qualification at {level} level{field}",
    ReasonKey.IMPROVE_EDUCATION_LEVEL: "Advance education from {held} to {level}",
    ReasonKey.IMPROVE_EDUCATION_FIELD: "Education field does not match required {field}",
}


def render(key: ReasonKey, **values: str) -> str:
    """Fill the template for ``key``. Missing placeholders raise KeyError."""
    return REASON_TEMPLATES[key].format(**values)
