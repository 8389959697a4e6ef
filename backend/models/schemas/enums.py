"""Ordinal scales and classification enums shared by every matcher.

Proficiency and education levels carry an integer ``rank`` so all
comparisons go through one accessor instead of per-matcher lookup tables.
Inputs are parsed case-insensitively and accept the spellings used by the
storage layer (``BACHELORS``, ``MASTERS``, ``CPD``, ...).
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator


class ProficiencyLevel(str, Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    EXPERT = "EXPERT"

    @property
    def rank(self) -> int:
        return _PROFICIENCY_RANK[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


_PROFICIENCY_RANK: dict[ProficiencyLevel, int] = {
    ProficiencyLevel.BEGINNER: 1,
    ProficiencyLevel.INTERMEDIATE: 2,
    ProficiencyLevel.ADVANCED: 3,
    ProficiencyLevel.EXPERT: 4,
}


class EducationType(str, Enum):
    HIGH_SCHOOL = "HIGH_SCHOOL"
    ASSOCIATE = "ASSOCIATE"
    BACHELOR = "BACHELOR"
    MASTER = "MASTER"
    DOCTORATE = "DOCTORATE"
    CERTIFICATION = "CERTIFICATION"
    CONTINUOUS_PROFESSIONAL_DEVELOPMENT = "CONTINUOUS_PROFESSIONAL_DEVELOPMENT"
    OTHER = "OTHER"

    @property
    def rank(self) -> int | None:
        """Ordinal rank, or None for types that only match by equality."""
        return _EDUCATION_RANK.get(self)

    @property
    def is_ordinal(self) -> bool:
        return self in _EDUCATION_RANK

    @property
    def label(self) -> str:
        return _EDUCATION_LABELS[self]


_EDUCATION_RANK: dict[EducationType, int] = {
    EducationType.HIGH_SCHOOL: 1,
    EducationType.ASSOCIATE: 2,
    EducationType.BACHELOR: 3,
    EducationType.MASTER: 4,
    EducationType.DOCTORATE: 5,
}

_EDUCATION_LABELS: dict[EducationType, str] = {
    EducationType.HIGH_SCHOOL: "High School",
    EducationType.ASSOCIATE: "Associate degree",
    EducationType.BACHELOR: "Bachelor's degree",
    EducationType.MASTER: "Master's degree",
    EducationType.DOCTORATE: "Doctorate",
    EducationType.CERTIFICATION: "Certification",
    EducationType.CONTINUOUS_PROFESSIONAL_DEVELOPMENT: "Continuous professional development",
    EducationType.OTHER: "Other education",
}

# Spellings used by the persistence layer and upstream extraction
_EDUCATION_ALIASES: dict[str, EducationType] = {
    "ASSOCIATES": EducationType.ASSOCIATE,
    "BACHELORS": EducationType.BACHELOR,
    "MASTERS": EducationType.MASTER,
    "PHD": EducationType.DOCTORATE,
    "CPD": EducationType.CONTINUOUS_PROFESSIONAL_DEVELOPMENT,
}


class Priority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @property
    def label(self) -> str:
        return self.value.lower()


class Compatibility(str, Enum):
    PERFECT = "perfect"
    PARTIAL = "partial"
    MISSING = "missing"


def _enum_parser(enum_cls: type[Enum], aliases: dict[str, Enum] | None = None):
    names = ", ".join(member.value for member in enum_cls)

    def parse(value: Any) -> Any:
        if isinstance(value, enum_cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid {enum_cls.__name__} {value!r}; expected one of {names}")
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        if aliases and key in aliases:
            return aliases[key]
        try:
            return enum_cls(key)
        except ValueError:
            raise ValueError(
                f"Invalid {enum_cls.__name__} {value!r}; expected one of {names}"
            ) from None

    return parse


parse_proficiency = _enum_parser(ProficiencyLevel)
parse_education_type = _enum_parser(EducationType, _EDUCATION_ALIASES)
parse_priority = _enum_parser(Priority)

ProficiencyField = Annotated[ProficiencyLevel, BeforeValidator(parse_proficiency)]
EducationTypeField = Annotated[EducationType, BeforeValidator(parse_education_type)]
PriorityField = Annotated[Priority, BeforeValidator(parse_priority)]
