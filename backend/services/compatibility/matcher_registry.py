"""Lazy-loading registry for the three requirement matchers.

Global singletons, created and loaded on first use.
"""

import logging

from services.compatibility.base import BaseMatcherService
from services.compatibility.errors import UnknownMatcherError

logger = logging.getLogger(__name__)

SKILL_MATCHER = "skill_matcher"
EXPERIENCE_MATCHER = "experience_matcher"
EDUCATION_MATCHER = "education_matcher"

_registry: dict[str, BaseMatcherService] = {}


def _create_matcher(name: str) -> BaseMatcherService:
    """Factory: create a matcher service by name with deferred imports."""
    if name == SKILL_MATCHER:
        from services.compatibility.skill_matcher import SkillMatcherService
        return SkillMatcherService()
    elif name == EXPERIENCE_MATCHER:
        from services.compatibility.experience_matcher import ExperienceMatcherService
        return ExperienceMatcherService()
    elif name == EDUCATION_MATCHER:
        from services.compatibility.education_matcher import EducationMatcherService
        return EducationMatcherService()
    else:
        raise UnknownMatcherError(f"Unknown matcher: {name}")


def get_matcher(name: str) -> BaseMatcherService:
    """Get a matcher by name, creating and loading it on first access."""
    if name not in _registry:
        _registry[name] = _create_matcher(name)
    svc = _registry[name]
    svc.ensure_loaded()
    return svc


def preload(*names: str) -> None:
    """Pre-load matchers (e.g. at startup)."""
    for name in names or (SKILL_MATCHER, EXPERIENCE_MATCHER, EDUCATION_MATCHER):
        get_matcher(name)


def loaded_matchers() -> list[str]:
    return sorted(name for name, svc in _registry.items() if svc.is_loaded)


def clear() -> None:
    """Drop all matchers. Useful for testing and after alias data changes."""
    _registry.clear()
