"""Shared contract for the skill, experience and education matchers."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

RequirementT = TypeVar("RequirementT")
CandidateT = TypeVar("CandidateT")
MatchT = TypeVar("MatchT")


class BaseMatcherService(ABC, Generic[RequirementT, CandidateT, MatchT]):
    """A matcher turns N requirements into N match results, in requirement order.

    Reference data (alias tables, field synonyms) is prepared by ``load()``
    the first time the matcher is used and kept for the life of the instance.
    Matchers hold no per-call state, so one instance may serve concurrent calls.
    """

    name: str = ""
    _loaded: bool = False

    @abstractmethod
    def load(self) -> None:
        ...

    @abstractmethod
    def match(
        self,
        requirements: Sequence[RequirementT],
        candidate_data: Sequence[CandidateT],
    ) -> tuple[MatchT, ...]:
        ...

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        if self._loaded:
            return
        self.load()
        self._loaded = True
        logger.info("Matcher %s ready", self.name)
