"""Errors raised at the engine boundary."""

from typing import Any


class CompatibilityInputError(ValueError):
    """Input that violates the engine's contract.

    Raised before any matching starts; never downgraded to a lower score.
    """

    def __init__(
        self,
        message: str,
        field_name: str = "",
        received_value: Any = None,
        expected: str = "",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.field_name = field_name
        self.received_value = received_value
        self.expected = expected
        self.errors = errors or []


class UnknownMatcherError(ValueError):
    pass
