"""Validation findings emitted by the layout validator.

Message wording is part of the public contract: downstream consumers
match on the literal strings, so the templates live here as constants.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Severity(StrEnum):
    """Finding severity. No current rule emits ``WARNING``."""

    ERROR = "error"
    WARNING = "warning"


SEVERITY_RANK: dict[str, int] = {
    Severity.WARNING: 0,
    Severity.ERROR: 1,
}

COUNT_MISMATCH = "Expected {expected} cards, but found {found}."
MISSING_POSITION = (
    "Card at index {index} does not have a corresponding position rule in bentoLayout."
)
TYPE_MISMATCH = "Card at index {index} has type '{content_type}', but expected one of: {expected}."
TYPE_LIMIT_EXCEEDED = (
    "Content type '{content_type}' exceeds its limit. Expected maximum {limit}, but found {count}."
)
POSITION_OVERFLOW = (
    "There are {cards} cards, but only {positions} positions are defined in the layout."
)


class Finding(BaseModel):
    """One reported validation issue."""

    model_config = {"frozen": True}

    message: str
    severity: Severity = Severity.ERROR

    @classmethod
    def error(cls, message: str) -> Finding:
        """Shorthand for an error-severity finding."""
        return cls(message=message, severity=Severity.ERROR)


def at_least(findings: list[Finding], min_severity: str) -> list[Finding]:
    """Return the findings whose severity is at or above *min_severity*."""
    threshold = SEVERITY_RANK[Severity(min_severity)]
    return [f for f in findings if SEVERITY_RANK[f.severity] >= threshold]
