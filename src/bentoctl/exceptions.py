"""Exceptions raised by the infrastructure layer.

Services catch these and convert them into ``ServiceError`` payloads;
they never reach the CLI as tracebacks.
"""

from __future__ import annotations

from pathlib import Path


class BentoError(Exception):
    """Base exception for bentoctl errors."""


class DocumentError(BentoError):
    """A layout, cards, or entries document could not be read or parsed."""

    def __init__(self, reason: str, *, path: Path | None = None) -> None:
        self.reason = reason
        self.path = path
        prefix = f"{path}: " if path is not None else ""
        super().__init__(f"{prefix}{reason}")


class UnresolvedLinkError(BentoError):
    """A card link points at an entry that is not in the entries export."""

    def __init__(self, entry_id: str, position: int) -> None:
        self.entry_id = entry_id
        self.position = position
        super().__init__(f"Linked entry '{entry_id}' at index {position} could not be resolved.")
