"""ValidateService — load a layout and its cards, then run the validator.

Loading is the only fallible step. Once a layout and card sequence are
in hand, validation always succeeds and the findings are returned as
data; ``ok=False`` means the run could not happen at all.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from structlog.contextvars import bound_contextvars

from bentoctl.domain.findings import Finding, Severity, at_least
from bentoctl.domain.validator import validate_layout
from bentoctl.exceptions import DocumentError, UnresolvedLinkError
from bentoctl.infrastructure.documents import collection_items, parse_layout, read_document
from bentoctl.infrastructure.entries import EntryIndex, resolve_cards
from bentoctl.services.result import ServiceResult

if TYPE_CHECKING:
    from bentoctl.config.settings import BentoSettings
    from bentoctl.domain.layout import CardEntry, LayoutSpec

logger = logging.getLogger(__name__)

# Error codes
LAYOUT_NOT_CONFIGURED = "LAYOUT_NOT_CONFIGURED"
LAYOUT_INVALID = "LAYOUT_INVALID"
CARDS_INVALID = "CARDS_INVALID"
UNRESOLVED_LINK = "UNRESOLVED_LINK"

_MSG_NOT_CONFIGURED = "Bento layout configuration not found."
_MSG_LAYOUT_INVALID = "Failed to parse Bento layout configuration. Please check the JSON format."
_MSG_CARDS_INVALID = "Error loading linked card entries."


class _LoadFailure(Exception):
    """Carries a ready-made failure result out of the loading helpers."""

    def __init__(self, result: ServiceResult) -> None:
        super().__init__(result.error.message if result.error else result.op)
        self.result = result


def should_fail(result: ServiceResult, fail_on: str) -> bool:
    """Whether a successful validate result crosses the ``fail_on`` threshold."""
    if not result.ok or fail_on == "never":
        return False
    errors = int(result.data.get("error_count", 0))
    warnings = int(result.data.get("warning_count", 0))
    if fail_on == Severity.WARNING:
        return errors + warnings > 0
    return errors > 0


class ValidateService:
    """Validates card sequences against bento layouts."""

    def __init__(self, settings: BentoSettings) -> None:
        self._settings = settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(
        self,
        cards_path: Path,
        *,
        layout_path: Path | None = None,
        entries_path: Path | None = None,
        min_severity: str | None = None,
    ) -> ServiceResult:
        """Validate the cards document at *cards_path*."""
        op = "validate"
        with bound_contextvars(op=op):
            try:
                layout = self._load_layout(op, layout_path)
                cards = self._load_cards(op, cards_path, entries_path)
            except _LoadFailure as exc:
                return exc.result
            return self.revalidate(layout, cards, min_severity=min_severity)

    def revalidate(
        self,
        layout: LayoutSpec,
        cards: Sequence[CardEntry],
        *,
        min_severity: str | None = None,
    ) -> ServiceResult:
        """Run a fresh validation over an already-loaded card sequence.

        Call again whenever the card sequence changes; nothing is cached
        between calls.
        """
        bound = {"layout_type": layout.layout_type, "card_count": len(cards)}
        with bound_contextvars(op="validate", **bound):
            findings = validate_layout(layout, cards)
            logger.debug("Validated cards: %d findings", len(findings))
        threshold = min_severity or self._settings.check.min_severity
        shown = at_least(findings, threshold)

        error_count = sum(1 for f in findings if f.severity == Severity.ERROR)
        return ServiceResult(
            ok=True,
            op="validate",
            data={
                "valid": not findings,
                "layout_type": layout.layout_type,
                "target_content_type": layout.target_content_type,
                "card_count": len(cards),
                "count": len(shown),
                "error_count": error_count,
                "warning_count": len(findings) - error_count,
                "findings": [_finding_dict(f) for f in shown],
                "cards": [card.model_dump(by_alias=True) for card in cards],
            },
        )

    def inspect(self, *, layout_path: Path | None = None) -> ServiceResult:
        """Describe a layout's slots (in index order) and type limits."""
        op = "inspect_layout"
        with bound_contextvars(op=op):
            try:
                layout = self._load_layout(op, layout_path)
            except _LoadFailure as exc:
                return exc.result
            logger.debug("Inspected layout %s", layout.layout_type)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "layout_type": layout.layout_type,
                "target_content_type": layout.target_content_type,
                "total_entries": layout.limits.total_entries,
                "positions": [
                    {
                        "name": rule.name,
                        "index": rule.index,
                        "expected_types": list(rule.expected_types),
                    }
                    for rule in layout.sorted_positions()
                ],
                "type_limits": {
                    limit.content_type: limit.maximum for limit in layout.limits.type_limits
                },
            },
        )

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _load_layout(self, op: str, layout_path: Path | None) -> LayoutSpec:
        path = layout_path or self._settings.resolve_path(self._settings.layout.path)
        if path is None or not path.is_file():
            detail = {"path": str(path)} if path is not None else {}
            raise _LoadFailure(
                ServiceResult.failure(op, LAYOUT_NOT_CONFIGURED, _MSG_NOT_CONFIGURED, **detail)
            )
        try:
            return parse_layout(read_document(path), path=path)
        except DocumentError as exc:
            logger.debug("Layout %s rejected: %s", path, exc.reason)
            raise _LoadFailure(
                ServiceResult.failure(
                    op, LAYOUT_INVALID, _MSG_LAYOUT_INVALID, path=str(path), reason=exc.reason
                )
            ) from exc

    def _load_cards(
        self,
        op: str,
        cards_path: Path,
        entries_path: Path | None,
    ) -> list[CardEntry]:
        entries_file = entries_path or self._settings.resolve_path(
            self._settings.cards.entries_path
        )
        try:
            index = EntryIndex.load(entries_file) if entries_file is not None else None
            items = collection_items(read_document(cards_path), path=cards_path)
            return resolve_cards(items, index, path=cards_path)
        except UnresolvedLinkError as exc:
            raise _LoadFailure(
                ServiceResult.failure(
                    op, UNRESOLVED_LINK, str(exc), entry_id=exc.entry_id, index=exc.position
                )
            ) from exc
        except DocumentError as exc:
            logger.debug("Card entries rejected: %s", exc)
            detail: dict[str, Any] = {"reason": exc.reason}
            if exc.path is not None:
                detail["path"] = str(exc.path)
            raise _LoadFailure(
                ServiceResult.failure(op, CARDS_INVALID, _MSG_CARDS_INVALID, **detail)
            ) from exc


def _finding_dict(finding: Finding) -> dict[str, str]:
    return finding.model_dump(mode="json")
