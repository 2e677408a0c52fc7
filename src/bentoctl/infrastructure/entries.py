"""Resolve card references into :class:`CardEntry` values.

A reference field stores links, not entries::

    {"sys": {"type": "Link", "linkType": "Entry", "id": "card1"}}

Links carry no content type, so they are looked up in an
:class:`EntryIndex` built from a local entries export. Items that are
already entries (flat or ``sys``-shaped) pass through unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from bentoctl.domain.layout import CardEntry
from bentoctl.exceptions import DocumentError, UnresolvedLinkError
from bentoctl.infrastructure.documents import (
    collection_items,
    describe_validation_error,
    read_document,
)

logger = logging.getLogger(__name__)


def link_id(item: Any) -> str | None:
    """Return the target id when *item* is an entry link, else None."""
    if not isinstance(item, Mapping):
        return None
    sys_block = item.get("sys")
    if not isinstance(sys_block, Mapping) or sys_block.get("type") != "Link":
        return None
    target = sys_block.get("id")
    return str(target) if target is not None else None


def _to_card(item: Any, position: int, path: Path | None) -> CardEntry:
    try:
        return CardEntry.model_validate(item)
    except ValidationError as exc:
        reason = f"card at index {position}: {describe_validation_error(exc)}"
        raise DocumentError(reason, path=path) from exc


class EntryIndex:
    """Entry id to :class:`CardEntry` lookup built from an entries export."""

    def __init__(self, entries: Mapping[str, CardEntry] | None = None) -> None:
        self._entries: dict[str, CardEntry] = dict(entries or {})

    @classmethod
    def from_items(cls, items: Sequence[Any], *, path: Path | None = None) -> EntryIndex:
        entries: dict[str, CardEntry] = {}
        for position, item in enumerate(items):
            card = _to_card(item, position, path)
            entries[card.id] = card
        return cls(entries)

    @classmethod
    def load(cls, path: Path) -> EntryIndex:
        """Build an index from an export file (list, or ``entries``/``items`` mapping)."""
        items = collection_items(read_document(path), keys=("entries", "items"), path=path)
        index = cls.from_items(items, path=path)
        logger.debug("Indexed %d entries from %s", len(index), path)
        return index

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def get(self, entry_id: str) -> CardEntry | None:
        return self._entries.get(entry_id)


def resolve_cards(
    items: Sequence[Any],
    index: EntryIndex | None = None,
    *,
    path: Path | None = None,
) -> list[CardEntry]:
    """Turn raw card items into an ordered list of :class:`CardEntry`.

    Raises:
        UnresolvedLinkError: A link targets an id missing from *index*
            (or no index was supplied).
        DocumentError: A non-link item is not a valid entry.
    """
    cards: list[CardEntry] = []
    for position, item in enumerate(items):
        target = link_id(item)
        if target is None:
            cards.append(_to_card(item, position, path))
            continue
        card = index.get(target) if index is not None else None
        if card is None:
            raise UnresolvedLinkError(target, position)
        cards.append(card)
    return cards
