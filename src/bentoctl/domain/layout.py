"""Bento layout value objects.

A layout is stored as a JSON/YAML document keyed by slot name::

    {
      "layoutType": "bento-1-2",
      "targetContentType": "tabsContainer",
      "positions": {
        "leftColumnFullHeightCard": {"index": 0, "expectedTypes": ["CardTypeA"]}
      },
      "limits": {"totalEntries": 1, "typeLimits": {"CardTypeA": 1}}
    }

The mappings under ``positions`` and ``typeLimits`` are converted into
ordered tuples at construction so that sort tie-breaks and limit
iteration follow document order explicitly.

INVARIANT: position indices, slot names and type-limit keys are unique.
Duplicates are rejected at construction time.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

_VALUE_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


def _duplicates(values: list[Any]) -> list[Any]:
    seen: set[Any] = set()
    dupes: list[Any] = []
    for value in values:
        if value in seen and value not in dupes:
            dupes.append(value)
        seen.add(value)
    return dupes


class PositionRule(BaseModel):
    """One named slot: a sequence index and the content types it accepts."""

    model_config = _VALUE_CONFIG

    name: str
    index: int = Field(ge=0)
    expected_types: tuple[str, ...] = Field(min_length=1)

    def accepts(self, content_type: str) -> bool:
        return content_type in self.expected_types


class TypeLimit(BaseModel):
    """Maximum number of cards of one content type across the whole layout."""

    model_config = _VALUE_CONFIG

    content_type: str
    maximum: int = Field(ge=0)


class LayoutLimits(BaseModel):
    """Overall card count and per-type ceilings."""

    model_config = _VALUE_CONFIG

    total_entries: int = Field(ge=0)
    type_limits: tuple[TypeLimit, ...] = ()

    @field_validator("type_limits", mode="before")
    @classmethod
    def _limits_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return [{"content_type": key, "maximum": limit} for key, limit in value.items()]
        return value

    @model_validator(mode="after")
    def _unique_types(self) -> LayoutLimits:
        dupes = _duplicates([limit.content_type for limit in self.type_limits])
        if dupes:
            raise ValueError(f"duplicate type limits: {', '.join(dupes)}")
        return self


class LayoutSpec(BaseModel):
    """A bento layout: named slots plus quantity limits.

    ``target_content_type`` is informational only; no rule reads it.
    """

    model_config = _VALUE_CONFIG

    layout_type: str
    target_content_type: str
    positions: tuple[PositionRule, ...]
    limits: LayoutLimits

    @field_validator("positions", mode="before")
    @classmethod
    def _positions_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return [
                {**rule, "name": name} if isinstance(rule, Mapping) else rule
                for name, rule in value.items()
            ]
        return value

    @model_validator(mode="after")
    def _unique_positions(self) -> LayoutSpec:
        dupe_indices = _duplicates([p.index for p in self.positions])
        if dupe_indices:
            joined = ", ".join(str(i) for i in dupe_indices)
            raise ValueError(f"duplicate position indices: {joined}")
        dupe_names = _duplicates([p.name for p in self.positions])
        if dupe_names:
            raise ValueError(f"duplicate position names: {', '.join(dupe_names)}")
        return self

    def sorted_positions(self) -> list[PositionRule]:
        """Positions ordered by index; ties keep document order."""
        return sorted(self.positions, key=lambda p: p.index)

    def position_at(self, index: int) -> PositionRule | None:
        """Return the rule whose ``index`` equals *index*, if any."""
        for rule in self.positions:
            if rule.index == index:
                return rule
        return None


class CardEntry(BaseModel):
    """A linked entry reduced to what validation needs.

    Accepts the flat ``{"id", "contentType"}`` shape as well as the CMS
    entry shape ``{"sys": {"id", "contentType": {"sys": {"id"}}}}``.
    """

    model_config = _VALUE_CONFIG

    id: str
    content_type: str

    @model_validator(mode="before")
    @classmethod
    def _flatten_sys(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or "sys" not in data:
            return data
        sys_block = data["sys"]
        if not isinstance(sys_block, Mapping):
            return data
        flat: dict[str, Any] = {"id": sys_block.get("id")}
        content_type = sys_block.get("contentType")
        if isinstance(content_type, Mapping):
            inner = content_type.get("sys")
            if isinstance(inner, Mapping) and "id" in inner:
                flat["content_type"] = inner["id"]
        return flat
