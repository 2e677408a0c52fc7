"""Tests for layout value objects and findings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bentoctl.domain.findings import Finding, Severity, at_least
from bentoctl.domain.layout import CardEntry, LayoutLimits, LayoutSpec, PositionRule
from tests.conftest import LAYOUT_DOCUMENT, make_layout, sys_entry


class TestLayoutSpec:
    def test_positions_keep_document_order(self, layout: LayoutSpec) -> None:
        assert [p.name for p in layout.positions] == [
            "leftColumnFullHeightCard",
            "rightColumnTopCard",
            "rightColumnBottomCard",
        ]
        assert layout.positions[1].expected_types == ("CardTypeB", "CardTypeC")

    def test_type_limits_keep_document_order(self, layout: LayoutSpec) -> None:
        limits = [(t.content_type, t.maximum) for t in layout.limits.type_limits]
        assert limits == [("CardTypeA", 1), ("CardTypeB", 2), ("CardTypeC", 1)]

    def test_informational_fields(self, layout: LayoutSpec) -> None:
        assert layout.layout_type == "bento-1-2"
        assert layout.target_content_type == "tabsContainer"

    def test_sorted_positions(self) -> None:
        layout = make_layout(
            positions={
                "c": {"index": 5, "expectedTypes": ["T"]},
                "a": {"index": 0, "expectedTypes": ["T"]},
                "b": {"index": 2, "expectedTypes": ["T"]},
            }
        )
        assert [p.name for p in layout.sorted_positions()] == ["a", "b", "c"]

    def test_position_at(self, layout: LayoutSpec) -> None:
        rule = layout.position_at(2)
        assert rule is not None
        assert rule.name == "rightColumnBottomCard"
        assert layout.position_at(3) is None

    def test_accepts_sequence_form(self) -> None:
        layout = LayoutSpec(
            layout_type="grid",
            target_content_type="page",
            positions=(PositionRule(name="hero", index=0, expected_types=("Hero",)),),
            limits=LayoutLimits(total_entries=1),
        )
        assert layout.limits.type_limits == ()
        assert layout.position_at(0) is not None

    def test_dump_uses_camel_case(self, layout: LayoutSpec) -> None:
        dumped = layout.model_dump(by_alias=True)
        assert dumped["layoutType"] == "bento-1-2"
        assert dumped["limits"]["totalEntries"] == 3
        assert dumped["positions"][0]["expectedTypes"] == ("CardTypeA",)

    def test_frozen(self, layout: LayoutSpec) -> None:
        with pytest.raises(ValidationError):
            layout.layout_type = "other"  # type: ignore[misc]


class TestLayoutRejections:
    def test_duplicate_index_rejected(self) -> None:
        with pytest.raises(ValidationError, match="duplicate position indices: 0"):
            make_layout(
                positions={
                    "a": {"index": 0, "expectedTypes": ["T"]},
                    "b": {"index": 0, "expectedTypes": ["U"]},
                }
            )

    def test_duplicate_names_rejected_in_sequence_form(self) -> None:
        with pytest.raises(ValidationError, match="duplicate position names: a"):
            make_layout(
                positions=[
                    {"name": "a", "index": 0, "expectedTypes": ["T"]},
                    {"name": "a", "index": 1, "expectedTypes": ["T"]},
                ]
            )

    def test_duplicate_type_limit_rejected(self) -> None:
        with pytest.raises(ValidationError, match="duplicate type limits: T"):
            LayoutLimits.model_validate(
                {
                    "totalEntries": 1,
                    "typeLimits": [
                        {"contentType": "T", "maximum": 1},
                        {"contentType": "T", "maximum": 2},
                    ],
                }
            )

    def test_empty_expected_types_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_layout(positions={"a": {"index": 0, "expectedTypes": []}})

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_layout(positions={"a": {"index": -1, "expectedTypes": ["T"]}})

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_layout(limits={"totalEntries": 1, "typeLimits": {"T": -1}})

    def test_missing_limits_rejected(self) -> None:
        data = {k: v for k, v in LAYOUT_DOCUMENT.items() if k != "limits"}
        with pytest.raises(ValidationError):
            LayoutSpec.model_validate(data)


class TestCardEntry:
    def test_flat_shape(self) -> None:
        card = CardEntry.model_validate({"id": "card1", "contentType": "CardTypeA"})
        assert card.id == "card1"
        assert card.content_type == "CardTypeA"

    def test_sys_shape(self) -> None:
        card = CardEntry.model_validate(sys_entry("card1", "CardTypeB"))
        assert card == CardEntry(id="card1", content_type="CardTypeB")

    def test_sys_shape_without_content_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CardEntry.model_validate({"sys": {"type": "Link", "linkType": "Entry", "id": "x"}})


class TestFindings:
    def test_dump_shape(self) -> None:
        finding = Finding.error("Expected 3 cards, but found 2.")
        assert finding.model_dump(mode="json") == {
            "message": "Expected 3 cards, but found 2.",
            "severity": "error",
        }

    def test_at_least(self) -> None:
        findings = [
            Finding(message="w", severity=Severity.WARNING),
            Finding.error("e"),
        ]
        assert at_least(findings, "warning") == findings
        assert [f.message for f in at_least(findings, "error")] == ["e"]
