"""Layout validator — checks a card sequence against a bento layout.

Four checks always run, in this order, and their findings are
concatenated without deduplication:

1. Card count against ``limits.total_entries``.
2. Per card: a position rule with a matching index must exist, and the
   card's content type must be one of the rule's expected types.
3. Per configured type limit (document order): occurrences must not
   exceed the maximum. Types without a limit are never checked.
4. Card count against the number of defined positions.

INVARIANT: the validator is pure and total. Anomalies become findings,
never exceptions. An empty list means the layout is valid.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from bentoctl.domain.findings import (
    COUNT_MISMATCH,
    MISSING_POSITION,
    POSITION_OVERFLOW,
    TYPE_LIMIT_EXCEEDED,
    TYPE_MISMATCH,
    Finding,
)
from bentoctl.domain.layout import CardEntry, LayoutSpec


def validate_layout(layout: LayoutSpec, cards: Sequence[CardEntry]) -> list[Finding]:
    """Validate *cards* against *layout* and return the findings."""
    findings: list[Finding] = []
    findings.extend(_check_count(layout, cards))
    findings.extend(_check_slots(layout, cards))
    findings.extend(_check_type_limits(layout, cards))
    findings.extend(_check_overflow(layout, cards))
    return findings


def _check_count(layout: LayoutSpec, cards: Sequence[CardEntry]) -> list[Finding]:
    expected = layout.limits.total_entries
    if len(cards) == expected:
        return []
    return [Finding.error(COUNT_MISMATCH.format(expected=expected, found=len(cards)))]


def _check_slots(layout: LayoutSpec, cards: Sequence[CardEntry]) -> list[Finding]:
    findings: list[Finding] = []
    for index, card in enumerate(cards):
        rule = layout.position_at(index)
        if rule is None:
            findings.append(Finding.error(MISSING_POSITION.format(index=index)))
            continue
        if not rule.accepts(card.content_type):
            findings.append(
                Finding.error(
                    TYPE_MISMATCH.format(
                        index=index,
                        content_type=card.content_type,
                        expected=", ".join(rule.expected_types),
                    )
                )
            )
    return findings


def _check_type_limits(layout: LayoutSpec, cards: Sequence[CardEntry]) -> list[Finding]:
    counts = Counter(card.content_type for card in cards)
    findings: list[Finding] = []
    for limit in layout.limits.type_limits:
        count = counts[limit.content_type]
        if count > limit.maximum:
            findings.append(
                Finding.error(
                    TYPE_LIMIT_EXCEEDED.format(
                        content_type=limit.content_type,
                        limit=limit.maximum,
                        count=count,
                    )
                )
            )
    return findings


def _check_overflow(layout: LayoutSpec, cards: Sequence[CardEntry]) -> list[Finding]:
    defined = len(layout.positions)
    if len(cards) <= defined:
        return []
    return [Finding.error(POSITION_OVERFLOW.format(cards=len(cards), positions=defined))]
