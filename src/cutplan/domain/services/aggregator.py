"""Grouping of identical patterns."""

from __future__ import annotations

from typing import Sequence

from cutplan.domain.entities import Pattern, PatternGroup, PatternKey
from cutplan.domain.value_objects import GroupingStrategy


def aggregate(
    patterns: Sequence[Pattern],
    strategy: GroupingStrategy = GroupingStrategy.ORDERED,
) -> list[PatternGroup]:
    """Group identical patterns and count the bars cut to each.

    Args:
        patterns: Patterns in allocation order.
        strategy: Whether placement order distinguishes patterns.

    Returns:
        Distinct groups in order of first appearance. The first pattern
        seen for a key represents its group.
    """
    groups: dict[PatternKey, PatternGroup] = {}
    for pattern in patterns:
        key = PatternKey.for_pattern(pattern, strategy)
        existing = groups.get(key)
        if existing is None:
            groups[key] = PatternGroup(key=key, pattern=pattern)
        else:
            groups[key] = PatternGroup(
                key=key,
                pattern=existing.pattern,
                multiplicity=existing.multiplicity + 1,
            )
    # dicts preserve insertion order
    return list(groups.values())
