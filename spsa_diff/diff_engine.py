"""
Pair before/after option records, score each pair and rank them.

Two metric policies are supported:

    range     (after - before) / (max - min); 0 when the option has no
              declared tuning range.
    relative  (after - before) / |before|; 0 when before is 0.

Pairs are ranked by the magnitude of their change fraction, largest first.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable

from spsa_diff.errors import PairingMismatch
from spsa_diff.records import OptionRecord


class ChangeDirection(Enum):
    """Direction of the tuned value relative to the starting value."""

    INCREASE = "increase"
    DECREASE = "decrease"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class ScoredPair:
    """A before/after record pair with its signed change fraction."""

    before: OptionRecord
    after: OptionRecord
    change_fraction: float

    @property
    def name(self) -> str:
        return self.before.name

    @property
    def direction(self) -> ChangeDirection:
        if self.after.value > self.before.value:
            return ChangeDirection.INCREASE
        if self.after.value < self.before.value:
            return ChangeDirection.DECREASE
        return ChangeDirection.UNCHANGED


def range_fraction(before: OptionRecord, after: OptionRecord) -> float:
    """Change as a fraction of the declared tuning range.

    A missing bound makes the range infinite, which reports the change as 0.
    A zero-width range is maximal change, even when the value did not move.
    """
    if not before.has_bounds:
        return 0.0
    span = before.max - before.min
    diff = after.value - before.value
    if span == 0:
        return math.copysign(math.inf, diff)
    return diff / span


def relative_fraction(before: OptionRecord, after: OptionRecord) -> float:
    """Change as a fraction of the starting value's magnitude."""
    if before.value == 0:
        return 0.0
    return (after.value - before.value) / abs(before.value)


# Metric name -> fraction function
METRICS: dict[str, Callable[[OptionRecord, OptionRecord], float]] = {
    "range": range_fraction,
    "relative": relative_fraction,
}

PAIRING_MODES = frozenset(["position", "name"])


def pair_by_position(
    before: list[OptionRecord],
    after: list[OptionRecord],
) -> list[tuple[OptionRecord, OptionRecord]]:
    """Pair records index by index.

    Raises:
        PairingMismatch: If the lists differ in length or a name differs at
            the same index.
    """
    if len(before) != len(after):
        raise PairingMismatch(
            f"Input block has {len(before)} options but output block has {len(after)}"
        )
    for index, (b, a) in enumerate(zip(before, after)):
        if b.name != a.name:
            raise PairingMismatch(
                f"Option name mismatch at position {index}: "
                f"input has {b.name!r}, output has {a.name!r}"
            )
    return list(zip(before, after))


def pair_by_name(
    before: list[OptionRecord],
    after: list[OptionRecord],
) -> list[tuple[OptionRecord, OptionRecord]]:
    """Pair records by option name, keeping the order of ``before``.

    Raises:
        PairingMismatch: If a name is duplicated or appears on one side only.
    """
    after_by_name: dict[str, OptionRecord] = {}
    for record in after:
        if record.name in after_by_name:
            raise PairingMismatch(f"Option {record.name!r} appears twice in output block")
        after_by_name[record.name] = record

    seen: set[str] = set()
    for record in before:
        if record.name in seen:
            raise PairingMismatch(f"Option {record.name!r} appears twice in input block")
        seen.add(record.name)

    only_before = [r.name for r in before if r.name not in after_by_name]
    only_after = [r.name for r in after if r.name not in seen]
    if only_before or only_after:
        problems = []
        if only_before:
            problems.append(f"missing from output: {', '.join(only_before)}")
        if only_after:
            problems.append(f"missing from input: {', '.join(only_after)}")
        raise PairingMismatch("Unmatched options (" + "; ".join(problems) + ")")

    return [(record, after_by_name[record.name]) for record in before]


def score_pairs(
    pairs: Iterable[tuple[OptionRecord, OptionRecord]],
    metric: str = "range",
) -> list[ScoredPair]:
    """Compute the change fraction of every pair with the named metric."""
    if metric not in METRICS:
        raise ValueError(
            f"Unsupported metric '{metric}'. "
            f"Supported metrics: {', '.join(sorted(METRICS))}"
        )
    fraction = METRICS[metric]
    return [ScoredPair(before=b, after=a, change_fraction=fraction(b, a)) for b, a in pairs]


def rank(scored: Iterable[ScoredPair]) -> list[ScoredPair]:
    """Sort by |change_fraction|, largest first; ties keep their order."""
    return sorted(scored, key=lambda pair: abs(pair.change_fraction), reverse=True)


def diff_records(
    before: list[OptionRecord],
    after: list[OptionRecord],
    metric: str = "range",
    pair_by: str = "position",
) -> list[ScoredPair]:
    """Pair, score and rank two record lists.

    Args:
        before: Records parsed from the input block.
        after: Records parsed from the output block.
        metric: "range" (default) or "relative".
        pair_by: "position" (default) or "name".

    Returns:
        Scored pairs ranked by magnitude of change.

    Raises:
        PairingMismatch: If the two lists cannot be paired.
        ValueError: If ``metric`` or ``pair_by`` is not supported.
    """
    if pair_by == "position":
        pairs = pair_by_position(before, after)
    elif pair_by == "name":
        pairs = pair_by_name(before, after)
    else:
        raise ValueError(
            f"Unsupported pairing '{pair_by}'. "
            f"Supported pairings: {', '.join(sorted(PAIRING_MODES))}"
        )
    return rank(score_pairs(pairs, metric))
