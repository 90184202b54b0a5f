"""
Multiset reconciliation of a product's associated parts.

Both sides are compared by part id only. Repetition is meaningful: a product
may list the same part several times, so only the excess occurrences on
either side are touched.

    diff([A, A, B], [A, B, B])  ->  to_remove=[A], to_add=[B]
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol


class _Identified(Protocol):
    id: int


PartRef = int | _Identified


def ref_id(ref: PartRef) -> int:
    """Return the part id behind a bare id or any object exposing ``id``."""
    if isinstance(ref, int):
        return ref
    return int(ref.id)


@dataclass
class LinkDiff:
    """Link-row edits needed to turn the persisted multiset into the desired one."""

    to_remove: list[Any] = field(default_factory=list)
    to_add: list[Any] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.to_remove and not self.to_add

    @property
    def summary(self) -> dict[str, int]:
        return {"remove": len(self.to_remove), "add": len(self.to_add)}


def frequencies(refs: Iterable[PartRef]) -> Counter[int]:
    return Counter(ref_id(r) for r in refs)


def _excess(walk: Sequence[PartRef], other: Counter[int]) -> list[Any]:
    remaining = Counter(other)
    out: list[Any] = []
    for ref in walk:
        key = ref_id(ref)
        if remaining[key] > 0:
            remaining[key] -= 1
        else:
            out.append(ref)
    return out


def diff(current: Sequence[PartRef], desired: Sequence[PartRef]) -> LinkDiff:
    """Compute the minimal removals and additions between two multisets.

    Elements are returned as given (ids or part objects), in the order they
    appear in their source sequence. Equal frequency maps yield an empty diff.
    """
    current_counts = frequencies(current)
    desired_counts = frequencies(desired)
    if current_counts == desired_counts:
        return LinkDiff()
    return LinkDiff(
        to_remove=_excess(current, desired_counts),
        to_add=_excess(desired, current_counts),
    )
