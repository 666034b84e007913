"""Ranked insertion into per-keyword occurrence lists.

Occurrence lists are kept in descending frequency order.  A new occurrence
is placed with a binary search for its insertion point; equal frequencies
keep arrival order, so earlier-merged documents stay ahead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wordcore.store import Occurrence


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """Move the last occurrence of ``occs`` into its ranked position.

    ``occs[:-1]`` must already be non-increasing by frequency.  Returns the
    midpoint indexes probed by the search, or None for a single-element list.
    """
    if len(occs) == 1:
        return None

    target = occs.pop()
    low, high = 0, len(occs) - 1
    midpoints: list[int] = []

    while low <= high:
        mid = (low + high) // 2
        midpoints.append(mid)
        if target.frequency <= occs[mid].frequency:
            low = mid + 1
        else:
            high = mid - 1

    # low is the first index whose frequency is strictly below the target
    occs.insert(low, target)
    return midpoints


def insert_ranked(occs: list[Occurrence], occurrence: Occurrence) -> list[int] | None:
    """Append ``occurrence`` to ``occs`` and restore the ranking in place."""
    occs.append(occurrence)
    return insert_last_occurrence(occs)


def is_ranked(occs: list[Occurrence] | tuple[Occurrence, ...]) -> bool:
    """True if frequencies never increase along ``occs``."""
    return all(a.frequency >= b.frequency for a, b in zip(occs, occs[1:]))
