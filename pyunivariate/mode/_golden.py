"""
Golden-section search for the most symmetric mirror index.

The objective (``mirror_max_index_diff``) is assumed unimodal within the
statistical noise. The bracket ``low < mid < high`` shrinks until it is
narrower than ``tolerance * (mid + probe)`` or spans at most 3 indices,
and the bracket midpoint is returned.

A ``MIRROR_ABOVE`` objective value means the mirror overtakes the data,
so the search always moves to the lower sub-interval in that case
instead of comparing objective values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class SearchState:
    """
    Bracket of the search.

    Attributes:
        low: Lower index of the bracket
        mid: Current best index inside the bracket
        high: Upper index of the bracket
        mid_diff: Objective value at ``mid``
        probes: Number of objective evaluations made by the search
    """
    low: int
    mid: int
    high: int
    mid_diff: int
    probes: int = 0


def initial_mid(low: int, high: int, golden_ratio: float) -> int:
    """Point dividing [low, high] so (high - c) / (c - low) is the golden ratio."""
    return int((high + golden_ratio * low) / (1 + golden_ratio))


def golden_section_search(
    objective: Callable[[int], int],
    state: SearchState,
    *,
    two_take_gr: float,
    tolerance: float,
    mirror_above: int,
) -> int:
    """
    Index minimizing ``objective`` within the bracket held by ``state``.

    ``state`` is updated in place, so the final bracket can be reported.
    """
    while True:
        upper_larger = state.high - state.mid > state.mid - state.low
        if upper_larger:
            probe = int(state.mid + two_take_gr * (state.high - state.mid))
        else:
            probe = int(state.mid - two_take_gr * (state.mid - state.low))

        width = state.high - state.low
        if width < tolerance * (state.mid + probe) or width <= 3:
            return (state.high + state.low) // 2

        diff = objective(probe)
        state.probes += 1

        if diff == mirror_above:
            if state.mid < probe:
                state.high = probe
            else:
                state.high, state.mid, state.mid_diff = state.mid, probe, diff
            continue

        if diff < state.mid_diff:
            if upper_larger:
                state.low, state.mid, state.mid_diff = state.mid, probe, diff
            else:
                state.high, state.mid, state.mid_diff = state.mid, probe, diff
        elif upper_larger:
            state.high = probe
        else:
            state.low = probe
