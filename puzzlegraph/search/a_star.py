from __future__ import annotations
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple, TypeVar
import heapq
import itertools

from puzzlegraph.search.common import SearchStats, reconstruct_path

State = TypeVar("State", bound=Hashable)
T = TypeVar("T")

TIE_BREAKS = ("fifo", "lifo", "h", "g")


class _Larger:
    """Orders costs descending using only == and < of the wrapped cost."""
    __slots__ = ("v",)

    def __init__(self, v):
        self.v = v

    def __eq__(self, other):
        return self.v == other.v

    def __lt__(self, other):
        return other.v < self.v


def _priority(tie_break: str):
    if tie_break == "fifo": return lambda f, g, h, ctr: (f, 0, ctr)
    if tie_break == "lifo": return lambda f, g, h, ctr: (f, 0, -ctr)
    if tie_break == "h":    return lambda f, g, h, ctr: (f, h, ctr)
    if tie_break == "g":    return lambda f, g, h, ctr: (f, _Larger(g), ctr)
    raise ValueError(f"unknown tie_break {tie_break!r}, expected one of {TIE_BREAKS}")


def _search(neighbors, visit, heuristic, start, zero, tie_break, stats):
    """Shared A* loop. Returns ((goal_state, result) or None, best)."""
    priority_tuple = _priority(tie_break)
    counter = itertools.count()

    # state -> (predecessor or None, cheapest cost discovered so far)
    best: Dict = {}
    open_heap: List = []
    for s in start:
        if s in best:
            continue
        best[s] = (None, zero)
        h0 = heuristic(s)
        heapq.heappush(open_heap, (priority_tuple(zero + h0, zero, h0, next(counter)), next(counter), zero, s))

    expanded = generated = duplicates = stale = 0
    peak_open = len(open_heap)
    found = None

    while open_heap:
        peak_open = max(peak_open, len(open_heap))
        _, _, g, s = heapq.heappop(open_heap)
        if best[s][1] < g:
            # superseded by a cheaper push made after this one
            stale += 1
            continue

        expanded += 1
        r = visit(s, g)
        if r is not None:
            found = (s, r)
            break

        for s2, c in neighbors(s):
            generated += 1
            g2 = g + c
            rec = best.get(s2)
            if rec is not None and not g2 < rec[1]:
                duplicates += 1
                continue
            # decrease-key by re-push; the older entry goes stale
            best[s2] = (s, g2)
            h2 = heuristic(s2)
            heapq.heappush(open_heap, (priority_tuple(g2 + h2, g2, h2, next(counter)), next(counter), g2, s2))

    if stats is not None:
        stats.expanded += expanded
        stats.generated += generated
        stats.duplicates += duplicates
        stats.stale += stale
        stats.peak_frontier = max(stats.peak_frontier, peak_open)
        stats.reached += len(best)
    return found, best


def astar(
    neighbors: Callable[[State], Iterable[Tuple[State, object]]],
    visit: Callable[[State, object], Optional[T]],
    heuristic: Callable[[State], object],
    start: Iterable[State],
    *,
    zero=0,
    tie_break: str = "fifo",
    stats: Optional[SearchStats] = None,
) -> Optional[T]:
    """
    A* over an implicit weighted graph.
    neighbors: callable(state) -> [(next_state, edge_cost)], edge costs non-negative
    visit:     callable(state, g) -> result or None, called in ascending f = g + h order
    heuristic: callable(state) -> estimate; must not overestimate for the result to be optimal
    zero:      additive identity of the cost type (start states get this cost);
               costs need only +, < and ==
    tie_break: order among equal f: "fifo", "lifo", "h" (smaller h first), "g" (larger g first)
    """
    found, _ = _search(neighbors, visit, heuristic, start, zero, tie_break, stats)
    return None if found is None else found[1]


def astar_path(
    neighbors: Callable[[State], Iterable[Tuple[State, object]]],
    visit: Callable[[State, object], Optional[T]],
    heuristic: Callable[[State], object],
    start: Iterable[State],
    *,
    zero=0,
    tie_break: str = "fifo",
    stats: Optional[SearchStats] = None,
) -> Optional[Tuple[List[State], T]]:
    """A* returning (path, result); path runs from the accepted state back to its start."""
    found, best = _search(neighbors, visit, heuristic, start, zero, tie_break, stats)
    if found is None:
        return None
    goal, r = found
    return reconstruct_path(best, goal, key=lambda rec: rec[0]), r
