from __future__ import annotations
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar

from puzzlegraph.search.common import SearchStats, reconstruct_path

State = TypeVar("State", bound=Hashable)
T = TypeVar("T")


def depth_first_search(
    neighbors: Callable[[State, int], Iterable[State]],
    visit: Callable[[State, int], Optional[T]],
    start: Iterable[State],
    *,
    stats: Optional[SearchStats] = None,
) -> Optional[T]:
    """
    Iterative DFS over an implicit graph.
    neighbors: callable(state, depth) -> iterable of next states
    visit:     callable(state, depth) -> result or None; the first non-None result stops the search
    States are marked visited when discovered, so each one is expanded at most once.
    """
    stack: List[Tuple[State, int]] = []
    visited: Set[State] = set()
    for s in start:
        if s in visited:
            continue
        visited.add(s)
        stack.append((s, 0))

    expanded = generated = duplicates = 0
    peak = len(stack)
    result = None

    while stack:
        s, d = stack.pop()
        expanded += 1
        result = visit(s, d)
        if result is not None:
            break

        for s2 in neighbors(s, d):
            generated += 1
            if s2 in visited:
                duplicates += 1
                continue
            visited.add(s2)
            stack.append((s2, d + 1))
        peak = max(peak, len(stack))

    if stats is not None:
        stats.expanded += expanded
        stats.generated += generated
        stats.duplicates += duplicates
        stats.peak_frontier = max(stats.peak_frontier, peak)
        stats.reached += len(visited)
    return result


def depth_first_path(
    neighbors: Callable[[State, int], Iterable[State]],
    visit: Callable[[State, int], Optional[T]],
    start: Iterable[State],
    *,
    stats: Optional[SearchStats] = None,
) -> Optional[Tuple[List[State], T]]:
    """
    Same traversal as depth_first_search, additionally recording the first
    predecessor of every discovered state. Returns (path, result) with the
    path ordered from the accepted state back to its start; the path is
    *a* valid path, not necessarily the shortest one.
    """
    stack: List[Tuple[State, int]] = []
    parents: Dict[State, Optional[State]] = {}
    for s in start:
        if s in parents:
            continue
        parents[s] = None
        stack.append((s, 0))

    expanded = generated = duplicates = 0
    peak = len(stack)
    found = None

    while stack:
        s, d = stack.pop()
        expanded += 1
        r = visit(s, d)
        if r is not None:
            found = (s, r)
            break

        for s2 in neighbors(s, d):
            generated += 1
            if s2 in parents:
                duplicates += 1
                continue
            parents[s2] = s
            stack.append((s2, d + 1))
        peak = max(peak, len(stack))

    if stats is not None:
        stats.expanded += expanded
        stats.generated += generated
        stats.duplicates += duplicates
        stats.peak_frontier = max(stats.peak_frontier, peak)
        stats.reached += len(parents)

    if found is None:
        return None
    goal, r = found
    return reconstruct_path(parents, goal), r
