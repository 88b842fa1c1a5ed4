from collections import deque
from typing import Callable, Deque, Dict, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar

from puzzlegraph.search.common import SearchStats, reconstruct_path

State = TypeVar("State", bound=Hashable)
T = TypeVar("T")


def breadth_first_search(neighbors: Callable[[State, int], Iterable[State]],
                         visit: Callable[[State, int], Optional[T]],
                         start: Iterable[State],
                         *, stats: Optional[SearchStats] = None) -> Optional[T]:
    """BFS; the depth passed to visit is the shortest hop count from the nearest start."""
    q: Deque[Tuple[State, int]] = deque()
    seen: Set[State] = set()
    for s in start:
        if s in seen: continue
        seen.add(s); q.append((s, 0))
    expanded = generated = duplicates = 0
    peak = len(q)
    result = None
    while q:
        peak = max(peak, len(q))
        s, d = q.popleft()
        expanded += 1
        result = visit(s, d)
        if result is not None:
            break
        for s2 in neighbors(s, d):
            generated += 1
            # mark on discovery: two frontier states at the same depth can't both queue s2
            if s2 in seen:
                duplicates += 1; continue
            seen.add(s2); q.append((s2, d + 1))
    if stats is not None:
        stats.expanded += expanded; stats.generated += generated
        stats.duplicates += duplicates
        stats.peak_frontier = max(stats.peak_frontier, peak)
        stats.reached += len(seen)
    return result


def breadth_first_path(neighbors: Callable[[State, int], Iterable[State]],
                       visit: Callable[[State, int], Optional[T]],
                       start: Iterable[State],
                       *, stats: Optional[SearchStats] = None) -> Optional[Tuple[List[State], T]]:
    """BFS returning (path, result); path runs from the accepted state back to its start."""
    q: Deque[Tuple[State, int]] = deque()
    parent: Dict[State, Optional[State]] = {}
    for s in start:
        if s in parent: continue
        parent[s] = None; q.append((s, 0))
    expanded = generated = duplicates = 0
    peak = len(q)
    while q:
        peak = max(peak, len(q))
        s, d = q.popleft()
        expanded += 1
        r = visit(s, d)
        if r is not None:
            if stats is not None:
                stats.expanded += expanded; stats.generated += generated
                stats.duplicates += duplicates
                stats.peak_frontier = max(stats.peak_frontier, peak)
                stats.reached += len(parent)
            return reconstruct_path(parent, s), r
        for s2 in neighbors(s, d):
            generated += 1
            if s2 in parent:
                duplicates += 1; continue
            parent[s2] = s; q.append((s2, d + 1))
    if stats is not None:
        stats.expanded += expanded; stats.generated += generated
        stats.duplicates += duplicates
        stats.peak_frontier = max(stats.peak_frontier, peak)
        stats.reached += len(parent)
    return None
