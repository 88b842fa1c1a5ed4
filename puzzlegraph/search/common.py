from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, List, Optional, TypeVar

State = TypeVar("State", bound=Hashable)


@dataclass
class SearchStats:
    """Counters filled in by a search when the caller passes one in.

    expanded       states handed to the visitor
    generated      neighbor states produced by the neighbor function
    duplicates     neighbors dropped because they were already visited / not cheaper
    stale          A* heap entries skipped because a cheaper cost was recorded later
    peak_frontier  largest frontier size observed
    reached        states discovered (visited set / cost table size at return)

    Every field except peak_frontier (a running max) accumulates, so one
    object passed to several searches holds their totals.
    """
    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    stale: int = 0
    peak_frontier: int = 0
    reached: int = 0


def reconstruct_path(
    parents: Dict[State, object],
    goal: State,
    key: Optional[Callable[[object], Optional[State]]] = None,
) -> List[State]:
    """Walk predecessor links from goal back to a root (predecessor None).

    The list is goal-first; callers that want start-to-goal order reverse it.
    `key` projects a parents value onto the predecessor, e.g. for A* records
    of the form (predecessor, cost).
    """
    path: List[State] = [goal]
    s = goal
    while True:
        prev = parents[s] if key is None else key(parents[s])
        if prev is None:
            return path
        path.append(prev)
        s = prev
