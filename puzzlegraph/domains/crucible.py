from __future__ import annotations
from typing import List, NamedTuple, Optional, Tuple

from puzzlegraph.domains.grid import DIRECTIONS, DOWN, RIGHT, Direction, Grid, Position, inverse, step
from puzzlegraph.heuristics.manhattan import manhattan_to
from puzzlegraph.search.a_star import astar_path
from puzzlegraph.search.common import SearchStats


class Crucible(NamedTuple):
    position: Position
    facing: Direction
    run: int  # blocks moved in a straight line so far


class CrucibleMap:
    """
    Heat-loss map for a crucible that must move at least `min_run` and at most
    `max_run` blocks before turning; it may never reverse.
    Entering a block costs that block's digit.
    """
    def __init__(self, grid: Grid, min_run: int = 1, max_run: int = 3):
        if not 1 <= min_run <= max_run:
            raise ValueError(f"need 1 <= min_run <= max_run, got {min_run}, {max_run}")
        if grid.width * grid.height < 2:
            # the start corner would also be the goal, with no run behind it
            raise ValueError(f"crucible map needs at least 2 blocks, got {grid!r}")
        self.grid = grid
        self.min_run = min_run
        self.max_run = max_run
        self.goal: Position = (grid.width - 1, grid.height - 1)

    def starts(self) -> List[Crucible]:
        # top-left corner, not yet moved, facing either way out of it
        return [Crucible((0, 0), RIGHT, 0), Crucible((0, 0), DOWN, 0)]

    def neighbors(self, s: Crucible) -> List[Tuple[Crucible, int]]:
        out: List[Tuple[Crucible, int]] = []
        for d in DIRECTIONS:
            if d == inverse(s.facing):
                continue
            if d == s.facing:
                if s.run >= self.max_run:
                    continue
                nxt = Crucible(step(s.position, d), d, s.run + 1)
            else:
                if s.run < self.min_run:
                    continue
                nxt = Crucible(step(s.position, d), d, 1)
            if self.grid.contains(nxt.position):
                out.append((nxt, self.grid.cost(nxt.position)))
        return out

    def accept(self, s: Crucible, g: int) -> Optional[int]:
        if s.position == self.goal and s.run >= self.min_run:
            return g
        return None

    def heuristic(self):
        return manhattan_to(self.goal, position=lambda s: s.position)


def least_heat_loss(grid: Grid, min_run: int = 1, max_run: int = 3,
                    stats: Optional[SearchStats] = None) -> Optional[Tuple[int, List[Crucible]]]:
    """Minimum heat loss from top-left to bottom-right, with the route start-to-goal."""
    m = CrucibleMap(grid, min_run, max_run)
    found = astar_path(m.neighbors, m.accept, m.heuristic(), m.starts(), stats=stats)
    if found is None:
        return None
    path, g = found
    return g, path[::-1]
