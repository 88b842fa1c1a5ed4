from __future__ import annotations
from typing import Callable, Iterator, List, Optional, Tuple

from puzzlegraph.search.bfs import breadth_first_search, breadth_first_path

Position = Tuple[int, int]  # (x, y), y grows downward
Direction = Tuple[int, int]

UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
DIRECTIONS: Tuple[Direction, ...] = (UP, RIGHT, DOWN, LEFT)

def step(p: Position, d: Direction, n: int = 1) -> Position:
    return (p[0] + d[0] * n, p[1] + d[1] * n)

def inverse(d: Direction) -> Direction:
    return (-d[0], -d[1])


class Grid:
    """Rectangular character map, stored row-major."""
    def __init__(self, rows: List[str]):
        if not rows:
            raise ValueError("grid has no rows")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has width {len(row)}, expected {width}")
        self.width = width
        self.height = len(rows)
        self.tiles = "".join(rows)

    @classmethod
    def parse(cls, text: str) -> "Grid":
        return cls([line.rstrip("\r") for line in text.splitlines() if line.strip()])

    def __repr__(self):
        return f"Grid({self.width}x{self.height})"

    # ---------- lookups ----------
    def contains(self, p: Position) -> bool:
        x, y = p
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, p: Position) -> Optional[str]:
        if not self.contains(p):
            return None
        x, y = p
        return self.tiles[y * self.width + x]

    def find_all(self, ch: str) -> List[Position]:
        return [divmod(i, self.width)[::-1] for i, t in enumerate(self.tiles) if t == ch]

    def find(self, ch: str) -> Position:
        i = self.tiles.find(ch)
        if i < 0:
            raise ValueError(f"no {ch!r} tile in grid")
        y, x = divmod(i, self.width)
        return (x, y)

    def cost(self, p: Position) -> int:
        """Digit-valued tile cost (e.g. heat loss)."""
        t = self.get(p)
        if t is None or not t.isdigit():
            raise ValueError(f"tile at {p} is not a digit: {t!r}")
        return int(t)

    # ---------- transitions ----------
    def adjacent(self, p: Position) -> Iterator[Position]:
        """In-bounds 4-neighbours in UP, RIGHT, DOWN, LEFT order."""
        for d in DIRECTIONS:
            q = step(p, d)
            if self.contains(q):
                yield q

    def open_neighbors(self, walls: str = "#") -> Callable[[Position, int], Iterator[Position]]:
        """Neighbor function for BFS/DFS: in-bounds cells whose tile is not a wall."""
        def neighbors(p: Position, _depth: int) -> Iterator[Position]:
            return (q for q in self.adjacent(p) if self.get(q) not in walls)
        return neighbors

    def weighted_neighbors(self, p: Position) -> List[Tuple[Position, int]]:
        """Neighbor function for A*: entering a cell costs its digit."""
        return [(q, self.cost(q)) for q in self.adjacent(p)]


def count_reachable(grid: Grid, steps: int, start: Optional[Position] = None, walls: str = "#") -> int:
    """Cells an exact walk of `steps` moves from start can end on (walks may step back and forth).
    A cell qualifies when its shortest distance is <= steps and has the same parity as steps."""
    if start is None:
        start = grid.find("S")
    counter = 0

    def visit(p: Position, depth: int):
        nonlocal counter
        if depth > steps:
            return True
        if depth % 2 == steps % 2:
            counter += 1
        return None

    breadth_first_search(grid.open_neighbors(walls), visit, [start])
    return counter


def shortest_route(grid: Grid, start: Position, goal: Position, walls: str = "#") -> Optional[List[Position]]:
    """Fewest-moves route from start to goal inclusive, or None if walled off."""
    found = breadth_first_path(grid.open_neighbors(walls), lambda p, d: d if p == goal else None, [start])
    if found is None:
        return None
    path, _ = found
    path.reverse()
    return path
