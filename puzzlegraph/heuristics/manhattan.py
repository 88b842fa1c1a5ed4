from typing import Callable, Optional, Tuple

Point = Tuple[int, int]

def manhattan_distance(a: Point, b: Point) -> int:
    (x1, y1), (x2, y2) = a, b
    return abs(x1 - x2) + abs(y1 - y2)

def manhattan_to(goal: Point, position: Optional[Callable] = None) -> Callable[[object], int]:
    """Heuristic: Manhattan distance from a state's position to goal.
    `position` extracts the (x, y) point from a state; identity by default."""
    if position is None:
        return lambda s: manhattan_distance(s, goal)
    return lambda s: manhattan_distance(position(s), goal)
