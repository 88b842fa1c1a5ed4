from typing import Callable

def zero(_state) -> int:
    """h = 0: A* degenerates into uniform-cost search."""
    return 0

def scaled(hfun: Callable[[object], float], w: float) -> Callable[[object], float]:
    """Weighted heuristic w*h. For w > 1 it may overestimate, trading optimality for fewer expansions."""
    return lambda s: w * hfun(s)
