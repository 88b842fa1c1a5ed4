from __future__ import annotations
from typing import Dict, List, Tuple
import random

Board = Tuple[int, ...]  # row-major tiles, 0 is the blank

class SlidingPuzzle:
    """
    R×C sliding-tile puzzle (3×3 is the 8-puzzle, 4×4 the 15-puzzle).
    Boards are states of the implicit graph; one blank move is one unit-cost edge.
    """
    def __init__(self, rows: int, cols: int):
        if rows < 2 or cols < 2:
            raise ValueError(f"board must be at least 2x2, got {rows}x{cols}")
        self.R = rows
        self.C = cols
        self.size = rows * cols
        self.GOAL: Board = tuple(list(range(1, self.size)) + [0])

        # cells the blank can move to, per blank index
        self._moves: Dict[int, Tuple[int, ...]] = {}
        for i in range(self.size):
            r, c = divmod(i, cols)
            out = []
            if r > 0:        out.append(i - cols)
            if r < rows - 1: out.append(i + cols)
            if c > 0:        out.append(i - 1)
            if c < cols - 1: out.append(i + 1)
            self._moves[i] = tuple(out)

        self._home: Dict[int, Tuple[int, int]] = {t: divmod(t - 1, cols) for t in range(1, self.size)}

    def __repr__(self):
        return f"SlidingPuzzle({self.R}x{self.C})"

    @property
    def name(self) -> str:
        if self.R == self.C:
            return f"p{self.size - 1}"
        return f"r{self.R}x{self.C}"

    # ---------- transitions ----------
    @staticmethod
    def _swap(s: Board, i: int, j: int) -> Board:
        lst = list(s)
        lst[i], lst[j] = lst[j], lst[i]
        return tuple(lst)

    def neighbors(self, s: Board, _depth: int = 0) -> List[Board]:
        """BFS/DFS neighbor function."""
        z = s.index(0)
        return [self._swap(s, z, j) for j in self._moves[z]]

    def weighted_neighbors(self, s: Board) -> List[Tuple[Board, int]]:
        """A* neighbor function; every move costs 1."""
        return [(s2, 1) for s2 in self.neighbors(s)]

    # ---------- instances ----------
    def scramble(self, depth: int, seed: int) -> Board:
        """Random walk of `depth` blank moves from GOAL, never undoing the previous move."""
        rng = random.Random(seed)
        s = self.GOAL
        last = None
        for _ in range(depth):
            z = s.index(0)
            cand = [j for j in self._moves[z] if j != last] or list(self._moves[z])
            j = rng.choice(cand)
            s = self._swap(s, z, j)
            last = z
        return s

    def is_solvable(self, s: Board) -> bool:
        """Odd width: inversions even. Even width: inversions + blank row counted from the bottom (1-based) odd."""
        arr = [x for x in s if x != 0]
        inv = sum(1 for i in range(len(arr)) for j in range(i + 1, len(arr)) if arr[i] > arr[j])
        if self.C % 2 == 1:
            return inv % 2 == 0
        blank_row_from_bottom = self.R - s.index(0) // self.C
        return (inv + blank_row_from_bottom) % 2 == 1

    def make_unsolvable(self, s: Board) -> Board:
        """Swap the first two non-blank tiles, flipping parity."""
        i, j = [k for k, v in enumerate(s) if v != 0][:2]
        return self._swap(s, i, j)

    # ---------- heuristics ----------
    def manhattan(self, s: Board) -> int:
        dist = 0
        for idx, t in enumerate(s):
            if t == 0:
                continue
            r, c = divmod(idx, self.C)
            gr, gc = self._home[t]
            dist += abs(r - gr) + abs(c - gc)
        return dist

    def linear_conflict(self, s: Board) -> int:
        """Manhattan + 2 per pair of tiles in their goal row (or column) but in reversed order."""
        h = self.manhattan(s)
        for r in range(self.R):
            goal_cols = [self._home[t][1] for t in s[r * self.C:(r + 1) * self.C]
                         if t != 0 and self._home[t][0] == r]
            h += 2 * _inversions(goal_cols)
        for c in range(self.C):
            goal_rows = [self._home[t][0] for t in s[c::self.C]
                         if t != 0 and self._home[t][1] == c]
            h += 2 * _inversions(goal_rows)
        return h


def _inversions(xs: List[int]) -> int:
    return sum(1 for i in range(len(xs)) for j in range(i + 1, len(xs)) if xs[i] > xs[j])
