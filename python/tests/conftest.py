"""Shared fixtures.

``distances`` is an independent brute-force oracle: a plain breadth-first
sweep outward from the goal over raw tuples, mapping every solvable state's
encoding to its true minimal move count.
"""

from __future__ import annotations

import random
from collections import deque

import pytest

_GOAL = (1, 2, 3, 4, 5, 6, 7, 8, 0)


def _neighbours(tiles: tuple[int, ...]) -> list[tuple[int, ...]]:
    i = tiles.index(0)
    r, c = divmod(i, 3)
    out: list[tuple[int, ...]] = []
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < 3 and 0 <= nc < 3:
            j = nr * 3 + nc
            lst = list(tiles)
            lst[i], lst[j] = lst[j], lst[i]
            out.append(tuple(lst))
    return out


def _encode(tiles: tuple[int, ...]) -> str:
    return "".join(str(t) for t in tiles)


@pytest.fixture(scope="session")
def distances() -> dict[str, int]:
    dist = {_encode(_GOAL): 0}
    queue = deque([_GOAL])
    while queue:
        tiles = queue.popleft()
        d = dist[_encode(tiles)]
        for nxt in _neighbours(tiles):
            key = _encode(nxt)
            if key not in dist:
                dist[key] = d + 1
                queue.append(nxt)
    return dist


@pytest.fixture
def rng() -> random.Random:
    return random.Random(2017)
