"""Admissible distance-to-goal estimates."""

from __future__ import annotations

from backend.models.board import BLANK, GOAL, SIZE, Board


def misplaced_tiles(board: Board) -> int:
    """Number of tiles (blank ignored) not on their goal cell."""
    return sum(
        1
        for tile, goal in zip(board.tiles, GOAL.tiles)
        if tile != BLANK and tile != goal
    )


def manhattan_distance(board: Board) -> int:
    """Sum of row and column offsets of every tile from its goal cell."""
    dist = 0
    for index, tile in enumerate(board.tiles):
        if tile == BLANK:
            continue
        r, c = divmod(index, SIZE)
        gr, gc = divmod(tile - 1, SIZE)
        dist += abs(r - gr) + abs(c - gc)
    return dist
