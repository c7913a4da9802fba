"""Board model for the 8-tile slider puzzle."""

from __future__ import annotations

import re
from dataclasses import dataclass

SIZE = 3
CELLS = SIZE * SIZE
BLANK = 0

# Each cell's swap targets, in the order moves are generated.
ADJACENCY: dict[int, tuple[int, ...]] = {
    0: (1, 3),
    1: (2, 4, 0),
    2: (5, 1),
    3: (4, 6, 0),
    4: (5, 7, 3, 1),
    5: (8, 4, 2),
    6: (7, 3),
    7: (8, 6, 4),
    8: (7, 5),
}

_SEPARATORS = re.compile(r"[\s,/|]+")
_DESCRIPTOR = re.compile(r"^\s*([1-9])\s+to\s+([1-9])\s*,?\s*$")


class InvalidStateError(ValueError):
    """Raised when a board does not hold tiles 1-8 and one blank exactly once."""


@dataclass(frozen=True, slots=True)
class Move:
    """The tile at ``target`` slides into the blank at ``blank``.

    Both are row-major cell indexes (0-8).
    """

    blank: int
    target: int

    def __str__(self) -> str:
        return f"{self.blank + 1} to {self.target + 1}"

    @classmethod
    def parse(cls, descriptor: str) -> Move:
        """Parse a ``"1 to 2"`` descriptor (1-based cells, trailing comma ok)."""
        match = _DESCRIPTOR.match(descriptor)
        if match is None:
            raise ValueError(f"Not a move descriptor: {descriptor!r}")
        blank, target = int(match.group(1)) - 1, int(match.group(2)) - 1
        if target not in ADJACENCY[blank]:
            raise ValueError(f"Cells {blank + 1} and {target + 1} are not adjacent.")
        return cls(blank=blank, target=target)


def legal_moves(blank_pos: tuple[int, int]) -> tuple[Move, ...]:
    """Return the moves available with the blank at (row, col)."""
    row, col = blank_pos
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise InvalidStateError(f"Blank position {blank_pos} is off the board.")
    index = row * SIZE + col
    return tuple(Move(blank=index, target=t) for t in ADJACENCY[index])


@dataclass(frozen=True, slots=True)
class Board:
    """An immutable 3×3 puzzle state.

    Tiles are stored row-major as a flat tuple of ints. 0 represents the
    blank.
    """

    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.tiles) != CELLS:
            raise InvalidStateError(
                f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(self.tiles)}."
            )
        if sorted(self.tiles) != list(range(CELLS)):
            raise InvalidStateError(
                f"Board {self.tiles} must hold tiles 1-8 and one blank exactly once."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: list[int] | tuple[int, ...]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(tiles=tuple(flat))

    @classmethod
    def from_string(cls, text: str) -> Board:
        """Parse a canonical encoding such as ``"123456780"``.

        ``0`` or ``E`` mark the blank. Whitespace, commas and slashes between
        cells are ignored, so ``"1 2 3 / 4 5 6 / 7 8 E"`` is accepted too.
        """
        cells = _SEPARATORS.sub("", text).upper()
        tiles: list[int] = []
        for ch in cells:
            if ch in ("0", "E"):
                tiles.append(BLANK)
            elif ch in "12345678":
                tiles.append(int(ch))
            else:
                raise InvalidStateError(f"Unexpected character {ch!r} in {text!r}.")
        return cls(tiles=tuple(tiles))

    @classmethod
    def goal(cls) -> Board:
        return GOAL

    # -- queries --------------------------------------------------------------

    def encode(self) -> str:
        """Return the canonical row-major encoding, e.g. ``"123456780"``."""
        return "".join(str(t) for t in self.tiles)

    def locate_blank(self) -> tuple[int, int]:
        try:
            index = self.tiles.index(BLANK)
        except ValueError:
            raise InvalidStateError(f"Board {self.tiles} has no blank.") from None
        return divmod(index, SIZE)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.locate_blank()

    @property
    def rows(self) -> list[tuple[int, ...]]:
        return [self.tiles[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * SIZE + col]

    def legal_moves(self) -> tuple[Move, ...]:
        return legal_moves(self.locate_blank())

    def is_solved(self) -> bool:
        return self.tiles == GOAL.tiles

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.get_tile(row, col) == GOAL.get_tile(row, col)

    # -- transitions ----------------------------------------------------------

    def apply(self, move: Move) -> Board:
        """Return the board after *move*; this board is left untouched."""
        if self.tiles[move.blank] != BLANK:
            raise ValueError(f"Move {move} does not start at the blank of {self.encode()}.")
        if move.target not in ADJACENCY[move.blank]:
            raise ValueError(f"Move {move} does not swap adjacent cells.")
        tiles = list(self.tiles)
        tiles[move.blank], tiles[move.target] = tiles[move.target], tiles[move.blank]
        return Board(tiles=tuple(tiles))

    def __str__(self) -> str:
        return self.encode()


GOAL = Board(tiles=(1, 2, 3, 4, 5, 6, 7, 8, BLANK))
