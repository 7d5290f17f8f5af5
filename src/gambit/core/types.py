"""Square type alias and coordinate helpers.

Board layout (row-major, row 0 is black's home rank)::

    (0, 0)=a8 ... (0, 7)=h8
    ...
    (7, 0)=a1 ... (7, 7)=h1
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), both 0–7


def make_square(row: int, col: int) -> Square:
    return (row, col)


def in_bounds(row: int, col: int) -> bool:
    """Check whether (row, col) lies on the board."""
    return 0 <= row < 8 and 0 <= col < 8


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    row, col = sq
    return chr(ord("a") + col) + str(8 - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (8 - int(name[1]), ord(name[0]) - ord("a"))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
