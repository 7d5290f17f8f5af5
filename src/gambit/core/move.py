"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A candidate move: the piece on ``from_sq`` travelling to ``to_sq``.

    Moves are throwaway results of generation and are never cached across
    turns; the moving piece is whatever occupies ``from_sq`` right now.
    """

    from_sq: Square
    to_sq: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
