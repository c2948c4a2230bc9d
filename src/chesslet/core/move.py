"""Move value object describing a board delta."""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.core.position import Position


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable description of how a move changes the board.

    ``removed`` is vacated first, then every ``(source, destination)`` pair in
    ``moved`` is relocated in order. The capture square may differ from the
    destination, and one move may relocate several pieces.
    """

    removed: Position | None = None
    moved: tuple[tuple[Position, Position], ...] = ()

    @classmethod
    def step(
        cls, source: Position, destination: Position, capture: bool = False
    ) -> Move:
        """Single-piece move; a capture removes whatever stands on *destination*."""
        return cls(destination if capture else None, ((source, destination),))

    @property
    def is_capture(self) -> bool:
        return self.removed is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        if not self.moved:
            return f"x{self.removed}" if self.removed is not None else "-"
        source, destination = self.moved[0]
        return f"{source}{destination}"
