"""Frame timing values handed to objects on each update."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FrameTime:
    """Seconds elapsed since the previous frame and since the start."""

    elapsed: float = 0.0
    total: float = 0.0

    def advance(self, elapsed: float) -> FrameTime:
        """Record a new frame that lasted ``elapsed`` seconds and return self."""
        self.elapsed = elapsed
        self.total += elapsed
        return self