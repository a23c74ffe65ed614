"""
Cursor position smoothing.

Exponential moving average over screen-space samples. Smoothing is indexed
by sample, not by time, so frame rate jitter does not change the filter.
"""
from typing import Optional, Tuple

from .landmarks import Landmark

SEED_FIRST_SAMPLE = "first_sample"
SEED_ORIGIN = "origin"
SEED_POLICIES = (SEED_FIRST_SAMPLE, SEED_ORIGIN)


def mirror_to_screen(wrist: Landmark, width: float, height: float) -> Tuple[float, float]:
    """
    Map a normalized wrist landmark to screen pixels.
    
    The camera feed is treated as a mirror, so x is flipped.
    """
    return ((1.0 - wrist.x) * width, wrist.y * height)


class PositionSmoother:
    """
    Stateful EMA filter: s' = s * decay + raw * (1 - decay).
    
    Seeding:
        "first_sample": the first raw sample becomes the state and is
            returned as-is, so the cursor appears where the hand is.
        "origin": the state starts at (0, 0) and glides towards the hand
            over the following frames.
    """
    
    def __init__(self, decay: float = 0.7, seed: str = SEED_FIRST_SAMPLE):
        if not 0.0 <= decay < 1.0:
            raise ValueError(f"decay must be in [0, 1), got {decay}")
        if seed not in SEED_POLICIES:
            raise ValueError(f"seed must be one of {SEED_POLICIES}, got {seed!r}")
        self._decay = decay
        self._seed = seed
        self._position: Optional[Tuple[float, float]] = None
        self.reset()
    
    @property
    def decay(self) -> float:
        return self._decay
    
    @property
    def gain(self) -> float:
        return 1.0 - self._decay
    
    @property
    def position(self) -> Optional[Tuple[float, float]]:
        """Current smoothed position, None until seeded."""
        return self._position
    
    def smooth(self, raw_x: float, raw_y: float) -> Tuple[float, float]:
        """Feed one raw sample and return the new smoothed position."""
        if self._position is None:
            self._position = (raw_x, raw_y)
            return self._position
        
        sx, sy = self._position
        self._position = (
            sx * self._decay + raw_x * self.gain,
            sy * self._decay + raw_y * self.gain,
        )
        return self._position
    
    def reset(self) -> None:
        """Return to the configured seed state."""
        self._position = (0.0, 0.0) if self._seed == SEED_ORIGIN else None
