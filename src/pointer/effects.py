"""
Timed cursor feedback.

Visual effects are plain records of when they started and how long they
last; whoever renders the cursor asks whether an effect is active at a
given time instead of relying on timers.
"""
from dataclasses import dataclass
from typing import Optional

EFFECT_CLICK = "click"
EFFECT_ACTIVE = "active"


@dataclass(frozen=True)
class CursorEffect:
    kind: str
    triggered_at: float
    duration: float    # seconds
    
    @property
    def ends_at(self) -> float:
        return self.triggered_at + self.duration
    
    def is_active(self, now: float) -> bool:
        return self.triggered_at <= now < self.ends_at


class CursorFeedback:
    """Cursor opacity plus the most recent visual effect."""
    
    def __init__(self, opacity: float = 1.0):
        self.opacity = opacity
        self._effect: Optional[CursorEffect] = None
    
    @property
    def effect(self) -> Optional[CursorEffect]:
        return self._effect
    
    def trigger(self, kind: str, now: float, duration: float) -> CursorEffect:
        """Start an effect, replacing whatever was showing."""
        self._effect = CursorEffect(kind=kind, triggered_at=now, duration=duration)
        return self._effect
    
    def active_effect(self, now: float) -> Optional[str]:
        """Kind of the effect showing at `now`, if any."""
        if self._effect is not None and self._effect.is_active(now):
            return self._effect.kind
        return None
