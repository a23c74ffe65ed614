"""
Priority-ordered gesture resolution with previous-frame memory.
"""
from typing import Optional, Sequence

from .detectors import Action, GestureDefinition, DEFAULT_GESTURES
from .landmarks import Frame


def match_gesture(
    current: Frame,
    previous: Optional[Frame],
    gestures: Sequence[GestureDefinition],
) -> Optional[GestureDefinition]:
    """Return the first gesture in priority order that matches, or None."""
    for gesture in gestures:
        if gesture.matches(current, previous):
            return gesture
    return None


def resolve(
    current: Frame,
    previous: Optional[Frame],
    gestures: Sequence[GestureDefinition] = DEFAULT_GESTURES,
) -> Optional[Action]:
    """Resolve a frame pair to at most one action."""
    gesture = match_gesture(current, previous, gestures)
    return gesture.action if gesture is not None else None


class GestureResolver:
    """
    Resolves one gesture per frame and remembers the last frame seen.
    
    The stored previous frame is read at the start of update() and replaced
    by the current frame at the end, whether or not anything matched.
    """
    
    def __init__(self, gestures: Sequence[GestureDefinition] = DEFAULT_GESTURES):
        self._gestures = tuple(gestures)
        self._previous: Optional[Frame] = None
    
    @property
    def gestures(self):
        return self._gestures
    
    @property
    def previous(self) -> Optional[Frame]:
        return self._previous
    
    def update(self, current: Frame) -> Optional[GestureDefinition]:
        """Match the current frame against the stored one, then advance."""
        gesture = match_gesture(current, self._previous, self._gestures)
        self._previous = current
        return gesture
    
    def resolve(self, current: Frame) -> Optional[Action]:
        gesture = self.update(current)
        return gesture.action if gesture is not None else None
    
    def reset(self) -> None:
        """Forget the previous frame."""
        self._previous = None
