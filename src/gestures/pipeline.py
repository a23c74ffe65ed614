"""
One detection cycle: frame -> gesture -> smoothed position.
"""
from dataclasses import dataclass
from typing import Any, Optional, Tuple
import logging

from .config import Config
from .detectors import Action, GestureDefinition, build_gestures
from .landmarks import Frame, MalformedFrameError
from .resolver import GestureResolver
from .smoother import PositionSmoother, mirror_to_screen

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CycleResult:
    """Per-frame output handed to the action dispatcher."""
    position: Optional[Tuple[float, float]]
    action: Optional[Action] = None
    gesture: Optional[str] = None
    hand_present: bool = True
    raw_position: Optional[Tuple[float, float]] = None


class PointerPipeline:
    """
    Runs the gesture resolver and position smoother once per frame.
    
    A missing or malformed frame is treated as "no hand": resolver memory
    and smoothed position are left as they were.
    """
    
    def __init__(self, config: Config, screen_size: Tuple[int, int]):
        """
        Args:
            config: AirMouse configuration
            screen_size: (width, height) of the pointer target in pixels
        """
        self._screen_width, self._screen_height = screen_size
        self._resolver = GestureResolver(build_gestures(config.gestures))
        self._smoother = PositionSmoother(
            decay=config.smoothing.decay,
            seed=config.smoothing.seed,
        )
        self._frame_count = 0
    
    @property
    def resolver(self) -> GestureResolver:
        return self._resolver
    
    @property
    def smoother(self) -> PositionSmoother:
        return self._smoother
    
    @property
    def frame_count(self) -> int:
        return self._frame_count
    
    def process(self, frame: Any) -> CycleResult:
        """
        Run one cycle.
        
        Args:
            frame: A Frame, raw landmark data accepted by Frame.from_points,
                or None when no hand was detected.
        """
        self._frame_count += 1
        
        if frame is None:
            return self._no_hand()
        try:
            if isinstance(frame, Frame):
                frame.validate()
            else:
                frame = Frame.from_points(frame)
        except MalformedFrameError as e:
            logger.debug("Skipping frame %d: %s", self._frame_count, e)
            return self._no_hand()
        
        gesture: Optional[GestureDefinition] = self._resolver.update(frame)
        
        raw = mirror_to_screen(frame.wrist, self._screen_width, self._screen_height)
        position = self._smoother.smooth(*raw)
        
        return CycleResult(
            position=position,
            action=gesture.action if gesture else None,
            gesture=gesture.name if gesture else None,
            hand_present=True,
            raw_position=raw,
        )
    
    def reset(self) -> None:
        """Forget resolver memory and smoothing state."""
        self._resolver.reset()
        self._smoother.reset()
    
    def _no_hand(self) -> CycleResult:
        return CycleResult(position=self._smoother.position, hand_present=False)
