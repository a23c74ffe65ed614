"""
Turns per-frame gesture results into pointer effects.

Clicks are momentary: the press goes out immediately and the release is
scheduled click_release_ms later. Pending releases are sent by tick(),
which runs at the start of every dispatch, so a cycle never sleeps. A
CLICK that arrives while the button is still held is ignored, so every
press lasts the full release delay.
"""
from typing import Callable, List, Optional, Tuple
import logging
import time

from gestures.config import DispatchConfig
from gestures.detectors import Action
from gestures.pipeline import CycleResult

from .backends import PointerBackend
from .effects import CursorFeedback, EFFECT_ACTIVE, EFFECT_CLICK

logger = logging.getLogger(__name__)


class ActionDispatcher:
    """
    Applies resolved actions to a pointer backend.
    
    MOVE only produces pointer move events while a drag is held; the
    visible cursor follows the smoothed position on every frame with a hand.
    """
    
    def __init__(
        self,
        backend: PointerBackend,
        config: Optional[DispatchConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._backend = backend
        self._config = config or DispatchConfig()
        self._clock = clock
        
        self._pending_releases: List[Tuple[float, float, float]] = []  # (due, x, y)
        self._dragging = False
        self._last_position: Optional[Tuple[float, float]] = None
        self.feedback = CursorFeedback()
    
    @property
    def dragging(self) -> bool:
        return self._dragging
    
    @property
    def pending_releases(self) -> int:
        return len(self._pending_releases)
    
    def dispatch(self, result: CycleResult) -> None:
        """Apply one cycle's result."""
        now = self._clock()
        self.tick(now)
        
        if not result.hand_present or result.position is None:
            self.feedback.opacity = self._config.absent_cursor_opacity
            return
        
        x, y = result.position
        self._last_position = (x, y)
        self.feedback.opacity = 1.0
        self._backend.move_cursor(x, y)
        
        action = result.action
        if action is None:
            return
        
        if action is Action.MOVE:
            if self._dragging:
                self._backend.pointer_move(x, y)
        
        elif action is Action.CLICK:
            self._click(x, y, now)
        
        elif action is Action.RIGHT_CLICK:
            self.feedback.trigger(EFFECT_ACTIVE, now, self._config.right_click_effect_ms / 1000.0)
            self._backend.right_click(x, y)
        
        elif action is Action.SCROLL_UP:
            self.feedback.trigger(EFFECT_ACTIVE, now, self._config.scroll_effect_ms / 1000.0)
            self._backend.scroll(-self._config.scroll_delta)
        
        elif action is Action.SCROLL_DOWN:
            self.feedback.trigger(EFFECT_ACTIVE, now, self._config.scroll_effect_ms / 1000.0)
            self._backend.scroll(self._config.scroll_delta)
    
    def _click(self, x: float, y: float, now: float) -> None:
        # The left button is already held by a drag or an unreleased click
        if self._dragging or self._pending_releases:
            return
        self.feedback.trigger(EFFECT_CLICK, now, self._config.click_effect_ms / 1000.0)
        self._backend.mouse_down(x, y)
        due = now + self._config.click_release_ms / 1000.0
        self._pending_releases.append((due, x, y))
    
    def tick(self, now: Optional[float] = None) -> int:
        """Send releases that are due. Returns how many were sent."""
        if now is None:
            now = self._clock()
        due = [p for p in self._pending_releases if p[0] <= now]
        if not due:
            return 0
        self._pending_releases = [p for p in self._pending_releases if p[0] > now]
        for _, x, y in due:
            self._backend.mouse_up(x, y)
        return len(due)
    
    def flush(self) -> None:
        """Release every pending press immediately."""
        pending, self._pending_releases = self._pending_releases, []
        for _, x, y in pending:
            self._backend.mouse_up(x, y)
    
    def start_drag(self) -> bool:
        """Press and hold at the last cursor position."""
        if self._dragging or self._last_position is None:
            return False
        self.flush()
        self._dragging = True
        self._backend.mouse_down(*self._last_position)
        logger.debug("Drag started at (%.0f, %.0f)", *self._last_position)
        return True
    
    def stop_drag(self) -> bool:
        """Release a held drag."""
        if not self._dragging:
            return False
        self._dragging = False
        if self._last_position is not None:
            self._backend.mouse_up(*self._last_position)
        logger.debug("Drag stopped")
        return True
    
    def active_effect(self, now: Optional[float] = None) -> Optional[str]:
        return self.feedback.active_effect(self._clock() if now is None else now)
