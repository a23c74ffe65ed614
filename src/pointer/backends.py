"""
Pointer backends: where dispatched actions end up.
"""
from typing import List, Protocol, Tuple, runtime_checkable
import logging

logger = logging.getLogger(__name__)


@runtime_checkable
class PointerBackend(Protocol):
    """Protocol for anything that can receive synthetic pointer input."""
    
    def screen_size(self) -> Tuple[int, int]:
        """Size of the pointer target in pixels."""
        ...
    
    def move_cursor(self, x: float, y: float) -> None:
        """Move the visible cursor."""
        ...
    
    def pointer_move(self, x: float, y: float) -> None:
        """Send a pointer move event (used while dragging)."""
        ...
    
    def mouse_down(self, x: float, y: float) -> None:
        ...
    
    def mouse_up(self, x: float, y: float) -> None:
        ...
    
    def right_click(self, x: float, y: float) -> None:
        ...
    
    def scroll(self, dy: int) -> None:
        """Scroll vertically; negative dy scrolls up."""
        ...


class PyAutoGUIBackend:
    """Injects real OS pointer events through PyAutoGUI."""
    
    def __init__(self):
        # Imported here: pyautogui needs a display as soon as it is imported
        import pyautogui
        
        self._gui = pyautogui
        self._gui.FAILSAFE = False
        self._gui.PAUSE = 0
    
    def screen_size(self) -> Tuple[int, int]:
        width, height = self._gui.size()
        return int(width), int(height)
    
    def move_cursor(self, x: float, y: float) -> None:
        self._gui.moveTo(int(x), int(y), _pause=False)
    
    def pointer_move(self, x: float, y: float) -> None:
        self._gui.moveTo(int(x), int(y), _pause=False)
    
    def mouse_down(self, x: float, y: float) -> None:
        self._gui.mouseDown(int(x), int(y), button="left")
    
    def mouse_up(self, x: float, y: float) -> None:
        self._gui.mouseUp(int(x), int(y), button="left")
    
    def right_click(self, x: float, y: float) -> None:
        self._gui.rightClick(int(x), int(y))
    
    def scroll(self, dy: int) -> None:
        # PyAutoGUI scrolls up for positive amounts
        self._gui.scroll(-dy)


class RecordingBackend:
    """Records calls instead of touching the OS. Used for dry runs and tests."""
    
    def __init__(self, size: Tuple[int, int] = (1920, 1080)):
        self._size = size
        self.calls: List[Tuple] = []
    
    def _record(self, *call) -> None:
        logger.debug("pointer %s", call)
        self.calls.append(call)
    
    def screen_size(self) -> Tuple[int, int]:
        return self._size
    
    def move_cursor(self, x: float, y: float) -> None:
        self._record("move_cursor", x, y)
    
    def pointer_move(self, x: float, y: float) -> None:
        self._record("pointer_move", x, y)
    
    def mouse_down(self, x: float, y: float) -> None:
        self._record("mouse_down", x, y)
    
    def mouse_up(self, x: float, y: float) -> None:
        self._record("mouse_up", x, y)
    
    def right_click(self, x: float, y: float) -> None:
        self._record("right_click", x, y)
    
    def scroll(self, dy: int) -> None:
        self._record("scroll", dy)
    
    def names(self) -> List[str]:
        """Call names in order, without arguments."""
        return [call[0] for call in self.calls]
