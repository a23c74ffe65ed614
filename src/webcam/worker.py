"""
Background worker for the detection loop.
Runs in a separate QThread; each cycle finishes before the next one starts.
"""
import logging
import time
from typing import Optional
from PyQt5.QtCore import QObject, pyqtSignal

from gestures.config import Config
from gestures.pipeline import CycleResult, PointerPipeline
from pointer.dispatcher import ActionDispatcher

from .hand_tracker import HandTracker

logger = logging.getLogger(__name__)


class WebcamWorker(QObject):
    """
    Worker class that drives acquire -> resolve -> smooth -> dispatch.
    Emits signals between cycles only.
    """
    # Signals
    cycle_completed = pyqtSignal(object)  # Emits CycleResult
    hand_lost = pyqtSignal()
    error = pyqtSignal(str)
    finished = pyqtSignal()

    def __init__(
        self,
        config: Config,
        pipeline: PointerPipeline,
        dispatcher: ActionDispatcher,
        tracker: Optional[HandTracker] = None,
        max_frames: Optional[int] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._config = config
        self._pipeline = pipeline
        self._dispatcher = dispatcher
        self._tracker = tracker
        self._max_frames = max_frames
        self._is_running = False

        self._hand_visible = False
        self._last_gesture: Optional[str] = None

    def run_cycle(self, frame) -> CycleResult:
        """Run one full cycle for an already acquired frame (or None)."""
        result = self._pipeline.process(frame)
        self._dispatcher.dispatch(result)

        if result.hand_present:
            if not self._hand_visible:
                logger.info("Hand detected")
            self._hand_visible = True
            if result.gesture and result.gesture != self._last_gesture:
                logger.debug("Detected: %s", result.gesture)
            self._last_gesture = result.gesture
        else:
            if self._hand_visible:
                logger.info("No hands detected")
                self.hand_lost.emit()
            self._hand_visible = False
            self._last_gesture = None

        self.cycle_completed.emit(result)
        return result

    def start_process(self):
        """Main processing loop. Runs in worker thread."""
        if self._tracker is None:
            self._tracker = HandTracker(self._config)

        if not self._tracker.start():
            self.error.emit("Could not start hand tracker")
            self.finished.emit()
            return

        self._is_running = True
        min_interval = 1.0 / max(1, self._config.camera.fps)
        cycles = 0

        try:
            while self._is_running:
                loop_start = time.perf_counter()

                self.run_cycle(self._tracker.get_frame())
                cycles += 1
                if self._max_frames is not None and cycles >= self._max_frames:
                    break

                # Wait for the next frame between cycles, never inside one
                elapsed = time.perf_counter() - loop_start
                sleep_time = min_interval - elapsed
                if sleep_time > 0:
                    time.sleep(sleep_time)

        except Exception as e:
            logger.exception("Detection loop failed")
            self.error.emit(f"Worker Exception: {e}")
        finally:
            self._is_running = False
            self._dispatcher.flush()
            self._dispatcher.stop_drag()
            self._tracker.stop()
            self.finished.emit()

    def stop_process(self):
        """Signal the loop to stop; resources are released by the loop."""
        self._is_running = False
