"""
AirMouse Gesture Module

Gesture classification and cursor smoothing over hand landmark frames.
"""
from .config import Config, load_config
from .landmarks import Frame, Landmark, MalformedFrameError
from .detectors import Action, GestureDefinition, build_gestures, DEFAULT_GESTURES
from .resolver import GestureResolver, resolve, match_gesture
from .smoother import PositionSmoother, mirror_to_screen
from .pipeline import PointerPipeline, CycleResult

__all__ = [
    'Config',
    'load_config',
    'Frame',
    'Landmark',
    'MalformedFrameError',
    'Action',
    'GestureDefinition',
    'build_gestures',
    'DEFAULT_GESTURES',
    'GestureResolver',
    'resolve',
    'match_gesture',
    'PositionSmoother',
    'mirror_to_screen',
    'PointerPipeline',
    'CycleResult',
]
