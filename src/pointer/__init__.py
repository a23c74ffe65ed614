"""
AirMouse Pointer Module

Dispatches resolved gestures to synthetic pointer input.
"""
from .backends import PointerBackend, PyAutoGUIBackend, RecordingBackend
from .dispatcher import ActionDispatcher
from .effects import CursorEffect, CursorFeedback

__all__ = [
    'PointerBackend',
    'PyAutoGUIBackend',
    'RecordingBackend',
    'ActionDispatcher',
    'CursorEffect',
    'CursorFeedback',
]
