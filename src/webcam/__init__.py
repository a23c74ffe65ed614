"""
AirMouse Webcam Module

Hand landmark acquisition using MediaPipe and the frame-driven worker.
"""
from .hand_tracker import HandTracker
from .worker import WebcamWorker

__all__ = [
    'HandTracker',
    'WebcamWorker',
]
