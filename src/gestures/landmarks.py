"""
Hand landmark frames.

A Frame is one observation of one hand: 21 normalized landmarks in the
MediaPipe order, y increasing downwards like image coordinates.
"""
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple
import math

NUM_LANDMARKS = 21


class MalformedFrameError(ValueError):
    """Raised when landmark data cannot form a valid Frame."""


@dataclass(frozen=True)
class Landmark:
    """A single landmark in normalized image coordinates (z is a depth proxy)."""
    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class Frame:
    """
    Immutable set of 21 landmarks for one hand at one instant.
    
    Attributes:
        landmarks: Tuple of 21 Landmark values, indexed by anatomical id
        handedness: 'Left' or 'Right' when known
        confidence: Detection confidence 0-1
    """
    landmarks: Tuple[Landmark, ...]
    handedness: str = "Unknown"
    confidence: float = 1.0
    
    # MediaPipe landmark indices
    WRIST = 0
    THUMB_CMC = 1
    THUMB_MCP = 2
    THUMB_IP = 3
    THUMB_TIP = 4
    INDEX_MCP = 5
    INDEX_PIP = 6
    INDEX_DIP = 7
    INDEX_TIP = 8
    MIDDLE_MCP = 9
    MIDDLE_PIP = 10
    MIDDLE_DIP = 11
    MIDDLE_TIP = 12
    RING_MCP = 13
    RING_PIP = 14
    RING_DIP = 15
    RING_TIP = 16
    PINKY_MCP = 17
    PINKY_PIP = 18
    PINKY_DIP = 19
    PINKY_TIP = 20
    
    def __post_init__(self):
        self.validate()
    
    def validate(self) -> None:
        """
        Check landmark count and coordinates.
        
        Raises:
            MalformedFrameError: wrong count, non-Landmark items, or x/y that
                are missing or not finite.
        """
        if len(self.landmarks) != NUM_LANDMARKS:
            raise MalformedFrameError(
                f"Expected {NUM_LANDMARKS} landmarks, got {len(self.landmarks)}"
            )
        for index, landmark in enumerate(self.landmarks):
            if not isinstance(landmark, Landmark):
                raise MalformedFrameError(
                    f"Landmark {index} has unsupported type {type(landmark).__name__}"
                )
            if not (_is_finite(landmark.x) and _is_finite(landmark.y)):
                raise MalformedFrameError(f"Landmark {index} has missing or non-finite coordinates")
    
    @classmethod
    def from_points(
        cls,
        points: Optional[Iterable[Any]],
        handedness: str = "Unknown",
        confidence: float = 1.0,
    ) -> "Frame":
        """
        Build a Frame from raw landmark data.
        
        Accepts (x, y[, z]) sequences, {'x', 'y'[, 'z']} mappings, or objects
        exposing .x/.y/.z such as MediaPipe's NormalizedLandmark.
        
        Raises:
            MalformedFrameError: wrong landmark count or missing coordinates.
        """
        if points is None:
            raise MalformedFrameError("No landmark data")
        try:
            raw = list(points)
        except TypeError as e:
            raise MalformedFrameError(f"Landmark data is not iterable: {e}") from e
        if len(raw) != NUM_LANDMARKS:
            raise MalformedFrameError(f"Expected {NUM_LANDMARKS} landmarks, got {len(raw)}")
        landmarks = tuple(_to_landmark(i, p) for i, p in enumerate(raw))
        return cls(landmarks=landmarks, handedness=handedness, confidence=confidence)
    
    def get(self, index: int) -> Landmark:
        """Get landmark by index."""
        return self.landmarks[index]
    
    def __getitem__(self, index: int) -> Landmark:
        return self.landmarks[index]
    
    def __len__(self) -> int:
        return len(self.landmarks)
    
    @property
    def wrist(self) -> Landmark:
        return self.landmarks[self.WRIST]
    
    @property
    def thumb_tip(self) -> Landmark:
        return self.landmarks[self.THUMB_TIP]
    
    @property
    def index_tip(self) -> Landmark:
        return self.landmarks[self.INDEX_TIP]
    
    @property
    def index_dip(self) -> Landmark:
        return self.landmarks[self.INDEX_DIP]
    
    @property
    def middle_tip(self) -> Landmark:
        return self.landmarks[self.MIDDLE_TIP]


def _to_landmark(index: int, point: Any) -> Landmark:
    if isinstance(point, Landmark):
        coords = (point.x, point.y, point.z)
    elif isinstance(point, dict):
        coords = (point.get('x'), point.get('y'), point.get('z', 0.0))
    elif hasattr(point, 'x') and hasattr(point, 'y'):
        coords = (point.x, point.y, getattr(point, 'z', 0.0))
    elif isinstance(point, (tuple, list)) and len(point) in (2, 3):
        coords = (point[0], point[1], point[2] if len(point) == 3 else 0.0)
    else:
        raise MalformedFrameError(f"Landmark {index} has unsupported type {type(point).__name__}")
    
    x, y, z = coords
    if z is None:
        z = 0.0
    try:
        x, y, z = float(x), float(y), float(z)
    except (TypeError, ValueError) as e:
        raise MalformedFrameError(f"Landmark {index} has missing coordinates") from e
    return Landmark(x, y, z)


def _is_finite(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
