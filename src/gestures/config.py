"""
Config loader for AirMouse.
Loads YAML configuration with dataclass validation.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import yaml


@dataclass
class CameraConfig:
    device_id: int = 0
    width: int = 1280
    height: int = 720
    fps: int = 30


@dataclass
class MediaPipeConfig:
    max_num_hands: int = 1
    min_detection_confidence: float = 0.7
    min_tracking_confidence: float = 0.7
    model_path: Optional[str] = None


@dataclass
class GestureConfig:
    pinch_threshold: float = 0.05            # thumb tip to index tip, strict <
    pointing_index_middle_gap: float = 0.1   # |index.x - middle.x| must exceed
    pointing_thumb_index_gap: float = 0.15   # |thumb.x - index.x| must exceed
    swipe_threshold: float = 0.1             # wrist dy between consecutive frames


@dataclass
class SmoothingConfig:
    decay: float = 0.7               # weight of the running state, gain = 1 - decay
    seed: str = "first_sample"       # "first_sample" or "origin"


@dataclass
class DispatchConfig:
    scroll_delta: int = 50
    click_release_ms: int = 100
    click_effect_ms: int = 200
    right_click_effect_ms: int = 200
    scroll_effect_ms: int = 300
    absent_cursor_opacity: float = 0.3


@dataclass
class ScreenConfig:
    width: int = 0    # 0 = ask the pointer backend
    height: int = 0


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class Config:
    camera: CameraConfig = field(default_factory=CameraConfig)
    mediapipe: MediaPipeConfig = field(default_factory=MediaPipeConfig)
    gestures: GestureConfig = field(default_factory=GestureConfig)
    smoothing: SmoothingConfig = field(default_factory=SmoothingConfig)
    dispatch: DispatchConfig = field(default_factory=DispatchConfig)
    screen: ScreenConfig = field(default_factory=ScreenConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(cls, data: Optional[dict]):
    """Convert a dict to a dataclass, ignoring unknown keys."""
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping for {cls.__name__}, got {type(data).__name__}")
    field_names = {f.name for f in cls.__dataclass_fields__.values()}
    filtered = {k: v for k, v in data.items() if k in field_names}
    return cls(**filtered)


def config_from_dict(data: Optional[dict]) -> Config:
    """Build a Config from an already-parsed mapping."""
    data = data or {}
    return Config(
        camera=_dict_to_dataclass(CameraConfig, data.get('camera')),
        mediapipe=_dict_to_dataclass(MediaPipeConfig, data.get('mediapipe')),
        gestures=_dict_to_dataclass(GestureConfig, data.get('gestures')),
        smoothing=_dict_to_dataclass(SmoothingConfig, data.get('smoothing')),
        dispatch=_dict_to_dataclass(DispatchConfig, data.get('dispatch')),
        screen=_dict_to_dataclass(ScreenConfig, data.get('screen')),
        logging=_dict_to_dataclass(LoggingConfig, data.get('logging')),
    )


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from YAML file.
    
    Args:
        config_path: Path to config file. If None, uses default config.yaml
                    in project root.
    
    Returns:
        Config dataclass with all settings.
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config.yaml"
    
    config_path = Path(config_path)
    
    if not config_path.exists():
        return Config()
    
    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}
    
    return config_from_dict(data)
