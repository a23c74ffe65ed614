import pytest
from gestures.config import Config, config_from_dict, load_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "missing.yaml")
    assert config == Config()


def test_defaults_match_virtual_mouse_constants():
    config = Config()
    assert config.gestures.pinch_threshold == 0.05
    assert config.gestures.swipe_threshold == 0.1
    assert config.smoothing.decay == 0.7
    assert config.smoothing.seed == "first_sample"
    assert config.dispatch.scroll_delta == 50
    assert config.dispatch.click_release_ms == 100


def test_yaml_overrides_and_unknown_keys(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "gestures:\n"
        "  pinch_threshold: 0.08\n"
        "  wave_threshold: 3\n"
        "smoothing:\n"
        "  seed: origin\n"
        "screen:\n"
        "  width: 1920\n"
        "  height: 1080\n"
        "unknown_section:\n"
        "  foo: bar\n"
    )

    config = load_config(path)

    assert config.gestures.pinch_threshold == 0.08
    assert config.gestures.swipe_threshold == 0.1
    assert config.smoothing.seed == "origin"
    assert (config.screen.width, config.screen.height) == (1920, 1080)
    assert config.dispatch.scroll_delta == 50


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == Config()


def test_section_must_be_a_mapping():
    with pytest.raises(ValueError):
        config_from_dict({"gestures": [1, 2, 3]})


def test_project_config_file_loads():
    config = load_config()
    assert config.camera.width == 1280
    assert config.mediapipe.min_detection_confidence == 0.7
