import pytest
from gestures.config import GestureConfig
from gestures.detectors import (
    Action, DEFAULT_GESTURES, build_gestures, gesture_by_name,
    is_fist, is_pinching, is_pointing, is_swipe_down, is_swipe_up, pinch_distance,
)
from gestures.landmarks import Frame


def test_default_priority_order():
    assert [g.name for g in DEFAULT_GESTURES] == [
        "POINTING", "PINCH", "FIST", "SWIPE_UP", "SWIPE_DOWN",
    ]
    assert [g.action for g in DEFAULT_GESTURES] == [
        Action.MOVE, Action.CLICK, Action.RIGHT_CLICK, Action.SCROLL_UP, Action.SCROLL_DOWN,
    ]


def test_open_hand_matches_nothing(make_frame):
    frame = make_frame()
    assert not any(g.matches(frame, None) for g in DEFAULT_GESTURES)


def test_pointing(make_frame, pointing_overrides):
    assert is_pointing(make_frame(pointing_overrides))


def test_pointing_requires_extended_index(make_frame, pointing_overrides):
    overrides = dict(pointing_overrides)
    overrides[Frame.INDEX_TIP] = (0.5, 0.4)   # below the DIP joint
    assert not is_pointing(make_frame(overrides))


def test_pointing_requires_finger_spread(make_frame, pointing_overrides):
    overrides = dict(pointing_overrides)
    overrides[Frame.MIDDLE_TIP] = (0.58, 0.3)
    assert not is_pointing(make_frame(overrides))

    overrides = dict(pointing_overrides)
    overrides[Frame.THUMB_TIP] = (0.4, 0.5)
    assert not is_pointing(make_frame(overrides))


def test_pinch_threshold_is_strict(make_frame):
    at_threshold = make_frame({Frame.INDEX_TIP: (0.0, 0.3), Frame.THUMB_TIP: (0.05, 0.3)})
    just_under = make_frame({Frame.INDEX_TIP: (0.0, 0.3), Frame.THUMB_TIP: (0.049, 0.3)})

    assert pinch_distance(at_threshold) == 0.05
    assert not is_pinching(at_threshold)
    assert is_pinching(just_under)


def test_pinch_uses_configured_threshold(make_frame):
    frame = make_frame({Frame.INDEX_TIP: (0.0, 0.3), Frame.THUMB_TIP: (0.08, 0.3)})
    pinch = gesture_by_name("PINCH", build_gestures(GestureConfig(pinch_threshold=0.1)))

    assert not gesture_by_name("PINCH").matches(frame)
    assert pinch.matches(frame)


def test_fist(make_frame, fist_overrides):
    assert is_fist(make_frame(fist_overrides))


@pytest.mark.parametrize("tip", [Frame.THUMB_TIP, Frame.INDEX_TIP, Frame.MIDDLE_TIP,
                                 Frame.RING_TIP, Frame.PINKY_TIP])
def test_fist_requires_every_finger_folded(make_frame, fist_overrides, tip):
    overrides = dict(fist_overrides)
    x, _ = overrides[tip]
    overrides[tip] = (x, 0.5)   # above its base at 0.6
    assert not is_fist(make_frame(overrides))


def test_fist_accepts_tip_level_with_base(make_frame, fist_overrides):
    overrides = {tip: (x, 0.6) for tip, (x, _) in fist_overrides.items()}
    assert is_fist(make_frame(overrides))


@pytest.mark.parametrize("wrist_y", [0.0, 0.35, 0.5, 1.0])
def test_swipes_never_match_without_previous_frame(make_frame, wrist_y):
    frame = make_frame(wrist_y=wrist_y)
    assert not is_swipe_up(frame, None)
    assert not is_swipe_down(frame, None)


def test_swipe_up_and_down(make_frame):
    previous = make_frame(wrist_y=0.5)

    assert is_swipe_up(make_frame(wrist_y=0.35), previous)
    assert not is_swipe_down(make_frame(wrist_y=0.35), previous)
    assert is_swipe_down(make_frame(wrist_y=0.65), previous)
    assert not is_swipe_up(make_frame(wrist_y=0.65), previous)

    # Small movements are ignored
    assert not is_swipe_up(make_frame(wrist_y=0.45), previous)
    assert not is_swipe_down(make_frame(wrist_y=0.55), previous)


def test_detectors_do_not_mutate_frames(make_frame, pinch_overrides):
    previous = make_frame(wrist_y=0.5)
    current = make_frame(pinch_overrides, wrist_y=0.3)
    snapshot = (current.landmarks, previous.landmarks)

    for gesture in DEFAULT_GESTURES:
        gesture.matches(current, previous)

    assert (current.landmarks, previous.landmarks) == snapshot


def test_gesture_by_name_unknown():
    with pytest.raises(KeyError):
        gesture_by_name("WAVE")
