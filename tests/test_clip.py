import pytest

from spritesheet_anim.clip import Clip, ClipId
from spritesheet_anim.easing import Easing, EasingVariety
from spritesheet_anim.events import AnimationMarkerId
from spritesheet_anim.spritesheet import Spritesheet


def test_clip_id_display():
    assert str(ClipId(4)) == "clip4"


def test_from_frames_accepts_any_iterable():
    clip = Clip.from_frames(i for i in (1, 2, 3))
    assert clip.frames == [1, 2, 3]


def test_from_frames_has_no_settings():
    clip = Clip.from_frames([4, 5, 6])
    assert clip.duration is None
    assert clip.repetitions is None
    assert clip.direction is None
    assert clip.easing is None
    assert clip.markers == {}


def test_from_spritesheet_row():
    clip = Clip.from_frames(Spritesheet(3, 2).row(1))
    assert clip.frames == [3, 4, 5]


def test_with_repetitions_leaves_original_untouched():
    clip = Clip.from_frames([1, 2])
    repeated = clip.with_repetitions(5)
    assert repeated.repetitions == 5
    assert clip.repetitions is None
    assert repeated.frames == clip.frames


def test_with_duration_and_direction_store_values():
    duration = object()
    direction = object()
    clip = Clip.from_frames([0]).with_duration(duration).with_direction(direction)
    assert clip.duration is duration
    assert clip.direction is direction


def test_with_easing():
    easing = Easing.ease_in(EasingVariety.QUADRATIC)
    clip = Clip.from_frames([7, 8, 9]).with_easing(easing)
    assert clip.easing == easing


def test_with_marker_accumulates_per_frame():
    first = AnimationMarkerId(1)
    second = AnimationMarkerId(2)
    clip = (
        Clip.from_frames([0, 1, 2])
        .with_marker(first, 0)
        .with_marker(second, 1)
        .with_marker(first, 2)
        .with_marker(second, 2)
    )
    assert clip.markers == {0: [first], 1: [second], 2: [first, second]}


def test_with_marker_does_not_share_marker_lists():
    marker = AnimationMarkerId(1)
    base = Clip.from_frames([0, 1]).with_marker(marker, 0)
    extended = base.with_marker(AnimationMarkerId(2), 0)
    assert base.markers == {0: [marker]}
    assert len(extended.markers[0]) == 2


def test_add_marker_mutates_and_returns_self():
    clip = Clip.from_frames([0, 1])
    marker = AnimationMarkerId(3)
    result = clip.add_marker(marker, 1)
    assert result is clip
    assert clip.markers == {1: [marker]}


def test_copies_do_not_share_frames():
    clip = Clip.from_frames([1, 2])
    copy = clip.with_repetitions(2)
    copy.frames.append(3)
    assert clip.frames == [1, 2]


def test_negative_repetitions_are_rejected():
    with pytest.raises(ValueError):
        Clip.from_frames([1]).with_repetitions(-1)


def test_negative_frames_are_rejected():
    with pytest.raises(ValueError):
        Clip.from_frames([0, -1])