import dataclasses

import pytest

from spritesheet_anim.clip import ClipId
from spritesheet_anim.events import (
    AnimationEnd,
    AnimationMarkerId,
    AnimationRepetitionEnd,
    ClipEnd,
    ClipRepetitionEnd,
    MarkerHit,
)


def test_marker_id_display():
    assert str(AnimationMarkerId(7)) == "marker7"


def test_marker_ids_compare_by_value():
    assert AnimationMarkerId(3) == AnimationMarkerId(3)
    assert len({AnimationMarkerId(3), AnimationMarkerId(3), AnimationMarkerId(4)}) == 2


def test_events_are_hashable_and_deduplicated_in_sets():
    clip_id = ClipId(1)
    events = {
        ClipRepetitionEnd("sprite", "anim", clip_id, 0),
        ClipRepetitionEnd("sprite", "anim", clip_id, 0),
        ClipEnd("sprite", "anim", clip_id),
        AnimationRepetitionEnd("sprite", "anim", 0),
        AnimationEnd("sprite", "anim"),
    }
    assert len(events) == 4
    assert ClipEnd("sprite", "anim", clip_id) in events


def test_events_of_different_kinds_are_distinct():
    first = AnimationRepetitionEnd("sprite", "anim", 0)
    second = ClipRepetitionEnd("sprite", "anim", ClipId(0), 0)
    assert (first == second) is False
    assert len({first, second}) == 2


def test_marker_hit_fields_round_trip():
    marker = AnimationMarkerId(2)
    event = MarkerHit("sprite", marker, "anim", 1, ClipId(5), 3)
    assert event.marker_id == marker
    assert event.animation_repetition == 1
    assert event.clip_id == ClipId(5)
    assert event.clip_repetition == 3


def test_events_are_immutable():
    event = AnimationEnd("sprite", "anim")
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.animation_id = "other"
    assert event.animation_id == "anim"
    assert event == AnimationEnd("sprite", "anim")