from spritesheet_anim.spritesheet_animation import (
    AnimationProgress,
    SpritesheetAnimation,
)


def test_from_id_defaults():
    animation = SpritesheetAnimation.from_id("walk")
    assert animation.animation_id == "walk"
    assert animation.progress == AnimationProgress(frame=0, repetition=0)
    assert animation.playing is True
    assert animation.speed_factor == 1.0


def test_progress_is_not_shared_between_instances():
    first = SpritesheetAnimation.from_id("a")
    second = SpritesheetAnimation.from_id("b")
    first.progress.frame = 5
    assert second.progress.frame == 0


def test_reset_clears_progress():
    animation = SpritesheetAnimation.from_id("run")
    animation.progress.frame = 3
    animation.progress.repetition = 2
    animation.reset()
    assert animation.progress == AnimationProgress()
    assert animation.animation_id == "run"


def test_switch_changes_animation_and_resets():
    animation = SpritesheetAnimation.from_id("idle")
    animation.progress = AnimationProgress(frame=4, repetition=1)
    animation.playing = False
    animation.switch("jump")
    assert animation.animation_id == "jump"
    assert animation.progress == AnimationProgress()
    assert animation.playing is False


def test_setting_id_directly_keeps_progress():
    animation = SpritesheetAnimation.from_id("idle")
    animation.progress.frame = 2
    animation.animation_id = "idle variant"
    assert animation.progress.frame == 2
    assert animation.animation_id == "idle variant"