"""The playback state of an animation attached to a sprite."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable


@dataclass
class AnimationProgress:
    """The current frame and repetition of an animation being played.

    ``frame`` is an absolute index within the whole animation and wraps
    around at each repetition.
    """

    frame: int = 0
    repetition: int = 0


@dataclass
class SpritesheetAnimation:
    """Plays a registered animation on a sprite."""

    animation_id: Hashable
    progress: AnimationProgress = field(default_factory=AnimationProgress)
    playing: bool = True
    speed_factor: float = 1.0

    @classmethod
    def from_id(cls, animation_id: Hashable) -> "SpritesheetAnimation":
        """Start playing an animation from its first frame."""
        return cls(animation_id)

    def switch(self, animation_id: Hashable) -> None:
        """Switch to another animation and restart from its beginning."""
        self.animation_id = animation_id
        self.reset()

    def reset(self) -> None:
        """Go back to the first frame of the first repetition."""
        self.progress.frame = 0
        self.progress.repetition = 0