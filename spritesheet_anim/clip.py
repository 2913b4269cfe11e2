"""Clips: sequences of texture atlas frames with optional playback settings."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .easing import Easing
from .events import AnimationMarkerId


@dataclass(frozen=True)
class ClipId:
    """An opaque identifier that references a clip."""

    value: int

    def __str__(self) -> str:
        return f"clip{self.value}"


@dataclass
class Clip:
    """A sequence of atlas indices, the basic building block of animations.

    Duration, repetitions, direction and easing are optional; when left unset
    the animation playing the clip decides. Markers attached to frames emit
    ``MarkerHit`` events when those frames are played.
    """

    frames: List[int] = field(default_factory=list)
    duration: Optional[Any] = None
    repetitions: Optional[int] = None
    direction: Optional[Any] = None
    easing: Optional[Easing] = None
    markers: Dict[int, List[AnimationMarkerId]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.frames = list(self.frames)
        if any(frame < 0 for frame in self.frames):
            raise ValueError("frame indices must not be negative")
        if self.repetitions is not None and self.repetitions < 0:
            raise ValueError("repetitions must not be negative")

    @classmethod
    def from_frames(cls, frames: Iterable[int]) -> "Clip":
        """Create a clip from atlas indices."""
        return cls(frames=list(frames))

    def _copy(self, **changes: Any) -> "Clip":
        copied = dataclasses.replace(
            self,
            frames=list(self.frames),
            markers={index: list(ids) for index, ids in self.markers.items()},
        )
        for name, value in changes.items():
            setattr(copied, name, value)
        copied.__post_init__()
        return copied

    def with_marker(self, marker_id: AnimationMarkerId, frame_index: int) -> "Clip":
        """A copy of this clip with a marker added on a frame."""
        return self._copy().add_marker(marker_id, frame_index)

    def add_marker(self, marker_id: AnimationMarkerId, frame_index: int) -> "Clip":
        """Add a marker on a frame of this clip and return the clip."""
        self.markers.setdefault(frame_index, []).append(marker_id)
        return self

    def with_duration(self, duration: Any) -> "Clip":
        """A copy of this clip with the given duration."""
        return self._copy(duration=duration)

    def with_repetitions(self, repetitions: int) -> "Clip":
        """A copy of this clip with the given number of repetitions."""
        return self._copy(repetitions=repetitions)

    def with_direction(self, direction: Any) -> "Clip":
        """A copy of this clip with the given direction."""
        return self._copy(direction=direction)

    def with_easing(self, easing: Easing) -> "Clip":
        """A copy of this clip with the given easing."""
        return self._copy(easing=easing)