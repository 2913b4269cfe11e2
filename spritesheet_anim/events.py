"""Events emitted when an animation reaches a point of interest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Hashable, Union

if TYPE_CHECKING:
    from .clip import ClipId


@dataclass(frozen=True)
class AnimationMarkerId:
    """An opaque identifier that references an animation marker."""

    value: int

    def __str__(self) -> str:
        return f"marker{self.value}"


@dataclass(frozen=True)
class MarkerHit:
    """An animation marker has been hit."""

    entity: Hashable
    marker_id: AnimationMarkerId
    animation_id: Hashable
    animation_repetition: int
    clip_id: "ClipId"
    clip_repetition: int


@dataclass(frozen=True)
class ClipRepetitionEnd:
    """A repetition of a clip has ended."""

    entity: Hashable
    animation_id: Hashable
    clip_id: "ClipId"
    clip_repetition: int


@dataclass(frozen=True)
class ClipEnd:
    """A clip has ended, after its last repetition."""

    entity: Hashable
    animation_id: Hashable
    clip_id: "ClipId"


@dataclass(frozen=True)
class AnimationRepetitionEnd:
    """A repetition of an animation has ended."""

    entity: Hashable
    animation_id: Hashable
    animation_repetition: int


@dataclass(frozen=True)
class AnimationEnd:
    """An animation has ended, after its last repetition."""

    entity: Hashable
    animation_id: Hashable


AnimationEvent = Union[
    MarkerHit, ClipRepetitionEnd, ClipEnd, AnimationRepetitionEnd, AnimationEnd
]