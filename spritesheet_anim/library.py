"""The store that registers clips and markers and keeps their names."""

from __future__ import annotations

import itertools
from types import MappingProxyType
from typing import Dict, FrozenSet, Hashable, Mapping, Optional, Set, TypeVar

from .clip import Clip, ClipId
from .events import AnimationMarkerId

_Id = TypeVar("_Id", bound=Hashable)


class LibraryError(Exception):
    """Base class for errors raised by the animation library."""


class NameAlreadyTakenError(LibraryError):
    """The name given to a clip or marker is already in use."""

    def __init__(self, name: str) -> None:
        super().__init__(f"the name {name!r} is already taken")
        self.name = name


def _find_id(names: Mapping[_Id, str], name: str) -> Optional[_Id]:
    return next((key for key, value in names.items() if value == name), None)


def _assign_name(names: Dict[_Id, str], item_id: _Id, name: str) -> None:
    existing = _find_id(names, name)
    if existing is None:
        names[item_id] = name
    elif existing != item_id:
        raise NameAlreadyTakenError(name)


class AnimationLibrary:
    """The global store for clips and animation markers.

    Every identifier it hands out is unique, even after the item it refers to
    has been deregistered.
    """

    def __init__(self) -> None:
        self._clips: Dict[ClipId, Clip] = {}
        self._clip_names: Dict[ClipId, str] = {}
        self._markers: Set[AnimationMarkerId] = set()
        self._marker_names: Dict[AnimationMarkerId, str] = {}
        self._next_id = itertools.count()

    # Clips

    def register_clip(self, clip: Clip) -> ClipId:
        """Store a clip and return its new identifier."""
        clip_id = ClipId(next(self._next_id))
        self._clips[clip_id] = clip
        return clip_id

    def deregister_clip(self, clip_id: ClipId) -> None:
        """Remove a clip and its name; unknown identifiers are ignored."""
        self._clips.pop(clip_id, None)
        self._clip_names.pop(clip_id, None)

    def name_clip(self, clip_id: ClipId, name: str) -> None:
        """Give a clip a unique name, replacing any name it had.

        Raises NameAlreadyTakenError if another clip already has the name.
        """
        _assign_name(self._clip_names, clip_id, str(name))

    @property
    def clip_names(self) -> Mapping[ClipId, str]:
        """The names of all named clips."""
        return MappingProxyType(self._clip_names)

    def clip_with_name(self, name: str) -> Optional[ClipId]:
        """The identifier of the clip with this name, if any."""
        return _find_id(self._clip_names, name)

    def get_clip_name(self, clip_id: ClipId) -> Optional[str]:
        """The name of a clip, if it has one."""
        return self._clip_names.get(clip_id)

    def is_clip_name(self, clip_id: ClipId, name: str) -> bool:
        """Whether the clip has exactly this name."""
        return self._clip_names.get(clip_id) == name

    @property
    def clips(self) -> Mapping[ClipId, Clip]:
        """All the registered clips."""
        return MappingProxyType(self._clips)

    def get_clip(self, clip_id: ClipId) -> Clip:
        """A registered clip; raises KeyError if it is not registered."""
        try:
            return self._clips[clip_id]
        except KeyError:
            raise KeyError(f"no clip registered as {clip_id}") from None

    # Markers

    def new_marker(self) -> AnimationMarkerId:
        """Create a marker and return its unique identifier."""
        marker_id = AnimationMarkerId(next(self._next_id))
        self._markers.add(marker_id)
        return marker_id

    def name_marker(self, marker_id: AnimationMarkerId, name: str) -> None:
        """Give a marker a unique name, replacing any name it had.

        Raises NameAlreadyTakenError if another marker already has the name.
        """
        _assign_name(self._marker_names, marker_id, str(name))

    @property
    def marker_names(self) -> Mapping[AnimationMarkerId, str]:
        """The names of all named markers."""
        return MappingProxyType(self._marker_names)

    def marker_with_name(self, name: str) -> Optional[AnimationMarkerId]:
        """The identifier of the marker with this name, if any."""
        return _find_id(self._marker_names, name)

    def get_marker_name(self, marker_id: AnimationMarkerId) -> Optional[str]:
        """The name of a marker, if it has one."""
        return self._marker_names.get(marker_id)

    def is_marker_name(self, marker_id: AnimationMarkerId, name: str) -> bool:
        """Whether the marker has exactly this name."""
        return self._marker_names.get(marker_id) == name

    @property
    def markers(self) -> FrozenSet[AnimationMarkerId]:
        """All the markers created so far."""
        return frozenset(self._markers)