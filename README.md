# spritesheet_anim

Building blocks for animating sprites that are backed by spritesheets:

- `spritesheet_anim.spritesheet`: `Spritesheet` selects frame indices from a
  grid of frames (the whole sheet, rows, columns, partial rows and columns,
  strips that wrap, arbitrary positions) and builds a `TextureAtlasLayout`
  made of `URect` frame rectangles.
- `spritesheet_anim.clip`: `Clip` is a sequence of frame indices with
  optional repetitions, direction, duration, easing and markers; `ClipId`
  identifies a registered clip.
- `spritesheet_anim.easing`: `Easing` maps progress in `[0, 1]` to eased
  progress, linear or with in, out and in-out variants (`EasingKind`) of
  several `EasingVariety` curves.
- `spritesheet_anim.library`: `AnimationLibrary` registers clips, creates
  markers and associates unique names with them.
- `spritesheet_anim.spritesheet_animation`: `SpritesheetAnimation` and
  `AnimationProgress` hold the playback state of one animated sprite.
- `spritesheet_anim.events`: `AnimationMarkerId` and the event records
  `MarkerHit`, `ClipRepetitionEnd`, `ClipEnd`, `AnimationRepetitionEnd` and
  `AnimationEnd`.

## Installation

```
pip install spritesheet_anim
```

The package has no dependencies outside the standard library.

## Selecting frames

```python
from spritesheet_anim.spritesheet import Spritesheet

# A spritesheet with 3 columns and 2 rows:
#   A B C
#   D E F
sheet = Spritesheet(3, 2)

sheet.all()                        # [0, 1, 2, 3, 4, 5]
sheet.row(1)                       # [3, 4, 5]   D E F
sheet.column(1)                    # [1, 4]      B E
sheet.row_partial(0, slice(1, None))     # [1, 2]   B C
sheet.column_partial(2, range(0, 1))     # [2]      C
sheet.horizontal_strip(2, 0, 3)    # [2, 3, 4]   C D E
sheet.vertical_strip(1, 0, 3)      # [1, 4, 2]   B E C
sheet.positions([(1, 0), (0, 1)])  # [1, 3]      B D

layout = sheet.atlas_layout(96, 96)
layout.size          # (288, 192)
layout.textures[4]   # URect(min_x=96, min_y=96, max_x=192, max_y=192)
```

Partial rows and columns take a `slice` or a `range` with a step of 1; a
`slice` with no start or stop runs from the first or to the last frame.
Queries that reach past the edge of the sheet are cut down to it (rows,
columns and positions that lie outside are left out entirely) and a warning
is logged through the `logging` module.

## Clips, markers and names

```python
from spritesheet_anim.clip import Clip
from spritesheet_anim.library import AnimationLibrary, NameAlreadyTakenError
from spritesheet_anim.spritesheet import Spritesheet

library = AnimationLibrary()
sheet = Spritesheet(8, 4)

shoot = library.new_marker()
library.name_marker(shoot, "bullet goes out")

clip = Clip.from_frames(sheet.row(3)).with_repetitions(5).with_marker(shoot, 3)
clip_id = library.register_clip(clip)

library.name_clip(clip_id, "shoot")
assert library.clip_with_name("shoot") == clip_id
assert library.is_clip_name(clip_id, "shoot")
assert library.get_clip_name(clip_id) == "shoot"

other_id = library.register_clip(Clip.from_frames([0, 1, 2]))
try:
    library.name_clip(other_id, "shoot")
except NameAlreadyTakenError:
    pass  # names are unique

library.deregister_clip(clip_id)
assert library.clip_with_name("shoot") is None
```

The `with_*` methods of `Clip` return modified copies; `add_marker` changes
the clip in place and returns it. Naming an item again replaces its old
name; giving it the name it already has does nothing. `NameAlreadyTakenError`
derives from `LibraryError`. `get_clip` raises `KeyError` for an identifier
that is not registered. `clips`, `clip_names`, `markers` and `marker_names`
are read-only views. Identifiers handed out by the library are never reused,
even after deregistration.

## Easing

```python
from spritesheet_anim.easing import Easing, EasingVariety

Easing.linear().get(0.25)                          # 0.25
Easing.ease_in(EasingVariety.QUADRATIC).get(0.5)   # 0.25
Easing.ease_out(EasingVariety.QUADRATIC).get(2.0)  # 1.0 (input is clamped)
```

The varieties are quadratic, cubic, quartic, quintic, exponential, circular
and sine. `Easing()` is linear. A linear easing given a variety, or a
non-linear one without a variety, raises `ValueError`.

## Playback state

`SpritesheetAnimation.from_id(animation_id)` creates playback state that
starts at frame 0 of repetition 0, playing, at speed factor 1.
`switch(animation_id)` changes the animation and restarts its progress, and
`reset()` restarts the current one. `playing` and `speed_factor` are plain
attributes.

## What this package does not do

There is no animation type that composes clips, and no player that advances
time, updates `SpritesheetAnimation.progress` or emits the event records:
the events are data only, to be built and consumed by your own code. A
clip's `duration` and `direction` are stored as given, without a type of
their own. Nothing is rendered.

## Running the tests

```
pip install -e ".[test]"
pytest
```