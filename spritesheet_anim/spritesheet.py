"""Helpers that turn spritesheet layout queries into frame indices."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple, Union

logger = logging.getLogger(__name__)

RangeLike = Union[slice, range]


@dataclass(frozen=True)
class URect:
    """An axis-aligned rectangle with unsigned integer corners."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class TextureAtlasLayout:
    """The size of a texture atlas and the rectangle of each of its entries."""

    size: Tuple[int, int]
    textures: List[URect] = field(default_factory=list)

    @classmethod
    def from_grid(
        cls, tile_width: int, tile_height: int, columns: int, rows: int
    ) -> "TextureAtlasLayout":
        """Build a layout of equally sized tiles laid out row by row."""
        textures = [
            URect(
                x * tile_width,
                y * tile_height,
                (x + 1) * tile_width,
                (y + 1) * tile_height,
            )
            for y in range(rows)
            for x in range(columns)
        ]
        return cls((tile_width * columns, tile_height * rows), textures)


def _bounds(span: RangeLike, default_end: int) -> Tuple[int, int]:
    if isinstance(span, range):
        if span.step != 1:
            raise ValueError("ranges of frames must have a step of 1")
        start, end = span.start, span.stop
    elif isinstance(span, slice):
        if span.step not in (None, 1):
            raise ValueError("ranges of frames must have a step of 1")
        start = 0 if span.start is None else span.start
        end = default_end if span.stop is None else span.stop
    else:
        raise TypeError(f"expected a slice or a range, got {type(span).__name__}")
    if start < 0 or end < 0:
        raise ValueError("range bounds must not be negative")
    return start, end


@dataclass(frozen=True)
class Spritesheet:
    """A grid of frames with a number of columns and rows."""

    columns: int
    rows: int

    def __post_init__(self) -> None:
        if self.columns < 0 or self.rows < 0:
            raise ValueError("a spritesheet cannot have a negative size")

    def _warn(self, what: str) -> None:
        logger.warning(
            "%s exceeds the spritesheet size (%d, %d)", what, self.columns, self.rows
        )

    @property
    def _count(self) -> int:
        return self.columns * self.rows

    def all(self) -> List[int]:
        """Every frame of the spritesheet, row by row."""
        return list(range(self._count))

    def positions(self, positions: Iterable[Tuple[int, int]]) -> List[int]:
        """The frames at the given (x, y) positions; positions outside are skipped."""
        indices = []
        for x, y in positions:
            index = y * self.columns + x
            if index >= self._count:
                self._warn(f"position ({x}, {y})")
            else:
                indices.append(index)
        return indices

    def row(self, row: int) -> List[int]:
        """All the frames of one row."""
        if row >= self.rows:
            self._warn(f"row {row}")
            return []
        first = row * self.columns
        return list(range(first, first + self.columns))

    def row_partial(self, row: int, column_range: RangeLike) -> List[int]:
        """The frames of one row within a range of columns."""
        if row >= self.rows:
            self._warn(f"row {row}")
            return []
        first_column, end_column = _bounds(column_range, self.columns)
        if first_column >= self.columns or end_column > self.columns:
            self._warn(f"range {column_range!r}")
        base = row * self.columns
        first = base + min(first_column, max(self.columns - 1, 0))
        end = base + min(end_column, self.columns)
        return list(range(first, end))

    def column(self, column: int) -> List[int]:
        """All the frames of one column."""
        if column >= self.columns:
            self._warn(f"column {column}")
            return []
        return [column + row * self.columns for row in range(self.rows)]

    def column_partial(self, column: int, row_range: RangeLike) -> List[int]:
        """The frames of one column within a range of rows."""
        if column >= self.columns:
            self._warn(f"column {column}")
            return []
        first_row, end_row = _bounds(row_range, self.rows)
        if first_row >= self.rows or end_row > self.rows:
            self._warn(f"range {row_range!r}")
        first_row = min(first_row, max(self.rows - 1, 0))
        end_row = min(end_row, self.rows)
        return [row * self.columns + column for row in range(first_row, end_row)]

    def horizontal_strip(self, x: int, y: int, count: int) -> List[int]:
        """``count`` frames from (x, y) going right, wrapping to the next rows."""
        first = y * self.columns + x
        last = min(first + count, self._count)
        if last != first + count:
            self._warn(f"horizontal strip from {x}/{y} with {count} entries")
        return list(range(first, last))

    def vertical_strip(self, x: int, y: int, count: int) -> List[int]:
        """``count`` frames from (x, y) going down, wrapping to the next columns."""
        available = max((self.columns - (x + 1)) * self.rows + self.rows - y, 0)
        clamped = min(count, available)
        frames = [
            ((y + i) % self.rows) * self.columns + x + (y + i) // self.rows
            for i in range(clamped)
        ]
        if clamped != count:
            self._warn(f"vertical strip from {x}/{y} with {count} entries")
        return frames

    def atlas_layout(self, frame_width: int, frame_height: int) -> TextureAtlasLayout:
        """A texture atlas layout matching this spritesheet's grid."""
        return TextureAtlasLayout.from_grid(
            frame_width, frame_height, self.columns, self.rows
        )