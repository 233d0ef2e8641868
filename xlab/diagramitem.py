"""Geometry and bookkeeping of a block's figure on the diagram canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DiagramType(Enum):
    """Shapes a block can be drawn with."""

    STEP = 0
    CONDITIONAL = 1
    START_END = 2
    IO = 3
    TRIANGLE = 4
    SQUARE = 5


@dataclass(frozen=True)
class Point:
    """A point in item or scene coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def _arc(
    x: float, y: float, w: float, h: float, start: float, sweep: float, steps: int = 8
) -> list[Point]:
    """Sample an elliptical arc; angles in degrees, counter-clockwise, y down."""
    cx, cy = x + w / 2, y + h / 2
    rx, ry = w / 2, h / 2
    points = []
    for i in range(steps + 1):
        angle = math.radians(start + sweep * i / steps)
        points.append(
            Point(round(cx + rx * math.cos(angle), 9), round(cy - ry * math.sin(angle), 9))
        )
    return points


def _start_end_polygon() -> list[Point]:
    points = [Point(200, 50)]
    points += _arc(150, 0, 50, 50, 0, 90)
    points += _arc(50, 0, 50, 50, 90, 90)
    points += _arc(50, 50, 50, 50, 180, 90)
    points += _arc(150, 50, 50, 50, 270, 90)
    points.append(Point(200, 25))
    points.append(points[0])
    return points


def polygon_for(diagram_type: DiagramType) -> list[Point]:
    """Return the closed outline drawn for a diagram type."""
    if diagram_type is DiagramType.START_END:
        return _start_end_polygon()
    if diagram_type in (DiagramType.CONDITIONAL, DiagramType.TRIANGLE):
        coords = [(-40, -50), (-40, 50), (40, 0), (-40, -50)]
    elif diagram_type in (DiagramType.STEP, DiagramType.SQUARE):
        coords = [(-80, -40), (80, -40), (80, 40), (-80, 40), (-80, -40)]
    else:
        coords = [(-120, -80), (-70, 80), (120, 80), (70, -80), (-120, -80)]
    return [Point(x, y) for x, y in coords]


@dataclass(eq=False)
class DiagramItem:
    """A block's figure: its shape, position and the line paths touching it."""

    block_type: str
    name: str
    diagram_type: DiagramType
    pos: Point = Point(0, 0)
    polygon: list[Point] = field(init=False)
    line_paths_in: list[Any] = field(default_factory=list, init=False)
    line_paths_out: list[Any] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.polygon = polygon_for(self.diagram_type)

    def bounding_rect(self) -> Rect:
        """Bounding rectangle of the outline, in item coordinates."""
        xs = [p.x for p in self.polygon]
        ys = [p.y for p in self.polygon]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def display_type(self) -> str:
        """The block type as labelled on the figure: first letter upper case."""
        if not self.block_type:
            return ""
        return self.block_type[0].upper() + self.block_type[1:]

    def add_line_path_in(self, path: Any) -> None:
        self.line_paths_in.append(path)

    def add_line_path_out(self, path: Any) -> None:
        self.line_paths_out.append(path)

    def remove_line_path(self, path: Any) -> None:
        """Forget every reference to ``path``, incoming or outgoing."""
        self.line_paths_in = [p for p in self.line_paths_in if p is not path]
        self.line_paths_out = [p for p in self.line_paths_out if p is not path]

    def _in_index(self, path: Any) -> int:
        for index, candidate in enumerate(self.line_paths_in):
            if candidate is path:
                return index
        return -1

    def entry_height(self, path: Any) -> float:
        """Height at which the incoming ``path`` reaches this block."""
        index = self._in_index(path)
        y = self.pos.y
        count = len(self.line_paths_in)
        if count == 1:
            return y
        if count == 2:
            return y + 15 - 30 * index
        if count == 3:
            return y + 25 - 25 * index
        if count == 4:
            return y + 30 - 20 * index
        base = y + 40
        height = base - 20 * index
        if count > 5 and height < base - 80:
            height = base - 80
        return height