"""Outline of a line path: the arrow-headed band drawn from one block to another.

A path leaves the right edge of its start block and ends with an arrowhead
on the left edge of its end block. When the end block lies to the right of
the start block (zone 1) the path runs forward in five segments. When it
lies behind it at a similar height (zone 2) the path loops above or below
both blocks. Every segment is drawn as a band ``line_thickness`` wide, so
the outline goes out along one side and comes back along the other.
"""

from __future__ import annotations

from typing import Optional

from xlab.diagramitem import DiagramItem, Point


class _Outline:
    """Builds a closed polygon from absolute and relative moves."""

    def __init__(self, x: float, y: float) -> None:
        self.points = [Point(x, y)]

    @property
    def current(self) -> Point:
        return self.points[-1]

    def line_to(self, x: float, y: float) -> None:
        self.points.append(Point(x, y))

    def line_by(self, dx: float, dy: float) -> None:
        here = self.current
        self.points.append(Point(here.x + dx, here.y + dy))

    def close(self) -> list[Point]:
        self.points.append(self.points[0])
        return self.points


class LinePath:
    """The drawn connection between two diagram items."""

    line_thickness = 4.0
    arrow_width = 15.0
    arrow_height = 10.0
    z_value = 1000.0

    def __init__(
        self, start_item: DiagramItem, end_item: DiagramItem, name: str
    ) -> None:
        self.start_item = start_item
        self.end_item = end_item
        self.name = name
        self.color = "white"
        self.selected = False
        self.path: list[Point] = []
        self.text_pos = Point(0, 0)

    @property
    def fill_color(self) -> str:
        """Colour the outline is filled with: black while selected."""
        return "black" if self.selected else self.color

    @property
    def tip(self) -> Optional[Point]:
        """Point of the arrowhead, once an outline has been built."""
        return self.path[7] if len(self.path) > 7 else None

    def start_point(self) -> Point:
        """Where the path leaves the start block: the middle of its right edge."""
        pos = self.start_item.pos
        return Point(pos.x + self.start_item.bounding_rect().width / 2, pos.y)

    def is_zone2(self) -> bool:
        """Tell whether the end block lies behind the start block at a similar height."""
        start_rect = self.start_item.bounding_rect()
        ydelta = abs(self.start_item.pos.y - self.end_item.pos.y) - start_rect.height
        xdelta = self.end_item.pos.x - self.start_item.pos.x + start_rect.width / 2
        return ydelta < 60 * 2 and xdelta < start_rect.width / 2

    def _arrowhead_and_return(
        self, outline: _Outline, line5_width1: float, line5_width2: float
    ) -> None:
        t = self.line_thickness
        aw = self.arrow_width
        ah = self.arrow_height
        outline.line_by(line5_width1 - aw, 0)
        outline.line_by(0, -ah)
        outline.line_by(aw, ah + t / 2)
        outline.line_by(-aw, ah + t / 2)
        outline.line_by(0, -ah)
        outline.line_by(-(line5_width2 - aw - t), 0)

    def zone1(self) -> Point:
        """Build the forward outline; return where the name label goes."""
        t = self.line_thickness
        start = self.start_point()
        startx = start.x
        starty = start.y - t / 2
        endx, endy = startx, start.y + t / 2

        edges_x = (
            self.end_item.pos.x
            - self.start_item.pos.x
            - self.end_item.bounding_rect().width / 2
            - self.start_item.bounding_rect().width / 2
        )
        centers_y = self.start_item.pos.y - self.end_item.entry_height(self)

        line3 = 0.0
        line1 = edges_x / 2
        if line1 < 30:
            line3 = (30 - line1) * 2
            line1 = 30.0

        if centers_y >= 0:
            l1w1 = line1
            l2w1 = max(centers_y / 2 - t, 0.0)
            l4w1 = centers_y / 2 + t
            if l4w1 <= 2 * t:
                l4w1 = centers_y
            l5w1 = line1
            l2w2 = centers_y / 2 + t
            if l2w2 <= 2 * t:
                l2w2 = centers_y
            l4w2 = max(centers_y / 2 - t, 0.0)
            l5w2 = line1
        else:
            l1w1 = line1 + t
            l2w1 = centers_y / 2 - t
            if l2w1 > -2 * t:
                l2w1 = centers_y
            l4w1 = centers_y / 2 + t
            if l4w1 >= 0:
                l4w1 = 0.0
            l5w1 = line1 - t
            l2w2 = centers_y / 2 + t
            if l2w2 >= 0:
                l2w2 = 0.0
            l4w2 = centers_y / 2 - t
            if l4w2 > -2 * t:
                l4w2 = centers_y
            l5w2 = line1 + t

        outline = _Outline(startx, starty)
        outline.line_to(startx + l1w1, starty)
        outline.line_by(0, -l2w1)
        outline.line_by(-line3, 0)
        label = outline.current
        outline.line_by(0, -l4w1)
        self._arrowhead_and_return(outline, l5w1, l5w2)
        outline.line_by(0, l4w2)
        outline.line_by(line3, 0)
        outline.line_by(0, l2w2)
        outline.line_to(endx, endy)
        self.path = outline.close()
        return label

    def zone2(self) -> Point:
        """Build the looping outline; return where the name label goes."""
        t = self.line_thickness
        start = self.start_point()
        startx = start.x
        starty = start.y - t / 2
        endx, endy = startx, start.y + t / 2

        start_rect = self.start_item.bounding_rect()
        end_rect = self.end_item.bounding_rect()
        centers_y = self.start_item.pos.y - self.end_item.entry_height(self)

        line1 = 30.0
        l5w1 = 30.0
        l3w1 = (
            30
            + start_rect.width / 2
            + (self.start_item.pos.x - self.end_item.pos.x)
            + 30
            + end_rect.width / 2
        )

        if centers_y >= 0:
            l2w1 = end_rect.height / 2 + 50 + (centers_y - t / 2)
            l4w1 = start_rect.height / 2 + 50
            l5w2 = l5w1 + 2 * t
            l4w2 = -(l4w1 + 2 * t)
            l3w2 = l3w1 + 2 * t
            l2w2 = -(l2w1 + 2 * t)
        else:
            l2w1 = -(end_rect.height / 2 + 50 - (centers_y - t / 2))
            l4w1 = -(start_rect.height / 2 + 50)
            l3w2 = l3w1 - 2 * t
            l5w2 = 30.0
            l4w2 = -l4w1 - 2 * t
            l2w2 = -l2w1 - 2 * t

        outline = _Outline(startx, starty)
        outline.line_to(startx + line1, starty)
        outline.line_by(0, -l2w1)
        outline.line_by(-l3w1, 0)
        label = outline.current
        outline.line_by(0, l4w1)
        self._arrowhead_and_return(outline, l5w1, l5w2)
        outline.line_by(0, l4w2)
        outline.line_by(l3w2, 0)
        outline.line_by(0, -l2w2)
        outline.line_to(endx, endy)
        self.path = outline.close()
        return label

    def update_position(self) -> None:
        """Rebuild the outline and move the name label to match."""
        if self.is_zone2():
            label = self.zone2()
            self.text_pos = Point(label.x + 8, label.y)
        else:
            self.text_pos = self.zone1()