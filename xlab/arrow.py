"""Geometry of an arrow: a five-segment connector between two diagram items.

The arrow leaves the right edge of its start item and ends at the left edge
of its end item. When the end item lies to the right (zone 1) the connector
steps forward; when it lies behind the start item at a similar height
(zone 2) it loops above or below both items.
"""

from __future__ import annotations

import math

from xlab.diagramitem import DiagramItem, Point, Rect

_PI = 3.14
_ARROW_SIZE = 20.0
_PEN_WIDTH = 2.0
_MIN_RUN = 30.0
_LABEL_RAISE = 35.0

Segment = tuple[Point, Point]


def _scene_rect(item: DiagramItem) -> Rect:
    rect = item.bounding_rect()
    return Rect(item.pos.x + rect.x, item.pos.y + rect.y, rect.width, rect.height)


def _overlap(a: Rect, b: Rect) -> bool:
    return a.x <= b.right and b.x <= a.right and a.y <= b.bottom and b.y <= a.bottom


class Arrow:
    """A named connector drawn from ``start_item`` to ``end_item``."""

    def __init__(self, start_item: DiagramItem, end_item: DiagramItem, name: str) -> None:
        self.start_item = start_item
        self.end_item = end_item
        self.name = name
        self.color = "black"
        origin = Point(0, 0)
        self.line: Segment = (origin, origin)
        self.parts: list[Segment] = [(origin, origin) for _ in range(5)]
        self.text_pos = origin
        self._head: list[Point] = []

    def is_zone2(self) -> bool:
        """Tell whether the end item lies behind the start item at a similar height."""
        start_rect = self.start_item.bounding_rect()
        ydelta = abs(self.start_item.pos.y - self.end_item.pos.y) - start_rect.height
        xdelta = self.end_item.pos.x - self.start_item.pos.x + start_rect.width / 2
        return ydelta < 60 * 2 and xdelta < start_rect.width / 2

    def _chain(self, origin: Point, moves: list[tuple[float, float]]) -> None:
        parts = []
        here = origin
        for dx, dy in moves:
            there = Point(here.x + dx, here.y + dy)
            parts.append((here, there))
            here = there
        self.parts = parts

    def zone1(self, other_point: Point) -> None:
        """Lay out the forward connector starting at ``other_point``."""
        start, end = self.start_item, self.end_item
        part3_width = 0.0
        part1_delta = (
            end.pos.x
            - start.pos.x
            - end.bounding_rect().width / 2
            - start.bounding_rect().width / 2
        ) / 2
        if part1_delta < _MIN_RUN:
            part3_width = (_MIN_RUN - part1_delta) * 2
            part1_delta = _MIN_RUN
        part2_delta = (end.pos.y - start.pos.y) / 2
        self._chain(
            other_point,
            [
                (part1_delta, 0),
                (0, part2_delta),
                (-part3_width, 0),
                (0, part2_delta),
                (part1_delta, 0),
            ],
        )

    def zone2(self, other_point: Point) -> None:
        """Lay out the looping connector starting at ``other_point``."""
        start, end = self.start_item, self.end_item
        start_rect = start.bounding_rect()
        end_rect = end.bounding_rect()
        if start.pos.y > end.pos.y:
            part2_delta = end_rect.height / 2 + _MIN_RUN + (start.pos.y - end.pos.y)
            part4_delta = start_rect.height / 2 + _MIN_RUN
        else:
            part2_delta = -(end_rect.height / 2 + _MIN_RUN + (end.pos.y - start.pos.y))
            part4_delta = -(end_rect.height / 2 + _MIN_RUN)
        part3_width = (
            _MIN_RUN
            + start_rect.width / 2
            + (start.pos.x - end.pos.x)
            + _MIN_RUN
            + end_rect.width / 2
        )
        self._chain(
            other_point,
            [
                (_MIN_RUN, 0),
                (0, -part2_delta),
                (-part3_width, 0),
                (0, part4_delta),
                (_MIN_RUN, 0),
            ],
        )

    def update(self) -> bool:
        """Recompute segments, arrowhead and label.

        Nothing changes while the two items' bounding rectangles overlap;
        returns whether the geometry was recomputed.
        """
        if _overlap(_scene_rect(self.start_item), _scene_rect(self.end_item)):
            return False
        start, end = self.start_item, self.end_item
        entry = Point(end.pos.x - end.bounding_rect().width / 2, end.pos.y)
        exit_point = Point(start.pos.x + start.bounding_rect().width / 2, start.pos.y)
        self.line = (exit_point, entry)

        if self.is_zone2():
            self.zone2(exit_point)
            label_origin, label_end = self.parts[2]
            self.text_pos = Point(
                label_origin.x + (label_end.x - label_origin.x) / 2,
                label_origin.y - _LABEL_RAISE,
            )
        else:
            self.zone1(exit_point)
            self.text_pos = Point(
                (start.pos.x + end.pos.x) / 2, (start.pos.y + end.pos.y) / 2
            )

        angle = _PI
        if entry.y - exit_point.y >= 0:
            angle = _PI * 2 - angle
        tip = entry
        self._head = [
            tip,
            Point(
                tip.x + math.sin(angle + _PI / 3) * _ARROW_SIZE,
                tip.y + math.cos(angle + _PI / 3) * _ARROW_SIZE,
            ),
            Point(
                tip.x + math.sin(angle + _PI - _PI / 3) * _ARROW_SIZE,
                tip.y + math.cos(angle + _PI - _PI / 3) * _ARROW_SIZE,
            ),
        ]
        return True

    def bounding_rect(self) -> Rect:
        """Rectangle spanned by the main line, grown by a generous margin."""
        extra = (_PEN_WIDTH + 400) / 2
        p1, p2 = self.line
        left, right = sorted((p1.x, p2.x))
        top, bottom = sorted((p1.y, p2.y))
        return Rect(
            left - extra, top - extra, right - left + 2 * extra, bottom - top + 2 * extra
        )

    def arrow_head(self) -> list[Point]:
        """The arrowhead triangle, tip first; empty before the first update."""
        return list(self._head)