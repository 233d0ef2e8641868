import pytest

from xlab.diagramitem import (
    DiagramItem,
    DiagramType,
    Point,
    Rect,
    polygon_for,
)


@pytest.mark.parametrize("diagram_type", list(DiagramType))
def test_polygon_is_closed(diagram_type):
    polygon = polygon_for(diagram_type)
    assert polygon[0] == polygon[-1]
    assert len(polygon) >= 4


def test_square_polygon_matches_source_coordinates():
    assert polygon_for(DiagramType.SQUARE) == [
        Point(-80, -40),
        Point(80, -40),
        Point(80, 40),
        Point(-80, 40),
        Point(-80, -40),
    ]
    assert polygon_for(DiagramType.STEP) == polygon_for(DiagramType.SQUARE)


def test_triangle_polygon_matches_source_coordinates():
    assert polygon_for(DiagramType.TRIANGLE) == [
        Point(-40, -50),
        Point(-40, 50),
        Point(40, 0),
        Point(-40, -50),
    ]
    assert polygon_for(DiagramType.CONDITIONAL) == polygon_for(DiagramType.TRIANGLE)


def test_io_polygon_is_default_shape():
    assert polygon_for(DiagramType.IO)[1] == Point(-70, 80)


def test_start_end_polygon_stays_inside_its_arcs():
    polygon = polygon_for(DiagramType.START_END)
    assert all(50 - 1e-6 <= p.x <= 200 + 1e-6 for p in polygon)
    assert all(-1e-6 <= p.y <= 100 + 1e-6 for p in polygon)
    assert polygon[0] == Point(200, 50)


@pytest.mark.parametrize("diagram_type", list(DiagramType))
def test_bounding_rect_encloses_polygon(diagram_type):
    item = DiagramItem("gain", "gain1", diagram_type)
    rect = item.bounding_rect()
    for p in item.polygon:
        assert rect.x <= p.x <= rect.right
        assert rect.y <= p.y <= rect.bottom
    assert min(p.x for p in item.polygon) == rect.x
    assert max(p.y for p in item.polygon) == rect.bottom


def test_square_bounding_rect_is_centred():
    rect = DiagramItem("gain", "gain1", DiagramType.SQUARE).bounding_rect()
    assert rect == Rect(-80, -40, 80 - (-80), 40 - (-40))


def test_bounding_rect_ignores_position():
    a = DiagramItem("gain", "a", DiagramType.TRIANGLE)
    b = DiagramItem("gain", "b", DiagramType.TRIANGLE, Point(300, 400))
    assert a.bounding_rect() == b.bounding_rect()


def test_display_type_capitalises_first_letter():
    item = DiagramItem("signal_generator", "sg", DiagramType.SQUARE)
    assert item.display_type() == "Signal_generator"


def test_add_and_remove_line_paths():
    item = DiagramItem("gain", "gain1", DiagramType.SQUARE)
    p1, p2 = object(), object()
    item.add_line_path_in(p1)
    item.add_line_path_in(p1)
    item.add_line_path_out(p1)
    item.add_line_path_out(p2)
    item.remove_line_path(p1)
    assert item.line_paths_in == []
    assert item.line_paths_out == [p2]


def test_entry_height_single_path_is_position():
    item = DiagramItem("gain", "gain1", DiagramType.SQUARE, Point(10, 123))
    path = object()
    item.add_line_path_in(path)
    assert item.entry_height(path) == 123


@pytest.mark.parametrize("count,spacing", [(2, 30), (3, 25), (4, 20), (5, 20)])
def test_entry_heights_are_evenly_spaced(count, spacing):
    item = DiagramItem("sum", "sum1", DiagramType.SQUARE, Point(0, 200))
    paths = [object() for _ in range(count)]
    for p in paths:
        item.add_line_path_in(p)
    heights = [item.entry_height(p) for p in paths]
    for upper, lower in zip(heights, heights[1:]):
        assert upper - lower == spacing


def test_entry_height_clamped_with_many_paths():
    item = DiagramItem("sum", "sum1", DiagramType.SQUARE, Point(0, 200))
    paths = [object() for _ in range(7)]
    for p in paths:
        item.add_line_path_in(p)
    heights = [item.entry_height(p) for p in paths]
    assert heights[4] == heights[5] == heights[6]
    assert heights[0] - heights[4] == 80