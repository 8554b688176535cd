"""Tests for shapes, the drawing state machine and undo history."""

import ast
from pathlib import Path

import pytest

import shapepaint.types
from shapepaint import (
    Document,
    History,
    InvalidCanvasSize,
    Point,
    RgbColor,
    Shape,
    ShapeKind,
    ShapeStyle,
    UnknownTool,
    parse_canvas_size,
)
from shapepaint.constants import MAX_CANVAS_SIZE

BLUE = RgbColor(0, 0, 255)
RED = RgbColor(255, 0, 0)
PLAIN = ShapeStyle()


def drag(document, start, end, style=PLAIN):
    document.begin_stroke(Point(*start))
    document.update_stroke(Point(*end), style)
    return document.commit_stroke(style)


@pytest.fixture
def document():
    return Document(800, 600)


class TestDataClasses:
    def test_shape_kind_from_name(self):
        assert ShapeKind.from_name("Oval") is ShapeKind.OVAL
        assert ShapeKind.from_name(" polygon ") is ShapeKind.POLYGON
        with pytest.raises(UnknownTool):
            ShapeKind.from_name("Hexagon")

    def test_only_line_is_open(self):
        assert not ShapeKind.LINE.is_closed
        assert ShapeKind.RECTANGLE.is_closed
        assert ShapeKind.POLYGON.is_closed

    def test_rgb_color_hex(self):
        assert RgbColor.from_hex("#FF8000") == RgbColor(255, 128, 0)
        assert RgbColor.from_hex("#ff112233") == RgbColor(0x11, 0x22, 0x33)
        assert RgbColor(1, 2, 255).hex == "#0102ff"

    @pytest.mark.parametrize("value", ["", "#12", "#gg0000", "red"])
    def test_rgb_color_rejects_bad_hex(self, value):
        with pytest.raises(ValueError):
            RgbColor.from_hex(value)

    def test_rgb_color_channel_range(self):
        with pytest.raises(ValueError):
            RgbColor(256, 0, 0)

    def test_style_requires_positive_width(self):
        with pytest.raises(ValueError):
            ShapeStyle(stroke_width=0)

    def test_shapes_are_frozen(self):
        shape = Shape.between(ShapeKind.LINE, Point(0, 0), Point(1, 1), PLAIN)
        with pytest.raises(AttributeError):
            shape.end = Point(5, 5)

    @pytest.mark.parametrize(
        "p1, p2",
        [((10, 10), (20, 5)), ((0, 0), (100, 50)), ((7, 90), (3, 2)), ((4, 4), (4, 4))],
    )
    @pytest.mark.parametrize("kind", [ShapeKind.RECTANGLE, ShapeKind.OVAL])
    def test_bounds_ignore_drag_direction(self, kind, p1, p2):
        forward = Shape.between(kind, Point(*p1), Point(*p2), PLAIN)
        backward = Shape.between(kind, Point(*p2), Point(*p1), PLAIN)
        assert forward.bounds() == backward.bounds()

    def test_bounds_are_normalised(self):
        shape = Shape.between(ShapeKind.RECTANGLE, Point(10, 10), Point(20, 5), PLAIN)
        assert shape.bounds() == (10, 5, 10, 5)

    def test_polygon_cannot_be_built_between_points(self):
        with pytest.raises(ValueError):
            Shape.between(ShapeKind.POLYGON, Point(0, 0), Point(1, 1), PLAIN)

    def test_data_layer_does_not_import_qt(self):
        tree = ast.parse(Path(shapepaint.types.__file__).read_text(encoding="utf-8"))
        modules = {node.module for node in ast.walk(tree) if isinstance(node, ast.ImportFrom)}
        modules |= {alias.name for node in ast.walk(tree) if isinstance(node, ast.Import) for alias in node.names}
        assert not any(name and name.startswith("PySide6") for name in modules)


class TestCanvasSize:
    def test_parse_valid(self):
        assert parse_canvas_size("800", " 600 ") == (800, 600)
        assert parse_canvas_size(1024, 768) == (1024, 768)

    @pytest.mark.parametrize("bad", ["abc", "0", "-5", "12.5", ""])
    def test_parse_invalid(self, bad):
        with pytest.raises(InvalidCanvasSize) as info:
            parse_canvas_size(bad, "600")
        assert info.value.text == bad.strip()

    def test_invalid_size_is_value_error(self):
        with pytest.raises(ValueError):
            parse_canvas_size("800", "tall")

    def test_size_limit(self):
        assert parse_canvas_size(MAX_CANVAS_SIZE, MAX_CANVAS_SIZE) == (MAX_CANVAS_SIZE, MAX_CANVAS_SIZE)
        with pytest.raises(InvalidCanvasSize) as info:
            parse_canvas_size("800", str(MAX_CANVAS_SIZE + 1))
        assert info.value.limit == MAX_CANVAS_SIZE
        assert str(MAX_CANVAS_SIZE) in str(info.value)


class TestStrokes:
    def test_line_scenario(self, document):
        drag(document, (0, 0), (100, 50))
        assert document.committed == (Shape.between(ShapeKind.LINE, Point(0, 0), Point(100, 50), PLAIN),)

    def test_begin_outside_canvas_is_ignored(self, document):
        assert document.begin_stroke(Point(-1, 5)) is False
        assert document.begin_stroke(Point(5, 601)) is False
        assert document.start is None
        assert document.commit_stroke(PLAIN) is None
        assert document.committed == ()

    def test_begin_on_canvas_edge_is_accepted(self, document):
        assert document.begin_stroke(Point(800, 600)) is True
        assert document.start == Point(800, 600)

    def test_update_clamps_to_canvas(self, document):
        document.begin_stroke(Point(10, 10))
        document.update_stroke(Point(1000, -20), PLAIN)
        assert document.preview.end == Point(800, 0)
        assert document.committed == ()

    def test_update_without_begin_is_ignored(self, document):
        assert document.update_stroke(Point(10, 10), PLAIN) is False
        assert document.preview is None

    def test_commit_without_start_is_noop(self, document):
        assert document.commit_stroke(PLAIN) is None
        assert document.committed == ()
        assert len(document.history) == 0

    def test_commit_without_drag_is_degenerate(self, document):
        document.switch_tool(ShapeKind.OVAL)
        document.begin_stroke(Point(30, 40))
        shape = document.commit_stroke(PLAIN)
        assert shape.start == shape.end == Point(30, 40)
        assert document.committed == (shape,)

    def test_commit_clears_gesture(self, document):
        document.switch_tool(ShapeKind.RECTANGLE)
        style = ShapeStyle(BLUE, RED, 2)
        shape = drag(document, (10, 10), (20, 5), style)
        assert shape.kind is ShapeKind.RECTANGLE
        assert shape.style == style
        assert document.preview is None
        assert document.start is None
        assert not document.is_drawing

    def test_preview_replaced_on_every_update(self, document):
        document.begin_stroke(Point(0, 0))
        document.update_stroke(Point(10, 10), PLAIN)
        first = document.preview
        document.update_stroke(Point(20, 30), PLAIN)
        assert document.preview is not first
        assert first.end == Point(10, 10)
        assert document.preview.end == Point(20, 30)

    def test_resize_keeps_committed_shapes(self, document):
        drag(document, (700, 500), (790, 590))
        before = document.committed
        document.resize_canvas(100, 100)
        assert document.committed == before
        assert (document.canvas_width, document.canvas_height) == (100, 100)


class TestPolygons:
    @pytest.fixture
    def polygon_document(self, document):
        document.switch_tool(ShapeKind.POLYGON)
        return document

    def test_clicks_collect_vertices(self, polygon_document):
        polygon_document.begin_stroke(Point(1, 2))
        polygon_document.begin_stroke(Point(3, 4))
        assert polygon_document.pending_vertices == (Point(1, 2), Point(3, 4))
        assert not polygon_document.is_drawing
        assert polygon_document.preview is None

    def test_outside_click_adds_no_vertex(self, polygon_document):
        polygon_document.begin_stroke(Point(-3, 4))
        assert polygon_document.pending_vertices == ()

    def test_drag_gestures_do_nothing(self, polygon_document):
        polygon_document.begin_stroke(Point(1, 2))
        assert polygon_document.update_stroke(Point(50, 50), PLAIN) is False
        assert polygon_document.commit_stroke(PLAIN) is None
        assert polygon_document.committed == ()

    def test_two_vertices_is_noop(self, polygon_document):
        polygon_document.begin_stroke(Point(1, 2))
        polygon_document.begin_stroke(Point(3, 4))
        assert polygon_document.finish_polygon(PLAIN) is None
        assert polygon_document.committed == ()
        assert len(polygon_document.pending_vertices) == 2

    def test_three_vertices_commit_in_order(self, polygon_document):
        points = [Point(1, 2), Point(9, 4), Point(5, 8)]
        for pt in points:
            polygon_document.begin_stroke(pt)
        shape = polygon_document.finish_polygon(PLAIN)
        assert polygon_document.committed == (shape,)
        assert shape.kind is ShapeKind.POLYGON
        assert shape.vertices == tuple(points)
        assert polygon_document.pending_vertices == ()
        assert len(polygon_document.history) == 1

    def test_switch_tool_abandons_vertices(self, polygon_document):
        polygon_document.begin_stroke(Point(1, 2))
        polygon_document.switch_tool(ShapeKind.POLYGON)
        assert polygon_document.pending_vertices == ()

    def test_switch_tool_abandons_preview(self, document):
        document.begin_stroke(Point(1, 2))
        document.update_stroke(Point(40, 40), PLAIN)
        document.switch_tool(ShapeKind.OVAL)
        assert document.preview is None
        assert document.start is None
        assert document.commit_stroke(PLAIN) is None


class TestHistory:
    def test_snapshots_are_value_copies(self):
        history = History()
        shapes = [Shape.between(ShapeKind.LINE, Point(0, 0), Point(1, 1), PLAIN)]
        history.commit(shapes)
        shapes.append(Shape.between(ShapeKind.LINE, Point(2, 2), Point(3, 3), PLAIN))
        assert len(history.top()) == 1

    def test_undo_on_empty_history(self):
        history = History()
        assert history.undo() == ()
        assert len(history) == 0

    def test_undo_returns_new_top(self):
        history = History()
        history.commit(["a"])
        history.commit(["a", "b"])
        assert history.undo() == ("a",)
        assert history.undo() == ()
        assert not history

    def test_top_matches_committed_after_every_commit(self, document):
        for i in range(5):
            drag(document, (i, i), (i + 10, i + 10))
            assert document.history.top() == document.committed
            assert len(document.history) == i + 1

    @pytest.mark.parametrize("commits", [1, 2, 5])
    def test_undo_inverse(self, document, commits):
        states = [document.committed]
        for i in range(commits):
            drag(document, (i, 0), (i + 20, 30))
            states.append(document.committed)
        assert document.undo() is True
        assert document.committed == states[commits - 1]

    def test_undo_with_empty_history_is_noop(self, document):
        assert document.undo() is False
        assert document.committed == ()

    def test_undo_then_commit_discards_undone_shape(self, document):
        first = drag(document, (0, 0), (10, 10))
        drag(document, (5, 5), (50, 50))
        document.undo()
        third = drag(document, (100, 100), (200, 150))
        assert document.committed == (first, third)
        assert len(document.history) == 2

    def test_undo_everything(self, document):
        drag(document, (0, 0), (10, 10))
        drag(document, (0, 0), (20, 20))
        document.undo()
        document.undo()
        assert document.committed == ()
        assert document.undo() is False

    def test_clear_resets_history(self, document):
        drag(document, (0, 0), (10, 10))
        document.clear()
        assert document.committed == ()
        assert len(document.history) == 0
        assert document.undo() is False
