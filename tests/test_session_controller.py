"""Tests for the input session state machine and its export ordering."""

import numpy as np
import pytest
from PyQt6.QtCore import QRectF

from inkover.config import Config
from inkover.controllers.session_controller import AnnotationSession
from inkover.core.base_image import BaseImage, BaseImageError
from inkover.core.pointer_events import MousePointer, TouchPointer
from inkover.core.stroke_model import Point
from inkover.rendering.compositor import composite_strokes
from inkover.utils.image_utils import qimage_to_array

# 1000x600 raster displayed at half size
SURFACE = QRectF(0, 0, 500, 300)


def _draw(session, client_points, surface=SURFACE):
    """Press, drag through client_points, release."""
    first, *rest = client_points
    session.pointer_down(MousePointer(*first), surface)
    for point in rest:
        session.pointer_move(MousePointer(*point), surface)
    session.pointer_up()


def _expected(session):
    base = session.base_image.to_qimage()
    return qimage_to_array(composite_strokes(base, session.history.strokes))


class TestStateMachine:

    def test_down_move_up(self, session):
        assert session.pointer_down(MousePointer(5, 5), SURFACE)
        assert session.is_drawing

        assert session.pointer_move(MousePointer(25, 25), SURFACE)
        assert session.pointer_up()

        assert not session.is_drawing
        assert session.history.strokes[0].points == [Point(10.0, 10.0), Point(50.0, 50.0)]

    def test_stroke_uses_current_color_and_width(self, session):
        session.set_color("#3b82f6")
        session.set_brush_width(24)
        _draw(session, [(1, 1), (2, 2)])

        stroke = session.history.strokes[0]
        assert (stroke.color, stroke.brush_width) == ("#3b82f6", 24.0)

    def test_drawing_signals_bracket_stroke(self, session, recorder):
        started, finished = recorder(), recorder()
        session.drawing_started.connect(started)
        session.drawing_finished.connect(finished)

        session.pointer_down(MousePointer(5, 5), SURFACE)
        assert (len(started.calls), len(finished.calls)) == (1, 0)

        session.pointer_move(MousePointer(25, 25), SURFACE)
        session.pointer_up()
        assert (len(started.calls), len(finished.calls)) == (1, 1)

        session.pointer_down(MousePointer(5, 5), SURFACE)
        session.undo()
        assert (len(started.calls), len(finished.calls)) == (2, 2)

    def test_move_while_idle_ignored(self, session):
        assert not session.pointer_move(MousePointer(10, 10), SURFACE)
        assert session.history.is_empty

    def test_leave_ends_stroke_like_up(self, session, recorder):
        results = recorder()
        session.annotation_changed.connect(results)

        session.pointer_down(MousePointer(5, 5), SURFACE)
        session.pointer_move(MousePointer(40, 40), SURFACE)
        assert session.pointer_leave()

        assert not session.is_drawing
        assert session.history.active_stroke is None
        assert len(session.history) == 1
        assert results.last is not None

    def test_up_while_idle_does_not_export(self, session, recorder):
        results = recorder()
        session.annotation_changed.connect(results)

        assert not session.pointer_up()
        assert not session.pointer_leave()
        assert results.calls == []

    def test_second_down_while_drawing_ignored(self, session):
        session.pointer_down(MousePointer(5, 5), SURFACE)
        assert not session.pointer_down(MousePointer(100, 100), SURFACE)
        assert len(session.history) == 1

    def test_tap_creates_single_point_stroke(self, session):
        _draw(session, [(50, 50)])
        assert session.history.strokes[0].points == [Point(100.0, 100.0)]

    def test_touch_input_uses_first_touch(self, session):
        session.pointer_down(TouchPointer(((10, 20), (400, 200))), SURFACE)
        session.pointer_move(TouchPointer(((30, 40),)), SURFACE)
        session.pointer_up()

        assert session.history.strokes[0].points == [Point(20.0, 40.0), Point(60.0, 80.0)]

    def test_empty_touch_dropped(self, session):
        assert not session.pointer_down(TouchPointer(()), SURFACE)
        assert not session.is_drawing
        assert session.history.is_empty

    def test_unready_surface_drops_events(self):
        session = AnnotationSession()
        assert not session.pointer_down(MousePointer(5, 5), SURFACE)
        assert not session.is_drawing
        assert session.history.is_empty

    def test_burst_of_moves_keeps_every_point(self, session):
        session.pointer_down(MousePointer(0, 0), SURFACE)
        for i in range(1, 501):
            session.pointer_move(MousePointer(i % 500, i % 300), SURFACE)
        session.pointer_up()

        assert len(session.history.strokes[0].points) == 501

    def test_undo_while_drawing_returns_to_idle(self, session):
        session.pointer_down(MousePointer(5, 5), SURFACE)
        session.undo()

        assert not session.is_drawing
        assert session.history.is_empty
        assert not session.pointer_move(MousePointer(10, 10), SURFACE)

    def test_clear_while_drawing_returns_to_idle(self, session):
        _draw(session, [(1, 1), (9, 9)])
        session.pointer_down(MousePointer(5, 5), SURFACE)
        session.clear()

        assert not session.is_drawing
        assert session.history.is_empty


class TestExportOrdering:

    def test_export_after_each_stroke_end_undo_and_clear(self, session, recorder):
        results = recorder()
        session.annotation_changed.connect(results)

        _draw(session, [(5, 5), (25, 25)])
        _draw(session, [(30, 30), (45, 10)])
        _draw(session, [(100, 100), (200, 150)])
        session.undo()

        assert len(results.calls) == 4
        assert np.array_equal(results.last.to_array(), _expected(session))

        session.clear()
        assert len(results.calls) == 5
        assert results.last is None

    def test_each_published_result_reflects_history_at_that_moment(self, session):
        snapshots = []

        def on_change(result):
            snapshots.append((result, _expected(session)))

        session.annotation_changed.connect(on_change)
        _draw(session, [(5, 5), (25, 25)])
        _draw(session, [(30, 30), (45, 10)])
        session.undo()
        _draw(session, [(60, 60), (10, 90)])

        for result, expected in snapshots:
            assert np.array_equal(result.to_array(), expected)

    def test_undo_to_empty_signals_no_annotation(self, session, recorder):
        results = recorder()
        session.annotation_changed.connect(results)

        _draw(session, [(5, 5), (25, 25)])
        assert results.last is not None

        session.undo()
        assert results.last is None
        assert session.export() is None

    def test_undo_scenario_excludes_undone_stroke(self, session, recorder):
        results = recorder()
        session.annotation_changed.connect(results)

        session.set_color("#ef4444")
        session.set_brush_width(4)
        _draw(session, [(5, 5), (25, 25)])         # A: (10,10) -> (50,50)
        session.set_color("#3b82f6")
        session.set_brush_width(12)
        _draw(session, [(30, 30), (45, 10)])       # B: (60,60) -> (90,20)
        session.undo()

        base = session.base_image.to_qimage()
        stroke_a = session.history.strokes[0]
        exported = results.last.to_array()

        assert len(session.history) == 1
        assert stroke_a.points == [Point(10.0, 10.0), Point(50.0, 50.0)]
        assert np.array_equal(exported, qimage_to_array(composite_strokes(base, [stroke_a])))
        # midpoint of B is back to the base color
        assert tuple(exported[40, 75]) == (128, 128, 128, 255)
        assert tuple(exported[30, 30]) == (0xef, 0x44, 0x44, 255)

    def test_clear_on_empty_still_publishes_none(self, session, recorder):
        results = recorder()
        session.annotation_changed.connect(results)

        session.clear()
        session.clear()

        assert results.calls == [None, None]
        assert session.history.is_empty


class TestCompositeBuffer:

    def test_composite_sized_to_raster_not_display(self, session, recorder):
        updates = recorder()
        session.composite_updated.connect(updates)

        _draw(session, [(5, 5), (25, 25)], surface=QRectF(0, 0, 250, 150))

        assert (updates.last.width(), updates.last.height()) == (1000, 600)
        assert session.history.strokes[0].points[-1] == Point(100.0, 100.0)

    def test_composite_refreshed_on_every_change(self, session, recorder):
        updates = recorder()
        session.composite_updated.connect(updates)

        session.pointer_down(MousePointer(5, 5), SURFACE)
        session.pointer_move(MousePointer(25, 25), SURFACE)
        session.pointer_up()
        session.undo()

        assert len(updates.calls) == 4
        assert np.array_equal(qimage_to_array(session.composite), _expected(session))

    def test_history_count_signal(self, session, recorder):
        counts = recorder()
        session.history_changed.connect(counts)

        _draw(session, [(1, 1), (2, 2)])
        _draw(session, [(3, 3), (4, 4)])
        session.undo()
        session.clear()

        assert counts.calls == [1, 2, 1, 0]


class TestBaseImage:

    def test_new_base_resets_session(self, session, make_base_image, recorder):
        results = recorder()
        session.annotation_changed.connect(results)
        session.set_color("#22c55e")
        _draw(session, [(5, 5), (25, 25)])
        session.pointer_down(MousePointer(30, 30), SURFACE)

        session.load_base_image(make_base_image(200, 100, "#ffffff"))

        assert session.history.is_empty
        assert not session.is_drawing
        assert session.color == Config.DEFAULT_COLOR
        assert (session.intrinsic_size.width(), session.intrinsic_size.height()) == (200, 100)
        assert (session.composite.width(), session.composite.height()) == (200, 100)
        assert session.composite.pixelColor(10, 10).name() == "#ffffff"
        assert results.last is None

    def test_undecodable_base_leaves_session_untouched(self, session):
        _draw(session, [(5, 5), (25, 25)])

        with pytest.raises(BaseImageError):
            session.load_base_image(BaseImage(b"not an image", "image/png"))

        assert len(session.history) == 1
        assert session.intrinsic_size.width() == 1000


class TestConfiguration:

    def test_palette_color_accepted_case_insensitively(self, session):
        session.set_color("#3B82F6")
        assert session.color == "#3b82f6"

    def test_unknown_color_rejected(self, session):
        with pytest.raises(ValueError):
            session.set_color("#123456")
        assert session.color == Config.DEFAULT_COLOR

    @pytest.mark.parametrize("width", [0, 5, 100])
    def test_unknown_brush_width_rejected(self, session, width):
        with pytest.raises(ValueError):
            session.set_brush_width(width)
        assert session.brush_width == Config.DEFAULT_BRUSH_WIDTH

    def test_state_snapshot(self, session):
        session.set_brush_width(4)
        state = session.state
        state.brush_width = 24

        assert session.brush_width == 4
