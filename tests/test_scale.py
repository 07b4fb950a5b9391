"""
Tests for handle scaling.
"""

import pytest

from tweenstag.bounds import bounding_box, world_point
from tweenstag.geometry import BoundingBox
from tweenstag.models import (
    CircleObject,
    ClipInstanceObject,
    EllipseObject,
    GroupObject,
    LineObject,
    PathObject,
    RectObject,
    TextObject,
)
from tweenstag.path import path_bounds
from tweenstag.transform import Handle, scale_delta


def _scale(obj, handle, dx, dy, **kwargs):
    return scale_delta(obj.kind, obj, bounding_box(obj), handle, dx, dy, obj.rotation, **kwargs)


class TestScaleRect:
    """Rectangles take the solved box directly."""

    def test_corner_grows_away_from_anchor(self):
        """Dragging the bottom-right corner keeps the top-left fixed."""
        rect = RectObject(x=0, y=0, width=100, height=50)
        delta = _scale(rect, 'corner-br', 10, 20)
        assert delta == pytest.approx({'x': 0, 'y': 0, 'width': 110, 'height': 70})

    def test_top_left_corner(self):
        """Dragging the top-left corner inward shrinks toward bottom-right."""
        rect = RectObject(x=0, y=0, width=100, height=50)
        delta = _scale(rect, Handle.CORNER_TL, 10, 10)
        assert delta == pytest.approx({'x': 10, 'y': 10, 'width': 90, 'height': 40})

    def test_edge_changes_one_axis(self):
        """Edge handles ignore the other axis."""
        rect = RectObject(x=0, y=0, width=100, height=50)
        delta = _scale(rect, 'edge-r', 10, 99)
        assert delta == pytest.approx({'x': 0, 'y': 0, 'width': 110, 'height': 50})

    def test_symmetric_grows_both_sides(self):
        """Symmetric scaling doubles the change around the origin."""
        rect = RectObject(x=0, y=0, width=100, height=50)
        delta = _scale(rect, 'edge-r', 10, 0, symmetric=True)
        assert delta == pytest.approx({'x': -10, 'y': 0, 'width': 120, 'height': 50})

    def test_symmetric_respects_origin(self):
        """A custom origin is the symmetric anchor."""
        rect = RectObject(x=0, y=0, width=100, height=50, origin_x=0)
        delta = _scale(rect, 'edge-r', 10, 0, symmetric=True)
        assert delta['x'] == pytest.approx(0)
        assert delta['width'] == pytest.approx(120)

    def test_uniform_corner(self):
        """Uniform scaling uses the axis with the larger change."""
        rect = RectObject(x=0, y=0, width=100, height=50)
        delta = _scale(rect, 'corner-br', 50, 0, uniform=True)
        assert delta['width'] == pytest.approx(150)
        assert delta['height'] == pytest.approx(75)

    def test_uniform_edge(self):
        """A uniform edge drag scales the other axis around its middle."""
        rect = RectObject(x=0, y=0, width=100, height=50)
        delta = _scale(rect, 'edge-r', 50, 0, uniform=True)
        assert delta == pytest.approx({'x': 0, 'y': -12.5, 'width': 150, 'height': 75})

    def test_minimum_size(self):
        """Sizes never drop below one unit."""
        rect = RectObject(x=0, y=0, width=100, height=50)
        delta = _scale(rect, 'corner-br', -500, -500)
        assert delta['width'] == 1
        assert delta['height'] == 1

    def test_rotated_delta_uses_local_axes(self):
        """The pointer delta is measured along the rotated axes."""
        rect = RectObject(x=0, y=0, width=100, height=50, rotation=90)
        # Pointer moves down the screen, which is the rect's local +x
        delta = _scale(rect, 'edge-r', 0, 10)
        assert delta['width'] == pytest.approx(110)
        assert delta['height'] == pytest.approx(50)


ANCHOR_OBJECTS = [
    RectObject(x=10, y=20, width=100, height=50, rotation=30),
    EllipseObject(cx=60, cy=40, rx=40, ry=20, rotation=-25),
    GroupObject(x=30, y=30, rotation=40, children=[
        RectObject(x=-10, y=-10, width=40, height=20),
    ]),
    ClipInstanceObject(clip_id='missing', x=5, y=5, rotation=15),
]


class TestAnchorFixed:
    """The point opposite the handle keeps its world position."""

    @pytest.mark.parametrize('obj', ANCHOR_OBJECTS)
    @pytest.mark.parametrize('handle', list(Handle))
    def test_anchor(self, obj, handle):
        fx, fy = handle.opposite_fractions
        box = bounding_box(obj)
        before = world_point(obj, box, fx, fy)

        delta = _scale(obj, handle, 15, -7)
        scaled = obj.with_attributes(delta)

        after = world_point(scaled, bounding_box(scaled), fx, fy)
        assert after == pytest.approx(before, abs=1e-6)

    @pytest.mark.parametrize('handle', list(Handle))
    def test_path_anchor(self, handle):
        """Paths keep their anchor up to the serialization precision."""
        path = PathObject(d='M0,0 L80,0 L80,40 L0,40 Z', x=10, y=10, rotation=20)
        fx, fy = handle.opposite_fractions
        before = world_point(path, bounding_box(path), fx, fy)

        scaled = path.with_attributes(_scale(path, handle, 12, 9))

        after = world_point(scaled, bounding_box(scaled), fx, fy)
        assert after == pytest.approx(before, abs=0.05)


class TestScaleKinds:
    """Per-kind application of the solved box."""

    def test_circle_uses_larger_side(self):
        """Circles stay round with the larger side as diameter."""
        circle = CircleObject(cx=50, cy=50, r=50)
        delta = _scale(circle, 'corner-br', 20, 0)
        assert delta == pytest.approx({'cx': 60, 'cy': 60, 'r': 60})

    def test_ellipse_radii(self):
        """Ellipses map the box to their radii."""
        ellipse = EllipseObject(cx=50, cy=25, rx=50, ry=25)
        delta = _scale(ellipse, 'corner-br', 20, 10)
        assert delta == pytest.approx({'cx': 60, 'cy': 30, 'rx': 60, 'ry': 30})

    def test_path_geometry_is_rescaled(self):
        """Paths resize their geometry and re-center on (x, y)."""
        path = PathObject(d='M0,0 L100,0 L100,50 Z')
        delta = _scale(path, 'corner-br', 100, 50)
        assert delta['x'] == pytest.approx(100)
        assert delta['y'] == pytest.approx(50)
        box = path_bounds(delta['d'])
        assert box.width == pytest.approx(200)
        assert box.height == pytest.approx(100)

    def test_group_scales_instead_of_resizing(self):
        """Groups change their scale, not their children."""
        group = GroupObject(x=10, y=10, children=[RectObject(width=50, height=50)])
        delta = _scale(group, 'corner-br', 50, 50)
        assert delta == pytest.approx({'x': 10, 'y': 10, 'scaleX': 2, 'scaleY': 2})
        assert 'children' not in delta

    def test_clip_placeholder(self):
        """Clip instances scale their content box."""
        clip = ClipInstanceObject(clip_id='missing')
        delta = _scale(clip, 'corner-br', 100, 100)
        assert delta == pytest.approx({'x': 50, 'y': 50, 'scaleX': 2, 'scaleY': 2})

    @pytest.mark.parametrize('obj', [
        LineObject(x1=0, y1=0, x2=10, y2=10),
        TextObject(text='Hi'),
    ])
    def test_unscalable_kinds(self, obj):
        """Lines and text cannot be scaled by handle."""
        box = BoundingBox(0, 0, 10, 10)
        assert scale_delta(obj.kind, obj, box, 'corner-br', 5, 5) == {}

    def test_unknown_kind(self):
        assert scale_delta('star', {}, BoundingBox(0, 0, 10, 10), 'corner-br', 5, 5) == {}

    def test_degenerate_box(self):
        """A zero-size box cannot be scaled."""
        rect = RectObject(x=5, y=5, width=0, height=0)
        assert _scale(rect, 'corner-br', 10, 10) == {}

    def test_flat_path(self):
        """Paths without extent on an axis cannot be scaled."""
        path = PathObject(d='M0,0 L100,0')
        assert _scale(path, 'corner-br', 10, 10) == {}


class TestHandles:
    """Handle naming."""

    def test_corner_and_edge(self):
        assert Handle.CORNER_TR.is_corner
        assert not Handle.EDGE_B.is_corner
        assert Handle.EDGE_B.fractions == (0.5, 1.0)
        assert Handle.CORNER_TR.opposite_fractions == (0.0, 1.0)
