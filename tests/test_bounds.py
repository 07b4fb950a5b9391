"""
Tests for bounding boxes and rotation origins.
"""

import math

import pytest

from tweenstag.bounds import (
    bounding_box,
    rotation_origin,
    world_bounds,
    world_point,
)
from tweenstag.geometry import BoundingBox, rotated_corners
from tweenstag.models import (
    CircleObject,
    ClipInstanceObject,
    EllipseObject,
    GroupObject,
    LineObject,
    PathObject,
    RectObject,
    SceneObject,
    TextObject,
)


def _tuple(box):
    return (box.x, box.y, box.width, box.height)


class TestBoundingBox:
    """Per-kind boxes."""

    def test_rect(self):
        assert _tuple(bounding_box(RectObject(x=1, y=2, width=3, height=4))) == (1, 2, 3, 4)

    def test_circle_and_ellipse(self):
        """Round shapes span center plus/minus radius."""
        assert _tuple(bounding_box(CircleObject(cx=10, cy=10, r=5))) == (5, 5, 10, 10)
        assert _tuple(bounding_box(EllipseObject(cx=10, cy=10, rx=5, ry=2))) == (5, 8, 10, 4)

    def test_line(self):
        """Lines span their end points in any order."""
        assert _tuple(bounding_box(LineObject(x1=10, y1=5, x2=0, y2=0))) == (0, 0, 10, 5)

    def test_path_is_offset_by_position(self):
        """Paths use their intrinsic box moved by (x, y)."""
        box = bounding_box(PathObject(d='M0,0 L10,0 L10,20', x=5, y=5))
        assert _tuple(box) == (5, 5, 10, 20)

    @pytest.mark.parametrize('obj', [
        PathObject(d=''),
        PathObject(d='garbage'),
        TextObject(text='Hello'),
        SceneObject(type='star'),
    ])
    def test_unmeasurable(self, obj):
        """Empty paths, text and unknown kinds have no box."""
        assert bounding_box(obj) is None

    def test_clip_from_mapping(self):
        """Clip instances scale then translate their clip's content box."""
        inst = ClipInstanceObject(clip_id='c', x=100, y=50, scale_x=2, scale_y=2)
        box = bounding_box(inst, {'c': BoundingBox(0, 0, 20, 10)})
        assert _tuple(box) == (100, 50, 40, 20)

    def test_clip_from_callable(self):
        """The lookup may be a callable."""
        inst = ClipInstanceObject(clip_id='c', x=1, y=1)
        box = bounding_box(inst, lambda clip_id: BoundingBox(-1, -1, 2, 2))
        assert _tuple(box) == (0, 0, 2, 2)

    def test_unknown_clip_uses_placeholder(self):
        """Unknown clips fall back to a fixed placeholder box."""
        inst = ClipInstanceObject(clip_id='missing', x=10, y=10)
        assert _tuple(bounding_box(inst, {})) == (-40, -40, 100, 100)
        assert _tuple(bounding_box(inst)) == (-40, -40, 100, 100)

    def test_group_union_scaled(self):
        """Groups scale and translate the union of their children."""
        group = GroupObject(x=5, y=5, scale_x=2, scale_y=2, children=[
            RectObject(x=0, y=0, width=10, height=10),
            RectObject(x=20, y=0, width=10, height=10),
        ])
        assert _tuple(bounding_box(group)) == (5, 5, 60, 20)

    def test_group_uses_rotated_children(self):
        """Children contribute the box around their rotated corners."""
        group = GroupObject(children=[RectObject(x=0, y=0, width=10, height=10, rotation=45)])
        box = bounding_box(group)
        half = 5 * math.sqrt(2)
        assert box.x == pytest.approx(5 - half)
        assert box.width == pytest.approx(2 * half)

    def test_empty_group(self):
        """A group without measurable children has no box."""
        assert bounding_box(GroupObject()) is None
        assert bounding_box(GroupObject(children=[TextObject()])) is None


class TestRotation:
    """Rotation origins and rotated corners."""

    def test_origins(self):
        """Containers rotate around (x, y), shapes around their center."""
        rect = RectObject(x=0, y=0, width=10, height=20)
        assert rotation_origin(rect, bounding_box(rect)) == (5, 10)
        group = GroupObject(x=3, y=4, children=[rect])
        assert rotation_origin(group, bounding_box(group)) == (3, 4)

    def test_rotated_corners(self):
        """Corners rotate clockwise (y down) around the origin."""
        corners = rotated_corners(BoundingBox(0, 0, 100, 100), 90, (50, 50))
        assert corners[0] == pytest.approx((100, 0))
        assert corners[2] == pytest.approx((0, 100))

    def test_zero_rotation_is_noop(self):
        """No rotation returns the plain corners."""
        box = BoundingBox(1, 2, 3, 4)
        assert rotated_corners(box, 0, (0, 0)) == box.corners()

    def test_world_bounds(self):
        """World bounds enclose the rotated corners."""
        rect = RectObject(x=0, y=0, width=100, height=100, rotation=45)
        box = world_bounds(rect)
        assert box.center == pytest.approx((50, 50))
        assert box.width == pytest.approx(100 * math.sqrt(2))

    def test_center_is_rotation_invariant(self):
        """A box center stays put when a shape rotates around it."""
        rect = RectObject(x=0, y=0, width=100, height=100, rotation=90)
        box = bounding_box(rect)
        assert _tuple(box) == (0, 0, 100, 100)
        assert world_point(rect, box, 0.5, 0.5) == pytest.approx((50, 50))


class TestBoxPrimitive:
    """BoundingBox helpers."""

    def test_edges_and_union(self):
        box = BoundingBox(0, 0, 10, 10).union(BoundingBox(5, -5, 10, 10))
        assert _tuple(box) == (0, -5, 15, 15)
        assert (box.x2, box.y2) == (15, 10)

    def test_dict_form(self):
        box = BoundingBox(1, 2, 3, 4)
        assert box.to_dict() == {'x': 1, 'y': 2, 'width': 3, 'height': 4}
        assert BoundingBox.from_dict(box.to_dict()) == box
