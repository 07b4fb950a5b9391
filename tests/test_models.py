"""
Tests for object and timeline models.
"""

import pytest
from pydantic import ValidationError

from tweenstag.models import (
    ClipDefinition,
    ClipInstanceObject,
    GroupObject,
    Keyframe,
    Layer,
    ObjectKind,
    PathObject,
    Project,
    RectObject,
    SceneObject,
    create_layer,
    get_object_class,
    object_from_dict,
)


class TestSceneObjects:
    """Object variants and attribute access."""

    def test_registry_dispatch(self):
        """Type strings select the object variant."""
        assert get_object_class('rect') is RectObject
        assert get_object_class('path') is PathObject
        obj = object_from_dict({'type': 'rect', 'id': 'a', 'x': 5, 'width': 10})
        assert isinstance(obj, RectObject)
        assert obj.x == 5
        assert obj.id == 'a'

    def test_unknown_type_keeps_attributes(self):
        """Unknown types fall back to the base model with extras kept."""
        obj = object_from_dict({'type': 'star', 'id': 's', 'points': 5})
        assert type(obj) is SceneObject
        assert obj.kind == 'star'
        assert obj.attributes()['points'] == 5

    def test_container_kinds(self):
        """Groups and clip instances are containers, shapes are not."""
        assert GroupObject().is_container()
        assert ClipInstanceObject().is_container()
        assert not RectObject().is_container()
        assert RectObject().kind == ObjectKind.RECT

    def test_ids_are_generated(self):
        """Objects get unique ids by default."""
        assert RectObject().id != RectObject().id

    def test_attributes_mapping(self):
        """Attributes use document names, skip unset values and identity."""
        attrs = RectObject(id='r', x=1, stroke_width=2).attributes()
        assert attrs['x'] == 1
        assert attrs['strokeWidth'] == 2
        assert 'fill' not in attrs
        assert 'id' not in attrs
        assert 'type' not in attrs

    def test_with_attributes_is_a_copy(self):
        """Edits create new objects of the same kind and id."""
        rect = RectObject(id='r', x=1)
        moved = rect.with_attributes({'x': 10, 'originX': 0})
        assert isinstance(moved, RectObject)
        assert moved.id == 'r'
        assert moved.x == 10
        assert moved.origin_x == 0
        assert rect.x == 1
        assert rect.with_attributes({}) is rect

    def test_objects_are_frozen(self):
        """Objects cannot be modified in place."""
        rect = RectObject(x=1)
        with pytest.raises(ValidationError):
            rect.x = 5

    def test_group_children_from_dicts(self):
        """Group children deserialize to their variants."""
        group = object_from_dict({
            'type': 'group',
            'scaleX': 2,
            'children': [{'type': 'rect', 'id': 'c'}, {'type': 'path', 'd': 'M0,0 L1,1'}],
        })
        assert isinstance(group, GroupObject)
        assert group.scale_x == 2
        assert isinstance(group.children[0], RectObject)
        assert isinstance(group.children[1], PathObject)

    def test_to_dict_uses_document_names(self):
        """Serialization writes camelCase keys and nested children."""
        group = GroupObject(id='g', scale_y=3, children=[RectObject(id='c', width=4)])
        data = group.to_dict()
        assert data['type'] == 'group'
        assert data['scaleY'] == 3
        assert data['children'][0]['type'] == 'rect'
        assert data['children'][0]['width'] == 4
        assert object_from_dict(data) == group

    def test_clip_instance_fields(self):
        """Clip instances read camelCase clip fields."""
        clip = object_from_dict({'type': 'clip', 'clipId': 'walk', 'setFrame': 3})
        assert isinstance(clip, ClipInstanceObject)
        assert clip.clip_id == 'walk'
        assert clip.set_frame == 3


class TestTimeline:
    """Keyframes, layers and projects."""

    def test_new_layer_has_one_discrete_keyframe(self):
        """A new layer holds an empty discrete keyframe at frame 1."""
        layer = create_layer('Background')
        assert layer.name == 'Background'
        assert len(layer.keyframes) == 1
        kf = layer.keyframes[0]
        assert kf.frame == 1
        assert kf.tween == 'discrete'
        assert kf.objects == []

    def test_keyframes_are_sorted(self):
        """Keyframes are kept in frame order."""
        layer = Layer(keyframes=[Keyframe(frame=10), Keyframe(frame=1), Keyframe(frame=5)])
        assert layer.frames == [1, 5, 10]

    def test_duplicate_frames_rejected(self):
        """Two keyframes on the same frame are invalid."""
        with pytest.raises(ValidationError):
            Layer(keyframes=[Keyframe(frame=2), Keyframe(frame=2)])

    def test_frame_must_be_positive(self):
        """Frames start at 1."""
        with pytest.raises(ValidationError):
            Keyframe(frame=0)

    def test_keyframe_lookup(self):
        """Active, next and exact keyframe lookup."""
        layer = Layer(keyframes=[Keyframe(frame=1), Keyframe(frame=5), Keyframe(frame=10)])
        assert layer.active_keyframe(7).frame == 5
        assert layer.active_keyframe(5).frame == 5
        assert layer.next_keyframe(5).frame == 10
        assert layer.next_keyframe(10) is None
        assert layer.keyframe_at(10).frame == 10
        assert layer.keyframe_at(6) is None
        assert Layer(keyframes=[Keyframe(frame=3)]).active_keyframe(2) is None

    def test_keyframe_objects_from_dicts(self):
        """Keyframe objects deserialize to their variants."""
        kf = Keyframe.model_validate({
            'frame': 2,
            'objects': [{'type': 'rect', 'id': 'r'}],
            'tween': 'linear',
            'easeDirection': 'out',
        })
        assert isinstance(kf.objects[0], RectObject)
        assert kf.ease_direction == 'out'
        assert kf.object_by_id('r') is kf.objects[0]

    def test_clip_frame_count_positive(self):
        """Clips have at least one frame."""
        with pytest.raises(ValidationError):
            ClipDefinition(frame_count=0)

    def test_project_document(self):
        """Projects load from camelCase documents."""
        project = Project.from_dict({
            'name': 'Demo',
            'frameRate': 24,
            'totalFrames': 48,
            'layers': [{'name': 'L', 'keyframes': [{'frame': 1, 'objects': [{'type': 'circle', 'r': 5}]}]}],
            'clips': [{'id': 'walk', 'frameCount': 8}],
        })
        assert project.frame_rate == 24
        assert project.total_frames == 48
        assert project.layers[0].keyframes[0].objects[0].r == 5
        assert set(project.clip_library()) == {'walk'}
        assert project.to_dict()['totalFrames'] == 48
