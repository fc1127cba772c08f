import math

import numpy as np
import pytest

from rendering.scene_graph import SceneNode, Vector3, transform_points
from rendering.wireframe_primitives import create_box_mesh


def test_vector3_helpers():
    v = Vector3().set(1.0, 2.0, 3.0)
    assert v.as_tuple() == (1.0, 2.0, 3.0)
    assert v.set_scalar(0.5).is_close((0.5, 0.5, 0.5))
    assert not v.is_close((0.5, 0.5, 0.6))


def test_local_matrix_applies_scale_rotation_then_translation():
    node = SceneNode("n")
    node.scale.set_scalar(2.0)
    node.rotation.y = math.pi / 2
    node.position.set(0.0, 1.0, 0.0)

    moved = transform_points(node.local_matrix(), np.array([[1.0, 0.0, 0.0]], dtype=np.float32))
    assert moved[0] == pytest.approx([0.0, 1.0, -2.0], abs=1e-5)


def test_find_walks_descendants():
    child = SceneNode("snow")
    root = SceneNode("root").add(SceneNode("group").add(child))
    assert root.find("snow") is child
    assert root.find("missing") is None
    assert [node.name for node in root.walk()] == ["root", "group", "snow"]


def test_hidden_node_prunes_its_subtree():
    mesh = create_box_mesh(1.0, 1.0, 1.0)
    shown = SceneNode("shown", mesh=mesh)
    hidden_child = SceneNode("inner", mesh=mesh)
    hidden = SceneNode("hidden", visible=False).add(hidden_child)
    root = SceneNode("root").add(shown, hidden)

    names = [node.name for node, _ in root.visible_draw_list()]
    assert names == ["shown"]


def test_child_world_matrix_includes_parent_scale():
    mesh = create_box_mesh(1.0, 1.0, 1.0)
    child = SceneNode("child", mesh=mesh, position=Vector3(1.0, 0.0, 0.0))
    group = SceneNode("group").add(child)
    group.scale.set_scalar(0.0)

    [(node, world)] = list(group.visible_draw_list())
    assert node is child
    points = transform_points(world, mesh.vertex_array())
    assert np.allclose(points, 0.0)


def test_transform_points_handles_empty_input():
    assert transform_points(np.identity(4), np.zeros((0, 3))).shape == (0, 3)
