import numpy as np
import pytest

from rendering.scene_graph import Vector3
from stage.camera import Camera3D


def _ndc(camera, point):
    clip = camera.projection_matrix() @ camera.view_matrix() @ np.array([*point, 1.0], dtype=np.float32)
    return clip[:3] / clip[3]


def test_origin_projects_to_viewport_centre():
    camera = Camera3D(viewport_size=(800, 600))
    assert _ndc(camera, (0.0, 0.0, 0.0))[:2] == pytest.approx((0.0, 0.0), abs=1e-6)


def test_camera_pans_without_rotating():
    camera = Camera3D(viewport_size=(800, 600), position=Vector3(0.5, 0.0, 10.0))
    view = camera.view_matrix()
    assert np.allclose(view[:3, :3], np.identity(3))
    assert view[:3, 3] == pytest.approx([-0.5, 0.0, -10.0])

    ndc = _ndc(camera, (0.0, 0.0, 0.0))
    assert ndc[0] < 0.0
    assert ndc[1] == pytest.approx(0.0, abs=1e-6)


def test_points_up_the_y_axis_stay_up():
    camera = Camera3D(viewport_size=(800, 600))
    assert _ndc(camera, (0.0, 1.0, 0.0))[1] > 0.0


def test_depth_range_matches_clip_planes():
    camera = Camera3D(viewport_size=(800, 600), near_clip=0.1, far_clip=20.0)
    assert _ndc(camera, (0.0, 0.0, 10.0 - 20.0))[2] == pytest.approx(1.0, abs=1e-4)
    assert _ndc(camera, (0.0, 0.0, -50.0))[2] > 1.0


def test_update_viewport_rejects_zero_area():
    camera = Camera3D(viewport_size=(800, 600))
    assert not camera.update_viewport((0, 600))
    assert camera.viewport_size == (800, 600)
    assert camera.update_viewport((1200, 600))
    assert camera.aspect == pytest.approx(2.0)
    assert camera.projection_matrix()[0, 0] == pytest.approx(camera.projection_matrix()[1, 1] / 2.0)
