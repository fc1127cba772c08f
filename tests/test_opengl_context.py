import pytest

pytest.importorskip("OpenGL.GL")

from rendering import opengl_context
from rendering.opengl_context import ContainerMissingError, require_container


class FakeSurface:
    def __init__(self, size):
        self._size = size

    def get_size(self):
        return self._size


def test_missing_display_surface_raises(monkeypatch):
    monkeypatch.setattr(opengl_context.pygame.display, "get_surface", lambda: None)
    with pytest.raises(ContainerMissingError):
        require_container()


def test_zero_area_surface_raises(monkeypatch):
    monkeypatch.setattr(opengl_context.pygame.display, "get_surface", lambda: FakeSurface((0, 0)))
    with pytest.raises(ContainerMissingError):
        require_container()


def test_surface_is_returned(monkeypatch):
    surface = FakeSurface((640, 480))
    monkeypatch.setattr(opengl_context.pygame.display, "get_surface", lambda: surface)
    assert require_container() is surface


def test_initialize_gl_enables_exp2_fog(monkeypatch):
    calls = []

    class RecordingGL:
        def __getattr__(self, name):
            if name.startswith("GL_"):
                return name
            return lambda *args: calls.append((name, args))

    monkeypatch.setattr(opengl_context, "gl", RecordingGL())
    opengl_context.initialize_gl((320, 240), fog_density=0.04)

    assert ("glViewport", (0, 0, 320, 240)) in calls
    assert ("glFogi", ("GL_FOG_MODE", "GL_EXP2")) in calls
    assert ("glFogf", ("GL_FOG_DENSITY", 0.04)) in calls
    assert ("glEnable", ("GL_FOG",)) in calls
