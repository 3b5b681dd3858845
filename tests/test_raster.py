"""Static PNG rendering of scenes."""

import pytest
from PIL import Image

from pyargand.constants import COLORS
from pyargand.raster import SceneRenderer, clip_segment, render_scene
from pyargand.scene import ArgandState, DisplayOptions, build_scene


@pytest.fixture(scope="module")
def renderer():
    return SceneRenderer()


def test_clip_segment_inside():
    assert clip_segment((10, 10), (20, 30), 100, 50) == ((10, 10), (20, 30))


def test_clip_segment_crossing():
    start, end = clip_segment((-10, 5), (110, 5), 100, 50)
    assert start == pytest.approx((0, 5))
    assert end == pytest.approx((100, 5))


def test_clip_segment_outside():
    assert clip_segment((-10, -10), (-5, 60), 100, 50) is None
    assert clip_segment((0, 60), (100, 70), 100, 50) is None


def test_clip_segment_far_endpoint():
    start, end = clip_segment((380, 280), (1e200, 280), 760, 560)
    assert start == pytest.approx((380, 280))
    assert end == pytest.approx((760, 280))


def test_render_default(renderer):
    image = renderer.render(build_scene(ArgandState()))
    assert image.size == (760, 560)
    assert image.mode == "RGB"
    assert image.getpixel((5, 5)) == COLORS["background"]
    assert image.getpixel((480, 280)) == COLORS["point"]


def test_render_array_shape(renderer):
    rgb = renderer.render_array(build_scene(ArgandState(theta=1.0), 400, 300))
    assert rgb.shape == (300, 400, 3)


@pytest.mark.parametrize("state", [
    ArgandState(theta=0.3, mantissa=9, exponent=300, zoom=600),
    ArgandState(theta=0.3, mantissa=9, exponent=300, zoom=1e10),
    ArgandState(theta=-2.0, mantissa=1, exponent=60, zoom=5),
    ArgandState(theta=4.0, mantissa=2, exponent=-300, zoom=300),
    ArgandState(theta=0.0, mantissa=0, exponent=0, zoom=1),
])
def test_render_extremes(renderer, state):
    image = renderer.render(build_scene(state))
    assert image.size == (760, 560)


def test_render_scene_writes_png(tmp_path):
    out = tmp_path / "argand.png"
    scene = build_scene(ArgandState(theta=2.0, mantissa=1.5, exponent=0),
                        options=DisplayOptions(show_arc=False))
    render_scene(scene, str(out))
    with Image.open(out) as image:
        assert image.format == "PNG"
        assert image.size == (760, 560)
