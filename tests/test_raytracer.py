import pytest

from pixelcast.core.vector import Vector2, Vector3
from pixelcast.core.ray import Ray
from pixelcast.camera.camera import Camera
from pixelcast.geometry import Scene, Sphere
from pixelcast.renderer.raytracer import BLACK, RayTracer, nearest_hit, trace_ray
from pixelcast.scenes.presets import single_sphere_scene
from helpers import assert_vec_close, ray_from

RED = Vector3(1, 0, 0)
BLUE = Vector3(0, 0, 1)
GREEN = Vector3(0, 1, 0)


@pytest.fixture
def camera_lit_scene():
    return Scene(Vector3(0, 0, -1))


def test_empty_scene_traces_black(camera_lit_scene, forward_ray):
    assert trace_ray(forward_ray, camera_lit_scene) == BLACK


def test_rays_pointing_away_trace_black(camera_lit_scene):
    camera_lit_scene.add_sphere(Vector3(0, 0, 10), 3, RED)
    camera_lit_scene.add_rectangle(Vector3(0, 0, 20), 10, 10, BLUE)
    camera_lit_scene.add_circle(Vector3(0, 0, 30), 5, GREEN)
    camera_lit_scene.add_triangle(40, Vector2(-5, -5), Vector2(5, -5), Vector2(0, 5), GREEN)
    for direction in [(0, 0, -1), (1, 0, 0), (0, -1, -1)]:
        assert trace_ray(ray_from(0, 0, direction=direction), camera_lit_scene) == BLACK


def test_nearest_shape_wins_regardless_of_order(camera_lit_scene, forward_ray):
    camera_lit_scene.add_sphere(Vector3(0, 0, 50), 10, RED)
    camera_lit_scene.add_sphere(Vector3(0, 0, 20), 5, BLUE)
    shape, point = nearest_hit(forward_ray, camera_lit_scene)
    assert shape.get_color() is BLUE
    assert_vec_close(point, (0, 0, 15))
    assert_vec_close(trace_ray(forward_ray, camera_lit_scene), (0, 0, 1))


def test_flat_shape_in_front_of_sphere_wins(camera_lit_scene, forward_ray):
    camera_lit_scene.add_sphere(Vector3(0, 0, 50), 10, RED)
    camera_lit_scene.add_rectangle(Vector3(0, 0, 30), 4, 4, GREEN)
    assert_vec_close(trace_ray(forward_ray, camera_lit_scene), (0, 1, 0))


def test_equal_distance_keeps_first_shape(camera_lit_scene, forward_ray):
    camera_lit_scene.add_rectangle(Vector3(0, 0, 30), 4, 4, GREEN)
    camera_lit_scene.add_circle(Vector3(0, 0, 30), 2, BLUE)
    shape, _ = nearest_hit(forward_ray, camera_lit_scene)
    assert shape.get_color() is GREEN


def test_colour_is_scaled_by_shading(forward_ray):
    scene = Scene(Vector3(1, 0, -1))
    scene.add_rectangle(Vector3(0, 0, 30), 4, 4, Vector3(1, 1, 1))
    modifier = scene.shading_modifier(scene.shapes[0], Vector3(0, 0, 30))
    assert 0.0 < modifier < 1.0
    assert_vec_close(trace_ray(forward_ray, scene), (modifier, modifier, modifier))


def test_tracer_shares_the_scene(camera_lit_scene, forward_ray):
    tracer = RayTracer(camera_lit_scene)
    assert tracer.scene is camera_lit_scene
    assert tracer.trace_ray(forward_ray) == BLACK
    camera_lit_scene.add_sphere(Vector3(0, 0, 10), 1, RED)
    assert_vec_close(tracer.trace_ray(forward_ray), (1, 0, 0))


def test_single_sphere_end_to_end():
    camera = Camera((640, 480))
    tracer = RayTracer(single_sphere_scene())

    center = tracer.trace_ray(camera.get_ray((320, 240)))
    assert center.x == pytest.approx(1.0, abs=1e-3)
    assert center.y == 0 and center.z == 0

    assert tracer.trace_ray(camera.get_ray((0, 0))) == BLACK


def test_single_sphere_hit_point_faces_the_camera():
    camera = Camera((640, 480))
    scene = single_sphere_scene()
    shape, point = nearest_hit(camera.get_ray((320, 240)), scene)
    assert isinstance(shape, Sphere)
    assert_vec_close(point, (320, 240, 50))
