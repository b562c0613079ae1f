import math

import pytest

from floorrooms.core.model import Centroid, FloorPlan, Point, Wall
from floorrooms.scene.builders import (
    build_center_markers,
    build_draw_model,
    build_point_markers,
    build_wall_meshes,
    build_walls_model,
    wall_label,
)


@pytest.mark.parametrize(
    "start, end, text, position",
    [
        ((0.0, 0.0), (2.0, 0.0), "2m", (1.0, 0.2)),
        ((1.0, 0.0), (1.0, 3.25), "3.2m", (1.2, 1.625)),
        ((0.0, 0.0), (3.0, 4.0), "5m", (1.3, 2.2)),
        ((3.0, 4.0), (0.0, 0.0), "5m", (1.7, 1.8)),
    ],
)
def test_wall_label_text_and_offset(start, end, text, position):
    label = wall_label(Wall(start=start, end=end))

    assert label.text == text
    assert label.position[0] == pytest.approx(position[0])
    assert label.position[2] == pytest.approx(position[1])


def test_point_markers_highlight_selection():
    markers = build_point_markers([Point(0.0, 0.0), Point(1.0, 0.0, selected=True)])

    assert [m.color for m in markers] == ["#ffffff", "#e2a149"]
    assert markers[1].position == (1.0, 0.0, 0.0)


def test_center_markers_use_render_coordinates():
    (marker,) = build_center_markers([Centroid(1.0, 2.0, 0.015).to_render()])

    assert marker.position == (1.0, 0.015, 2.0)


def test_draw_model_has_points_lines_and_labels(square_plan):
    group = build_draw_model(square_plan)

    assert len(group.named("point")) == 4
    assert len(group.named("line")) == 4
    assert len(group.named("label")) == 4


def test_walls_get_default_texture_and_mesh_handle(square_plan):
    square_plan.walls[0].texture = "brick"

    group = build_walls_model(square_plan)
    walls = group.named("wall")

    assert [w.texture for w in square_plan.walls] == ["brick", "plaster", "plaster", "plaster"]
    assert [w.mesh for w in square_plan.walls] == [m.uuid for m in walls]
    assert len(group.named("column")) == 4
    assert walls[0].height == pytest.approx(1.3)
    assert walls[0].geometry.area == pytest.approx(1.0 * 0.05)


def test_skirting_leaves_wall_records_alone(square_plan):
    group = build_walls_model(square_plan, skirting=True)

    assert all(w.texture is None and w.mesh is None for w in square_plan.walls)
    skirting = group.named("skirting")
    assert skirting[0].height == pytest.approx(1.3 / 20)
    assert skirting[0].geometry.area == pytest.approx(1.0 * 0.06)


def test_wall_rotation_follows_direction():
    plan = FloorPlan(
        points=[Point(0.0, 0.0), Point(0.0, 2.0)],
        walls=[Wall(start=(0.0, 0.0), end=(0.0, 2.0))],
    )
    (mesh,) = build_wall_meshes(plan)

    assert abs(mesh.rotation_y) == pytest.approx(math.pi / 2)
    assert mesh.position == pytest.approx((0.0, 0.65, 1.0))
