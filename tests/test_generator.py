from floorrooms.engine.api import create_floor_model
from floorrooms.visualization.generator import generate_plan_image, texture_color


def test_generate_plan_image(tmp_path, split_plan):
    floor, centers = create_floor_model(split_plan)
    out = tmp_path / "images" / "plan.png"

    assert generate_plan_image(split_plan, floor, centers, out) is True
    assert out.stat().st_size > 0


def test_generate_plan_image_reports_failure(tmp_path, split_plan):
    floor, centers = create_floor_model(split_plan)
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")

    assert generate_plan_image(split_plan, floor, centers, blocker / "plan.png") is False


def test_unknown_texture_uses_fallback_color():
    assert texture_color("wood2") == "#b5835a"
    assert texture_color("unobtainium") == "#cccccc"
