import json

import pytest

from floorrooms.core.model import Centroid
from floorrooms.io.parser import JsonStore, load_plan, parse_plan, save_plan

DOCUMENT = {
    "points": [
        {"x": 0, "z": 0, "selected": False},
        {"x": 2, "z": 0, "selected": True},
        {"x": 2, "z": 2, "selected": False},
    ],
    "walls": [
        {"from": {"x": 0, "z": 0}, "to": {"x": 2, "z": 0}, "texture": "brick", "mesh": "abc"},
        {"from": {"x": 2, "z": 0}, "to": {"x": 2, "z": 2}},
        {"from": {"x": 2, "z": 2}, "to": {"x": 0, "z": 0}},
    ],
    "rooms": [
        {"center": {"x": 1, "y": 1, "z": 0.015}, "mesh": "m1", "texture": "tiles"},
    ],
}


def test_parse_document_without_ids():
    plan = parse_plan(DOCUMENT)

    assert [p.key for p in plan.points] == [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0)]
    assert plan.points[1].selected is True
    assert all(p.id for p in plan.points)
    assert plan.walls[0].texture == "brick"
    assert plan.walls[1].texture is None
    assert plan.rooms[0].center == Centroid(1.0, 1.0, 0.015)
    assert plan.rooms[0].texture == "tiles"


def test_save_and_load_keep_ids(tmp_path):
    plan = parse_plan(DOCUMENT)
    path = tmp_path / "nested" / "plan.json"

    save_plan(plan, str(path))
    reloaded = load_plan(str(path))

    assert reloaded == plan
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    assert raw["walls"][0]["from"] == {"x": 0.0, "z": 0.0}
    assert "texture" not in raw["walls"][1]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_plan(str(tmp_path / "missing.json"))


def test_malformed_wall_names_its_index():
    with pytest.raises(ValueError, match="wall data at index 0"):
        parse_plan({"walls": [{"from": {"x": 0}}]})


def test_document_must_be_an_object():
    with pytest.raises(ValueError):
        parse_plan([])


def test_store_returns_empty_plan_for_unknown_key(tmp_path):
    plan = JsonStore(tmp_path).load("unknown")

    assert plan.points == [] and plan.walls == [] and plan.rooms == []
