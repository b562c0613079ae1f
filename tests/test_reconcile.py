from floorrooms.core.model import Centroid, Room, Wall
from floorrooms.engine.reconcile import reconcile_rooms
from floorrooms.engine.rooms import detect_rooms


def test_new_rooms_get_default_texture_and_handles(split_plan):
    pairs = reconcile_rooms(split_plan, detect_rooms(split_plan))

    assert len(split_plan.rooms) == 2
    assert all(room.texture == "wood2" for room in split_plan.rooms)
    assert all(room.mesh for room in split_plan.rooms)
    assert [room for room, _ in pairs] == split_plan.rooms


def test_recomputing_keeps_identity_and_texture(split_plan):
    reconcile_rooms(split_plan, detect_rooms(split_plan))
    split_plan.rooms[0].texture = "tiles"
    ids = [room.id for room in split_plan.rooms]
    handles = [room.mesh for room in split_plan.rooms]

    reconcile_rooms(split_plan, detect_rooms(split_plan))

    assert [room.id for room in split_plan.rooms] == ids
    assert [room.texture for room in split_plan.rooms] == ["tiles", "wood2"]
    assert all(new != old for new, old in zip((r.mesh for r in split_plan.rooms), handles))


def test_breaking_a_loop_removes_its_room(split_plan):
    reconcile_rooms(split_plan, detect_rooms(split_plan))
    left = split_plan.rooms[0]

    # Remove the outer wall on the right-hand side
    split_plan.walls = [w for w in split_plan.walls if w.start != (4.0, 0.0)]
    reconcile_rooms(split_plan, detect_rooms(split_plan))

    assert split_plan.rooms == [left]
    assert left.center == Centroid(1.0, 1.0, 0.015)


def test_removing_the_middle_wall_replaces_both_rooms(split_plan):
    reconcile_rooms(split_plan, detect_rooms(split_plan))
    old_ids = {room.id for room in split_plan.rooms}

    split_plan.walls = [w for w in split_plan.walls if w != Wall(start=(2.0, 0.0), end=(2.0, 2.0))]
    reconcile_rooms(split_plan, detect_rooms(split_plan))

    assert len(split_plan.rooms) == 1
    assert split_plan.rooms[0].center == Centroid(2.0, 1.0, 0.015)
    assert split_plan.rooms[0].id not in old_ids


def test_rooms_sharing_a_center_each_keep_an_entry(diagonal_plan):
    reconcile_rooms(diagonal_plan, detect_rooms(diagonal_plan))
    assert len(diagonal_plan.rooms) == 2
    ids = [room.id for room in diagonal_plan.rooms]

    reconcile_rooms(diagonal_plan, detect_rooms(diagonal_plan))

    assert [room.id for room in diagonal_plan.rooms] == ids


def test_persisted_room_from_previous_session_is_matched(square_plan):
    stored = Room(center=Centroid(0.5, 0.5, 0.015), texture="marble", mesh="old", id="kitchen")
    stale = Room(center=Centroid(9.0, 9.0, 0.015), texture="tiles", mesh="gone", id="stale")
    square_plan.rooms = [stored, stale]

    handles = iter(["h1", "h2"])
    pairs = reconcile_rooms(square_plan, detect_rooms(square_plan), new_handle=lambda: next(handles))

    assert square_plan.rooms == [stored]
    assert stored.texture == "marble"
    assert stored.mesh == "h1"
    assert pairs[0][0] is stored


def test_rooms_around_interior_junction_keep_their_textures(tjunction_plan):
    reconcile_rooms(tjunction_plan, detect_rooms(tjunction_plan))
    assert len(tjunction_plan.rooms) == 3
    for room, texture in zip(tjunction_plan.rooms, ["tiles", "marble", "carpet"]):
        room.texture = texture
    before = {(room.center.x, room.center.y): (room.id, room.texture) for room in tjunction_plan.rooms}

    pairs = reconcile_rooms(tjunction_plan, detect_rooms(tjunction_plan))

    after = {(room.center.x, room.center.y): (room.id, room.texture) for room, _ in pairs}
    assert after == before
    assert len(tjunction_plan.rooms) == 3


def test_grid_rooms_keep_their_textures(grid_plan):
    reconcile_rooms(grid_plan, detect_rooms(grid_plan))
    grid_plan.rooms[2].texture = "tiles"
    textures = [room.texture for room in grid_plan.rooms]

    reconcile_rooms(grid_plan, detect_rooms(grid_plan))

    assert len(grid_plan.rooms) == 4
    assert [room.texture for room in grid_plan.rooms] == textures
    assert textures.count("tiles") == 1
