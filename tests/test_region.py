from spacefighter.region import Region
from spacefighter.vector2 import Vector2


def test_default_region_is_unit_square_at_origin():
    region = Region()
    assert (region.x, region.y, region.width, region.height) == (0, 0, 1, 1)


def test_edges_follow_position_and_size():
    region = Region(2, 3, 10, 20)
    assert region.top == region.y
    assert region.left == region.x
    assert region.bottom == region.y + region.height
    assert region.right == region.x + region.width


def test_corners_combine_edges():
    region = Region(5, 7, 4, 6)
    assert region.top_left == (region.left, region.top)
    assert region.top_right == (region.right, region.top)
    assert region.bottom_left == (region.left, region.bottom)
    assert region.bottom_right == (region.right, region.bottom)


def test_center_is_midpoint_of_corners():
    region = Region(0, 0, 10, 4)
    assert region.center == Vector2(5, 2)


def test_from_corner_matches_component_constructor():
    assert Region.from_corner((1, 2), (3, 4)) == Region(1, 2, 3, 4)


def test_set_replaces_components():
    region = Region()
    region.set(9, 8, 7, 6)
    assert region == Region(9, 8, 7, 6)


def test_translate_by_components_and_by_point():
    region = Region(1, 1, 5, 5)
    region.translate(3, -1)
    assert (region.x, region.y) == (4, 0)
    region.translate((-4, 0))
    assert (region.x, region.y) == (0, 0)
    assert (region.width, region.height) == (5, 5)