from app.models.feature_models import Point
from app.utils.geo import LINE_BUFFER_OFFSET_DEG, line_to_polygon, overpass_to_points


def _coords(points):
    return [(p.lat, p.lng) for p in points]


def test_two_point_line_becomes_five_point_ring():
    a = Point(lat=10.0, lng=20.0)
    b = Point(lat=11.0, lng=21.0)
    off = LINE_BUFFER_OFFSET_DEG

    ring = line_to_polygon([a, b])

    assert _coords(ring) == [
        (10.0, 20.0),
        (11.0, 21.0),
        (11.0 + off, 21.0 + off),
        (10.0 + off, 20.0 + off),
        (10.0, 20.0),
    ]


def test_ring_is_closed_and_sized_2n_plus_1():
    line = [Point(lat=1.0, lng=1.0), Point(lat=2.0, lng=2.0), Point(lat=3.0, lng=1.5)]
    ring = line_to_polygon(line)

    assert len(ring) == 7
    assert _coords(ring[:1]) == _coords(ring[-1:])


def test_input_is_not_mutated():
    line = [Point(lat=1.0, lng=1.0), Point(lat=2.0, lng=2.0)]
    line_to_polygon(line)
    assert _coords(line) == [(1.0, 1.0), (2.0, 2.0)]


def test_degenerate_lines_are_returned_unchanged():
    single = [Point(lat=1.0, lng=1.0)]
    assert line_to_polygon(single) is single
    assert line_to_polygon([]) == []


def test_custom_offset():
    ring = line_to_polygon([Point(lat=0.0, lng=0.0), Point(lat=1.0, lng=0.0)], offset=0.5)
    assert _coords(ring)[2:4] == [(1.5, 0.5), (0.5, 0.5)]


def test_overpass_to_points_relabels_lon():
    pts = overpass_to_points([{"lat": 1.5, "lon": 2.5}, {"lat": 3, "lon": 4}])
    assert _coords(pts) == [(1.5, 2.5), (3.0, 4.0)]


def test_overpass_to_points_drops_malformed_nodes():
    pts = overpass_to_points([{"lat": 1.0}, None, {"lat": "x", "lon": 1.0}, {"lat": 1.0, "lon": 2.0}])
    assert _coords(pts) == [(1.0, 2.0)]
    assert overpass_to_points("nope") == []


def test_overpass_to_points_drops_unrepresentable_numbers():
    pts = overpass_to_points(
        [
            {"lat": 10**400, "lon": 0},
            {"lat": 1.0, "lon": float("inf")},
            {"lat": float("nan"), "lon": 1.0},
            {"lat": 3, "lon": 4},
        ]
    )
    assert _coords(pts) == [(3.0, 4.0)]
