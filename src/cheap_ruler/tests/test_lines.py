import pytest

from cheap_ruler import InvalidGeometry, Point, PointOnLine, create
from cheap_ruler.tests.fixtures.lines_fixture import make_city_line, make_grid_line


def assert_points_close(actual, expected, abs_tol=1e-12):
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        assert a[0] == pytest.approx(e[0], abs=abs_tol)
        assert a[1] == pytest.approx(e[1], abs=abs_tol)


# ----------------------------------------------------------------------
# line_distance / along
# ----------------------------------------------------------------------

def test_line_distance_short_lines():
    r = create(0)
    assert r.line_distance([]) == 0.0
    assert r.line_distance([(3.0, 4.0)]) == 0.0


def test_line_distance_grid():
    r = create(0)
    assert r.line_distance(make_grid_line()) == pytest.approx(3 * r.ky + r.kx)


def test_line_distance_is_sum_of_segments():
    r = create(32.8351, 'meters')
    line = make_city_line()
    expected = sum(r.distance(line[i], line[i + 1]) for i in range(len(line) - 1))
    assert r.line_distance(line) == pytest.approx(expected)


def test_along_start_and_end():
    r = create(32.8351)
    line = make_city_line()
    assert r.along(line, 0) == Point(*line[0])
    assert r.along(line, -5.0) == Point(*line[0])
    assert r.along(line, r.line_distance(line) + 1e-6) == Point(*line[-1])


def test_along_interpolates():
    r = create(0)
    p = r.along(make_grid_line(), 1.5 * r.ky)
    assert p.x == pytest.approx(0.0)
    assert p.y == pytest.approx(1.5)


def test_along_empty_line():
    r = create(0)
    with pytest.raises(InvalidGeometry):
        r.along([], 1.0)


# ----------------------------------------------------------------------
# point_on_line
# ----------------------------------------------------------------------

def test_point_on_line_interior():
    r = create(0)
    res = r.point_on_line(make_grid_line(), (-0.1, 0.5))
    assert isinstance(res, PointOnLine)
    assert res.index == 0
    assert res.t == pytest.approx(0.5)
    assert_points_close([res.point], [(0.0, 0.5)])


def test_point_on_line_past_end():
    r = create(0)
    res = r.point_on_line(make_grid_line(), (2.0, 3.5))
    assert res.index == 3
    assert res.t == pytest.approx(2.0)
    assert res.point == Point(1.0, 3.0)


def test_point_on_line_before_start():
    r = create(0)
    res = r.point_on_line(make_grid_line(), (0.0, -0.5))
    assert res.index == 0
    assert res.t == pytest.approx(-0.5)
    assert res.point == Point(0.0, 0.0)


def test_point_on_line_zero_length_segment():
    r = create(0)
    line = [(0.0, 0.0), (0.0, 0.0), (0.0, 1.0)]
    res = r.point_on_line(line, (0.1, 0.5))
    assert res.index == 1
    assert_points_close([res.point], [(0.0, 0.5)])

    res = r.point_on_line([(0.0, 0.0), (0.0, 0.0)], (1.0, 1.0))
    assert res == PointOnLine(Point(0.0, 0.0), 0, 0.0)


def test_point_on_line_needs_two_points():
    r = create(0)
    with pytest.raises(InvalidGeometry):
        r.point_on_line([(0.0, 0.0)], (1.0, 1.0))


def test_point_on_line_result_is_on_line():
    r = create(32.8351)
    line = make_city_line()
    res = r.point_on_line(line, (-96.9201, 32.8384))
    assert 0 <= res.index < len(line) - 1
    # the projected point lies on its segment, so it splits it exactly
    a = line[res.index]
    b = line[res.index + 1]
    seg = r.distance(a, b)
    assert r.distance(a, res.point) + r.distance(res.point, b) == pytest.approx(seg)


# ----------------------------------------------------------------------
# line_slice
# ----------------------------------------------------------------------

def test_line_slice_across_segments():
    r = create(0)
    sl = r.line_slice((0.1, 0.5), (0.1, 2.5), make_grid_line())
    assert_points_close(sl, [(0.0, 0.5), (0.0, 1.0), (0.0, 2.0), (0.0, 2.5)])


def test_line_slice_reversed_arguments():
    r = create(0)
    line = make_grid_line()
    forward = r.line_slice((0.1, 0.5), (0.1, 2.5), line)
    backward = r.line_slice((0.1, 2.5), (0.1, 0.5), line)
    assert forward == backward


def test_line_slice_start_on_vertex_not_duplicated():
    r = create(0)
    sl = r.line_slice((0.1, 1.0), (0.1, 2.5), make_grid_line())
    assert_points_close(sl, [(0.0, 1.0), (0.0, 2.0), (0.0, 2.5)])


def test_line_slice_within_one_segment():
    r = create(0)
    sl = r.line_slice((0.1, 0.2), (0.1, 0.7), make_grid_line())
    assert_points_close(sl, [(0.0, 0.2), (0.0, 0.7)])


def test_line_slice_stop_on_vertex():
    r = create(0)
    sl = r.line_slice((0.1, 0.5), (0.1, 2.0), make_grid_line())
    assert_points_close(sl, [(0.0, 0.5), (0.0, 1.0), (0.0, 2.0)])


def test_line_slice_needs_two_points():
    r = create(0)
    with pytest.raises(InvalidGeometry):
        r.line_slice((0.0, 0.0), (1.0, 1.0), [(0.0, 0.0)])


# ----------------------------------------------------------------------
# line_slice_along
# ----------------------------------------------------------------------

def test_line_slice_along_full_line():
    r = create(32.8351)
    line = make_city_line()
    sl = r.line_slice_along(0, r.line_distance(line), line)
    assert_points_close(sl, line, abs_tol=1e-9)


def test_line_slice_along_middle():
    r = create(0)
    sl = r.line_slice_along(0.5 * r.ky, 2.5 * r.ky, make_grid_line())
    assert_points_close(sl, [(0.0, 0.5), (0.0, 1.0), (0.0, 2.0), (0.0, 2.5)], abs_tol=1e-9)


def test_line_slice_along_start_past_end():
    r = create(0)
    line = make_grid_line()
    total = r.line_distance(line)
    assert r.line_slice_along(total, total + 1.0, line) == []
    assert r.line_slice_along(total + 1.0, total + 2.0, line) == []


def test_line_slice_along_start_and_stop_at_end():
    r = create(0)
    line = make_grid_line()
    total = r.line_distance(line)
    sl = r.line_slice_along(total, total, line)
    assert_points_close(sl, [line[-1]], abs_tol=1e-9)


def test_line_slice_along_zero_length_segment():
    r = create(0)
    sl = r.line_slice_along(0.0, 0.0, [(0.0, 0.0), (0.0, 0.0), (0.0, 1.0)])
    assert sl == [Point(0.0, 0.0)]
