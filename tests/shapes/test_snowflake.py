"""
どこで: tests（shapes/snowflake）。
何を: 三角形の配置（中央寄せ/正三角形）、辺の走査順、閉路性、突起の向き、周長/面積を確認。
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from api import G
from engine.core.point import dist
from shapes.koch import iter_koch_segments
from shapes.snowflake import (
    iter_snowflake_segments,
    snowflake_edges,
    snowflake_properties,
    snowflake_triangle,
)


def test_triangle_fits_square_canvas() -> None:
    a, b, c = snowflake_triangle(1000, 1000)
    assert a.y == pytest.approx(250.0)
    assert b.y == pytest.approx(250.0)
    assert c.x == pytest.approx(500.0)
    assert c.y == pytest.approx(1000.0)
    assert a.x + b.x == pytest.approx(1000.0)


def test_triangle_is_equilateral() -> None:
    a, b, c = snowflake_triangle(640, 640)
    assert dist(a, b) == pytest.approx(dist(b, c))
    assert dist(b, c) == pytest.approx(dist(c, a))


def test_triangle_is_centered_on_wide_canvas() -> None:
    square = snowflake_triangle(1000, 1000)
    wide = snowflake_triangle(1200, 1000)
    for s, w in zip(square, wide):
        assert w.x == pytest.approx(s.x + 100.0)
        assert w.y == pytest.approx(s.y)


def test_triangle_rejects_empty_canvas() -> None:
    with pytest.raises(ValueError):
        snowflake_triangle(0, 100)


def test_edges_are_traversed_b_a_then_c_b_then_a_c() -> None:
    a, b, c = snowflake_triangle(300, 300)
    assert snowflake_edges((a, b, c)) == ((b, a), (c, b), (a, c))


@pytest.mark.parametrize("depth", [0, 1, 3])
def test_three_edges_close_the_figure(depth: int) -> None:
    tri = snowflake_triangle(500, 500)
    segs = list(iter_snowflake_segments(tri, depth))
    n = 4**depth
    assert len(segs) == 3 * n
    edges = [segs[i * n : (i + 1) * n] for i in range(3)]
    for edge in edges:
        for prev, nxt in zip(edge, edge[1:]):
            assert prev.end.x == pytest.approx(nxt.start.x, abs=1e-4)
            assert prev.end.y == pytest.approx(nxt.start.y, abs=1e-4)

    # 各辺の終点が別の辺の始点になっており、辿ると出発点へ戻る
    by_start = {edge[0].start: edge for edge in edges}
    assert set(by_start) == {edge[-1].end for edge in edges}
    current = edges[0]
    for _ in range(2):
        current = by_start[current[-1].end]
    assert current[-1].end == edges[0][0].start


def test_bumps_point_outward() -> None:
    a, b, c = snowflake_triangle(1000, 1000)
    centroid_y = (a.y + b.y + c.y) / 3.0
    for p0, p1 in snowflake_edges((a, b, c)):
        apex = list(iter_koch_segments(p0, p1, 0, 1))[1].end
        mid = ((p0.x + p1.x) / 2.0, (p0.y + p1.y) / 2.0)
        centroid = ((a.x + b.x + c.x) / 3.0, centroid_y)
        # 頂点は辺の中点より重心から遠い
        assert math.dist((apex.x, apex.y), centroid) > math.dist(mid, centroid)


def test_properties_at_depth_zero_and_one() -> None:
    perim0, area0 = snowflake_properties(3.0, 0)
    assert perim0 == pytest.approx(9.0)
    assert area0 == pytest.approx(math.sqrt(3.0) / 4.0 * 9.0)
    perim1, area1 = snowflake_properties(3.0, 1)
    assert perim1 == pytest.approx(12.0)
    assert area1 == pytest.approx(area0 * 4.0 / 3.0)


def test_area_converges_to_eight_fifths() -> None:
    _, area0 = snowflake_properties(1.0, 0)
    _, area_inf = snowflake_properties(1.0, 60)
    assert area_inf == pytest.approx(area0 * 8.0 / 5.0)


def test_snowflake_shape_matches_perimeter() -> None:
    tri = snowflake_triangle(800, 800)
    side = dist(tri[0], tri[1])
    g = G.koch_snowflake(width=800, height=800, depth=3)
    assert len(g) == 3
    assert g.n_segments == 3 * 4**3
    assert g.total_length() == pytest.approx(snowflake_properties(side, 3)[0], rel=1e-9)
    a, b, c = tri
    lines = list(g.lines())
    np.testing.assert_allclose(lines[0][[0, -1]], [[b.x, b.y], [a.x, a.y]])
    np.testing.assert_allclose(lines[1][[0, -1]], [[c.x, c.y], [b.x, b.y]])
    np.testing.assert_allclose(lines[2][[0, -1]], [[a.x, a.y], [c.x, c.y]])
