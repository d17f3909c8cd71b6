from __future__ import annotations

import numpy as np
import pytest

from api import G, Geometry


@pytest.fixture(autouse=True)
def _fresh_cache():
    G.clear_cache()
    yield
    G.clear_cache()


@pytest.mark.parametrize("depth", [0, 1, 2, 4])
def test_koch_curve_vertex_count(depth: int) -> None:
    g = G.koch_curve(start=(0.0, 0.0), end=(90.0, 0.0), depth=depth)
    assert isinstance(g, Geometry)
    assert len(g) == 1
    assert g.n_vertices == 4**depth + 1
    coords, _ = g.as_arrays()
    np.testing.assert_allclose(coords[0], [0.0, 0.0])
    np.testing.assert_allclose(coords[-1], [90.0, 0.0])


def test_repeated_calls_hit_the_cache() -> None:
    a = G.koch_curve(start=(0, 0), end=(10, 0), depth=2)
    b = G.koch_curve(start=(0, 0), end=(10, 0), depth=2)
    assert a is b
    info = G.cache_info()
    assert info["hits"] == 1
    assert info["misses"] == 1
    assert info["size"] == 1


def test_list_and_dir_contain_builtin_shapes() -> None:
    assert {"koch_curve", "koch_snowflake"} <= set(G.list_shapes())
    assert "koch_snowflake" in dir(G)


def test_unknown_shape_is_attribute_error() -> None:
    with pytest.raises(AttributeError):
        G.no_such_shape  # noqa: B018


def test_from_lines_and_empty() -> None:
    g = G.from_lines([[(0, 0), (1, 0), (1, 1)]])
    assert g.n_segments == 2
    assert G.empty().is_empty


def test_describe_exposes_param_meta() -> None:
    assert G.describe("KochCurve")["depth"]["type"] == "integer"
    with pytest.raises(KeyError):
        G.describe("nope")


def test_lru_evicts_oldest_entry() -> None:
    for d in range(33):
        G.koch_curve(start=(0, 0), end=(float(d + 1), 0), depth=0)
    assert G.cache_info()["size"] == 32
    G.koch_curve(start=(0, 0), end=(1.0, 0), depth=0)
    assert G.cache_info()["misses"] == 34


def test_cached_geometry_cannot_be_modified_in_place() -> None:
    g = G.koch_curve(start=(0, 0), end=(9, 0), depth=1)
    with pytest.raises(ValueError):
        g.coords[0] = (100.0, 100.0)
    again = G.koch_curve(start=(0, 0), end=(9, 0), depth=1)
    np.testing.assert_allclose(again.coords[0], [0.0, 0.0])
