from __future__ import annotations

import numpy as np
import pytest

from engine.core.geometry import Geometry


def test_from_lines_builds_offsets() -> None:
    a = [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]]
    b = np.array([[5.0, 5.0], [6.0, 6.0]])
    g = Geometry.from_lines([a, b])
    assert g.coords.shape == (5, 2)
    assert g.offsets.tolist() == [0, 3, 5]
    assert len(g) == 2
    assert g.n_vertices == 5
    assert g.n_segments == 3


def test_constructor_normalizes_dtype_and_contiguity() -> None:
    coords = np.asfortranarray(np.array([[0.0, 0.0], [1.0, 2.0]], dtype=np.float32))
    g = Geometry(coords, np.array([0, 2], dtype=np.int64))
    assert g.coords.dtype == np.float64
    assert g.offsets.dtype == np.int32
    assert g.coords.flags.c_contiguous is True


@pytest.mark.parametrize(
    "coords, offsets",
    [
        (np.zeros((2, 3)), np.array([0, 2])),
        (np.zeros((2, 2)), np.array([0, 1])),
        (np.zeros((2, 2)), np.array([1, 2])),
        (np.zeros((2, 2)), np.array([], dtype=np.int32)),
    ],
)
def test_constructor_rejects_invalid_input(coords, offsets) -> None:
    with pytest.raises(ValueError):
        Geometry(coords, offsets)


def test_from_lines_rejects_bad_shape() -> None:
    with pytest.raises(ValueError):
        Geometry.from_lines([np.zeros((3, 3))])


def test_empty_geometry() -> None:
    g = Geometry.from_lines([])
    assert g.is_empty
    assert g.coords.shape == (0, 2)
    assert g.offsets.tolist() == [0]
    assert g.total_length() == 0.0


def test_translate_scale_are_pure() -> None:
    g0 = Geometry.from_lines([[[0.0, 0.0], [2.0, 0.0]]])
    g1 = g0.translate(1.0, 2.0)
    g2 = g0.scale(2.0, center=(1.0, 0.0))
    assert g1 is not g0
    np.testing.assert_allclose(g1.coords, [[1.0, 2.0], [3.0, 2.0]])
    np.testing.assert_allclose(g2.coords, [[-1.0, 0.0], [3.0, 0.0]])
    np.testing.assert_allclose(g0.coords, [[0.0, 0.0], [2.0, 0.0]])


def test_concat_shifts_offsets() -> None:
    a = Geometry.from_lines([[[0.0, 0.0], [1.0, 0.0]]])
    b = Geometry.from_lines([[[0.0, 1.0], [1.0, 1.0], [2.0, 1.0]]])
    c = a + b
    assert c.offsets.tolist() == [0, 2, 5]
    assert (Geometry.from_lines([]) + a).offsets.tolist() == [0, 2]


def test_as_arrays_view_is_read_only() -> None:
    g = Geometry.from_lines([[[0.0, 0.0], [1.0, 0.0]]])
    coords, _ = g.as_arrays()
    with pytest.raises(ValueError):
        coords[0, 0] = 9.0
    coords_copy, _ = g.as_arrays(copy=True)
    coords_copy[0, 0] = 9.0
    assert g.coords[0, 0] == 0.0


def test_total_length_sums_polylines() -> None:
    g = Geometry.from_lines([[[0.0, 0.0], [3.0, 4.0]], [[0.0, 0.0], [0.0, 1.0], [1.0, 1.0]]])
    assert g.total_length() == pytest.approx(7.0)
    assert [line.shape[0] for line in g.lines()] == [2, 3]


def test_bounds_and_empty_bounds() -> None:
    g = Geometry.from_lines([[[1.0, -2.0], [4.0, 3.0]], [[0.5, 0.0], [2.0, 1.0]]])
    assert g.bounds() == (0.5, -2.0, 4.0, 3.0)
    with pytest.raises(ValueError):
        Geometry.empty().bounds()


def test_total_length_skips_empty_lines_between() -> None:
    g = Geometry(np.array([[0.0, 0.0], [1.0, 0.0], [5.0, 5.0], [5.0, 6.0]]), np.array([0, 2, 2, 4]))
    assert g.total_length() == pytest.approx(2.0)


def test_arrays_are_frozen_and_input_is_copied() -> None:
    src = np.array([[0.0, 0.0], [1.0, 0.0]])
    g = Geometry(src, np.array([0, 2]))
    with pytest.raises(ValueError):
        g.coords[0, 0] = 5.0
    with pytest.raises(ValueError):
        g.offsets[0] = 1
    src[0, 0] = 7.0
    assert g.coords[0, 0] == 0.0
    assert src.flags.writeable
