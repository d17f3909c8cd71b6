"""
どこで: `engine.core.geometry`。
何を: Koch 曲線/スノーフレーク全体を配列で持つ 2D ポリライン集合 `Geometry`。
なぜ: 逐次描画は線分ジェネレータで足りるが、形状 API・テスト・一括処理では
     「頂点配列 + 区切り位置」の形で曲線全体を扱いたいため。

表現:

    coords  (N, 2) float64   全ポリラインの頂点を連結したもの
    offsets (M+1,) int32     i 本目は coords[offsets[i]:offsets[i+1]]、offsets[-1] == N

    例: 線0 = 3 点、線1 = 2 点
        coords  = [[0,0], [1,0], [1,1], [2,2], [3,2]]
        offsets = [0, 3, 5]

空の集合は `coords.shape == (0, 2)`, `offsets == [0]`。変換メソッドは常に新しいインスタンスを返す。
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

import numpy as np

LineLike = np.ndarray | Sequence[Sequence[float]]


def _validated(coords: np.ndarray, offsets: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    xy = np.array(coords, dtype=np.float64, order="C")
    idx = np.array(offsets, dtype=np.int32, order="C")
    if xy.ndim != 2 or xy.shape[1] != 2:
        raise ValueError(f"coords must have shape (N, 2), got {xy.shape}")
    if idx.ndim != 1 or idx.size == 0:
        raise ValueError(f"offsets must be a non-empty 1-D array, got shape {idx.shape}")
    if idx[0] != 0 or idx[-1] != xy.shape[0]:
        raise ValueError(f"offsets must start at 0 and end at {xy.shape[0]}, got [{idx[0]}, ..., {idx[-1]}]")
    if (np.diff(idx) < 0).any():
        raise ValueError("offsets must be non-decreasing")
    # 書き込み不可（`G` のキャッシュで同じインスタンスが共有される）
    xy.flags.writeable = False
    idx.flags.writeable = False
    return xy, idx


class Geometry:
    """2D ポリライン集合（`coords` と `offsets` の組）。"""

    __slots__ = ("coords", "offsets")

    def __init__(self, coords: np.ndarray, offsets: np.ndarray) -> None:
        self.coords, self.offsets = _validated(coords, offsets)

    @classmethod
    def empty(cls) -> "Geometry":
        return cls(np.empty((0, 2), dtype=np.float64), np.zeros(1, dtype=np.int32))

    @classmethod
    def from_lines(cls, lines: Iterable[LineLike]) -> "Geometry":
        """点列の並びから組み立てる。各点列は `(K, 2)` でなければ `ValueError`。"""
        arrays = [np.asarray(line, dtype=np.float64) for line in lines]
        for arr in arrays:
            if arr.ndim != 2 or arr.shape[1] != 2:
                raise ValueError(f"each line must have shape (K, 2), got {arr.shape}")
        if not arrays:
            return cls.empty()
        offsets = np.concatenate(([0], np.cumsum([len(a) for a in arrays])))
        return cls(np.concatenate(arrays), offsets)

    def as_arrays(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        """`(coords, offsets)`。既定は書き込み不可のビュー、`copy=True` で独立した配列。"""
        if copy:
            return self.coords.copy(), self.offsets.copy()
        views = (self.coords.view(), self.offsets.view())
        for v in views:
            v.flags.writeable = False
        return views

    def lines(self) -> Iterator[np.ndarray]:
        for start, stop in zip(self.offsets[:-1], self.offsets[1:]):
            yield self.coords[start:stop]

    @property
    def is_empty(self) -> bool:
        return self.coords.shape[0] == 0

    def _with_coords(self, coords: np.ndarray) -> "Geometry":
        return Geometry(coords, self.offsets.copy())

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "Geometry":
        return self._with_coords(self.coords + (dx, dy))

    def scale(
        self, sx: float = 1.0, sy: float | None = None, center: tuple[float, float] = (0.0, 0.0)
    ) -> "Geometry":
        """`center` 基準で拡大縮小（`sy` 省略時は `sx` と同じ）。"""
        factor = np.array([sx, sx if sy is None else sy])
        pivot = np.asarray(center, dtype=np.float64)
        return self._with_coords((self.coords - pivot) * factor + pivot)

    def bounds(self) -> tuple[float, float, float, float]:
        """`(min_x, min_y, max_x, max_y)`。空なら `ValueError`。"""
        if self.is_empty:
            raise ValueError("empty geometry has no bounds")
        lo = self.coords.min(axis=0)
        hi = self.coords.max(axis=0)
        return float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1])

    def concat(self, other: "Geometry") -> "Geometry":
        """`other` の線を後ろに足す。"""
        shifted = other.offsets[1:] + self.n_vertices
        return Geometry(
            np.concatenate((self.coords, other.coords)),
            np.concatenate((self.offsets, shifted)),
        )

    def __add__(self, other: "Geometry") -> "Geometry":
        return self.concat(other)

    def __len__(self) -> int:
        return self.offsets.shape[0] - 1

    @property
    def n_vertices(self) -> int:
        return self.coords.shape[0]

    @property
    def n_segments(self) -> int:
        per_line = np.diff(self.offsets)
        return int(np.clip(per_line - 1, 0, None).sum())

    def total_length(self) -> float:
        """全線分の長さの和（線と線の間はつながないで数える）。"""
        if self.n_vertices < 2:
            return 0.0
        steps = np.hypot(*np.diff(self.coords, axis=0).T)
        # 線の境目をまたぐ差分（前の線の終点 → 次の線の始点）を除く
        inner = np.ones(steps.shape[0], dtype=bool)
        joins = self.offsets[1:-1] - 1
        inner[joins[(joins >= 0) & (joins < inner.shape[0])]] = False
        return float(steps[inner].sum())

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Geometry(vertices={self.n_vertices}, lines={len(self)})"


__all__ = ["Geometry", "LineLike"]
