"""
どこで: `shapes.koch`。
何を: Koch 曲線の生成器。2 端点と目標深さから、曲線を近似する線分列を始点側から順に生成する。
なぜ: 幾何（線分の列挙）と描画（キャンバスへのストローク）を分離し、線分列だけでテストできるようにするため。

構成（1 段の分割）:

    p0 ──── pa    pb ──── p1
              \\  /
               pn            pa = p0 から 1/3, pb = 2/3, pm = 中点
                             pn = pm から法線方向へ d3 * sin60°（d3 = |pa pb|）

子線分は (p0, pa), (pa, pn), (pn, pb), (pb, p1) の順。法線は (p1 - p0) の向きを +90° 回した方向。

提供物:
- `iter_koch_segments(p0, p1, current_depth, max_depth)`: 遅延線分列（明示スタックによる深さ優先）。
- `draw_koch_line(canvas, ...)`: 上記をキャンバスへストロークするシンク。
- `koch_points(p0, p1, depth)`: NumPy で 1 段ずつ分割したポリライン（同じ曲線）。
- `koch_curve`: 形状レジストリ登録版（`Geometry` を返す）。
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterator

import numpy as np

from engine.core.geometry import Geometry
from engine.core.point import Point, Segment, dist, midpoint

from .registry import shape

if TYPE_CHECKING:
    from engine.render.canvas import Canvas

SIN_60 = 0.86602540378
HALF_PI = math.pi / 2.0

# 形状 API から要求できる深さの上限（4^D 頂点の配列を確保するため）
MAX_SHAPE_DEPTH = 10


def _koch_points_of(p0: Point, p1: Point) -> tuple[Point, Point, Point]:
    """線分 p0-p1 の分割点 `(pa, pn, pb)` を返す。"""
    pa = Point((2.0 * p0.x + p1.x) / 3.0, (2.0 * p0.y + p1.y) / 3.0)
    pb = Point((2.0 * p1.x + p0.x) / 3.0, (2.0 * p1.y + p0.y) / 3.0)
    pm = midpoint(p0, p1)

    angle = math.atan2(p1.y - p0.y, p1.x - p0.x) + HALF_PI
    d3 = dist(pa, pb)
    pn = Point(pm.x + d3 * SIN_60 * math.cos(angle), pm.y + d3 * SIN_60 * math.sin(angle))
    return pa, pn, pb


def iter_koch_segments(
    p0: Point, p1: Point, current_depth: int = 0, max_depth: int = 0
) -> Iterator[Segment]:
    """p0 → p1 の Koch 曲線（深さ `max_depth`）を近似する線分を順に返す。

    Parameters
    ----------
    p0, p1 : Point
        曲線の始点/終点。
    current_depth : int, default 0
        この呼び出しの深さ。トップレベルでは 0。
    max_depth : int, default 0
        分割の上限。`current_depth >= max_depth` の線分はそれ以上分割せずに返す。

    Returns
    -------
    Iterator[Segment]
        `4 ** max(0, max_depth - current_depth)` 本の線分。i 本目の終点は i+1 本目の始点に一致する。

    Notes
    -----
    再帰の代わりに (線分, 深さ) の明示スタックで深さ優先に辿る。子は逆順に積み、
    取り出し順が始点側からになるようにする。p0 == p1 は長さ 0 の線分をそのまま返す。
    """
    stack: list[tuple[Point, Point, int]] = [(p0, p1, current_depth)]
    while stack:
        a, b, depth = stack.pop()
        if depth >= max_depth:
            yield Segment(a, b)
            continue
        pa, pn, pb = _koch_points_of(a, b)
        child = depth + 1
        stack.append((pb, b, child))
        stack.append((pn, pb, child))
        stack.append((pa, pn, child))
        stack.append((a, pa, child))


def draw_koch_line(
    canvas: "Canvas",
    p0: Point,
    p1: Point,
    current_depth: int,
    max_depth: int,
    *,
    color: object | None = None,
    width: float = 1.0,
) -> int:
    """Koch 曲線の全線分を `canvas` にストロークし、描いた線分数を返す。

    `color` 省略時はキャンバスの既定線色を使う。
    """
    return canvas.stroke_segments(
        iter_koch_segments(p0, p1, current_depth, max_depth), color=color, width=width
    )


def koch_points(p0: Point, p1: Point, depth: int) -> np.ndarray:
    """Koch 曲線の頂点列 `(4**depth + 1, 2)` を返す（`iter_koch_segments` と同じ曲線）。

    各段で全線分を一括で 4 分割する。負の深さは 0 として扱う。
    """
    pts = np.array([[p0.x, p0.y], [p1.x, p1.y]], dtype=np.float64)
    for _ in range(max(0, int(depth))):
        a = pts[:-1]
        b = pts[1:]
        pa = (2.0 * a + b) / 3.0
        pb = (2.0 * b + a) / 3.0
        pm = (a + b) / 2.0
        d = b - a
        angle = np.arctan2(d[:, 1], d[:, 0]) + HALF_PI
        d3 = np.hypot(pb[:, 0] - pa[:, 0], pb[:, 1] - pa[:, 1])
        pn = pm + (d3 * SIN_60)[:, None] * np.column_stack([np.cos(angle), np.sin(angle)])

        out = np.empty((4 * a.shape[0] + 1, 2), dtype=np.float64)
        out[0:-1:4] = a
        out[1::4] = pa
        out[2::4] = pn
        out[3::4] = pb
        out[-1] = pts[-1]
        pts = out
    return pts


@shape
def koch_curve(
    *,
    start: tuple[float, float] = (0.0, 0.0),
    end: tuple[float, float] = (1.0, 0.0),
    depth: int | float = 3,
) -> Geometry:
    """`start` → `end` の Koch 曲線を 1 本のポリラインとして生成します。

    引数:
        start, end: 端点 (x, y)。
        depth: 分割深さ（0–10 に丸め）。
    """
    d = max(0, min(MAX_SHAPE_DEPTH, int(round(float(depth)))))
    pts = koch_points(Point(float(start[0]), float(start[1])), Point(float(end[0]), float(end[1])), d)
    return Geometry.from_lines([pts])


koch_curve.__param_meta__ = {
    "depth": {"type": "integer", "min": 0, "max": MAX_SHAPE_DEPTH, "step": 1},
}


__all__ = [
    "SIN_60",
    "iter_koch_segments",
    "draw_koch_line",
    "koch_points",
    "koch_curve",
]
