"""
どこで: `shapes.snowflake`。
何を: Koch スノーフレーク用の正三角形の配置計算、3 辺の走査順、スノーフレーク形状と周長/面積。
なぜ: ドライバ（`engine.runtime.animation`）と形状 API が同じ頂点/辺順を共有するため。

辺の走査順は B→A, C→B, A→C（閉路）。キャンバス座標（Y 下向き）では三角形は下向きに置かれ、
各辺の法線（+90°）が外側を向くため、突起は常に三角形の外に生える。
"""

from __future__ import annotations

import math
from itertools import chain
from typing import Iterator

from engine.core.geometry import Geometry
from engine.core.point import Point, Segment

from .koch import MAX_SHAPE_DEPTH, SIN_60, iter_koch_segments, koch_points
from .registry import shape

Triangle = tuple[Point, Point, Point]
Edge = tuple[Point, Point]


def snowflake_triangle(width: int, height: int) -> Triangle:
    """キャンバスに収まる正三角形の頂点 `(A, B, C)` を返す。

    一辺 `L = min(width, height)` の三角形 A=(0,0), B=(L,0), C=(L/2, L·sin60) を
    パディング分だけ平行移動してから `1 / (sin60 · 4/3)` 倍に縮め、
    最後に短辺側の余白を左右/上下に等分して中央へ寄せる。
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas size must be positive, got: {(width, height)}")
    length = float(min(width, height))

    vert_scale = 1.0 / (SIN_60 * (4.0 / 3.0))
    vertical_padding = SIN_60 * length / 3.0
    horiz_padding = ((1.0 / vert_scale) - 1.0) / 2.0 * length
    padding = Point(horiz_padding, vertical_padding)
    centering = Point((width - length) / 2.0, (height - length) / 2.0)

    base = (Point(0.0, 0.0), Point(length, 0.0), Point(length / 2.0, length * SIN_60))
    a, b, c = (p.translate(padding).scale(vert_scale).translate(centering) for p in base)
    return a, b, c


def snowflake_edges(triangle: Triangle) -> tuple[Edge, Edge, Edge]:
    """描画する 3 辺を走査順 (B→A, C→B, A→C) で返す。"""
    a, b, c = triangle
    return ((b, a), (c, b), (a, c))


def iter_snowflake_segments(triangle: Triangle, depth: int) -> Iterator[Segment]:
    """3 辺ぶんの Koch 線分を走査順に連結して返す。

    辺の間は連続しない（B→A の次は C→B）が、辺の集合としては閉路になる。
    """
    return chain.from_iterable(
        iter_koch_segments(p0, p1, 0, depth) for p0, p1 in snowflake_edges(triangle)
    )


def snowflake_properties(side: float, depth: int) -> tuple[float, float]:
    """一辺 `side` の三角形から作る深さ `depth` のスノーフレークの (周長, 面積) を返す。

    周長は 1 段ごとに 4/3 倍。面積は `A0 · (8/5 − 3/5 · (4/9)^depth)`（A0 は元の三角形）。
    """
    perimeter = 3.0 * side * (4.0 / 3.0) ** depth
    base_area = (math.sqrt(3.0) / 4.0) * side**2
    area = base_area * (8.0 / 5.0 - (3.0 / 5.0) * (4.0 / 9.0) ** depth)
    return perimeter, area


@shape
def koch_snowflake(
    *,
    width: int = 1000,
    height: int = 1000,
    depth: int | float = 3,
) -> Geometry:
    """`width × height` のキャンバスに収まる Koch スノーフレーク（辺ごとに 1 ポリライン）を生成します。

    引数:
        width, height: キャンバスサイズ [px]。
        depth: 分割深さ（0–10 に丸め）。
    """
    d = max(0, min(MAX_SHAPE_DEPTH, int(round(float(depth)))))
    triangle = snowflake_triangle(int(width), int(height))
    return Geometry.from_lines(koch_points(p0, p1, d) for p0, p1 in snowflake_edges(triangle))


koch_snowflake.__param_meta__ = {
    "depth": {"type": "integer", "min": 0, "max": MAX_SHAPE_DEPTH, "step": 1},
}


__all__ = [
    "Triangle",
    "snowflake_triangle",
    "snowflake_edges",
    "iter_snowflake_segments",
    "snowflake_properties",
    "koch_snowflake",
]
