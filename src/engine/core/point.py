"""
どこで: `engine.core.point`。
何を: 2D 点 `Point` と線分 `Segment` の値型、および距離/移動/拡大/内分の補助関数。
なぜ: フラクタル生成器が扱う最小単位を不変の値として定義し、再帰の各段で新しい点だけを作るため。

座標系はキャンバスのピクセル座標（原点左上、Y 下向き）を想定するが、型自体は単位に依存しない。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Point:
    """不変の 2D 座標。変換は常に新しい `Point` を返す。"""

    x: float
    y: float

    def translate(self, delta: "Point") -> "Point":
        return Point(self.x + delta.x, self.y + delta.y)

    def scale(self, s: float) -> "Point":
        """原点中心の等方スケール。"""
        return Point(self.x * s, self.y * s)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True, slots=True)
class Segment:
    """描画対象の線分（始点 → 終点）。"""

    start: Point
    end: Point

    @property
    def length(self) -> float:
        return dist(self.start, self.end)

    def as_tuple(self) -> tuple[float, float, float, float]:
        """`(x0, y0, x1, y1)` を返す（キャンバスへの一括転送用）。"""
        return (self.start.x, self.start.y, self.end.x, self.end.y)


def dist(p0: Point, p1: Point) -> float:
    """2 点間のユークリッド距離。"""
    return math.hypot(p0.x - p1.x, p0.y - p1.y)


def translate(p: Point, delta: Point) -> Point:
    return p.translate(delta)


def scale(p: Point, s: float) -> Point:
    return p.scale(s)


def lerp(p0: Point, p1: Point, t: float) -> Point:
    """p0 から p1 へ割合 `t` だけ進んだ点（t=0 で p0, t=1 で p1）。"""
    return Point(p0.x + (p1.x - p0.x) * t, p0.y + (p1.y - p0.y) * t)


def midpoint(p0: Point, p1: Point) -> Point:
    return Point((p0.x + p1.x) / 2.0, (p0.y + p1.y) / 2.0)


__all__ = ["Point", "Segment", "dist", "translate", "scale", "lerp", "midpoint"]
