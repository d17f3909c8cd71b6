"""
どこで: `engine.render.canvas`（CPU 側の描画先）。
何を: 固定サイズの RGBA8 キャンバス `Canvas`。線分は pygame の `Surface` に `pygame.draw.lines` で描く。
なぜ: 1 フレーム分の線分を一枚のバッファに描き、表示面（`engine.core.render_window`）へ
     そのまま渡せる形式（行は上から下、RGBA 各 8bit）を一箇所で保証するため。

座標はピクセル単位（原点左上、Y 下向き）。点 (x, y) はピクセル (floor(x), floor(y)) に置く。
線はアンチエイリアスなし、キャンバス外は pygame がクリップする。
線幅 w（整数に丸め）は線の短辺方向に w ピクセル。
"""

from __future__ import annotations

import os
from itertools import chain, islice
from typing import Iterable

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from common.types import RGBA8
from engine.core.geometry import Geometry
from engine.core.point import Point, Segment
from util.color import to_u8_rgba

DEFAULT_LINE_COLOR: RGBA8 = (0x00, 0x80, 0x00, 0xFF)
DEFAULT_BACKGROUND: RGBA8 = (0x00, 0x00, 0x00, 0xFF)

# 線分列を配列へ詰める単位（メモリ上限の目安）
_CHUNK_SEGMENTS = 65_536


def _pen_width(width: float) -> int:
    w = int(round(float(width)))
    if w < 1:
        raise ValueError(f"line width must be >= 1 px after rounding, got {width!r}")
    return w


class Canvas:
    """1 フレーム分のピクセルバッファ（pygame `Surface`、SRCALPHA 32bit）。

    - `surface`: 描画先。ドライバが描画中のみ書き込み、表示面に渡した後は読み取り専用として扱う。
    - `pixels`: `uint8 (height, width, 4)` のスナップショット（読み取り専用）。
    - `line_color`: `stroke_*` で色を省略した場合の線色。
    """

    __slots__ = ("width", "height", "surface", "line_color")

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: object = DEFAULT_BACKGROUND,
        line_color: object = DEFAULT_LINE_COLOR,
    ) -> None:
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"canvas size must be positive, got: {(width, height)}")
        self.width = int(width)
        self.height = int(height)
        self.line_color: RGBA8 = to_u8_rgba(line_color)
        self.surface = pygame.Surface((self.width, self.height), pygame.SRCALPHA, 32)
        self.clear(background)

    def clear(self, color: object = DEFAULT_BACKGROUND) -> None:
        self.surface.fill(to_u8_rgba(color))

    @property
    def pixels(self) -> np.ndarray:
        buf = np.frombuffer(self.pixel_buffer(), dtype=np.uint8)
        return buf.reshape(self.height, self.width, 4)

    # ---- ストローク ------------------------------------------------------
    def stroke_line(self, p0: Point, p1: Point, color: object | None = None, width: float = 1.0) -> None:
        """1 本の線分を描く。"""
        arr = np.array([[p0.x, p0.y, p1.x, p1.y]], dtype=np.float64)
        self._draw_segments(arr, self._resolve_color(color), _pen_width(width))

    def stroke_segments(
        self, segments: Iterable[Segment], color: object | None = None, width: float = 1.0
    ) -> int:
        """線分列を消費しながら描き、描いた本数を返す。

        イテレータはチャンク単位で配列化するため、巨大な列でも全体を保持しない。
        """
        rgba = self._resolve_color(color)
        pen = _pen_width(width)
        it = iter(segments)
        count = 0
        while True:
            chunk = islice(it, _CHUNK_SEGMENTS)
            flat = np.fromiter(chain.from_iterable(s.as_tuple() for s in chunk), dtype=np.float64)
            if flat.size == 0:
                return count
            arr = flat.reshape(-1, 4)
            self._draw_segments(arr, rgba, pen)
            count += arr.shape[0]

    def stroke_geometry(self, geometry: Geometry, color: object | None = None, width: float = 1.0) -> int:
        """`Geometry` の各ポリラインを描き、描いた線分数を返す。"""
        rgba = self._resolve_color(color)
        pen = _pen_width(width)
        count = 0
        for line in geometry.lines():
            if line.shape[0] < 2:
                continue
            self._draw_polyline(line, rgba, pen)
            count += line.shape[0] - 1
        return count

    def pixel_buffer(self) -> bytes:
        """RGBA8、行は上から下の生バッファを返す（長さ `width * height * 4`）。"""
        return pygame.image.tobytes(self.surface, "RGBA")

    # ---- 内部 ------------------------------------------------------------
    def _resolve_color(self, color: object | None) -> RGBA8:
        return self.line_color if color is None else to_u8_rgba(color)

    def _draw_polyline(self, points: np.ndarray, rgba: RGBA8, pen: int) -> None:
        pixels = np.floor(points).astype(np.int64).tolist()
        pygame.draw.lines(self.surface, rgba, False, pixels, pen)

    def _draw_segments(self, seg: np.ndarray, rgba: RGBA8, pen: int) -> None:
        """`seg (K, 4) = [x0, y0, x1, y1]` を、端点がつながる区間ごとのポリラインにまとめて描く。"""
        starts = seg[:, 0:2]
        ends = seg[:, 2:4]
        breaks = np.flatnonzero(np.any(starts[1:] != ends[:-1], axis=1)) + 1
        bounds = np.concatenate(([0], breaks, [seg.shape[0]]))
        for lo, hi in zip(bounds[:-1], bounds[1:]):
            self._draw_polyline(np.vstack((starts[lo : lo + 1], ends[lo:hi])), rgba, pen)


def new_canvas(
    width: int, height: int, *, background: object = DEFAULT_BACKGROUND, line_color: object = DEFAULT_LINE_COLOR
) -> Canvas:
    """背景色で塗りつぶした新しいキャンバスを返す。"""
    return Canvas(width, height, background=background, line_color=line_color)


def stroke_line(canvas: Canvas, p0: Point, p1: Point, color: object | None = None, width: float = 1.0) -> None:
    canvas.stroke_line(p0, p1, color, width)


def pixel_buffer(canvas: Canvas) -> bytes:
    return canvas.pixel_buffer()


__all__ = [
    "Canvas",
    "DEFAULT_LINE_COLOR",
    "DEFAULT_BACKGROUND",
    "new_canvas",
    "stroke_line",
    "pixel_buffer",
]
