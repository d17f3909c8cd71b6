"""
どこで: `engine.runtime.animation`。
何を: Koch スノーフレークを深さ `min_depth..max_depth` の順に描いて表示し、最後のフレームを保持し続ける
     状態機械 `SnowflakeAnimator` と、それを逐次駆動する `drive`。
なぜ: 「描画 → 提示 → 待機」を 1 スレッドで順に進める流れを、表示面やスリープと分離してテストできるようにするため。

状態遷移:

    Animating(min_depth) → Animating(min_depth+1) → … → Animating(max_depth) → Holding

- Animating(d): 新しいキャンバスに 3 辺（B→A, C→B, A→C）を深さ d で描き、提示し、
  `frame_interval` 秒待つ。
- Holding: 直前のフレームを `hold_interval` 秒ごとに再提示する（終端状態、外部から止めるまで継続）。

提示の失敗（`PresentationError`）はそのまま呼び出し側へ伝播する。
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from common.types import RGBA8
from engine.render.canvas import DEFAULT_BACKGROUND, DEFAULT_LINE_COLOR, Canvas, new_canvas
from engine.render.types import DisplaySurface
from shapes.koch import draw_koch_line
from shapes.snowflake import Triangle, snowflake_edges, snowflake_triangle
from util.color import to_u8_rgba

from ..core.tickable import Tickable

logger = logging.getLogger(__name__)

# 描く深さの上限（深さ 9 で 1 フレーム 3·4^9 ≈ 79 万本）
MAX_DEPTH = 9


@dataclass(frozen=True)
class Animating:
    depth: int


@dataclass(frozen=True)
class Holding:
    pass


AnimationState = Animating | Holding


@dataclass(frozen=True)
class AnimationConfig:
    """ドライバへ注入する定数群（既定は 1000×1000、深さ 0..9、1 秒間隔）。"""

    width: int = 1000
    height: int = 1000
    min_depth: int = 0
    max_depth: int = 9
    frame_interval: float = 1.0
    hold_interval: float = 1.0 / 60.0
    line_color: RGBA8 = DEFAULT_LINE_COLOR
    line_width: float = 1.0
    background: RGBA8 = DEFAULT_BACKGROUND
    title: str = "Koch snowflake"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas size must be positive, got: {(self.width, self.height)}")
        if self.min_depth < 0:
            raise ValueError(f"min_depth must be >= 0, got {self.min_depth}")
        if self.max_depth > MAX_DEPTH:
            raise ValueError(f"max_depth must be <= {MAX_DEPTH}, got {self.max_depth}")
        if self.min_depth > self.max_depth:
            raise ValueError(f"min_depth ({self.min_depth}) must not exceed max_depth ({self.max_depth})")
        if self.frame_interval < 0 or self.hold_interval < 0:
            raise ValueError("intervals must be >= 0")
        if self.line_width < 1:
            raise ValueError(f"line_width must be >= 1, got {self.line_width}")
        # 色は RGBA8 に正規化して保持
        object.__setattr__(self, "line_color", to_u8_rgba(self.line_color))
        object.__setattr__(self, "background", to_u8_rgba(self.background))

    @property
    def n_frames(self) -> int:
        return self.max_depth - self.min_depth + 1


class SnowflakeAnimator(Tickable):
    """深さごとのフレームを描いて `surface` に提示する状態機械。"""

    def __init__(self, surface: DisplaySurface, config: AnimationConfig | None = None) -> None:
        self.surface = surface
        self.config = config if config is not None else AnimationConfig()
        self.triangle: Triangle = snowflake_triangle(self.config.width, self.config.height)
        self._state: AnimationState = Animating(self.config.min_depth)
        self._last_frame: Canvas | None = None
        self._last_buffer: bytes | None = None
        self._next_delay = 0.0

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def last_frame(self) -> Canvas | None:
        """最後に提示したキャンバス（Holding で再提示する対象）。"""
        return self._last_frame

    @property
    def next_delay(self) -> float:
        return self._next_delay

    def render_depth(self, depth: int) -> Canvas:
        """深さ `depth` のスノーフレークを新しいキャンバスに描いて返す。"""
        cfg = self.config
        canvas = new_canvas(cfg.width, cfg.height, background=cfg.background, line_color=cfg.line_color)
        drawn = 0
        for p0, p1 in snowflake_edges(self.triangle):
            drawn += draw_koch_line(canvas, p0, p1, 0, depth, width=cfg.line_width)
        logger.debug("depth %d: %d segments", depth, drawn)
        return canvas

    def tick(self, dt: float = 0.0) -> None:
        state = self._state
        if isinstance(state, Animating):
            canvas = self.render_depth(state.depth)
            buffer = canvas.pixel_buffer()
            self.surface.present(buffer, canvas.width, canvas.height)
            self._last_frame = canvas
            self._last_buffer = buffer
            logger.info("Done with depth %d", state.depth)
            if state.depth < self.config.max_depth:
                self._state = Animating(state.depth + 1)
            else:
                self._state = Holding()
            self._next_delay = self.config.frame_interval
            return

        if self._last_buffer is None or self._last_frame is None:
            raise RuntimeError("holding without a presented frame")
        self.surface.present(self._last_buffer, self._last_frame.width, self._last_frame.height)
        self._next_delay = self.config.hold_interval


def drive(
    animator: Tickable,
    *,
    sleep: Callable[[float], None] = time.sleep,
    max_ticks: int | None = None,
) -> int:
    """`tick` → `sleep(next_delay)` を繰り返す。`max_ticks` 未指定なら終わらない。

    実行した tick 数を返す。
    """
    ticks = 0
    last = time.perf_counter()
    while max_ticks is None or ticks < max_ticks:
        now = time.perf_counter()
        animator.tick(now - last)
        last = now
        ticks += 1
        sleep(animator.next_delay)
    return ticks


__all__ = [
    "Animating",
    "Holding",
    "AnimationState",
    "AnimationConfig",
    "MAX_DEPTH",
    "SnowflakeAnimator",
    "drive",
]
