"""
どこで: `api.snowflake`（実行ランナー）。
何を: Koch スノーフレークを深さ 0..9 の順にウィンドウへ描き、最後のフレームを表示し続ける。
なぜ: 設定解決・表示面の生成・状態機械の駆動・致命的エラーの終了処理を一つの入口にまとめるため。

実行フロー（概要）:
1) 設定解決: `resolve_animation_config` が引数 > `configs/default.yaml` > 既定値の順に決める。深さは 0..9 の範囲に限る。
2) 表示面: `surface_factory(title, width, height)`（既定は pyglet の `create_window`）。
3) 駆動: `SnowflakeAnimator` を `drive` で回す。深さごとに新しいキャンバスへ 3 辺を描き、提示し、
   `frame_interval` 秒待つ。最終深さの後は Holding に入り、外部から止めるまで再提示を続ける。

エラー:
- ウィンドウ生成失敗（`SurfaceError`）と提示失敗（`PresentationError`）は致命的。ログに出して
  `SystemExit(2)` で終了する（再試行しない）。
- 設定値の不正は表示面を作る前に `ValueError`。
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from engine.render.types import DisplaySurface, PresentationError, SurfaceError, SurfaceFactory
from engine.runtime.animation import AnimationConfig, SnowflakeAnimator, drive

from .snowflake_runner.utils import resolve_animation_config

logger = logging.getLogger(__name__)

EXIT_FATAL = 2


def _pyglet_surface(title: str, width: int, height: int) -> DisplaySurface:
    # 遅延インポート（ヘッドレス環境/テストでの pyglet 初期化を避ける）
    try:
        from engine.core.render_window import create_window
    except ImportError as e:
        raise SurfaceError(f"pyglet is not available: {e}") from e
    return create_window(title, width, height)


def run_snowflake(
    *,
    canvas_size: int | tuple[int, int] | None = None,
    min_depth: int | None = None,
    max_depth: int | None = None,
    frame_interval: float | None = None,
    hold_interval: float | None = None,
    line_color: object | None = None,
    line_width: float | None = None,
    background: object | None = None,
    title: str | None = None,
    surface_factory: SurfaceFactory | None = None,
    sleep: Callable[[float], None] = time.sleep,
    max_ticks: int | None = None,
    init_only: bool = False,
) -> AnimationConfig:
    """スノーフレークのアニメーションを実行する。

    Parameters
    ----------
    canvas_size : int | tuple[int, int] | None
        キャンバス [px]。int は正方形。None で設定/既定（1000×1000）。
    min_depth, max_depth : int | None
        描く深さの範囲（両端含む）。None で設定/既定（0..9）。
    frame_interval : float | None
        深さ間の待ち時間 [sec]。None で設定/既定（1.0）。
    hold_interval : float | None
        最終フレーム保持中の再提示間隔 [sec]。
    line_color, background : str | tuple | None
        `#RRGGBB[AA]` または RGB(A) タプル。
    line_width : float | None
        線幅 [px]。
    title : str | None
        ウィンドウタイトル。
    surface_factory : SurfaceFactory | None
        表示面の生成関数。None で pyglet ウィンドウ。
    sleep : Callable[[float], None]
        待機関数（テストでは差し替える）。
    max_ticks : int | None
        指定時はその回数だけ駆動して戻る。None なら終わらない。
    init_only : bool
        True で設定解決だけ行い、表示面を作らずに戻る。

    Returns
    -------
    AnimationConfig
        解決済みの設定（`max_ticks` 指定時/`init_only` 時のみ戻る）。

    Raises
    ------
    SystemExit
        表示面の生成/提示に失敗した場合（code=2）。
    """
    cfg = resolve_animation_config(
        canvas_size=canvas_size,
        min_depth=min_depth,
        max_depth=max_depth,
        frame_interval=frame_interval,
        hold_interval=hold_interval,
        line_color=line_color,
        line_width=line_width,
        background=background,
        title=title,
    )
    logger.info(
        "snowflake: %dx%d, depth %d..%d, interval %.2fs",
        cfg.width,
        cfg.height,
        cfg.min_depth,
        cfg.max_depth,
        cfg.frame_interval,
    )
    if init_only:
        return cfg

    factory = surface_factory if surface_factory is not None else _pyglet_surface
    try:
        surface = factory(cfg.title, cfg.width, cfg.height)
    except SurfaceError as e:
        logger.error("ウィンドウを作成できません: %s", e)
        raise SystemExit(EXIT_FATAL) from e

    animator = SnowflakeAnimator(surface, cfg)
    try:
        drive(animator, sleep=sleep, max_ticks=max_ticks)
    except PresentationError as e:
        logger.error("フレームを表示できません: %s", e)
        raise SystemExit(EXIT_FATAL) from e
    return cfg


def main() -> None:
    """コンソールエントリ（`koch-snowflake`）。ロギングを設定して実行する。"""
    from common.logging import setup_default_logging
    from util.utils import config_section

    setup_default_logging(config_section("logging").get("level", "INFO"))
    run_snowflake()


__all__ = ["run_snowflake", "main", "EXIT_FATAL"]
