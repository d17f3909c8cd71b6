"""
どこで: `api.snowflake_runner.utils`（純粋関数/小ヘルパ）。
何を: キャンバスサイズ・深さ範囲・待ち時間・色を「引数 > 設定ファイル > 既定値」の順に解決する。
なぜ: `api.snowflake` を薄く保ち、値の解決規則を単体でテストできるようにするため。
"""

from __future__ import annotations

from typing import Any, Mapping

from engine.runtime.animation import AnimationConfig
from util.color import to_u8_rgba
from util.utils import config_section

_DEFAULTS = AnimationConfig()


def resolve_canvas_size(canvas_size: int | tuple[int, int] | list[int]) -> tuple[int, int]:
    """キャンバス [px] を `(width, height)` に解決する。

    - int: 正方形
    - 2 要素の列: `(width, height)`（正であることを検証）
    - それ以外は `ValueError`
    """
    if isinstance(canvas_size, bool):
        raise ValueError(f"invalid canvas_size: {canvas_size!r}")
    if isinstance(canvas_size, int):
        w = h = canvas_size
    else:
        try:
            w, h = int(canvas_size[0]), int(canvas_size[1])  # type: ignore[index]
            if len(canvas_size) != 2:  # type: ignore[arg-type]
                raise ValueError
        except (TypeError, ValueError, IndexError) as e:
            raise ValueError(f"invalid canvas_size: {canvas_size!r}") from e
    if w <= 0 or h <= 0:
        raise ValueError(f"canvas_size must be positive, got: {(w, h)}")
    return w, h


def _first(*values: Any) -> Any:
    """最初の非 None を返す（すべて None なら None）。"""
    for v in values:
        if v is not None:
            return v
    return None


def resolve_animation_config(
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
    config: Mapping[str, Any] | None = None,
) -> AnimationConfig:
    """ランナー引数から `AnimationConfig` を組み立てる。

    Parameters
    ----------
    config : Mapping | None
        YAML 設定全体（None なら `util.utils.load_config()` を読む）。`snowflake:` 節のみ参照。

    Raises
    ------
    ValueError
        値が不正な場合（負の深さ、深さ範囲の逆転、不正な色など）。
    """
    section = config_section("snowflake", dict(config) if config is not None else None)

    size = _first(canvas_size, section.get("canvas_size"), (_DEFAULTS.width, _DEFAULTS.height))
    width, height = resolve_canvas_size(size)

    lo = _first(min_depth, section.get("min_depth"), _DEFAULTS.min_depth)
    hi = _first(max_depth, section.get("max_depth"), _DEFAULTS.max_depth)
    interval = _first(
        frame_interval, section.get("frame_interval"), _DEFAULTS.frame_interval
    )
    hold = _first(hold_interval, section.get("hold_interval"), _DEFAULTS.hold_interval)
    color = _first(line_color, section.get("line_color"), _DEFAULTS.line_color)
    lw = _first(line_width, section.get("line_width"), _DEFAULTS.line_width)
    bg = _first(background, section.get("background"), _DEFAULTS.background)
    caption = _first(title, section.get("title"), _DEFAULTS.title)

    try:
        return AnimationConfig(
            width=width,
            height=height,
            min_depth=int(lo),
            max_depth=int(hi),
            frame_interval=float(interval),
            hold_interval=float(hold),
            line_color=to_u8_rgba(color),
            line_width=float(lw),
            background=to_u8_rgba(bg),
            title=str(caption),
        )
    except TypeError as e:
        raise ValueError(f"invalid snowflake configuration: {e}") from e


__all__ = ["resolve_canvas_size", "resolve_animation_config"]
