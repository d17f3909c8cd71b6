"""
どこで: `engine.render` 型定義。
何を: 表示面（ウィンドウ）の契約 `DisplaySurface` と、その失敗を表す例外。
なぜ: ドライバ/ランナーを pyglet から切り離し、テストでは偽の表示面を差し込めるようにするため。
"""

from __future__ import annotations

from typing import Callable, Protocol


class SurfaceError(RuntimeError):
    """表示面（ウィンドウ）を生成できなかった。"""


class PresentationError(RuntimeError):
    """表示面へのバッファ提示に失敗した（表示面が閉じられた/バッファ長が不一致）。"""


class DisplaySurface(Protocol):
    """RGBA8（行は上から下）のピクセルバッファを同期的に表示するもの。"""

    width: int
    height: int

    def present(self, buffer: bytes, width: int, height: int) -> None:
        """バッファを表示する。失敗時は `PresentationError`。"""


# (title, width, height) -> DisplaySurface。失敗時は `SurfaceError`。
SurfaceFactory = Callable[[str, int, int], DisplaySurface]


def check_buffer(surface: DisplaySurface, buffer: bytes, width: int, height: int) -> None:
    """提示前の寸法検査。表示面サイズ/バッファ長が合わなければ `PresentationError`。"""
    if (int(width), int(height)) != (surface.width, surface.height):
        raise PresentationError(
            f"buffer size {width}x{height} does not match surface {surface.width}x{surface.height}"
        )
    expected = int(width) * int(height) * 4
    if len(buffer) != expected:
        raise PresentationError(f"buffer length {len(buffer)} != expected {expected} (RGBA8)")


__all__ = ["SurfaceError", "PresentationError", "DisplaySurface", "SurfaceFactory", "check_buffer"]
