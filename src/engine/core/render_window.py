"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window に RGBA8 ピクセルバッファを貼って表示する `RenderWindow` と生成関数 `create_window`。
なぜ: ドライバからは `present(buffer, w, h)` だけが見えるようにし、GUI 依存をこのモジュールに閉じ込めるため。

使用例:
    win = create_window("Koch snowflake", 1000, 1000)
    win.present(canvas.pixel_buffer(), 1000, 1000)

`present` はイベントを 1 回ポンプし、バッファを blit してからバッファを flip する（同期）。
pyglet のイベントループ（`pyglet.app.run`）は使わず、呼び出し側のループで駆動する。
"""

from __future__ import annotations

import logging

import pyglet
from pyglet.gl import Config, glClearColor

from engine.render.types import PresentationError, SurfaceError, check_buffer

logger = logging.getLogger(__name__)


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        caption: str = "Koch snowflake",
        bg_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0),
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            caption: タイトル。
            bg_color: 背景色 RGBA（0.0〜1.0）。最初の提示までの間だけ見える。
        """
        config = Config(double_buffer=True)
        super().__init__(width=width, height=height, caption=caption, config=config, resizable=False)
        self._bg_color = bg_color
        self._image: pyglet.image.ImageData | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def on_close(self):  # Pyglet 既定のイベント名
        self._closed = True
        self.close()

    def on_draw(self):  # Pyglet 既定のイベント名
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        if self._image is not None:
            self._image.blit(0, 0)

    def present(self, buffer: bytes, width: int, height: int) -> None:
        """RGBA8（行は上から下）のバッファを表示する。

        Raises
        ------
        PresentationError
            ウィンドウが閉じられている、またはバッファ寸法が一致しない場合。
        """
        if self._closed:
            raise PresentationError("window has been closed")
        check_buffer(self, buffer, width, height)
        # 負の pitch は「行が上から下」の意
        self._image = pyglet.image.ImageData(width, height, "RGBA", bytes(buffer), pitch=-width * 4)
        self.switch_to()
        self.dispatch_events()
        if self._closed:
            raise PresentationError("window has been closed")
        self.on_draw()
        self.flip()


def create_window(title: str, width: int, height: int) -> RenderWindow:
    """表示面を生成する。失敗（ディスプレイ無し/GL 設定不可など）は `SurfaceError`。"""
    try:
        win = RenderWindow(int(width), int(height), caption=title)
    except Exception as e:  # pyglet はバックエンドごとに例外型が異なる
        raise SurfaceError(f"failed to create window: {e}") from e
    logger.debug("window created: %s (%dx%d)", title, width, height)
    return win


__all__ = ["RenderWindow", "create_window"]
