"""
どこで: `common.logging`。
何を: アプリ起動時に一度だけ適用する最小ロギング設定。
なぜ: 各モジュールは `logging.getLogger(__name__)` を使うだけにし、設定はランナー/エントリに集約するため。
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str) -> int:
    """"INFO" などの名前または数値をログレベル int に変換する（未知の名前は INFO）。"""
    if isinstance(level, str):
        lvl = logging.getLevelName(level.strip().upper())
        return lvl if isinstance(lvl, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - `main.py` から呼び出す想定
    """
    root = logging.getLogger()
    if root.handlers:
        # アプリ側で設定済み
        return
    logging.basicConfig(level=resolve_level(level), format=DEFAULT_FORMAT)


__all__ = ["setup_default_logging", "resolve_level", "DEFAULT_FORMAT"]
