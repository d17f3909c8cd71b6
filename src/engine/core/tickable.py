"""
どこで: `engine.core` の更新インターフェース。
何を: 1 ステップ更新 `tick(dt)` と次ステップまでの待ち時間 `next_delay` を持つ `Tickable` Protocol。
なぜ: ループ（`engine.runtime.animation.drive`）が駆動対象の中身を知らずに回せるようにするため。
"""

from typing import Protocol


class Tickable(Protocol):
    """1 ステップ分の更新を行うインターフェース。"""

    @property
    def next_delay(self) -> float:
        """直前の `tick` の後、次の `tick` まで待つ秒数。"""

    def tick(self, dt: float = 0.0) -> None:
        """内部状態を 1 ステップ進める（`dt` は前回からの経過秒）。"""
