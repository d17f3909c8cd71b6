"""
どこで: `api` 入口（高レベル公開 API）。
何を: 実行ランナー `run`・形状ファサード `G`・装飾子 `shape`・`Geometry`/`Point` などを再輸出。
なぜ: 利用者が単一名前空間から曲線生成 → 描画 → 実行まで完結できるようにするため。

Usage:
    from api import G, run

    flake = G.koch_snowflake(depth=4)   # Geometry（3 本のポリライン）
    run(max_depth=6, frame_interval=0.5)
"""

from engine.core.geometry import Geometry
from engine.core.point import Point, Segment
from shapes.koch import iter_koch_segments
from shapes.registry import shape as shape

from .shapes import G, ShapesAPI
from .snowflake import run_snowflake as run
from .snowflake import run_snowflake as run_snowflake

__all__ = [
    "G",
    "shape",
    "run",
    "run_snowflake",
    "iter_koch_segments",
    "ShapesAPI",
    "Geometry",
    "Point",
    "Segment",
]

__version__ = "2026.10"
