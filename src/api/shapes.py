"""
どこで: `api.shapes`（形状生成の高レベル API）。
何を: 登録済み形状関数を `G.<name>(**params)` で呼び、`Geometry` を返すファサード（直近 32 件を LRU で保持）。
なぜ: 曲線全体を配列として欲しい利用者（テスト/エクスポート/対話環境）に統一入口を提供するため。

Examples
--------
    from api import G

    curve = G.koch_curve(start=(0, 0), end=(300, 0), depth=4)
    flake = G.koch_snowflake(width=800, height=800, depth=5).translate(10, 10)
    G.describe("koch_snowflake")   # {"depth": {"type": "integer", "min": 0, ...}}
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Any, Callable, Hashable, Iterable, Mapping

import shapes  # noqa: F401  (登録の副作用)
from engine.core.geometry import Geometry, LineLike
from shapes.registry import get_shape, is_shape_registered, list_shapes, shape_params

CacheKey = tuple[str, tuple[tuple[str, Hashable], ...]]


class _GeometryCache:
    """(形状名, 引数) → `Geometry` の LRU。"""

    def __init__(self, maxsize: int) -> None:
        self.maxsize = maxsize
        self._items: OrderedDict[CacheKey, Geometry] = OrderedDict()
        self.hits = 0
        self.misses = 0

    @staticmethod
    def key(name: str, params: Mapping[str, Any]) -> CacheKey | None:
        """ハッシュできない引数を含む場合は None（キャッシュしない）。"""
        items = tuple(sorted((k, tuple(v) if isinstance(v, list) else v) for k, v in params.items()))
        try:
            hash(items)
        except TypeError:
            return None
        return name, items

    def fetch(self, key: CacheKey, build: Callable[[], Geometry]) -> Geometry:
        found = self._items.get(key)
        if found is not None:
            self.hits += 1
            self._items.move_to_end(key)
            return found
        self.misses += 1
        built = self._items[key] = build()
        if len(self._items) > self.maxsize:
            self._items.popitem(last=False)
        return built

    def clear(self) -> None:
        self._items.clear()
        self.hits = self.misses = 0

    def info(self) -> dict[str, int]:
        return {"hits": self.hits, "misses": self.misses, "maxsize": self.maxsize, "size": len(self._items)}


_cache = _GeometryCache(maxsize=32)


def _call_shape(name: str, params: dict[str, Any]) -> Geometry:
    def build() -> Geometry:
        out = get_shape(name)(**params)
        return out if isinstance(out, Geometry) else Geometry.from_lines(out)

    key = _cache.key(name, params)
    return build() if key is None else _cache.fetch(key, build)


class ShapesAPI:
    """`G` の実体。`G.<name>` を登録済み形状へ解決する（未登録名は `AttributeError`）。"""

    def __getattr__(self, name: str) -> Callable[..., Geometry]:
        if name.startswith("_") or not is_shape_registered(name):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

        def _shape_method(**params: Any) -> Geometry:
            return _call_shape(name, params)

        _shape_method.__name__ = name
        _shape_method.__doc__ = get_shape(name).__doc__
        return _shape_method

    @staticmethod
    def from_lines(lines: Iterable[LineLike]) -> Geometry:
        return Geometry.from_lines(lines)

    @staticmethod
    def empty() -> Geometry:
        return Geometry.empty()

    @staticmethod
    def list_shapes() -> list[str]:
        return list_shapes()

    @staticmethod
    def describe(name: str) -> dict[str, Mapping[str, Any]]:
        """形状の引数メタ（型/範囲）。未登録名は `KeyError`。"""
        return dict(shape_params(name))

    @staticmethod
    def clear_cache() -> None:
        _cache.clear()

    @staticmethod
    def cache_info() -> dict[str, int]:
        return _cache.info()

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(list_shapes()))


G = ShapesAPI()

__all__ = ["G", "ShapesAPI"]
