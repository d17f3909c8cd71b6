"""
どこで: `shapes.registry`。
何を: `@shape` で形状関数を名前登録し、名前からの取得・一覧・パラメータ範囲の参照を提供する。
なぜ: `api.shapes.G` が `G.koch_curve(...)` のように名前だけで形状を解決できるようにするため。

登録できるのは関数だけ（`Geometry` またはポリライン列を返す）。書き方は 3 通り:

    @shape                 # 関数名で登録
    @shape("koch")         # 明示名
    @shape(name="koch")
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

from common.base_registry import BaseRegistry

ShapeFn = Callable[..., Any]

_shapes = BaseRegistry("shape")


def _register(fn: Any, name: str | None) -> ShapeFn:
    if not inspect.isfunction(fn):
        raise TypeError(f"@shape can only register functions, got {fn!r}")
    return _shapes.add(name or fn.__name__, fn)


def shape(target: Any = None, /, name: str | None = None):
    """形状関数を登録するデコレータ（関数以外は `TypeError`）。"""
    if isinstance(target, str):
        return lambda fn: _register(fn, target)
    if target is None:
        return lambda fn: _register(fn, name)
    return _register(target, name)


def get_shape(name: str) -> ShapeFn:
    """未登録名は `KeyError`。"""
    return _shapes.get(name)


def list_shapes() -> list[str]:
    return _shapes.names()


def is_shape_registered(name: str) -> bool:
    return name in _shapes


def unregister(name: str) -> None:
    _shapes.discard(name)


def shape_params(name: str) -> Mapping[str, Mapping[str, Any]]:
    """形状関数の `__param_meta__`（引数ごとの型/範囲）。宣言が無ければ空。"""
    return dict(getattr(get_shape(name), "__param_meta__", {}))


__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "unregister",
    "shape_params",
]
