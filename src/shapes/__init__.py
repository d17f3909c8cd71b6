"""
どこで: `shapes` パッケージ。
何を: Koch 曲線とスノーフレークの生成関数。import した時点で `@shape` 登録が済む。
"""

from . import koch, snowflake  # noqa: F401  (登録の副作用)
from .registry import get_shape, is_shape_registered, list_shapes, shape, shape_params

__all__ = ["shape", "get_shape", "list_shapes", "is_shape_registered", "shape_params"]
