"""
どこで: `common.base_registry`。
何を: 文字列名 → 登録オブジェクトの対応表。名前は snake_case に正規化して保持する。
なぜ: 設定ファイルや `G.<name>` から届く表記揺れ（`KochCurve` / `koch-curve` / `koch_curve`）を
     同じ登録先へ解決するため。
"""

import re
from typing import Any, Callable, Iterator

# 小文字/数字→大文字、または連続大文字の末尾（"HTTPServer" の P|S）で区切る
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


class BaseRegistry:
    """名前付きレジストリ。

    `kind` はエラーメッセージに使う種別名（"shape" など）。
    同じ名前に別オブジェクトを登録しようとすると `ValueError`。同一オブジェクトの再登録は許容する
    （モジュールの再 import で二重登録にならないように）。
    """

    def __init__(self, kind: str = "entry") -> None:
        self.kind = kind
        self._entries: dict[str, Any] = {}

    @staticmethod
    def normalize_key(name: str) -> str:
        """`"KochCurve"` / `"koch-curve"` → `"koch_curve"`。"""
        if not isinstance(name, str):
            raise TypeError(f"registry key must be str, got {type(name).__name__}")
        key = _CAMEL_BOUNDARY.sub("_", name.strip()).replace("-", "_").lower()
        if not key:
            raise ValueError("registry key must not be empty")
        return key

    def add(self, name: str, obj: Any) -> Any:
        key = self.normalize_key(name)
        current = self._entries.get(key)
        if current is not None and current is not obj:
            raise ValueError(f"{self.kind} '{key}' is already registered")
        self._entries[key] = obj
        return obj

    def register(self, name: str | None = None) -> Callable[[Any], Any]:
        """`add` のデコレータ版。`name` 省略時は `obj.__name__` を使う。"""

        def decorator(obj: Any) -> Any:
            return self.add(name if name else obj.__name__, obj)

        return decorator

    def get(self, name: str) -> Any:
        try:
            return self._entries[self.normalize_key(name)]
        except KeyError:
            raise KeyError(f"{self.kind} '{name}' is not registered") from None

    def discard(self, name: str) -> None:
        """未登録名は無視。"""
        self._entries.pop(self.normalize_key(name), None)

    def names(self) -> list[str]:
        return sorted(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(name.strip()) and self.normalize_key(name) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._entries)
