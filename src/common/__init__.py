"""
どこで: `common` パッケージ。
何を: 名前レジストリ・ロギング初期化・型エイリアス。
"""

from .base_registry import BaseRegistry

__all__ = ["BaseRegistry"]
