"""
内部ヘルパ群（API 非公開）。

どこで: `api.snowflake_runner`
何を: `api.snowflake` の補助（設定値の解決など純粋関数）を分離し、`run_snowflake` 本体を薄く保つ。
"""

from __future__ import annotations
