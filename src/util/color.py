"""
どこで: `util.color`。
何を: 色指定（`#RRGGBB[AA]` / 0–1 の RGB(A) / 0–255 の RGB(A)）を RGBA に正規化する。
なぜ: 設定ファイル・ランナー引数・キャンバスが同じ受理規則とエラーメッセージを共有するため。
"""

from __future__ import annotations

import re
from typing import Sequence

from common.types import RGBA, RGBA8

_HEX = re.compile(r"(?:#|0[xX])?([0-9a-fA-F]{6}(?:[0-9a-fA-F]{2})?)")


def parse_hex_color_str(s: str) -> RGBA:
    """`"#008000"` → `(0.0, 0.50196…, 0.0, 1.0)`。

    受理形式は `#`/`0x`/接頭辞なし × `RRGGBB`/`RRGGBBAA`（大文字小文字不問）。それ以外は `ValueError`。
    """
    m = _HEX.fullmatch(s.strip())
    if m is None:
        raise ValueError(f"invalid hex color: '{s}' (expected #RRGGBB or #RRGGBBAA)")
    channels = bytes.fromhex(m.group(1))
    if len(channels) == 3:
        channels += b"\xff"
    return tuple(c / 255.0 for c in channels)  # type: ignore[return-value]


def _components(value: Sequence[object]) -> list[float]:
    if len(value) not in (3, 4):
        raise ValueError(f"color must have 3 or 4 components, got {len(value)}")
    try:
        return [float(c) for c in value]  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color components: {value!r}") from e


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    タプル/リストは全成分が 0..1 なら 0–1 表記、そうでなければ 0–255 表記とみなす
    （0–255 表記は丸めて 0..255 に収める）。アルファ省略時は不透明。
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"unsupported color type: {type(value).__name__}")
    comps = _components(value)
    unit = all(0.0 <= c <= 1.0 for c in comps)
    if len(comps) == 3:
        comps.append(1.0 if unit else 255.0)
    if unit:
        return tuple(comps)  # type: ignore[return-value]
    return tuple(min(255, max(0, round(c))) / 255.0 for c in comps)  # type: ignore[return-value]


def to_u8_rgba(value: object) -> RGBA8:
    """色をピクセル値 RGBA(0–255) に変換する。"""
    return tuple(round(c * 255) for c in normalize_color(value))  # type: ignore[return-value]


__all__ = ["parse_hex_color_str", "normalize_color", "to_u8_rgba"]
