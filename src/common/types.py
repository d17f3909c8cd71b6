"""
どこで: `common` の型定義。
何を: 色の軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

# 0–1 の浮動小数 RGBA
RGBA = tuple[float, float, float, float]
# 0–255 の整数 RGBA（ピクセルバッファ書き込み用）
RGBA8 = tuple[int, int, int, int]

__all__ = ["RGBA", "RGBA8"]
