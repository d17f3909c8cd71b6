"""
どこで: `engine.core` サブパッケージ。
何を: 点/線分の値型、ポリライン集合 `Geometry`、`Tickable`、描画ウィンドウ（pyglet）を提供。
なぜ: 計算と表示の基盤を構成し、上位層（runtime/api）から再利用可能にするため。
"""
