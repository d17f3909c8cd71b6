"""
どこで: `engine.runtime` サブパッケージ。
何を: アニメーションの状態機械（深さを順に描く → 最終フレームを保持）とループ駆動。
なぜ: 描画（canvas）と表示面（render_window）を時間軸で結線する役割を一箇所に置くため。
"""
