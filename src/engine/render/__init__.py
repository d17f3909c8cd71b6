"""
どこで: `engine.render` サブパッケージ。
何を: CPU ピクセルバッファ `Canvas` と表示面の契約（`DisplaySurface`/例外）。
なぜ: 線分の生成（shapes）と表示（render_window）の間の受け渡し形式を一箇所で定めるため。
"""
