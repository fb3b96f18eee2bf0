"""
どこで: `common` パッケージ。
何を: colorkit が使う軽量ユーティリティ（設定、環境変数パース、同梱の既定構成）。
なぜ: 色計算のコアから環境依存の処理を分離し、依存の向きを単純化するため。
"""
