"""翻訳エンジン実装"""
