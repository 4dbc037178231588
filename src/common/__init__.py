"""
どこで: `common` パッケージ。
何を: 設定・ロギング・環境変数・型エイリアスの共通基盤。
なぜ: 代数層/カメラ層から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging
from .settings import get as get_settings

__all__ = [
    "get_settings",
    "setup_default_logging",
]
