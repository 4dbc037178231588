"""
プロジェクト向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- 代数層（`planar`/`numeric`）はホットパスでログを出さない。Camera の更新は DEBUG。
- アプリ側で設定が無い場合でも、妥当な最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        from .settings import get as _get_settings

        level = _get_settings().LOG_LEVEL
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> bool:
    """最小限のロギング設定を 1 度だけ適用する。

    - `level` 省略時は `common.settings` の `LOG_LEVEL` を使う
    - ルートロガーにハンドラが既にあれば何もしない（no-op, False を返す）
    - 上位のアプリ/CLI から呼び出す想定
    """
    lvl = _resolve_level(level)
    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return False
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
    return True


__all__ = ["setup_default_logging", "LOG_FORMAT"]
