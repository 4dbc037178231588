"""
どこで: `common.env`
何を: `PLN_*` 環境変数の軽量パースヘルパ（浮動小数/文字列）。
なぜ: `os.getenv` + 例外/境界ガードの散在を避け、settings 側を簡潔に保つため。
"""

from __future__ import annotations

import math
import os
from typing import Optional


def env_float(name: str, default: Optional[float] = None) -> Optional[float]:
    """浮動小数環境変数を取得する。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[float]
        未設定・数値として解釈できない・非有限（nan/inf）のときに返す値。

    Returns
    -------
    Optional[float]
        取得した値、または `default`。
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if math.isfinite(val) else default


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """文字列環境変数を取得（前後空白は除去、空白のみは未設定扱い）。"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


__all__ = ["env_float", "env_str"]
