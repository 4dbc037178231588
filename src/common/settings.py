"""
どこで: `common.settings`
何を: 許容誤差・既定スカラー種別・ログレベルを型付きで一元管理し、起動時に読み込む。
なぜ: YAML 設定と環境変数の優先順位を 1 か所に閉じ込め、既定値/型の一貫性とテスト容易性を高めるため。

優先順位（後勝ち）:
1) `_Settings` の既定値
2) `configs/default.yaml` → ルート `config.yaml`（`util.utils.load_config`）
3) 環境変数 `PLN_*`
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from util.utils import config_section, load_config

from .env import env_float, env_str

KIND_NAMES = ("integer", "rational", "float", "decimal")
LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class _Settings:
    # 近似比較（Matrix.isclose など）
    ATOL: float = 1e-9
    RTOL: float = 1e-9

    # identity()/origin() の既定スカラー種別
    DEFAULT_KIND: str = "float"

    # Logging
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def _as_tolerance(value: Any, fallback: float) -> float:
    try:
        val = float(value)
    except (TypeError, ValueError):
        return fallback
    if val != val or val < 0.0 or val == float("inf"):
        return fallback
    return val


def _as_choice(value: Any, choices: tuple[str, ...], fallback: str, *, upper: bool) -> str:
    if not isinstance(value, str):
        return fallback
    s = value.strip().upper() if upper else value.strip().lower()
    return s if s in choices else fallback


def reload_from_env(root: Path | None = None) -> None:
    """YAML 設定と環境変数から設定を再読込。

    - 不正値は 1 段前の層（YAML 不正なら既定値、env 不正なら YAML 値）に留まる。
    - 許容誤差は負値/非有限値を拒否する。
    """
    defaults = _Settings()
    cfg = load_config(root)
    planar = config_section(cfg, "planar")
    log_cfg = config_section(cfg, "logging")

    atol = _as_tolerance(planar.get("atol", defaults.ATOL), defaults.ATOL)
    rtol = _as_tolerance(planar.get("rtol", defaults.RTOL), defaults.RTOL)
    kind = _as_choice(
        planar.get("default_kind", defaults.DEFAULT_KIND), KIND_NAMES, defaults.DEFAULT_KIND, upper=False
    )
    level = _as_choice(
        log_cfg.get("level", defaults.LOG_LEVEL), LOG_LEVEL_NAMES, defaults.LOG_LEVEL, upper=True
    )

    # 環境変数（最優先）
    _settings.ATOL = _as_tolerance(env_float("PLN_ATOL", atol), atol)
    _settings.RTOL = _as_tolerance(env_float("PLN_RTOL", rtol), rtol)
    _settings.DEFAULT_KIND = _as_choice(env_str("PLN_DEFAULT_KIND", kind), KIND_NAMES, kind, upper=False)
    _settings.LOG_LEVEL = _as_choice(
        env_str("PLN_LOG_LEVEL", level), LOG_LEVEL_NAMES, level, upper=True
    )


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings", "KIND_NAMES", "LOG_LEVEL_NAMES"]
