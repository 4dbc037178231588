"""
どこで: `util.utils`
何を: `configs/default.yaml` とルート `config.yaml` を読み込み、セクション辞書を取り出す。
なぜ: 許容誤差・既定スカラー種別・ログレベルの YAML 層を `common.settings` から分離するため。

ファイル構成（いずれも任意）:

    planar:
      atol: 1.0e-9
      rtol: 1.0e-9
      default_kind: float   # integer | rational | float | decimal
    logging:
      level: INFO
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

_ROOT_MARKERS = ("pyproject.toml", "configs")
_DEFAULT_CONFIG = Path("configs") / "default.yaml"
_OVERRIDE_CONFIG = Path("config.yaml")


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    """YAML をマッピングとして読む。読めない/壊れている/マッピングでない場合は空辞書。"""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """`start` から上へ辿り、`_ROOT_MARKERS` のいずれかを持つ最初のディレクトリを返す。

    見つからなければ `start.parent.parent`（`<root>/src/util` を想定）。
    """
    cur = start.resolve()
    for candidate in (cur, *cur.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return cur.parent.parent


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """既定設定にルート設定を重ねた辞書を返す（フェイルソフト）。

    Parameters
    ----------
    root : Path | None
        プロジェクトルート。省略時は本モジュールの位置から探索する。

    Returns
    -------
    Dict[str, Any]
        トップレベルのセクション（`planar`/`logging`）単位で上書きした結果。
        セクション内部はマージしない。どちらのファイルも無ければ空辞書。
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    merged: Dict[str, Any] = {}
    for rel in (_DEFAULT_CONFIG, _OVERRIDE_CONFIG):
        path = project_root / rel
        if path.exists():
            merged.update(_safe_load_yaml(path))
    return merged


def config_section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = cfg.get(name, {}) if isinstance(cfg, dict) else {}
    return section if isinstance(section, dict) else {}
