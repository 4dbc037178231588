"""
どこで: `engine.core` の永続化ヘルパ。
何を: `Camera` の状態を JSON に保存/復元する。
なぜ: 次回起動時に前回の視点（パン/ズーム/回転）を復元できるようにするため。

仕様（要点）:
- 形式: `{"version": 1, "saved_at": ISO8601, "camera": Camera.to_dict()}`。
- スカラーは種別タグ付きで保存し、int/float/Fraction/Decimal いずれも厳密に往復する。
- 読み込みはフェイルソフト（欠損/破損時は None を返し WARNING を出す）。
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from .camera import Camera

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def save_camera(camera: Camera, path: str | Path) -> Path:
    """カメラ状態を `path` に JSON で保存し、保存先を返す。I/O エラーは送出する。"""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "version": FORMAT_VERSION,
        "saved_at": datetime.now(timezone.utc).isoformat(),
        "camera": camera.to_dict(),
    }
    with out.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    logger.info("camera saved: %s", out)
    return out


def load_camera(path: str | Path) -> Camera | None:
    """JSON からカメラ状態を復元する。失敗時は None。"""
    src = Path(path)
    if not src.exists():
        logger.warning("camera file not found: %s", src)
        return None
    try:
        with src.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("failed to read camera file %s: %s", src, exc)
        return None
    if not isinstance(data, dict) or data.get("version") != FORMAT_VERSION:
        logger.warning("unsupported camera file format: %s", src)
        return None
    try:
        return Camera.from_dict(data.get("camera"))
    except (TypeError, ValueError) as exc:
        logger.warning("malformed camera state in %s: %s", src, exc)
        return None


__all__ = ["save_camera", "load_camera", "FORMAT_VERSION"]
