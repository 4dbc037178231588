"""共通フィクスチャ。

- 乱数シード固定
- 設定（PLN_* 環境変数）の隔離（全テストに自動適用）
- 小さな Camera/Point 試料
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings
from engine.core.camera import Camera
from planar import Point

_ENV_KEYS = ("PLN_ATOL", "PLN_RTOL", "PLN_DEFAULT_KIND", "PLN_LOG_LEVEL")


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """PLN_* を消して設定を再読込し、テスト後にも再読込して元に戻す。"""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def camera() -> Camera:
    return Camera()


@pytest.fixture()
def panned_zoomed_camera() -> Camera:
    cam = Camera()
    cam.set_scale(2.0)
    cam.set_translation(Point(10.0, -4.0))
    return cam
