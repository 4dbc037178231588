"""
どこで: `engine.core` の変換ユーティリティ。
何を: `Matrix` を NumPy 座標配列 `(N, 2)` へ一括適用する関数群と、`Point` 列との相互変換。
なぜ: 値型 1 個ずつの適用では遅い描画前段（ポリライン頂点など）でも、同じ行列をそのまま使えるようにするため。
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from planar import Matrix, Point


def _as_coords(coords: np.ndarray | Sequence[Sequence[float]]) -> np.ndarray:
    arr = np.asarray(coords, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"座標配列の形状が不正です（(N, 2) を想定）: {arr.shape}")
    return arr


def transform_coords(matrix: Matrix, coords: np.ndarray | Sequence[Sequence[float]]) -> np.ndarray:
    """点列 `(N, 2)` にアフィン変換を適用し、新しい float64 配列を返す。

    Parameters
    ----------
    matrix : Matrix
        適用する変換（厳密種別でも float64 に変換して計算する）。
    coords : array-like
        形状 `(N, 2)` の点列。空入力は `(0, 2)` を返す。

    Returns
    -------
    np.ndarray
        変換後の `(N, 2)` 配列（入力は変更しない）。
    """
    arr = _as_coords(coords)
    if arr.shape[0] == 0:
        return arr
    m = matrix.as_array()
    return arr @ m[:2, :2].T + m[:2, 2]


def transform_directions(
    matrix: Matrix, coords: np.ndarray | Sequence[Sequence[float]]
) -> np.ndarray:
    """変位ベクトル列 `(N, 2)` に線形部のみを適用する（平行移動は無視）。"""
    arr = _as_coords(coords)
    if arr.shape[0] == 0:
        return arr
    m = matrix.as_array()
    return arr @ m[:2, :2].T


def points_to_array(points: Iterable[Point]) -> np.ndarray:
    rows = [(float(p.x), float(p.y)) for p in points]
    if not rows:
        return np.empty((0, 2), dtype=np.float64)
    return np.array(rows, dtype=np.float64)


def array_to_points(arr: np.ndarray | Sequence[Sequence[float]]) -> list[Point]:
    coords = _as_coords(arr)
    return [Point(float(x), float(y)) for x, y in coords]


__all__ = ["transform_coords", "transform_directions", "points_to_array", "array_to_points"]
