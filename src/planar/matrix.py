"""
どこで: `planar.matrix`
何を: 2D アフィン変換 `Matrix`（3×3 同次座標、NumPy 配列で保持）。
なぜ: 平行移動・拡大縮小・回転を 1 種類の合成可能な値に統一し、カメラ変換を積で組み立てるため。

規約（列ベクトル）:
- `A * B` は「B を適用してから A」を意味する。`A @ B` は同義。
- 合成は結合的だが非可換。`identity` は両側単位元。
- `Matrix * Point` はアフィン全体、`Matrix * Vector` は線形部のみ（平行移動を無視）を適用する。

    | a  b  tx |     scale(sx, sy) = | sx 0  0 |   rotate(c + di) = | c -d  0 |
    | c  d  ty |                     | 0  sy 0 |                    | d  c  0 |
    | 0  0  1  |                     | 0  0  1 |                    | 0  0  1 |

分解アクセサ:
- `scale_x()`/`scale_y()` は対角成分、`translation()` は平行移動列を読むだけ。
  純スケール/純平行移動（またはそれに帰着する積）でのみ可逆であり、回転成分は黙って捨てられる。

格納 dtype:
- `FLOAT` 種別は `float64`、厳密種別（int/Fraction/Decimal）は `object` で保持し、演算を厳密に保つ。
"""

from __future__ import annotations

from typing import Any

import numpy as np

from common.settings import get as _get_settings
from common.types import Scalar
from numeric.scalar import (
    ScalarKind,
    common_kind,
    decode_scalar,
    encode_scalar,
    numpy_dtype,
    one,
    promote,
    resolve_kind,
    zero,
)

from .complex import Complex
from .point import Point
from .vector import Vector


def _unbox(v: Any) -> Any:
    return v.item() if isinstance(v, np.generic) else v


class Matrix:
    """3×3 同次アフィン変換（不変値）。

    直接の構築は `(3, 3)` の配列風データから行えるが、通常は
    `identity`/`translate`/`scale`/`rotate` と積で組み立てる。
    """

    __slots__ = ("_m", "kind")

    _m: np.ndarray
    kind: ScalarKind

    def __init__(self, data: Any, kind: ScalarKind | str | None = None) -> None:
        arr = np.asarray(data, dtype=object)
        if arr.shape != (3, 3):
            raise ValueError(f"Matrix は形状 (3, 3) である必要があります: {arr.shape}")
        values = [_unbox(v) for v in arr.ravel()]
        k = common_kind(*values) if kind is None else resolve_kind(kind)
        m = np.array(values, dtype=numpy_dtype(k)).reshape(3, 3)
        m.setflags(write=False)
        self._m = m
        self.kind = k

    # ── ファクトリ（純変換） ─────────────
    @classmethod
    def identity(cls, kind: ScalarKind | str | None = None) -> "Matrix":
        k = resolve_kind(kind)
        o, z = one(k), zero(k)
        return cls([[o, z, z], [z, o, z], [z, z, o]], k)

    @classmethod
    def translate(cls, v: Vector) -> "Matrix":
        k = v.kind
        o, z = one(k), zero(k)
        return cls([[o, z, v.x], [z, o, v.y], [z, z, o]], k)

    @classmethod
    def scale(cls, sx: Scalar, sy: Scalar) -> "Matrix":
        k = common_kind(sx, sy)
        o, z = one(k), zero(k)
        return cls([[sx, z, z], [z, sy, z], [z, z, o]], k)

    @classmethod
    def rotate(cls, rotor: Complex) -> "Matrix":
        k = rotor.kind
        o, z = one(k), zero(k)
        c, d = rotor.real, rotor.imag
        return cls([[c, -d, z], [d, c, z], [z, z, o]], k)

    # ── 合成/適用 ─────────────────────
    def __mul__(self, other: object) -> Any:
        if isinstance(other, Matrix):
            # 種別の検査を行列積より先に行う（Decimal と float の混在など）
            k = promote(self.kind, other.kind)
            return Matrix(self._m @ other._m, k)
        if isinstance(other, Point):
            return self.apply_point(other)
        if isinstance(other, Vector):
            return self.apply_vector(other)
        return NotImplemented

    __matmul__ = __mul__

    def entry(self, row: int, col: int) -> Any:
        return _unbox(self._m[row, col])

    def apply_point(self, p: Point) -> Point:
        promote(self.kind, p.kind)
        a, b, tx = (self.entry(0, j) for j in range(3))
        c, d, ty = (self.entry(1, j) for j in range(3))
        return Point(a * p.x + b * p.y + tx, c * p.x + d * p.y + ty)

    def apply_vector(self, v: Vector) -> Vector:
        promote(self.kind, v.kind)
        a, b = self.entry(0, 0), self.entry(0, 1)
        c, d = self.entry(1, 0), self.entry(1, 1)
        return Vector(a * v.x + b * v.y, c * v.x + d * v.y)

    def inverse(self) -> "Matrix":
        """アフィン逆変換。特異行列ではスカラー型の除算規則で失敗する。"""
        a, b, tx = (self.entry(0, j) for j in range(3))
        c, d, ty = (self.entry(1, j) for j in range(3))
        det = a * d - b * c
        ia, ib = d / det, -b / det
        ic, id_ = -c / det, a / det
        itx, ity = -(ia * tx + ib * ty), -(ic * tx + id_ * ty)
        k = common_kind(ia, ib, ic, id_, itx, ity)
        o, z = one(k), zero(k)
        return Matrix([[ia, ib, itx], [ic, id_, ity], [z, z, o]], k)

    # ── 分解アクセサ ───────────────────
    def scale_x(self) -> Any:
        return self.entry(0, 0)

    def scale_y(self) -> Any:
        return self.entry(1, 1)

    def translation(self) -> Vector:
        return Vector(self.entry(0, 2), self.entry(1, 2))

    # ── 比較/表示 ─────────────────────
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    __hash__ = None  # type: ignore[assignment]

    def isclose(
        self, other: "Matrix", *, rtol: float | None = None, atol: float | None = None
    ) -> bool:
        """成分ごとの近似一致。許容誤差の既定値は `common.settings`（ATOL/RTOL）。"""
        s = _get_settings()
        return bool(
            np.allclose(
                self.as_array(),
                other.as_array(),
                rtol=s.RTOL if rtol is None else rtol,
                atol=s.ATOL if atol is None else atol,
            )
        )

    def as_array(self) -> np.ndarray:
        """float64 の読み取り専用コピー（描画側へ渡す用途）。"""
        out = np.array(self._m, dtype=np.float64)
        out.setflags(write=False)
        return out

    def rows(self) -> tuple[tuple[Any, ...], ...]:
        return tuple(tuple(self.entry(i, j) for j in range(3)) for i in range(3))

    def __repr__(self) -> str:
        return f"Matrix(kind={self.kind.value}, rows={self.rows()!r})"

    # ── 直列化 ─────────────────────────
    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "rows": [[encode_scalar(v) for v in row] for row in self.rows()],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Matrix":
        if not isinstance(data, dict) or "rows" not in data:
            raise ValueError(f"Matrix の辞書表現ではありません: {data!r}")
        rows = data["rows"]
        if not isinstance(rows, list) or len(rows) != 3:
            raise ValueError("Matrix.rows は 3 行である必要があります")
        decoded = []
        for row in rows:
            if not isinstance(row, list) or len(row) != 3:
                raise ValueError("Matrix.rows の各行は 3 要素である必要があります")
            decoded.append([decode_scalar(v) for v in row])
        return cls(decoded, data.get("kind"))


__all__ = ["Matrix"]
