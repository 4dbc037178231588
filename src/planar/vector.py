"""
どこで: `planar.vector`
何を: 平面上の変位 `Vector`（不変値）。加減算・スカラー倍・rotor による回転・内積/外積・長さ・正規化。
なぜ: 位置（`Point`）と変位を型で区別し、`Point - Point = Vector` の代数を明示するため。

注意:
- `norm()`/`rotor()` はゼロベクトルで未定義（長さ 0 で割る）。呼び出し側でガードすること。
  ゼロ除算はスカラー型自身の規則で失敗する（代数層では検査しない）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

from common.types import Pair
from numeric.scalar import (
    ScalarKind,
    atan2,
    common_kind,
    convert,
    cos,
    is_scalar,
    sin,
    sq,
    sqrt,
    zero,
)

from .codec import decode_fields, encode_fields

if TYPE_CHECKING:
    from .complex import Complex


@dataclass(frozen=True, slots=True)
class Vector:
    x: Any
    y: Any

    # NumPy スカラーとの演算で反射演算子（__rmul__）を優先させる
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        common_kind(self.x, self.y)

    # ── ファクトリ ───────────────────
    @classmethod
    def zero(cls, kind: ScalarKind | str | None = None) -> "Vector":
        z = zero(kind)
        return cls(z, z)

    @classmethod
    def from_polar(cls, r: Any, angle: Any) -> "Vector":
        """長さ `r`、角度 `angle`（ラジアン）のベクトル。"""
        return cls(cos(angle) * r, sin(angle) * r)

    # ── 演算子 ───────────────────────
    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def __mul__(self, other: object) -> "Vector":
        from .complex import Complex

        if isinstance(other, Complex):
            # rotor による回転（Complex * Vector と同一）
            a, b = self.x, self.y
            c, d = other.real, other.imag
            return Vector(a * c - b * d, a * d + b * c)
        if is_scalar(other):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Vector":
        if is_scalar(other):
            return Vector(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other: object) -> "Vector":
        if not is_scalar(other):
            return NotImplemented
        return Vector(self.x / other, self.y / other)

    def __abs__(self) -> Any:
        return self.len()

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    # ── 計量 ─────────────────────────
    def len(self) -> Any:
        """ユークリッド長 `sqrt(x² + y²)`。"""
        return sqrt(self.len_sqr())

    def len_sqr(self) -> Any:
        """長さの 2 乗（比較用途で平方根を避ける）。"""
        return sq(self.x) + sq(self.y)

    def manhattan_len(self) -> Any:
        return abs(self.x) + abs(self.y)

    def norm(self) -> "Vector":
        return self / self.len()

    def dot(self, other: "Vector") -> Any:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector") -> Any:
        """2D 外積（スカラー）`x0·y1 − y0·x1`。"""
        return self.x * other.y - self.y * other.x

    def rotor(self) -> "Complex":
        """自身の向きを表す単位 rotor。"""
        from .complex import Complex

        n = self.norm()
        return Complex.from_cartesian(n.x, n.y)

    def angle(self) -> Any:
        """x 軸からの角度 [rad]（`atan2(y, x)`）。"""
        return atan2(self.y, self.x)

    # ── 変換 ─────────────────────────
    @property
    def kind(self) -> ScalarKind:
        return common_kind(self.x, self.y)

    def astype(self, kind: ScalarKind | str) -> "Vector":
        return Vector(convert(self.x, kind), convert(self.y, kind))

    def to_tuple(self) -> Pair:
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return encode_fields(self, ("x", "y"))

    @classmethod
    def from_dict(cls, data: Any) -> "Vector":
        x, y = decode_fields(data, ("x", "y"), cls.__name__)
        return cls(x, y)


__all__ = ["Vector"]
