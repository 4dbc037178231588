"""
どこで: `planar.complex`
何を: 2 成分の代数的な数 `Complex`。一般の複素数として、また大きさ 1 のときは回転演算子（rotor）として使う。
なぜ: 回転を角度ではなく rotor の積として合成し、三角関数の再評価や角度の折り返しを避けるため。

契約:
- 型自身は正規化を強制しない。回転の意味で使う場合は呼び出し側が単位長の rotor を渡す。
- 複素数同士の除算は提供しない。除算は「2 ベクトルの比」`Complex.div(v0, v1)` として定義する。
- `~z` は逆元 `conj(z) / |z|²`。ゼロ元では失敗する（スカラー型の除算規則がそのまま伝播）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from numeric.scalar import (
    ScalarKind,
    atan2,
    common_kind,
    convert,
    cos,
    is_scalar,
    one,
    sin,
    sq,
    sqrt,
    zero,
)

from .codec import decode_fields, encode_fields
from .point import Point
from .vector import Vector


@dataclass(frozen=True, slots=True)
class Complex:
    real: Any
    imag: Any

    __array_ufunc__ = None

    def __post_init__(self) -> None:
        common_kind(self.real, self.imag)

    # ── ファクトリ ───────────────────
    @classmethod
    def from_cartesian(cls, real: Any, imag: Any) -> "Complex":
        return cls(real, imag)

    @classmethod
    def from_polar(cls, r: Any, angle: Any) -> "Complex":
        """`r·cos(angle) + i·r·sin(angle)`（angle はラジアン）。"""
        return cls(cos(angle) * r, sin(angle) * r)

    @classmethod
    def identity(cls, kind: ScalarKind | str | None = None) -> "Complex":
        """回転なしの rotor `1 + 0i`。"""
        return cls(one(kind), zero(kind))

    @classmethod
    def div(cls, v0: Vector, v1: Vector) -> "Complex":
        """2 ベクトルの比 `v0 · conj(v1) / |v1|²`。

        `v1` を `v0` へ移す rotor（長さ比を含む）。`v1` がゼロベクトルなら未定義。
        """
        a, b = v0.x, v0.y
        c, d = v1.x, v1.y
        len_sq = sq(c) + sq(d)
        return cls((a * c + b * d) / len_sq, (b * c - a * d) / len_sq)

    # ── 演算子 ───────────────────────
    def __add__(self, other: object) -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imag + other.imag)

    def __sub__(self, other: object) -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real - other.real, self.imag - other.imag)

    def __neg__(self) -> "Complex":
        return Complex(-self.real, -self.imag)

    def __mul__(self, other: object) -> Any:
        if isinstance(other, Complex):
            a, b = self.into_cartesian()
            c, d = other.real, other.imag
            return Complex(a * c - b * d, a * d + b * c)
        if isinstance(other, Vector):
            a, b = self.real, self.imag
            c, d = other.x, other.y
            return Vector(a * c - b * d, a * d + b * c)
        if is_scalar(other):
            return Complex(self.real * other, self.imag * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Complex":
        if is_scalar(other):
            return Complex(other * self.real, other * self.imag)
        return NotImplemented

    def __invert__(self) -> "Complex":
        len_sq = self.norm_sqr()
        return Complex(self.real / len_sq, -self.imag / len_sq)

    def __abs__(self) -> Any:
        return sqrt(self.norm_sqr())

    def __iter__(self) -> Iterator[Any]:
        yield self.real
        yield self.imag

    # ── 補助 ─────────────────────────
    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imag)

    def norm_sqr(self) -> Any:
        return sq(self.real) + sq(self.imag)

    def angle(self) -> Any:
        return atan2(self.imag, self.real)

    def into_cartesian(self) -> Point:
        return Point(self.real, self.imag)

    @property
    def kind(self) -> ScalarKind:
        return common_kind(self.real, self.imag)

    def astype(self, kind: ScalarKind | str) -> "Complex":
        return Complex(convert(self.real, kind), convert(self.imag, kind))

    def to_dict(self) -> dict[str, Any]:
        return encode_fields(self, ("real", "imag"))

    @classmethod
    def from_dict(cls, data: Any) -> "Complex":
        real, imag = decode_fields(data, ("real", "imag"), cls.__name__)
        return cls(real, imag)


__all__ = ["Complex"]
