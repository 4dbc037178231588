"""
どこで: `planar.point`
何を: 平面上の位置 `Point`（不変値）。
なぜ: 位置と変位を型で分け、`Point - Point = Vector`、`Point ± Vector = Point` のみを許すため。
     `Point + Point` は定義しない（TypeError）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

from common.types import Pair
from numeric.lerp import lerp
from numeric.scalar import ScalarKind, common_kind, convert, zero

from .codec import decode_fields, encode_fields
from .vector import Vector

if TYPE_CHECKING:
    from .complex import Complex


@dataclass(frozen=True, slots=True)
class Point:
    x: Any
    y: Any

    def __post_init__(self) -> None:
        common_kind(self.x, self.y)

    @classmethod
    def origin(cls, kind: ScalarKind | str | None = None) -> "Point":
        z = zero(kind)
        return cls(z, z)

    def __sub__(self, other: object) -> Any:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def absolute(self, origin: "Point") -> "Point":
        """`origin` を原点とする座標系で表された自身を、絶対座標へ戻す。"""
        return Point(origin.x + self.x, origin.y + self.y)

    def relative(self, origin: "Point") -> "Point":
        """自身を `origin` 基準の相対座標へ移す（`absolute` の逆）。"""
        return Point(self.x - origin.x, self.y - origin.y)

    def distance(self, other: "Point") -> Any:
        return (self - other).len()

    def rotated(self, center: "Point", rotor: "Complex") -> "Point":
        """`center` を中心に `rotor` で回した点（`center + (self - center)·rotor`）。

        単位 rotor なら純回転、非単位 rotor なら回転と `|rotor|` 倍の拡大縮小を同時に行う。
        """
        return lerp(center, self, rotor)

    @property
    def kind(self) -> ScalarKind:
        return common_kind(self.x, self.y)

    def astype(self, kind: ScalarKind | str) -> "Point":
        return Point(convert(self.x, kind), convert(self.y, kind))

    def to_tuple(self) -> Pair:
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return encode_fields(self, ("x", "y"))

    @classmethod
    def from_dict(cls, data: Any) -> "Point":
        x, y = decode_fields(data, ("x", "y"), cls.__name__)
        return cls(x, y)


__all__ = ["Point"]
