"""
どこで: `engine.core.camera`
何を: 平行移動・拡大縮小・回転の 3 つの `Matrix` を独立に保持し、合成変換と「中心付きズーム」を提供する `Camera`。
なぜ: 各成分を個別に差し替えられるようにしつつ、描画側には `transformation()` の 1 行列だけを渡すため。

合成順:
    transformation() = translation * scale * rotation
    （回転 → 拡大縮小 → 平行移動の順に適用）

中心付きズーム（`concat_scale_centered`）:
    output = T(center - O) * S(k, k) * T(O - prev_center) * translation * scale
    scale       <- scale(output.scale_x(), output.scale_y())
    translation <- translate(output.translation())

    - 現在のスケール → 現在の平行移動 → 旧中心を原点へ → k 倍 → 新中心へ、を 1 行列にまとめ、
      対角成分と平行移動列だけを取り出して scale/translation に書き戻す。
    - rotation は別フィールドで管理し、このパイプラインには含めない（途中の回転成分は捨てる）。
    - `prev_center` は直前状態の実際の中心であること（呼び出し側の契約。関数は検証できない）。
"""

from __future__ import annotations

import logging
from typing import Any

from common.types import Scalar
from numeric.scalar import ScalarKind, resolve_kind
from planar import Complex, Matrix, Point, Vector

logger = logging.getLogger(__name__)


class Camera:
    """3 つの独立な変換行列を持つ 2D カメラ。既定はすべて恒等。"""

    __slots__ = ("_translation", "_scale", "_rotation")

    def __init__(self, kind: ScalarKind | str | None = None) -> None:
        k = resolve_kind(kind)
        self._translation = Matrix.identity(k)
        self._scale = Matrix.identity(k)
        self._rotation = Matrix.identity(k)

    # ── 参照 ─────────────────────────
    @property
    def translation(self) -> Matrix:
        return self._translation

    @property
    def scale(self) -> Matrix:
        return self._scale

    @property
    def rotation(self) -> Matrix:
        return self._rotation

    def transformation(self) -> Matrix:
        """シーン座標 → カメラ座標の合成変換 `translation * scale * rotation`。"""
        return self._translation * self._scale * self._rotation

    # ── 更新 ─────────────────────────
    def set_translation(self, translation: Point) -> None:
        """原点から `translation` への絶対変位で平行移動を置き換える。"""
        self._translation = Matrix.translate(translation - Point.origin(translation.kind))
        logger.debug("set_translation: %s", translation)

    def add_translation(self, vec: Vector) -> None:
        """現在の平行移動に `vec` を加算する（パン操作）。"""
        self._translation = Matrix.translate(self._translation.translation() + vec)
        logger.debug("add_translation: %s -> %s", vec, self._translation.translation())

    def set_scale(self, s: Scalar) -> None:
        """両軸一様の倍率 `s` で拡大縮小を置き換える。"""
        self._scale = Matrix.scale(s, s)
        logger.debug("set_scale: %s", s)

    def set_rotation(self, rotor: Complex) -> None:
        self._rotation = Matrix.rotate(rotor)
        logger.debug("set_rotation: %s", rotor)

    def concat_scale_centered(self, scale_division: Scalar, center: Point, prev_center: Point) -> None:
        """`center` を中心に `scale_division` 倍のズームを現在の状態へ重ねる。

        Parameters
        ----------
        scale_division : scalar
            ズーム係数（> 0 を想定、検証はしない）。> 1 で拡大、< 1 で縮小、= 1 でズームなし。
        center : Point
            新しいズーム中心。
        prev_center : Point
            直前の状態が基準としていた中心。ズームのみなら `center` と同じ値を渡す。
            異なる値を渡すと `prev_center` → `center` の平行移動を伴う。
        """
        scale_division_matrix = Matrix.scale(scale_division, scale_division)
        translation = Matrix.translate(center - Point.origin(center.kind))
        inv_translation = Matrix.translate(Point.origin(prev_center.kind) - prev_center)

        output = (
            translation
            * scale_division_matrix
            * inv_translation
            * self._translation
            * self._scale
        )

        self._scale = Matrix.scale(output.scale_x(), output.scale_y())
        self._translation = Matrix.translate(output.translation())
        logger.debug(
            "concat_scale_centered: k=%s center=%s prev_center=%s -> scale=(%s, %s) translation=%s",
            scale_division,
            center,
            prev_center,
            output.scale_x(),
            output.scale_y(),
            output.translation(),
        )

    def reset(self) -> None:
        """3 成分すべてを恒等に戻す（種別は現在の平行移動行列に合わせる）。"""
        k = self._translation.kind
        self._translation = Matrix.identity(k)
        self._scale = Matrix.identity(k)
        self._rotation = Matrix.identity(k)
        logger.debug("reset")

    # ── 座標変換 ───────────────────────
    def to_camera_space(self, point: Point) -> Point:
        return self.transformation() * point

    def from_camera_space(self, point: Point) -> Point:
        """`to_camera_space` の逆。スケール 0 のカメラでは未定義。"""
        return self.transformation().inverse() * point

    # ── 比較/直列化 ─────────────────────
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Camera):
            return NotImplemented
        return (
            self._translation == other._translation
            and self._scale == other._scale
            and self._rotation == other._rotation
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Camera(translation={self._translation.translation()!r}, "
            f"scale=({self._scale.scale_x()!r}, {self._scale.scale_y()!r}), "
            f"rotation={self._rotation!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "translation": self._translation.to_dict(),
            "scale": self._scale.to_dict(),
            "rotation": self._rotation.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Camera":
        if not isinstance(data, dict):
            raise ValueError(f"Camera の辞書表現ではありません: {data!r}")
        missing = [n for n in ("translation", "scale", "rotation") if n not in data]
        if missing:
            raise ValueError(f"Camera のフィールドが欠落しています: {missing}")
        cam = cls()
        cam._translation = Matrix.from_dict(data["translation"])
        cam._scale = Matrix.from_dict(data["scale"])
        cam._rotation = Matrix.from_dict(data["rotation"])
        return cam


__all__ = ["Camera"]
