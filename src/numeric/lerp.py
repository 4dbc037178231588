"""
どこで: `numeric.lerp`
何を: 汎用の線形補間 `lerp`/`lerp2` と、指数平滑の `LerpIntegrator`。
なぜ: `Point.rotated` の「中心と自点の間を rotor で補間する」定義や、カメラ追従などの平滑化を
     スカラー/Vector/Point のいずれにも同じ式で適用するため。

2 つの版の違い:
- `lerp(a, b, t) = a + (b - a) * t`: `b - a` が別の型（Point → Vector）でもよい。
  `t` に Complex を渡すと回転付き補間になる。
- `lerp2(a, b, t) = a * (1 - t) + b * t`: スカラー倍と加算で閉じた型（スカラー/Vector）向け。
  整数/実数では同じ結果だが、丸めの入り方は異なり得る。
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

V = TypeVar("V")


def lerp(a: Any, b: Any, t: Any) -> Any:
    return a + (b - a) * t


def lerp2(a: Any, b: Any, t: Any) -> Any:
    return a * (1 - t) + b * t


class LerpIntegrator(Generic[V]):
    """サンプル列を `t` の比率で追従する指数平滑器。

    最初の `proceed(v)` で状態を `v` に初期化し、以降は
    `state = lerp2(state, v, t)` を返す。`t=1` なら常に最新値、`t=0` なら初期値のまま。
    """

    __slots__ = ("t", "_prev")

    def __init__(self, t: Any) -> None:
        self.t = t
        self._prev: V | None = None

    @property
    def value(self) -> V | None:
        return self._prev

    def proceed(self, v: V) -> V:
        prev = v if self._prev is None else self._prev
        self._prev = lerp2(prev, v, self.t)
        return self._prev

    def reset(self) -> None:
        self._prev = None


__all__ = ["lerp", "lerp2", "LerpIntegrator"]
