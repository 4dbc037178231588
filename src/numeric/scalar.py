"""
どこで: `numeric.scalar`（代数層の最下層）。
何を: スカラー種別タグ `ScalarKind` と昇格規則、および零/単位元・平方根・三角関数などの
     最小限の数値能力を種別ごとにディスパッチして提供する。
なぜ: Vector/Point/Complex/Matrix を特定の数値型に縛らず、int/float/Fraction/Decimal/NumPy
     スカラーの上で同じ代数を動かすため（構築時に種別を検査する）。

種別と昇格:
- `INTEGER`（int, np.integer）
- `RATIONAL`（fractions.Fraction などの numbers.Rational）
- `FLOAT`（float, np.floating などの numbers.Real）
- `DECIMAL`（decimal.Decimal）

    INTEGER < RATIONAL < FLOAT
    INTEGER < DECIMAL
    DECIMAL × (RATIONAL | FLOAT) は ScalarTypeError（Python 自身もこの混在演算を拒否する）

ゼロ除算:
- 本モジュールおよび上位の代数層は 0 チェックを行わない。各スカラー型自身の除算規則
  （ZeroDivisionError / decimal 例外 / NumPy の inf・nan）がそのまま伝播する。
"""

from __future__ import annotations

import enum
import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable

import numpy as np


class ScalarKind(enum.Enum):
    INTEGER = "integer"
    RATIONAL = "rational"
    FLOAT = "float"
    DECIMAL = "decimal"


class ScalarTypeError(TypeError):
    """スカラーとして受理できない値、または混在不可能な種別の組み合わせ。

    `value` に拒否された入力を保持する。
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


_RANK = {
    ScalarKind.INTEGER: 0,
    ScalarKind.RATIONAL: 1,
    ScalarKind.DECIMAL: 1,
    ScalarKind.FLOAT: 2,
}


def classify(value: Any) -> ScalarKind:
    """値のスカラー種別を返す。実数以外（bool/complex/str など）は `ScalarTypeError`。"""
    if isinstance(value, (bool, np.bool_)):
        raise ScalarTypeError(f"bool はスカラーとして扱えません: {value!r}", value)
    if isinstance(value, Decimal):
        return ScalarKind.DECIMAL
    if isinstance(value, numbers.Integral):
        return ScalarKind.INTEGER
    if isinstance(value, numbers.Rational):
        return ScalarKind.RATIONAL
    if isinstance(value, numbers.Real):
        return ScalarKind.FLOAT
    raise ScalarTypeError(f"実数スカラーではありません: {value!r}", value)


def promote(a: ScalarKind, b: ScalarKind) -> ScalarKind:
    """2 つの種別の共通種別を返す。"""
    if a is b:
        return a
    if ScalarKind.DECIMAL in (a, b):
        other = b if a is ScalarKind.DECIMAL else a
        if other is ScalarKind.INTEGER:
            return ScalarKind.DECIMAL
        raise ScalarTypeError(f"decimal と {other.value} は混在できません")
    return a if _RANK[a] >= _RANK[b] else b


def common_kind(*values: Any) -> ScalarKind:
    """値（または ScalarKind）の列の共通種別を返す。空なら既定種別。"""
    kinds = [v if isinstance(v, ScalarKind) else classify(v) for v in values]
    if not kinds:
        return default_kind()
    out = kinds[0]
    for k in kinds[1:]:
        out = promote(out, k)
    return out


def ensure_scalar(value: Any) -> Any:
    """スカラーであることを検査してそのまま返す（構築時の種別チェック）。"""
    classify(value)
    return value


def is_scalar(value: Any) -> bool:
    try:
        classify(value)
    except ScalarTypeError:
        return False
    return True


def default_kind() -> ScalarKind:
    """設定 `DEFAULT_KIND` に対応する種別。"""
    from common.settings import get as _get_settings

    return ScalarKind(_get_settings().DEFAULT_KIND)


def resolve_kind(kind: ScalarKind | str | None) -> ScalarKind:
    if kind is None:
        return default_kind()
    if isinstance(kind, ScalarKind):
        return kind
    try:
        return ScalarKind(str(kind).lower())
    except ValueError:
        raise ValueError(f"未知のスカラー種別です: {kind!r}") from None


# ── 単位元と変換 ───────────────────────
def zero(kind: ScalarKind | str | None = None) -> Any:
    return convert(0, resolve_kind(kind))


def one(kind: ScalarKind | str | None = None) -> Any:
    return convert(1, resolve_kind(kind))


def convert(value: Any, kind: ScalarKind | str) -> Any:
    """値を指定種別へ変換する（INTEGER へは切り捨てではなく `int()` の意味）。"""
    k = resolve_kind(kind)
    src = classify(value)
    if src is k:
        return value
    if k is ScalarKind.INTEGER:
        return int(value)
    if k is ScalarKind.FLOAT:
        return float(value)
    if k is ScalarKind.RATIONAL:
        return Fraction(value) if src is not ScalarKind.FLOAT else Fraction(float(value))
    # DECIMAL
    if src is ScalarKind.RATIONAL:
        return Decimal(value.numerator) / Decimal(value.denominator)
    if src is ScalarKind.FLOAT:
        return Decimal(repr(float(value)))
    return Decimal(int(value))


# ── 初等関数（種別ディスパッチ） ─────────
@dataclass(frozen=True)
class _Backend:
    sqrt: Callable[[Any], Any]
    sin: Callable[[Any], Any]
    cos: Callable[[Any], Any]
    atan2: Callable[[Any, Any], Any]


def _float_unary(fn_math: Callable[[float], float], fn_np: Callable[[Any], Any]) -> Callable[[Any], Any]:
    # NumPy スカラーは dtype（float32 など）を保つ
    def _op(x: Any) -> Any:
        if isinstance(x, np.generic):
            return fn_np(x)
        return fn_math(float(x))

    return _op


def _float_atan2(y: Any, x: Any) -> Any:
    if isinstance(y, np.generic) or isinstance(x, np.generic):
        return np.arctan2(y, x)
    return math.atan2(float(y), float(x))


def _via_float(kind: ScalarKind, fn: Callable[[float], float]) -> Callable[[Any], Any]:
    def _op(x: Any) -> Any:
        return convert(fn(float(x)), kind)

    return _op


def _rational_sqrt(x: Fraction) -> Fraction:
    # 完全平方は厳密に、それ以外は float 経由
    if x >= 0:
        n, d = math.isqrt(x.numerator), math.isqrt(x.denominator)
        if n * n == x.numerator and d * d == x.denominator:
            return Fraction(n, d)
    return Fraction(math.sqrt(float(x)))


_FLOAT_BACKEND = _Backend(
    sqrt=_float_unary(math.sqrt, np.sqrt),
    sin=_float_unary(math.sin, np.sin),
    cos=_float_unary(math.cos, np.cos),
    atan2=_float_atan2,
)

_BACKENDS: dict[ScalarKind, _Backend] = {
    # 整数の無理関数は float を返す（種別昇格）
    ScalarKind.INTEGER: _FLOAT_BACKEND,
    ScalarKind.FLOAT: _FLOAT_BACKEND,
    ScalarKind.RATIONAL: _Backend(
        sqrt=_rational_sqrt,
        sin=_via_float(ScalarKind.RATIONAL, math.sin),
        cos=_via_float(ScalarKind.RATIONAL, math.cos),
        atan2=lambda y, x: Fraction(math.atan2(float(y), float(x))),
    ),
    ScalarKind.DECIMAL: _Backend(
        sqrt=lambda x: x.sqrt(),
        sin=_via_float(ScalarKind.DECIMAL, math.sin),
        cos=_via_float(ScalarKind.DECIMAL, math.cos),
        atan2=lambda y, x: convert(math.atan2(float(y), float(x)), ScalarKind.DECIMAL),
    ),
}


def sq(x: Any) -> Any:
    return x * x


def sqrt(x: Any) -> Any:
    return _BACKENDS[classify(x)].sqrt(x)


def sin(x: Any) -> Any:
    return _BACKENDS[classify(x)].sin(x)


def cos(x: Any) -> Any:
    return _BACKENDS[classify(x)].cos(x)


def atan2(y: Any, x: Any) -> Any:
    """`atan2(y, x)`（ラジアン）。種別は y と x の共通種別で選ぶ。"""
    return _BACKENDS[common_kind(y, x)].atan2(y, x)


def sign(x: Any) -> Any:
    """0 以上なら 1、負なら -1（x と同じ種別）。"""
    kind = classify(x)
    return one(kind) if x >= zero(kind) else -one(kind)


# ── JSON 向けスカラー符号化 ─────────────
def encode_scalar(value: Any) -> dict[str, Any]:
    """種別タグ付きで JSON 安全な辞書へ符号化する（全種別で厳密に往復する）。"""
    kind = classify(value)
    if kind is ScalarKind.INTEGER:
        payload: Any = int(value)
    elif kind is ScalarKind.FLOAT:
        payload = float(value)
    else:
        payload = str(value)
    return {"kind": kind.value, "value": payload}


def decode_scalar(data: Any) -> Any:
    """`encode_scalar` の逆変換。不正な入力は `ValueError`。"""
    if not isinstance(data, dict) or "kind" not in data or "value" not in data:
        raise ValueError(f"スカラー表現が不正です: {data!r}")
    kind = resolve_kind(data["kind"])
    raw = data["value"]
    try:
        if kind is ScalarKind.INTEGER:
            if isinstance(raw, bool) or not isinstance(raw, int):
                raise ValueError(f"整数ではありません: {raw!r}")
            return raw
        if kind is ScalarKind.FLOAT:
            return float(raw)
        if kind is ScalarKind.RATIONAL:
            return Fraction(str(raw))
        return Decimal(str(raw))
    except (TypeError, ArithmeticError) as exc:
        raise ValueError(f"スカラー値を復元できません: {raw!r}") from exc


def numpy_dtype(kind: ScalarKind) -> Any:
    """NumPy 格納時の dtype。FLOAT のみ float64、厳密種別は object で保持する。"""
    return np.float64 if kind is ScalarKind.FLOAT else object


__all__ = [
    "ScalarKind",
    "ScalarTypeError",
    "classify",
    "promote",
    "common_kind",
    "ensure_scalar",
    "is_scalar",
    "default_kind",
    "resolve_kind",
    "zero",
    "one",
    "convert",
    "sq",
    "sqrt",
    "sin",
    "cos",
    "atan2",
    "sign",
    "encode_scalar",
    "decode_scalar",
    "numpy_dtype",
]
