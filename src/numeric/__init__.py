"""
どこで: `numeric` パッケージ。
何を: スカラー種別タグと最小限の数値能力（`scalar`）、汎用補間（`lerp`）。
なぜ: 幾何型（`planar`）を具体的な数値型から切り離すため。
"""

from .lerp import LerpIntegrator, lerp, lerp2
from .scalar import ScalarKind, ScalarTypeError

__all__ = [
    "ScalarKind",
    "ScalarTypeError",
    "lerp",
    "lerp2",
    "LerpIntegrator",
]
