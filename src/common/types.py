"""
どこで: `common` の型定義。
何を: スカラー/2 成分タプルの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np

# 実数スカラー（bool/complex は numeric.scalar で拒否される）
Scalar = int | float | Fraction | Decimal | np.integer | np.floating
Pair = tuple[Scalar, Scalar]


__all__ = ["Scalar", "Pair"]
