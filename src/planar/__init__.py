"""
どこで: `planar` パッケージ（代数層）。
何を: 2D の値型 `Vector`/`Point`/`Complex`（rotor）と、アフィン変換 `Matrix`。
なぜ: カメラや描画前段が使う純粋な値代数を、数値型に依存しない形で 1 か所にまとめるため。
"""

from .complex import Complex
from .matrix import Matrix
from .point import Point
from .vector import Vector

__all__ = ["Vector", "Point", "Complex", "Matrix"]
