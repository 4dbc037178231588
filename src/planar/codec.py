"""
どこで: `planar.codec`
何を: 値型のフィールドを種別タグ付き辞書へ写す/戻す小さなヘルパ。
なぜ: Vector/Point/Complex/Matrix の `to_dict`/`from_dict` を同じ規則（全フィールドを厳密に往復）で
     揃えるため。
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from numeric.scalar import decode_scalar, encode_scalar


def encode_fields(obj: Any, names: Sequence[str]) -> dict[str, Any]:
    return {name: encode_scalar(getattr(obj, name)) for name in names}


def decode_fields(data: Any, names: Sequence[str], type_name: str) -> list[Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{type_name} の辞書表現ではありません: {data!r}")
    missing = [n for n in names if n not in data]
    if missing:
        raise ValueError(f"{type_name} のフィールドが欠落しています: {missing}")
    return [decode_scalar(data[n]) for n in names]


__all__ = ["encode_fields", "decode_fields"]
