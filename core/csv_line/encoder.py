from __future__ import annotations

from typing import AnyStr, Iterable

from .models import DEFAULT_SEPARATOR, QUOTE_CHAR


def _quote_for(value: AnyStr) -> AnyStr:
    if isinstance(value, bytes):
        return QUOTE_CHAR.encode("ascii")
    return QUOTE_CHAR


def encode_field(value: AnyStr) -> AnyStr:
    """クォートを二重化した上で、全体をクォートで囲む。

    必要かどうかに関わらず常にクォートする。str / bytes どちらも受け付け、
    入力と同じ型を返す。
    """
    quote = _quote_for(value)
    return quote + value.replace(quote, quote + quote) + quote


def encode_line(fields: Iterable[AnyStr], separator: AnyStr = DEFAULT_SEPARATOR) -> AnyStr:
    """各フィールドを encode_field() し、separator で連結する（行末の改行は付けない）"""
    encoded = [encode_field(f) for f in fields]
    if encoded and isinstance(encoded[0], bytes) and isinstance(separator, str):
        separator = separator.encode("ascii")
    return separator.join(encoded)
