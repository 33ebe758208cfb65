# core/csv_line/__init__.py

"""
CSV Line Codec core package.

- models.py : Mode / Pydantic モデル定義
- errors.py : DecodeError とその派生
- buffers.py: フィールド組み立て用バッファ（FieldBuffer プロトコル）
- decoder.py: 1 行 -> フィールド列
- encoder.py: フィールド列 -> 1 行
- service.py: API 用のリクエスト / レスポンス処理
"""

from .buffers import FieldBuffer, ListBuffer, StringIOBuffer
from .decoder import decode, decode_into
from .encoder import encode_field, encode_line
from .errors import (
    DecodeError,
    EmbeddedNewline,
    InvalidCharacterAfterClosingQuote,
    UnescapedQuoteInField,
)
from .models import Mode

__all__ = [
    "DecodeError",
    "EmbeddedNewline",
    "FieldBuffer",
    "InvalidCharacterAfterClosingQuote",
    "ListBuffer",
    "Mode",
    "StringIOBuffer",
    "UnescapedQuoteInField",
    "decode",
    "decode_into",
    "encode_field",
    "encode_line",
]
