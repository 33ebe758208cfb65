from __future__ import annotations

import base64
import logging
from typing import Any, Dict

from .decoder import decode
from .encoder import encode_line
from .errors import DecodeError
from .models import (
    CsvDecodeRequest,
    CsvDecodeResponse,
    CsvDecodeResult,
    CsvEncodeRequest,
    CsvEncodeResponse,
    CsvEncodeResult,
)

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


class InvalidBase64Error(Exception):
    """Base64 デコード失敗時に投げる独自例外"""

    pass


# ---------------------------------------------------------------------------
# Base64 / テキストユーティリティ
# ---------------------------------------------------------------------------


def _decode_base64_to_text(line_b64: str) -> str:
    """Base64 -> UTF-8 テキストに変換

    - 先に空白類（スペース・改行・タブなど）をすべて削除
    - そのうえで validate=True で厳密に Base64 を検証
    """
    try:
        compact = "".join(line_b64.split())
        raw = base64.b64decode(compact, validate=True)
        return raw.decode("utf-8")
    except Exception as exc:  # noqa: BLE001
        raise InvalidBase64Error("line_b64 is not valid Base64 UTF-8 text") from exc


def _resolve_line(request: CsvDecodeRequest) -> str:
    if request.line_b64 is not None:
        return _decode_base64_to_text(request.line_b64)
    return request.line or ""


def _meta(**extra: Any) -> Dict[str, Any]:
    meta: Dict[str, Any] = {"version": API_VERSION}
    meta.update(extra)
    return meta


# ---------------------------------------------------------------------------
# API エントリーポイント
# ---------------------------------------------------------------------------


def process_decode(request: CsvDecodeRequest) -> CsvDecodeResponse:
    """1 行デコードのメイン処理。DecodeError はそのまま呼び出し側へ送出する。"""

    # 1) 入力行の確定（平文 or Base64）
    line = _resolve_line(request)

    # 2) デコード
    try:
        fields = decode(line, separator=request.separator, mode=request.mode)
    except DecodeError as exc:
        # 行の中身はログに出さない
        logger.info(
            "decode rejected: code=%s position=%d mode=%s",
            exc.code,
            exc.position,
            request.mode.value,
        )
        raise

    result = CsvDecodeResult(fields=fields, field_count=len(fields))
    return CsvDecodeResponse(
        result=result,
        meta=_meta(mode_used=request.mode.value, separator=request.separator),
    )


def process_encode(request: CsvEncodeRequest) -> CsvEncodeResponse:
    """フィールド列 -> 1 行のエンコード。エラーになる入力は存在しない。"""

    line = encode_line(request.fields, separator=request.separator)
    logger.debug("encoded %d field(s)", len(request.fields))

    return CsvEncodeResponse(
        result=CsvEncodeResult(line=line),
        meta=_meta(separator=request.separator),
    )
