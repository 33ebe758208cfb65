from __future__ import annotations

import sys
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# ============================================================
# プロジェクトルートを sys.path に追加
# （Lambda / uvicorn どちらでも core パッケージを解決できるように）
# ============================================================
ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from core.csv_line.errors import DecodeError  # noqa: E402
from core.csv_line.models import CsvDecodeRequest, CsvEncodeRequest  # noqa: E402
from core.csv_line.service import (  # noqa: E402
    API_VERSION,
    InvalidBase64Error,
    process_decode,
    process_encode,
)

# ============================================================
# API Gateway 側で /csv をプレフィックスとしてルーティングしているため、
# FastAPI には root_path="/csv" を指定し、ルート定義は /v0/... にする
# ============================================================
app = FastAPI(
    title="CSV Line Codec API",
    version=API_VERSION,
    description="Decode / encode a single CSV line (strict or loose quoting)",
    root_path="/csv",
)


def _error_response(code: str, message: str, **extra) -> JSONResponse:
    error = {"code": code, "message": message}
    error.update(extra)
    return JSONResponse(
        status_code=400,
        content={
            "error": error,
            "meta": {
                "version": API_VERSION,
            },
        },
    )


@app.exception_handler(InvalidBase64Error)
async def invalid_base64_handler(_: Request, exc: InvalidBase64Error) -> JSONResponse:
    return _error_response("INVALID_BASE64", str(exc))


@app.exception_handler(DecodeError)
async def decode_error_handler(_: Request, exc: DecodeError) -> JSONResponse:
    return _error_response(exc.code, str(exc), position=exc.position)


@app.post("/v0/decode")
async def csv_decode_endpoint(payload: CsvDecodeRequest):
    response = process_decode(payload)
    return response.model_dump()


@app.post("/v0/encode")
async def csv_encode_endpoint(payload: CsvEncodeRequest):
    response = process_encode(payload)
    return response.model_dump()
