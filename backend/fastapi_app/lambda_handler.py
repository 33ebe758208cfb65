from __future__ import annotations

import json
from functools import lru_cache
from typing import Optional

from mangum import Mangum

from backend.fastapi_app.main import app


def _safe_get(d, *keys, default=None):
    cur = d
    for k in keys:
        if not isinstance(cur, dict) or k not in cur:
            return default
        cur = cur[k]
    return cur


def _stage_base_path(stage: Optional[str]) -> Optional[str]:
    # $default ステージの場合はパスにステージ名が付かない
    if stage and stage != "$default":
        return f"/{stage}"
    return None


@lru_cache(maxsize=8)
def _adapter(base_path: Optional[str]) -> Mangum:
    # ステージごとに Mangum を 1 つだけ作り、ウォームスタート時は使い回す
    return Mangum(app, api_gateway_base_path=base_path)


def _print_diag(event) -> None:
    """CloudWatch 向けの 1 行 JSON 診断ログ（ボディは出さない）"""
    print(
        json.dumps(
            {
                "diag": "incoming_request",
                "stage": _safe_get(event, "requestContext", "stage"),
                "method": _safe_get(event, "requestContext", "http", "method"),
                "rawPath": event.get("rawPath"),
                "requestContext.http.path": _safe_get(event, "requestContext", "http", "path"),
                "body_length": len(event.get("body") or ""),
            },
            ensure_ascii=False,
        )
    )


def handler(event, context):
    _print_diag(event)

    base_path = _stage_base_path(_safe_get(event, "requestContext", "stage"))
    return _adapter(base_path)(event, context)
