from __future__ import annotations

from enum import Enum
from typing import Any, Optional, List, Dict

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict


QUOTE_CHAR = '"'
DEFAULT_SEPARATOR = ","


class Mode(str, Enum):
    """
    Decoder strictness.
    - strict : 不正なクォート / 改行を DecodeError として扱う
    - loose  : 可能な限りリテラル文字として取り込み、処理を続行する
    """

    strict = "strict"
    loose = "loose"


def check_separator(value: str) -> str:
    if len(value) != 1:
        raise ValueError("separator must be exactly one character")
    if value == QUOTE_CHAR:
        raise ValueError("separator must not be the quote character")
    return value


class CsvDecodeRequest(BaseModel):
    """
    1 行分の CSV テキストをフィールド列に分解するリクエスト。

    line / line_b64 のどちらか一方を指定する。
    改行や制御文字を含む行は line_b64 (UTF-8 を Base64 化したもの) で渡す想定。
    """

    line: Optional[str] = None
    line_b64: Optional[str] = None
    separator: str = DEFAULT_SEPARATOR
    mode: Mode = Field(
        default=Mode.strict,
        description="Decoder strictness: strict | loose",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "line": '"hello ""world""",foo',
                "separator": ",",
                "mode": "strict",
            }
        }
    )

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        return check_separator(v)

    @model_validator(mode="after")
    def check_line_source(self) -> "CsvDecodeRequest":
        if (self.line is None) == (self.line_b64 is None):
            raise ValueError("exactly one of line / line_b64 must be given")
        return self


class CsvEncodeRequest(BaseModel):
    """フィールド列を 1 行の CSV テキストに組み立てるリクエスト"""

    fields: List[str]
    separator: str = DEFAULT_SEPARATOR

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "fields": ['a"b', "c"],
                "separator": ",",
            }
        }
    )

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        return check_separator(v)


class CsvDecodeResult(BaseModel):
    fields: List[str]
    field_count: int = 0


class CsvEncodeResult(BaseModel):
    # 行末の改行は付与しない（行の区切りは呼び出し側の責務）
    line: str


class CsvDecodeResponse(BaseModel):
    result: CsvDecodeResult
    meta: Dict[str, Any]


class CsvEncodeResponse(BaseModel):
    result: CsvEncodeResult
    meta: Dict[str, Any]
