from __future__ import annotations


class DecodeError(Exception):
    """strict モードでの行デコード失敗の基底クラス

    code     : API のエラーレスポンスにそのまま載せる識別子
    position : 違反を検出した行内の位置（0 始まり）
    """

    code = "DECODE_ERROR"
    reason = "invalid CSV line"

    def __init__(self, line: str, position: int) -> None:
        self.line = line
        self.position = position
        super().__init__(f"{self.reason} (position {position})")


class UnescapedQuoteInField(DecodeError):
    """クォートで始まっていないフィールドの途中にクォートが現れた"""

    code = "UNESCAPED_QUOTE_IN_FIELD"
    reason = "quote character inside a field that was not opened with a quote"


class InvalidCharacterAfterClosingQuote(DecodeError):
    """閉じクォートの直後が区切り文字でも行末でもない"""

    code = "INVALID_CHARACTER_AFTER_CLOSING_QUOTE"
    reason = "closing quote must be followed by the separator or end of line"


class EmbeddedNewline(DecodeError):
    """クォートの外側に改行文字がある"""

    code = "EMBEDDED_NEWLINE"
    reason = "newline character outside of a quoted field"
