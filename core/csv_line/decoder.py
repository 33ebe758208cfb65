from __future__ import annotations

from typing import Callable, List, MutableSequence, Union

from .buffers import FieldBuffer, ListBuffer
from .errors import (
    EmbeddedNewline,
    InvalidCharacterAfterClosingQuote,
    UnescapedQuoteInField,
)
from .models import DEFAULT_SEPARATOR, QUOTE_CHAR, Mode, check_separator


BufferFactory = Callable[[], FieldBuffer]


def decode(
    line: str,
    separator: str = DEFAULT_SEPARATOR,
    mode: Union[Mode, str] = Mode.strict,
    buffer_factory: BufferFactory = ListBuffer,
) -> List[str]:
    """1 行分の CSV テキストをフィールドのリストに分解する

    - 連続するクォートは「ラン」単位でまとめて数える
      - 奇数個: フィールドを開く / 閉じるクォートを 1 個含む
      - 偶数個: すべてエスケープされたクォート（2 個で 1 文字）
    - 空行でも必ず 1 フィールド（空文字）を返す
    - strict では最初の違反で DecodeError を送出し、途中までの結果は返さない
    - loose では違反箇所をリテラル文字として取り込んで続行する

    Raises:
        UnescapedQuoteInField / InvalidCharacterAfterClosingQuote / EmbeddedNewline
        (いずれも strict のみ)
        ValueError: separator が 1 文字でない、またはクォート文字と同じ
    """
    check_separator(separator)
    strict = Mode(mode) is Mode.strict

    record: List[str] = []
    field = buffer_factory()
    in_quotes = False
    n = len(line)
    i = 0

    while i < n:
        c = line[i]

        if c == QUOTE_CHAR:
            if not in_quotes and not field.is_empty():
                if strict:
                    raise UnescapedQuoteInField(line, i)
                field.append(QUOTE_CHAR)
                i += 1
                continue

            run_end = i
            while run_end < n and line[run_end] == QUOTE_CHAR:
                run_end += 1
            run = run_end - i
            enclosing = run % 2 == 1
            # ラン直後の文字が区切り文字でも行末でもない
            trailing = run_end < n and line[run_end] != separator

            if in_quotes and enclosing and trailing and not strict:
                # 閉じクォートとして解釈できないランはそのまま中身として扱う
                field.append_repeated(QUOTE_CHAR, run)
            else:
                if enclosing:
                    ignore = 1
                elif field.is_empty():
                    # """" のようにクォートだけのフィールドは外側の 1 組を除く
                    ignore = 2
                else:
                    ignore = 0
                field.append_repeated(QUOTE_CHAR, (run - ignore) // 2)

                if enclosing:
                    in_quotes = not in_quotes
                    if not in_quotes and trailing and strict:
                        raise InvalidCharacterAfterClosingQuote(line, run_end)

            i = run_end
            continue

        if c == separator and not in_quotes:
            record.append(field.value())
            field.clear()
        elif c == "\n" and not in_quotes:
            if strict:
                raise EmbeddedNewline(line, i)
            field.append(c)
        else:
            field.append(c)
        i += 1

    record.append(field.value())
    return record


def decode_into(
    line: str,
    out: MutableSequence[str],
    separator: str = DEFAULT_SEPARATOR,
    mode: Union[Mode, str] = Mode.strict,
    buffer_factory: BufferFactory = ListBuffer,
) -> int:
    """decode() の結果を既存のシーケンス out の末尾に追加し、追加した件数を返す。

    エラー時は out を変更しない。
    """
    fields = decode(line, separator=separator, mode=mode, buffer_factory=buffer_factory)
    out.extend(fields)
    return len(fields)
