from __future__ import annotations

import io
from typing import List, Protocol


class FieldBuffer(Protocol):
    """デコーダがフィールドを組み立てるために要求する最小限の操作

    継承は不要。以下のメソッドを持つクラスであればそのまま decode() に渡せる。
    """

    def append(self, ch: str) -> None: ...

    def append_repeated(self, ch: str, count: int) -> None: ...

    def is_empty(self) -> bool: ...

    def value(self) -> str: ...

    def clear(self) -> None: ...


class ListBuffer:
    """文字のリストに溜めて value() で join する（デフォルト）"""

    def __init__(self) -> None:
        self._chunks: List[str] = []

    def append(self, ch: str) -> None:
        self._chunks.append(ch)

    def append_repeated(self, ch: str, count: int) -> None:
        if count > 0:
            self._chunks.append(ch * count)

    def is_empty(self) -> bool:
        return not self._chunks

    def value(self) -> str:
        return "".join(self._chunks)

    def clear(self) -> None:
        self._chunks = []


class StringIOBuffer:
    """io.StringIO に直接書き込むバッファ"""

    def __init__(self) -> None:
        self._io = io.StringIO()

    def append(self, ch: str) -> None:
        self._io.write(ch)

    def append_repeated(self, ch: str, count: int) -> None:
        if count > 0:
            self._io.write(ch * count)

    def is_empty(self) -> bool:
        return self._io.tell() == 0

    def value(self) -> str:
        return self._io.getvalue()

    def clear(self) -> None:
        self._io.seek(0)
        self._io.truncate(0)
