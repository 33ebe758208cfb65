import pytest

from core.csv_line.buffers import ListBuffer, StringIOBuffer
from core.csv_line.decoder import decode


@pytest.mark.parametrize("buffer_cls", [ListBuffer, StringIOBuffer])
def test_buffer_operations(buffer_cls):
    buf = buffer_cls()
    assert buf.is_empty()
    assert buf.value() == ""

    buf.append("a")
    buf.append_repeated('"', 3)
    buf.append_repeated("x", 0)
    assert not buf.is_empty()
    assert buf.value() == 'a"""'

    buf.clear()
    assert buf.is_empty()
    assert buf.value() == ""

    # clear 後も再利用できる
    buf.append("b")
    assert buf.value() == "b"


def test_append_repeated_zero_keeps_buffer_empty():
    buf = ListBuffer()
    buf.append_repeated('"', 0)
    assert buf.is_empty()


class RecordingBuffer:
    """継承なしで FieldBuffer を満たすテスト用バッファ"""

    instances = 0

    def __init__(self):
        RecordingBuffer.instances += 1
        self.text = ""

    def append(self, ch):
        self.text += ch

    def append_repeated(self, ch, count):
        self.text += ch * count

    def is_empty(self):
        return self.text == ""

    def value(self):
        return self.text.upper()

    def clear(self):
        self.text = ""


def test_decode_accepts_any_buffer_with_the_required_methods():
    RecordingBuffer.instances = 0

    fields = decode('a,"b""c",d', buffer_factory=RecordingBuffer)

    # value() の結果がそのままフィールドになる
    assert fields == ["A", 'B"C', "D"]
    # 1 回の decode につきバッファは 1 つだけ
    assert RecordingBuffer.instances == 1
