import pytest

from core.csv_line.decoder import decode
from core.csv_line.encoder import encode_field, encode_line
from core.csv_line.models import Mode


def test_encode_field_always_quotes():
    assert encode_field("hello") == '"hello"'
    assert encode_field("") == '""'
    assert encode_field("100.0") == '"100.0"'


def test_encode_field_doubles_embedded_quotes():
    assert encode_field('say "hi"') == '"say ""hi"""'
    assert encode_field('"') == '""""'


@pytest.mark.parametrize("value", ["", "plain", 'a"b', '""', '"x"y"', 'end"'])
def test_encoded_field_quote_count(value):
    """両端のクォート 2 個 + 埋め込みクォートの 2 倍"""
    encoded = encode_field(value)

    assert encoded.startswith('"') and encoded.endswith('"')
    assert encoded.count('"') == 2 * value.count('"') + 2


def test_encode_line_joins_with_single_separator():
    assert encode_line(['a"b', "c"], ",") == '"a""b","c"'
    assert encode_line(["a", "b", "c"], separator=";") == '"a";"b";"c"'
    assert encode_line(["only"]) == '"only"'


def test_encode_line_has_no_line_terminator():
    line = encode_line(["a", "b"])
    assert not line.endswith("\n")
    assert not line.endswith("\r\n")


def test_encode_line_accepts_any_iterable_and_empty_input():
    assert encode_line(iter(["x", "y"])) == '"x","y"'
    assert encode_line([]) == ""


def test_encode_bytes_fields():
    assert encode_field(b'a"b') == b'"a""b"'
    assert encode_line([b"a", b'"']) == b'"a",""""'
    assert encode_line([b"a", b"b"], separator=b"|") == b'"a"|"b"'


@pytest.mark.parametrize(
    "fields",
    [
        ["a", "b"],
        ['a"b', "c"],
        [""],
        ["", ""],
        ['"'],
        ['""'],
        ['"a', 'a"', '""a'],
        ['",', ',"'],
        ["hello, world", 'say "hi"'],
        ["multi\nline", "   "],
    ],
)
@pytest.mark.parametrize("separator", [",", ";", "\t"])
def test_encoded_line_decodes_back(fields, separator):
    line = encode_line(fields, separator)
    assert decode(line, separator=separator, mode=Mode.strict) == fields
