import pytest

from bytary.encoding_schemes import Format, decode, encode
from bytary.errors import (
    DecodeError,
    InvalidDigit,
    InvalidGroupLength,
    InvalidPadding,
    OddDigitCount,
    ValueOverflow,
)
from bytary.layout import layout

SAMPLES = [
    b"",
    b"\x00",
    b"Hello, World!\n",
    bytes(range(256)),
    bytes(reversed(range(256))) * 3,
]

TEXT_FORMATS = [Format.BIN, Format.HEX, Format.OCT, Format.BASE32, Format.BASE64]


def _joined(fmt, data):
    tokens = encode(fmt, data)
    if fmt is Format.BYTES:
        return b"".join(tokens)
    return "".join(tokens).encode("ascii")


# --- encoders ---------------------------------------------------------------

def test_encode_hex_per_byte_tokens():
    assert encode("hex", b"ABC\n") == ["41", "42", "43", "0a"]
    assert encode("hex", b"\xff\x00") == ["ff", "00"]


def test_encode_bin_zero_padded():
    assert encode("bin", b"A\x01") == ["01000001", "00000001"]


def test_encode_oct_fixed_width():
    assert encode("oct", b"A\n\xff") == ["101", "012", "377"]


def test_encode_bytes_identity():
    data = bytes(range(256))
    assert b"".join(encode("bytes", data)) == data
    assert len(encode("bytes", data)) == 256


def test_encode_base_n_one_token_per_char():
    assert encode("base64", b"hi") == list("aGk=")
    assert encode("base32", b"hi") == list("NBUQ====")


def test_encode_is_deterministic():
    for fmt in Format:
        assert encode(fmt, SAMPLES[3]) == encode(fmt, SAMPLES[3])


# --- round trips ------------------------------------------------------------

@pytest.mark.parametrize("fmt", list(Format))
def test_roundtrip_without_layout(fmt):
    for data in SAMPLES:
        assert decode(fmt, _joined(fmt, data)) == data


@pytest.mark.parametrize("fmt", TEXT_FORMATS)
@pytest.mark.parametrize("space,wrap", [(1, 0), (0, 1), (3, 5), (4, 4), (2, 16)])
def test_roundtrip_with_layout(fmt, space, wrap):
    data = SAMPLES[2] + SAMPLES[3]
    text = layout(encode(fmt, data), space, wrap)
    assert decode(fmt, text.encode("ascii")) == data


def test_decode_bytes_identity():
    data = b"\x00\xff raw \n"
    assert decode("bytes", data) == data


# --- bin --------------------------------------------------------------------

def test_bin_decode_spaced_and_concatenated():
    assert decode("bin", b"01000001 01000010") == b"AB"
    assert decode("bin", b"0100000101000010") == b"AB"
    assert decode("bin", b"\t01000001\r\n\n01000010\n") == b"AB"


def test_bin_decode_short_token_is_one_byte():
    assert decode("bin", b"101 1 0") == b"\x05\x01\x00"


def test_bin_decode_invalid_digit():
    with pytest.raises(InvalidDigit) as excinfo:
        decode("bin", b"01 2")
    assert excinfo.value.token == "2"
    assert excinfo.value.position == 3
    assert excinfo.value.format == "bin"


def test_bin_decode_bad_group_length():
    with pytest.raises(InvalidGroupLength) as excinfo:
        decode("bin", b"00000001 010000010")
    assert excinfo.value.token == "010000010"
    assert excinfo.value.position == 9


# --- hex --------------------------------------------------------------------

def test_hex_decode_whitespace_tolerant():
    assert decode("hex", b"4142430a") == b"ABC\n"
    assert decode("hex", b"41 42\n43 0A\n") == b"ABC\n"
    assert decode("hex", b"4 1") == b"A"


def test_hex_decode_odd_digit_count():
    with pytest.raises(OddDigitCount) as excinfo:
        decode("hex", b"41 4")
    assert excinfo.value.token == "4"
    assert excinfo.value.position == 3


def test_hex_decode_invalid_digit():
    with pytest.raises(InvalidDigit) as excinfo:
        decode("hex", b"41 4g")
    assert excinfo.value.token == "g"
    assert excinfo.value.position == 4


def test_hex_decode_non_ascii_is_invalid_digit():
    with pytest.raises(InvalidDigit) as excinfo:
        decode("hex", b"41\xe9")
    assert excinfo.value.position == 2


# --- oct --------------------------------------------------------------------

def test_oct_decode_tokens():
    assert decode("oct", b"101 102") == b"AB"
    assert decode("oct", b"101102") == b"AB"
    assert decode("oct", b"12 0 377") == b"\n\x00\xff"


def test_oct_decode_overflow():
    with pytest.raises(ValueOverflow) as excinfo:
        decode("oct", b"400")
    assert excinfo.value.token == "400"
    assert excinfo.value.position == 0


def test_oct_decode_overflow_inside_long_token():
    with pytest.raises(ValueOverflow) as excinfo:
        decode("oct", b"101777")
    assert excinfo.value.token == "777"
    assert excinfo.value.position == 3


def test_oct_decode_invalid_digit():
    with pytest.raises(InvalidDigit) as excinfo:
        decode("oct", b"1018")
    assert excinfo.value.token == "8"
    assert excinfo.value.position == 3


def test_oct_decode_bad_group_length():
    with pytest.raises(InvalidGroupLength):
        decode("oct", b"1011")


# --- base32 / base64 --------------------------------------------------------

def test_base_n_decode():
    assert decode("base64", b"aG\nk=") == b"hi"
    assert decode("base32", b"NBUQ ====") == b"hi"
    assert decode("base64", b"  \n") == b""


def test_base64_decode_invalid_char():
    with pytest.raises(InvalidDigit) as excinfo:
        decode("base64", b"aG*k")
    assert excinfo.value.token == "*"
    assert excinfo.value.position == 2


def test_base32_is_case_sensitive():
    with pytest.raises(InvalidDigit):
        decode("base32", b"nbuq====")


def test_base64_decode_bad_padding():
    with pytest.raises(InvalidPadding) as excinfo:
        decode("base64", b"aG k")
    assert excinfo.value.token == "k"
    assert excinfo.value.position == 3
    assert excinfo.value.format == "base64"


def test_decode_errors_are_value_errors():
    with pytest.raises(ValueError):
        decode("hex", b"zz")
    assert issubclass(OddDigitCount, DecodeError)


def test_decode_error_message_names_token_and_position():
    with pytest.raises(ValueOverflow) as excinfo:
        decode("oct", b"012 400")
    assert str(excinfo.value) == (
        "Invalid oct input: value does not fit in a byte '400' at position 4 (value 256 > 255)"
    )
