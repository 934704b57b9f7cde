"""
Codec registry to keep pipeline wiring simple.

Each `Format` maps to a pair of encode/decode functions. Encoders turn raw
bytes into a list of tokens (one per byte for the digit formats) with no
separators; laying tokens out is left to `bytary.layout`.
"""

from typing import Callable, Dict, List, Sequence, Tuple, Union

from bytary.encoding_schemes.base_n import (
    base32_decode,
    base32_encode,
    base64_decode,
    base64_encode,
)
from bytary.encoding_schemes.binary import bin_decode, bin_encode
from bytary.encoding_schemes.formats import Format
from bytary.encoding_schemes.hexadecimal import hex_decode, hex_encode
from bytary.encoding_schemes.octal import oct_decode, oct_encode
from bytary.encoding_schemes.raw import raw_decode, raw_encode

Token = Union[str, bytes]
EncodeFn = Callable[[bytes], Sequence[Token]]
DecodeFn = Callable[[bytes], bytes]


FORMAT_CODECS: Dict[Format, Tuple[EncodeFn, DecodeFn]] = {
    Format.BYTES: (raw_encode, raw_decode),
    Format.BIN: (bin_encode, bin_decode),
    Format.HEX: (hex_encode, hex_decode),
    Format.OCT: (oct_encode, oct_decode),
    Format.BASE32: (base32_encode, base32_decode),
    Format.BASE64: (base64_encode, base64_decode),
}

_missing = set(Format) - set(FORMAT_CODECS)
if _missing:
    raise RuntimeError(f"No codec registered for: {sorted(f.value for f in _missing)}")

# Formats whose encoded form is printable text and may be spaced/wrapped.
TEXT_FORMATS = frozenset(fmt for fmt in Format if fmt is not Format.BYTES)


def get_codec(fmt: Union[Format, str]) -> Tuple[EncodeFn, DecodeFn]:
    return FORMAT_CODECS[Format.parse(fmt)]


def is_text_format(fmt: Union[Format, str]) -> bool:
    return Format.parse(fmt) in TEXT_FORMATS


def encode(fmt: Union[Format, str], data: bytes) -> List[Token]:
    """
    Encode raw bytes into `fmt` tokens. Never fails.
    """
    encode_fn, _ = get_codec(fmt)
    return list(encode_fn(data))


def decode(fmt: Union[Format, str], data: bytes) -> bytes:
    """
    Decode `fmt` input back to raw bytes.

    Raises a `bytary.errors.DecodeError` subclass on malformed input.
    """
    _, decode_fn = get_codec(fmt)
    return decode_fn(data)
