"""
Binary-digit text codec.

Every byte becomes eight '0'/'1' characters. On the way back a token of 1-8
digits is a single byte (so hand-written '101' means 0x05), and a longer
token must hold whole 8-digit bytes, which is how unspaced or group-spaced
encoder output looks.
"""
import re
from typing import List

from bytary.encoding_schemes.tokens import as_text, iter_tokens
from bytary.errors import InvalidDigit, InvalidGroupLength
from bytary.utils.bits_bytes_utils import bitstring_to_bytes, byte_to_bits

BITS_PER_BYTE = 8

_NON_BIN_RE = re.compile(r"[^01]")


def bin_encode(data: bytes) -> List[str]:
    return [byte_to_bits(byte) for byte in data]


def bin_decode(data: bytes) -> bytes:
    out = bytearray()
    for pos, token in iter_tokens(as_text(data)):
        bad = _NON_BIN_RE.search(token)
        if bad:
            raise InvalidDigit(bad.group(), pos + bad.start(), format="bin")

        if len(token) <= BITS_PER_BYTE:
            out.append(int(token, 2))
        elif len(token) % BITS_PER_BYTE == 0:
            out += bitstring_to_bytes(token)
        else:
            raise InvalidGroupLength(
                token,
                pos,
                format="bin",
                detail=f"{len(token)} digits, expected 1-8 or a multiple of 8",
            )
    return bytes(out)
