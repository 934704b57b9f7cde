"""
Octal text codec.

Encoding is fixed-width: three digits per byte ('\\n' -> '012'). A token of
1-3 digits decodes to one byte; longer tokens are read as consecutive
3-digit bytes.
"""
import re
from typing import List

from bytary.encoding_schemes.tokens import as_text, iter_tokens
from bytary.errors import InvalidDigit, InvalidGroupLength, ValueOverflow
from bytary.utils.bits_bytes_utils import chunk_string

DIGITS_PER_BYTE = 3
MAX_BYTE = 0xFF

_NON_OCT_RE = re.compile(r"[^0-7]")


def oct_encode(data: bytes) -> List[str]:
    return [f"{byte:03o}" for byte in data]


def oct_decode(data: bytes) -> bytes:
    out = bytearray()
    for pos, token in iter_tokens(as_text(data)):
        bad = _NON_OCT_RE.search(token)
        if bad:
            raise InvalidDigit(bad.group(), pos + bad.start(), format="oct")

        if len(token) > DIGITS_PER_BYTE and len(token) % DIGITS_PER_BYTE:
            raise InvalidGroupLength(
                token,
                pos,
                format="oct",
                detail=f"{len(token)} digits, expected 1-3 or a multiple of 3",
            )

        for i, group in enumerate(chunk_string(token, DIGITS_PER_BYTE)):
            value = int(group, 8)
            if value > MAX_BYTE:
                raise ValueOverflow(
                    group,
                    pos + i * DIGITS_PER_BYTE,
                    format="oct",
                    detail=f"value {value} > {MAX_BYTE}",
                )
            out.append(value)
    return bytes(out)
