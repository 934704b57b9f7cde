import re
from typing import List

from bytary.encoding_schemes.tokens import as_text, iter_tokens
from bytary.errors import InvalidDigit, OddDigitCount

_NON_HEX_RE = re.compile(r"[^0-9a-fA-F]")


def hex_encode(data: bytes) -> List[str]:
    """Each byte -> two lowercase hex digits."""
    return [f"{byte:02x}" for byte in data]


def hex_decode(data: bytes) -> bytes:
    """
    Decode hex text, ignoring whitespace anywhere between digits.

    Digits are paired after whitespace is stripped, so '4 1' is 0x41.
    """
    digits: List[str] = []
    last_pos = 0
    for pos, token in iter_tokens(as_text(data)):
        bad = _NON_HEX_RE.search(token)
        if bad:
            raise InvalidDigit(bad.group(), pos + bad.start(), format="hex")
        digits.append(token)
        last_pos = pos + len(token) - 1

    joined = "".join(digits)
    if len(joined) % 2:
        raise OddDigitCount(
            joined[-1],
            last_pos,
            format="hex",
            detail=f"{len(joined)} digits",
        )
    return bytes.fromhex(joined)
