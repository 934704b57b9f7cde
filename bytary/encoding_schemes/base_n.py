"""
RFC 4648 base32 / base64 text codecs.

These formats pack several bytes into each group of characters, so there is
no per-byte token: the encoders emit one token per output character and the
layout stage spaces and wraps by character.
"""
import base64
import binascii
import re
from typing import Callable, List, Tuple

from bytary.encoding_schemes.tokens import as_text, split_tokens
from bytary.errors import InvalidDigit, InvalidPadding

_NON_BASE32_RE = re.compile(r"[^A-Z2-7=]")
_NON_BASE64_RE = re.compile(r"[^A-Za-z0-9+/=]")


def _strip(
    data: bytes,
    invalid_re: "re.Pattern[str]",
    name: str,
) -> Tuple[str, List[Tuple[int, str]]]:
    tokens = split_tokens(as_text(data))
    for pos, token in tokens:
        bad = invalid_re.search(token)
        if bad:
            raise InvalidDigit(bad.group(), pos + bad.start(), format=name)
    return "".join(token for _, token in tokens), tokens


def _decode(
    data: bytes,
    invalid_re: "re.Pattern[str]",
    name: str,
    decoder: Callable[[str], bytes],
) -> bytes:
    joined, tokens = _strip(data, invalid_re, name)
    if not joined:
        return b""
    try:
        return decoder(joined)
    except binascii.Error as exc:
        pos, token = tokens[-1]
        raise InvalidPadding(
            token,
            pos,
            format=name,
            detail=f"{len(joined)} characters: {exc}",
        ) from exc


def base32_encode(data: bytes) -> List[str]:
    return list(base64.b32encode(data).decode("ascii"))


def base32_decode(data: bytes) -> bytes:
    return _decode(data, _NON_BASE32_RE, "base32", base64.b32decode)


def base64_encode(data: bytes) -> List[str]:
    return list(base64.b64encode(data).decode("ascii"))


def base64_decode(data: bytes) -> bytes:
    return _decode(
        data,
        _NON_BASE64_RE,
        "base64",
        lambda text: base64.b64decode(text, validate=True),
    )
