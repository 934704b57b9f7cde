"""
Whitespace tokenizer shared by the textual decoders.

Decoders never look at whitespace: the layout stage may put any number of
spaces and newlines between tokens, so input is split into runs of
non-whitespace first and each run is parsed on its own.
"""
import re
from typing import Iterator, List, Tuple

_TOKEN_RE = re.compile(r"[^ \t\r\n\v\f]+")


def as_text(data: bytes) -> str:
    # Latin-1 maps each byte to one character: offsets stay byte offsets.
    return data.decode("latin-1")


def iter_tokens(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (offset, token) for every whitespace-delimited token."""
    for match in _TOKEN_RE.finditer(text):
        yield match.start(), match.group()


def split_tokens(text: str) -> List[Tuple[int, str]]:
    return list(iter_tokens(text))
