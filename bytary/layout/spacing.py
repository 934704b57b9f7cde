"""
Layout stage: separator spaces and line wraps between encoded tokens.

Intervals count tokens, not characters, so a byte's digits are never split.
With 1-based token index `i` out of `n` tokens:

- a newline follows token `i` when `i % wrap_interval == 0`
  (including after the last token);
- otherwise a space follows token `i` when `i % space_interval == 0`
  and `i < n`.

A zero interval disables that dimension. Wrap wins when both apply, so a
line never ends in a space.
"""
from typing import Iterator, Sequence

SPACE = " "
NEWLINE = "\n"


def _check_interval(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def separator_after(index: int, count: int, space_interval: int = 0, wrap_interval: int = 0) -> str:
    """
    Separator emitted after the 1-based token `index` of `count` tokens.
    """
    if wrap_interval and index % wrap_interval == 0:
        return NEWLINE
    if space_interval and index % space_interval == 0 and index < count:
        return SPACE
    return ""


def iter_layout(tokens: Sequence[str], space_interval: int = 0, wrap_interval: int = 0) -> Iterator[str]:
    """Yield tokens interleaved with their separators."""
    _check_interval("space_interval", space_interval)
    _check_interval("wrap_interval", wrap_interval)

    count = len(tokens)
    for index, token in enumerate(tokens, start=1):
        yield token
        sep = separator_after(index, count, space_interval, wrap_interval)
        if sep:
            yield sep


def layout(tokens: Sequence[str], space_interval: int = 0, wrap_interval: int = 0) -> str:
    """
    Join `tokens` into one string, spaced every `space_interval` tokens and
    wrapped every `wrap_interval` tokens.
    """
    if not space_interval and not wrap_interval:
        return "".join(tokens)
    return "".join(iter_layout(tokens, space_interval, wrap_interval))
