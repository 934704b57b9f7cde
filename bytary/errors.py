"""
Error taxonomy for format conversion.

Decode errors carry the offending token and its character offset in the
input so the caller can point at the exact spot that failed.
"""
from typing import Optional


class BytaryError(ValueError):
    """Base class for every error raised by bytary."""


class InvalidFormat(BytaryError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid Format: '{name}'")


class DecodeError(BytaryError):
    """
    Input could not be decoded in the selected format.

    Attributes:
        token: The offending chunk of input text.
        position: Character offset of `token` in the input (0-based).
        format: Name of the input format being decoded.
    """
    reason = "invalid input"

    def __init__(self, token: str, position: int, format: Optional[str] = None, detail: str = ""):
        self.token = token
        self.position = position
        self.format = format
        self.detail = detail
        super().__init__(self._message())

    def _message(self) -> str:
        where = f"{self.format} input" if self.format else "input"
        msg = f"Invalid {where}: {self.reason} {self.token!r} at position {self.position}"
        if self.detail:
            msg += f" ({self.detail})"
        return msg


class InvalidDigit(DecodeError):
    reason = "invalid digit"


class OddDigitCount(DecodeError):
    reason = "odd number of digits, unpaired digit"


class InvalidGroupLength(DecodeError):
    reason = "digit group of invalid length"


class ValueOverflow(DecodeError):
    reason = "value does not fit in a byte"


class InvalidPadding(DecodeError):
    reason = "incorrect length or padding"
