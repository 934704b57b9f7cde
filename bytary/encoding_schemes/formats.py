from enum import Enum
from typing import List, Union

from bytary.errors import InvalidFormat


class Format(Enum):
    """
    Supported representations of a byte stream.

    The set is closed: every codec table in the package is keyed by these
    members and must cover all of them.
    """
    BYTES = "bytes"
    BIN = "bin"
    HEX = "hex"
    OCT = "oct"
    BASE32 = "base32"
    BASE64 = "base64"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: Union["Format", str]) -> "Format":
        """Resolve a format name (case-insensitive) to a `Format` member."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise InvalidFormat(str(name)) from None


DEFAULT_FORMAT = Format.BYTES


def list_formats() -> List[str]:
    """Names of all supported formats, in declaration order."""
    return [fmt.value for fmt in Format]
