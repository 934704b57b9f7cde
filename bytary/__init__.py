"""
bytary: convert byte streams between raw bytes, binary, hex, octal,
base32 and base64 text, with optional spacing and line wrapping.
"""

__version__ = "0.1.0"

from bytary.encoding_schemes import Format, decode, encode, list_formats
from bytary.errors import (
    BytaryError,
    DecodeError,
    InvalidDigit,
    InvalidFormat,
    InvalidGroupLength,
    InvalidPadding,
    OddDigitCount,
    ValueOverflow,
)
from bytary.layout import layout
from bytary.pipeline import LayoutConfig, PipelineConfig, convert_stream, run

__all__ = [
    "__version__",
    "Format",
    "decode",
    "encode",
    "list_formats",
    "BytaryError",
    "DecodeError",
    "InvalidDigit",
    "InvalidFormat",
    "InvalidGroupLength",
    "InvalidPadding",
    "OddDigitCount",
    "ValueOverflow",
    "layout",
    "LayoutConfig",
    "PipelineConfig",
    "convert_stream",
    "run",
]
