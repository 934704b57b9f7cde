from bytary.encoding_schemes.formats import DEFAULT_FORMAT, Format, list_formats
from bytary.encoding_schemes.registry import (
    FORMAT_CODECS,
    TEXT_FORMATS,
    decode,
    encode,
    get_codec,
    is_text_format,
)

__all__ = [
    "DEFAULT_FORMAT",
    "Format",
    "list_formats",
    "FORMAT_CODECS",
    "TEXT_FORMATS",
    "decode",
    "encode",
    "get_codec",
    "is_text_format",
]
