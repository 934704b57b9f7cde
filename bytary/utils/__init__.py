"""Utility helpers shared across codec components."""

from bytary.utils.bits_bytes_utils import (
    bitstring_to_bytes,
    byte_to_bits,
    chunk_string,
)

__all__ = [
    "bitstring_to_bytes",
    "byte_to_bits",
    "chunk_string",
]
