from typing import List


def byte_to_bits(byte: int) -> str:
    """One byte -> 8-character bitstring."""
    return f"{byte:08b}"


def bitstring_to_bytes(bits: str) -> bytes:
    """
    Convert bitstring -> bytes.

    Length must be a multiple of 8.
    """
    if len(bits) % 8 != 0:
        raise ValueError(
            f"Bitstring length must be multiple of 8, got {len(bits)}"
        )
    return bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits), 8))


def chunk_string(s: str, size: int) -> List[str]:
    """Split a string into chunks of length `size`."""
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return [s[i:i + size] for i in range(0, len(s), size)]
