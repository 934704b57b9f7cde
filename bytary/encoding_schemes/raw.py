from typing import List


def raw_encode(data: bytes) -> List[bytes]:
    """Identity encoding: one single-byte token per input byte."""
    return [data[i:i + 1] for i in range(len(data))]


def raw_decode(data: bytes) -> bytes:
    """Identity decoding: input is already raw bytes."""
    return bytes(data)
