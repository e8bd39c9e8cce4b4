"""Common utility helpers: integer encoding, SHA-256."""

import hashlib
from typing import Union


def int_to_bytes(value: int) -> bytes:
    """
    Big-endian minimal encoding of a non-negative integer.
    Zero encodes as a single 0x00 byte.
    """
    if value < 0:
        raise ValueError("Cannot encode a negative integer")
    return value.to_bytes((value.bit_length() + 7) // 8 or 1, "big")


def sha256_hex(data: Union[bytes, str]) -> str:
    """
    Compute SHA-256 and return hex string.
    Accepts bytes or str (utf-8).
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()
