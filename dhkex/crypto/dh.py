"""Classic DH helpers + Trunc16(SHA256(Ks)) derivation."""

import logging
import secrets
from hashlib import sha256
from typing import Optional, Protocol, Tuple

from dhkex.common.utils import int_to_bytes
from dhkex.crypto.errors import (
    InvalidModulusError,
    InvalidRangeError,
    RandomSourceError,
)

logger = logging.getLogger(__name__)

# Private keys live in [MIN_PRIVATE_KEY, p-1].
MIN_PRIVATE_KEY = 2


class RandomSource(Protocol):
    """Anything exposing randbelow(n) -> int in [0, n-1], such as the `secrets` module."""

    def randbelow(self, n: int) -> int:
        ...


def _check_modulus(p: int) -> None:
    if p <= 0:
        raise InvalidModulusError(f"Modulus must be positive, got {p}")


def generate_private_key(p: int, rng: Optional[RandomSource] = None) -> int:
    """
    Generate a random private exponent in [2, p-1].

    A value u is drawn uniformly from [0, p-3] and shifted by +2, so the
    result is unbiased without rejection sampling.

    :param p: prime modulus, must be > 3
    :param rng: randomness provider, defaults to the `secrets` module
    :return: private exponent
    """
    if p <= 3:
        raise InvalidRangeError(f"Modulus {p} leaves no room for a private key in [2, p-1]")
    range_size = (p - 1) - MIN_PRIVATE_KEY + 1

    source = rng if rng is not None else secrets
    try:
        u = source.randbelow(range_size)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError(f"Random source failed: {exc}") from exc

    if not isinstance(u, int) or not 0 <= u < range_size:
        raise RandomSourceError(f"Random source returned a value outside [0, {range_size - 1}]")

    logger.debug("Generated private key for %d-bit modulus", p.bit_length())
    return u + MIN_PRIVATE_KEY


def derive_public_key(private_key: int, p: int, g: int) -> int:
    """
    Compute public value A = g^a mod p.

    :param private_key: private exponent a (not re-validated)
    :param p: prime modulus
    :param g: generator
    :return: public value A
    """
    _check_modulus(p)
    return pow(g, private_key, p)


def new_key_pair(p: int, g: int, rng: Optional[RandomSource] = None) -> Tuple[int, int]:
    """
    Generate a fresh (private, public) pair for group (p, g).
    """
    private_key = generate_private_key(p, rng)
    public_key = derive_public_key(private_key, p, g)
    return private_key, public_key


def compute_shared_secret(own_private_key: int, peer_public_key: int, p: int) -> int:
    """
    Compute shared secret Ks = (peer_public)^a mod p.

    :param own_private_key: our private exponent
    :param peer_public_key: other side's public value
    :param p: prime modulus
    :return: Ks as integer
    """
    _check_modulus(p)
    return pow(peer_public_key, own_private_key, p)


def derive_aes_key_from_shared(shared_int: int, length: int = 16) -> bytes:
    """
    Derive a symmetric key from the shared DH integer:

        K = Trunc16(SHA256(big-endian(Ks)))

    :param shared_int: Ks = g^(ab) mod p
    :param length: key size in bytes, 1..32 (16 for AES-128)
    :return: key bytes
    """
    if shared_int <= 0:
        raise ValueError("Shared secret must be positive integer")
    if not 1 <= length <= sha256().digest_size:
        raise ValueError(f"Key length must be between 1 and {sha256().digest_size} bytes")

    digest = sha256(int_to_bytes(shared_int)).digest()
    return digest[:length]
