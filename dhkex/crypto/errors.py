"""Error taxonomy for the key exchange helpers."""


class DHError(Exception):
    """Base class for every key exchange failure."""


class InvalidRangeError(DHError, ValueError):
    """Modulus too small to admit a private key in [2, p-1] (p <= 3)."""


class InvalidModulusError(DHError, ValueError):
    """Modulus is non-positive, so modular exponentiation is undefined."""


class RandomSourceError(DHError, RuntimeError):
    """The secure random source failed or returned an unusable value."""
