"""
Pydantic models for DH group parameters and key pairs.
Values are plain Python ints of arbitrary size.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from dhkex.crypto.dh import (
    RandomSource,
    compute_shared_secret,
    derive_public_key,
    new_key_pair,
)


# -------------------------
# Group parameters
# -------------------------

class DhGroup(BaseModel):
    p: int           # prime modulus
    g: int = 2       # generator

    def bit_length(self) -> int:
        return self.p.bit_length()

    def new_key_pair(self, rng: Optional[RandomSource] = None) -> "KeyPair":
        """Generate a fresh key pair in this group."""
        private_key, public_key = new_key_pair(self.p, self.g, rng)
        return KeyPair(private_key=private_key, public_key=public_key)

    def public_key_for(self, private_key: int) -> int:
        return derive_public_key(private_key, self.p, self.g)


# -------------------------
# Key pair
# -------------------------

class KeyPair(BaseModel):
    private_key: int = Field(repr=False)   # never shown in repr
    public_key: int                        # g^private mod p

    def shared_secret(self, peer_public_key: int, p: int) -> int:
        """Ks = peer_public^private mod p."""
        return compute_shared_secret(self.private_key, peer_public_key, p)

    def public_view(self) -> Dict[str, Any]:
        """Dict safe to hand to the other party."""
        return {"public_key": self.public_key}
