"""
Run a two-party Diffie-Hellman-Merkle exchange locally and print each step.

    python scripts/exchange_demo.py                       # configured group
    python scripts/exchange_demo.py --p 23 --g 5 --alice 6 --bob 15
"""

import argparse

from dhkex.common.config import configure_logging, load_env_config
from dhkex.common.protocol import DhGroup, KeyPair
from dhkex.crypto.dh import derive_aes_key_from_shared
from dhkex.crypto.errors import DHError


def _int(value: str) -> int:
    return int(value, 0)


def _pair(group: DhGroup, fixed_private) -> KeyPair:
    if fixed_private is None:
        return group.new_key_pair()
    return KeyPair(private_key=fixed_private, public_key=group.public_key_for(fixed_private))


def _short(value: int) -> str:
    text = str(value)
    return text if len(text) <= 40 else f"{text[:18]}...{text[-18:]} ({value.bit_length()} bits)"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Local DH key exchange demo")
    parser.add_argument("--p", type=_int, help="Modulus (overrides configured group)")
    parser.add_argument("--g", type=_int, default=2, help="Generator used with --p")
    parser.add_argument("--alice", type=_int, help="Fixed private key for Alice")
    parser.add_argument("--bob", type=_int, help="Fixed private key for Bob")
    args = parser.parse_args(argv)

    group, log_level = load_env_config()
    configure_logging(log_level)
    if args.p is not None:
        group = DhGroup(p=args.p, g=args.g)

    try:
        alice = _pair(group, args.alice)
        bob = _pair(group, args.bob)
        ks_alice = alice.shared_secret(bob.public_key, group.p)
        ks_bob = bob.shared_secret(alice.public_key, group.p)
    except DHError as e:
        print(f"[!] Key exchange failed: {e}")
        return 1

    print(f"[Group] p = {_short(group.p)}, g = {group.g}")
    print(f"[Alice] A = {_short(alice.public_key)}")
    print(f"[Bob]   B = {_short(bob.public_key)}")
    print(f"[Alice] Ks = {_short(ks_alice)}")
    print(f"[Bob]   Ks = {_short(ks_bob)}")

    if ks_alice != ks_bob:
        print("[!] Shared secrets differ")
        return 1
    if ks_alice > 0:
        print(f"[+] AES-128 key: {derive_aes_key_from_shared(ks_alice).hex()}")
    print("[+] Shared secrets match")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
