"""
DH group parameters: RFC 3526 defaults and DH parameter PEM load/dump.

Usage:
    python -m dhkex.crypto.params --show
    python -m dhkex.crypto.params --export certs/dh.params.pem
"""

import argparse
import logging
import sys

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import dh

from dhkex.common.protocol import DhGroup
from dhkex.common.utils import int_to_bytes, sha256_hex

logger = logging.getLogger(__name__)

# RFC 3526 group 14 (2048-bit MODP)
RFC3526_GROUP14_PRIME = int(
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1"
    "29024E088A67CC74020BBEA63B139B22514A08798E3404DD"
    "EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245"
    "E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3D"
    "C2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F"
    "83655D23DCA3AD961C62F356208552BB9ED529077096966D"
    "670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
    "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9"
    "DE2BCBF6955817183995497CEA956AE515D2261898FA0510"
    "15728E5A8AACAA68FFFFFFFFFFFFFFFF",
    16,
)
RFC3526_GROUP14_GENERATOR = 2


def rfc3526_group14() -> DhGroup:
    return DhGroup(p=RFC3526_GROUP14_PRIME, g=RFC3526_GROUP14_GENERATOR)


def group_from_pem(data: bytes) -> DhGroup:
    """
    Parse PKCS#3 or X9.42 "DH PARAMETERS" PEM bytes into a DhGroup.

    Raises ValueError if the PEM is not DH parameters.
    """
    params = serialization.load_pem_parameters(data)
    if not isinstance(params, dh.DHParameters):
        raise ValueError("PEM does not contain DH parameters")
    numbers = params.parameter_numbers()
    return DhGroup(p=numbers.p, g=numbers.g)


def load_group_pem(path: str) -> DhGroup:
    """Load DH parameters from a PEM file on disk."""
    with open(path, "rb") as f:
        group = group_from_pem(f.read())
    logger.debug("Loaded %d-bit DH group from %s", group.bit_length(), path)
    return group


def group_to_pem(group: DhGroup) -> bytes:
    """
    Serialize a DhGroup as "DH PARAMETERS" PEM.

    OpenSSL 3 recognises named groups such as RFC 3526 group 14 and attaches
    their subgroup order, which yields an "X9.42 DH PARAMETERS" block instead
    of plain PKCS#3. Both load back through group_from_pem.

    Raises ValueError for toy moduli (below 512 bits).
    """
    params = dh.DHParameterNumbers(group.p, group.g).parameters()
    return params.parameter_bytes(
        serialization.Encoding.PEM,
        serialization.ParameterFormat.PKCS3,
    )


def group_fingerprint(group: DhGroup) -> str:
    """SHA-256 over big-endian(p) || big-endian(g), hex."""
    return sha256_hex(int_to_bytes(group.p) + int_to_bytes(group.g))


def _cli_show(group: DhGroup) -> None:
    print(f"[Group] modulus bits: {group.bit_length()}")
    print(f"[Group] generator:    {group.g}")
    print(f"[Group] SHA-256:      {group_fingerprint(group)}")


def main(argv=None) -> int:
    from dhkex.common.config import configure_logging, load_env_config

    parser = argparse.ArgumentParser(description="Inspect or export the configured DH group")
    parser.add_argument("--show", action="store_true", help="Print the configured group")
    parser.add_argument("--export", metavar="PATH", help="Write the configured group as PEM")
    args = parser.parse_args(argv)

    group, log_level = load_env_config()
    configure_logging(log_level)

    if args.show:
        _cli_show(group)
    if args.export:
        try:
            pem = group_to_pem(group)
        except ValueError as e:
            print(f"[!] Cannot export DH parameters: {e}")
            return 1
        with open(args.export, "wb") as f:
            f.write(pem)
        print(f"[+] DH parameters written to: {args.export}")
    if not (args.show or args.export):
        parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
