"""
Generate fresh DH group parameters using cryptography.
Generates:
    certs/dh.params.pem   (PKCS#3 "DH PARAMETERS", safe to share)

Generating 2048-bit parameters can take a while; RFC 3526 group 14 is the
default group when no PEM is configured.
"""

import argparse
import os

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import dh

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CERTS_DIR = os.path.join(BASE_DIR, "certs")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate DH group parameters")
    parser.add_argument("--key-size", type=int, default=2048, help="Modulus size in bits")
    parser.add_argument("--generator", type=int, choices=(2, 5), default=2)
    parser.add_argument("--out", default=os.path.join(CERTS_DIR, "dh.params.pem"))
    args = parser.parse_args(argv)

    out_dir = os.path.dirname(os.path.abspath(args.out))
    os.makedirs(out_dir, exist_ok=True)

    # 1. Generate parameters (safe prime p, generator g)
    print(f"[*] Generating {args.key_size}-bit DH parameters (g={args.generator}) ...")
    params = dh.generate_parameters(generator=args.generator, key_size=args.key_size)

    # 2. Write PEM
    with open(args.out, "wb") as f:
        f.write(
            params.parameter_bytes(
                serialization.Encoding.PEM,
                serialization.ParameterFormat.PKCS3,
            )
        )

    print(f"[+] DH parameters written to: {args.out}")
    print("[!] Point DH_PARAMS_PEM at this file to use it")


if __name__ == "__main__":
    main()
