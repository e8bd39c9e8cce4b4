"""
Environment config (see .env.example) + logging setup.

    DH_PARAMS_PEM    path to PKCS#3 PEM parameters (wins when set)
    DH_PRIME         modulus, decimal or 0x-prefixed hex
    DH_GENERATOR     generator, default 2
    DHKEX_LOG_LEVEL  logging level name, default WARNING
"""

import logging
import os
from typing import Optional, Tuple

from dotenv import load_dotenv

from dhkex.common.protocol import DhGroup
from dhkex.crypto.params import RFC3526_GROUP14_GENERATOR, load_group_pem, rfc3526_group14

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _int_env(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"{name} must be an integer (decimal or 0x hex), got {raw!r}") from None


def group_from_env() -> DhGroup:
    """Resolve the DH group: PEM file, then DH_PRIME/DH_GENERATOR, then RFC 3526 group 14."""
    pem_path = os.getenv("DH_PARAMS_PEM")
    if pem_path:
        return load_group_pem(pem_path)

    p = _int_env("DH_PRIME")
    if p is None:
        return rfc3526_group14()
    g = _int_env("DH_GENERATOR", RFC3526_GROUP14_GENERATOR)
    return DhGroup(p=p, g=g)


def load_env_config(dotenv_path: Optional[str] = None) -> Tuple[DhGroup, str]:
    """
    Load .env (if present) and return (group, log_level).
    Variables already set in the environment are not overridden.
    """
    load_dotenv(dotenv_path)
    log_level = os.getenv("DHKEX_LOG_LEVEL", "WARNING").upper()
    return group_from_env(), log_level


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
