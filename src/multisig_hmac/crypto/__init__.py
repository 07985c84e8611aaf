"""Cryptographic operations for multisig-hmac."""

from .keygen import derivation_info, derive_key, generate_key, generate_seed
from .primitive import check_key_length, compute_hmac, hash_algorithm

__all__ = [
    "check_key_length",
    "compute_hmac",
    "derivation_info",
    "derive_key",
    "generate_key",
    "generate_seed",
    "hash_algorithm",
]
