"""Signer key generation: random keys, seeds and seed-derived keys."""

from __future__ import annotations

import logging
import secrets

from cryptography.hazmat.primitives.kdf.hkdf import HKDFExpand

from ..constants import DERIVE_CONTEXT, DERIVE_INDEX_SIZE
from ..types import Algorithm, KeyMaterial, KeyOrigin, get_algorithm_params, validate_index
from .primitive import check_key_length, hash_algorithm

logger = logging.getLogger("multisig_hmac")


def generate_key(index: int, algorithm: Algorithm | str) -> KeyMaterial:
    """Generate a signer key with a random secret.

    Args:
        index: Signer slot in [0, 31]. The bitfield has exactly 32 slots, so
            this is a hard ceiling on the number of signers.
        algorithm: The HMAC preset, which fixes the secret length.

    Returns:
        A new KeyMaterial with ``key_length`` random bytes.

    Raises:
        InvalidIndexError: If index is out of range.
        UnsupportedAlgorithmError: If the algorithm is unknown.
    """
    validate_index(index)
    params = get_algorithm_params(algorithm)
    return KeyMaterial(
        index=index,
        secret=secrets.token_bytes(params.key_length),
        origin=KeyOrigin.RANDOM,
    )


def generate_seed(algorithm: Algorithm | str) -> bytes:
    """Generate a random master seed for key derivation.

    Whoever holds the seed can derive every signer key, so it must be kept as
    secret as all 32 keys together.
    """
    params = get_algorithm_params(algorithm)
    return secrets.token_bytes(params.key_length)


def derivation_info(index: int) -> bytes:
    """Build the domain-separated HKDF info for a signer index.

    Format: ``b"derived" || index (4 bytes, little-endian)``.
    """
    return DERIVE_CONTEXT + validate_index(index).to_bytes(DERIVE_INDEX_SIZE, "little")


def derive_key(seed: bytes, index: int, algorithm: Algorithm | str) -> KeyMaterial:
    """Deterministically derive a signer key from a master seed.

    Uses HKDF-Expand with the seed as the pseudorandom key, so the
    algorithm's HMAC acts as the PRF. The same (seed, index, algorithm)
    always yields the same secret.

    Args:
        seed: Master seed, ``key_length`` bytes.
        index: Signer slot in [0, 31].
        algorithm: The HMAC preset.

    Returns:
        KeyMaterial tagged as DERIVED.

    Raises:
        InvalidIndexError: If index is out of range.
        InvalidKeyError: If the seed has the wrong length.
        UnsupportedAlgorithmError: If the algorithm is unknown.
    """
    info = derivation_info(index)
    params = get_algorithm_params(algorithm)
    check_key_length(seed, params, what="seed")

    hkdf = HKDFExpand(
        algorithm=hash_algorithm(params.name),
        length=params.key_length,
        info=info,
    )
    logger.debug("Derived key for index %d (%s)", index, params.name.value)
    return KeyMaterial(index=index, secret=hkdf.derive(bytes(seed)), origin=KeyOrigin.DERIVED)
