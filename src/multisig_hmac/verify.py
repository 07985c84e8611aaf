"""Verification of combined signatures against keys or a master seed."""

from __future__ import annotations

import hmac
import logging
from collections.abc import Callable, Sequence

from .bitset import highest_set_bit_plus_one, popcount, set_bit_positions
from .crypto.keygen import derive_key
from .crypto.primitive import check_key_length
from .errors import InsufficientKeysError, LengthMismatchError
from .signing import sign, xor_bytes
from .types import Algorithm, CombinedSignature, KeyMaterial, get_algorithm_params

logger = logging.getLogger("multisig_hmac")


def _check_preconditions(
    combined: CombinedSignature,
    data: bytes,
    threshold: int,
    sig_length: int,
) -> None:
    """Validate inputs shared by both verification paths."""
    if len(combined.signature) != sig_length:
        raise LengthMismatchError(
            f"Combined signature is {len(combined.signature)} bytes, expected {sig_length}"
        )
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes, got {type(data).__name__}")
    if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 1:
        raise ValueError(f"Threshold must be at least 1, got {threshold!r}")


def _cancel(
    combined: CombinedSignature,
    data: bytes,
    algorithm: Algorithm | str,
    sig_length: int,
    key_for: Callable[[int], KeyMaterial],
) -> bool:
    """XOR every claimed signer's recomputed signature out of ``combined``.

    Returns True only if both the bitfield and the signature bytes cancel to
    zero.
    """
    sig_acc = combined.signature
    bit_acc = combined.bitfield

    for index in set_bit_positions(combined.bitfield):
        expected = sign(key_for(index), data, algorithm)
        sig_acc = xor_bytes(sig_acc, expected.signature)
        bit_acc ^= 1 << index

    return bit_acc == 0 and hmac.compare_digest(sig_acc, bytes(sig_length))


def verify(
    keys: Sequence[KeyMaterial],
    combined: CombinedSignature,
    data: bytes,
    threshold: int,
    algorithm: Algorithm | str,
) -> bool:
    """Verify a combined signature against a list of signer keys.

    ``keys[i]`` must be the key for signer index ``i``.

    Args:
        keys: Signer keys indexed by slot.
        combined: The combined signature to check.
        data: The signed message.
        threshold: Minimum number of distinct signers required.
        algorithm: The HMAC preset.

    Returns:
        True if at least ``threshold`` signers signed and every claimed
        signature checks out, False otherwise.

    Raises:
        LengthMismatchError: If the combined signature has the wrong length.
        InsufficientKeysError: If ``keys`` cannot cover every index in the bitfield.
        InvalidKeyError: If a key needed for verification has the wrong length.
        UnsupportedAlgorithmError: If the algorithm is unknown.
    """
    params = get_algorithm_params(algorithm)
    _check_preconditions(combined, data, threshold, params.sig_length)

    n_keys = popcount(combined.bitfield)
    highest = highest_set_bit_plus_one(combined.bitfield)
    if len(keys) < n_keys or len(keys) < highest:
        raise InsufficientKeysError(required=max(n_keys, highest), supplied=len(keys))

    if n_keys < threshold:
        logger.debug("Rejected signature: %d signers, threshold %d", n_keys, threshold)
        return False

    valid = _cancel(combined, data, params.name, params.sig_length, lambda i: keys[i])
    if not valid:
        logger.debug("Rejected signature: bitfield %#010x did not cancel", combined.bitfield)
    return valid


def verify_derived(
    seed: bytes,
    combined: CombinedSignature,
    data: bytes,
    threshold: int,
    algorithm: Algorithm | str,
) -> bool:
    """Verify a combined signature against keys derived from a master seed.

    Same as ``verify`` except that each signer's key is re-derived with
    ``derive_key(seed, index, algorithm)`` instead of read from a list.

    Raises:
        LengthMismatchError: If the combined signature has the wrong length.
        InvalidBitfieldError: If the bitfield does not fit in 32 bits.
        InvalidKeyError: If the seed has the wrong length.
        UnsupportedAlgorithmError: If the algorithm is unknown.
    """
    params = get_algorithm_params(algorithm)
    _check_preconditions(combined, data, threshold, params.sig_length)
    check_key_length(seed, params, what="seed")

    # popcount rejects any bitfield wider than 32 bits, so every claimed index
    # is derivable
    n_keys = popcount(combined.bitfield)

    if n_keys < threshold:
        logger.debug("Rejected signature: %d signers, threshold %d", n_keys, threshold)
        return False

    valid = _cancel(
        combined,
        data,
        params.name,
        params.sig_length,
        lambda i: derive_key(seed, i, params.name),
    )
    if not valid:
        logger.debug(
            "Rejected derived signature: bitfield %#010x did not cancel", combined.bitfield
        )
    return valid
