"""Signing and combining of signatures."""

from __future__ import annotations

from collections.abc import Iterable

from .crypto.primitive import compute_hmac
from .errors import DuplicateIndexError, LengthMismatchError
from .types import Algorithm, CombinedSignature, KeyMaterial, Signature


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XOR two equal-length byte strings."""
    if len(a) != len(b):
        raise LengthMismatchError(f"Cannot XOR {len(a)} bytes with {len(b)} bytes")
    return bytes(x ^ y for x, y in zip(a, b))


def sign(key: KeyMaterial, data: bytes, algorithm: Algorithm | str) -> Signature:
    """Sign data with a single signer key.

    Args:
        key: The signer's key.
        data: The message to sign.
        algorithm: The HMAC preset.

    Returns:
        The signer's Signature, tagged with the key's index.

    Raises:
        InvalidKeyError: If the secret length does not match the algorithm.
        UnsupportedAlgorithmError: If the algorithm is unknown.
    """
    return Signature(signature=compute_hmac(key.secret, data, algorithm), index=key.index)


def combine(signatures: Iterable[Signature], sig_length: int) -> CombinedSignature:
    """Fold signatures into one CombinedSignature.

    Signature bytes are XORed together and the index bits ORed into the
    bitfield. The result does not depend on the order of ``signatures``.

    Args:
        signatures: One or more signatures over the same message.
        sig_length: Expected length of every signature.

    Returns:
        The combined signature.

    Raises:
        ValueError: If no signatures are given.
        LengthMismatchError: If a signature is not ``sig_length`` bytes.
        DuplicateIndexError: If two signatures share an index.
    """
    combined = bytes(sig_length)
    bitfield = 0
    count = 0

    for sig in signatures:
        if len(sig.signature) != sig_length:
            raise LengthMismatchError(
                f"Signature for index {sig.index} is {len(sig.signature)} bytes, "
                f"expected {sig_length}"
            )
        # A repeated index would cancel itself out of both accumulators
        if bitfield & sig.tag:
            raise DuplicateIndexError(sig.index)
        combined = xor_bytes(combined, sig.signature)
        bitfield |= sig.tag
        count += 1

    if count == 0:
        raise ValueError("At least one signature is required")

    return CombinedSignature(signature=combined, bitfield=bitfield)
