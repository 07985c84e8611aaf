"""HMAC primitive for multisig-hmac, backed by the cryptography library."""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes, hmac

from ..errors import InvalidKeyError
from ..types import Algorithm, AlgorithmParams, get_algorithm_params

_HASHES: dict[Algorithm, type[hashes.HashAlgorithm]] = {
    Algorithm.SHA256: hashes.SHA256,
    Algorithm.SHA384: hashes.SHA384,
    Algorithm.SHA512: hashes.SHA512,
}


def hash_algorithm(algorithm: Algorithm | str) -> hashes.HashAlgorithm:
    """Return a fresh hash instance for an algorithm.

    Raises:
        UnsupportedAlgorithmError: If the algorithm is unknown.
    """
    params = get_algorithm_params(algorithm)
    return _HASHES[params.name]()


def check_key_length(secret: bytes, params: AlgorithmParams, what: str = "key") -> None:
    """Raise InvalidKeyError unless ``secret`` is exactly ``key_length`` bytes."""
    if not isinstance(secret, (bytes, bytearray, memoryview)):
        raise InvalidKeyError(f"{what.capitalize()} must be bytes, got {type(secret).__name__}")
    if len(secret) != params.key_length:
        raise InvalidKeyError(
            f"Invalid {what} length: {len(secret)}, expected {params.key_length} "
            f"for {params.name.value}"
        )


def compute_hmac(secret: bytes, data: bytes, algorithm: Algorithm | str) -> bytes:
    """Compute HMAC(secret, data) for the given algorithm.

    Args:
        secret: Key bytes, ``key_length`` long for the algorithm.
        data: The message.
        algorithm: The HMAC preset.

    Returns:
        The MAC, ``sig_length`` bytes.

    Raises:
        InvalidKeyError: If the secret has the wrong length.
        UnsupportedAlgorithmError: If the algorithm is unknown.
        TypeError: If data is not bytes-like.
    """
    params = get_algorithm_params(algorithm)
    check_key_length(secret, params)
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes, got {type(data).__name__}")

    mac = hmac.HMAC(bytes(secret), _HASHES[params.name]())
    mac.update(bytes(data))
    return mac.finalize()
