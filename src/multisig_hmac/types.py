"""Type definitions for multisig-hmac."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .bitset import popcount, set_bit_positions, validate_bitfield
from .constants import MAX_INDEX
from .errors import InvalidIndexError, UnsupportedAlgorithmError


class Algorithm(str, Enum):
    """Supported HMAC primitives."""

    SHA256 = "HmacSHA256"
    SHA384 = "HmacSHA384"
    SHA512 = "HmacSHA512"


@dataclass(frozen=True)
class AlgorithmParams:
    """Buffer lengths governing one scheme instance.

    Attributes:
        name: The algorithm these parameters belong to.
        key_length: Length in bytes of signer secrets and seeds.
        sig_length: Length in bytes of a signature (the HMAC output).
    """

    name: Algorithm
    key_length: int
    sig_length: int


ALGORITHMS: Mapping[Algorithm, AlgorithmParams] = MappingProxyType(
    {
        Algorithm.SHA256: AlgorithmParams(Algorithm.SHA256, key_length=64, sig_length=32),
        Algorithm.SHA384: AlgorithmParams(Algorithm.SHA384, key_length=128, sig_length=48),
        Algorithm.SHA512: AlgorithmParams(Algorithm.SHA512, key_length=128, sig_length=64),
    }
)


def get_algorithm_params(algorithm: Algorithm | str) -> AlgorithmParams:
    """Look up the parameters for an algorithm.

    Args:
        algorithm: An ``Algorithm`` member or its string value, e.g. ``"HmacSHA256"``.

    Returns:
        The matching AlgorithmParams.

    Raises:
        UnsupportedAlgorithmError: If the name is not a supported preset.
    """
    try:
        return ALGORITHMS[Algorithm(algorithm)]
    except ValueError:
        raise UnsupportedAlgorithmError(f"Unsupported algorithm: {algorithm!r}") from None


def validate_index(index: int) -> int:
    """Ensure a signer index fits in the bitfield.

    Raises:
        InvalidIndexError: If index is not an int in [0, 31].
    """
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= MAX_INDEX:
        raise InvalidIndexError(index)
    return index


class KeyOrigin(str, Enum):
    """How a signer's secret was produced."""

    RANDOM = "random"
    DERIVED = "derived"


@dataclass(frozen=True)
class KeyMaterial:
    """A signer: a bitfield slot plus its secret.

    Random and seed-derived keys share this shape and differ only in
    ``origin``; signing and verification read ``index`` and ``secret`` alone.

    Attributes:
        index: Signer slot in [0, 31].
        secret: Secret key bytes, ``key_length`` long for the algorithm in use.
        origin: Whether the secret is random or derived from a seed.
    """

    index: int
    secret: bytes = field(repr=False)
    origin: KeyOrigin = KeyOrigin.RANDOM

    def __post_init__(self) -> None:
        validate_index(self.index)


@dataclass(frozen=True)
class Signature:
    """A single signer's signature over a message.

    Attributes:
        signature: The HMAC output, ``sig_length`` bytes.
        index: Index of the key that produced it.
    """

    signature: bytes
    index: int

    def __post_init__(self) -> None:
        validate_index(self.index)

    @property
    def tag(self) -> int:
        """Single-bit bitfield marking this signer."""
        return 1 << self.index


@dataclass(frozen=True)
class CombinedSignature:
    """XOR of several signatures plus the bitfield of who contributed.

    Attributes:
        signature: XOR of the contributing signatures, ``sig_length`` bytes.
        bitfield: Unsigned 32-bit set of contributing signer indexes.
    """

    signature: bytes
    bitfield: int

    def __post_init__(self) -> None:
        validate_bitfield(self.bitfield)

    @property
    def signer_count(self) -> int:
        """Number of signers that contributed."""
        return popcount(self.bitfield)

    @property
    def indexes(self) -> list[int]:
        """Contributing signer indexes in ascending order."""
        return list(set_bit_positions(self.bitfield))
