"""MultisigHMAC: the scheme bound to a single HMAC algorithm."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from . import bitset
from .constants import DEFAULT_ALGORITHM
from .crypto.keygen import derive_key, generate_key, generate_seed
from .signing import combine, sign
from .types import (
    Algorithm,
    AlgorithmParams,
    CombinedSignature,
    KeyMaterial,
    Signature,
    get_algorithm_params,
)
from .verify import verify, verify_derived


class MultisigHMAC:
    """Threshold multisignature scheme over HMAC.

    An instance fixes the algorithm once so callers do not have to thread
    it, or the key and signature lengths, through every call.

    Example:
        ```python
        scheme = MultisigHMAC(Algorithm.SHA256)
        k0, k1, k2 = (scheme.keygen(i) for i in range(3))
        data = b"hello world"

        combined = scheme.combine([scheme.sign(k0, data), scheme.sign(k2, data)])
        assert scheme.verify([k0, k1, k2], combined, data, threshold=2)
        ```
    """

    def __init__(self, algorithm: Algorithm | str = DEFAULT_ALGORITHM) -> None:
        """Create a scheme instance.

        Args:
            algorithm: The HMAC preset. Defaults to HmacSHA256.

        Raises:
            UnsupportedAlgorithmError: If the algorithm is unknown.
        """
        self._params = get_algorithm_params(algorithm)

    def __repr__(self) -> str:
        return f"MultisigHMAC({self._params.name.value!r})"

    @property
    def params(self) -> AlgorithmParams:
        """Algorithm parameters for this instance."""
        return self._params

    @property
    def primitive(self) -> Algorithm:
        """The HMAC algorithm in use."""
        return self._params.name

    @property
    def key_bytes(self) -> int:
        """Length of keys and seeds in bytes."""
        return self._params.key_length

    @property
    def sig_bytes(self) -> int:
        """Length of signatures in bytes."""
        return self._params.sig_length

    def keygen(self, index: int) -> KeyMaterial:
        """Generate a random key for signer ``index``."""
        return generate_key(index, self.primitive)

    def seedgen(self) -> bytes:
        """Generate a random master seed."""
        return generate_seed(self.primitive)

    def derive_key(self, seed: bytes, index: int) -> KeyMaterial:
        """Derive the key for signer ``index`` from a master seed."""
        return derive_key(seed, index, self.primitive)

    def sign(self, key: KeyMaterial, data: bytes) -> Signature:
        """Sign data with one signer key."""
        return sign(key, data, self.primitive)

    def combine(self, signatures: Iterable[Signature]) -> CombinedSignature:
        """Combine signatures into one CombinedSignature."""
        return combine(signatures, self.sig_bytes)

    def verify(
        self,
        keys: Sequence[KeyMaterial],
        combined: CombinedSignature,
        data: bytes,
        threshold: int,
    ) -> bool:
        """Verify a combined signature against a list of keys."""
        return verify(keys, combined, data, threshold, self.primitive)

    def verify_derived(
        self,
        seed: bytes,
        combined: CombinedSignature,
        data: bytes,
        threshold: int,
    ) -> bool:
        """Verify a combined signature against keys derived from ``seed``."""
        return verify_derived(seed, combined, data, threshold, self.primitive)

    @staticmethod
    def key_indexes(bitfield: int) -> list[int]:
        """Signer indexes present in a bitfield, ascending."""
        return list(bitset.set_bit_positions(bitfield))

    @staticmethod
    def popcount(bitfield: int) -> int:
        """Number of signers present in a bitfield."""
        return bitset.popcount(bitfield)
