"""Error hierarchy for multisig-hmac.

These exceptions signal malformed input or misuse. A signature that simply
fails to authenticate is not an error: ``verify`` returns ``False``.
"""

from __future__ import annotations


class MultisigHMACError(Exception):
    """Base exception for all multisig-hmac errors."""

    pass


class InvalidKeyError(MultisigHMACError):
    """Key or seed length does not match the algorithm's key length."""

    pass


class UnsupportedAlgorithmError(MultisigHMACError):
    """Algorithm name is not one of the supported HMAC presets."""

    pass


class InvalidIndexError(MultisigHMACError):
    """Signer index is outside the 32-slot bitfield.

    Attributes:
        index: The rejected index.
    """

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Signer index must be between 0 and 31, got {index}")


class LengthMismatchError(MultisigHMACError):
    """Signature bytes do not have the algorithm's signature length."""

    pass


class InsufficientKeysError(MultisigHMACError):
    """Fewer keys were supplied than the bitfield requires.

    Attributes:
        required: Number of keys implied by the bitfield.
        supplied: Number of keys the caller passed.
    """

    def __init__(self, required: int, supplied: int) -> None:
        self.required = required
        self.supplied = supplied
        super().__init__(
            f"Not enough keys given based on bitfield: need {required}, got {supplied}"
        )


class DuplicateIndexError(MultisigHMACError):
    """Two signatures being combined share the same signer index.

    CRITICAL: combining them anyway would cancel the index bit and the
    signature bytes, hiding a contributor without any visible error.
    """

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Duplicate signer index in combine: {index}")


class InvalidBitfieldError(MultisigHMACError):
    """Bitfield is negative or does not fit in 32 bits."""

    pass
