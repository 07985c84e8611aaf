"""multisig-hmac.

Threshold multisignatures built on HMAC. Signers each HMAC the same message,
the signatures are XORed into one fixed-size value plus a 32-bit bitfield of
contributing signer indexes, and a verifier checks the result against a list
of keys or a single master seed.

Example:
    ```python
    from multisig_hmac import Algorithm, MultisigHMAC

    scheme = MultisigHMAC(Algorithm.SHA256)
    seed = scheme.seedgen()
    keys = [scheme.derive_key(seed, i) for i in range(3)]

    data = b"hello world"
    combined = scheme.combine([scheme.sign(keys[0], data), scheme.sign(keys[2], data)])

    scheme.verify_derived(seed, combined, data, threshold=2)  # True
    scheme.verify_derived(seed, combined, data, threshold=3)  # False
    ```
"""

from .bitset import highest_set_bit_plus_one, leading_zeros, popcount, set_bit_positions
from .constants import DEFAULT_ALGORITHM, MAX_INDEX, MAX_SIGNERS
from .crypto import derive_key, generate_key, generate_seed
from .errors import (
    DuplicateIndexError,
    InsufficientKeysError,
    InvalidBitfieldError,
    InvalidIndexError,
    InvalidKeyError,
    LengthMismatchError,
    MultisigHMACError,
    UnsupportedAlgorithmError,
)
from .scheme import MultisigHMAC
from .signing import combine, sign
from .types import (
    ALGORITHMS,
    Algorithm,
    AlgorithmParams,
    CombinedSignature,
    KeyMaterial,
    KeyOrigin,
    Signature,
    get_algorithm_params,
)
from .verify import verify, verify_derived

__version__ = "0.1.0"

__all__ = [
    # Main class
    "MultisigHMAC",
    # Operations
    "combine",
    "derive_key",
    "generate_key",
    "generate_seed",
    "sign",
    "verify",
    "verify_derived",
    # Bit operations
    "highest_set_bit_plus_one",
    "leading_zeros",
    "popcount",
    "set_bit_positions",
    # Constants
    "DEFAULT_ALGORITHM",
    "MAX_INDEX",
    "MAX_SIGNERS",
    # Types
    "ALGORITHMS",
    "Algorithm",
    "AlgorithmParams",
    "CombinedSignature",
    "KeyMaterial",
    "KeyOrigin",
    "Signature",
    "get_algorithm_params",
    # Errors
    "MultisigHMACError",
    "DuplicateIndexError",
    "InsufficientKeysError",
    "InvalidBitfieldError",
    "InvalidIndexError",
    "InvalidKeyError",
    "LengthMismatchError",
    "UnsupportedAlgorithmError",
    # Version
    "__version__",
]
