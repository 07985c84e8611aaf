"""Scheme constants for multisig-hmac."""

# The participant bitmask is an unsigned 32-bit integer, one bit per signer.
# Supporting more signers means widening the bitfield encoding.
BITFIELD_WIDTH = 32
MAX_SIGNERS = BITFIELD_WIDTH
MAX_INDEX = MAX_SIGNERS - 1
BITFIELD_MASK = (1 << BITFIELD_WIDTH) - 1

# Domain separation prefix for seed-derived keys
DERIVE_CONTEXT = b"derived"

# Index is encoded as uint32 little-endian after the context prefix
DERIVE_INDEX_SIZE = 4

DEFAULT_ALGORITHM = "HmacSHA256"
