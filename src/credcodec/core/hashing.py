"""
Keccak-256 hashing and the single uint256 ABI encoding rule.

Keccak-256 here is the original Keccak padding used by Ethereum, not the
FIPS-202 SHA3-256 variant; hashlib.sha3_256 gives different digests.
"""

from eth_utils import keccak

from credcodec.core.contracts import UINT256_MODULUS
from credcodec.core.errors import InvalidArgumentError

UINT256_BYTES = 32


def keccak256(data: bytes) -> bytes:
    """
    Hash a byte sequence with Keccak-256.

    Args:
        data: Bytes to hash

    Returns:
        32-byte digest
    """
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidArgumentError(
            f"keccak256 expects bytes, got {type(data).__name__}"
        )
    return keccak(primitive=bytes(data))


def encode_uint256(value: int) -> bytes:
    """
    ABI-encode a single static uint256 parameter.

    Args:
        value: Integer in [0, 2**256)

    Returns:
        32-byte big-endian representation, zero padded on the left

    Raises:
        InvalidArgumentError: If value is not an int or is out of range
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(
            f"uint256 value must be an int, got {type(value).__name__}"
        )
    if not 0 <= value < UINT256_MODULUS:
        raise InvalidArgumentError(f"uint256 value out of range: {value}")
    return value.to_bytes(UINT256_BYTES, "big")


def to_uint256(digest: bytes) -> int:
    """Interpret up to 32 bytes as a big-endian unsigned integer."""
    if not isinstance(digest, (bytes, bytearray)):
        raise InvalidArgumentError(
            f"to_uint256 expects bytes, got {type(digest).__name__}"
        )
    if len(digest) > UINT256_BYTES:
        raise InvalidArgumentError(
            f"expected at most {UINT256_BYTES} bytes, got {len(digest)}"
        )
    return int.from_bytes(digest, "big")
