"""
Core contracts, hashing primitives and identifier derivation for credcodec.
"""

from credcodec.core.contracts import (
    DEFAULT_BYTES_PER_CHUNK,
    SCHEMA_HASH_BYTES,
    SLOT_MASK,
    UINT256_MODULUS,
    Config,
    load_config,
)
from credcodec.core.hashing import encode_uint256, keccak256, to_uint256
from credcodec.core.ids import derive_schema_hash, derive_storage_slot

__all__ = [
    "Config",
    "load_config",
    "UINT256_MODULUS",
    "SLOT_MASK",
    "DEFAULT_BYTES_PER_CHUNK",
    "SCHEMA_HASH_BYTES",
    "keccak256",
    "encode_uint256",
    "to_uint256",
    "derive_storage_slot",
    "derive_schema_hash",
]
