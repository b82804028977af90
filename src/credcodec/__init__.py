"""
credcodec - Deterministic hashing and chunk codec for credential issuance.
"""

from credcodec.core import Config, derive_schema_hash, derive_storage_slot
from credcodec.core.errors import CredCodecError, InvalidArgumentError
from credcodec.encoding import decode_chunks_to_string, pack_string_to_chunks

__version__ = "0.1.0"

__all__ = [
    "derive_storage_slot",
    "derive_schema_hash",
    "decode_chunks_to_string",
    "pack_string_to_chunks",
    "Config",
    "CredCodecError",
    "InvalidArgumentError",
]
