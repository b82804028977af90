"""
Deterministic identifier derivation for credcodec.

ID Policy (Deterministic Hashes):
- storage slot: keccak256(abi.encode(uint256(keccak256(name)) - 1)) & ~0xff
  (ERC-7201 namespaced storage location, low byte reserved and cleared)
- schema hash: low 16 bytes of keccak256(url + "#" + type_name), the iden3
  schema hash placed in a claim's index slot
"""

import logging

from credcodec.core.contracts import SCHEMA_HASH_BYTES, SLOT_MASK, UINT256_MODULUS
from credcodec.core.hashing import encode_uint256, keccak256, to_uint256

log = logging.getLogger("credcodec.ids")


def derive_storage_slot(name: str) -> str:
    """
    Derive the storage slot for a namespace string.

    Args:
        name: Namespace, e.g. "anonaadhaar.storage.AnonAadhaarBalanceCredentialIssuer"

    Returns:
        0x-prefixed, 64-digit lowercase hex slot whose last byte is always 00
    """
    name_hash = to_uint256(keccak256(name.encode("utf-8")))
    # Wraps to 2**256 - 1 when the hash is zero, same as unchecked uint256 math
    location = (name_hash - 1) % UINT256_MODULUS
    slot = to_uint256(keccak256(encode_uint256(location))) & SLOT_MASK
    result = "0x" + format(slot, "064x")
    log.debug("storage slot for %r: %s", name, result)
    return result


def derive_schema_hash(url: str, type_name: str) -> str:
    """
    Derive the schema hash for a JSON-LD context URL and credential type.

    Args:
        url: JSON-LD context URL (opaque, never fetched or parsed)
        type_name: Credential type defined in that context

    Returns:
        32-character lowercase hex digest, no prefix
    """
    schema_id = f"{url}#{type_name}"
    digest = keccak256(schema_id.encode("utf-8"))
    result = digest[-SCHEMA_HASH_BYTES:].hex()
    log.debug("schema hash for %r: %s", schema_id, result)
    return result
