"""
Basic usage example for credcodec.
"""

from credcodec import decode_chunks_to_string, derive_schema_hash, derive_storage_slot, pack_string_to_chunks

# Storage slot for an upgradeable issuer's namespaced storage
print("Deriving storage slot...")
slot = derive_storage_slot("anonaadhaar.storage.AnonAadhaarBalanceCredentialIssuer")
print(f"Slot: {slot}")

# Schema hash placed in the claim's index
print("\nDeriving schema hash...")
schema_hash = derive_schema_hash(
    "https://raw.githubusercontent.com/anon-aadhaar/privado-contracts/main/assets/anon-aadhaar.jsonld",
    "AnonAadhaarCredential",
)
print(f"Schema hash: {schema_hash}")

# Revealed proof fields are packed little-endian, one chunk each
print("\nDecoding revealed fields...")
print(f"Gender: {decode_chunks_to_string([77], byteorder='little')}")
print(f"State: {decode_chunks_to_string([0x69686C6544], byteorder='little')}")

# Pack and unpack a longer value at fixed circuit arity
chunks = pack_string_to_chunks("House 12, Sector 4, New Delhi 110051", num_chunks=4)
for i, chunk in enumerate(chunks):
    print(f"   Chunk {i}: {chunk}")
print(f"Decoded: {decode_chunks_to_string(chunks)}")
