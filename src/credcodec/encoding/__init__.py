"""
Field-element chunk codec for credcodec.
"""

from credcodec.encoding.chunks import (
    chunk_to_bytes,
    decode_chunks_to_string,
    pack_string_to_chunks,
)

__all__ = [
    "chunk_to_bytes",
    "decode_chunks_to_string",
    "pack_string_to_chunks",
]
