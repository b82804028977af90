"""
Chunk codec for strings packed into field elements.

Packing Format:
- the text is taken one byte per character (Latin-1 code units)
- bytes are cut into successive segments of bytes_per_chunk (31 by default,
  so every chunk fits below the BN254 scalar field)
- each segment is read as an unsigned integer in the chosen byte order
- trailing chunks that are exactly zero are elided, or padded back up to a
  fixed circuit arity when num_chunks is given

Decoding restores full width for every non-final chunk; only the final chunk
keeps its minimal length.
"""

import logging
from typing import List, Optional, Sequence

from credcodec.core.contracts import BYTEORDERS, DEFAULT_BYTES_PER_CHUNK
from credcodec.core.errors import InvalidArgumentError

log = logging.getLogger("credcodec.chunks")

TEXT_ENCODING = "latin-1"


def _check_layout(bytes_per_chunk: int, byteorder: str) -> int:
    """Validate layout parameters and return the exclusive chunk bound."""
    if (
        not isinstance(bytes_per_chunk, int)
        or isinstance(bytes_per_chunk, bool)
        or bytes_per_chunk < 1
    ):
        raise InvalidArgumentError(
            f"bytes_per_chunk must be a positive int, got {bytes_per_chunk!r}"
        )
    if byteorder not in BYTEORDERS:
        raise InvalidArgumentError(
            f"byteorder must be one of {BYTEORDERS}, got {byteorder!r}"
        )
    return 1 << (8 * bytes_per_chunk)


def _check_num_chunks(num_chunks: Optional[int]) -> None:
    if num_chunks is None:
        return
    if not isinstance(num_chunks, int) or isinstance(num_chunks, bool) or num_chunks < 0:
        raise InvalidArgumentError(
            f"num_chunks must be a non-negative int or None, got {num_chunks!r}"
        )


def _check_chunk(index: int, value: int, bound: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(
            f"chunk {index} must be an int, got {type(value).__name__}"
        )
    if not 0 <= value < bound:
        raise InvalidArgumentError(f"chunk {index} out of range: {value}")


def chunk_to_bytes(
    value: int, width: Optional[int] = None, byteorder: str = "big"
) -> bytes:
    """
    Convert a chunk value to bytes.

    Args:
        value: Non-negative chunk value
        width: Exact output width; None for the minimal representation
        byteorder: "big" or "little"

    Returns:
        Minimal bytes (empty for 0), or bytes zero padded to width
    """
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise InvalidArgumentError(f"chunk value must be a non-negative int: {value!r}")
    if byteorder not in BYTEORDERS:
        raise InvalidArgumentError(
            f"byteorder must be one of {BYTEORDERS}, got {byteorder!r}"
        )

    minimal = (value.bit_length() + 7) // 8
    if width is None:
        width = minimal
    elif minimal > width:
        raise InvalidArgumentError(f"chunk value {value} does not fit in {width} bytes")
    return value.to_bytes(width, byteorder)


def _clean_length(chunks: Sequence[int]) -> int:
    """Number of chunks left once trailing zero chunks are dropped."""
    end = len(chunks)
    while end > 0 and chunks[end - 1] == 0:
        end -= 1
    return end


def decode_chunks_to_string(
    chunks: Sequence[int],
    bytes_per_chunk: int = DEFAULT_BYTES_PER_CHUNK,
    byteorder: str = "big",
) -> str:
    """
    Recover the string packed into a sequence of chunks.

    Trailing zero chunks are dropped; any zero chunk before the last nonzero
    one is kept and contributes bytes_per_chunk NUL characters. Each byte maps
    to exactly one character, so packed multi-byte UTF-8 text comes back as
    its individual bytes.

    Args:
        chunks: Chunk values, first to last; not modified
        bytes_per_chunk: Width of every non-final chunk
        byteorder: "big" (first character in the high byte) or "little"
            (first character in the low byte, as the anon-aadhaar packer does)

    Returns:
        Decoded string

    Raises:
        InvalidArgumentError: If a chunk is not an int in [0, 2**(8*bytes_per_chunk))
    """
    bound = _check_layout(bytes_per_chunk, byteorder)
    for i, value in enumerate(chunks):
        _check_chunk(i, value, bound)

    clean = _clean_length(chunks)
    log.debug("decoding %d chunks (%d after trailing-zero trim)", len(chunks), clean)
    if clean == 0:
        return ""

    last = chunk_to_bytes(chunks[clean - 1], byteorder=byteorder)
    full = bytes_per_chunk * (clean - 1)
    buffer = bytearray(full + len(last))

    for i in range(clean - 1):
        start = i * bytes_per_chunk
        buffer[start:start + bytes_per_chunk] = chunk_to_bytes(
            chunks[i], bytes_per_chunk, byteorder
        )
    buffer[full:] = last

    return buffer.decode(TEXT_ENCODING)


def pack_string_to_chunks(
    text: str,
    bytes_per_chunk: int = DEFAULT_BYTES_PER_CHUNK,
    byteorder: str = "big",
    num_chunks: Optional[int] = None,
) -> List[int]:
    """
    Pack a string into chunks, the inverse of decode_chunks_to_string.

    Args:
        text: Text with every character at or below U+00FF
        bytes_per_chunk: Bytes per chunk
        byteorder: "big" or "little"
        num_chunks: Pad with zero chunks up to this count (None: no padding)

    Returns:
        Chunk values, first to last, with trailing zero chunks elided unless
        num_chunks asks for them

    Raises:
        InvalidArgumentError: If text has a wide character, needs more than
            num_chunks chunks, or num_chunks is not a non-negative int
    """
    _check_layout(bytes_per_chunk, byteorder)
    _check_num_chunks(num_chunks)
    try:
        data = text.encode(TEXT_ENCODING)
    except UnicodeEncodeError as e:
        raise InvalidArgumentError(
            f"character {text[e.start]!r} at {e.start} does not fit in one byte"
        ) from e

    chunks = [
        int.from_bytes(data[i:i + bytes_per_chunk], byteorder)
        for i in range(0, len(data), bytes_per_chunk)
    ]
    del chunks[_clean_length(chunks):]

    if num_chunks is not None:
        if len(chunks) > num_chunks:
            raise InvalidArgumentError(
                f"text needs {len(chunks)} chunks, only {num_chunks} allowed"
            )
        chunks.extend([0] * (num_chunks - len(chunks)))

    log.debug("packed %d bytes into %d chunks", len(data), len(chunks))
    return chunks
