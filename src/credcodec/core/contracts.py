"""
Core constants and configuration for credcodec.

All widths are fixed: hashes are 256-bit unsigned integers, chunks hold at most
31 bytes so that each one stays below the SNARK scalar field modulus.
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Literal, Optional, Union

from credcodec.core.errors import ConfigError

ChunkByteOrder = Literal["big", "little"]

UINT256_MODULUS = 1 << 256
UINT256_MAX = UINT256_MODULUS - 1

# Every bit set except the low byte: ~bytes32(uint256(0xff))
SLOT_MASK = UINT256_MAX ^ 0xFF

DEFAULT_BYTES_PER_CHUNK = 31
SCHEMA_HASH_BYTES = 16

BYTEORDERS = ("big", "little")


@dataclass
class Config:
    """Defaults for chunk packing and decoding."""

    # Chunk layout
    bytes_per_chunk: int = DEFAULT_BYTES_PER_CHUNK
    byteorder: ChunkByteOrder = "big"
    num_chunks: Optional[int] = None  # fixed circuit arity when packing


def load_config(path: Union[str, Path]) -> Config:
    """
    Load a Config from a JSON file.

    Args:
        path: Path to a JSON object whose keys are Config field names

    Returns:
        Config with the file's values over the defaults

    Raises:
        ConfigError: If the file is not a JSON object, has unknown keys, or
            holds a value of the wrong type
    """
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")

    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    if "bytes_per_chunk" in data and not _is_int(data["bytes_per_chunk"], minimum=1):
        raise ConfigError(
            f"bytes_per_chunk in {path} must be a positive int, got {data['bytes_per_chunk']!r}"
        )
    if "byteorder" in data and data["byteorder"] not in BYTEORDERS:
        raise ConfigError(
            f"byteorder in {path} must be one of {BYTEORDERS}, got {data['byteorder']!r}"
        )
    num_chunks = data.get("num_chunks")
    if num_chunks is not None and not _is_int(num_chunks, minimum=0):
        raise ConfigError(
            f"num_chunks in {path} must be a non-negative int or null, got {num_chunks!r}"
        )

    return Config(**data)


def _is_int(value, minimum: int) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= minimum
