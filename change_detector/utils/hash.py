"""Hashing utilities for change detection."""

import dataclasses
import hashlib
import struct
from enum import Enum
from typing import Any

import xxhash
from pydantic import BaseModel

HASH_ALGORITHMS = ("xxh64", "sha256")

_LENGTH = struct.Struct(">Q")


def _frame(tag: bytes, payload: bytes) -> bytes:
    # Length prefix keeps ["ab"] and ["a", "b"] apart.
    return tag + _LENGTH.pack(len(payload)) + payload


def _encode_items(tag: bytes, items: list[bytes]) -> bytes:
    return _frame(tag, _LENGTH.pack(len(items)) + b"".join(items))


def encode_value(value: Any) -> bytes:
    """
    Encode a value into a deterministic, type-tagged byte string.

    Containers are encoded recursively. Dicts and sets are order-independent:
    their encoded members are sorted before being joined. Objects of any other
    type fall back to Python's own ``hash()``, so they must be hashable.

    Args:
        value: Value to encode

    Returns:
        Byte representation suitable for hashing

    Raises:
        TypeError: If the value has no native encoding and is not hashable

    Examples:
        >>> encode_value(1) == encode_value(True)
        False
        >>> encode_value({"a": 1, "b": 2}) == encode_value({"b": 2, "a": 1})
        True
    """
    if value is None:
        return b"n"
    # bool and IntEnum are int subclasses, check them first
    if isinstance(value, bool):
        return b"b1" if value else b"b0"
    if isinstance(value, Enum):
        name = type(value).__qualname__.encode("utf-8")
        return _encode_items(b"e", [_frame(b"q", name), encode_value(value.value)])
    if isinstance(value, int):
        return _frame(b"i", str(value).encode("ascii"))
    if isinstance(value, float):
        return _frame(b"f", value.hex().encode("ascii"))
    if isinstance(value, str):
        return _frame(b"s", value.encode("utf-8", "surrogatepass"))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _frame(b"y", bytes(value))
    if isinstance(value, list):
        return _encode_items(b"l", [encode_value(item) for item in value])
    if isinstance(value, tuple):
        return _encode_items(b"t", [encode_value(item) for item in value])
    if isinstance(value, dict):
        entries = sorted(
            _encode_items(b"p", [encode_value(k), encode_value(v)])
            for k, v in value.items()
        )
        return _encode_items(b"d", entries)
    if isinstance(value, (set, frozenset)):
        return _encode_items(b"S", sorted(encode_value(item) for item in value))
    if isinstance(value, BaseModel):
        name = type(value).__qualname__.encode("utf-8")
        return _encode_items(b"m", [_frame(b"q", name), encode_value(value.model_dump())])
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        name = type(value).__qualname__.encode("utf-8")
        fields = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
        return _encode_items(b"c", [_frame(b"q", name), encode_value(fields)])

    # Python's hash() is salted per process for str-like objects; still stable
    # for the lifetime of one detector.
    name = type(value).__qualname__.encode("utf-8")
    return _encode_items(b"h", [_frame(b"q", name), struct.pack(">q", hash(value))])


def hash_value(value: Any, algorithm: str = "xxh64") -> int:
    """
    Compute an unsigned 64-bit hash of any supported value.

    Args:
        value: Value to hash (see ``encode_value``)
        algorithm: "xxh64" (fast, non-cryptographic) or "sha256" (truncated)

    Returns:
        Integer in the range [0, 2**64)

    Raises:
        ValueError: If the algorithm is unknown
        TypeError: If the value cannot be encoded
    """
    if algorithm not in HASH_ALGORITHMS:
        raise ValueError(
            f"Unknown hash algorithm {algorithm!r}, expected one of {HASH_ALGORITHMS}"
        )

    data = encode_value(value)
    if algorithm == "xxh64":
        return xxhash.xxh64_intdigest(data)
    return int.from_bytes(hashlib.sha256(data).digest()[:8], "big")


def compute_hash(content: str | bytes) -> str:
    """
    Compute SHA-256 hash of content.

    Args:
        content: String or bytes content to hash

    Returns:
        Hexadecimal hash string (64 characters)

    Examples:
        >>> compute_hash("Hello, World!")
        'dffd6021bb2bd5b0af676290809ec3a53191dd81c7f70a4b28688a362182986f'

        >>> compute_hash(b"Hello, World!")
        'dffd6021bb2bd5b0af676290809ec3a53191dd81c7f70a4b28688a362182986f'
    """
    if isinstance(content, str):
        content = content.encode("utf-8")

    return hashlib.sha256(content).hexdigest()

