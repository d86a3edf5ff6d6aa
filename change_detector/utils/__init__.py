"""Hashing and logging helpers."""

from change_detector.utils.hash import compute_hash, encode_value, hash_value
from change_detector.utils.logger import get_logger, log_event

__all__ = [
    "encode_value",
    "hash_value",
    "compute_hash",
    "get_logger",
    "log_event",
]
