"""Bit-exact truncated hash functions."""

from .crypto import (
    HashFunction,
    CryptographyHash,
    TruncatedHash,
    InvalidConfiguration,
    AlgorithmNotFound,
    create_hash,
    available_hashes,
    truncated_digest,
    secure_zero,
)

__version__ = "0.1.0"

__all__ = [
    "HashFunction",
    "CryptographyHash",
    "TruncatedHash",
    "InvalidConfiguration",
    "AlgorithmNotFound",
    "create_hash",
    "available_hashes",
    "truncated_digest",
    "secure_zero",
]
