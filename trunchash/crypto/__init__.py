"""Hash capability, truncation adapter and secure erase."""

from .mem import secure_zero
from .hash import (
    HashFunction,
    CryptographyHash,
    AlgorithmNotFound,
    create_hash,
    available_hashes,
)
from .trunc_hash import TruncatedHash, InvalidConfiguration, truncated_digest

__all__ = [
    "secure_zero",
    "HashFunction",
    "CryptographyHash",
    "AlgorithmNotFound",
    "create_hash",
    "available_hashes",
    "TruncatedHash",
    "InvalidConfiguration",
    "truncated_digest",
]
