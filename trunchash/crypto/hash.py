"""Incremental hash capability + cryptography-backed implementations."""

import logging
import re
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes

from .mem import secure_zero

logger = logging.getLogger(__name__)


class AlgorithmNotFound(Exception):
    """Raised when a hash name cannot be resolved."""
    pass


class HashFunction(ABC):
    """
    Incremental hash capability.

    Implementations accept input through update(), produce a digest of
    output_length() bytes through finalize_into(), and return to the empty
    state as part of finalization.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Algorithm identifier, e.g. "SHA-256"."""

    @abstractmethod
    def output_length(self) -> int:
        """Digest length in bytes."""

    @abstractmethod
    def update(self, data: bytes) -> None:
        """Feed more input."""

    @abstractmethod
    def finalize_into(self, out: bytearray) -> None:
        """
        Write the digest into `out` and reset to the empty state.

        Args:
            out: writable buffer of exactly output_length() bytes

        Raises:
            ValueError if `out` has the wrong length
        """

    @abstractmethod
    def fresh_instance(self) -> "HashFunction":
        """New object of the same configuration with empty state."""

    @abstractmethod
    def copy_state(self) -> "HashFunction":
        """New independent object carrying the current in-progress state."""

    @abstractmethod
    def reset(self) -> None:
        """Discard any accumulated input."""

    def finalize(self) -> bytes:
        """Finalize into a fresh buffer and return the digest."""
        out = bytearray(self.output_length())
        try:
            self.finalize_into(out)
            return bytes(out)
        finally:
            secure_zero(out)

    def finalize_hex(self) -> str:
        """Finalize and return the digest as lowercase hex."""
        return self.finalize().hex()

    def process(self, data: bytes) -> bytes:
        """Hash `data` on top of any pending input and finalize."""
        self.update(data)
        return self.finalize()

    def _check_output(self, out) -> None:
        if len(out) != self.output_length():
            raise ValueError(
                f"{self.name} output buffer must be {self.output_length()} bytes, got {len(out)}"
            )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class CryptographyHash(HashFunction):
    """HashFunction over a `cryptography` hash context."""

    def __init__(self, name: str, algorithm: hashes.HashAlgorithm,
                 ctx: Optional[hashes.Hash] = None):
        """
        Args:
            name: algorithm identifier reported by .name
            algorithm: cryptography HashAlgorithm instance
            ctx: existing context to adopt (used by copy_state)
        """
        self._name = name
        self._algorithm = algorithm
        self._ctx = ctx if ctx is not None else self._new_context()

    def _new_context(self) -> hashes.Hash:
        return hashes.Hash(self._algorithm, backend=default_backend())

    @property
    def name(self) -> str:
        return self._name

    def output_length(self) -> int:
        return self._algorithm.digest_size

    def update(self, data: bytes) -> None:
        self._ctx.update(data)

    def finalize_into(self, out: bytearray) -> None:
        self._check_output(out)
        digest = self._ctx.finalize()
        self._ctx = self._new_context()
        out[:] = digest

    def fresh_instance(self) -> "CryptographyHash":
        return CryptographyHash(self._name, self._algorithm)

    def copy_state(self) -> "CryptographyHash":
        return CryptographyHash(self._name, self._algorithm, self._ctx.copy())

    def reset(self) -> None:
        self._ctx = self._new_context()


_REGISTRY: Dict[str, Callable[[], hashes.HashAlgorithm]] = {
    "SHA-1": hashes.SHA1,
    "SHA-224": hashes.SHA224,
    "SHA-256": hashes.SHA256,
    "SHA-384": hashes.SHA384,
    "SHA-512": hashes.SHA512,
    "SHA-512-256": hashes.SHA512_256,
    "SHA-3(224)": hashes.SHA3_224,
    "SHA-3(256)": hashes.SHA3_256,
    "SHA-3(384)": hashes.SHA3_384,
    "SHA-3(512)": hashes.SHA3_512,
    "BLAKE2b(512)": lambda: hashes.BLAKE2b(64),
    "BLAKE2s(256)": lambda: hashes.BLAKE2s(32),
    "MD5": hashes.MD5,
}


def available_hashes() -> List[str]:
    """Names accepted by create_hash (besides Truncated(...))."""
    return list(_REGISTRY)


def _split_args(body: str) -> List[str]:
    """Split on commas that are not nested inside parentheses."""
    args = []
    depth = 0
    start = 0
    for i, ch in enumerate(body):
        if ch == '(':
            depth += 1
        elif ch == ')':
            depth -= 1
            if depth < 0:
                raise AlgorithmNotFound(f"Unbalanced parentheses in '{body}'")
        elif ch == ',' and depth == 0:
            args.append(body[start:i].strip())
            start = i + 1
    if depth != 0:
        raise AlgorithmNotFound(f"Unbalanced parentheses in '{body}'")
    args.append(body[start:].strip())
    return args


def create_hash(spec: str) -> HashFunction:
    """
    Build a hash function from its name.

    Accepts any registry name plus "Truncated(<spec>,<bits>)", nested to
    any depth, so the .name of any object built here parses back to an
    equivalent object.

    Args:
        spec: algorithm name, e.g. "SHA-256" or "Truncated(SHA-512,100)"

    Returns:
        new HashFunction in the empty state

    Raises:
        AlgorithmNotFound if the name is unknown or malformed
        InvalidConfiguration if a Truncated bit count is out of range
    """
    spec = spec.strip()

    factory = _REGISTRY.get(spec)
    if factory is not None:
        logger.debug(f"Creating hash {spec}")
        return CryptographyHash(spec, factory())

    if spec.startswith("Truncated(") and spec.endswith(")"):
        from .trunc_hash import TruncatedHash

        args = _split_args(spec[len("Truncated("):-1])
        if len(args) != 2 or not args[0]:
            raise AlgorithmNotFound(f"Malformed truncated hash spec: {spec}")
        # plain decimal only, so the spec matches the resulting .name
        if not re.fullmatch(r"0|[1-9][0-9]*", args[1]):
            raise AlgorithmNotFound(f"Invalid bit count in hash spec: {spec}")

        return TruncatedHash(create_hash(args[0]), int(args[1]))

    raise AlgorithmNotFound(f"Unknown hash function: {spec}")
