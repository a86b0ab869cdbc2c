"""Truncated(H, bits): any HashFunction cut down to an arbitrary bit length."""

import logging

from trunchash.common.utils import bits_to_bytes, last_byte_mask

from .hash import HashFunction, create_hash
from .mem import secure_zero

logger = logging.getLogger(__name__)


class InvalidConfiguration(Exception):
    """Raised when the requested output length cannot be produced."""
    pass


class TruncatedHash(HashFunction):
    """
    Wraps a hash function and truncates its digest to `output_bits` bits.

    The output is ceil(output_bits / 8) bytes; when output_bits is not a
    multiple of 8 the unused low-order bits of the last byte are zero.
    The wrapped hash is owned by this object and must not be used elsewhere.
    """

    def __init__(self, hash_fn: HashFunction, output_bits: int):
        """
        Args:
            hash_fn: hash function to wrap (ownership is taken)
            output_bits: digest length in bits, 1..hash_fn.output_length()*8

        Raises:
            TypeError if hash_fn is not a HashFunction
            InvalidConfiguration if output_bits is out of range
        """
        if not isinstance(hash_fn, HashFunction):
            raise TypeError(f"Expected a HashFunction, got {type(hash_fn).__name__}")

        if isinstance(output_bits, bool) or not isinstance(output_bits, int):
            raise InvalidConfiguration(f"Output bits must be an integer, got {output_bits!r}")

        if output_bits <= 0:
            raise InvalidConfiguration("Truncating a hash to empty does not make sense")

        if output_bits > hash_fn.output_length() * 8:
            raise InvalidConfiguration(
                f"Underlying hash function {hash_fn.name} does not produce enough bits "
                f"for truncation to {output_bits}"
            )

        self._hash = hash_fn
        self._output_bits = output_bits
        # full native-length digest lands here before truncation
        self._buffer = bytearray(hash_fn.output_length())

        logger.debug(f"Created {self.name}")

    @property
    def output_bits(self) -> int:
        return self._output_bits

    @property
    def name(self) -> str:
        return f"Truncated({self._hash.name},{self._output_bits})"

    def output_length(self) -> int:
        return bits_to_bytes(self._output_bits)

    def update(self, data: bytes) -> None:
        self._hash.update(data)

    def finalize_into(self, out: bytearray) -> None:
        self._check_output(out)
        length = self.output_length()

        try:
            self._hash.finalize_into(self._buffer)

            # truncate output to a full number of bytes
            out[:length] = memoryview(self._buffer)[:length]
        finally:
            secure_zero(self._buffer)

        # mask the unwanted bits in the final byte
        out[length - 1] &= last_byte_mask(self._output_bits)

    def fresh_instance(self) -> "TruncatedHash":
        return TruncatedHash(self._hash.fresh_instance(), self._output_bits)

    def copy_state(self) -> "TruncatedHash":
        return TruncatedHash(self._hash.copy_state(), self._output_bits)

    def reset(self) -> None:
        self._hash.reset()

    def close(self) -> None:
        """Wipe the scratch buffer and discard pending input."""
        secure_zero(self._buffer)
        self._hash.reset()

    def __enter__(self) -> "TruncatedHash":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return self.name


def truncated_digest(data: bytes, output_bits: int, algorithm: str = "SHA-256") -> bytes:
    """
    One-shot truncated digest.

    Args:
        data: message to hash
        output_bits: digest length in bits
        algorithm: base hash name

    Returns:
        ceil(output_bits / 8) bytes
    """
    with TruncatedHash(create_hash(algorithm), output_bits) as h:
        return h.process(data)
