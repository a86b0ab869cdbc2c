"""Common utilities, configuration and output records."""

from .utils import (
    bits_to_bytes,
    last_byte_mask,
    constant_time_compare,
)
from .models import DigestRecord, parse_record, serialize_record

__all__ = [
    "bits_to_bytes",
    "last_byte_mask",
    "constant_time_compare",
    "DigestRecord",
    "parse_record",
    "serialize_record",
]
