"""Helper signatures: bits_to_bytes, last_byte_mask, constant_time_compare."""

import hmac
from typing import Union


def bits_to_bytes(bits: int) -> int:
    """Number of whole bytes needed to hold `bits` bits."""
    return (bits + 7) // 8


def last_byte_mask(bits: int) -> int:
    """
    Mask keeping only the meaningful high-order bits of the last output byte.
    
    Args:
        bits: total output length in bits (>= 1)
        
    Returns:
        mask in 0x80..0xFF; 0xFF when bits is a multiple of 8
    """
    bits_in_last_byte = ((bits - 1) % 8) + 1
    return (0xFF << (8 - bits_in_last_byte)) & 0xFF


def constant_time_compare(a: Union[bytes, str], b: Union[bytes, str]) -> bool:
    """Constant-time comparison to prevent timing attacks."""
    if isinstance(a, str):
        a = a.encode('utf-8')
    if isinstance(b, str):
        b = b.encode('utf-8')
    return hmac.compare_digest(a, b)
