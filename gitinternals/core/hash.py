"""Digest utilities for gitinternals."""

import re
from .errors import FormatError

DIGEST_SIZE = 20

_HEX_DIGEST = re.compile(r'^[0-9a-f]{40}$')


def to_hex(raw: bytes) -> str:
    """
    Convert a raw object digest to its textual form.
    
    Args:
        raw: 20 raw digest bytes
        
    Returns:
        40-character lowercase hex string
    """
    return raw.hex()


def to_bytes(hex_digest: str) -> bytes:
    """
    Convert a textual digest back to raw bytes.
    
    Args:
        hex_digest: 40-character hex string
        
    Returns:
        20 raw digest bytes
        
    Raises:
        FormatError: If the input is not 40 hex characters
    """
    try:
        raw = bytes.fromhex(hex_digest)
    except ValueError:
        raise FormatError(f"Invalid digest: {hex_digest!r}")
    
    if len(raw) != DIGEST_SIZE or len(hex_digest) != DIGEST_SIZE * 2:
        raise FormatError(f"Invalid digest length: {hex_digest!r}")
    return raw


def is_digest(value: str) -> bool:
    """Check whether value is a full lowercase hex digest."""
    return bool(_HEX_DIGEST.match(value))
