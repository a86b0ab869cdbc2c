"""Pydantic models for digest output records."""

import json
from pydantic import BaseModel, Field


class DigestRecord(BaseModel):
    """One computed digest: algorithm, truncation length and hex value."""
    type: str = Field(default="digest")
    algorithm: str  # composed name, e.g. "Truncated(SHA-256,12)"
    output_bits: int = Field(ge=1)
    digest: str  # hex-encoded
    source: str = Field(default="-")  # file name or "-" for stdin


def parse_record(json_str: str) -> DigestRecord:
    """
    Parse a JSON record string.
    
    Args:
        json_str: JSON string produced by serialize_record
        
    Returns:
        DigestRecord instance
        
    Raises:
        ValueError if record type is unknown or JSON is invalid
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}")
    
    record_type = data.get("type") if isinstance(data, dict) else None
    if record_type != "digest":
        raise ValueError(f"Unknown record type: {record_type}")
    return DigestRecord(**data)


def serialize_record(record: DigestRecord) -> str:
    """Serialize a record to a single-line JSON string."""
    return record.model_dump_json(exclude_none=True)
