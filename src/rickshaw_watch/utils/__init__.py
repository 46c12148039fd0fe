"""Rickshaw Watch utilities."""

from .plates import (
    GENERAL_RTO,
    PLATE_PATTERN,
    RTO_OFFICES,
    is_valid_plate,
    normalize_plate,
    rto_jurisdiction,
)

__all__ = [
    "GENERAL_RTO",
    "PLATE_PATTERN",
    "RTO_OFFICES",
    "is_valid_plate",
    "normalize_plate",
    "rto_jurisdiction",
]
