"""Indian vehicle registration plate helpers.

Plates look like ``MH 02 AB 1234``: state code, RTO district code,
series letters and a four digit number. Spaces between groups are
optional.
"""

from __future__ import annotations

import re

PLATE_PATTERN = re.compile(r"[A-Z]{2}\s?[0-9]{2}\s?[A-Z]{2}\s?[0-9]{4}", re.IGNORECASE | re.ASCII)

_DISTRICT_CODE = re.compile(r"^[A-Z]{2}([0-9]{2})")
_SEPARATORS = re.compile(r"[\s-]+")

GENERAL_RTO = "General RTO"

# District code -> issuing office
RTO_OFFICES = {
    "01": "South Mumbai RTO",
    "02": "Andheri RTO",
    "03": "Bandra RTO",
    "04": "Borivali RTO",
    "05": "Thane RTO",
    "06": "Kalyan RTO",
    "12": "Pune RTO",
    "14": "Nagpur RTO",
}


def is_valid_plate(value: str | None) -> bool:
    """Check a vehicle number against the canonical plate format."""
    if not value:
        return False
    return PLATE_PATTERN.fullmatch(value) is not None


def normalize_plate(value: str | None) -> str:
    """Uppercase and strip separators: ``"mh 02-ab 1234"`` -> ``"MH02AB1234"``."""
    if not value:
        return ""
    return _SEPARATORS.sub("", value.strip()).upper()


def rto_jurisdiction(vehicle_number: str | None) -> str:
    """Return the RTO office responsible for a plate.

    Args:
        vehicle_number: Plate in any spacing/case

    Returns:
        Office name, ``"RTO Office <code>"`` for unlisted district codes,
        or ``"General RTO"`` when no district code can be read
    """
    match = _DISTRICT_CODE.match(normalize_plate(vehicle_number))
    if not match:
        return GENERAL_RTO
    code = match.group(1)
    return RTO_OFFICES.get(code, f"RTO Office {code}")
