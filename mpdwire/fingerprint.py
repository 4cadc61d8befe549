"""Audio fingerprint types reported by the server."""

from __future__ import annotations

import enum


class FingerprintType(enum.Enum):
    """The algorithm a fingerprint was computed with."""

    UNKNOWN = enum.auto()
    CHROMAPRINT = enum.auto()


def parse_fingerprint_type(name: str) -> FingerprintType:
    """The fingerprint type for a protocol name; UNKNOWN if not recognised."""
    if name == "chromaprint":
        return FingerprintType.CHROMAPRINT
    return FingerprintType.UNKNOWN