"""
Capability masks for geodesic queries.

A capability mask is a plain integer bit set telling the geodesic engine
which results to compute. It is split into two disjoint ranges:

- Series bits (values 1<<0 .. 1<<4): the coefficient series C1, C1', C2, C3
  and C4 the engine has to evaluate.
- Output bits (values >= 1<<7): the result fields to populate, plus the
  LONG_UNROLL modifier which changes how lon2 is reported.

Each named output capability carries the series bits it depends on, so
OR-ing named constants always yields a consistent mask. The values match
GeographicLib's, which lets masks pass straight through to the adapter.
"""

from typing import Iterable, List


class Capability:
    """Named capability bits (integer constants)."""

    CAP_NONE = 0
    CAP_C1 = 1 << 0
    CAP_C1p = 1 << 1
    CAP_C2 = 1 << 2
    CAP_C3 = 1 << 3
    CAP_C4 = 1 << 4
    CAP_ALL = 0x1F
    CAP_MASK = CAP_ALL
    OUT_ALL = 0x7F80
    OUT_MASK = 0xFF80  # includes LONG_UNROLL

    NONE = 0
    LATITUDE = 1 << 7 | CAP_NONE
    LONGITUDE = 1 << 8 | CAP_C3
    AZIMUTH = 1 << 9 | CAP_NONE
    DISTANCE = 1 << 10 | CAP_C1
    DISTANCE_IN = 1 << 11 | CAP_C1 | CAP_C1p
    REDUCED_LENGTH = 1 << 12 | CAP_C1 | CAP_C2
    GEODESIC_SCALE = 1 << 13 | CAP_C1 | CAP_C2
    AREA = 1 << 14 | CAP_C4
    LONG_UNROLL = 1 << 15

    STANDARD = LATITUDE | LONGITUDE | AZIMUTH | DISTANCE
    ALL = OUT_ALL | CAP_ALL


# Output capabilities in bit order, used by describe() / from_names().
_NAMED_OUTPUTS = (
    ("LATITUDE", Capability.LATITUDE),
    ("LONGITUDE", Capability.LONGITUDE),
    ("AZIMUTH", Capability.AZIMUTH),
    ("DISTANCE", Capability.DISTANCE),
    ("DISTANCE_IN", Capability.DISTANCE_IN),
    ("REDUCED_LENGTH", Capability.REDUCED_LENGTH),
    ("GEODESIC_SCALE", Capability.GEODESIC_SCALE),
    ("AREA", Capability.AREA),
)

_PRESETS = {
    "NONE": Capability.NONE,
    "STANDARD": Capability.STANDARD,
    "ALL": Capability.ALL,
    "LONG_UNROLL": Capability.LONG_UNROLL,
}


def combine(*masks: int) -> int:
    """Union of any number of masks. ``combine()`` is ``Capability.NONE``."""
    result = Capability.NONE
    for mask in masks:
        result |= int(mask)
    return result


def includes(mask: int, required: int) -> bool:
    """True if every bit of ``required`` is present in ``mask``."""
    return (int(mask) & int(required)) == int(required)


def effective(requested: int, declared: int) -> int:
    """Output bits a query can actually deliver.

    A line or engine declared with ``declared`` cannot produce outputs it was
    not set up for, whatever the caller requests.
    """
    return int(requested) & int(declared) & Capability.OUT_MASK


def series_bits(mask: int) -> int:
    """Series-coefficient part of a mask."""
    return int(mask) & Capability.CAP_MASK


def output_bits(mask: int) -> int:
    """Output part of a mask (LONG_UNROLL included)."""
    return int(mask) & Capability.OUT_MASK


def describe(mask: int) -> List[str]:
    """
    Names of the output capabilities fully contained in a mask.

    A capability is only listed when both its output bit and its series
    prerequisites are present. LONG_UNROLL is appended last when set.

    Args:
        mask: Capability mask

    Returns:
        List of capability names in bit order
    """
    mask = int(mask)
    names = [name for name, value in _NAMED_OUTPUTS if includes(mask, value)]
    if mask & Capability.LONG_UNROLL:
        names.append("LONG_UNROLL")
    return names


def from_names(names: Iterable[str]) -> int:
    """
    Build a mask from capability names (case-insensitive).

    Accepts the output capability names plus the presets NONE, STANDARD,
    ALL and LONG_UNROLL.

    Raises:
        ValueError: If a name is not recognized
    """
    lookup = dict(_NAMED_OUTPUTS)
    lookup.update(_PRESETS)
    mask = Capability.NONE
    for name in names:
        key = str(name).strip().upper()
        if key not in lookup:
            raise ValueError(f"Unknown capability name: {name}")
        mask |= lookup[key]
    return mask
