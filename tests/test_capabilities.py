"""Tests for the capability mask algebra."""

import functools
import itertools
import operator

import pytest
from geographiclib.geodesic import Geodesic

from gnomonic_projection.core.models.capabilities import (
    Capability,
    combine,
    includes,
    effective,
    series_bits,
    output_bits,
    describe,
    from_names,
)


PRIMITIVES = [
    Capability.LATITUDE,
    Capability.LONGITUDE,
    Capability.AZIMUTH,
    Capability.DISTANCE,
    Capability.DISTANCE_IN,
    Capability.REDUCED_LENGTH,
    Capability.GEODESIC_SCALE,
    Capability.AREA,
]


class TestCapabilityValues:
    """Bit layout of the named constants."""

    def test_series_bits(self):
        assert Capability.CAP_C1 == 1
        assert Capability.CAP_C1p == 2
        assert Capability.CAP_C2 == 4
        assert Capability.CAP_C3 == 8
        assert Capability.CAP_C4 == 16
        assert Capability.CAP_ALL == 0x1F

    def test_output_constants_carry_prerequisites(self):
        """Each named output includes the series bits it needs."""
        assert Capability.LATITUDE == 1 << 7
        assert Capability.LONGITUDE == (1 << 8) | Capability.CAP_C3
        assert Capability.AZIMUTH == 1 << 9
        assert Capability.DISTANCE == (1 << 10) | Capability.CAP_C1
        assert Capability.DISTANCE_IN == (1 << 11) | Capability.CAP_C1 | Capability.CAP_C1p
        assert Capability.REDUCED_LENGTH == (1 << 12) | Capability.CAP_C1 | Capability.CAP_C2
        assert Capability.GEODESIC_SCALE == (1 << 13) | Capability.CAP_C1 | Capability.CAP_C2
        assert Capability.AREA == (1 << 14) | Capability.CAP_C4
        assert Capability.LONG_UNROLL == 1 << 15

    def test_presets(self):
        assert Capability.STANDARD == (
            Capability.LATITUDE | Capability.LONGITUDE | Capability.AZIMUTH | Capability.DISTANCE
        )
        assert Capability.ALL == 0x7F9F
        assert not Capability.ALL & Capability.LONG_UNROLL

    def test_all_contains_every_primitive(self):
        for cap in PRIMITIVES:
            assert includes(Capability.ALL, cap)

    def test_series_and_output_ranges_disjoint(self):
        assert Capability.CAP_MASK & Capability.OUT_MASK == 0
        for cap in PRIMITIVES:
            assert series_bits(cap) | output_bits(cap) == cap

    def test_values_match_geographiclib(self):
        """Masks are passed to GeographicLib unchanged."""
        assert Capability.LATITUDE == Geodesic.LATITUDE
        assert Capability.LONGITUDE == Geodesic.LONGITUDE
        assert Capability.AZIMUTH == Geodesic.AZIMUTH
        assert Capability.DISTANCE == Geodesic.DISTANCE
        assert Capability.DISTANCE_IN == Geodesic.DISTANCE_IN
        assert Capability.REDUCED_LENGTH == Geodesic.REDUCEDLENGTH
        assert Capability.GEODESIC_SCALE == Geodesic.GEODESICSCALE
        assert Capability.AREA == Geodesic.AREA
        assert Capability.STANDARD == Geodesic.STANDARD
        assert Capability.ALL == Geodesic.ALL
        assert Capability.LONG_UNROLL == Geodesic.LONG_UNROLL


class TestComposition:
    """OR-composition of masks."""

    def test_combine_empty_is_none(self):
        assert combine() == Capability.NONE

    def test_combine_is_bitwise_or(self):
        assert combine(Capability.LATITUDE, Capability.AREA) == Capability.LATITUDE | Capability.AREA

    def test_order_does_not_matter(self):
        caps = [Capability.AZIMUTH, Capability.GEODESIC_SCALE, Capability.REDUCED_LENGTH]
        expected = combine(*caps)
        for perm in itertools.permutations(caps):
            assert combine(*perm) == expected

    def test_associative(self):
        a, b, c = Capability.LONGITUDE, Capability.DISTANCE_IN, Capability.AREA
        assert combine(combine(a, b), c) == combine(a, combine(b, c))

    def test_union_of_primitives_is_all(self):
        assert functools.reduce(operator.or_, PRIMITIVES) == Capability.ALL

    def test_includes_superset(self):
        assert includes(Capability.STANDARD, Capability.LONGITUDE)
        assert not includes(Capability.STANDARD, Capability.REDUCED_LENGTH)
        assert includes(Capability.ALL, Capability.NONE)

    def test_output_bit_without_series_is_not_included(self):
        assert not includes(1 << 8, Capability.LONGITUDE)


class TestEffectiveScope:
    """Query scope limited by the declared mask."""

    def test_effective_is_intersection_of_outputs(self):
        declared = Capability.LATITUDE | Capability.AZIMUTH
        assert effective(Capability.ALL, declared) == Capability.LATITUDE | Capability.AZIMUTH

    def test_effective_drops_series_bits(self):
        assert series_bits(effective(Capability.ALL, Capability.ALL)) == 0

    def test_unknown_high_bits_ignored(self):
        assert output_bits((1 << 20) | Capability.LATITUDE) == Capability.LATITUDE
        assert effective((1 << 20) | Capability.AZIMUTH, Capability.ALL | (1 << 20)) == Capability.AZIMUTH

    def test_long_unroll_is_an_output_modifier(self):
        assert output_bits(Capability.LONG_UNROLL) == Capability.LONG_UNROLL
        assert series_bits(Capability.LONG_UNROLL) == 0


class TestNames:
    """describe() and from_names()."""

    def test_describe_standard(self):
        assert describe(Capability.STANDARD) == ["LATITUDE", "LONGITUDE", "AZIMUTH", "DISTANCE"]

    def test_describe_single(self):
        assert describe(Capability.REDUCED_LENGTH) == ["REDUCED_LENGTH"]

    def test_describe_none(self):
        assert describe(Capability.NONE) == []

    def test_describe_long_unroll_last(self):
        names = describe(Capability.ALL | Capability.LONG_UNROLL)
        assert names[-1] == "LONG_UNROLL"
        assert len(names) == 9

    def test_from_names_case_insensitive(self):
        assert from_names(["latitude", "Longitude"]) == Capability.LATITUDE | Capability.LONGITUDE

    def test_from_names_presets(self):
        assert from_names(["standard"]) == Capability.STANDARD
        assert from_names(["ALL", "long_unroll"]) == Capability.ALL | Capability.LONG_UNROLL

    def test_from_names_inverts_describe(self):
        mask = Capability.AZIMUTH | Capability.GEODESIC_SCALE | Capability.REDUCED_LENGTH
        assert from_names(describe(mask)) == mask

    def test_from_names_unknown(self):
        with pytest.raises(ValueError, match="Unknown capability"):
            from_names(["LATITUDE", "ALTITUDE"])
