"""
Tests for the Bezier arc generator: endpoints, length, offset direction
and the zero-length chord fallback.
"""

import math

import pytest

from corridor.arcs import SEGMENTS, Direction, chord_offset, generate_arc, max_bow

BVC = (51.0452, -114.0655)
YYC = (51.1335, -114.0086)
UALBERTA = (53.5227, -113.5263)
WEM = (53.5265, -113.6235)


def _midpoint_offset(start, end, h, direction):
    path = generate_arc(start, end, h, direction)
    return chord_offset(path[SEGMENTS // 2], start, end)


class TestEndpoints:
    @pytest.mark.parametrize("direction", [Direction.UP, Direction.DOWN])
    @pytest.mark.parametrize("h", [0.0, 0.02, 0.5, -0.03])
    def test_exact_endpoints(self, h, direction):
        path = generate_arc(BVC, YYC, h, direction)
        assert path[0] == BVC
        assert path[-1] == YYC

    def test_point_count(self):
        assert len(generate_arc(UALBERTA, WEM)) == 21
        assert len(generate_arc(WEM, UALBERTA, 1.0, Direction.DOWN)) == SEGMENTS + 1

    def test_accepts_lists(self):
        path = generate_arc([51.0452, -114.0655], [51.1335, -114.0086], 0.03, "down")
        assert path[0] == BVC
        assert path[-1] == YYC


def _bezier_midpoint(start, end, h, perp_lat, perp_lon):
    """Curve point at t=0.5: 0.25*start + 0.5*control + 0.25*end."""
    ctrl_lat = (start[0] + end[0]) / 2 + perp_lat * h
    ctrl_lon = (start[1] + end[1]) / 2 + perp_lon * h
    return (0.25 * start[0] + 0.5 * ctrl_lat + 0.25 * end[0],
            0.25 * start[1] + 0.5 * ctrl_lon + 0.25 * end[1])


class TestNormalDirection:
    def test_down_uses_dx_minus_dy_normal(self):
        dx, dy = YYC[1] - BVC[1], YYC[0] - BVC[0]
        length = math.hypot(dx, dy)
        expected = _bezier_midpoint(BVC, YYC, 0.03, dx / length, -dy / length)
        mid = generate_arc(BVC, YYC, 0.03, Direction.DOWN)[10]
        assert math.isclose(mid[0], expected[0], abs_tol=1e-12)
        assert math.isclose(mid[1], expected[1], abs_tol=1e-12)

    def test_up_uses_minus_dx_dy_normal(self):
        dx, dy = WEM[1] - UALBERTA[1], WEM[0] - UALBERTA[0]
        length = math.hypot(dx, dy)
        expected = _bezier_midpoint(UALBERTA, WEM, 0.02, -dx / length, dy / length)
        mid = generate_arc(UALBERTA, WEM, 0.02, Direction.UP)[10]
        assert math.isclose(mid[0], expected[0], abs_tol=1e-12)
        assert math.isclose(mid[1], expected[1], abs_tol=1e-12)

    def test_down_bows_north_west_of_calgary_chord(self):
        # Δlon and Δlat both positive: DOWN normal is (+lat, -lon)
        mid = generate_arc(BVC, YYC, 0.03, Direction.DOWN)[10]
        chord_mid = ((BVC[0] + YYC[0]) / 2, (BVC[1] + YYC[1]) / 2)
        assert mid[0] > chord_mid[0]
        assert mid[1] < chord_mid[1]


class TestCurvature:
    def test_zero_height_stays_on_chord(self):
        for p in generate_arc(BVC, YYC, 0.0):
            assert math.isclose(chord_offset(p, BVC, YYC), 0.0, abs_tol=1e-12)

    def test_midpoint_offset_is_half_height(self):
        assert math.isclose(abs(_midpoint_offset(BVC, YYC, 0.03, Direction.DOWN)), 0.015, rel_tol=1e-9)

    def test_height_increases_bow(self):
        offsets = [abs(_midpoint_offset(UALBERTA, WEM, h, Direction.UP)) for h in (0.01, 0.02, 0.05, 0.2)]
        assert offsets == sorted(offsets)
        assert len(set(offsets)) == len(offsets)

    def test_up_and_down_mirror(self):
        up = generate_arc(BVC, YYC, 0.04, Direction.UP)
        down = generate_arc(BVC, YYC, 0.04, Direction.DOWN)
        for a, b in zip(up, down):
            assert math.isclose(chord_offset(a, BVC, YYC), -chord_offset(b, BVC, YYC), abs_tol=1e-12)

    def test_up_is_positive_side(self):
        assert _midpoint_offset(BVC, YYC, 0.03, Direction.UP) > 0
        assert _midpoint_offset(BVC, YYC, 0.03, Direction.DOWN) < 0

    def test_negative_height_flips_side(self):
        flipped = generate_arc(BVC, YYC, -0.03, Direction.UP)
        down = generate_arc(BVC, YYC, 0.03, Direction.DOWN)
        for a, b in zip(flipped, down):
            assert math.isclose(a[0], b[0], abs_tol=1e-12)
            assert math.isclose(a[1], b[1], abs_tol=1e-12)

    def test_max_bow_at_midpoint(self):
        path = generate_arc(BVC, YYC, 0.03, Direction.DOWN)
        assert math.isclose(max_bow(path), 0.015, rel_tol=1e-9)
        assert max_bow([BVC, YYC]) == 0.0


class TestDegenerate:
    def test_same_point_returns_two_point_path(self):
        path = generate_arc(BVC, BVC, 0.03, Direction.DOWN)
        assert path == [BVC, BVC]
        assert all(math.isfinite(v) for p in path for v in p)

    def test_same_point_logs_warning(self, caplog):
        with caplog.at_level("WARNING", logger="corridor.arcs"):
            generate_arc(YYC, YYC)
        assert "Zero-length chord" in caplog.text


class TestDirection:
    def test_string_values(self):
        assert Direction("up") is Direction.UP
        assert Direction("down") is Direction.DOWN

    def test_invalid_direction(self):
        with pytest.raises(ValueError):
            generate_arc(BVC, YYC, 0.02, "sideways")


class TestChordOffset:
    def test_zero_length_chord_gives_unsigned_distance(self):
        assert math.isclose(chord_offset((51.0, -114.0), (51.0, -113.0), (51.0, -113.0)), 1.0)
        assert math.isclose(chord_offset((51.0, -112.0), (51.0, -113.0), (51.0, -113.0)), 1.0)
