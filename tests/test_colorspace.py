# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (sRGB ↔ XYZ ↔ Lab, HSL, hex)."""

import numpy as np
import pytest

from seasonkit.cache import ReferenceCache
from seasonkit.errors import ConfigurationError, InvalidColor
from seasonkit.measure.colorspace import (
    ColorSpaceConverter,
    adapt_xyz,
    adapt_xyz_array,
    chromatic_adaptation_matrix,
    color_temperature,
    estimate_kelvin,
    hex_to_rgb,
    hsl_to_rgb,
    lab_to_lch,
    lab_to_rgb,
    lab_to_xyz,
    lab_to_xyz_array,
    linear_to_srgb,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_xyz,
    srgb_to_linear,
    srgb_uint8_to_lab,
    to_rgb,
    xyz_to_lab,
    xyz_to_lab_array,
    xyz_to_rgb,
)
from seasonkit.schema import HSLColor, LabColor, RGBColor, XYZColor
from seasonkit.schema.illuminant import A, D50, D65, F2


RGB_CORNERS = [
    (0, 0, 0), (255, 0, 0), (0, 255, 0), (0, 0, 255),
    (255, 255, 0), (0, 255, 255), (255, 0, 255), (255, 255, 255),
]
ILLUMINANTS = [D65, D50, A, F2]


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_roundtrip_extremes(self):
        srgb = np.array([0.0, 1.0, 0.04045])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values at or below 0.04045 use the linear segment."""
        val = 0.03
        linear = srgb_to_linear(np.array([val]))
        assert float(linear[0]) == pytest.approx(val / 12.92, abs=1e-12)

    def test_inverse_gamma_threshold(self):
        val = 0.002
        srgb = linear_to_srgb(np.array([val]))
        assert float(srgb[0]) == pytest.approx(val * 12.92, abs=1e-12)

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)


class TestXYZLab:

    def test_white_point_d65(self):
        xyz = rgb_to_xyz((255, 255, 255))
        assert xyz.x == pytest.approx(95.047, abs=1e-3)
        assert xyz.y == pytest.approx(100.0, abs=1e-3)
        assert xyz.z == pytest.approx(108.883, abs=1e-3)

    def test_black_is_zero(self):
        xyz = rgb_to_xyz((0, 0, 0))
        assert xyz.as_tuple() == (0.0, 0.0, 0.0)

    def test_lab_of_white_point_is_neutral(self):
        lab = xyz_to_lab(XYZColor(*D65.white_point))
        assert lab.l == pytest.approx(100.0, abs=1e-9)
        assert lab.a == pytest.approx(0.0, abs=1e-9)
        assert lab.b == pytest.approx(0.0, abs=1e-9)

    def test_lab_xyz_exact_inverse(self):
        xyz = np.array([[20.0, 30.0, 40.0], [0.5, 0.4, 0.3], [80.0, 90.0, 70.0]])
        recovered = lab_to_xyz_array(xyz_to_lab_array(xyz))
        np.testing.assert_allclose(recovered, xyz, atol=1e-9)

    def test_linear_segment_below_epsilon(self):
        """Very dark colors use (κt + 16) / 116, giving L = κ · Y/Yn."""
        lab = xyz_to_lab(XYZColor(0.0, 0.5, 0.0))
        assert lab.l == pytest.approx((29.0 / 3.0) ** 3 * 0.005, rel=1e-9)

    def test_xyz_brighter_than_white_is_invalid(self):
        with pytest.raises(InvalidColor):
            xyz_to_lab(XYZColor(200.0, 250.0, 200.0))

    def test_lab_without_physical_xyz_is_invalid(self):
        with pytest.raises(InvalidColor, match="negative"):
            lab_to_xyz(LabColor(10.0, -128.0, 0.0))

    def test_xyz_to_rgb_clips_out_of_gamut(self):
        rgb = xyz_to_rgb(XYZColor(0.0, 50.0, 0.0))
        assert all(0 <= c <= 255 for c in rgb.as_tuple())
        assert rgb.r == 0


class TestRGBLab:

    def test_white(self):
        lab = rgb_to_lab((255, 255, 255))
        assert lab.l == pytest.approx(100.0, abs=1e-3)
        assert lab.a == pytest.approx(0.0, abs=1e-3)
        assert lab.b == pytest.approx(0.0, abs=1e-3)

    def test_black(self):
        lab = rgb_to_lab((0, 0, 0))
        assert lab.as_tuple() == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_primary_red(self):
        lab = rgb_to_lab((255, 0, 0))
        assert lab.l == pytest.approx(53.24, abs=0.05)
        assert lab.a == pytest.approx(80.09, abs=0.05)
        assert lab.b == pytest.approx(67.20, abs=0.05)

    def test_accepts_hex_and_value_type(self):
        assert rgb_to_lab("#FF0000") == rgb_to_lab(RGBColor(255, 0, 0))

    @pytest.mark.parametrize("rgb", [
        (0, 0, 0), (255, 255, 255), (255, 0, 0), (0, 255, 0),
        (0, 0, 255), (255, 255, 0), (0, 255, 255), (255, 0, 255),
        (190, 157, 135), (1, 2, 3),
    ])
    def test_roundtrip_fixed_colors(self, rgb):
        recovered = lab_to_rgb(rgb_to_lab(rgb))
        assert all(abs(x - y) <= 1 for x, y in zip(recovered.as_tuple(), rgb))

    def test_roundtrip_random_colors(self):
        colors = np.random.RandomState(7).randint(0, 256, size=(200, 3))
        for rgb in colors:
            rgb = tuple(int(c) for c in rgb)
            recovered = lab_to_rgb(rgb_to_lab(rgb)).as_tuple()
            assert max(abs(x - y) for x, y in zip(recovered, rgb)) <= 1

    def test_roundtrip_under_other_illuminant(self):
        rgb = (120, 200, 40)
        recovered = lab_to_rgb(rgb_to_lab(rgb, D50), D50)
        assert all(abs(x - y) <= 1 for x, y in zip(recovered.as_tuple(), rgb))

    def test_illuminant_changes_lab(self):
        assert rgb_to_lab((200, 120, 80), "D50") != rgb_to_lab((200, 120, 80), "D65")

    def test_skin_sample(self):
        assert lab_to_rgb((67.0, 9.0, 16.0)).as_tuple() == pytest.approx(
            (190, 157, 135), abs=1
        )

    def test_invalid_rgb(self):
        with pytest.raises(InvalidColor):
            rgb_to_lab((256, 0, 0))
        with pytest.raises(InvalidColor):
            rgb_to_lab((-1, 0, 0))

    def test_invalid_lab(self):
        with pytest.raises(InvalidColor):
            lab_to_rgb((101.0, 0.0, 0.0))
        with pytest.raises(InvalidColor):
            lab_to_rgb((50.0, 0.0))

    def test_unknown_illuminant(self):
        with pytest.raises(ConfigurationError):
            rgb_to_lab((10, 20, 30), "D75")


class TestChromaticAdaptation:
    """sRGB is D65-relative; other illuminants go through a Bradford transform."""

    @pytest.mark.parametrize("illuminant", ILLUMINANTS, ids=lambda ill: ill.name)
    @pytest.mark.parametrize("rgb", RGB_CORNERS)
    def test_cube_corners_roundtrip(self, rgb, illuminant):
        lab = rgb_to_lab(rgb, illuminant)
        assert -128.0 <= lab.b <= 127.0
        recovered = lab_to_rgb(lab, illuminant)
        assert all(abs(x - y) <= 1 for x, y in zip(recovered.as_tuple(), rgb))

    @pytest.mark.parametrize("illuminant", ILLUMINANTS, ids=lambda ill: ill.name)
    def test_white_is_neutral(self, illuminant):
        lab = rgb_to_lab((255, 255, 255), illuminant)
        assert lab.l == pytest.approx(100.0, abs=1e-3)
        assert lab.a == pytest.approx(0.0, abs=1e-3)
        assert lab.b == pytest.approx(0.0, abs=1e-3)

    def test_gray_is_neutral_under_tungsten(self):
        lab = rgb_to_lab((128, 128, 128), "A")
        assert lab.l == pytest.approx(rgb_to_lab((128, 128, 128)).l, abs=1e-3)
        assert lab.a == pytest.approx(0.0, abs=1e-3)
        assert lab.b == pytest.approx(0.0, abs=1e-3)

    def test_saturated_blue_under_tungsten(self):
        lab = rgb_to_lab((0, 0, 255), "A")
        assert lab.b > -128.0
        assert lab_to_rgb(lab, "A").as_tuple() == pytest.approx((0, 0, 255), abs=1)

    def test_matrix_maps_white_to_white(self):
        matrix = chromatic_adaptation_matrix(D65.white_point, A.white_point)
        np.testing.assert_allclose(matrix @ np.array(D65.white_point), A.white_point, atol=1e-9)

    def test_matrix_inverse(self):
        forward = chromatic_adaptation_matrix(D65.white_point, F2.white_point)
        backward = chromatic_adaptation_matrix(F2.white_point, D65.white_point)
        np.testing.assert_allclose(backward @ forward, np.eye(3), atol=1e-9)

    def test_same_white_is_identity(self):
        xyz = np.array([[41.24, 21.26, 1.93], [18.05, 7.22, 95.05]])
        np.testing.assert_array_equal(adapt_xyz_array(xyz, D65.white_point, D65.white_point), xyz)

    def test_adapt_xyz(self):
        adapted = adapt_xyz(XYZColor(*D65.white_point), "D65", "D50")
        np.testing.assert_allclose(adapted.as_tuple(), D50.white_point, atol=1e-6)

    @pytest.mark.parametrize("illuminant", ILLUMINANTS, ids=lambda ill: ill.name)
    def test_array_path_matches_scalar(self, illuminant):
        pixels = np.array(RGB_CORNERS, dtype=np.uint8)
        labs = srgb_uint8_to_lab(pixels, illuminant)
        assert labs[..., 2].min() >= -128.0
        for rgb, lab in zip(RGB_CORNERS, labs):
            np.testing.assert_allclose(lab, rgb_to_lab(rgb, illuminant).as_tuple(), atol=1e-3)

    def test_converter_roundtrip_under_tungsten(self):
        conv = ColorSpaceConverter(illuminant="A")
        assert conv.lab_to_rgb(conv.rgb_to_lab((40, 60, 200))).as_tuple() == pytest.approx(
            (40, 60, 200), abs=1
        )


class TestHSL:

    @pytest.mark.parametrize("rgb, hsl", [
        ((255, 0, 0), (0.0, 100.0, 50.0)),
        ((0, 255, 0), (120.0, 100.0, 50.0)),
        ((0, 0, 255), (240.0, 100.0, 50.0)),
        ((255, 0, 255), (300.0, 100.0, 50.0)),
        ((255, 255, 255), (0.0, 0.0, 100.0)),
    ])
    def test_known_values(self, rgb, hsl):
        assert rgb_to_hsl(rgb).as_tuple() == pytest.approx(hsl, abs=1e-9)

    def test_gray_has_no_hue_or_saturation(self):
        hsl = rgb_to_hsl((128, 128, 128))
        assert hsl.h == 0.0
        assert hsl.s == 0.0
        assert hsl.l == pytest.approx(50.196, abs=1e-3)

    def test_hsl_to_rgb_primaries(self):
        assert hsl_to_rgb(HSLColor(0.0, 100.0, 50.0)).as_tuple() == (255, 0, 0)
        assert hsl_to_rgb(HSLColor(120.0, 100.0, 50.0)).as_tuple() == (0, 255, 0)
        assert hsl_to_rgb(HSLColor(240.0, 100.0, 50.0)).as_tuple() == (0, 0, 255)

    def test_hsl_to_rgb_gray(self):
        assert hsl_to_rgb(HSLColor(200.0, 0.0, 50.0)).as_tuple() == (128, 128, 128)

    def test_roundtrip(self):
        colors = np.random.RandomState(3).randint(0, 256, size=(100, 3))
        for rgb in colors:
            rgb = tuple(int(c) for c in rgb)
            assert hsl_to_rgb(rgb_to_hsl(rgb)).as_tuple() == rgb


class TestHex:

    def test_rgb_to_hex_upper_case(self):
        assert rgb_to_hex((190, 157, 135)) == "#BE9D87"

    def test_hex_to_rgb(self):
        assert hex_to_rgb("#BE9D87") == RGBColor(190, 157, 135)
        assert hex_to_rgb("be9d87") == RGBColor(190, 157, 135)

    def test_short_form(self):
        assert hex_to_rgb("#abc") == RGBColor(170, 187, 204)

    @pytest.mark.parametrize("bad", ["", "#12345", "#GGGGGG", "#1234567", "red"])
    def test_malformed(self, bad):
        with pytest.raises(InvalidColor):
            hex_to_rgb(bad)

    def test_non_string(self):
        with pytest.raises(InvalidColor):
            hex_to_rgb(0xFFFFFF)

    def test_to_rgb_accepts_every_form(self):
        expected = RGBColor(1, 2, 3)
        assert to_rgb(expected) is expected
        assert to_rgb((1, 2, 3)) == expected
        assert to_rgb("#010203") == expected

    def test_to_rgb_rejects_bad_hex(self):
        with pytest.raises(InvalidColor):
            to_rgb("#01020")


class TestColorTemperature:

    @pytest.mark.parametrize("lab, temperature, warmness", [
        ((67.0, 9.0, 16.0), "warm", 0.5),
        ((50.0, 40.0, 60.0), "warm", 1.0),
        ((50.0, 0.0, 0.0), "neutral", 0.0),
        ((50.0, -10.0, 20.0), "neutral", 0.1),
        ((50.0, 127.0, 15.0), "neutral", 1.0),
        ((50.0, 10.0, -20.0), "cool", -0.75),
        ((50.0, -4.0, 8.0), "cool", -0.2),
        ((50.0, -40.0, -60.0), "cool", -1.0),
    ])
    def test_rules(self, lab, temperature, warmness):
        result = color_temperature(lab)
        assert result.temperature == temperature
        assert result.warmness == pytest.approx(warmness)

    def test_warmness_sign_follows_temperature(self):
        for a in range(-120, 121, 15):
            for b in range(-120, 121, 15):
                result = color_temperature((50.0, float(a), float(b)))
                assert -1.0 <= result.warmness <= 1.0
                if result.temperature == "warm":
                    assert result.warmness >= 0.0
                elif result.temperature == "cool":
                    assert result.warmness <= 0.0

    @pytest.mark.parametrize("lab, kelvin", [
        ((50.0, 0.0, 0.0), 5500.0),
        ((67.0, 9.0, 16.0), 5155.0),
        ((50.0, 40.0, 60.0), 4300.0),
        ((50.0, 10.0, -20.0), 6250.0),
        ((50.0, -128.0, 127.0), 2000.0),
        ((50.0, 127.0, -128.0), 10000.0),
    ])
    def test_kelvin(self, lab, kelvin):
        assert estimate_kelvin(lab) == pytest.approx(kelvin)
        assert color_temperature(lab).kelvin == pytest.approx(kelvin)

    def test_to_dict(self):
        assert color_temperature((50.0, 0.0, 0.0)).to_dict() == {
            "temperature": "neutral", "warmness": 0.0, "kelvin": 5500.0,
        }

    def test_converter_reads_rgb(self):
        result = ColorSpaceConverter().color_temperature("#BE9D87")
        assert result.temperature == "warm"
        assert 0.0 < result.warmness < 1.0

    def test_invalid_lab(self):
        with pytest.raises(InvalidColor):
            color_temperature((50.0, 0.0, 200.0))


class TestLCh:

    def test_neutral_has_zero_hue(self):
        assert lab_to_lch((50.0, 0.0, 0.0)) == (50.0, 0.0, 0.0)

    def test_hue_angle(self):
        L, C, H = lab_to_lch((50.0, 0.0, 10.0))
        assert C == pytest.approx(10.0)
        assert H == pytest.approx(90.0)

    def test_negative_hue_wraps(self):
        _, _, H = lab_to_lch((50.0, 0.0, -10.0))
        assert H == pytest.approx(270.0)


class TestSRGBUint8ToLab:

    def test_matches_scalar(self):
        pixels = np.array([[255, 0, 0], [190, 157, 135]], dtype=np.uint8)
        labs = srgb_uint8_to_lab(pixels)
        assert labs.shape == (2, 3)
        np.testing.assert_allclose(labs[1], rgb_to_lab((190, 157, 135)).as_tuple(), atol=1e-9)

    def test_rejects_out_of_range(self):
        with pytest.raises(InvalidColor):
            srgb_uint8_to_lab(np.array([[300, 0, 0]]))

    def test_rejects_bad_shape(self):
        with pytest.raises(InvalidColor):
            srgb_uint8_to_lab(np.zeros((4, 4)))


class TestColorSpaceConverter:

    def test_rounds_to_precision(self):
        conv = ColorSpaceConverter(precision=1)
        assert conv.rgb_to_lab((255, 0, 0)) == LabColor(53.2, 80.1, 67.2)

    def test_default_precision_three(self):
        lab = ColorSpaceConverter().rgb_to_lab((190, 157, 135))
        for value in lab.as_tuple():
            assert round(value, 3) == value

    def test_white_is_exact_after_rounding(self):
        assert ColorSpaceConverter().rgb_to_lab((255, 255, 255)) == LabColor(100.0, 0.0, 0.0)

    def test_illuminant_by_name(self):
        conv = ColorSpaceConverter(illuminant="d50")
        assert conv.illuminant is D50

    def test_unknown_illuminant(self):
        with pytest.raises(ConfigurationError):
            ColorSpaceConverter(illuminant="D75")

    def test_with_illuminant_returns_new_converter(self):
        conv = ColorSpaceConverter()
        other = conv.with_illuminant("A")
        assert conv.illuminant is D65
        assert other.illuminant.name == "A"

    def test_hsl_hex_helpers(self):
        conv = ColorSpaceConverter()
        assert conv.hex_to_lab("#FFFFFF") == LabColor(100.0, 0.0, 0.0)
        assert conv.lab_to_hex((100.0, 0.0, 0.0)) == "#FFFFFF"
        assert conv.rgb_to_hsl((255, 0, 0)) == HSLColor(0.0, 100.0, 50.0)

    def test_cache_hit(self):
        cache = ReferenceCache(16)
        conv = ColorSpaceConverter(cache=cache)
        first = conv.rgb_to_lab((10, 20, 30))
        second = conv.rgb_to_lab((10, 20, 30))
        assert first == second
        stats = cache.stats()
        assert stats.hits == 1
        assert stats.misses == 1

    def test_cache_keys_include_illuminant(self):
        cache = ReferenceCache(16)
        d65 = ColorSpaceConverter(cache=cache)
        d50 = d65.with_illuminant("D50")
        lab65 = d65.rgb_to_lab((200, 120, 80))
        lab50 = d50.rgb_to_lab((200, 120, 80))
        assert lab65 != lab50
        assert cache.stats().misses == 2
        assert d50.rgb_to_lab((200, 120, 80)) == lab50
