"""Tests for rgba_kit.core.metrics — luma, dark/light and contrast."""

import pytest
from rgba_kit.core.color import BLACK, WHITE, Color
from rgba_kit.core.metrics import contrast, is_dark, is_light, luma, luma_yuv, wcag_level

SAMPLES = [
    BLACK,
    WHITE,
    Color(255, 0, 0),
    Color(0, 255, 0),
    Color(0, 0, 255),
    Color(127, 127, 127),
    Color(129, 129, 129),
    Color(37, 99, 235, 10),
    Color(248, 250, 252, 0),
]


class TestLuma:
    def test_black(self):
        assert luma(BLACK) == 0

    def test_white(self):
        assert luma(WHITE) == pytest.approx(255)

    def test_bt709_weights(self):
        assert luma(Color(100, 0, 0)) == pytest.approx(21.26)
        assert luma(Color(0, 100, 0)) == pytest.approx(71.52)
        assert luma(Color(0, 0, 100)) == pytest.approx(7.22)

    def test_alpha_ignored(self):
        assert luma(Color(10, 20, 30, 0)) == luma(Color(10, 20, 30, 255))


class TestLumaYuv:
    def test_bt601_weights(self):
        assert luma_yuv(Color(100, 0, 0)) == pytest.approx(29.9)
        assert luma_yuv(Color(0, 100, 0)) == pytest.approx(58.7)
        assert luma_yuv(Color(0, 0, 100)) == pytest.approx(11.4)

    def test_white(self):
        assert luma_yuv(WHITE) == pytest.approx(255)


class TestDarkLight:
    def test_black_is_dark(self):
        assert is_dark(BLACK)
        assert not is_light(BLACK)

    def test_white_is_light(self):
        assert is_light(WHITE)
        assert not is_dark(WHITE)

    def test_around_threshold(self):
        assert is_dark(Color(127, 127, 127))
        assert is_light(Color(129, 129, 129))

    def test_blue_is_dark(self):
        # BT.601 gives pure blue very little weight
        assert is_dark(Color(0, 0, 255))

    @pytest.mark.parametrize('color', SAMPLES)
    def test_exclusive_partition(self, color):
        assert is_dark(color) != is_light(color)


class TestContrast:
    def test_black_white_is_21(self):
        assert contrast(BLACK, WHITE) == pytest.approx(21)

    @pytest.mark.parametrize('color', SAMPLES)
    def test_self_is_one(self, color):
        assert contrast(color, color) == 1

    def test_symmetric(self):
        for a in SAMPLES:
            for b in SAMPLES:
                assert contrast(a, b) == contrast(b, a)

    def test_range(self):
        for a in SAMPLES:
            for b in SAMPLES:
                assert 1 <= contrast(a, b) <= 21 + 1e-9


class TestWcagLevel:
    def test_normal_text(self):
        assert wcag_level(21) == 'AAA'
        assert wcag_level(7) == 'AAA'
        assert wcag_level(4.5) == 'AA'
        assert wcag_level(4.49) == 'fail'

    def test_large_text(self):
        assert wcag_level(4.5, large_text=True) == 'AAA'
        assert wcag_level(3, large_text=True) == 'AA'
        assert wcag_level(2.99, large_text=True) == 'fail'
