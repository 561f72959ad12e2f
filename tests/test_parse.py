"""Tests for rgba_kit.core.parse — hex and rgb()/rgba() string parsing."""

import pytest
from rgba_kit.core.color import WHITE, Color, to_hex
from rgba_kit.core.errors import ColorFormatError, InvalidFormatError, UnsupportedFormatError
from rgba_kit.core.parse import from_hex, from_rgb, from_string


class TestFromHex:
    def test_white(self):
        assert from_hex('#ffffff') == Color(255, 255, 255, 255)

    def test_short_red(self):
        assert from_hex('#f00') == Color(255, 0, 0, 255)

    def test_short_digits_doubled(self):
        assert from_hex('#f0a') == Color(0xFF, 0x00, 0xAA, 255)

    def test_short_with_alpha(self):
        assert from_hex('#f0a8') == Color(0xFF, 0x00, 0xAA, 0x88)

    def test_long_with_alpha(self):
        assert from_hex('#00000080') == Color(0, 0, 0, 128)

    def test_uppercase(self):
        assert from_hex('#ABCDEF') == Color(171, 205, 239)
        assert from_hex('#FFF') == WHITE

    def test_mixed_case(self):
        assert from_hex('#2563Eb') == Color(37, 99, 235)

    @pytest.mark.parametrize(
        'text',
        ['bad', 'ffffff', '#ff', '#fffff', '#fffffffff', '#ggg', '#ffffff ', ' #ffffff', ''],
    )
    def test_invalid(self, text):
        with pytest.raises(InvalidFormatError):
            from_hex(text)

    @pytest.mark.parametrize('text', ['#fffffff', '#1234567'])
    def test_seven_digits_rejected(self, text):
        # 3+4 digit groupings are not a valid length
        with pytest.raises(InvalidFormatError):
            from_hex(text)

    def test_round_trips_to_hex(self):
        for c in (Color(1, 2, 3), Color(250, 128, 0, 64), Color(0, 0, 0, 0)):
            assert from_hex(to_hex(c)) == c


class TestFromRgb:
    def test_rgba_with_spaces(self):
        # round(0.5 * 255) rounds half up -> 128
        assert from_rgb('rgba(10, 20, 30, 0.5)') == Color(10, 20, 30, 128)

    def test_rgb_defaults_opaque(self):
        assert from_rgb('rgb(1,2,3)') == Color(1, 2, 3, 255)

    def test_alpha_bounds(self):
        assert from_rgb('rgba(0,0,0,0)').a == 0
        assert from_rgb('rgba(0,0,0,1)').a == 255
        assert from_rgb('rgba(0,0,0,1.0)').a == 255

    def test_alpha_leading_dot(self):
        assert from_rgb('rgba(0,0,0,.25)').a == 64

    def test_channels_clamp(self):
        assert from_rgb('rgb(300, 0, 0)') == Color(255, 0, 0)

    def test_alpha_above_one_clamps(self):
        assert from_rgb('rgba(0,0,0,2)').a == 255

    def test_rgb_prefix_accepts_alpha(self):
        assert from_rgb('rgb(1,2,3,0.5)') == Color(1, 2, 3, 128)

    def test_rgba_prefix_without_alpha(self):
        assert from_rgb('rgba(1,2,3)') == Color(1, 2, 3, 255)

    def test_huge_channel_saturates(self):
        assert from_rgb('rgb(' + '9' * 5000 + ',0,0)') == Color(255, 0, 0)

    def test_leading_zeros_not_saturated(self):
        assert from_rgb('rgb(' + '0' * 5000 + '7,0,0)') == Color(7, 0, 0)

    def test_huge_alpha_saturates(self):
        assert from_rgb('rgba(0,0,0,' + '9' * 400 + ')').a == 255

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(InvalidFormatError):
            from_rgb('rgb(١,2,3)')

    def test_non_ascii_whitespace_rejected(self):
        with pytest.raises(InvalidFormatError):
            from_rgb('rgb(1,\u00a02,3)')

    @pytest.mark.parametrize(
        'text',
        ['bad', 'rgb(1,2)', 'rgb(a,b,c)', 'rgb( 1,2,3)', 'rgb(1 ,2,3)', 'rgb(1,2,3', 'rgb(-1,2,3)', 'rgb(1.5,2,3)'],
    )
    def test_invalid(self, text):
        with pytest.raises(InvalidFormatError):
            from_rgb(text)


class TestFromString:
    def test_dispatches_hex(self):
        assert from_string('#f00') == Color(255, 0, 0)

    def test_dispatches_rgb(self):
        assert from_string('rgb(1, 2, 3)') == Color(1, 2, 3)
        assert from_string('rgba(1, 2, 3, 0)') == Color(1, 2, 3, 0)

    @pytest.mark.parametrize('text', ['hsl(0,0,0)', 'red', '', 'ffffff'])
    def test_unsupported(self, text):
        with pytest.raises(UnsupportedFormatError):
            from_string(text)

    def test_bad_hex_is_invalid_not_unsupported(self):
        with pytest.raises(InvalidFormatError):
            from_string('#zz')

    def test_bad_rgb_is_invalid(self):
        with pytest.raises(InvalidFormatError):
            from_string('rgbx(1,2,3)')


class TestErrors:
    def test_carries_input(self):
        with pytest.raises(InvalidFormatError) as excinfo:
            from_hex('#nope')
        assert excinfo.value.text == '#nope'
        assert excinfo.value.kind == 'invalid'
        assert '#nope' in str(excinfo.value)

    def test_unsupported_kind(self):
        with pytest.raises(UnsupportedFormatError) as excinfo:
            from_string('hsl(0,0,0)')
        assert excinfo.value.kind == 'unsupported'
        assert excinfo.value.text == 'hsl(0,0,0)'

    def test_hierarchy(self):
        assert issubclass(InvalidFormatError, ColorFormatError)
        assert issubclass(UnsupportedFormatError, ColorFormatError)
        assert issubclass(ColorFormatError, ValueError)
