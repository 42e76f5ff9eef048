"""Tests for contrast_audit.checks.contrast — hex parsing, luminance, ratios and levels."""

import pytest
from contrast_audit.checks.contrast import (
    build_result,
    channel_to_linear,
    compliance_level,
    compliance_level_large,
    contrast_ratio,
    evaluate_pair,
    parse_hex,
    relative_luminance,
    round_ratio,
)
from contrast_audit.errors import InvalidColorFormat

SAMPLE_COLORS = ['#000000', '#FFFFFF', '#777777', '#888888', '#1e90ff', 'ff8000', '#0A0B0C', '#7f7f7f']

LEVEL_RANK = {'AAA': 0, 'AA': 1, 'Fail': 2}


class TestParseHex:
    def test_black(self):
        assert parse_hex('#000000') == (0, 0, 0)

    def test_white_uppercase(self):
        assert parse_hex('#FFFFFF') == (255, 255, 255)

    def test_no_hash(self):
        assert parse_hex('ff8000') == (255, 128, 0)

    def test_mixed_case(self):
        assert parse_hex('#1e90FF') == (30, 144, 255)

    def test_short_hex_rejected(self):
        with pytest.raises(InvalidColorFormat):
            parse_hex('#fff')

    def test_five_digits_rejected(self):
        with pytest.raises(InvalidColorFormat) as excinfo:
            parse_hex('#12345')
        assert excinfo.value.value == '#12345'

    def test_eight_digits_rejected(self):
        with pytest.raises(InvalidColorFormat):
            parse_hex('#ffffffff')

    def test_non_hex_rejected(self):
        with pytest.raises(InvalidColorFormat):
            parse_hex('#gg0000')

    def test_sign_and_whitespace_rejected(self):
        for bad in ('#+f0000', '# f0000', '#1_2345', '#-10000'):
            with pytest.raises(InvalidColorFormat):
                parse_hex(bad)

    def test_double_hash_rejected(self):
        with pytest.raises(InvalidColorFormat):
            parse_hex('##000000')

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_hex('nothex')


class TestLuminance:
    def test_black_is_zero(self):
        assert relative_luminance('#000000') == 0.0

    def test_white_is_one(self):
        assert relative_luminance('#FFFFFF') == pytest.approx(1.0)

    def test_linear_segment(self):
        # 10/255 is below the 0.03928 knee
        assert channel_to_linear(10) == pytest.approx(10 / 255 / 12.92)

    def test_gamma_segment(self):
        assert channel_to_linear(128) == pytest.approx(((128 / 255 + 0.055) / 1.055) ** 2.4)

    def test_green_dominates(self):
        assert relative_luminance('#00FF00') > relative_luminance('#FF0000') > relative_luminance('#0000FF')

    def test_range(self):
        for color in SAMPLE_COLORS:
            assert 0.0 <= relative_luminance(color) <= 1.0


class TestContrastRatio:
    def test_black_white_is_maximum(self):
        assert contrast_ratio('#000000', '#FFFFFF') == pytest.approx(21.0, abs=1e-9)

    def test_identical_is_one(self):
        for color in SAMPLE_COLORS:
            assert contrast_ratio(color, color) == 1.0

    def test_symmetry(self):
        for a in SAMPLE_COLORS:
            for b in SAMPLE_COLORS:
                assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_known_aa_gray(self):
        # #767676 is the lightest gray that passes AA on white
        assert round_ratio(contrast_ratio('#767676', '#FFFFFF')) == 4.54

    def test_invalid_color_raises(self):
        with pytest.raises(InvalidColorFormat):
            contrast_ratio('#000000', '#12345')


class TestRoundRatio:
    def test_two_decimals(self):
        assert round_ratio(4.5422) == 4.54

    def test_rounds_up(self):
        assert round_ratio(4.499) == 4.5

    def test_whole(self):
        assert round_ratio(21.0) == 21.0


class TestComplianceLevels:
    def test_small_text_thresholds(self):
        assert compliance_level(7.0) == 'AAA'
        assert compliance_level(6.99) == 'AA'
        assert compliance_level(4.5) == 'AA'
        assert compliance_level(4.49) == 'Fail'
        assert compliance_level(1.0) == 'Fail'

    def test_large_text_thresholds(self):
        assert compliance_level_large(4.5) == 'AAA'
        assert compliance_level_large(4.49) == 'AA'
        assert compliance_level_large(3.0) == 'AA'
        assert compliance_level_large(2.99) == 'Fail'

    def test_monotonic(self):
        ratios = [21.0, 12.0, 7.0, 6.5, 4.5, 4.0, 3.0, 2.5, 1.0]
        for level_fn in (compliance_level, compliance_level_large):
            ranks = [LEVEL_RANK[level_fn(r)] for r in ratios]
            assert ranks == sorted(ranks)

    def test_large_never_stricter_than_small(self):
        for r in (1.0, 2.9, 3.0, 4.4, 4.5, 6.9, 7.0, 21.0):
            assert LEVEL_RANK[compliance_level_large(r)] <= LEVEL_RANK[compliance_level(r)]


class TestBuildResult:
    def test_classifies_unrounded_ratio(self):
        # Displays as 7.00 but is below the AAA threshold
        result = build_result('fg', '#000000', 'bg', '#FFFFFF', 6.996)
        assert result.contrast_ratio == 7.0
        assert result.exact_ratio == 6.996
        assert result.level_small_text == 'AA'
        assert result.level_large_text == 'AAA'
        assert result.requires_fix is False

    def test_requires_fix_when_only_small_fails(self):
        result = build_result('fg', '#777777', 'bg', '#FFFFFF', 4.0)
        assert result.level_small_text == 'Fail'
        assert result.level_large_text == 'AA'
        assert result.requires_fix is True

    def test_requires_fix_iff_a_level_fails(self):
        for ratio in (1.0, 2.5, 3.0, 4.0, 4.5, 6.0, 7.0, 21.0):
            result = build_result('fg', '#000000', 'bg', '#FFFFFF', ratio)
            expected = result.level_small_text == 'Fail' or result.level_large_text == 'Fail'
            assert result.requires_fix is expected


class TestEvaluatePair:
    def test_black_on_white(self):
        result = evaluate_pair('black', '#000000', 'white', '#FFFFFF')
        assert result.contrast_ratio == 21.0
        assert result.level_small_text == 'AAA'
        assert result.level_large_text == 'AAA'
        assert result.requires_fix is False

    def test_keeps_metadata_order(self):
        result = evaluate_pair('white', '#FFFFFF', 'black', '#000000')
        assert result.foreground_name == 'white'
        assert result.background_hex == '#000000'
        assert result.contrast_ratio == 21.0

    def test_gray_on_white_fails_small_text(self):
        result = evaluate_pair('gray', '#777777', 'white', '#FFFFFF')
        assert result.contrast_ratio == 4.48
        assert result.level_small_text == 'Fail'
        assert result.level_large_text == 'AA'
        assert result.requires_fix is True
