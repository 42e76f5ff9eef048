"""
WCAG Contrast Ratio Checker

Hex decoding, sRGB relative luminance and WCAG 2.x contrast classification.
Small text needs 4.5:1 for AA and 7:1 for AAA; large text 3:1 and 4.5:1.
"""

import math
import re

from ..errors import InvalidColorFormat
from ..models import ContrastResult, Level

_HEX_PAIR = re.compile(r"[0-9A-Fa-f]{2}")

# WCAG thresholds
AAA_SMALL = 7.0
AA_SMALL = 4.5
AAA_LARGE = 4.5
AA_LARGE = 3.0


def parse_hex(hex_color: str) -> tuple[int, int, int]:
    """
    Decode a 6-digit hex color into RGB channel bytes.

    A single leading '#' is optional. Each channel must be exactly two
    hexadecimal digits; signs, whitespace and underscores are rejected.

    Args:
        hex_color: Color string such as "#1e90ff" or "1E90FF"

    Returns:
        (red, green, blue) tuple, each in 0-255

    Raises:
        InvalidColorFormat: On wrong length or non-hex characters

    Example:
        assert parse_hex("#ff8000") == (255, 128, 0)
    """
    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if len(digits) != 6:
        raise InvalidColorFormat(hex_color, f"expected 6 hex digits, got {len(digits)}")

    channels = []
    for start in (0, 2, 4):
        pair = digits[start:start + 2]
        if not _HEX_PAIR.fullmatch(pair):
            raise InvalidColorFormat(hex_color, f"{pair!r} is not a hex byte")
        channels.append(int(pair, 16))
    return channels[0], channels[1], channels[2]


def channel_to_linear(value: int) -> float:
    """Linearize one sRGB channel byte (gamma expansion)"""
    v = value / 255.0
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_color: str) -> float:
    """
    Calculate relative luminance of a hex color.

    Formula: L = 0.2126 * R + 0.7152 * G + 0.0722 * B
    where R, G, B are linearized channel values (ITU-R BT.709 weights).

    Returns:
        Luminance in 0-1 (0 = black, 1 = white)

    Raises:
        InvalidColorFormat: If the color cannot be decoded
    """
    r, g, b = parse_hex(hex_color)
    return 0.2126 * channel_to_linear(r) + 0.7152 * channel_to_linear(g) + 0.0722 * channel_to_linear(b)


def ratio_from_luminance(lum_a: float, lum_b: float) -> float:
    """WCAG ratio of two luminances, independent of argument order"""
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(color1: str, color2: str) -> float:
    """
    Calculate WCAG contrast ratio between two colors.

    Formula: (L1 + 0.05) / (L2 + 0.05)
    where L1 is the lighter and L2 the darker relative luminance.

    The value is not rounded; use round_ratio() for display.

    Args:
        color1: First color (hex format: #RRGGBB)
        color2: Second color (hex format: #RRGGBB)

    Returns:
        Contrast ratio (1-21, where 21 is maximum contrast)

    Example:
        ratio = contrast_ratio("#000000", "#FFFFFF")
        assert round_ratio(ratio) == 21.0  # Black on white = maximum contrast
    """
    return ratio_from_luminance(relative_luminance(color1), relative_luminance(color2))


def round_ratio(ratio: float) -> float:
    """Round a ratio half-up to 2 decimal places"""
    return math.floor(ratio * 100 + 0.5) / 100


def compliance_level(ratio: float) -> Level:
    """WCAG level for small (normal) text"""
    if ratio >= AAA_SMALL:
        return "AAA"
    elif ratio >= AA_SMALL:
        return "AA"
    else:
        return "Fail"


def compliance_level_large(ratio: float) -> Level:
    """WCAG level for large text (18pt, or 14pt bold)"""
    if ratio >= AAA_LARGE:
        return "AAA"
    elif ratio >= AA_LARGE:
        return "AA"
    else:
        return "Fail"


def build_result(
    foreground_name: str,
    foreground_hex: str,
    background_name: str,
    background_hex: str,
    ratio: float
) -> ContrastResult:
    """Classify an unrounded ratio and wrap it with the pair's metadata"""
    level_small = compliance_level(ratio)
    level_large = compliance_level_large(ratio)
    return ContrastResult(
        foreground_hex=foreground_hex,
        foreground_name=foreground_name,
        background_hex=background_hex,
        background_name=background_name,
        contrast_ratio=round_ratio(ratio),
        level_small_text=level_small,
        level_large_text=level_large,
        requires_fix=level_small == "Fail" or level_large == "Fail",
        exact_ratio=ratio,
    )


def evaluate_pair(
    foreground_name: str,
    foreground_hex: str,
    background_name: str,
    background_hex: str
) -> ContrastResult:
    """
    Compute the full contrast result for one named color pair.

    Raises:
        InvalidColorFormat: If either color cannot be decoded

    Example:
        result = evaluate_pair("black", "#000000", "white", "#FFFFFF")
        assert result.level_small_text == "AAA"
        assert not result.requires_fix
    """
    ratio = contrast_ratio(foreground_hex, background_hex)
    return build_result(foreground_name, foreground_hex, background_name, background_hex, ratio)
