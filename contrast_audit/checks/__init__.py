"""
WCAG Contrast Checks

Color decoding, luminance and contrast classification.
Pure functions; no I/O and no logging.
"""

from .contrast import (
    compliance_level,
    compliance_level_large,
    contrast_ratio,
    evaluate_pair,
    parse_hex,
    relative_luminance,
    round_ratio,
)

__all__ = [
    "compliance_level",
    "compliance_level_large",
    "contrast_ratio",
    "evaluate_pair",
    "parse_hex",
    "relative_luminance",
    "round_ratio",
]
