"""
Contrast Report Orchestrator

Cross-products a foreground and a background palette, evaluates every pair
and buckets the results by small-text WCAG level.
"""

import logging
from pathlib import Path
from typing import Callable, Literal, Optional, Union

from .checks.contrast import build_result, ratio_from_luminance, relative_luminance
from .errors import InvalidColorFormat, InvalidFilterLevel
from .models import CategorizedReport, ContrastResult, InvalidEntry, Palette
from .palettes import load_palettes

logger = logging.getLogger(__name__)

FILTER_LEVELS = ("AAA", "AA", "FAIL")

# Filter value -> (small-text level kept, bucket it lands in)
_FILTER_BUCKETS = {
    "AAA": ("AAA", "AAA"),
    "AA": ("AA", "AA"),
    "FAIL": ("Fail", "Fail"),
}


def normalize_filter(filter_level: Optional[str]) -> Optional[str]:
    """
    Normalize a user-supplied filter to AAA, AA, FAIL or None.

    Raises:
        InvalidFilterLevel: If the filter is not one of the known levels
    """
    if filter_level is None:
        return None
    value = filter_level.strip().upper()
    if not value:
        return None
    if value not in FILTER_LEVELS:
        raise InvalidFilterLevel(
            f"Unknown filter level: {filter_level}. "
            f"Choose from: {', '.join(FILTER_LEVELS)}"
        )
    return value


def _search_predicate(search: Optional[str]) -> Callable[[str, str], bool]:
    term = (search or "").lower()
    if not term:
        return lambda fg_name, bg_name: True
    return lambda fg_name, bg_name: term in fg_name.lower() or term in bg_name.lower()


class _LuminanceCache:
    """Per-call luminance lookup that records each malformed color once"""

    def __init__(self, role: Literal["foreground", "background"], palette: Palette):
        self.role = role
        self.palette = palette
        self.values: dict[str, Optional[float]] = {}
        self.invalid: list[InvalidEntry] = []

    def get(self, name: str) -> Optional[float]:
        if name not in self.values:
            hex_color = self.palette[name]
            try:
                self.values[name] = relative_luminance(hex_color)
            except InvalidColorFormat as e:
                logger.warning(
                    "Skipping %s color %r (%s): %s", self.role, name, hex_color, e.reason
                )
                self.invalid.append(
                    InvalidEntry(palette=self.role, name=name, hex=hex_color, reason=e.reason)
                )
                self.values[name] = None
        return self.values[name]


def enumerate_pairs(
    foreground: Palette,
    background: Palette,
    search: Optional[str] = None,
    invalid: Optional[list[InvalidEntry]] = None
) -> list[ContrastResult]:
    """
    Evaluate every foreground/background pair in deterministic order.

    Names are sorted ascending; foreground is the outer loop. Pairs whose
    names both miss the search term are skipped before any computation.
    Pairs involving a malformed color are dropped and the color is logged
    and appended to `invalid` once.

    Args:
        foreground: Foreground palette (name -> hex)
        background: Background palette (name -> hex)
        search: Optional case-insensitive substring matched against either name
        invalid: Optional list collecting the malformed colors

    Returns:
        Contrast results in cross-product order
    """
    matches = _search_predicate(search)
    fg_lum = _LuminanceCache("foreground", foreground)
    bg_lum = _LuminanceCache("background", background)

    results = []
    for fg_name in sorted(foreground):
        for bg_name in sorted(background):
            if not matches(fg_name, bg_name):
                continue

            fg = fg_lum.get(fg_name)
            if fg is None:
                continue
            bg = bg_lum.get(bg_name)
            if bg is None:
                continue

            ratio = ratio_from_luminance(fg, bg)
            results.append(
                build_result(fg_name, foreground[fg_name], bg_name, background[bg_name], ratio)
            )

    if invalid is not None:
        invalid.extend(fg_lum.invalid)
        invalid.extend(bg_lum.invalid)
    return results


def categorize(results: list[ContrastResult], filter_level: Optional[str] = None) -> CategorizedReport:
    """
    Bucket results by small-text level.

    Without a filter, failing pairs go to Other (the Fail bucket stays empty).
    With a filter, only pairs at that level are kept, in the matching bucket.
    Input order is preserved within every bucket.

    Raises:
        InvalidFilterLevel: If the filter is not AAA, AA or FAIL
    """
    level = normalize_filter(filter_level)
    report = CategorizedReport(filter_level=level)
    buckets = report.buckets()

    if level is None:
        unfiltered = {"AAA": "AAA", "AA": "AA", "Fail": "Other"}
        for result in results:
            buckets[unfiltered[result.level_small_text]].append(result)
        return report

    wanted, bucket = _FILTER_BUCKETS[level]
    buckets[bucket].extend(r for r in results if r.level_small_text == wanted)
    return report


def compute_report(
    foreground: Palette,
    background: Palette,
    search: Optional[str] = None,
    filter_level: Optional[str] = None
) -> CategorizedReport:
    """
    Compute a categorized contrast report for two palettes.

    Every call recomputes from the given palettes; nothing is cached between
    calls, and identical inputs produce identical ordered output.

    Args:
        foreground: Foreground ("light") palette
        background: Background ("dark") palette
        search: Optional case-insensitive name substring
        filter_level: Optional AAA, AA or FAIL (case-insensitive)

    Returns:
        CategorizedReport with AAA, AA, Fail and Other buckets

    Raises:
        InvalidFilterLevel: If filter_level is not a known level

    Example:
        report = compute_report({"black": "#000000"}, {"white": "#FFFFFF"})
        assert report.AAA[0].contrast_ratio == 21.0
    """
    # Validate the filter before doing any work
    normalize_filter(filter_level)

    invalid: list[InvalidEntry] = []
    results = enumerate_pairs(foreground, background, search=search, invalid=invalid)
    report = categorize(results, filter_level)

    logger.debug(
        "Computed %d pairs from %d x %d colors (search=%r, filter=%r)",
        report.total, len(foreground), len(background), search, report.filter_level,
    )
    return report.model_copy(update={"search": search or None, "invalid": invalid})


def audit_file(
    path: Union[str, Path],
    search: Optional[str] = None,
    filter_level: Optional[str] = None
) -> CategorizedReport:
    """
    Load palettes from a colors file and compute the report.

    Raises:
        PaletteLoadError: If the file cannot be read or parsed
        InvalidFilterLevel: If filter_level is not a known level
    """
    color_sets = load_palettes(path)
    return compute_report(color_sets.foreground, color_sets.background, search, filter_level)
