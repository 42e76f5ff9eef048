"""
Contrast Audit - WCAG Palette Contrast Checker

Computes WCAG 2.x contrast ratios between every pair of a foreground and a
background palette, classifies each pair for small and large text, and
renders categorized reports.

Report outputs:
- Rich terminal tables
- JSON
- CSV
"""

from .auditor import audit_file, compute_report
from .errors import ContrastAuditError, InvalidColorFormat, InvalidFilterLevel, PaletteLoadError
from .models import CategorizedReport, ColorSets, ContrastResult
from .palettes import load_palettes

__version__ = "0.1.0"
__all__ = [
    "CategorizedReport",
    "ColorSets",
    "ContrastAuditError",
    "ContrastResult",
    "InvalidColorFormat",
    "InvalidFilterLevel",
    "PaletteLoadError",
    "audit_file",
    "compute_report",
    "load_palettes",
]
