"""
Data Models for Contrast Audit

Type-safe Pydantic models for palettes, contrast results and reports.
Serialized field names follow the camelCase keys consumers already expect.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Level = Literal["AAA", "AA", "Fail"]

Palette = dict[str, str]


class ColorSets(BaseModel):
    """
    The two palettes a report is computed from.

    Attributes:
        light: Foreground palette (name -> hex)
        dark: Background palette (name -> hex)
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    light: Palette
    dark: Palette

    @property
    def foreground(self) -> Palette:
        return self.light

    @property
    def background(self) -> Palette:
        return self.dark


class ContrastResult(BaseModel):
    """
    Contrast of one foreground/background pair.

    `contrast_ratio` is rounded to 2 decimals for display. Levels are always
    derived from `exact_ratio`, which is kept out of serialized output.

    Attributes:
        foreground_hex: Foreground color as given in the palette
        foreground_name: Foreground palette key
        background_hex: Background color as given in the palette
        background_name: Background palette key
        contrast_ratio: WCAG ratio rounded to 2 decimal places
        level_small_text: AAA (>= 7), AA (>= 4.5) or Fail
        level_large_text: AAA (>= 4.5), AA (>= 3) or Fail
        requires_fix: True if either level is Fail
        exact_ratio: Unrounded WCAG ratio
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    foreground_hex: str
    foreground_name: str
    background_hex: str
    background_name: str
    contrast_ratio: float
    level_small_text: Level
    level_large_text: Level
    requires_fix: bool
    exact_ratio: float = Field(exclude=True)

    def __str__(self) -> str:
        """Human-readable string representation"""
        mark = "✗" if self.requires_fix else "✓"
        return (
            f"{mark} {self.foreground_name} on {self.background_name}: "
            f"{self.contrast_ratio:.2f}:1 ({self.level_small_text}/{self.level_large_text})"
        )


class InvalidEntry(BaseModel):
    """A palette color that was dropped from a computation"""

    model_config = ConfigDict(frozen=True)

    palette: Literal["foreground", "background"]
    name: str
    hex: str
    reason: str


class CategorizedReport(BaseModel):
    """
    Contrast results bucketed by small-text compliance level.

    Without a filter the Fail bucket is merged into Other, so consumers see
    AAA, AA and Other. With a filter only the matching bucket is populated.
    Each bucket keeps the engine order: foreground names ascending, then
    background names ascending. Renderers must not re-sort.

    Attributes:
        AAA: Pairs passing AAA for small text
        AA: Pairs passing AA (but not AAA) for small text
        Fail: Failing pairs, populated only when filtering on FAIL
        Other: Failing pairs of an unfiltered report
        search: Search term the report was computed with
        filter_level: Normalized filter (AAA, AA, FAIL) or None
        invalid: Colors skipped because their hex value was malformed
    """

    AAA: list[ContrastResult] = Field(default_factory=list)
    AA: list[ContrastResult] = Field(default_factory=list)
    Fail: list[ContrastResult] = Field(default_factory=list)
    Other: list[ContrastResult] = Field(default_factory=list)
    search: Optional[str] = None
    filter_level: Optional[str] = Field(default=None, serialization_alias="filter")
    invalid: list[InvalidEntry] = Field(default_factory=list)

    def buckets(self) -> dict[str, list[ContrastResult]]:
        """Buckets in output order"""
        return {"AAA": self.AAA, "AA": self.AA, "Fail": self.Fail, "Other": self.Other}

    def rows(self) -> list[ContrastResult]:
        """All results flattened in output order"""
        return [result for bucket in self.buckets().values() for result in bucket]

    @property
    def total(self) -> int:
        return len(self.AAA) + len(self.AA) + len(self.Fail) + len(self.Other)

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    @property
    def fix_count(self) -> int:
        return sum(1 for result in self.rows() if result.requires_fix)

    def summary(self) -> str:
        """Generate a one-line human-readable summary"""
        parts = [f"{name}: {len(bucket)}" for name, bucket in self.buckets().items() if bucket]
        counts = ", ".join(parts) if parts else "no pairs"
        summary = f"{self.total} pairs ({counts}), {self.fix_count} require fixes"
        if self.invalid:
            summary += f", {len(self.invalid)} invalid colors skipped"
        return summary


class Config(BaseModel):
    """
    Configuration for the contrast-audit tool.

    Loaded from .env file and environment variables.

    Attributes:
        colors_file: JSON file holding the light/dark palettes
        export_path: Where the CSV export is written
        log_level: Logging level for diagnostics
    """

    colors_file: str = "colors.json"
    export_path: str = "contrast_results.csv"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        """Accept log levels in any case"""
        return v.upper() if isinstance(v, str) else v
