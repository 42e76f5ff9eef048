"""
Palette Source

Loads the light (foreground) and dark (background) palettes from a JSON
colors file. The file is re-read on every call.

Expected shape:
    {"light": {"name": "#rrggbb", ...}, "dark": {"name": "#rrggbb", ...}}
"""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .errors import PaletteLoadError
from .models import ColorSets

logger = logging.getLogger(__name__)

DEFAULT_COLOR_SETS = ColorSets(
    light={
        "white": "#FFFFFF",
        "snow": "#F8FAFC",
        "silver": "#CBD5E1",
        "sky": "#7DD3FC",
        "amber": "#FCD34D",
        "rose": "#FDA4AF",
    },
    dark={
        "black": "#000000",
        "charcoal": "#1E293B",
        "slate": "#475569",
        "navy": "#1E3A8A",
        "forest": "#14532D",
        "maroon": "#7F1D1D",
    },
)


def load_palettes(path: Union[str, Path]) -> ColorSets:
    """
    Load both palettes from a colors file.

    Args:
        path: Path to the JSON colors file

    Returns:
        ColorSets with the light and dark palettes

    Raises:
        PaletteLoadError: If the file is missing, unreadable, not UTF-8 JSON, or
            lacks a string-valued "light"/"dark" mapping

    Example:
        colors = load_palettes("colors.json")
        report = compute_report(colors.foreground, colors.background)
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise PaletteLoadError(f"Failed to read colors file {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PaletteLoadError(f"Colors file {path} is not valid UTF-8 JSON: {e}") from e

    try:
        color_sets = ColorSets.model_validate(data)
    except ValidationError as e:
        raise PaletteLoadError(f"Colors file {path} has an unexpected structure: {e}") from e

    logger.debug(
        "Loaded %d light and %d dark colors from %s",
        len(color_sets.light), len(color_sets.dark), path,
    )
    return color_sets


def write_palettes(color_sets: ColorSets, path: Union[str, Path], overwrite: bool = False) -> Path:
    """
    Write palettes to a colors file.

    Raises:
        FileExistsError: If the file exists and overwrite is False
    """
    path = Path(path)
    if path.exists() and not overwrite:
        raise FileExistsError(f"{path} already exists")

    with open(path, "w", encoding="utf-8") as f:
        json.dump(color_sets.model_dump(), f, indent=2)
        f.write("\n")

    logger.info("Wrote palettes to %s", path)
    return path
