"""
Error Types

Exceptions raised by the contrast engine and the palette source.
Per-color errors are recovered during enumeration; palette errors are fatal.
"""


class ContrastAuditError(Exception):
    """Base class for all contrast-audit errors"""


class InvalidColorFormat(ContrastAuditError, ValueError):
    """
    A hex color string could not be decoded.

    Attributes:
        value: The offending input string
        reason: Short explanation (wrong length, non-hex digits)
    """

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"invalid hex color {value!r}: {reason}")


class PaletteLoadError(ContrastAuditError):
    """The color source could not be read or does not have the expected shape"""


class InvalidFilterLevel(ContrastAuditError, ValueError):
    """A report filter is not one of AAA, AA or FAIL"""
